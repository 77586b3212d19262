"""Workout count and volume per ISO week.

The chart range is the last 8 ISO weeks anchored on the most recent dated
workout, not on today: a lifter returning from a break still sees their
last block of training. Weeks without workouts report 0.
"""

import datetime as dt
from collections.abc import Iterable
from dataclasses import dataclass

from liftlog.metrics.windows import iter_dated, parse_workout_date, windowed_totals
from liftlog.models.workout import Workout

DEFAULT_WEEK_COUNT = 8

IsoWeekKey = tuple[int, int]


@dataclass(frozen=True)
class IsoWeek:
    year: int
    week: int

    @property
    def key(self) -> IsoWeekKey:
        return self.year, self.week

    @property
    def label(self) -> str:
        return f"W{self.week}"


@dataclass(frozen=True)
class WeeklyPoint:
    label: str
    value: float


def iso_week_of(day: dt.date) -> IsoWeek:
    iso = day.isocalendar()
    return IsoWeek(year=iso.year, week=iso.week)


def workout_iso_week(workout: Workout) -> IsoWeek | None:
    day = parse_workout_date(workout.date)
    return iso_week_of(day) if day is not None else None


def last_n_weeks(workouts: Iterable[Workout], n: int = DEFAULT_WEEK_COUNT) -> list[IsoWeek]:
    """The n ISO weeks ending with the latest workout's week, oldest first.

    Returns:
        Empty list when no workout has a parseable date
    """
    latest = max((day for day, _ in iter_dated(workouts)), default=None)
    if latest is None:
        return []
    return [iso_week_of(latest - dt.timedelta(weeks=offset)) for offset in range(n - 1, -1, -1)]


def _per_week(totals: dict[IsoWeekKey, float], weeks: Iterable[IsoWeek]) -> list[WeeklyPoint]:
    return [WeeklyPoint(label=week.label, value=totals.get(week.key, 0.0)) for week in weeks]


def workouts_per_week(workouts: Iterable[Workout], weeks: Iterable[IsoWeek]) -> list[WeeklyPoint]:
    """Number of workouts in each of the given ISO weeks."""
    totals = windowed_totals(workouts, None, lambda w: [(workout_iso_week(w).key, 1.0)])
    return _per_week(totals, weeks)


def volume_per_week(workouts: Iterable[Workout], weeks: Iterable[IsoWeek]) -> list[WeeklyPoint]:
    """Total training volume (completed sets) in each of the given ISO weeks."""
    totals = windowed_totals(workouts, None, lambda w: [(workout_iso_week(w).key, w.total_volume())])
    return _per_week(totals, weeks)
