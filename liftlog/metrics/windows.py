"""Calendar-date windowing shared by every analyzer.

All date-bounded analytics go through this module so that date parsing and
window inclusion behave identically everywhere:
- Windows are inclusive on both ends
- Only calendar dates are compared (no time of day)
- A workout whose date does not parse is skipped, never fatal
"""

from __future__ import annotations

import datetime as dt
from collections import defaultdict
from collections.abc import Callable, Hashable, Iterable, Iterator
from dataclasses import dataclass
from typing import TypeVar

from loguru import logger

from liftlog.models.workout import Workout

K = TypeVar("K", bound=Hashable)

DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class DateWindow:
    """Inclusive calendar-date range [start, end]."""

    start: dt.date
    end: dt.date

    @classmethod
    def trailing(cls, today: dt.date, days: int) -> DateWindow:
        """Window of `days` calendar days ending on (and including) today.

        trailing(today, 7) covers today-6 ... today.
        """
        return cls(start=today - dt.timedelta(days=days - 1), end=today)

    def contains(self, day: dt.date) -> bool:
        return self.start <= day <= self.end


def parse_workout_date(value: str) -> dt.date | None:
    """Parse an ISO YYYY-MM-DD workout date, returning None when malformed."""
    try:
        return dt.datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        return None


def iter_dated(
    workouts: Iterable[Workout],
    window: DateWindow | None = None,
) -> Iterator[tuple[dt.date, Workout]]:
    """Yield (date, workout) pairs in input order.

    Args:
        workouts: Workout history
        window: Optional inclusive window; None means all dates

    Yields:
        Parsed date and workout for every record inside the window
    """
    for workout in workouts:
        day = parse_workout_date(workout.date)
        if day is None:
            logger.debug(f"Skipping workout {workout.id}: unparseable date {workout.date!r}")
            continue
        if window is None or window.contains(day):
            yield day, workout


def windowed_sum(
    workouts: Iterable[Workout],
    window: DateWindow,
    value: Callable[[Workout], float],
    predicate: Callable[[Workout], bool] | None = None,
) -> float:
    """Sum a per-workout value over the workouts inside a window.

    Args:
        workouts: Workout history
        window: Inclusive date window
        value: Extracts the number to sum from one workout
        predicate: Optional extra filter applied after the date filter

    Returns:
        Sum of extracted values (0.0 for an empty window)
    """
    total = 0.0
    for _, workout in iter_dated(workouts, window):
        if predicate is None or predicate(workout):
            total += value(workout)
    return total


def windowed_totals(
    workouts: Iterable[Workout],
    window: DateWindow | None,
    extract: Callable[[Workout], Iterable[tuple[K, float]]],
    predicate: Callable[[Workout], bool] | None = None,
) -> dict[K, float]:
    """Accumulate keyed per-workout amounts into one running total.

    Amounts are added in the order `extract` yields them, so a window's total
    is bit-for-bit the same as summing every contribution sequentially.
    Keys never yielded are absent from the result (not zero).

    Args:
        workouts: Workout history
        window: Inclusive date window, or None for all dates
        extract: Yields (key, amount) pairs for one workout
        predicate: Optional extra filter applied after the date filter

    Returns:
        Running totals keyed in first-seen order
    """
    totals: dict[K, float] = defaultdict(float)
    for _, workout in iter_dated(workouts, window):
        if predicate is not None and not predicate(workout):
            continue
        for key, amount in extract(workout):
            totals[key] += amount
    return dict(totals)
