"""Rep-range distribution over the last 28 days.

Every completed set with reps > 0 in today-27 ... today is bucketed:
- 1-5 reps   -> strength
- 6-12 reps  -> hypertrophy
- 13+ reps   -> endurance

Percentages are truncated to integers and never renormalized, so they may
sum to less than 100.
"""

import datetime as dt
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum

from liftlog.metrics.windows import DateWindow, windowed_totals
from liftlog.models.workout import Workout

REP_RANGE_WINDOW_DAYS = 28
STRENGTH_MAX_REPS = 5
HYPERTROPHY_MAX_REPS = 12


class RepRange(StrEnum):
    STRENGTH = "strength"
    HYPERTROPHY = "hypertrophy"
    ENDURANCE = "endurance"


@dataclass(frozen=True)
class RepRangeProfile:
    counts: dict[RepRange, int]
    percentages: dict[RepRange, int]
    total_sets: int
    single_range: bool


def rep_range_for(reps: int) -> RepRange:
    if reps <= STRENGTH_MAX_REPS:
        return RepRange.STRENGTH
    if reps <= HYPERTROPHY_MAX_REPS:
        return RepRange.HYPERTROPHY
    return RepRange.ENDURANCE


def _bucketed_sets(workout: Workout) -> Iterator[tuple[RepRange, float]]:
    for workout_exercise in workout.exercises:
        for s in workout_exercise.sets:
            if s.completed and s.reps > 0:
                yield rep_range_for(s.reps), 1.0


def profile_rep_ranges(workouts: Iterable[Workout], today: dt.date) -> RepRangeProfile | None:
    """Histogram of recent sets by rep range.

    Returns:
        RepRangeProfile, or None when no qualifying set was logged
    """
    totals = windowed_totals(workouts, DateWindow.trailing(today, REP_RANGE_WINDOW_DAYS), _bucketed_sets)
    counts = {bucket: int(totals.get(bucket, 0.0)) for bucket in RepRange}
    total = sum(counts.values())
    if total == 0:
        return None

    percentages = {bucket: int(count / total * 100.0) for bucket, count in counts.items()}
    return RepRangeProfile(
        counts=counts,
        percentages=percentages,
        total_sets=total,
        single_range=any(pct == 100 for pct in percentages.values()),
    )
