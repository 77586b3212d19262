"""Deload recommendation from a rising-volume streak.

Six non-overlapping 7-day buckets end today, oldest first. Bucket k
(k = 0 ... 5) covers

    [today - 7*(5-k) - 6, today - 7*(5-k)]

so the newest bucket is today-6 ... today. Each bucket holds the raw count
of completed sets (not muscle-weighted) across its workouts.

Walking consecutive pairs, the streak grows when next > prev > 0 and resets
to 0 otherwise. Four or more consecutive increases recommend a deload.
"""

import datetime as dt
from collections.abc import Iterable
from dataclasses import dataclass

from liftlog.metrics.windows import DateWindow, windowed_sum
from liftlog.models.workout import Workout

DELOAD_WEEKS = 6
DAYS_PER_WEEK = 7
DELOAD_STREAK_THRESHOLD = 4


@dataclass(frozen=True)
class WeeklySetCount:
    label: str
    start: dt.date
    end: dt.date
    sets: float


@dataclass(frozen=True)
class DeloadAdvice:
    weeks: tuple[WeeklySetCount, ...]
    increasing_streak: int
    should_deload: bool


def weekly_windows(today: dt.date, weeks: int = DELOAD_WEEKS) -> list[DateWindow]:
    """Consecutive 7-day windows ending today, oldest first."""
    windows: list[DateWindow] = []
    for offset in range(weeks - 1, -1, -1):
        end = today - dt.timedelta(weeks=offset)
        windows.append(DateWindow(start=end - dt.timedelta(days=DAYS_PER_WEEK - 1), end=end))
    return windows


def _completed_sets(workout: Workout) -> float:
    return float(sum(e.completed_sets() for e in workout.exercises))


def increasing_streak(volumes: list[float]) -> int:
    """Length of the run of strict increases ending at the last bucket.

    A pair only extends the run when the earlier bucket is non-zero.
    """
    streak = 0
    for prev, nxt in zip(volumes, volumes[1:]):
        if nxt > prev and prev > 0.0:
            streak += 1
        else:
            streak = 0
    return streak


def advise_deload(workouts: Iterable[Workout], today: dt.date) -> DeloadAdvice | None:
    """Six-week set-count streak check.

    Returns:
        DeloadAdvice, or None when the six weeks hold no completed sets
    """
    history = list(workouts)
    weeks = tuple(
        WeeklySetCount(
            label=f"W{index + 1}",
            start=window.start,
            end=window.end,
            sets=windowed_sum(history, window, _completed_sets),
        )
        for index, window in enumerate(weekly_windows(today))
    )

    volumes = [week.sets for week in weeks]
    if sum(volumes) == 0.0:
        return None

    streak = increasing_streak(volumes)
    return DeloadAdvice(
        weeks=weeks,
        increasing_streak=streak,
        should_deload=streak >= DELOAD_STREAK_THRESHOLD,
    )
