"""History-wide totals and the quick muscle-balance summary."""

import datetime as dt
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from liftlog.metrics.effective_sets import aggregate_window
from liftlog.metrics.windows import DateWindow
from liftlog.models.exercise import ExerciseCatalog
from liftlog.models.workout import Workout
from liftlog.muscles.catalog import TRACKED_MUSCLES, Muscle, VolumeThreshold, threshold_for

BALANCE_WINDOW_DAYS = 7


@dataclass(frozen=True)
class HistorySummary:
    total_workouts: int
    total_volume: float
    avg_duration_mins: int


@dataclass(frozen=True)
class BalanceSummary:
    undertrained: int
    overtrained: int


def summarize_history(workouts: Iterable[Workout]) -> HistorySummary:
    """Workout count, total volume and average session length (whole minutes)."""
    history = list(workouts)
    total = len(history)
    total_duration = sum(w.duration_mins for w in history)
    return HistorySummary(
        total_workouts=total,
        total_volume=sum(w.total_volume() for w in history),
        avg_duration_mins=total_duration // total if total else 0,
    )


def muscle_balance_summary(
    workouts: Iterable[Workout],
    exercises: ExerciseCatalog,
    today: dt.date,
    thresholds: Mapping[Muscle, VolumeThreshold],
) -> BalanceSummary:
    """Count under- and over-trained muscles over the last 7 days.

    A muscle only counts as undertrained when it has a non-zero MEV and was
    trained at all this week; untouched muscles are not nagged about.
    """
    sets_by_muscle = aggregate_window(workouts, exercises, DateWindow.trailing(today, BALANCE_WINDOW_DAYS))

    undertrained = 0
    overtrained = 0
    for muscle in TRACKED_MUSCLES:
        sets = sets_by_muscle.get(muscle, 0.0)
        mev, mrv = threshold_for(muscle, thresholds)
        if mev > 0.0 and 0.0 < sets < mev:
            undertrained += 1
        elif sets > mrv:
            overtrained += 1
    return BalanceSummary(undertrained=undertrained, overtrained=overtrained)
