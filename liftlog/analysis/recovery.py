"""Recovery status per muscle.

All-time: finds the most recent session that credited each muscle and
classifies the elapsed time since then. Muscles never trained are omitted.

elapsed_hours = days_since * 24
- < 24h      -> red     ("Xh ago")
- 24h - <48h -> yellow  ("Xd ago")
- >= 48h     -> green   ("Xd ago", days = floor(hours / 24))
"""

import datetime as dt
import math
from collections.abc import Iterable
from dataclasses import dataclass

from loguru import logger

from liftlog.analysis.signals import Signal
from liftlog.metrics.effective_sets import session_muscle_sets
from liftlog.metrics.windows import iter_dated
from liftlog.models.exercise import ExerciseCatalog
from liftlog.models.workout import Workout
from liftlog.muscles.catalog import TRACKED_MUSCLES, Muscle

HOURS_PER_DAY = 24.0
FRESH_HOURS = 24.0
RECOVERED_HOURS = 48.0


@dataclass(frozen=True)
class MuscleRecovery:
    muscle: Muscle
    last_trained: dt.date
    elapsed_hours: float
    signal: Signal

    @property
    def label(self) -> str:
        if self.elapsed_hours < FRESH_HOURS:
            return f"{self.elapsed_hours:.0f}h ago"
        return f"{math.floor(self.elapsed_hours / HOURS_PER_DAY)}d ago"


def classify_recovery(elapsed_hours: float) -> Signal:
    if elapsed_hours < FRESH_HOURS:
        return Signal.RED
    if elapsed_hours < RECOVERED_HOURS:
        return Signal.YELLOW
    return Signal.GREEN


def last_trained_dates(
    workouts: Iterable[Workout],
    exercises: ExerciseCatalog,
    today: dt.date,
) -> dict[Muscle, dt.date]:
    """Most recent date each muscle received effective sets, up to today."""
    last_trained: dict[Muscle, dt.date] = {}
    for day, workout in iter_dated(workouts):
        if day > today:
            logger.debug(f"Ignoring future-dated workout {workout.id} ({workout.date}) for recovery")
            continue
        for muscle, sets in session_muscle_sets(workout, exercises).items():
            if sets <= 0.0:
                continue
            previous = last_trained.get(muscle)
            if previous is None or day > previous:
                last_trained[muscle] = day
    return last_trained


def track_recovery(
    workouts: Iterable[Workout],
    exercises: ExerciseCatalog,
    today: dt.date,
) -> list[MuscleRecovery]:
    """Recovery entries for every trained muscle, most recently trained first."""
    last_trained = last_trained_dates(workouts, exercises, today)

    entries: list[MuscleRecovery] = []
    for muscle in TRACKED_MUSCLES:
        day = last_trained.get(muscle)
        if day is None:
            continue
        elapsed_hours = (today - day).days * HOURS_PER_DAY
        entries.append(
            MuscleRecovery(
                muscle=muscle,
                last_trained=day,
                elapsed_hours=elapsed_hours,
                signal=classify_recovery(elapsed_hours),
            )
        )

    entries.sort(key=lambda entry: entry.elapsed_hours)
    return entries
