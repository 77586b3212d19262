"""Training frequency per muscle.

Counts the distinct calendar days in the last 14 days (today-13 ... today)
on which a muscle received any effective sets. A session counts once per
muscle however many of its exercises hit that muscle.

frequency = distinct_days / 2.0   (14 days = 2 weeks)
- >= 2.0x/week       -> green
- 1.0x to <2.0x/week -> yellow
- < 1.0x/week        -> red
"""

import datetime as dt
from collections.abc import Iterable
from dataclasses import dataclass

from liftlog.analysis.signals import Signal
from liftlog.metrics.effective_sets import session_muscle_sets
from liftlog.metrics.windows import DateWindow, iter_dated
from liftlog.models.exercise import ExerciseCatalog
from liftlog.models.workout import Workout
from liftlog.muscles.catalog import TRACKED_MUSCLES, Muscle

FREQUENCY_WINDOW_DAYS = 14
WEEKS_IN_WINDOW = 2.0


@dataclass(frozen=True)
class MuscleFrequency:
    muscle: Muscle
    days_trained: int
    times_per_week: float
    signal: Signal


def classify_frequency(times_per_week: float) -> Signal:
    if times_per_week >= 2.0:
        return Signal.GREEN
    if times_per_week >= 1.0:
        return Signal.YELLOW
    return Signal.RED


def analyze_frequency(
    workouts: Iterable[Workout],
    exercises: ExerciseCatalog,
    today: dt.date,
) -> list[MuscleFrequency]:
    """Times-per-week training frequency for every tracked muscle, in catalog order."""
    trained_days: dict[Muscle, set[dt.date]] = {}
    for day, workout in iter_dated(workouts, DateWindow.trailing(today, FREQUENCY_WINDOW_DAYS)):
        for muscle, sets in session_muscle_sets(workout, exercises).items():
            if sets > 0.0:
                trained_days.setdefault(muscle, set()).add(day)

    result: list[MuscleFrequency] = []
    for muscle in TRACKED_MUSCLES:
        days = len(trained_days.get(muscle, ()))
        frequency = days / WEEKS_IN_WINDOW
        result.append(
            MuscleFrequency(
                muscle=muscle,
                days_trained=days,
                times_per_week=frequency,
                signal=classify_frequency(frequency),
            )
        )
    return result
