"""Effective-set computation.

An effective set is a completed set credited to a muscle, scaled by the
exercise's contribution weight for that muscle. Three completed sets of a
bench press (Chest 1.0, Triceps 0.5, Front Delts 0.3) credit:
    Chest 3.0, Triceps 1.5, Front Delts 0.9

Properties:
- Pure: inputs are never mutated
- Muscles without a contribution are absent from results, not zero
- Exercises with no completed sets are skipped entirely
"""

import datetime as dt
from collections import defaultdict
from collections.abc import Iterable, Iterator

from liftlog.metrics.windows import DateWindow, windowed_totals
from liftlog.models.exercise import ExerciseCatalog
from liftlog.models.workout import Workout
from liftlog.muscles.catalog import Muscle
from liftlog.muscles.contributions import MuscleContribution
from liftlog.muscles.resolver import contributions_for


def effective_sets(
    exercise_id: str,
    completed_count: int,
    contributions: Iterable[MuscleContribution],
) -> dict[Muscle, float]:
    """Credit completed sets of one exercise to its muscles.

    Args:
        exercise_id: Exercise the sets belong to (kept for call-site symmetry
            with the resolver; contributions are already resolved)
        completed_count: Number of completed sets
        contributions: Resolved (muscle, weight) pairs

    Returns:
        Muscle -> effective sets, e.g. {Muscle.CHEST: 3.0, Muscle.TRICEPS: 1.5}
    """
    result: dict[Muscle, float] = defaultdict(float)
    for muscle, weight in contributions:
        result[muscle] += completed_count * weight
    return dict(result)


def _workout_credits(workout: Workout, exercises: ExerciseCatalog) -> Iterator[tuple[Muscle, float]]:
    for workout_exercise in workout.exercises:
        completed = workout_exercise.completed_sets()
        if completed == 0:
            continue
        contributions = contributions_for(workout_exercise, exercises)
        yield from effective_sets(workout_exercise.exercise_id, completed, contributions).items()


def session_muscle_sets(workout: Workout, exercises: ExerciseCatalog) -> dict[Muscle, float]:
    """Per-muscle effective sets for a single session."""
    result: dict[Muscle, float] = defaultdict(float)
    for muscle, amount in _workout_credits(workout, exercises):
        result[muscle] += amount
    return dict(result)


def aggregate_over_range(
    workouts: Iterable[Workout],
    exercises: ExerciseCatalog,
    start: dt.date,
    end: dt.date,
) -> dict[Muscle, float]:
    """Per-muscle effective sets over an inclusive date range.

    All sessions in [start, end] feed one running total per muscle.

    Args:
        workouts: Workout history
        exercises: Exercise catalog (decides custom vs built-in resolution)
        start: First calendar date included
        end: Last calendar date included

    Returns:
        Muscle -> effective sets for every muscle credited in the range
    """
    return windowed_totals(
        workouts,
        DateWindow(start=start, end=end),
        lambda workout: _workout_credits(workout, exercises),
    )


def aggregate_window(
    workouts: Iterable[Workout],
    exercises: ExerciseCatalog,
    window: DateWindow,
) -> dict[Muscle, float]:
    return aggregate_over_range(workouts, exercises, window.start, window.end)
