"""Root conftest for all tests.

Shared factories for building workout histories relative to a fixed "today".
"""

import datetime as dt
from collections.abc import Callable, Sequence

import pytest

from liftlog.models.exercise import Category, Exercise, index_exercises
from liftlog.models.workout import Workout, WorkoutExercise, WorkoutSet

TODAY = dt.date(2025, 1, 10)

SetSpec = tuple[float, int] | tuple[float, int, bool]


@pytest.fixture
def today() -> dt.date:
    """Fixed reference date for windowed analytics."""
    return TODAY


@pytest.fixture
def make_exercise() -> Callable[..., WorkoutExercise]:
    """Build a logged exercise from (weight, reps[, completed]) tuples."""

    def _make(exercise_id: str, sets: Sequence[SetSpec] = ((50.0, 10),) * 3) -> WorkoutExercise:
        built = []
        for row in sets:
            weight, reps = row[0], row[1]
            completed = row[2] if len(row) > 2 else True
            built.append(WorkoutSet(weight=weight, reps=reps, completed=completed))
        return WorkoutExercise(exercise_id=exercise_id, sets=built)

    return _make


@pytest.fixture
def make_workout() -> Callable[..., Workout]:
    """Build a workout dated `days_ago` days before TODAY (or on an explicit date string)."""
    counter = {"n": 0}

    def _make(
        exercises: Sequence[WorkoutExercise],
        *,
        days_ago: int = 0,
        date: str | None = None,
        duration_mins: int = 60,
    ) -> Workout:
        counter["n"] += 1
        return Workout(
            id=f"w-{counter['n']}",
            date=date if date is not None else (TODAY - dt.timedelta(days=days_ago)).isoformat(),
            name="Session",
            exercises=list(exercises),
            duration_mins=duration_mins,
        )

    return _make


@pytest.fixture
def catalog() -> dict[str, Exercise]:
    """Small catalog with two built-in and two custom exercises."""
    return index_exercises(
        [
            Exercise(id="chest-01", name="Barbell Bench Press", category=Category.CHEST),
            Exercise(id="back-01", name="Lat Pulldown", category=Category.BACK),
            Exercise(
                id="custom-landmine-row",
                name="Landmine Row",
                category=Category.BACK,
                muscle_groups=["Lats", "Biceps:secondary", "Rear Delts:tertiary"],
                is_custom=True,
            ),
            Exercise(
                id="custom-legacy",
                name="Legacy Custom",
                muscle_groups=["Inner Thigh"],
                is_custom=True,
            ),
        ]
    )
