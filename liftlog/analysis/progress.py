"""Per-exercise progress series.

For every session containing an exercise: the heaviest completed weight,
the completed volume and the best estimated 1RM. Sessions are ordered by
their stored date text, so workouts with unparseable dates are kept.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from liftlog.analysis.overload import session_e1rm
from liftlog.analysis.records import max_completed_weight
from liftlog.models.exercise import ExerciseCatalog, exercise_name
from liftlog.models.workout import Workout


@dataclass(frozen=True)
class ProgressPoint:
    """One session of one exercise.

    Attributes:
        date: Workout date text as stored
        label: Short chart label, "MM/DD" for ISO dates
        max_weight: Heaviest completed weight (0.0 for bodyweight work)
        volume: Completed volume
        e1rm: Best Epley estimate, or None when no weighted set was completed
    """

    date: str
    label: str
    max_weight: float
    volume: float
    e1rm: float | None


@dataclass(frozen=True)
class ExerciseProgress:
    exercise_id: str
    name: str
    points: tuple[ProgressPoint, ...]

    @property
    def weight_series(self) -> list[tuple[str, float]]:
        return [(p.label, p.max_weight) for p in self.points]

    @property
    def volume_series(self) -> list[tuple[str, float]]:
        return [(p.label, p.volume) for p in self.points]

    @property
    def e1rm_series(self) -> list[tuple[str, float]]:
        return [(p.label, p.e1rm) for p in self.points if p.e1rm is not None]


def chart_label(date: str) -> str:
    if len(date) >= 10:
        return f"{date[5:7]}/{date[8:10]}"
    return date


def logged_exercise_ids(workouts: Iterable[Workout]) -> list[str]:
    """Exercise ids in the order they first appear in the history."""
    seen: dict[str, None] = {}
    for workout in workouts:
        for workout_exercise in workout.exercises:
            seen.setdefault(workout_exercise.exercise_id, None)
    return list(seen)


def exercise_progress(
    workouts: Iterable[Workout],
    exercises: ExerciseCatalog,
    exercise_id: str,
) -> ExerciseProgress:
    """Session-by-session series for one exercise, oldest first."""
    relevant = sorted(
        (w for w in workouts if any(e.exercise_id == exercise_id for e in w.exercises)),
        key=lambda w: w.date,
    )

    points: list[ProgressPoint] = []
    for workout in relevant:
        for workout_exercise in workout.exercises:
            if workout_exercise.exercise_id != exercise_id:
                continue
            points.append(
                ProgressPoint(
                    date=workout.date,
                    label=chart_label(workout.date),
                    max_weight=max_completed_weight(workout_exercise),
                    volume=workout_exercise.volume(),
                    e1rm=session_e1rm(workout_exercise),
                )
            )

    return ExerciseProgress(exercise_id=exercise_id, name=exercise_name(exercise_id, exercises), points=tuple(points))


def progress_for_all(workouts: Iterable[Workout], exercises: ExerciseCatalog) -> list[ExerciseProgress]:
    history = list(workouts)
    return [exercise_progress(history, exercises, exercise_id) for exercise_id in logged_exercise_ids(history)]
