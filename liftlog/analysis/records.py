"""Personal records: heaviest completed set per exercise.

All-time and unbounded by date, so every workout counts, including ones
whose date does not parse. Records carry the workout's date text as stored.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from liftlog.models.exercise import ExerciseCatalog, exercise_name
from liftlog.models.workout import Workout, WorkoutExercise

DEFAULT_RECORD_LIMIT = 10


@dataclass(frozen=True)
class PersonalRecord:
    exercise_id: str
    name: str
    max_weight: float
    date: str


def max_completed_weight(workout_exercise: WorkoutExercise) -> float:
    return max(
        (s.weight for s in workout_exercise.sets if s.completed and s.reps > 0),
        default=0.0,
    )


def personal_records(
    workouts: Iterable[Workout],
    exercises: ExerciseCatalog,
    limit: int = DEFAULT_RECORD_LIMIT,
) -> list[PersonalRecord]:
    """Heaviest completed weight per exercise across the whole history.

    The first session (in history order) reaching the record weight is kept;
    equalling it later does not move the record.

    Returns:
        Records sorted by date text descending (heavier first on the same
        date), capped at `limit`
    """
    best: dict[str, tuple[float, str]] = {}
    for workout in workouts:
        for workout_exercise in workout.exercises:
            weight = max_completed_weight(workout_exercise)
            if weight <= 0.0:
                continue
            current = best.get(workout_exercise.exercise_id)
            if current is None or weight > current[0]:
                best[workout_exercise.exercise_id] = (weight, workout.date)

    records = [
        PersonalRecord(
            exercise_id=exercise_id,
            name=exercise_name(exercise_id, exercises),
            max_weight=weight,
            date=date,
        )
        for exercise_id, (weight, date) in best.items()
    ]
    records.sort(key=lambda r: (r.date, r.max_weight), reverse=True)
    return records[:limit]
