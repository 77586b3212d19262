"""Contribution resolution for built-in and custom exercises.

Built-in exercises resolve through the static contribution table.
Custom exercises carry free-text muscle strings which are parsed on every
resolution (never cached), e.g. ["Chest", "Triceps:secondary", "Abs:tertiary"].
"""

from collections.abc import Iterable

from liftlog.models.exercise import ExerciseCatalog
from liftlog.models.workout import WorkoutExercise
from liftlog.muscles.catalog import lookup_muscle
from liftlog.muscles.contributions import MuscleContribution, builtin_contributions

ROLE_WEIGHTS: tuple[tuple[str, float], ...] = (
    (":secondary", 0.5),
    (":tertiary", 0.25),
    (":primary", 1.0),
)
DEFAULT_ROLE_WEIGHT = 1.0


def _split_role(entry: str) -> tuple[str, float]:
    for suffix, weight in ROLE_WEIGHTS:
        if entry.endswith(suffix):
            return entry[: -len(suffix)], weight
    return entry, DEFAULT_ROLE_WEIGHT


def parse_custom_muscles(muscle_groups: Iterable[str]) -> list[MuscleContribution]:
    """Parse weighted muscle strings from a custom exercise.

    A missing suffix means primary (1.0), which keeps custom exercises saved
    before weighted suffixes existed working. Entries naming an untracked
    muscle (e.g. "Inner Thigh") are dropped.

    Args:
        muscle_groups: Raw strings such as "Chest:secondary"

    Returns:
        Contributions in input order
    """
    result: list[MuscleContribution] = []
    for entry in muscle_groups:
        name, weight = _split_role(entry)
        muscle = lookup_muscle(name)
        if muscle is not None:
            result.append(MuscleContribution(muscle, weight))
    return result


def resolve_contributions(
    exercise_id: str,
    is_custom: bool = False,
    muscle_groups: Iterable[str] = (),
) -> list[MuscleContribution]:
    """Resolve an exercise to the muscles it credits.

    Custom exercises use their parsed muscle strings; when nothing parses the
    built-in table is consulted for the same id. Unknown built-in ids resolve
    to an empty list.
    """
    if is_custom:
        parsed = parse_custom_muscles(muscle_groups)
        if parsed:
            return parsed
    return builtin_contributions(exercise_id)


def contributions_for(workout_exercise: WorkoutExercise, exercises: ExerciseCatalog) -> list[MuscleContribution]:
    """Resolve a logged exercise using its catalog entry's own custom flag."""
    entry = exercises.get(workout_exercise.exercise_id)
    if entry is None or not entry.is_custom:
        return builtin_contributions(workout_exercise.exercise_id)
    return resolve_contributions(entry.id, is_custom=True, muscle_groups=entry.muscle_groups)
