"""Exercise catalog entries.

The exercise catalog is owned by an external collaborator (built-in library
plus user-created custom exercises). The engine only needs to know, for an
exercise id, whether it is custom and which raw muscle strings it carries.
"""

from collections.abc import Iterable, Mapping
from enum import StrEnum

from pydantic import BaseModel, Field


class Category(StrEnum):
    CHEST = "Chest"
    BACK = "Back"
    LEGS = "Legs"
    SHOULDERS = "Shoulders"
    ARMS = "Arms"
    CORE = "Core"
    CARDIO = "Cardio"


class Exercise(BaseModel):
    """Catalog entry for one exercise.

    Attributes:
        id: Exercise identifier (e.g. "chest-01", or a generated id for custom exercises)
        name: Display name
        category: Library category, if known
        muscle_groups: Raw muscle strings. For custom exercises these may carry a
            ":primary" / ":secondary" / ":tertiary" suffix.
        is_custom: True for user-created exercises
    """

    id: str
    name: str = ""
    category: Category | None = None
    muscle_groups: list[str] = Field(default_factory=list)
    is_custom: bool = False


ExerciseCatalog = Mapping[str, Exercise]


def index_exercises(exercises: Iterable[Exercise]) -> dict[str, Exercise]:
    """Build an id -> Exercise lookup. The first entry wins on duplicate ids."""
    catalog: dict[str, Exercise] = {}
    for exercise in exercises:
        catalog.setdefault(exercise.id, exercise)
    return catalog


def exercise_name(exercise_id: str, exercises: ExerciseCatalog) -> str:
    """Display name for an exercise, falling back to its id."""
    entry = exercises.get(exercise_id)
    if entry is not None and entry.name:
        return entry.name
    return exercise_id
