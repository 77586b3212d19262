"""Per-session junk-volume guard.

More than 10 effective sets for one muscle in a single session is flagged.
Each individual session in the last 14 days (today-13 ... today) is checked
on its own; sessions are never aggregated.
"""

import datetime as dt
from collections.abc import Iterable
from dataclasses import dataclass

from liftlog.metrics.effective_sets import session_muscle_sets
from liftlog.metrics.windows import DateWindow, iter_dated
from liftlog.models.exercise import ExerciseCatalog
from liftlog.models.workout import Workout
from liftlog.muscles.catalog import TRACKED_MUSCLES, Muscle

SESSION_WINDOW_DAYS = 14
SESSION_SET_LIMIT = 10.0
MAX_FLAGS = 5


@dataclass(frozen=True)
class SessionVolumeFlag:
    muscle: Muscle
    date: dt.date
    sets: float

    @property
    def message(self) -> str:
        return f"{self.sets:.0f} sets of {self.muscle} on {self.date.isoformat()}"


def check_session_volume(
    workouts: Iterable[Workout],
    exercises: ExerciseCatalog,
    today: dt.date,
) -> list[SessionVolumeFlag]:
    """Flag single-session muscle volume above the per-session limit.

    Returns:
        Up to five flags, most recent session first
    """
    flags: list[SessionVolumeFlag] = []
    for day, workout in iter_dated(workouts, DateWindow.trailing(today, SESSION_WINDOW_DAYS)):
        session_sets = session_muscle_sets(workout, exercises)
        for muscle in TRACKED_MUSCLES:
            sets = session_sets.get(muscle, 0.0)
            if sets > SESSION_SET_LIMIT:
                flags.append(SessionVolumeFlag(muscle=muscle, date=day, sets=sets))

    flags.sort(key=lambda flag: flag.date, reverse=True)
    return flags[:MAX_FLAGS]
