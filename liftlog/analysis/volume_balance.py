"""Weekly volume balance per muscle.

Compares the last 7 days of effective sets (today-6 ... today) against each
muscle's MEV / MRV landmarks.

Classification, evaluated in order:
- sets <= 0       -> none
- sets < MEV      -> under
- sets <= MRV     -> optimal (both landmarks are inclusive)
- otherwise       -> over
"""

import datetime as dt
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum

from liftlog.analysis.signals import Signal
from liftlog.metrics.effective_sets import aggregate_window
from liftlog.metrics.windows import DateWindow
from liftlog.models.exercise import ExerciseCatalog
from liftlog.models.workout import Workout
from liftlog.muscles.catalog import MUSCLE_GROUPS, TRACKED_MUSCLES, Muscle, VolumeThreshold, threshold_for

VOLUME_WINDOW_DAYS = 7
DEFAULT_BAR_MAX = 30.0


class VolumeStatus(StrEnum):
    NONE = "none"
    UNDER = "under"
    OPTIMAL = "optimal"
    OVER = "over"


_STATUS_SIGNALS = {
    VolumeStatus.NONE: Signal.NEUTRAL,
    VolumeStatus.UNDER: Signal.YELLOW,
    VolumeStatus.OPTIMAL: Signal.GREEN,
    VolumeStatus.OVER: Signal.RED,
}


@dataclass(frozen=True)
class MuscleVolume:
    muscle: Muscle
    sets: float
    mev: float
    mrv: float
    status: VolumeStatus
    bar_pct: float

    @property
    def signal(self) -> Signal:
        return _STATUS_SIGNALS[self.status]


@dataclass(frozen=True)
class MuscleGroupVolume:
    name: str
    muscles: tuple[MuscleVolume, ...]


def classify_volume(sets: float, mev: float, mrv: float) -> VolumeStatus:
    if sets <= 0.0:
        return VolumeStatus.NONE
    if sets < mev:
        return VolumeStatus.UNDER
    if sets <= mrv:
        return VolumeStatus.OPTIMAL
    return VolumeStatus.OVER


def _bar_max(thresholds: Mapping[Muscle, VolumeThreshold]) -> float:
    max_mrv = max((t.mrv for t in thresholds.values()), default=0.0)
    return max_mrv if max_mrv > 0.0 else DEFAULT_BAR_MAX


def analyze_volume_balance(
    workouts: Iterable[Workout],
    exercises: ExerciseCatalog,
    today: dt.date,
    thresholds: Mapping[Muscle, VolumeThreshold],
) -> list[MuscleVolume]:
    """Classify the last 7 days of volume for every tracked muscle.

    Args:
        workouts: Workout history
        exercises: Exercise catalog
        today: Last day of the window
        thresholds: Merged threshold table (see muscles.catalog.merge_thresholds)

    Returns:
        One entry per tracked muscle, in catalog order
    """
    sets_by_muscle = aggregate_window(workouts, exercises, DateWindow.trailing(today, VOLUME_WINDOW_DAYS))
    bar_max = _bar_max(thresholds)

    result: list[MuscleVolume] = []
    for muscle in TRACKED_MUSCLES:
        sets = sets_by_muscle.get(muscle, 0.0)
        mev, mrv = threshold_for(muscle, thresholds)
        result.append(
            MuscleVolume(
                muscle=muscle,
                sets=sets,
                mev=mev,
                mrv=mrv,
                status=classify_volume(sets, mev, mrv),
                bar_pct=min(sets / bar_max * 100.0, 100.0),
            )
        )
    return result


def group_volume_balance(volumes: Iterable[MuscleVolume]) -> list[MuscleGroupVolume]:
    """Arrange per-muscle volume into the Push / Pull / Legs / Core display buckets."""
    by_muscle = {v.muscle: v for v in volumes}
    return [
        MuscleGroupVolume(
            name=name,
            muscles=tuple(by_muscle[m] for m in members if m in by_muscle),
        )
        for name, members in MUSCLE_GROUPS.items()
    ]
