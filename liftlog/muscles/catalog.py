"""Tracked muscle groups and their weekly volume landmarks.

This module is the single source of truth for:
- The 14 tracked muscle groups (closed set, never extended at runtime)
- Default MEV / MRV weekly set thresholds per muscle
- The fixed display groupings (Push, Pull, Legs, Core)

Default landmarks follow the RP Volume Landmarks (Israetel).
"""

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import NamedTuple


class Muscle(StrEnum):
    CHEST = "Chest"
    LATS = "Lats"
    TRAPS = "Traps"
    FRONT_DELTS = "Front Delts"
    SIDE_DELTS = "Side Delts"
    REAR_DELTS = "Rear Delts"
    BICEPS = "Biceps"
    TRICEPS = "Triceps"
    FOREARMS = "Forearms"
    QUADS = "Quads"
    HAMSTRINGS = "Hamstrings"
    GLUTES = "Glutes"
    CALVES = "Calves"
    ABS = "Abs"


class VolumeThreshold(NamedTuple):
    """Weekly set landmarks for one muscle.

    Attributes:
        mev: Minimum effective volume (sets/week)
        mrv: Maximum recoverable volume (sets/week)
    """

    mev: float
    mrv: float


# Catalog order is the canonical iteration order for every per-muscle output
TRACKED_MUSCLES: tuple[Muscle, ...] = tuple(Muscle)

# Used when a muscle has neither a default nor an override
FALLBACK_THRESHOLD = VolumeThreshold(mev=0.0, mrv=20.0)

DEFAULT_THRESHOLDS: MappingProxyType[Muscle, VolumeThreshold] = MappingProxyType(
    {
        Muscle.CHEST: VolumeThreshold(6.0, 22.0),
        Muscle.LATS: VolumeThreshold(10.0, 25.0),
        Muscle.TRAPS: VolumeThreshold(0.0, 26.0),
        Muscle.FRONT_DELTS: VolumeThreshold(0.0, 12.0),
        Muscle.SIDE_DELTS: VolumeThreshold(8.0, 26.0),
        Muscle.REAR_DELTS: VolumeThreshold(8.0, 26.0),
        Muscle.BICEPS: VolumeThreshold(8.0, 26.0),
        Muscle.TRICEPS: VolumeThreshold(6.0, 18.0),
        Muscle.FOREARMS: VolumeThreshold(2.0, 12.0),
        Muscle.QUADS: VolumeThreshold(8.0, 20.0),
        Muscle.HAMSTRINGS: VolumeThreshold(6.0, 20.0),
        Muscle.GLUTES: VolumeThreshold(0.0, 16.0),
        Muscle.CALVES: VolumeThreshold(8.0, 20.0),
        Muscle.ABS: VolumeThreshold(0.0, 25.0),
    }
)

# Display groupings (order within a group is display order)
PUSH_MUSCLES: tuple[Muscle, ...] = (Muscle.CHEST, Muscle.FRONT_DELTS, Muscle.SIDE_DELTS, Muscle.TRICEPS)
PULL_MUSCLES: tuple[Muscle, ...] = (Muscle.LATS, Muscle.TRAPS, Muscle.REAR_DELTS, Muscle.BICEPS, Muscle.FOREARMS)
LEG_MUSCLES: tuple[Muscle, ...] = (Muscle.QUADS, Muscle.HAMSTRINGS, Muscle.GLUTES, Muscle.CALVES)
CORE_MUSCLES: tuple[Muscle, ...] = (Muscle.ABS,)

MUSCLE_GROUPS: MappingProxyType[str, tuple[Muscle, ...]] = MappingProxyType(
    {
        "Push": PUSH_MUSCLES,
        "Pull": PULL_MUSCLES,
        "Legs": LEG_MUSCLES,
        "Core": CORE_MUSCLES,
    }
)

_MUSCLES_BY_KEY: MappingProxyType[str, Muscle] = MappingProxyType({m.value.lower(): m for m in Muscle})


def lookup_muscle(name: str) -> Muscle | None:
    """Match a free-text muscle name against the tracked set.

    Matching trims surrounding whitespace and ignores case.

    Args:
        name: Muscle name as typed by a user (e.g. "front delts")

    Returns:
        The tracked Muscle, or None if the name is not tracked
    """
    return _MUSCLES_BY_KEY.get(name.strip().lower())


def merge_thresholds(
    overrides: Mapping[Muscle | str, VolumeThreshold | tuple[float, float]] | None = None,
) -> dict[Muscle, VolumeThreshold]:
    """Merge user threshold overrides over the catalog defaults.

    An override replaces the whole (MEV, MRV) pair for its muscle; halves are
    never merged. Override keys that are not tracked muscles are ignored.

    Args:
        overrides: Optional mapping of muscle -> (mev, mrv)

    Returns:
        Threshold table covering every tracked muscle
    """
    merged: dict[Muscle, VolumeThreshold] = dict(DEFAULT_THRESHOLDS)
    if not overrides:
        return merged

    for key, pair in overrides.items():
        muscle = key if isinstance(key, Muscle) else lookup_muscle(str(key))
        if muscle is None:
            continue
        mev, mrv = pair
        merged[muscle] = VolumeThreshold(float(mev), float(mrv))
    return merged


def threshold_for(muscle: Muscle, thresholds: Mapping[Muscle, VolumeThreshold]) -> VolumeThreshold:
    """Threshold lookup with the (0, 20) fallback."""
    return thresholds.get(muscle, FALLBACK_THRESHOLD)
