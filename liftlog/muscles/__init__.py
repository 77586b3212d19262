"""Muscle catalog and contribution resolution.

Static data (tracked muscles, default landmarks, contribution table) plus the
pure resolver that turns an exercise into weighted muscle credits.
"""

from liftlog.muscles.catalog import (
    CORE_MUSCLES,
    DEFAULT_THRESHOLDS,
    FALLBACK_THRESHOLD,
    LEG_MUSCLES,
    MUSCLE_GROUPS,
    PULL_MUSCLES,
    PUSH_MUSCLES,
    TRACKED_MUSCLES,
    Muscle,
    VolumeThreshold,
    lookup_muscle,
    merge_thresholds,
    threshold_for,
)
from liftlog.muscles.contributions import BUILTIN_CONTRIBUTIONS, MuscleContribution, builtin_contributions
from liftlog.muscles.resolver import contributions_for, parse_custom_muscles, resolve_contributions

__all__ = [
    "BUILTIN_CONTRIBUTIONS",
    "CORE_MUSCLES",
    "DEFAULT_THRESHOLDS",
    "FALLBACK_THRESHOLD",
    "LEG_MUSCLES",
    "MUSCLE_GROUPS",
    "PULL_MUSCLES",
    "PUSH_MUSCLES",
    "TRACKED_MUSCLES",
    "Muscle",
    "MuscleContribution",
    "VolumeThreshold",
    "builtin_contributions",
    "contributions_for",
    "lookup_muscle",
    "merge_thresholds",
    "parse_custom_muscles",
    "resolve_contributions",
    "threshold_for",
]
