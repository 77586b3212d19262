"""Training load analyzers.

Each analyzer is a pure function of (workout history, exercise catalog,
threshold table, today's date). Insufficient data yields an explicit empty
result (empty list, None, or RatioState.NO_DATA), never an exception.
"""

from liftlog.analysis.categories import (
    CategoryCount,
    CategoryRecency,
    CategoryWeeklyVolume,
    category_distribution,
    category_volume_per_week,
    days_since_category,
)
from liftlog.analysis.deload import DeloadAdvice, WeeklySetCount, advise_deload
from liftlog.analysis.frequency import MuscleFrequency, analyze_frequency
from liftlog.analysis.overload import ExerciseOverload, OverloadTrend, analyze_overload, estimate_1rm
from liftlog.analysis.progress import ExerciseProgress, ProgressPoint, exercise_progress, progress_for_all
from liftlog.analysis.push_pull import PushPullBalance, RatioState, analyze_push_pull
from liftlog.analysis.records import PersonalRecord, personal_records
from liftlog.analysis.recovery import MuscleRecovery, track_recovery
from liftlog.analysis.rep_range import RepRange, RepRangeProfile, profile_rep_ranges
from liftlog.analysis.session_volume import SessionVolumeFlag, check_session_volume
from liftlog.analysis.signals import Signal
from liftlog.analysis.summary import BalanceSummary, HistorySummary, muscle_balance_summary, summarize_history
from liftlog.analysis.volume_balance import (
    MuscleGroupVolume,
    MuscleVolume,
    VolumeStatus,
    analyze_volume_balance,
    group_volume_balance,
)
from liftlog.analysis.weekly import IsoWeek, WeeklyPoint, last_n_weeks, volume_per_week, workouts_per_week

__all__ = [
    "BalanceSummary",
    "CategoryCount",
    "CategoryRecency",
    "CategoryWeeklyVolume",
    "DeloadAdvice",
    "ExerciseOverload",
    "ExerciseProgress",
    "HistorySummary",
    "IsoWeek",
    "MuscleFrequency",
    "MuscleGroupVolume",
    "MuscleRecovery",
    "MuscleVolume",
    "OverloadTrend",
    "PersonalRecord",
    "ProgressPoint",
    "PushPullBalance",
    "RatioState",
    "RepRange",
    "RepRangeProfile",
    "SessionVolumeFlag",
    "Signal",
    "VolumeStatus",
    "WeeklyPoint",
    "WeeklySetCount",
    "advise_deload",
    "analyze_frequency",
    "analyze_overload",
    "analyze_push_pull",
    "analyze_volume_balance",
    "category_distribution",
    "category_volume_per_week",
    "check_session_volume",
    "days_since_category",
    "estimate_1rm",
    "exercise_progress",
    "group_volume_balance",
    "last_n_weeks",
    "muscle_balance_summary",
    "personal_records",
    "profile_rep_ranges",
    "progress_for_all",
    "summarize_history",
    "track_recovery",
    "volume_per_week",
    "workouts_per_week",
]
