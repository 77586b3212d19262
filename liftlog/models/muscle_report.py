from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from liftlog.analysis.categories import CategoryCount, CategoryRecency, CategoryWeeklyVolume
from liftlog.analysis.deload import DeloadAdvice
from liftlog.analysis.frequency import MuscleFrequency
from liftlog.analysis.overload import ExerciseOverload
from liftlog.analysis.progress import ExerciseProgress
from liftlog.analysis.push_pull import PushPullBalance
from liftlog.analysis.records import PersonalRecord
from liftlog.analysis.recovery import MuscleRecovery
from liftlog.analysis.rep_range import RepRangeProfile
from liftlog.analysis.session_volume import SessionVolumeFlag
from liftlog.analysis.summary import BalanceSummary, HistorySummary
from liftlog.analysis.volume_balance import MuscleGroupVolume, MuscleVolume
from liftlog.analysis.weekly import WeeklyPoint


class MuscleReport(BaseModel):
    """Every training-load signal for one history snapshot.
    Sections with insufficient data are None (or empty) and should be hidden.
    """

    model_config = ConfigDict(frozen=True)

    # --- Time context ---
    date: dt.date

    # --- Volume ---
    volume: list[MuscleVolume] = Field(default_factory=list)
    volume_groups: list[MuscleGroupVolume] = Field(default_factory=list)
    balance: BalanceSummary

    # --- Frequency & recovery ---
    frequency: list[MuscleFrequency] = Field(default_factory=list)
    recovery: list[MuscleRecovery] = Field(default_factory=list)

    # --- Progression ---
    overload: list[ExerciseOverload] = Field(default_factory=list)
    records: list[PersonalRecord] = Field(default_factory=list)
    progress: list[ExerciseProgress] = Field(default_factory=list)

    # --- Fatigue ---
    deload: DeloadAdvice | None = None
    session_flags: list[SessionVolumeFlag] = Field(default_factory=list)

    # --- Distribution ---
    rep_ranges: RepRangeProfile | None = None
    push_pull: PushPullBalance

    # --- Weekly trends (anchored on the latest workout) ---
    workouts_per_week: list[WeeklyPoint] = Field(default_factory=list)
    volume_per_week: list[WeeklyPoint] = Field(default_factory=list)
    category_volume: list[CategoryWeeklyVolume] = Field(default_factory=list)

    # --- Categories ---
    category_recency: list[CategoryRecency] = Field(default_factory=list)
    category_distribution: list[CategoryCount] = Field(default_factory=list)

    # --- Totals ---
    summary: HistorySummary
