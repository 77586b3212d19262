from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Mapping

from loguru import logger

from liftlog.analysis.categories import category_distribution, category_volume_per_week, days_since_category
from liftlog.analysis.deload import advise_deload
from liftlog.analysis.frequency import analyze_frequency
from liftlog.analysis.overload import analyze_overload
from liftlog.analysis.progress import progress_for_all
from liftlog.analysis.push_pull import analyze_push_pull
from liftlog.analysis.records import personal_records
from liftlog.analysis.recovery import track_recovery
from liftlog.analysis.rep_range import profile_rep_ranges
from liftlog.analysis.session_volume import check_session_volume
from liftlog.analysis.summary import muscle_balance_summary, summarize_history
from liftlog.analysis.volume_balance import analyze_volume_balance, group_volume_balance
from liftlog.analysis.weekly import last_n_weeks, volume_per_week, workouts_per_week
from liftlog.models.exercise import ExerciseCatalog
from liftlog.models.muscle_report import MuscleReport
from liftlog.models.workout import Workout
from liftlog.muscles.catalog import Muscle, VolumeThreshold, merge_thresholds


def build_muscle_report(
    *,
    workouts: Iterable[Workout],
    exercises: ExerciseCatalog,
    today: dt.date,
    overrides: Mapping[Muscle | str, VolumeThreshold | tuple[float, float]] | None = None,
) -> MuscleReport:
    """Deterministically compute every training-load signal for a snapshot.

    NO I/O.
    NO mutation of the history, catalog or overrides.
    """
    workouts = list(workouts)
    thresholds = merge_thresholds(overrides)

    volume = analyze_volume_balance(workouts, exercises, today, thresholds)
    weeks = last_n_weeks(workouts)

    report = MuscleReport(
        date=today,
        volume=volume,
        volume_groups=group_volume_balance(volume),
        balance=muscle_balance_summary(workouts, exercises, today, thresholds),
        frequency=analyze_frequency(workouts, exercises, today),
        recovery=track_recovery(workouts, exercises, today),
        overload=analyze_overload(workouts, exercises, today),
        records=personal_records(workouts, exercises),
        progress=progress_for_all(workouts, exercises),
        deload=advise_deload(workouts, today),
        session_flags=check_session_volume(workouts, exercises, today),
        rep_ranges=profile_rep_ranges(workouts, today),
        push_pull=analyze_push_pull(workouts, exercises, today),
        workouts_per_week=workouts_per_week(workouts, weeks),
        volume_per_week=volume_per_week(workouts, weeks),
        category_volume=category_volume_per_week(workouts, exercises, weeks),
        category_recency=days_since_category(workouts, exercises, today),
        category_distribution=category_distribution(workouts, exercises),
        summary=summarize_history(workouts),
    )

    logger.debug(
        f"Built muscle report for {today.isoformat()}: workouts={len(workouts)} "
        f"overload_entries={len(report.overload)} session_flags={len(report.session_flags)} "
        f"deload={'yes' if report.deload and report.deload.should_deload else 'no'}"
    )
    return report
