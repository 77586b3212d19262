"""Tests for weekly volume balance."""

import pytest

from liftlog.analysis.signals import Signal
from liftlog.analysis.volume_balance import (
    VolumeStatus,
    analyze_volume_balance,
    classify_volume,
    group_volume_balance,
)
from liftlog.muscles.catalog import TRACKED_MUSCLES, Muscle, merge_thresholds


class TestClassifyVolume:
    """Tests for the MEV / MRV classification."""

    def test_zero_is_none(self) -> None:
        assert classify_volume(0.0, 0.0, 20.0) is VolumeStatus.NONE

    def test_below_mev_is_under(self) -> None:
        assert classify_volume(3.0, 6.0, 22.0) is VolumeStatus.UNDER

    def test_landmarks_are_inclusive(self) -> None:
        assert classify_volume(6.0, 6.0, 22.0) is VolumeStatus.OPTIMAL
        assert classify_volume(22.0, 6.0, 22.0) is VolumeStatus.OPTIMAL

    def test_above_mrv_is_over(self) -> None:
        assert classify_volume(22.5, 6.0, 22.0) is VolumeStatus.OVER

    def test_zero_mev_any_work_is_optimal(self) -> None:
        assert classify_volume(0.25, 0.0, 12.0) is VolumeStatus.OPTIMAL


class TestAnalyzeVolumeBalance:
    """Tests for the 7-day volume analyzer."""

    def test_bench_session(self, today, make_exercise, make_workout) -> None:
        """Test six bench sets today against the default landmarks."""
        workouts = [make_workout([make_exercise("chest-01", [(60.0, 8)] * 6)])]

        volumes = {v.muscle: v for v in analyze_volume_balance(workouts, {}, today, merge_thresholds())}

        assert list(volumes) == list(TRACKED_MUSCLES)
        assert volumes[Muscle.CHEST].sets == 6.0
        assert volumes[Muscle.CHEST].status is VolumeStatus.OPTIMAL
        assert volumes[Muscle.CHEST].signal is Signal.GREEN
        assert volumes[Muscle.TRICEPS].sets == 3.0
        assert volumes[Muscle.TRICEPS].status is VolumeStatus.UNDER
        assert volumes[Muscle.TRICEPS].signal is Signal.YELLOW
        assert volumes[Muscle.FRONT_DELTS].sets == pytest.approx(1.8)
        assert volumes[Muscle.FRONT_DELTS].status is VolumeStatus.OPTIMAL
        assert volumes[Muscle.QUADS].status is VolumeStatus.NONE
        assert volumes[Muscle.QUADS].signal is Signal.NEUTRAL

    def test_window_is_seven_days_including_today(self, today, make_exercise, make_workout) -> None:
        workouts = [
            make_workout([make_exercise("arms-01")], days_ago=6),
            make_workout([make_exercise("arms-01")], days_ago=7),
        ]
        volumes = {v.muscle: v for v in analyze_volume_balance(workouts, {}, today, merge_thresholds())}
        assert volumes[Muscle.BICEPS].sets == 3.0

    def test_overrides_change_classification(self, today, make_exercise, make_workout) -> None:
        workouts = [make_workout([make_exercise("chest-01", [(60.0, 8)] * 6)])]
        thresholds = merge_thresholds({Muscle.CHEST: (8.0, 12.0)})
        volumes = {v.muscle: v for v in analyze_volume_balance(workouts, {}, today, thresholds)}
        assert volumes[Muscle.CHEST].mev == 8.0
        assert volumes[Muscle.CHEST].status is VolumeStatus.UNDER

    def test_bar_pct_scales_to_largest_mrv(self, today, make_exercise, make_workout) -> None:
        workouts = [make_workout([make_exercise("arms-01", [(20.0, 10)] * 13)])]
        volumes = {v.muscle: v for v in analyze_volume_balance(workouts, {}, today, merge_thresholds())}
        assert volumes[Muscle.BICEPS].bar_pct == pytest.approx(50.0)
        assert volumes[Muscle.CHEST].bar_pct == 0.0

    def test_bar_pct_is_capped(self, today, make_exercise, make_workout) -> None:
        workouts = [make_workout([make_exercise("arms-01", [(20.0, 10)] * 40)])]
        volumes = {v.muscle: v for v in analyze_volume_balance(workouts, {}, today, merge_thresholds())}
        assert volumes[Muscle.BICEPS].bar_pct == 100.0
        assert volumes[Muscle.BICEPS].status is VolumeStatus.OVER

    def test_empty_history(self, today) -> None:
        volumes = analyze_volume_balance([], {}, today, merge_thresholds())
        assert len(volumes) == 14
        assert all(v.status is VolumeStatus.NONE for v in volumes)


def test_group_volume_balance(today) -> None:
    groups = group_volume_balance(analyze_volume_balance([], {}, today, merge_thresholds()))
    assert [g.name for g in groups] == ["Push", "Pull", "Legs", "Core"]
    assert sum(len(g.muscles) for g in groups) == 14
    assert groups[-1].muscles[0].muscle is Muscle.ABS
