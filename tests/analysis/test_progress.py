"""Tests for per-exercise progress series."""

import pytest

from liftlog.analysis.progress import chart_label, exercise_progress, logged_exercise_ids, progress_for_all


def test_chart_label() -> None:
    assert chart_label("2024-03-08") == "03/08"
    assert chart_label("March 9") == "March 9"


class TestExerciseProgress:
    """Tests for session-by-session series."""

    def test_sessions_sorted_by_date(self, catalog, make_exercise, make_workout) -> None:
        workouts = [
            make_workout([make_exercise("chest-01", [(60.0, 5), (70.0, 2, False)])], date="2024-03-08"),
            make_workout([make_exercise("chest-01", [(55.0, 5), (50.0, 8)])], date="2024-03-01"),
            make_workout([make_exercise("back-01")], date="2024-03-04"),
        ]

        progress = exercise_progress(workouts, catalog, "chest-01")

        assert progress.name == "Barbell Bench Press"
        assert [p.date for p in progress.points] == ["2024-03-01", "2024-03-08"]
        assert progress.weight_series == [("03/01", 55.0), ("03/08", 60.0)]
        assert progress.volume_series == [("03/01", 675.0), ("03/08", 300.0)]
        labels, values = zip(*progress.e1rm_series)
        assert labels == ("03/01", "03/08")
        assert values == pytest.approx((64.1666667, 70.0))

    def test_bodyweight_sessions_have_no_e1rm(self, make_exercise, make_workout) -> None:
        workouts = [make_workout([make_exercise("core-01", [(0.0, 20)] * 3)], date="2024-03-01")]

        progress = exercise_progress(workouts, {}, "core-01")

        assert progress.points[0].e1rm is None
        assert progress.weight_series == [("03/01", 0.0)]
        assert progress.e1rm_series == []

    def test_malformed_dates_are_kept(self, make_exercise, make_workout) -> None:
        workouts = [
            make_workout([make_exercise("arms-01", [(20.0, 10)])], date="March 9"),
            make_workout([make_exercise("arms-01", [(15.0, 10)])], date="2024-03-01"),
        ]
        progress = exercise_progress(workouts, {}, "arms-01")
        assert [p.label for p in progress.points] == ["03/01", "March 9"]

    def test_unlogged_exercise(self, make_exercise, make_workout) -> None:
        progress = exercise_progress([make_workout([make_exercise("arms-01")])], {}, "chest-01")
        assert progress.points == ()
        assert progress.name == "chest-01"


def test_progress_for_all_in_first_seen_order(make_exercise, make_workout) -> None:
    workouts = [
        make_workout([make_exercise("back-01"), make_exercise("chest-01")], date="2024-03-02"),
        make_workout([make_exercise("arms-01"), make_exercise("back-01")], date="2024-03-01"),
    ]

    assert logged_exercise_ids(workouts) == ["back-01", "chest-01", "arms-01"]
    assert [p.exercise_id for p in progress_for_all(workouts, {})] == ["back-01", "chest-01", "arms-01"]
    assert progress_for_all([], {}) == []
