"""Tests for history totals and the muscle-balance summary."""

from liftlog.analysis.summary import muscle_balance_summary, summarize_history
from liftlog.models.workout import Workout, WorkoutExercise, WorkoutSet
from liftlog.muscles.catalog import merge_thresholds


class TestSummarizeHistory:
    def test_totals(self, make_exercise, make_workout) -> None:
        workouts = [
            make_workout([make_exercise("chest-01", [(50.0, 10), (50.0, 10, False)])], duration_mins=45),
            make_workout([make_exercise("arms-01", [(20.0, 10)])], duration_mins=50),
        ]
        summary = summarize_history(workouts)
        assert summary.total_workouts == 2
        assert summary.total_volume == 700.0
        assert summary.avg_duration_mins == 47

    def test_cardio_volume_conversions(self) -> None:
        workout = Workout(
            id="run",
            date="2024-01-01",
            exercises=[
                WorkoutExercise(
                    exercise_id="cardio-01",
                    sets=[
                        WorkoutSet(distance=5.0, completed=True),
                        WorkoutSet(duration_secs=600, completed=True),
                    ],
                )
            ],
        )
        assert summarize_history([workout]).total_volume == 150.0

    def test_empty(self) -> None:
        summary = summarize_history([])
        assert (summary.total_workouts, summary.total_volume, summary.avg_duration_mins) == (0, 0.0, 0)


class TestMuscleBalanceSummary:
    def test_counts_under_and_over(self, today, make_exercise, make_workout) -> None:
        """Test that trained-but-low muscles count; zero-MEV and untouched muscles do not."""
        workouts = [
            make_workout(
                [
                    make_exercise("chest-01", [(60.0, 8)] * 6),
                    make_exercise("arms-07", [(25.0, 12)] * 16),
                ]
            )
        ]
        # Chest 6 (optimal), Triceps 19 (over), Front Delts 1.8 (MEV 0)
        summary = muscle_balance_summary(workouts, {}, today, merge_thresholds())
        assert summary.overtrained == 1
        assert summary.undertrained == 0

    def test_undertrained(self, today, make_exercise, make_workout) -> None:
        workouts = [make_workout([make_exercise("arms-01", [(20.0, 10)] * 2)])]
        summary = muscle_balance_summary(workouts, {}, today, merge_thresholds())
        assert summary.undertrained == 1
        assert summary.overtrained == 0
