"""Tests for push / pull balance."""

import pytest

from liftlog.analysis.push_pull import PUSH_DOMINANT_MESSAGE, RatioState, analyze_push_pull, balance_from_totals
from liftlog.analysis.signals import Signal


class TestBalanceFromTotals:
    """Tests for the tri-state ratio classification."""

    def test_no_data(self) -> None:
        balance = balance_from_totals(0.0, 0.0)
        assert balance.state is RatioState.NO_DATA
        assert balance.ratio is None
        assert balance.signal is Signal.NEUTRAL
        assert balance.ratio_text == "N/A"

    def test_push_only_is_not_infinite(self) -> None:
        balance = balance_from_totals(10.0, 0.0)
        assert balance.state is RatioState.PUSH_ONLY
        assert balance.ratio is None
        assert balance.ratio_text == "N/A"
        assert balance.signal is Signal.NEUTRAL
        assert balance.message == PUSH_DOMINANT_MESSAGE
        assert (balance.push_pct, balance.pull_pct) == (100, 0)

    def test_pull_only_is_zero_ratio(self) -> None:
        balance = balance_from_totals(0.0, 10.0)
        assert balance.state is RatioState.FINITE
        assert balance.ratio == 0.0
        assert balance.signal is Signal.RED
        assert balance.message is not None
        assert balance.message.startswith("Pull-dominant")

    @pytest.mark.parametrize(("push", "pull"), [(12.0, 10.0), (8.0, 10.0), (10.0, 10.0)])
    def test_balanced_bounds_are_inclusive(self, push: float, pull: float) -> None:
        balance = balance_from_totals(push, pull)
        assert balance.signal is Signal.GREEN
        assert balance.message is None

    @pytest.mark.parametrize(("push", "pull"), [(15.0, 10.0), (6.0, 10.0), (13.0, 10.0), (7.0, 10.0)])
    def test_caution_band(self, push: float, pull: float) -> None:
        balance = balance_from_totals(push, pull)
        assert balance.signal is Signal.YELLOW
        assert balance.message is None

    def test_push_dominant(self) -> None:
        balance = balance_from_totals(16.0, 10.0)
        assert balance.signal is Signal.RED
        assert balance.message is not None
        assert balance.message.startswith("Push-dominant")
        assert balance.ratio_text == "1.6:1"

    def test_pull_dominant(self) -> None:
        balance = balance_from_totals(5.0, 10.0)
        assert balance.signal is Signal.RED
        assert balance.message is not None
        assert balance.message.startswith("Pull-dominant")

    def test_percentages(self) -> None:
        balance = balance_from_totals(10.0, 20.0)
        assert (balance.push_pct, balance.pull_pct) == (33, 67)


class TestAnalyzePushPull:
    def test_even_split(self, today, make_exercise, make_workout) -> None:
        workouts = [make_workout([make_exercise("arms-07", [(25.0, 12)] * 4), make_exercise("arms-01", [(20.0, 10)] * 4)])]
        balance = analyze_push_pull(workouts, {}, today)
        assert balance.push_sets == 4.0
        assert balance.pull_sets == 4.0
        assert balance.ratio == 1.0
        assert balance.ratio_text == "1.0:1"
        assert balance.signal is Signal.GREEN

    def test_legs_do_not_count(self, today, make_exercise, make_workout) -> None:
        workouts = [make_workout([make_exercise("legs-04", [(80.0, 10)] * 5)])]
        assert analyze_push_pull(workouts, {}, today).state is RatioState.NO_DATA

    def test_push_only_week(self, today, make_exercise, make_workout) -> None:
        """Test that a push-only week stays neutral but still warns about missing pulls."""
        workouts = [make_workout([make_exercise("arms-07")], days_ago=2)]

        balance = analyze_push_pull(workouts, {}, today)

        assert balance.state is RatioState.PUSH_ONLY
        assert balance.push_sets == 3.0
        assert balance.signal is Signal.NEUTRAL
        assert balance.message is not None
        assert balance.message.startswith("Push-dominant")

    def test_last_week_only(self, today, make_exercise, make_workout) -> None:
        workouts = [
            make_workout([make_exercise("arms-07")], days_ago=1),
            make_workout([make_exercise("arms-01")], days_ago=7),
        ]
        assert analyze_push_pull(workouts, {}, today).state is RatioState.PUSH_ONLY
