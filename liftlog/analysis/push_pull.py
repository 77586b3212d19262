"""Push / pull balance over the last 7 days.

The ratio is modelled as an explicit tri-state rather than a float:
- NO_DATA:   neither push nor pull muscles were trained
- PUSH_ONLY: push work with no pull work (reported as "N/A", never infinity,
             with the push-dominant message)
- FINITE:    pull work exists, ratio = push / pull

Finite ratios:
- 0.8 ... 1.2 inclusive             -> balanced (green)
- outside 0.6 ... 1.5 inclusive     -> imbalanced (red), with a direction message
- otherwise                         -> caution (yellow), no message
"""

import datetime as dt
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from liftlog.analysis.signals import Signal
from liftlog.metrics.effective_sets import aggregate_window
from liftlog.metrics.windows import DateWindow
from liftlog.models.exercise import ExerciseCatalog
from liftlog.models.workout import Workout
from liftlog.muscles.catalog import PULL_MUSCLES, PUSH_MUSCLES

PUSH_PULL_WINDOW_DAYS = 7
BALANCED_RANGE = (0.8, 1.2)
ACCEPTABLE_RANGE = (0.6, 1.5)

PUSH_DOMINANT_MESSAGE = "Push-dominant: add more pulling volume to balance your training."
PULL_DOMINANT_MESSAGE = "Pull-dominant: add more pushing volume to balance your training."


class RatioState(StrEnum):
    NO_DATA = "no_data"
    FINITE = "finite"
    PUSH_ONLY = "push_only"


@dataclass(frozen=True)
class PushPullBalance:
    state: RatioState
    push_sets: float
    pull_sets: float
    ratio: float | None
    signal: Signal
    message: str | None
    push_pct: int
    pull_pct: int

    @property
    def ratio_text(self) -> str:
        if self.state is RatioState.FINITE and self.ratio is not None:
            return f"{self.ratio:.1f}:1"
        return "N/A"


def classify_ratio(ratio: float) -> tuple[Signal, str | None]:
    low, high = BALANCED_RANGE
    if low <= ratio <= high:
        return Signal.GREEN, None

    min_ok, max_ok = ACCEPTABLE_RANGE
    if ratio < min_ok:
        return Signal.RED, PULL_DOMINANT_MESSAGE
    if ratio > max_ok:
        return Signal.RED, PUSH_DOMINANT_MESSAGE
    return Signal.YELLOW, None


def balance_from_totals(push_sets: float, pull_sets: float) -> PushPullBalance:
    """Build the tri-state balance from push and pull effective-set totals."""
    total = push_sets + pull_sets
    push_pct = int(push_sets / total * 100.0) if total > 0.0 else 50

    if push_sets == 0.0 and pull_sets == 0.0:
        return PushPullBalance(
            state=RatioState.NO_DATA,
            push_sets=0.0,
            pull_sets=0.0,
            ratio=None,
            signal=Signal.NEUTRAL,
            message=None,
            push_pct=push_pct,
            pull_pct=100 - push_pct,
        )

    if pull_sets == 0.0:
        return PushPullBalance(
            state=RatioState.PUSH_ONLY,
            push_sets=push_sets,
            pull_sets=pull_sets,
            ratio=None,
            signal=Signal.NEUTRAL,
            message=PUSH_DOMINANT_MESSAGE,
            push_pct=push_pct,
            pull_pct=100 - push_pct,
        )

    ratio = push_sets / pull_sets
    signal, message = classify_ratio(ratio)
    return PushPullBalance(
        state=RatioState.FINITE,
        push_sets=push_sets,
        pull_sets=pull_sets,
        ratio=ratio,
        signal=signal,
        message=message,
        push_pct=push_pct,
        pull_pct=100 - push_pct,
    )


def analyze_push_pull(
    workouts: Iterable[Workout],
    exercises: ExerciseCatalog,
    today: dt.date,
) -> PushPullBalance:
    """Push-vs-pull effective-set balance for the last 7 days."""
    sets = aggregate_window(workouts, exercises, DateWindow.trailing(today, PUSH_PULL_WINDOW_DAYS))
    push_sets = sum(sets.get(m, 0.0) for m in PUSH_MUSCLES)
    pull_sets = sum(sets.get(m, 0.0) for m in PULL_MUSCLES)
    return balance_from_totals(push_sets, pull_sets)
