"""Progressive overload trend per exercise.

Looks at the last 28 days (today-27 ... today). Each logged session of an
exercise contributes its best estimated 1RM (Epley) over qualifying sets
(completed, weight > 0, reps > 0). With at least two sessions, the sorted
series is split in half and the halves' averages compared:

    mid = floor(n / 2); early = [0, mid); late = [mid, n)
    pct = (avg(late) - avg(early)) / avg(early) * 100

Odd session counts give the extra session to the late half.
- pct > 2.0   -> progressing
- pct < -2.0  -> regressing
- otherwise   -> stagnant
"""

import datetime as dt
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum

from liftlog.metrics.windows import DateWindow, iter_dated
from liftlog.models.exercise import ExerciseCatalog, exercise_name
from liftlog.models.workout import Workout, WorkoutExercise

OVERLOAD_WINDOW_DAYS = 28
TREND_THRESHOLD_PCT = 2.0
MIN_SESSIONS = 2


class OverloadTrend(StrEnum):
    PROGRESSING = "progressing"
    STAGNANT = "stagnant"
    REGRESSING = "regressing"


@dataclass(frozen=True)
class ExerciseOverload:
    exercise_id: str
    name: str
    trend: OverloadTrend
    change_pct: float
    recent_e1rm: float
    sessions: int


def estimate_1rm(weight: float, reps: int) -> float:
    """Epley estimated one-rep max: weight * (1 + reps / 30)."""
    return weight * (1.0 + reps / 30.0)


def session_e1rm(workout_exercise: WorkoutExercise) -> float | None:
    """Best estimated 1RM over qualifying sets, or None if no set qualifies."""
    estimates = [
        estimate_1rm(s.weight, s.reps)
        for s in workout_exercise.sets
        if s.completed and s.weight > 0.0 and s.reps > 0
    ]
    return max(estimates) if estimates else None


def classify_trend(change_pct: float) -> OverloadTrend:
    if change_pct > TREND_THRESHOLD_PCT:
        return OverloadTrend.PROGRESSING
    if change_pct < -TREND_THRESHOLD_PCT:
        return OverloadTrend.REGRESSING
    return OverloadTrend.STAGNANT


def half_split_change(series: Sequence[float]) -> float:
    """Percent change between the late-half and early-half averages.

    Args:
        series: Chronological values, at least two, first half averaging > 0

    Returns:
        Percent change of avg(late) over avg(early)
    """
    mid = len(series) // 2
    early = series[:mid]
    late = series[mid:]
    early_avg = sum(early) / len(early)
    late_avg = sum(late) / len(late)
    return (late_avg - early_avg) / early_avg * 100.0


def analyze_overload(
    workouts: Iterable[Workout],
    exercises: ExerciseCatalog,
    today: dt.date,
) -> list[ExerciseOverload]:
    """Half-split e1RM trend for every exercise with two or more recent sessions.

    Returns:
        Trend entries sorted by exercise display name
    """
    sessions: dict[str, list[tuple[dt.date, float]]] = {}
    for day, workout in iter_dated(workouts, DateWindow.trailing(today, OVERLOAD_WINDOW_DAYS)):
        for workout_exercise in workout.exercises:
            best = session_e1rm(workout_exercise)
            if best is not None:
                sessions.setdefault(workout_exercise.exercise_id, []).append((day, best))

    result: list[ExerciseOverload] = []
    for exercise_id, entries in sessions.items():
        if len(entries) < MIN_SESSIONS:
            continue
        entries.sort(key=lambda entry: entry[0])
        series = [e1rm for _, e1rm in entries]
        change_pct = half_split_change(series)
        result.append(
            ExerciseOverload(
                exercise_id=exercise_id,
                name=exercise_name(exercise_id, exercises),
                trend=classify_trend(change_pct),
                change_pct=change_pct,
                recent_e1rm=series[-1],
                sessions=len(series),
            )
        )

    result.sort(key=lambda entry: entry.name)
    return result
