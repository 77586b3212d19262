"""Training split by exercise category (Chest, Back, Legs, ...).

Categories come from the exercise catalog; logged exercises missing from
the catalog, or without a category, are not counted.
"""

import datetime as dt
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from loguru import logger

from liftlog.analysis.weekly import IsoWeek, IsoWeekKey, WeeklyPoint, workout_iso_week
from liftlog.metrics.windows import iter_dated, windowed_totals
from liftlog.models.exercise import Category, ExerciseCatalog
from liftlog.models.workout import Workout, WorkoutExercise

TOP_CATEGORY_COUNT = 4


@dataclass(frozen=True)
class CategoryWeeklyVolume:
    category: Category
    total_volume: float
    weeks: tuple[WeeklyPoint, ...]


@dataclass(frozen=True)
class CategoryRecency:
    category: Category
    last_trained: dt.date
    days_since: int


@dataclass(frozen=True)
class CategoryCount:
    category: Category
    exercises: int


def _categorized(workout: Workout, exercises: ExerciseCatalog) -> Iterator[tuple[Category, WorkoutExercise]]:
    for workout_exercise in workout.exercises:
        entry = exercises.get(workout_exercise.exercise_id)
        if entry is not None and entry.category is not None:
            yield entry.category, workout_exercise


def category_volume_per_week(
    workouts: Iterable[Workout],
    exercises: ExerciseCatalog,
    weeks: Iterable[IsoWeek],
    top: int = TOP_CATEGORY_COUNT,
) -> list[CategoryWeeklyVolume]:
    """Weekly volume series for the categories with the most all-time volume.

    Args:
        workouts: Workout history
        exercises: Exercise catalog
        weeks: ISO weeks to report (see weekly.last_n_weeks)
        top: Number of categories to keep

    Returns:
        Up to `top` series, largest all-time volume first (ties in category order)
    """
    weeks = list(weeks)

    def extract(workout: Workout) -> Iterator[tuple[tuple[Category, IsoWeekKey], float]]:
        week_key = workout_iso_week(workout).key
        for category, workout_exercise in _categorized(workout, exercises):
            yield (category, week_key), workout_exercise.volume()

    totals = windowed_totals(workouts, None, extract)

    by_category: dict[Category, dict[IsoWeekKey, float]] = {}
    for (category, week_key), volume in totals.items():
        by_category.setdefault(category, {})[week_key] = volume

    ranked = [(category, sum(by_category[category].values())) for category in Category if category in by_category]
    ranked.sort(key=lambda item: item[1], reverse=True)

    return [
        CategoryWeeklyVolume(
            category=category,
            total_volume=total,
            weeks=tuple(WeeklyPoint(label=w.label, value=by_category[category].get(w.key, 0.0)) for w in weeks),
        )
        for category, total in ranked[:top]
    ]


def days_since_category(
    workouts: Iterable[Workout],
    exercises: ExerciseCatalog,
    today: dt.date,
) -> list[CategoryRecency]:
    """Days since each category was last trained, in category order.

    Categories never trained are omitted; future-dated workouts are ignored.
    """
    last_trained: dict[Category, dt.date] = {}
    for day, workout in iter_dated(workouts):
        if day > today:
            logger.debug(f"Ignoring future-dated workout {workout.id} ({workout.date}) for category recency")
            continue
        for category, _ in _categorized(workout, exercises):
            previous = last_trained.get(category)
            if previous is None or day > previous:
                last_trained[category] = day

    return [
        CategoryRecency(category=category, last_trained=last_trained[category], days_since=(today - last_trained[category]).days)
        for category in Category
        if category in last_trained
    ]


def category_distribution(workouts: Iterable[Workout], exercises: ExerciseCatalog) -> list[CategoryCount]:
    """How many logged exercises fall in each category, all-time.

    Dates are not consulted, so workouts with unparseable dates still count.
    """
    counts: dict[Category, int] = {}
    for workout in workouts:
        for category, _ in _categorized(workout, exercises):
            counts[category] = counts.get(category, 0) + 1

    return [CategoryCount(category=category, exercises=counts[category]) for category in Category if category in counts]
