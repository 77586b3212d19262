"""Logged workout records.

These are the read-only inputs of every analyzer. A Workout is created once
when a session is saved and never modified afterwards by the engine.

Dates are kept as ISO text (YYYY-MM-DD) exactly as stored by the history
collaborator. A record whose date does not parse is still a valid Workout;
date-bounded analyzers simply skip it.
"""

import datetime as dt

from pydantic import BaseModel, Field, field_validator

# Arbitrary conversions that let cardio sets rank alongside lifted tonnage
DISTANCE_VOLUME_FACTOR = 10.0  # 1 km counts as 10 kg of volume
DURATION_VOLUME_DIVISOR = 6.0  # 1 min counts as 10 kg of volume


class WorkoutSet(BaseModel):
    weight: float = 0.0
    reps: int = Field(default=0, ge=0)
    distance: float | None = None
    duration_secs: int | None = None
    completed: bool
    note: str | None = None

    def volume(self) -> float:
        if self.distance is not None:
            return self.distance * DISTANCE_VOLUME_FACTOR
        if self.duration_secs is not None:
            return self.duration_secs / DURATION_VOLUME_DIVISOR
        return self.weight * self.reps


class WorkoutExercise(BaseModel):
    """One exercise performed in a session, with its sets in logged order."""

    exercise_id: str
    sets: list[WorkoutSet] = Field(default_factory=list)
    notes: str = ""
    superset_group: int | None = None
    rest_seconds_override: int | None = None

    def completed_sets(self) -> int:
        return sum(1 for s in self.sets if s.completed)

    def volume(self) -> float:
        """Training volume of completed sets only."""
        return sum(s.volume() for s in self.sets if s.completed)


class Workout(BaseModel):
    """A saved training session.

    Attributes:
        id: Workout identifier
        date: Calendar date as ISO text (YYYY-MM-DD), no time component
        name: Session name
        exercises: Exercises in logged order
        duration_mins: Session duration in minutes
    """

    id: str
    date: str
    name: str = ""
    exercises: list[WorkoutExercise] = Field(default_factory=list)
    duration_mins: int = 0

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, value: object) -> object:
        """Accept date objects and store them as ISO text."""
        if isinstance(value, dt.datetime):
            return value.date().isoformat()
        if isinstance(value, dt.date):
            return value.isoformat()
        return value

    def total_volume(self) -> float:
        return sum(e.volume() for e in self.exercises)
