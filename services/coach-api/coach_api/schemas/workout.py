import datetime as dt

from coach_shared import MuscleGroup, StatsUpdateEvent, WorkoutCompletedEvent
from pydantic import BaseModel, Field

from .exercise import ExerciseResponse
from .stats import StatsResponse


class WorkoutCreate(BaseModel):
    date: dt.date
    muscle_group: MuscleGroup

    class Config:
        extra = "forbid"


class WorkoutSetCreate(BaseModel):
    exercise_id: int
    reps: int = Field(..., gt=0)
    weight: float | None = Field(None, ge=0)
    # seconds
    rest_time: int | None = Field(None, ge=0)

    class Config:
        extra = "forbid"


class WorkoutComplete(BaseModel):
    # minutes
    duration: int | None = Field(None, ge=0)

    class Config:
        extra = "forbid"


class WorkoutSetResponse(BaseModel):
    id: int
    workout_id: int
    exercise_id: int
    reps: int
    weight: float | None = None
    rest_time: int | None = None
    exercise: ExerciseResponse | None = None

    class Config:
        from_attributes = True


class WorkoutResponse(BaseModel):
    id: int
    date: dt.date
    muscle_group: MuscleGroup
    completed: bool
    duration: int | None = None
    completed_at: dt.datetime | None = None
    created_at: dt.datetime | None = None
    sets: list[WorkoutSetResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True


class WorkoutCompletionResponse(BaseModel):
    """Completed workout, the stats it produced and the chat events to relay."""

    workout: WorkoutResponse
    stats: StatsResponse
    events: list[WorkoutCompletedEvent | StatsUpdateEvent] = Field(default_factory=list)
