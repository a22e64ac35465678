from coach_shared import MuscleGroup
from pydantic import BaseModel, Field, field_validator


class ExerciseCreate(BaseModel):
    name: str = Field(..., max_length=255)
    muscle_group: MuscleGroup

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be empty")
        return value

    class Config:
        extra = "forbid"


class ExerciseResponse(BaseModel):
    id: int
    slug: str | None = None
    name: str
    muscle_group: MuscleGroup
    is_custom: bool
    user_id: int | None = None

    class Config:
        from_attributes = True


class ExerciseProgressResponse(BaseModel):
    """Aggregates over the sets of completed workouts only."""

    exercise_id: int
    max_weight: float | None = None
    total_reps: int = 0
    average_reps: int = 0
    total_sets: int = 0
