from datetime import datetime

from pydantic import BaseModel, Field


class StatsResponse(BaseModel):
    current_streak: int
    best_streak: int
    total_workouts: int
    badges: list[str] = Field(default_factory=list)
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
