import datetime as dt

from coach_shared import MuscleGroup, parse_week_key
from pydantic import BaseModel, Field, field_validator


class WeekPlanUpdate(BaseModel):
    """Partial update of one week.

    Days left out of the payload keep their value, an explicit ``null`` turns
    the day into a rest day.
    """

    week: str
    monday: MuscleGroup | None = None
    tuesday: MuscleGroup | None = None
    wednesday: MuscleGroup | None = None
    thursday: MuscleGroup | None = None
    friday: MuscleGroup | None = None
    saturday: MuscleGroup | None = None
    sunday: MuscleGroup | None = None

    @field_validator("week")
    @classmethod
    def check_week(cls, value: str) -> str:
        parse_week_key(value)
        return value

    def day_updates(self) -> dict[str, MuscleGroup | None]:
        return self.model_dump(exclude_unset=True, exclude={"week"})

    class Config:
        extra = "forbid"


class WeekPlanResponse(BaseModel):
    id: int
    week: str
    monday: MuscleGroup | None = None
    tuesday: MuscleGroup | None = None
    wednesday: MuscleGroup | None = None
    thursday: MuscleGroup | None = None
    friday: MuscleGroup | None = None
    saturday: MuscleGroup | None = None
    sunday: MuscleGroup | None = None
    days: list[dt.date] = Field(default_factory=list)

    class Config:
        from_attributes = True


class TodayPlanResponse(BaseModel):
    date: dt.date
    week: str
    day: str
    muscle_group: MuscleGroup | None = None
    label: str | None = None
