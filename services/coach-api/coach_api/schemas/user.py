from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from .stats import StatsResponse


class UserCreate(BaseModel):
    telegram_id: str = Field(..., min_length=1, max_length=64)
    username: str | None = Field(None, max_length=255)
    first_name: str | None = Field(None, max_length=255)
    last_name: str | None = Field(None, max_length=255)

    @field_validator("telegram_id", mode="before")
    @classmethod
    def coerce_telegram_id(cls, value):
        # Telegram sends numeric ids
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if isinstance(value, str):
            value = value.strip()
        return value

    class Config:
        extra = "forbid"


class UserResponse(BaseModel):
    id: int
    telegram_id: str
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    created_at: datetime | None = None
    stats: StatsResponse | None = None

    class Config:
        from_attributes = True
