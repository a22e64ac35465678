"""Payloads the Mini App sends to the bot through ``Telegram.WebApp.sendData``."""

import datetime as dt
from typing import Annotated, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError


class WorkoutCompletedPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Older web builds sent muscleGroup/sets/duration
    muscle_group_label: str = Field(
        validation_alias=AliasChoices("muscleGroupLabel", "muscleGroup", "muscle_group_label"),
        serialization_alias="muscleGroupLabel",
    )
    set_count: int = Field(
        ge=0,
        validation_alias=AliasChoices("setCount", "sets", "set_count"),
        serialization_alias="setCount",
    )
    duration_minutes: int | None = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("durationMinutes", "duration", "duration_minutes"),
        serialization_alias="durationMinutes",
    )
    date: dt.date


class StatsUpdatePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current_streak: int = Field(
        ge=0,
        validation_alias=AliasChoices("currentStreak", "current_streak"),
        serialization_alias="currentStreak",
    )
    best_streak: int = Field(
        ge=0,
        validation_alias=AliasChoices("bestStreak", "best_streak"),
        serialization_alias="bestStreak",
    )


class WorkoutCompletedEvent(BaseModel):
    type: Literal["workout_completed"] = "workout_completed"
    payload: WorkoutCompletedPayload


class StatsUpdateEvent(BaseModel):
    type: Literal["stats_update"] = "stats_update"
    payload: StatsUpdatePayload


WebAppEvent = Annotated[WorkoutCompletedEvent | StatsUpdateEvent, Field(discriminator="type")]

_web_app_event_adapter: TypeAdapter[WebAppEvent] = TypeAdapter(WebAppEvent)


def parse_web_app_event(raw: str | bytes) -> WorkoutCompletedEvent | StatsUpdateEvent:
    try:
        return _web_app_event_adapter.validate_json(raw)
    except ValidationError as exc:
        raise ValueError(f"invalid web app event: {exc.error_count()} error(s)") from exc


def dump_event(event: WorkoutCompletedEvent | StatsUpdateEvent) -> dict:
    """Wire form of an event, camelCase payload keys."""
    return event.model_dump(mode="json", by_alias=True)
