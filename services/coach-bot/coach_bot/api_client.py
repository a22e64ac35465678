"""Typed client for the coach-api endpoints the bot needs.

Every call opens its own ``ServiceClient``; the client object holds only
configuration, never user state.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog
from backend_common.http_client import ServiceClient, ServiceResponse
from coach_shared import MuscleGroup
from pydantic import BaseModel, Field, ValidationError

logger = structlog.get_logger(__name__)

TELEGRAM_ID_HEADER = "X-Telegram-Id"


class CoachApiError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class UserStats(BaseModel):
    current_streak: int = 0
    best_streak: int = 0
    total_workouts: int = 0
    badges: list[str] = Field(default_factory=list)


class RegisteredUser(BaseModel):
    id: int
    telegram_id: str
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    stats: UserStats | None = None


class WeekPlan(BaseModel):
    week: str
    monday: MuscleGroup | None = None
    tuesday: MuscleGroup | None = None
    wednesday: MuscleGroup | None = None
    thursday: MuscleGroup | None = None
    friday: MuscleGroup | None = None
    saturday: MuscleGroup | None = None
    sunday: MuscleGroup | None = None


class CoachApiClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> ServiceClient:
        return ServiceClient(base_url=self.base_url, timeout=self.timeout, transport=self._transport)

    @staticmethod
    def _headers(telegram_id: str | int) -> dict[str, str]:
        return {TELEGRAM_ID_HEADER: str(telegram_id)}

    @staticmethod
    def _unwrap(response: ServiceResponse, model: type[BaseModel], operation: str) -> Any:
        if not response.success:
            raise CoachApiError(f"{operation} failed: {response.error}", status_code=response.status_code)
        try:
            return model.model_validate(response.data)
        except ValidationError as exc:
            logger.error("coach_api_response_invalid", operation=operation, errors=exc.error_count())
            raise CoachApiError(f"{operation} returned an unexpected payload", response.status_code) from exc

    async def register_user(
        self,
        telegram_id: str | int,
        username: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> RegisteredUser:
        body = {
            "telegram_id": str(telegram_id),
            "username": username,
            "first_name": first_name,
            "last_name": last_name,
        }
        async with self._client() as client:
            response = await client.post("/api/users", json=body, operation="register_user")
        return self._unwrap(response, RegisteredUser, "register_user")

    async def get_stats(self, telegram_id: str | int) -> UserStats:
        async with self._client() as client:
            response = await client.get("/api/stats", headers=self._headers(telegram_id), operation="get_stats")
        return self._unwrap(response, UserStats, "get_stats")

    async def get_week_plan(self, telegram_id: str | int, week: str | None = None) -> WeekPlan:
        params = {"week": week} if week else None
        async with self._client() as client:
            response = await client.get(
                "/api/week-plan",
                headers=self._headers(telegram_id),
                params=params,
                operation="get_week_plan",
            )
        return self._unwrap(response, WeekPlan, "get_week_plan")
