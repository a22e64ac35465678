import json

import httpx
import pytest

from coach_bot.api_client import CoachApiClient, CoachApiError


def _client(handler) -> CoachApiClient:
    return CoachApiClient("http://coach-api.test", transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_register_user_posts_profile():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            201,
            json={
                "id": 1,
                "telegram_id": "42",
                "username": "marat",
                "first_name": "Марат",
                "last_name": None,
                "stats": {"current_streak": 0, "best_streak": 0, "total_workouts": 0, "badges": []},
            },
        )

    user = await _client(handler).register_user(42, username="marat", first_name="Марат")
    assert seen == {
        "method": "POST",
        "path": "/api/users",
        "body": {"telegram_id": "42", "username": "marat", "first_name": "Марат", "last_name": None},
    }
    assert user.telegram_id == "42"
    assert user.stats.total_workouts == 0


@pytest.mark.asyncio
async def test_get_stats_sends_identity_header():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["X-Telegram-Id"] == "42"
        return httpx.Response(200, json={"current_streak": 3, "best_streak": 5, "total_workouts": 11, "badges": []})

    stats = await _client(handler).get_stats(42)
    assert (stats.current_streak, stats.best_streak, stats.total_workouts) == (3, 5, 11)


@pytest.mark.asyncio
async def test_get_week_plan_passes_week():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["week"] == "2024-01"
        return httpx.Response(200, json={"id": 7, "week": "2024-01", "monday": "legs", "days": []})

    plan = await _client(handler).get_week_plan(42, "2024-01")
    assert plan.week == "2024-01"
    assert plan.monday == "legs"
    assert plan.tuesday is None


@pytest.mark.asyncio
async def test_error_status_raises_coach_api_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"detail": "missing", "code": "user_not_found"})

    with pytest.raises(CoachApiError) as exc_info:
        await _client(handler).get_stats(1)
    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_transport_failure_raises_coach_api_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(CoachApiError) as exc_info:
        await _client(handler).get_stats(1)
    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_unexpected_payload_raises_coach_api_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"week": 5, "monday": "neck"})

    with pytest.raises(CoachApiError):
        await _client(handler).get_week_plan(1)
