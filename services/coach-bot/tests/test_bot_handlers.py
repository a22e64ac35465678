import json
from unittest.mock import AsyncMock

import pytest
from coach_shared import current_week

from coach_bot import handlers, messages
from coach_bot.api_client import CoachApiError, WeekPlan
from coach_bot.main import build_dispatcher


def _button_url(call) -> str:
    return call.kwargs["reply_markup"].inline_keyboard[0][0].web_app.url


@pytest.mark.asyncio
async def test_start_registers_user_and_greets(settings, make_message):
    message = make_message("/start")
    api_client = AsyncMock()

    await handlers.handle_start(message, settings=settings, api_client=api_client)

    api_client.register_user.assert_awaited_once_with(42, username="marat", first_name="Марат", last_name=None)
    call = message.answer.await_args
    assert "Привет, Марат!" in call.args[0]
    assert _button_url(call) == "https://coach.example.com"


@pytest.mark.asyncio
async def test_start_still_greets_when_registration_fails(settings, make_message):
    message = make_message("/start")
    api_client = AsyncMock()
    api_client.register_user.side_effect = CoachApiError("down", status_code=503)

    await handlers.handle_start(message, settings=settings, api_client=api_client)

    message.answer.assert_awaited_once()
    assert "Привет" in message.answer.await_args.args[0]


@pytest.mark.asyncio
async def test_plan_replies_with_stub(settings, make_message):
    message = make_message("/plan")
    await handlers.handle_plan(message, settings=settings)
    assert message.answer.await_args.args[0] == messages.PLAN_TEXT


@pytest.mark.asyncio
async def test_help_lists_commands(settings, make_message):
    message = make_message("/help")
    await handlers.handle_help(message, settings=settings)
    text = message.answer.await_args.args[0]
    assert "/start" in text and "/week" in text


@pytest.mark.asyncio
async def test_week_shows_current_plan(settings, make_message):
    message = make_message("/week")
    api_client = AsyncMock()
    api_client.get_week_plan.return_value = WeekPlan(week=current_week(), monday="legs")

    await handlers.handle_week(message, settings=settings, api_client=api_client)

    api_client.get_week_plan.assert_awaited_once_with(42, current_week())
    assert "Пн: Ноги" in message.answer.await_args.args[0]


@pytest.mark.asyncio
async def test_week_reports_unavailable_plan(settings, make_message):
    message = make_message("/week")
    api_client = AsyncMock()
    api_client.get_week_plan.side_effect = CoachApiError("not found", status_code=404)

    await handlers.handle_week(message, settings=settings, api_client=api_client)

    assert message.answer.await_args.args[0] == messages.WEEK_PLAN_UNAVAILABLE_TEXT


@pytest.mark.asyncio
async def test_web_app_workout_completed(settings, make_message):
    data = json.dumps(
        {
            "type": "workout_completed",
            "payload": {"muscleGroupLabel": "Ноги", "setCount": 5, "durationMinutes": 30, "date": "2024-01-01"},
        }
    )
    message = make_message(web_app_data=data)

    await handlers.handle_web_app_data(message, settings=settings)

    call = message.answer.await_args
    assert "Подходов выполнено: 5" in call.args[0]
    assert _button_url(call) == "https://coach.example.com/history"


@pytest.mark.asyncio
async def test_web_app_stats_update(settings, make_message):
    message = make_message(web_app_data='{"type": "stats_update", "payload": {"currentStreak": 30, "bestStreak": 30}}')

    await handlers.handle_web_app_data(message, settings=settings)

    assert "Месяц регулярных тренировок" in message.answer.await_args.args[0]


@pytest.mark.asyncio
async def test_web_app_malformed_data_gets_apology(settings, make_message):
    message = make_message(web_app_data="{broken")

    await handlers.handle_web_app_data(message, settings=settings)

    message.answer.assert_awaited_once_with(messages.WEB_APP_DATA_ERROR_TEXT)


@pytest.mark.asyncio
async def test_unknown_command_hint(settings, make_message):
    message = make_message("/dance")
    await handlers.handle_unknown_command(message, settings=settings)
    assert message.answer.await_args.args[0] == messages.UNKNOWN_COMMAND_TEXT


def test_dispatcher_carries_settings_and_client(settings):
    dp = build_dispatcher(settings)
    assert dp["settings"] is settings
    assert dp["api_client"].base_url == "http://coach-api.test"
    assert "message" in dp.resolve_used_update_types()
