import structlog
from aiogram import F, Router
from aiogram.filters import Command, CommandStart
from aiogram.types import Message
from coach_shared import StatsUpdateEvent, WorkoutCompletedEvent, current_week, parse_web_app_event

from . import messages
from .api_client import CoachApiClient, CoachApiError
from .config import Settings
from .keyboards import web_app_keyboard

logger = structlog.get_logger(__name__)

router = Router(name="coach")


@router.message(CommandStart())
async def handle_start(message: Message, settings: Settings, api_client: CoachApiClient):
    user = message.from_user
    if user is None:
        return

    try:
        await api_client.register_user(
            user.id,
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
        )
        logger.info("bot_user_registered", telegram_id=user.id)
    except CoachApiError as exc:
        logger.error("bot_user_register_failed", telegram_id=user.id, error=str(exc), status_code=exc.status_code)

    await message.answer(
        messages.start_text(user.first_name),
        reply_markup=web_app_keyboard(messages.START_BUTTON, settings.PUBLIC_WEBAPP_URL),
    )


@router.message(Command("plan"))
async def handle_plan(message: Message, settings: Settings):
    await message.answer(
        messages.PLAN_TEXT,
        reply_markup=web_app_keyboard(messages.PLAN_BUTTON, settings.PUBLIC_WEBAPP_URL),
    )


@router.message(Command("help"))
async def handle_help(message: Message, settings: Settings):
    await message.answer(
        messages.HELP_TEXT,
        reply_markup=web_app_keyboard(messages.OPEN_APP_BUTTON, settings.PUBLIC_WEBAPP_URL),
    )


@router.message(Command("week"))
async def handle_week(message: Message, settings: Settings, api_client: CoachApiClient):
    user = message.from_user
    if user is None:
        return

    keyboard = web_app_keyboard(messages.OPEN_APP_BUTTON, settings.PUBLIC_WEBAPP_URL)
    try:
        plan = await api_client.get_week_plan(user.id, current_week())
    except CoachApiError as exc:
        logger.warning("bot_week_plan_failed", telegram_id=user.id, error=str(exc), status_code=exc.status_code)
        await message.answer(messages.WEEK_PLAN_UNAVAILABLE_TEXT, reply_markup=keyboard)
        return

    await message.answer(messages.week_plan_text(plan), reply_markup=keyboard)


@router.message(F.web_app_data)
async def handle_web_app_data(message: Message, settings: Settings):
    try:
        event = parse_web_app_event(message.web_app_data.data)
    except ValueError as exc:
        logger.warning("bot_web_app_data_invalid", error=str(exc))
        await message.answer(messages.WEB_APP_DATA_ERROR_TEXT)
        return

    logger.info("bot_web_app_event", event_type=event.type)
    if isinstance(event, WorkoutCompletedEvent):
        await message.answer(
            messages.workout_completed_text(event.payload),
            reply_markup=web_app_keyboard(messages.HISTORY_BUTTON, settings.history_url),
        )
    elif isinstance(event, StatsUpdateEvent):
        await message.answer(messages.stats_update_text(event.payload))


@router.message(F.text.startswith("/"))
async def handle_unknown_command(message: Message, settings: Settings):
    await message.answer(
        messages.UNKNOWN_COMMAND_TEXT,
        reply_markup=web_app_keyboard(messages.OPEN_APP_BUTTON, settings.PUBLIC_WEBAPP_URL),
    )
