import asyncio

import structlog
from aiogram import Bot, Dispatcher
from aiogram.webhook.aiohttp_server import SimpleRequestHandler, setup_application
from aiohttp import web

from .api_client import CoachApiClient
from .config import Settings, get_settings
from .handlers import router
from .logging_config import configure_logging

logger = structlog.get_logger(__name__)


def build_dispatcher(settings: Settings) -> Dispatcher:
    dp = Dispatcher()
    dp["settings"] = settings
    dp["api_client"] = CoachApiClient(settings.API_BASE_URL, timeout=settings.API_TIMEOUT_SECONDS)
    dp.include_router(router)
    return dp


async def run_polling(bot: Bot, dp: Dispatcher) -> None:
    await bot.delete_webhook(drop_pending_updates=True)
    logger.info("bot_polling_started")
    try:
        await dp.start_polling(bot, allowed_updates=dp.resolve_used_update_types())
    finally:
        await bot.session.close()


def build_webhook_app(bot: Bot, dp: Dispatcher, settings: Settings) -> web.Application:
    async def on_startup(bot: Bot) -> None:
        url = settings.BOT_WEBHOOK_URL.rstrip("/") + settings.BOT_WEBHOOK_PATH
        await bot.set_webhook(
            url,
            secret_token=settings.BOT_WEBHOOK_SECRET,
            allowed_updates=dp.resolve_used_update_types(),
            drop_pending_updates=True,
        )
        logger.info("bot_webhook_set", path=settings.BOT_WEBHOOK_PATH)

    dp.startup.register(on_startup)

    app = web.Application()
    SimpleRequestHandler(dispatcher=dp, bot=bot, secret_token=settings.BOT_WEBHOOK_SECRET).register(
        app, path=settings.BOT_WEBHOOK_PATH
    )
    setup_application(app, dp, bot=bot)
    return app


def main() -> None:
    configure_logging()
    settings = get_settings()
    bot = Bot(token=settings.BOT_TOKEN)
    dp = build_dispatcher(settings)

    if settings.BOT_WEBHOOK_URL:
        app = build_webhook_app(bot, dp, settings)
        logger.info("bot_webhook_server_starting", host=settings.BOT_WEBHOOK_HOST, port=settings.BOT_WEBHOOK_PORT)
        web.run_app(app, host=settings.BOT_WEBHOOK_HOST, port=settings.BOT_WEBHOOK_PORT)
    else:
        asyncio.run(run_polling(bot, dp))


if __name__ == "__main__":
    main()
