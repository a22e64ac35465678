from backend_common.logging import configure_logging as _configure_logging
from sentry_sdk.integrations.aiohttp import AioHttpIntegration


def configure_logging() -> None:
    _configure_logging("coach-bot", extra_sentry_integrations=[AioHttpIntegration()])
