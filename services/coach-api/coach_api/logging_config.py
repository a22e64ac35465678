from backend_common.logging import configure_logging as _configure_logging
from sentry_sdk.integrations.fastapi import FastApiIntegration


def configure_logging() -> None:
    _configure_logging("coach-api", extra_sentry_integrations=[FastApiIntegration()])
