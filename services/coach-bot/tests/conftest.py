import sys
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

SERVICE_ROOT = Path(__file__).resolve().parents[1]
if str(SERVICE_ROOT) not in sys.path:
    sys.path.insert(0, str(SERVICE_ROOT))


@pytest.fixture()
def settings():
    from coach_bot.config import Settings

    return Settings(
        BOT_TOKEN="123456:TEST",
        PUBLIC_WEBAPP_URL="https://coach.example.com",
        API_BASE_URL="http://coach-api.test",
    )


@pytest.fixture()
def make_message():
    """Stand-in for an aiogram Message: only the attributes the handlers touch."""

    def _make(text: str | None = None, web_app_data: str | None = None, user_id: int = 42, first_name="Марат"):
        return SimpleNamespace(
            text=text,
            from_user=SimpleNamespace(id=user_id, username="marat", first_name=first_name, last_name=None),
            web_app_data=SimpleNamespace(data=web_app_data) if web_app_data is not None else None,
            answer=AsyncMock(),
        )

    return _make
