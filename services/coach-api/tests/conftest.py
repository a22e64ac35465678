import os
import sys
import tempfile
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

SERVICE_ROOT = Path(__file__).resolve().parents[1]
if str(SERVICE_ROOT) not in sys.path:
    sys.path.insert(0, str(SERVICE_ROOT))

# coach_api.database reads the URL at import time, so it is pinned before collection
_DB_DIR = Path(tempfile.mkdtemp(prefix="coach_api_tests_"))
TEST_DB_URL = f"sqlite+aiosqlite:///{_DB_DIR / 'test_coach.db'}"
os.environ["COACH_DATABASE_URL"] = TEST_DB_URL
os.environ.pop("COACH_REDIS_URL", None)


def _sync_url() -> str:
    from backend_common.database import ensure_sync_url

    return ensure_sync_url(TEST_DB_URL)


def _alembic_upgrade_head() -> None:
    cfg = Config(str(SERVICE_ROOT / "alembic.ini"))
    # Pin script_location explicitly to avoid picking up wrong migrations when running from repo root
    cfg.set_main_option("script_location", str(SERVICE_ROOT / "alembic"))
    command.upgrade(cfg, "head")


@pytest.fixture(scope="session")
def migrated_db() -> str:
    _alembic_upgrade_head()
    yield TEST_DB_URL


@pytest.fixture(scope="session")
def sync_engine(migrated_db: str):
    engine = create_engine(_sync_url())
    yield engine
    engine.dispose()


@pytest.fixture()
def client(migrated_db: str):
    from coach_api.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture(autouse=True)
def auto_clean_tables(client: TestClient, sync_engine):
    """Fixture to automatically clean all tables after each test."""
    yield
    from coach_api.database import Base

    with sync_engine.connect() as connection:
        transaction = connection.begin()
        for table in reversed(Base.metadata.sorted_tables):
            connection.execute(table.delete())
        transaction.commit()


@pytest.fixture()
def register_user(client: TestClient):
    """Register a user and return the headers that identify them."""

    def _register(telegram_id: str = "1001", **profile) -> dict[str, str]:
        response = client.post("/api/users", json={"telegram_id": telegram_id, **profile})
        assert response.status_code in (200, 201), response.text
        return {"X-Telegram-Id": telegram_id}

    return _register


@pytest.fixture()
def user_headers(register_user) -> dict[str, str]:
    return register_user()
