from urllib.parse import urlparse

import structlog
from backend_common.database import create_async_engine_and_session, ensure_async_url
from backend_common.dependencies import make_get_db_async
from sqlalchemy.orm import DeclarativeBase

from .config import get_settings

logger = structlog.get_logger(__name__)


class Base(DeclarativeBase):
    pass


DATABASE_URL = ensure_async_url(get_settings().COACH_DATABASE_URL)

logger.info("coach_db_configured", scheme=urlparse(DATABASE_URL).scheme)

engine, AsyncSessionLocal = create_async_engine_and_session(
    DATABASE_URL,
    echo=get_settings().COACH_DATABASE_ECHO,
    autoflush=False,
)

get_db = make_get_db_async(AsyncSessionLocal)
