from collections.abc import AsyncGenerator, Callable

from fastapi import Header, HTTPException, status
from sentry_sdk import set_tag, set_user
from sqlalchemy.ext.asyncio import AsyncSession


def make_get_db_async(
    async_session_factory: Callable[[], AsyncSession],
) -> Callable[[], AsyncGenerator[AsyncSession, None]]:
    async def get_db() -> AsyncGenerator[AsyncSession, None]:
        async with async_session_factory() as session:
            yield session

    return get_db


def make_get_telegram_id(
    service_name: str,
    header_alias: str = "X-Telegram-Id",
    error_status_code: int = status.HTTP_401_UNAUTHORIZED,
    error_detail: str = "X-Telegram-Id header required",
) -> Callable[[str | None], str]:
    """Build a dependency returning the caller's Telegram id.

    The id is trusted as supplied by the Mini App; it is only checked for presence.
    """

    def get_telegram_id(x_telegram_id: str | None = Header(default=None, alias=header_alias)) -> str:  # type: ignore[assignment]
        telegram_id = (x_telegram_id or "").strip()
        if not telegram_id:
            raise HTTPException(status_code=error_status_code, detail=error_detail)
        set_user({"id": telegram_id})
        set_tag("service", service_name)
        return telegram_id

    return get_telegram_id
