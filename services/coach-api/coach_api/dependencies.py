from backend_common.dependencies import make_get_telegram_id
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from .database import get_db
from .models import User
from .services.user_service import get_user_by_telegram_id

get_telegram_id = make_get_telegram_id("coach-api")


async def get_current_user(
    db: AsyncSession = Depends(get_db), telegram_id: str = Depends(get_telegram_id)
) -> User:
    """Registered user behind the ``X-Telegram-Id`` header, 404 if unknown."""
    return await get_user_by_telegram_id(db, telegram_id)
