from __future__ import annotations

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import UserNotFoundException
from ..metrics import USERS_CREATED_TOTAL
from ..models import User
from ..redis_client import invalidate_exercise_cache
from ..repositories import UserRepository
from ..schemas import UserCreate
from .exercise_service import ensure_default_exercises

logger = structlog.get_logger(__name__)

PROFILE_FIELDS = ("username", "first_name", "last_name")


async def get_user_by_telegram_id(db: AsyncSession, telegram_id: str) -> User:
    user = await UserRepository.get_by_telegram_id(db, telegram_id)
    if user is None:
        raise UserNotFoundException(telegram_id)
    return user


async def _update_profile(db: AsyncSession, user: User, payload: UserCreate) -> User:
    changed = {}
    for field in PROFILE_FIELDS:
        value = getattr(payload, field)
        if value is not None and value != getattr(user, field):
            changed[field] = value
    if not changed:
        return user
    for field, value in changed.items():
        setattr(user, field, value)
    await db.commit()
    logger.info("user_profile_updated", user_id=user.id, fields=sorted(changed))
    return await get_user_by_telegram_id(db, user.telegram_id)


async def get_or_create_user(db: AsyncSession, payload: UserCreate) -> tuple[User, bool]:
    """Return the user for ``payload.telegram_id`` and whether this call created it.

    The user row and its stats row are inserted in one commit. A concurrent
    request that loses the race on the unique telegram id re-reads the winner.
    """
    user = await UserRepository.get_by_telegram_id(db, payload.telegram_id)
    if user is not None:
        return await _update_profile(db, user, payload), False

    UserRepository.add_user(db, payload.model_dump())
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.info("user_create_conflict", telegram_id=payload.telegram_id)
        user = await get_user_by_telegram_id(db, payload.telegram_id)
        return await _update_profile(db, user, payload), False

    user = await get_user_by_telegram_id(db, payload.telegram_id)
    await ensure_default_exercises(db)
    await invalidate_exercise_cache(user.id)

    try:
        USERS_CREATED_TOTAL.inc()
    except Exception:
        logger.exception("Failed to increment USERS_CREATED_TOTAL")

    logger.info("user_created", user_id=user.id, telegram_id=user.telegram_id)
    return user, True
