"""Redis client utilities for coach-api."""

from __future__ import annotations

from typing import Optional

import structlog
from backend_common.cache import CacheHelper, CacheMetrics
from coach_shared import MuscleGroup
from redis.asyncio import Redis

from .config import get_settings
from .metrics import EXERCISE_CACHE_ERRORS_TOTAL, EXERCISE_CACHE_HITS_TOTAL, EXERCISE_CACHE_MISSES_TOTAL

logger = structlog.get_logger(__name__)

redis_client: Optional[Redis] = None


def exercise_list_key(user_id: int, muscle_group: str | None = None) -> str:
    suffix = muscle_group if muscle_group else "all"
    return f"coach:exercises:{user_id}:{suffix}"


async def init_redis() -> None:
    global redis_client

    url = get_settings().COACH_REDIS_URL
    if not url:
        logger.info("coach_redis_disabled")
        return

    try:
        redis_client = Redis.from_url(
            url,
            encoding="utf-8",
            decode_responses=True,
            health_check_interval=30,
        )
        await redis_client.ping()
        logger.info("coach_redis_connected")
    except Exception as exc:
        logger.error("coach_redis_connection_failed", error=str(exc))
        redis_client = None


async def get_redis() -> Optional[Redis]:
    return redis_client


async def close_redis() -> None:
    global redis_client

    if redis_client is None:
        return

    try:
        await redis_client.aclose()
        logger.info("coach_redis_closed")
    except Exception as exc:
        logger.warning("coach_redis_close_failed", error=str(exc))
    finally:
        redis_client = None


exercise_cache = CacheHelper(
    get_redis=get_redis,
    metrics=CacheMetrics(
        hits=EXERCISE_CACHE_HITS_TOTAL,
        misses=EXERCISE_CACHE_MISSES_TOTAL,
        errors=EXERCISE_CACHE_ERRORS_TOTAL,
    ),
    default_ttl=get_settings().COACH_EXERCISES_CACHE_TTL_SECONDS,
)


async def invalidate_exercise_cache(user_id: int) -> None:
    """Drop every cached exercise listing of the user, filtered or not."""
    keys = [exercise_list_key(user_id)] + [exercise_list_key(user_id, group.value) for group in MuscleGroup]
    await exercise_cache.delete(*keys)
