from __future__ import annotations

import math

import structlog
from coach_shared import DEFAULT_EXERCISES, MuscleGroup
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import ExerciseNotFoundException
from ..metrics import CUSTOM_EXERCISES_CREATED_TOTAL
from ..models import User
from ..redis_client import exercise_cache, exercise_list_key, invalidate_exercise_cache
from ..repositories import ExerciseRepository
from ..schemas import ExerciseCreate, ExerciseProgressResponse, ExerciseResponse

logger = structlog.get_logger(__name__)


async def ensure_default_exercises(db: AsyncSession) -> int:
    """Insert the global default exercises that are missing; returns how many were added."""
    existing = await ExerciseRepository.existing_default_slugs(db)
    missing = [item for item in DEFAULT_EXERCISES if item.slug not in existing]
    if not missing:
        return 0

    for item in missing:
        ExerciseRepository.add_exercise(
            db,
            {
                "slug": item.slug,
                "name": item.name,
                "muscle_group": item.muscle_group,
                "is_custom": False,
                "user_id": None,
            },
        )
    try:
        await db.commit()
    except IntegrityError:
        # another writer seeded them first
        await db.rollback()
        logger.info("default_exercises_seed_conflict")
        return 0

    logger.info("default_exercises_seeded", count=len(missing))
    return len(missing)


class ExerciseService:
    def __init__(self, db: AsyncSession, user: User):
        self.db = db
        self.user_id = user.id
        self._cache = exercise_cache

    async def list_visible(self, muscle_group: MuscleGroup | None = None) -> list[ExerciseResponse]:
        key = exercise_list_key(self.user_id, muscle_group.value if muscle_group else None)
        cached = await self._cache.get(key)
        if cached is not None:
            return [ExerciseResponse.model_validate(item) for item in cached]

        items = await ExerciseRepository.list_visible(self.db, self.user_id, muscle_group)
        exercises = [ExerciseResponse.model_validate(item) for item in items]
        await self._cache.set(key, [item.model_dump(mode="json") for item in exercises])
        return exercises

    async def create_custom(self, payload: ExerciseCreate) -> ExerciseResponse:
        exercise = ExerciseRepository.add_exercise(
            self.db,
            {
                "name": payload.name,
                "muscle_group": payload.muscle_group,
                "is_custom": True,
                "user_id": self.user_id,
            },
        )
        await self.db.commit()
        await self.db.refresh(exercise)
        await invalidate_exercise_cache(self.user_id)

        try:
            CUSTOM_EXERCISES_CREATED_TOTAL.labels(muscle_group=payload.muscle_group.value).inc()
        except Exception:
            logger.exception("Failed to increment CUSTOM_EXERCISES_CREATED_TOTAL")

        logger.info(
            "custom_exercise_created",
            user_id=self.user_id,
            exercise_id=exercise.id,
            muscle_group=payload.muscle_group.value,
        )
        return ExerciseResponse.model_validate(exercise)

    async def get_visible(self, exercise_id: int):
        exercise = await ExerciseRepository.get_visible(self.db, exercise_id, self.user_id)
        if exercise is None:
            raise ExerciseNotFoundException(exercise_id)
        return exercise

    async def progress(self, exercise_id: int) -> ExerciseProgressResponse:
        await self.get_visible(exercise_id)
        sets = await ExerciseRepository.list_completed_sets(self.db, exercise_id, self.user_id)
        if not sets:
            return ExerciseProgressResponse(exercise_id=exercise_id)

        weights = [s.weight for s in sets if s.weight is not None]
        total_reps = sum(s.reps for s in sets)
        return ExerciseProgressResponse(
            exercise_id=exercise_id,
            max_weight=max(weights) if weights else None,
            total_reps=total_reps,
            # half-up, not banker's rounding
            average_reps=math.floor(total_reps / len(sets) + 0.5),
            total_sets=len(sets),
        )
