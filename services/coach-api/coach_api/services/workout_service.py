from __future__ import annotations

import datetime as dt

import structlog
from coach_shared import (
    MuscleGroup,
    StatsUpdateEvent,
    StatsUpdatePayload,
    WorkoutCompletedEvent,
    WorkoutCompletedPayload,
    muscle_group_label,
)
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import AlreadyCompletedException, ExerciseNotFoundException, WorkoutNotFoundException
from ..metrics import DUPLICATE_COMPLETIONS_TOTAL, WORKOUT_SETS_ADDED_TOTAL, WORKOUTS_COMPLETED_TOTAL
from ..models import User, UserStats, Workout
from ..repositories import ExerciseRepository, UserRepository, WorkoutRepository
from ..schemas import (
    StatsResponse,
    WorkoutCompletionResponse,
    WorkoutCreate,
    WorkoutResponse,
    WorkoutSetCreate,
)
from ..streaks import StatsSnapshot, apply_completion

logger = structlog.get_logger(__name__)


class WorkoutService:
    def __init__(self, db: AsyncSession, user: User):
        self.db = db
        self.user_id = user.id

    async def list_workouts(
        self,
        date: dt.date | None = None,
        exercise_id: int | None = None,
        completed: bool | None = None,
    ) -> list[Workout]:
        return await WorkoutRepository.list_for_user(
            self.db,
            self.user_id,
            date=date,
            exercise_id=exercise_id,
            completed=completed,
        )

    async def get_workout(self, workout_id: int) -> Workout:
        workout = await WorkoutRepository.get(self.db, workout_id, self.user_id)
        if workout is None:
            raise WorkoutNotFoundException(workout_id)
        return workout

    async def get_or_create(self, payload: WorkoutCreate) -> tuple[Workout, bool]:
        """Workout for ``(user, date, muscle_group)``, created on first request."""
        workout = await WorkoutRepository.get_by_natural_key(self.db, self.user_id, payload.date, payload.muscle_group)
        if workout is not None:
            return workout, False

        WorkoutRepository.add(self.db, self.user_id, payload.date, payload.muscle_group)
        created = True
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            created = False
            logger.info(
                "workout_create_conflict",
                user_id=self.user_id,
                date=payload.date.isoformat(),
                muscle_group=payload.muscle_group.value,
            )

        workout = await WorkoutRepository.get_by_natural_key(self.db, self.user_id, payload.date, payload.muscle_group)
        if created:
            logger.info(
                "workout_created",
                user_id=self.user_id,
                workout_id=workout.id,
                date=payload.date.isoformat(),
                muscle_group=payload.muscle_group.value,
            )
        return workout, created

    async def add_set(self, workout_id: int, payload: WorkoutSetCreate):
        """Append a set to an open workout.

        The open check and the insert share one transaction that holds the
        workout row, so a set never lands after ``complete`` has committed.
        """
        workout = await self.get_workout(workout_id)
        if workout.completed:
            raise AlreadyCompletedException(workout_id)
        exercise = await ExerciseRepository.get_visible(self.db, payload.exercise_id, self.user_id)
        if exercise is None:
            raise ExerciseNotFoundException(payload.exercise_id)

        if not await WorkoutRepository.lock_open(self.db, workout_id, self.user_id):
            await self.db.rollback()
            logger.info("workout_set_rejected", user_id=self.user_id, workout_id=workout_id)
            raise AlreadyCompletedException(workout_id)

        workout_set = WorkoutRepository.add_set(self.db, {"workout_id": workout_id, **payload.model_dump()})
        await self.db.commit()

        try:
            WORKOUT_SETS_ADDED_TOTAL.inc()
        except Exception:
            logger.exception("Failed to increment WORKOUT_SETS_ADDED_TOTAL")

        logger.info(
            "workout_set_added",
            user_id=self.user_id,
            workout_id=workout.id,
            set_id=workout_set.id,
            exercise_id=payload.exercise_id,
        )
        workout = await self.get_workout(workout_id)
        return next(s for s in workout.sets if s.id == workout_set.id)

    async def complete(self, workout_id: int, duration: int | None = None) -> WorkoutCompletionResponse:
        """Mark a workout completed and apply the streak update in one transaction.

        The flag flip is a compare-and-set on ``completed = false``, so of two
        concurrent calls exactly one updates the stats; the other gets 409.
        """
        completed_now = await WorkoutRepository.mark_completed(
            self.db,
            workout_id,
            self.user_id,
            duration=duration,
            completed_at=dt.datetime.now(dt.timezone.utc),
        )
        if not completed_now:
            await self.db.rollback()
            await self.get_workout(workout_id)
            try:
                DUPLICATE_COMPLETIONS_TOTAL.inc()
            except Exception:
                logger.exception("Failed to increment DUPLICATE_COMPLETIONS_TOTAL")
            logger.info("workout_completion_rejected", user_id=self.user_id, workout_id=workout_id)
            raise AlreadyCompletedException(workout_id)

        stats = await UserRepository.get_stats(self.db, self.user_id, for_update=True)
        if stats is None:
            stats = UserStats(user_id=self.user_id, current_streak=0, best_streak=0, total_workouts=0, badges=[])
            self.db.add(stats)

        updated = apply_completion(
            StatsSnapshot(
                current_streak=stats.current_streak or 0,
                best_streak=stats.best_streak or 0,
                total_workouts=stats.total_workouts or 0,
            )
        )
        stats.current_streak = updated.current_streak
        stats.best_streak = updated.best_streak
        stats.total_workouts = updated.total_workouts
        await self.db.commit()

        workout = await self.get_workout(workout_id)
        stats = await UserRepository.get_stats(self.db, self.user_id)

        try:
            WORKOUTS_COMPLETED_TOTAL.labels(muscle_group=MuscleGroup(workout.muscle_group).value).inc()
        except Exception:
            logger.exception("Failed to increment WORKOUTS_COMPLETED_TOTAL")

        logger.info(
            "workout_completed",
            user_id=self.user_id,
            workout_id=workout.id,
            duration=duration,
            current_streak=updated.current_streak,
            best_streak=updated.best_streak,
            total_workouts=updated.total_workouts,
        )

        events = [
            WorkoutCompletedEvent(
                payload=WorkoutCompletedPayload(
                    muscle_group_label=muscle_group_label(workout.muscle_group),
                    set_count=len(workout.sets),
                    duration_minutes=workout.duration,
                    date=workout.date,
                )
            ),
            StatsUpdateEvent(
                payload=StatsUpdatePayload(
                    current_streak=updated.current_streak,
                    best_streak=updated.best_streak,
                )
            ),
        ]
        return WorkoutCompletionResponse(
            workout=WorkoutResponse.model_validate(workout),
            stats=StatsResponse.model_validate(stats),
            events=events,
        )
