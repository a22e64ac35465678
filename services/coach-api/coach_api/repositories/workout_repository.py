import datetime as dt

from coach_shared import MuscleGroup
from sqlalchemy import false, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload, with_loader_criteria

from ..models import Workout, WorkoutSet


def _with_sets(query, exercise_id: int | None = None):
    query = query.options(selectinload(Workout.sets).joinedload(WorkoutSet.exercise))
    if exercise_id is not None:
        query = query.options(with_loader_criteria(WorkoutSet, WorkoutSet.exercise_id == exercise_id))
    return query.execution_options(populate_existing=True)


class WorkoutRepository:
    @staticmethod
    async def list_for_user(
        db: AsyncSession,
        user_id: int,
        date: dt.date | None = None,
        exercise_id: int | None = None,
        completed: bool | None = None,
    ) -> list[Workout]:
        query = select(Workout).where(Workout.user_id == user_id)
        if date is not None:
            query = query.where(Workout.date == date)
        if completed is not None:
            query = query.where(Workout.completed.is_(completed))
        if exercise_id is not None:
            query = query.where(Workout.sets.any(WorkoutSet.exercise_id == exercise_id))
        query = _with_sets(query, exercise_id).order_by(Workout.created_at.desc(), Workout.id.desc())
        result = await db.execute(query)
        return list(result.scalars().unique().all())

    @staticmethod
    async def get(db: AsyncSession, workout_id: int, user_id: int) -> Workout | None:
        query = _with_sets(select(Workout).where(Workout.id == workout_id, Workout.user_id == user_id))
        result = await db.execute(query)
        return result.scalars().first()

    @staticmethod
    async def get_by_natural_key(
        db: AsyncSession, user_id: int, date: dt.date, muscle_group: MuscleGroup
    ) -> Workout | None:
        query = _with_sets(
            select(Workout).where(
                Workout.user_id == user_id,
                Workout.date == date,
                Workout.muscle_group == muscle_group,
            )
        )
        result = await db.execute(query)
        return result.scalars().first()

    @staticmethod
    def add(db: AsyncSession, user_id: int, date: dt.date, muscle_group: MuscleGroup) -> Workout:
        workout = Workout(user_id=user_id, date=date, muscle_group=muscle_group, completed=False)
        db.add(workout)
        return workout

    @staticmethod
    def add_set(db: AsyncSession, set_data: dict) -> WorkoutSet:
        workout_set = WorkoutSet(**set_data)
        db.add(workout_set)
        return workout_set

    @staticmethod
    async def mark_completed(
        db: AsyncSession,
        workout_id: int,
        user_id: int,
        duration: int | None,
        completed_at: dt.datetime,
    ) -> bool:
        """Flip ``completed`` to true only if it is still false; returns whether this call did it."""
        stmt = (
            update(Workout)
            .where(
                Workout.id == workout_id,
                Workout.user_id == user_id,
                Workout.completed == false(),
            )
            .values(completed=True, duration=duration, completed_at=completed_at)
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        return result.rowcount == 1

    @staticmethod
    async def lock_open(db: AsyncSession, workout_id: int, user_id: int) -> bool:
        """Write-lock the workout row if it is still open; returns False once it is completed.

        Held until the caller commits, so a concurrent ``mark_completed`` waits for it.
        """
        stmt = (
            update(Workout)
            .where(
                Workout.id == workout_id,
                Workout.user_id == user_id,
                Workout.completed == false(),
            )
            .values(completed=Workout.completed)
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        return result.rowcount == 1
