from coach_shared import MuscleGroup
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Exercise, Workout, WorkoutSet


def _visible_to(user_id: int):
    return or_(Exercise.user_id.is_(None), Exercise.user_id == user_id)


class ExerciseRepository:
    @staticmethod
    async def list_visible(db: AsyncSession, user_id: int, muscle_group: MuscleGroup | None = None):
        query = select(Exercise).where(_visible_to(user_id))
        if muscle_group is not None:
            query = query.where(Exercise.muscle_group == muscle_group)
        result = await db.execute(query.order_by(Exercise.id))
        return result.scalars().all()

    @staticmethod
    async def get_visible(db: AsyncSession, exercise_id: int, user_id: int) -> Exercise | None:
        query = select(Exercise).where(Exercise.id == exercise_id, _visible_to(user_id))
        result = await db.execute(query)
        return result.scalars().first()

    @staticmethod
    async def existing_default_slugs(db: AsyncSession) -> set[str]:
        result = await db.execute(select(Exercise.slug).where(Exercise.slug.is_not(None)))
        return set(result.scalars().all())

    @staticmethod
    def add_exercise(db: AsyncSession, exercise_data: dict) -> Exercise:
        exercise = Exercise(**exercise_data)
        db.add(exercise)
        return exercise

    @staticmethod
    async def list_completed_sets(db: AsyncSession, exercise_id: int, user_id: int) -> list[WorkoutSet]:
        query = (
            select(WorkoutSet)
            .join(Workout, WorkoutSet.workout_id == Workout.id)
            .where(
                WorkoutSet.exercise_id == exercise_id,
                Workout.user_id == user_id,
                Workout.completed.is_(True),
            )
            .order_by(WorkoutSet.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())
