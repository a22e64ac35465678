from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models import User, UserStats


class UserRepository:
    @staticmethod
    async def get_by_telegram_id(db: AsyncSession, telegram_id: str) -> User | None:
        query = (
            select(User)
            .options(selectinload(User.stats))
            .where(User.telegram_id == telegram_id)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.scalars().first()

    @staticmethod
    def add_user(db: AsyncSession, user_data: dict) -> User:
        user = User(**user_data)
        user.stats = UserStats(current_streak=0, best_streak=0, total_workouts=0, badges=[])
        db.add(user)
        return user

    @staticmethod
    async def get_stats(db: AsyncSession, user_id: int, for_update: bool = False) -> UserStats | None:
        query = select(UserStats).where(UserStats.user_id == user_id).execution_options(populate_existing=True)
        if for_update:
            query = query.with_for_update()
        result = await db.execute(query)
        return result.scalars().first()
