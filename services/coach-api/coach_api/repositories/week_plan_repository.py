from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import WeekPlan


class WeekPlanRepository:
    @staticmethod
    async def get(db: AsyncSession, user_id: int, week: str) -> WeekPlan | None:
        query = (
            select(WeekPlan)
            .where(WeekPlan.user_id == user_id, WeekPlan.week == week)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.scalars().first()

    @staticmethod
    def add(db: AsyncSession, user_id: int, week: str) -> WeekPlan:
        plan = WeekPlan(user_id=user_id, week=week)
        db.add(plan)
        return plan
