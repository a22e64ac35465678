from __future__ import annotations

import datetime as dt

import structlog
from coach_shared import current_week, muscle_group_label, today_slot, week_days
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import User, WeekPlan
from ..repositories import WeekPlanRepository
from ..schemas import TodayPlanResponse, WeekPlanResponse, WeekPlanUpdate

logger = structlog.get_logger(__name__)


def build_week_plan_response(plan: WeekPlan) -> WeekPlanResponse:
    response = WeekPlanResponse.model_validate(plan)
    response.days = week_days(plan.week)
    return response


class WeekPlanService:
    def __init__(self, db: AsyncSession, user: User):
        self.db = db
        self.user_id = user.id

    async def get_or_create(self, week: str) -> WeekPlan:
        plan = await WeekPlanRepository.get(self.db, self.user_id, week)
        if plan is not None:
            return plan

        WeekPlanRepository.add(self.db, self.user_id, week)
        try:
            await self.db.commit()
            logger.info("week_plan_created", user_id=self.user_id, week=week)
        except IntegrityError:
            await self.db.rollback()
            logger.info("week_plan_create_conflict", user_id=self.user_id, week=week)
        return await WeekPlanRepository.get(self.db, self.user_id, week)

    async def update(self, payload: WeekPlanUpdate) -> WeekPlan:
        plan = await self.get_or_create(payload.week)
        updates = payload.day_updates()
        if not updates:
            return plan

        for day, muscle_group in updates.items():
            setattr(plan, day, muscle_group)
        await self.db.commit()
        logger.info(
            "week_plan_updated",
            user_id=self.user_id,
            week=payload.week,
            days={day: (value.value if value else None) for day, value in updates.items()},
        )
        return await WeekPlanRepository.get(self.db, self.user_id, payload.week)

    async def today(self, day: dt.date | None = None) -> TodayPlanResponse:
        day = day or dt.date.today()
        week = current_week(day)
        slot = today_slot(day)
        plan = await WeekPlanRepository.get(self.db, self.user_id, week)
        muscle_group = getattr(plan, slot) if plan is not None else None
        return TodayPlanResponse(
            date=day,
            week=week,
            day=slot,
            muscle_group=muscle_group,
            label=muscle_group_label(muscle_group) if muscle_group else None,
        )
