import datetime as dt

from coach_shared import current_week, parse_week_key
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from .. import schemas
from ..database import get_db
from ..dependencies import get_current_user
from ..models import User
from ..services.week_plan_service import WeekPlanService, build_week_plan_response

router = APIRouter(prefix="/week-plan", tags=["week-plan"])


def get_week_plan_service(
    db: AsyncSession = Depends(get_db), user: User = Depends(get_current_user)
) -> WeekPlanService:
    return WeekPlanService(db, user)


@router.get("", response_model=schemas.WeekPlanResponse)
async def get_week_plan(
    week: str | None = Query(None, description="Week key YYYY-WW, current week when omitted"),
    week_plan_service: WeekPlanService = Depends(get_week_plan_service),
):
    week = week or current_week()
    try:
        parse_week_key(week)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))
    plan = await week_plan_service.get_or_create(week)
    return build_week_plan_response(plan)


@router.put("", response_model=schemas.WeekPlanResponse)
async def update_week_plan(
    payload: schemas.WeekPlanUpdate,
    week_plan_service: WeekPlanService = Depends(get_week_plan_service),
):
    plan = await week_plan_service.update(payload)
    return build_week_plan_response(plan)


@router.get("/today", response_model=schemas.TodayPlanResponse)
async def get_today_plan(
    date: dt.date | None = Query(None),
    week_plan_service: WeekPlanService = Depends(get_week_plan_service),
):
    return await week_plan_service.today(date)
