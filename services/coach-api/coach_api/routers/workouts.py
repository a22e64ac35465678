import datetime as dt

import structlog
from fastapi import APIRouter, Body, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from .. import schemas
from ..database import get_db
from ..dependencies import get_current_user
from ..models import User
from ..services.workout_service import WorkoutService

router = APIRouter(prefix="/workouts", tags=["workouts"])

logger = structlog.get_logger(__name__)


def get_workout_service(db: AsyncSession = Depends(get_db), user: User = Depends(get_current_user)) -> WorkoutService:
    return WorkoutService(db, user)


@router.get("", response_model=list[schemas.WorkoutResponse])
async def list_workouts(
    date: dt.date | None = Query(None),
    exercise_id: int | None = Query(None),
    completed: bool | None = Query(None),
    workout_service: WorkoutService = Depends(get_workout_service),
):
    return await workout_service.list_workouts(date=date, exercise_id=exercise_id, completed=completed)


@router.post("", response_model=schemas.WorkoutResponse, status_code=status.HTTP_200_OK)
async def create_workout(
    payload: schemas.WorkoutCreate,
    response: Response,
    workout_service: WorkoutService = Depends(get_workout_service),
):
    logger.info(
        "workout_create_requested",
        user_id=workout_service.user_id,
        date=payload.date.isoformat(),
        muscle_group=payload.muscle_group.value,
    )
    workout, created = await workout_service.get_or_create(payload)
    if created:
        response.status_code = status.HTTP_201_CREATED
    return workout


@router.get("/{workout_id}", response_model=schemas.WorkoutResponse)
async def get_workout(workout_id: int, workout_service: WorkoutService = Depends(get_workout_service)):
    return await workout_service.get_workout(workout_id)


@router.post("/{workout_id}/sets", response_model=schemas.WorkoutSetResponse, status_code=status.HTTP_201_CREATED)
async def add_workout_set(
    workout_id: int,
    payload: schemas.WorkoutSetCreate,
    workout_service: WorkoutService = Depends(get_workout_service),
):
    return await workout_service.add_set(workout_id, payload)


@router.put("/{workout_id}/complete", response_model=schemas.WorkoutCompletionResponse)
async def complete_workout(
    workout_id: int,
    payload: schemas.WorkoutComplete | None = Body(None),
    workout_service: WorkoutService = Depends(get_workout_service),
):
    duration = payload.duration if payload else None
    logger.info("workout_complete_requested", user_id=workout_service.user_id, workout_id=workout_id)
    return await workout_service.complete(workout_id, duration)
