from coach_shared import MuscleGroup
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from .. import schemas
from ..database import get_db
from ..dependencies import get_current_user
from ..models import User
from ..services.exercise_service import ExerciseService

router = APIRouter(prefix="/exercises", tags=["exercises"])


def get_exercise_service(
    db: AsyncSession = Depends(get_db), user: User = Depends(get_current_user)
) -> ExerciseService:
    return ExerciseService(db, user)


@router.get("", response_model=list[schemas.ExerciseResponse])
async def list_exercises(
    muscle_group: MuscleGroup | None = Query(None),
    exercise_service: ExerciseService = Depends(get_exercise_service),
):
    return await exercise_service.list_visible(muscle_group)


@router.post("", response_model=schemas.ExerciseResponse, status_code=status.HTTP_201_CREATED)
async def create_exercise(
    payload: schemas.ExerciseCreate,
    exercise_service: ExerciseService = Depends(get_exercise_service),
):
    return await exercise_service.create_custom(payload)


@router.get("/{exercise_id}/progress", response_model=schemas.ExerciseProgressResponse)
async def get_exercise_progress(
    exercise_id: int,
    exercise_service: ExerciseService = Depends(get_exercise_service),
):
    return await exercise_service.progress(exercise_id)
