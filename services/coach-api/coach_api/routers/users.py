import structlog
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from .. import schemas
from ..database import get_db
from ..dependencies import get_current_user
from ..models import User
from ..services.user_service import get_or_create_user

router = APIRouter(prefix="/users", tags=["users"])

logger = structlog.get_logger(__name__)


@router.post("", response_model=schemas.UserResponse, status_code=status.HTTP_200_OK)
async def register_user(payload: schemas.UserCreate, response: Response, db: AsyncSession = Depends(get_db)):
    logger.info("user_register_requested", telegram_id=payload.telegram_id)
    user, created = await get_or_create_user(db, payload)
    if created:
        response.status_code = status.HTTP_201_CREATED
    return schemas.UserResponse.model_validate(user)


@router.get("/me", response_model=schemas.UserResponse)
async def get_me(user: User = Depends(get_current_user)):
    return schemas.UserResponse.model_validate(user)
