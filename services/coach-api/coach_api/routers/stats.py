from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from .. import schemas
from ..database import get_db
from ..dependencies import get_current_user
from ..models import User
from ..services.stats_service import get_stats

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=schemas.StatsResponse)
async def read_stats(db: AsyncSession = Depends(get_db), user: User = Depends(get_current_user)):
    return await get_stats(db, user)
