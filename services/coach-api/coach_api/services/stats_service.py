from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import UserNotFoundException
from ..models import User
from ..repositories import UserRepository
from ..schemas import StatsResponse


async def get_stats(db: AsyncSession, user: User) -> StatsResponse:
    stats = await UserRepository.get_stats(db, user.id)
    if stats is None:
        raise UserNotFoundException(user.telegram_id)
    return StatsResponse.model_validate(stats)
