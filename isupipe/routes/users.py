"""User endpoints.

GET /api/user/{username}/theme       - streamer theme
GET /api/user/{username}/statistics  - streamer rank and totals
"""

from fastapi import APIRouter, Depends, Path

from isupipe.routes.deps import get_current_user_id
from isupipe.schemas import Theme, UserStatistics
from isupipe.services.livestreams import get_streamer_theme
from isupipe.services.statistics import get_user_statistics

router = APIRouter()


@router.get("/user/{username}/theme", response_model=Theme)
async def get_theme(
    username: str = Path(min_length=1, max_length=255, description="User login name"),
    _user_id: int = Depends(get_current_user_id),
) -> Theme:
    return await get_streamer_theme(username)


@router.get("/user/{username}/statistics", response_model=UserStatistics)
async def get_statistics(
    username: str = Path(min_length=1, max_length=255, description="User login name"),
    _user_id: int = Depends(get_current_user_id),
) -> UserStatistics:
    """Get a streamer's rank (1 = highest reactions + tips) and totals."""
    return await get_user_statistics(username)
