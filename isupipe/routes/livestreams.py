"""Livestream endpoints.

GET  /api/livestream/{livestream_id}/reaction    - reactions, newest first
POST /api/livestream/{livestream_id}/reaction    - add a reaction
GET  /api/livestream/{livestream_id}/statistics  - livestream rank and totals
"""

from fastapi import APIRouter, Depends, Path, Query, status

from isupipe.routes.deps import get_current_user_id, get_tag_cache
from isupipe.schemas import LivestreamStatistics, PostReactionRequest, Reaction
from isupipe.services.errors import InvalidRequestError
from isupipe.services.reactions import list_reactions, post_reaction
from isupipe.services.statistics import get_livestream_statistics
from isupipe.services.tag_cache import TagCache
from isupipe.settings import get_settings

router = APIRouter()


@router.get("/livestream/{livestream_id}/reaction", response_model=list[Reaction])
async def get_reactions(
    livestream_id: int = Path(description="Livestream ID"),
    limit: int | None = Query(default=None, ge=1, description="Maximum number of reactions"),
    tag_cache: TagCache = Depends(get_tag_cache),
    _user_id: int = Depends(get_current_user_id),
) -> list[Reaction]:
    max_limit = get_settings().reaction_list_max_limit
    if limit is not None and limit > max_limit:
        raise InvalidRequestError(
            f"limit query parameter must be <= {max_limit}",
            detail={"limit": limit},
        )
    return await list_reactions(livestream_id, tag_cache, limit=limit)


@router.post(
    "/livestream/{livestream_id}/reaction",
    response_model=Reaction,
    status_code=status.HTTP_201_CREATED,
)
async def create_reaction(
    request: PostReactionRequest,
    livestream_id: int = Path(description="Livestream ID"),
    tag_cache: TagCache = Depends(get_tag_cache),
    user_id: int = Depends(get_current_user_id),
) -> Reaction:
    return await post_reaction(
        user_id=user_id,
        livestream_id=livestream_id,
        emoji_name=request.emoji_name,
        tag_cache=tag_cache,
    )


@router.get("/livestream/{livestream_id}/statistics", response_model=LivestreamStatistics)
async def get_statistics(
    livestream_id: int = Path(description="Livestream ID"),
    _user_id: int = Depends(get_current_user_id),
) -> LivestreamStatistics:
    """Get a livestream's rank (1 = highest reactions + tips) and totals."""
    return await get_livestream_statistics(livestream_id)
