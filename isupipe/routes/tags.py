"""Tag endpoints.

GET  /api/tag                 - all tags (served from the in-memory cache)
POST /api/initialize          - rebuild the tag cache from the database
GET  /api/livestream/search   - livestreams carrying a tag

Routers are thin: call services for business logic.
"""

from fastapi import APIRouter, Depends, Query

from isupipe.routes.deps import get_current_user_id, get_tag_cache
from isupipe.schemas import InitializeResponse, Livestream, Tag, TagsResponse
from isupipe.services.livestreams import search_livestreams_by_tag
from isupipe.services.tag_cache import TagCache

router = APIRouter()


@router.get("/tag", response_model=TagsResponse)
async def get_tags(tag_cache: TagCache = Depends(get_tag_cache)) -> TagsResponse:
    return TagsResponse(tags=[Tag(id=t.id, name=t.name) for t in tag_cache.all()])


@router.post("/initialize", response_model=InitializeResponse)
async def initialize(tag_cache: TagCache = Depends(get_tag_cache)) -> InitializeResponse:
    """Reload the tag cache. On failure the previous contents are kept."""
    count = await tag_cache.initialize()
    return InitializeResponse(ok=True, tags=count)


@router.get("/livestream/search", response_model=list[Livestream])
async def search_livestreams(
    tag: str = Query(..., min_length=1, max_length=255, description="Tag name"),
    limit: int | None = Query(default=None, ge=1, le=1000),
    tag_cache: TagCache = Depends(get_tag_cache),
    _user_id: int = Depends(get_current_user_id),
) -> list[Livestream]:
    return await search_livestreams_by_tag(tag, tag_cache, limit=limit)
