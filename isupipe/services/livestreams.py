"""Livestream lookup services: streamer theme and tag search."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from isupipe import models, schemas
from isupipe.services.errors import DataAccessError, NotFoundError, ServiceError
from isupipe.services.fill import fill_livestreams
from isupipe.services.tag_cache import TagCache
from isupipe.stores.postgres import get_session

logger = logging.getLogger("uvicorn.error")


async def get_streamer_theme(username: str) -> schemas.Theme:
    """Get the theme of the user called `username`.

    Raises:
        NotFoundError: Unknown username.
        ServiceError: The user has no theme row.
    """
    try:
        async with get_session() as session:
            user_id = (
                await session.execute(select(models.User.id).where(models.User.name == username))
            ).scalar_one_or_none()
            if user_id is None:
                raise NotFoundError(
                    "not found user that has the given username",
                    detail={"username": username},
                )

            theme = (
                await session.execute(select(models.Theme).where(models.Theme.user_id == user_id))
            ).scalar_one_or_none()
            if theme is None:
                raise ServiceError("failed to get user theme", detail={"username": username})

            return schemas.Theme(id=theme.id, dark_mode=theme.dark_mode)
    except SQLAlchemyError as e:
        logger.exception("Failed to get user theme")
        raise DataAccessError(f"failed to get user theme: {e}") from e


async def search_livestreams_by_tag(
    tag_name: str,
    tag_cache: TagCache,
    limit: int | None = None,
) -> list[schemas.Livestream]:
    """Livestreams carrying the tag called `tag_name`, newest first.

    An unknown tag name yields an empty list without touching the database.
    """
    tag_id = tag_cache.lookup_by_name(tag_name)
    if tag_id is None:
        return []

    query = (
        select(models.Livestream)
        .join(models.LivestreamTag, models.LivestreamTag.livestream_id == models.Livestream.id)
        .where(models.LivestreamTag.tag_id == tag_id)
        .order_by(models.Livestream.id.desc())
    )
    if limit is not None:
        query = query.limit(limit)

    try:
        async with get_session() as session:
            rows = (await session.execute(query)).scalars().unique().all()
            filled = await fill_livestreams(session, rows, tag_cache)
            return [filled[row.id] for row in rows]
    except SQLAlchemyError as e:
        logger.exception("Failed to search livestreams")
        raise DataAccessError(f"failed to search livestreams: {e}") from e
