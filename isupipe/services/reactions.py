"""Reaction service.

GET  /api/livestream/{id}/reaction - newest first, optional limit
POST /api/livestream/{id}/reaction - record a reaction for the session user
"""

import logging
import time

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from isupipe import models, schemas
from isupipe.services.errors import DataAccessError, NotFoundError
from isupipe.services.fill import fill_reactions
from isupipe.services.tag_cache import TagCache
from isupipe.stores.postgres import get_session

logger = logging.getLogger("uvicorn.error")


async def list_reactions(
    livestream_id: int,
    tag_cache: TagCache,
    limit: int | None = None,
) -> list[schemas.Reaction]:
    """List reactions on a livestream, newest first.

    Args:
        livestream_id: Livestream to read.
        tag_cache: Cache used to resolve livestream tags.
        limit: Maximum number of reactions, or None for all.
    """
    query = (
        select(models.Reaction)
        .where(models.Reaction.livestream_id == livestream_id)
        .order_by(models.Reaction.created_at.desc(), models.Reaction.id.desc())
    )
    if limit is not None:
        query = query.limit(limit)

    try:
        async with get_session() as session:
            rows = (await session.execute(query)).scalars().all()
            return await fill_reactions(session, rows, tag_cache)
    except SQLAlchemyError as e:
        logger.exception("Failed to list reactions")
        raise DataAccessError(f"failed to get reactions: {e}") from e


async def post_reaction(
    *,
    user_id: int,
    livestream_id: int,
    emoji_name: str,
    tag_cache: TagCache,
) -> schemas.Reaction:
    """Insert a reaction and return it hydrated.

    Raises:
        NotFoundError: The livestream doesn't exist.
        DataAccessError: The insert failed.
    """
    try:
        async with get_session() as session:
            exists = (
                await session.execute(
                    select(models.Livestream.id).where(models.Livestream.id == livestream_id)
                )
            ).scalar_one_or_none()
            if exists is None:
                raise NotFoundError(
                    "livestream not found",
                    detail={"livestream_id": livestream_id},
                )

            reaction = models.Reaction(
                user_id=user_id,
                livestream_id=livestream_id,
                emoji_name=emoji_name,
                created_at=int(time.time()),
            )
            session.add(reaction)
            await session.flush()

            filled = await fill_reactions(session, [reaction], tag_cache)
            return filled[0]
    except SQLAlchemyError as e:
        logger.exception("Failed to insert reaction")
        raise DataAccessError(f"failed to insert reaction: {e}") from e
