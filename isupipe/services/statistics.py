"""Statistics service for users (streamers) and livestreams.

Flow (one transaction per call):
1. Resolve the target (400 if it doesn't exist, as the public API always has)
2. Score every entity of the same kind and rank the target
3. Collect the target's own totals
4. Assemble the response record

Any SQLAlchemy failure rolls the transaction back and surfaces as
DataAccessError; nothing is retried.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from isupipe.models import Livestream, User
from isupipe.schemas import LivestreamStatistics, UserStatistics
from isupipe.services import aggregates
from isupipe.services.errors import DataAccessError, NotFoundError
from isupipe.services.ranking import compute_rank
from isupipe.stores.postgres import get_session

logger = logging.getLogger("uvicorn.error")


async def get_user_statistics(username: str) -> UserStatistics:
    """Get ranking and totals for a streamer.

    Args:
        username: Streamer's login name.

    Raises:
        NotFoundError: No user has that name (HTTP 400).
        DataAccessError: A query failed.
    """
    try:
        async with get_session() as session:
            user_id = (
                await session.execute(select(User.id).where(User.name == username))
            ).scalar_one_or_none()
            if user_id is None:
                raise NotFoundError(
                    "not found user that has the given username",
                    detail={"username": username},
                    status_code=400,
                )

            entries = await aggregates.fetch_user_scores(session)
            rank = compute_rank(entries, username)

            total_reactions = await aggregates.count_user_reactions(session, user_id)
            total_livecomments, total_tip = await aggregates.sum_user_livecomments(session, user_id)
            viewers_count = await aggregates.count_user_viewers(session, user_id)
            favorite_emoji = await aggregates.find_favorite_emoji(session, user_id)
    except SQLAlchemyError as e:
        logger.exception("User statistics query failed")
        raise DataAccessError(f"failed to get user statistics: {e}") from e

    return UserStatistics(
        rank=rank,
        viewers_count=viewers_count,
        total_reactions=total_reactions,
        total_livecomments=total_livecomments,
        total_tip=total_tip,
        favorite_emoji=favorite_emoji,
    )


async def get_livestream_statistics(livestream_id: int) -> LivestreamStatistics:
    """Get ranking and totals for a livestream.

    Raises:
        NotFoundError: No such livestream (HTTP 400).
        DataAccessError: A query failed.
    """
    try:
        async with get_session() as session:
            exists = (
                await session.execute(select(Livestream.id).where(Livestream.id == livestream_id))
            ).scalar_one_or_none()
            if exists is None:
                raise NotFoundError(
                    "cannot get stats of not found livestream",
                    detail={"livestream_id": livestream_id},
                    status_code=400,
                )

            entries = await aggregates.fetch_livestream_scores(session)
            rank = compute_rank(entries, livestream_id)

            viewers_count = await aggregates.count_livestream_viewers(session, livestream_id)
            max_tip = await aggregates.max_livestream_tip(session, livestream_id)
            total_reactions = await aggregates.count_livestream_reactions(session, livestream_id)
            total_reports = await aggregates.count_livestream_reports(session, livestream_id)
    except SQLAlchemyError as e:
        logger.exception("Livestream statistics query failed")
        raise DataAccessError(f"failed to get livestream statistics: {e}") from e

    return LivestreamStatistics(
        rank=rank,
        viewers_count=viewers_count,
        total_reactions=total_reactions,
        total_reports=total_reports,
        max_tip=max_tip,
    )
