"""Aggregate queries behind the statistics endpoints.

Every function takes the caller's session so that one request runs all of
its reads inside a single transaction. Grouped queries return one scalar
per entity; entities with no rows in the aggregated table count as 0.

No ranking here - that belongs in services.ranking.
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from isupipe.models import (
    Livecomment,
    LivecommentReport,
    Livestream,
    LivestreamViewersHistory,
    Reaction,
    User,
)
from isupipe.services.ranking import RankingEntry


async def fetch_user_scores(session: AsyncSession) -> list[RankingEntry]:
    """Score every user: reactions received + tips received on their livestreams.

    Returns:
        One entry per user, keyed by username.
    """
    users = (await session.execute(select(User.id, User.name))).all()

    reactions_query = (
        select(Livestream.user_id, func.count(Reaction.id))
        .join(Reaction, Reaction.livestream_id == Livestream.id)
        .group_by(Livestream.user_id)
    )
    reactions: dict[int, int] = dict((await session.execute(reactions_query)).tuples().all())

    tips_query = (
        select(Livestream.user_id, func.coalesce(func.sum(Livecomment.tip), 0))
        .join(Livecomment, Livecomment.livestream_id == Livestream.id)
        .group_by(Livestream.user_id)
    )
    tips: dict[int, int] = dict((await session.execute(tips_query)).tuples().all())

    return [
        RankingEntry(
            key=user.name,
            score=int(reactions.get(user.id, 0)) + int(tips.get(user.id, 0)),
        )
        for user in users
    ]


async def fetch_livestream_scores(session: AsyncSession) -> list[RankingEntry]:
    """Score every livestream: reactions on it + tips on it.

    Returns:
        One entry per livestream, keyed by livestream id.
    """
    livestream_ids = (await session.execute(select(Livestream.id))).scalars().all()

    reactions_query = (
        select(Reaction.livestream_id, func.count(Reaction.id))
        .group_by(Reaction.livestream_id)
    )
    reactions: dict[int, int] = dict((await session.execute(reactions_query)).tuples().all())

    tips_query = (
        select(Livecomment.livestream_id, func.coalesce(func.sum(Livecomment.tip), 0))
        .group_by(Livecomment.livestream_id)
    )
    tips: dict[int, int] = dict((await session.execute(tips_query)).tuples().all())

    return [
        RankingEntry(
            key=livestream_id,
            score=int(reactions.get(livestream_id, 0)) + int(tips.get(livestream_id, 0)),
        )
        for livestream_id in livestream_ids
    ]


# ============================================================
# Per-user totals (across all of the user's livestreams)
# ============================================================


async def count_user_reactions(session: AsyncSession, user_id: int) -> int:
    query = (
        select(func.count(Reaction.id))
        .join(Livestream, Livestream.id == Reaction.livestream_id)
        .where(Livestream.user_id == user_id)
    )
    return int((await session.execute(query)).scalar() or 0)


async def sum_user_livecomments(session: AsyncSession, user_id: int) -> tuple[int, int]:
    """Count live comments and sum their tips.

    Returns:
        (total_livecomments, total_tip)
    """
    query = (
        select(func.count(Livecomment.id), func.coalesce(func.sum(Livecomment.tip), 0))
        .join(Livestream, Livestream.id == Livecomment.livestream_id)
        .where(Livestream.user_id == user_id)
    )
    count, total_tip = (await session.execute(query)).one()
    return int(count or 0), int(total_tip or 0)


async def count_user_viewers(session: AsyncSession, user_id: int) -> int:
    query = (
        select(func.count(LivestreamViewersHistory.id))
        .join(Livestream, Livestream.id == LivestreamViewersHistory.livestream_id)
        .where(Livestream.user_id == user_id)
    )
    return int((await session.execute(query)).scalar() or 0)


async def find_favorite_emoji(session: AsyncSession, user_id: int) -> str:
    """Most frequent emoji on the user's livestreams.

    Ties go to the name that sorts last. Empty string if there are no reactions.
    """
    query = (
        select(Reaction.emoji_name)
        .join(Livestream, Livestream.id == Reaction.livestream_id)
        .where(Livestream.user_id == user_id)
        .group_by(Reaction.emoji_name)
        .order_by(func.count(Reaction.id).desc(), Reaction.emoji_name.desc())
        .limit(1)
    )
    return (await session.execute(query)).scalar_one_or_none() or ""


# ============================================================
# Per-livestream totals
# ============================================================


async def count_livestream_viewers(session: AsyncSession, livestream_id: int) -> int:
    query = select(func.count(LivestreamViewersHistory.id)).where(
        LivestreamViewersHistory.livestream_id == livestream_id
    )
    return int((await session.execute(query)).scalar() or 0)


async def max_livestream_tip(session: AsyncSession, livestream_id: int) -> int:
    query = select(func.coalesce(func.max(Livecomment.tip), 0)).where(
        Livecomment.livestream_id == livestream_id
    )
    return int((await session.execute(query)).scalar() or 0)


async def count_livestream_reactions(session: AsyncSession, livestream_id: int) -> int:
    query = select(func.count(Reaction.id)).where(Reaction.livestream_id == livestream_id)
    return int((await session.execute(query)).scalar() or 0)


async def count_livestream_reports(session: AsyncSession, livestream_id: int) -> int:
    query = select(func.count(LivecommentReport.id)).where(
        LivecommentReport.livestream_id == livestream_id
    )
    return int((await session.execute(query)).scalar() or 0)
