"""Response assembly for users, livestreams and reactions.

Everything is fetched in batches (`WHERE id IN (...)`) so that hydrating a
page of reactions costs a fixed number of queries. Tag names come from the
in-memory tag cache, not from the database.
"""

from collections.abc import Iterable, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from isupipe import models, schemas
from isupipe.services.errors import ServiceError
from isupipe.services.tag_cache import TagCache


async def fill_users(session: AsyncSession, user_ids: Iterable[int]) -> dict[int, schemas.User]:
    """Build public user records keyed by user id.

    Raises:
        ServiceError: A requested user or its theme is missing.
    """
    ids = sorted(set(user_ids))
    if not ids:
        return {}

    users = (await session.execute(select(models.User).where(models.User.id.in_(ids)))).scalars().all()
    themes = (
        await session.execute(select(models.Theme).where(models.Theme.user_id.in_(ids)))
    ).scalars().all()
    theme_by_user = {theme.user_id: theme for theme in themes}

    filled: dict[int, schemas.User] = {}
    for user in users:
        theme = theme_by_user.get(user.id)
        if theme is None:
            raise ServiceError(f"theme not found for user id {user.id}")
        filled[user.id] = schemas.User(
            id=user.id,
            name=user.name,
            display_name=user.display_name,
            description=user.description,
            theme=schemas.Theme(id=theme.id, dark_mode=theme.dark_mode),
        )

    missing = [user_id for user_id in ids if user_id not in filled]
    if missing:
        raise ServiceError(f"user not found for id {missing[0]}")
    return filled


async def fill_livestreams(
    session: AsyncSession,
    livestreams: Sequence[models.Livestream],
    tag_cache: TagCache,
) -> dict[int, schemas.Livestream]:
    """Build public livestream records (owner + tags) keyed by livestream id."""
    if not livestreams:
        return {}

    owners = await fill_users(session, (ls.user_id for ls in livestreams))

    livestream_ids = [ls.id for ls in livestreams]
    links = (
        await session.execute(
            select(models.LivestreamTag.livestream_id, models.LivestreamTag.tag_id)
            .where(models.LivestreamTag.livestream_id.in_(livestream_ids))
            .order_by(models.LivestreamTag.id)
        )
    ).all()

    tags_by_livestream: dict[int, list[schemas.Tag]] = {}
    for livestream_id, tag_id in links:
        tag = tag_cache.lookup_by_id(tag_id)
        if tag is None:
            raise ServiceError(f"tag not found for id {tag_id}")
        tags_by_livestream.setdefault(livestream_id, []).append(schemas.Tag(id=tag.id, name=tag.name))

    return {
        ls.id: schemas.Livestream(
            id=ls.id,
            owner=owners[ls.user_id],
            title=ls.title,
            description=ls.description,
            playlist_url=ls.playlist_url,
            thumbnail_url=ls.thumbnail_url,
            tags=tags_by_livestream.get(ls.id, []),
            start_at=ls.start_at,
            end_at=ls.end_at,
        )
        for ls in livestreams
    }


async def fill_reactions(
    session: AsyncSession,
    reactions: Sequence[models.Reaction],
    tag_cache: TagCache,
) -> list[schemas.Reaction]:
    """Hydrate reactions with their user and livestream, preserving order."""
    if not reactions:
        return []

    users = await fill_users(session, (r.user_id for r in reactions))

    livestream_ids = sorted({r.livestream_id for r in reactions})
    livestream_rows = (
        await session.execute(select(models.Livestream).where(models.Livestream.id.in_(livestream_ids)))
    ).scalars().all()
    livestreams = await fill_livestreams(session, livestream_rows, tag_cache)

    filled: list[schemas.Reaction] = []
    for reaction in reactions:
        livestream = livestreams.get(reaction.livestream_id)
        if livestream is None:
            raise ServiceError(f"livestream not found for id {reaction.livestream_id}")
        filled.append(
            schemas.Reaction(
                id=reaction.id,
                emoji_name=reaction.emoji_name,
                user=users[reaction.user_id],
                livestream=livestream,
                created_at=reaction.created_at,
            )
        )
    return filled
