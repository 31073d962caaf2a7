"""In-memory mirror of the `tags` reference table.

The cache is owned by the application (`app.state.tag_cache`) and handed to
routes through the `get_tag_cache` dependency. It is loaded once at startup
and rebuilt wholesale by `POST /api/initialize`; it never evicts.

Readers take no lock: a reload builds a fresh immutable snapshot (both
indexes) and swaps the reference in a single assignment, so a reader sees
either the old snapshot or the new one, never a mix. Reloads themselves are
serialized by an asyncio lock.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, field
import logging
from types import MappingProxyType
from typing import Mapping

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from isupipe.models import Tag
from isupipe.services.errors import DataAccessError
from isupipe.stores.postgres import get_session

logger = logging.getLogger("uvicorn.error")


@dataclass(frozen=True)
class TagRecord:
    id: int
    name: str


@dataclass(frozen=True)
class _Snapshot:
    by_id: Mapping[int, TagRecord] = field(default_factory=lambda: MappingProxyType({}))
    id_by_name: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))


TagLoader = Callable[[], Awaitable[Iterable[TagRecord]]]


async def fetch_all_tags() -> list[TagRecord]:
    """Read the full `tags` table in one query."""
    try:
        async with get_session() as session:
            result = await session.execute(select(Tag.id, Tag.name).order_by(Tag.id))
            return [TagRecord(id=row.id, name=row.name) for row in result]
    except SQLAlchemyError as e:
        logger.exception("Failed to read tags")
        raise DataAccessError(f"failed to get tags: {e}") from e


class TagCache:
    """Process-lifetime tag index (id -> tag, name -> id)."""

    def __init__(self) -> None:
        self._snapshot = _Snapshot()
        self._reload_lock = asyncio.Lock()

    async def initialize(self, loader: TagLoader | None = None) -> int:
        """Reload the cache from a single bulk read (`fetch_all_tags` by default).

        If the loader raises, the current contents stay as they were and the
        error propagates.

        Returns:
            Number of tags now cached.
        """
        async with self._reload_lock:
            rows = await (loader or fetch_all_tags)()
            count = self.load(rows)
        logger.info(f"Tag cache loaded: {count} tags")
        return count

    def load(self, rows: Iterable[TagRecord]) -> int:
        """Replace the cache contents with `rows`."""
        by_id: dict[int, TagRecord] = {}
        id_by_name: dict[str, int] = {}
        for row in rows:
            by_id[row.id] = row
            id_by_name[row.name] = row.id

        self._snapshot = _Snapshot(
            by_id=MappingProxyType(by_id),
            id_by_name=MappingProxyType(id_by_name),
        )
        return len(by_id)

    def lookup_by_id(self, tag_id: int) -> TagRecord | None:
        return self._snapshot.by_id.get(tag_id)

    def lookup_by_name(self, name: str) -> int | None:
        """Get the id of the tag called `name`, or None."""
        return self._snapshot.id_by_name.get(name)

    def all(self) -> list[TagRecord]:
        """All cached tags, ordered by id."""
        by_id = self._snapshot.by_id
        return [by_id[tag_id] for tag_id in sorted(by_id)]

    def __len__(self) -> int:
        return len(self._snapshot.by_id)
