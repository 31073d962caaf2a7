"""Ranking engine for the statistics endpoints.

Ordering:
1. score ASC
2. key ASC (livestream id numerically, username lexicographically)

Rank is counted from the top of that order: the highest score is rank 1,
and among equal scores the smaller key sits farther from rank 1.

Pure functions only; the data store and the transport live elsewhere.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from isupipe.services.errors import NotFoundError, ServiceError

RankingKey = int | str


@dataclass(frozen=True)
class RankingEntry:
    """One entity's score in a ranking pass."""

    key: RankingKey
    score: int


class RankingPreconditionError(ServiceError):
    """Score set is unusable (empty, or an entity appears twice)."""

    code = "RANKING_PRECONDITION"
    status_code = 500


class RankingTargetNotFound(NotFoundError):
    code = "RANKING_TARGET_NOT_FOUND"


def sort_ranking(entries: Iterable[RankingEntry]) -> list[RankingEntry]:
    """Return a new list in ascending (score, key) order."""
    return sorted(entries, key=lambda e: (e.score, e.key))


def compute_rank(entries: Sequence[RankingEntry], target: RankingKey) -> int:
    """Get the 1-based rank of `target` within `entries`.

    Args:
        entries: One entry per entity. Not mutated.
        target: Key of the entity to rank.

    Returns:
        1 for the top entity, len(entries) for the bottom one.

    Raises:
        RankingPreconditionError: entries is empty or has duplicate keys.
        RankingTargetNotFound: target is not among the entries.
    """
    if not entries:
        raise RankingPreconditionError("cannot rank an empty score set")

    seen: set[RankingKey] = set()
    for entry in entries:
        if entry.key in seen:
            raise RankingPreconditionError(
                "duplicate entity in score set",
                detail={"key": entry.key},
            )
        seen.add(entry.key)

    ordered = sort_ranking(entries)

    rank = 1
    for entry in reversed(ordered):
        if entry.key == target:
            return rank
        rank += 1

    raise RankingTargetNotFound(
        "ranking target is not in the score set",
        detail={"key": target},
    )
