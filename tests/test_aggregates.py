"""Score aggregation: every entity gets exactly one entry, idle ones score 0."""

from collections import namedtuple
from decimal import Decimal

from conftest import ScriptedSession
from isupipe.services import aggregates
from isupipe.services.ranking import RankingEntry, compute_rank

UserRow = namedtuple("UserRow", "id name")


async def test_user_scores_cover_every_user():
    session = ScriptedSession(
        [UserRow(1, "alice"), UserRow(2, "bob"), UserRow(3, "carol")],
        [(1, 3), (3, 1)],
        [(3, 500)],
    )

    scores = await aggregates.fetch_user_scores(session)

    assert scores == [
        RankingEntry("alice", 3),
        RankingEntry("bob", 0),
        RankingEntry("carol", 501),
    ]
    assert session.exhausted


async def test_user_scores_without_any_activity():
    session = ScriptedSession([UserRow(1, "alice"), UserRow(2, "bob")], [], [])

    scores = await aggregates.fetch_user_scores(session)

    assert scores == [RankingEntry("alice", 0), RankingEntry("bob", 0)]
    # idle users still rank; the larger key wins the tie
    assert compute_rank(scores, "bob") == 1


async def test_livestream_scores_cover_every_livestream():
    session = ScriptedSession([10, 11, 12], [(10, 2)], [(10, 100), (12, 7)])

    scores = await aggregates.fetch_livestream_scores(session)

    assert scores == [RankingEntry(10, 102), RankingEntry(11, 0), RankingEntry(12, 7)]
    assert compute_rank(scores, 11) == 3


async def test_livestream_scores_tolerate_decimal_sums():
    session = ScriptedSession([10], [], [(10, Decimal("250"))])

    scores = await aggregates.fetch_livestream_scores(session)

    assert scores == [RankingEntry(10, 250)]
    assert isinstance(scores[0].score, int)
