"""Service tests against a scripted session: hydration, reactions, themes, search."""

import pytest

from conftest import ScriptedSession, install_session
from isupipe import models
from isupipe.services import livestreams, reactions
from isupipe.services.errors import NotFoundError, ServiceError
from isupipe.services.fill import fill_reactions, fill_users
from isupipe.services.tag_cache import TagCache


def _user(user_id: int, name: str) -> models.User:
    return models.User(id=user_id, name=name, display_name=name.title(), description="", password="x")


def _theme(user_id: int, dark_mode: bool = False) -> models.Theme:
    return models.Theme(id=user_id + 100, user_id=user_id, dark_mode=dark_mode)


def _livestream(livestream_id: int, user_id: int = 1) -> models.Livestream:
    return models.Livestream(
        id=livestream_id,
        user_id=user_id,
        title=f"stream {livestream_id}",
        description="",
        playlist_url="https://media.example.com/playlist.m3u8",
        thumbnail_url="https://media.example.com/thumbnail.png",
        start_at=1700000000,
        end_at=1700003600,
    )


def _reaction(reaction_id: int, user_id: int, livestream_id: int, emoji_name: str) -> models.Reaction:
    return models.Reaction(
        id=reaction_id,
        user_id=user_id,
        livestream_id=livestream_id,
        emoji_name=emoji_name,
        created_at=1700000000 + reaction_id,
    )


# ============================================================
# fill
# ============================================================


async def test_fill_reactions_preserves_input_order(tag_cache: TagCache):
    rows = [
        _reaction(5, user_id=2, livestream_id=10, emoji_name="tada"),
        _reaction(3, user_id=3, livestream_id=11, emoji_name="innocent"),
        _reaction(4, user_id=2, livestream_id=10, emoji_name="ramen"),
    ]
    session = ScriptedSession(
        [_user(2, "bob"), _user(3, "carol")],
        [_theme(2), _theme(3, dark_mode=True)],
        [_livestream(10), _livestream(11)],
        [_user(1, "alice")],
        [_theme(1)],
        [(10, 1), (11, 2), (11, 1)],
    )

    filled = await fill_reactions(session, rows, tag_cache)

    assert [r.id for r in filled] == [5, 3, 4]
    assert [r.user.name for r in filled] == ["bob", "carol", "bob"]
    assert filled[1].user.theme.dark_mode is True
    assert filled[0].livestream.owner.name == "alice"
    assert [t.name for t in filled[0].livestream.tags] == ["a"]
    assert [t.name for t in filled[1].livestream.tags] == ["b", "a"]
    assert session.exhausted


async def test_fill_reactions_empty_runs_no_query(tag_cache: TagCache):
    session = ScriptedSession()
    assert await fill_reactions(session, [], tag_cache) == []
    assert session.statements == []


async def test_fill_users_missing_theme():
    session = ScriptedSession([_user(1, "alice"), _user(2, "bob")], [_theme(1)])

    with pytest.raises(ServiceError) as excinfo:
        await fill_users(session, [1, 2])
    assert excinfo.value.message == "theme not found for user id 2"
    assert excinfo.value.status_code == 500


async def test_fill_users_missing_user():
    session = ScriptedSession([_user(1, "alice")], [_theme(1)])

    with pytest.raises(ServiceError) as excinfo:
        await fill_users(session, [2, 1])
    assert excinfo.value.message == "user not found for id 2"


async def test_fill_reactions_unknown_tag_id(tag_cache: TagCache):
    session = ScriptedSession(
        [_user(2, "bob")],
        [_theme(2)],
        [_livestream(10)],
        [_user(1, "alice")],
        [_theme(1)],
        [(10, 99)],
    )

    with pytest.raises(ServiceError, match="tag not found for id 99"):
        await fill_reactions(session, [_reaction(1, 2, 10, "tada")], tag_cache)


# ============================================================
# reactions
# ============================================================


async def test_post_reaction_missing_livestream(monkeypatch: pytest.MonkeyPatch, tag_cache: TagCache):
    session = ScriptedSession([])
    install_session(monkeypatch, reactions, session)

    with pytest.raises(NotFoundError) as excinfo:
        await reactions.post_reaction(user_id=2, livestream_id=404, emoji_name="tada", tag_cache=tag_cache)
    assert excinfo.value.status_code == 404
    assert excinfo.value.detail == {"livestream_id": 404}
    assert session.added == []


async def test_post_reaction_inserts_and_hydrates(monkeypatch: pytest.MonkeyPatch, tag_cache: TagCache):
    session = ScriptedSession(
        [10],
        [_user(2, "bob")],
        [_theme(2)],
        [_livestream(10)],
        [_user(1, "alice")],
        [_theme(1)],
        [(10, 2)],
        next_id=77,
    )
    install_session(monkeypatch, reactions, session)

    reaction = await reactions.post_reaction(user_id=2, livestream_id=10, emoji_name="tada", tag_cache=tag_cache)

    assert reaction.id == 77
    assert reaction.emoji_name == "tada"
    assert reaction.user.name == "bob"
    assert reaction.livestream.id == 10
    assert [t.name for t in reaction.livestream.tags] == ["b"]
    assert len(session.added) == 1
    assert session.added[0].user_id == 2
    assert session.exhausted


async def test_list_reactions_hydrates_rows(monkeypatch: pytest.MonkeyPatch, tag_cache: TagCache):
    session = ScriptedSession(
        [_reaction(2, 1, 10, "tada"), _reaction(1, 1, 10, "innocent")],
        [_user(1, "alice")],
        [_theme(1)],
        [_livestream(10)],
        [_user(1, "alice")],
        [_theme(1)],
        [],
    )
    install_session(monkeypatch, reactions, session)

    filled = await reactions.list_reactions(10, tag_cache, limit=2)

    assert [r.emoji_name for r in filled] == ["tada", "innocent"]
    assert filled[0].livestream.tags == []


# ============================================================
# livestreams
# ============================================================


async def test_theme_unknown_user_is_404(monkeypatch: pytest.MonkeyPatch):
    install_session(monkeypatch, livestreams, ScriptedSession([]))

    with pytest.raises(NotFoundError) as excinfo:
        await livestreams.get_streamer_theme("ghost")
    assert excinfo.value.status_code == 404
    assert excinfo.value.detail == {"username": "ghost"}


async def test_theme_of_known_user(monkeypatch: pytest.MonkeyPatch):
    install_session(monkeypatch, livestreams, ScriptedSession([1], [_theme(1, dark_mode=True)]))

    theme = await livestreams.get_streamer_theme("alice")
    assert theme.id == 101
    assert theme.dark_mode is True


async def test_theme_row_missing_is_server_error(monkeypatch: pytest.MonkeyPatch):
    install_session(monkeypatch, livestreams, ScriptedSession([1], []))

    with pytest.raises(ServiceError) as excinfo:
        await livestreams.get_streamer_theme("alice")
    assert excinfo.value.status_code == 500


async def test_search_resolves_tag_id_from_cache(monkeypatch: pytest.MonkeyPatch, tag_cache: TagCache):
    session = ScriptedSession(
        [_livestream(11), _livestream(10)],
        [_user(1, "alice")],
        [_theme(1)],
        [(10, 2), (11, 1), (11, 2)],
    )
    install_session(monkeypatch, livestreams, session)

    found = await livestreams.search_livestreams_by_tag("b", tag_cache)

    assert [ls.id for ls in found] == [11, 10]
    assert [t.name for t in found[0].tags] == ["a", "b"]
    search_params = session.statements[0].compile().params
    assert list(search_params.values()) == [2]


async def test_search_unknown_tag_skips_database(monkeypatch: pytest.MonkeyPatch, tag_cache: TagCache):
    session = ScriptedSession()
    install_session(monkeypatch, livestreams, session)

    assert await livestreams.search_livestreams_by_tag("nope", tag_cache) == []
    assert session.statements == []
