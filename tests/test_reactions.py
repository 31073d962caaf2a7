import pytest
from httpx import AsyncClient

from conftest import make_reaction
from isupipe.services.errors import NotFoundError
from isupipe.services.tag_cache import TagCache


async def test_list_reactions(
    client: AsyncClient, tag_cache: TagCache, logged_in: int, monkeypatch: pytest.MonkeyPatch
):
    from isupipe.routes import livestreams as livestream_routes

    calls = []

    async def fake_list_reactions(livestream_id, cache, limit=None):
        calls.append((livestream_id, cache is tag_cache, limit))
        return [make_reaction(101, "tada"), make_reaction(100, "innocent")]

    monkeypatch.setattr(livestream_routes, "list_reactions", fake_list_reactions)

    response = await client.get("/api/livestream/10/reaction", params={"limit": 2})
    assert response.status_code == 200
    data = response.json()
    assert [r["emoji_name"] for r in data] == ["tada", "innocent"]
    assert data[0]["user"]["theme"] == {"id": 2, "dark_mode": False}
    assert data[0]["livestream"]["owner"]["name"] == "alice"
    assert calls == [(10, True, 2)]


async def test_list_reactions_rejects_bad_limit(client: AsyncClient, tag_cache: TagCache, logged_in: int):
    response = await client.get("/api/livestream/10/reaction", params={"limit": "ten"})
    assert response.status_code == 400

    response = await client.get("/api/livestream/10/reaction", params={"limit": 100000})
    assert response.status_code == 400
    assert response.json()["error"]["detail"] == {"limit": 100000}


async def test_post_reaction_uses_session_user(
    client: AsyncClient, tag_cache: TagCache, logged_in: int, monkeypatch: pytest.MonkeyPatch
):
    from isupipe.routes import livestreams as livestream_routes

    captured = {}

    async def fake_post_reaction(*, user_id, livestream_id, emoji_name, tag_cache):
        captured.update(user_id=user_id, livestream_id=livestream_id, emoji_name=emoji_name)
        return make_reaction(102, emoji_name, user_id)

    monkeypatch.setattr(livestream_routes, "post_reaction", fake_post_reaction)

    response = await client.post("/api/livestream/10/reaction", json={"emoji_name": "tada"})
    assert response.status_code == 201
    assert response.json()["id"] == 102
    assert captured == {"user_id": logged_in, "livestream_id": 10, "emoji_name": "tada"}


async def test_post_reaction_requires_emoji(client: AsyncClient, tag_cache: TagCache, logged_in: int):
    response = await client.post("/api/livestream/10/reaction", json={})
    assert response.status_code == 400


async def test_post_reaction_unknown_livestream(
    client: AsyncClient, tag_cache: TagCache, logged_in: int, monkeypatch: pytest.MonkeyPatch
):
    from isupipe.routes import livestreams as livestream_routes

    async def fake_post_reaction(**kwargs):
        raise NotFoundError("livestream not found", detail={"livestream_id": kwargs["livestream_id"]})

    monkeypatch.setattr(livestream_routes, "post_reaction", fake_post_reaction)

    response = await client.post("/api/livestream/999/reaction", json={"emoji_name": "tada"})
    assert response.status_code == 404
    assert response.json()["error"] == {
        "code": "NOT_FOUND",
        "message": "livestream not found",
        "detail": {"livestream_id": 999},
    }
