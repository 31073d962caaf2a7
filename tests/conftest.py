"""Shared fixtures: an ASGI client and sample response records.

No database or Redis is needed: routes get their services monkeypatched, the
session dependency overridden, and services a `ScriptedSession`.
"""

from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient

from isupipe import schemas
from isupipe.main import app
from isupipe.routes.deps import get_current_user_id
from isupipe.services.tag_cache import TagCache, TagRecord


@pytest.fixture
async def client():
    """Create test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def logged_in():
    """Pretend user 1 holds a valid session."""
    app.dependency_overrides[get_current_user_id] = lambda: 1
    yield 1
    app.dependency_overrides.pop(get_current_user_id, None)


@pytest.fixture
def tag_cache():
    """A fresh tag cache installed on the app, loaded with two tags."""
    previous = app.state.tag_cache
    cache = TagCache()
    cache.load([TagRecord(id=1, name="a"), TagRecord(id=2, name="b")])
    app.state.tag_cache = cache
    yield cache
    app.state.tag_cache = previous


def make_user(user_id: int = 1, name: str = "alice") -> schemas.User:
    return schemas.User(
        id=user_id,
        name=name,
        display_name=name.title(),
        description="",
        theme=schemas.Theme(id=user_id, dark_mode=False),
    )


def make_livestream(livestream_id: int = 10, owner: schemas.User | None = None) -> schemas.Livestream:
    return schemas.Livestream(
        id=livestream_id,
        owner=owner or make_user(),
        title="Morning coding",
        description="",
        playlist_url="https://media.example.com/playlist.m3u8",
        thumbnail_url="https://media.example.com/thumbnail.png",
        tags=[schemas.Tag(id=1, name="a")],
        start_at=1700000000,
        end_at=1700003600,
    )


def make_reaction(reaction_id: int = 100, emoji_name: str = "innocent", user_id: int = 2) -> schemas.Reaction:
    return schemas.Reaction(
        id=reaction_id,
        emoji_name=emoji_name,
        user=make_user(user_id, "bob"),
        livestream=make_livestream(),
        created_at=1700000100,
    )


class ScriptedResult:
    """Stand-in for a SQLAlchemy `Result` holding pre-baked rows."""

    def __init__(self, rows):
        self._rows = list(rows)

    def scalar_one_or_none(self):
        return self._rows[0] if self._rows else None

    def scalars(self):
        return self

    def unique(self):
        return self

    def tuples(self):
        return self

    def all(self):
        return list(self._rows)


class ScriptedSession:
    """Session whose `execute` answers with the queued results, in order.

    Every executed statement is kept in `statements`; objects passed to
    `add` are kept in `added` and get an id on `flush`.
    """

    def __init__(self, *results, next_id: int = 1000):
        self._results = [r if isinstance(r, ScriptedResult) else ScriptedResult(r) for r in results]
        self.statements = []
        self.added = []
        self._next_id = next_id

    async def execute(self, statement):
        self.statements.append(statement)
        if not self._results:
            raise AssertionError(f"unexpected query: {statement}")
        return self._results.pop(0)

    def add(self, obj) -> None:
        self.added.append(obj)

    async def flush(self) -> None:
        for obj in self.added:
            if getattr(obj, "id", None) is None:
                obj.id = self._next_id
                self._next_id += 1

    @property
    def exhausted(self) -> bool:
        return not self._results


def install_session(monkeypatch: pytest.MonkeyPatch, module, session: ScriptedSession) -> None:
    """Make `module.get_session()` yield `session`."""

    @asynccontextmanager
    async def fake_get_session():
        yield session

    monkeypatch.setattr(module, "get_session", fake_get_session)
