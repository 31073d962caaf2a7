"""Shared FastAPI dependencies for routes."""

from fastapi import Request

from isupipe.services.auth import verify_session
from isupipe.services.tag_cache import TagCache
from isupipe.settings import get_settings


def get_tag_cache(request: Request) -> TagCache:
    """The application's tag cache (created in create_app)."""
    return request.app.state.tag_cache


async def get_current_user_id(request: Request) -> int:
    """Resolve the session cookie to a user id, or fail with 401."""
    cookie_name = get_settings().session_cookie_name
    return await verify_session(request.cookies.get(cookie_name))
