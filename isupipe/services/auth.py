"""Login and session verification.

Sessions are opaque random ids kept in Redis with a TTL; the id travels in
a cookie. Passwords are stored as bcrypt hashes in `users.password`.
"""

from __future__ import annotations

import logging
import secrets

import bcrypt
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from isupipe.models import User
from isupipe.services.errors import AuthError, DataAccessError
from isupipe.settings import get_settings
from isupipe.stores import redis as session_store
from isupipe.stores.postgres import get_session

logger = logging.getLogger("uvicorn.error")


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise ValueError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


def build_session_id() -> str:
    # URL-safe random string for the cookie.
    return secrets.token_urlsafe(32)


async def login(username: str, password: str) -> tuple[str, int]:
    """Check credentials and open a session.

    Returns:
        (session_id, user_id)

    Raises:
        AuthError: Unknown user or wrong password.
        DataAccessError: The user lookup failed.
    """
    try:
        async with get_session() as session:
            row = (
                await session.execute(select(User.id, User.password).where(User.name == username))
            ).one_or_none()
    except SQLAlchemyError as e:
        logger.exception("Failed to get user for login")
        raise DataAccessError(f"failed to get user: {e}") from e

    if row is None or not verify_password(password, row.password):
        logger.warning("Login failed for %s", username)
        raise AuthError("invalid username or password")

    session_id = build_session_id()
    await session_store.set_session(session_id, row.id, get_settings().session_ttl_seconds)
    return session_id, row.id


async def verify_session(session_id: str | None) -> int:
    """Resolve a session cookie to the logged-in user id.

    Raises:
        AuthError: No cookie, or the session has expired.
    """
    raw = (session_id or "").strip()
    if not raw:
        raise AuthError("failed to get session")

    user_id = await session_store.get_session_user_id(raw)
    if user_id is None:
        raise AuthError("session has expired")
    return user_id
