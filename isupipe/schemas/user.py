"""Schemas for users, themes and login."""

from pydantic import BaseModel, Field


class Theme(BaseModel):
    id: int
    dark_mode: bool


class User(BaseModel):
    """Public view of a user (never includes the password hash)."""

    id: int
    name: str
    display_name: str
    description: str
    theme: Theme


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class LoginResponse(BaseModel):
    ok: bool
    user_id: int
