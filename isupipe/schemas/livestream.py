"""Schemas for livestreams and their reactions."""

from pydantic import BaseModel, Field

from isupipe.schemas.tag import Tag
from isupipe.schemas.user import User


class Livestream(BaseModel):
    id: int
    owner: User
    title: str
    description: str
    playlist_url: str
    thumbnail_url: str
    tags: list[Tag] = Field(default_factory=list)
    start_at: int
    end_at: int


class Reaction(BaseModel):
    id: int
    emoji_name: str
    user: User
    livestream: Livestream
    created_at: int


class PostReactionRequest(BaseModel):
    emoji_name: str = Field(..., min_length=1, max_length=255)
