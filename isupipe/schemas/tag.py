"""Schemas for tag endpoints (/api/tag, /api/initialize)."""

from pydantic import BaseModel, Field


class Tag(BaseModel):
    id: int
    name: str


class TagsResponse(BaseModel):
    """Response payload for GET /api/tag."""

    tags: list[Tag] = Field(default_factory=list)


class InitializeResponse(BaseModel):
    ok: bool
    tags: int = Field(ge=0, description="Number of tags now cached")
