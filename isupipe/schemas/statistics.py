"""Schemas for the statistics endpoints.

Rank is 1 for the highest-scoring entity (score = reactions + tips).
"""

from pydantic import BaseModel, Field


class UserStatistics(BaseModel):
    """Response payload for GET /api/user/{username}/statistics."""

    rank: int = Field(ge=1)
    viewers_count: int = Field(ge=0)
    total_reactions: int = Field(ge=0)
    total_livecomments: int = Field(ge=0)
    total_tip: int = Field(ge=0)
    favorite_emoji: str


class LivestreamStatistics(BaseModel):
    """Response payload for GET /api/livestream/{livestream_id}/statistics."""

    rank: int = Field(ge=1)
    viewers_count: int = Field(ge=0)
    total_reactions: int = Field(ge=0)
    total_reports: int = Field(ge=0)
    max_tip: int = Field(ge=0)
