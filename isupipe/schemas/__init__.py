"""Pydantic schemas for API request/response validation."""

from isupipe.schemas.common import ErrorDetail, ErrorResponse
from isupipe.schemas.livestream import Livestream, PostReactionRequest, Reaction
from isupipe.schemas.statistics import LivestreamStatistics, UserStatistics
from isupipe.schemas.tag import InitializeResponse, Tag, TagsResponse
from isupipe.schemas.user import LoginRequest, LoginResponse, Theme, User

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "InitializeResponse",
    "Livestream",
    "LivestreamStatistics",
    "LoginRequest",
    "LoginResponse",
    "PostReactionRequest",
    "Reaction",
    "Tag",
    "TagsResponse",
    "Theme",
    "User",
    "UserStatistics",
]
