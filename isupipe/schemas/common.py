"""Common schemas used across the API."""

from typing import Any

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Structured error detail (see services.errors)."""

    code: str
    message: str
    detail: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Body of every non-2xx response rendered by the app's error handlers.

    Format: { "error": { "code": str, "message": str, "detail": object } }
    """

    error: ErrorDetail
