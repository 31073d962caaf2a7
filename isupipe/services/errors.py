"""Domain errors raised by services.

Routes don't translate these one by one: `create_app` registers a handler
for `ServiceError` that renders the structured error body
`{"error": {"code", "message", "detail"}}` with `status_code`.
"""

from __future__ import annotations

from typing import Any


class ServiceError(RuntimeError):
    """Base class for errors surfaced to API clients."""

    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(
        self,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(ServiceError):
    code = "NOT_FOUND"
    status_code = 404


class InvalidRequestError(ServiceError):
    code = "BAD_REQUEST"
    status_code = 400


class AuthError(ServiceError):
    code = "UNAUTHORIZED"
    status_code = 401


class DataAccessError(ServiceError):
    """A data store read/write failed; the transaction has been rolled back."""

    code = "DATA_ACCESS_FAILURE"
    status_code = 500
