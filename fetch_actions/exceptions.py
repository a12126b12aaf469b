"""Public exceptions for fetch-actions."""

from typing import Any


class FetchActionsError(Exception):
    """Base exception for all fetch-actions errors."""


class FetchActionsAPIError(FetchActionsError):
    """Error response (status >= 400) returned by the remote API.

    The message is the compact JSON string ``{"code": status, "message": body}``.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class FetchActionsValidationError(FetchActionsError):
    """Invalid request declaration (action triple or options)."""
