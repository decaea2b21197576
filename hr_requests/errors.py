"""API error types.

Services raise these; the handler registered in ``create_app()`` turns
them into JSON responses of the form ``{"message": ...}`` with the
matching HTTP status.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class ApiError(Exception):
    """Base error carrying an HTTP status and a client-facing message."""

    status_code = 400
    default_message = "Bad request"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}


class BadRequestError(ApiError):
    status_code = 400
    default_message = "Validation failed"

    def __init__(self, message: Optional[str] = None, details: Optional[List[Any]] = None) -> None:
        super().__init__(message)
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        body = super().to_dict()
        if self.details is not None:
            body["details"] = self.details
        return body


class UnauthorizedError(ApiError):
    status_code = 401
    default_message = "Unauthorized"


class ForbiddenError(ApiError):
    status_code = 403
    default_message = "Forbidden"


class NotFoundError(ApiError):
    status_code = 404
    default_message = "Not found"
