"""
Centralized error handling for chat and integration failures.
Service code raises the exceptions below; routes map them with service_error_to_http
so they stay thin and new error types are easy to add.
"""
from __future__ import annotations

from fastapi import HTTPException

# ---------------------------------------------------------------------------
# Constants: status codes
# ---------------------------------------------------------------------------

STATUS_BAD_REQUEST = 400
STATUS_NOT_FOUND = 404
STATUS_INTERNAL_ERROR = 500


class ServiceError(Exception):
    """Base for errors raised by stores, the orchestrator and external clients."""

    status_code = STATUS_INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgument(ServiceError):
    """Malformed or missing input, unknown model, invalid service."""

    status_code = STATUS_BAD_REQUEST


class NotFound(ServiceError):
    """Unknown chat id or integration key."""

    status_code = STATUS_NOT_FOUND


class BackendError(ServiceError):
    """An external LLM or game-library call failed. Never retried."""

    status_code = STATUS_INTERNAL_ERROR

    def __init__(self, message: str, *, provider: str) -> None:
        super().__init__(message)
        self.provider = provider


class InternalInvariant(ServiceError):
    """Validation passed but no provider could serve the request (catalog/registry mismatch)."""

    status_code = STATUS_INTERNAL_ERROR


def service_error_to_http(exc: Exception) -> HTTPException:
    """
    Map an exception from a store, the orchestrator or an external client into an HTTPException.
    ServiceError subclasses carry their own status; anything else becomes 500 with the exception message.
    """
    if isinstance(exc, ServiceError):
        return HTTPException(status_code=exc.status_code, detail=exc.message)
    return HTTPException(status_code=STATUS_INTERNAL_ERROR, detail=str(exc))
