"""Error taxonomy for talking to the plant inference service."""

from __future__ import annotations


class PlantServiceError(Exception):
    """Base class for every failure surfaced by the plant service client."""


class ValidationError(PlantServiceError):
    """Local precondition failed (e.g. no image chosen); nothing was sent."""


class ServiceUnavailable(PlantServiceError):
    """Health probe failed or reported a non-success status."""


class RequestFailed(PlantServiceError):
    """Transport failure, non-2xx response or an unusable response body."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ApplicationError(PlantServiceError):
    """Service answered 2xx but reported an explicit ``error`` field."""


class IncompleteResponse(RequestFailed):
    """2xx response that carries neither a result nor an ``error`` field."""
