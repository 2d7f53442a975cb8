"""Domain errors raised by the room services and translated at the HTTP boundary."""
from __future__ import annotations

from fastapi import status


class RoomServiceError(Exception):
    """Base class for errors that map onto an HTTP status code."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(RoomServiceError):
    """A required field was missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(RoomServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(RoomServiceError):
    status_code = status.HTTP_409_CONFLICT


class ConfigurationError(RoomServiceError):
    """LiveKit signing credentials are missing or invalid."""
