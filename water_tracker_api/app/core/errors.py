"""
Error taxonomy shared by the services and the HTTP layer.

Services raise these exceptions; ``main.create_app`` registers a
single handler that renders them as ``{"error": <message>}`` with the
status code carried by the exception class.
"""

from fastapi import status


class WaterTrackerError(Exception):
    """Base class for all errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(WaterTrackerError):
    """No account matches the given user name."""

    status_code = status.HTTP_404_NOT_FOUND


class InvalidCredentialsError(WaterTrackerError):
    """The supplied password does not match the stored hash."""

    status_code = status.HTTP_400_BAD_REQUEST


class StorageError(WaterTrackerError):
    """Any persistence failure not covered by a more specific error."""


class ConflictError(StorageError):
    """A unique constraint was violated (e.g. duplicate user name).

    Reported to clients like any other storage failure (HTTP 500).
    """


class HashingError(WaterTrackerError):
    """The password could not be hashed."""
