"""Domain error taxonomy.

Every error carries the HTTP status it maps to; the global handler in
``imara.middleware.error_handler`` turns them into the
``{"success": false, "error": ...}`` envelope.
"""

from __future__ import annotations


class ImaraError(Exception):
    """Base class for errors raised by request handlers and services."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ImaraError):
    """Missing or invalid input."""

    status_code = 400


class ConflictError(ImaraError):
    """Uniqueness violation: duplicate check-in, username, email, challenge join."""

    status_code = 400


class NotFoundError(ImaraError):
    """Unknown habit, post, challenge or other entity id."""

    status_code = 404


class AuthError(ImaraError):
    """Missing, invalid or expired credentials."""

    status_code = 401


class PersistenceError(ImaraError):
    """Snapshot could not be written. Logged by the snapshot layer, never sent to clients."""
