"""
Error taxonomy shared by the store and service layers.

Each error kind maps to one stable response code and one translatable
message key. The request layer only needs `to_response()` to turn any
TaskboardError into a response; internal details (SQL, stack traces)
never leave the process.
"""

from typing import Any, Dict, Tuple

from taskboard.i18n import tr


class TaskboardError(Exception):
    """Base class for every error raised deliberately by Taskboard."""

    status_code: int = 500
    message_key: str = "error.internal"

    def __init__(self, detail: str = "", message_key: str = None, **params: Any):
        super().__init__(detail or self.message_key)
        self.detail = detail
        if message_key is not None:
            self.message_key = message_key
        self.params = params

    @property
    def message(self) -> str:
        """Short human-readable message in the current language"""
        return tr(self.message_key, **self.params)


class InvalidInputError(TaskboardError):
    """Malformed or empty required field. Raised before any store access."""
    status_code = 400
    message_key = "error.invalid_input"


class AuthenticationError(TaskboardError):
    """Unknown email or wrong password (never says which)."""
    status_code = 401
    message_key = "error.bad_credentials"


class ForbiddenError(TaskboardError):
    """Entity exists but belongs to another user."""
    status_code = 403
    message_key = "error.forbidden"


class NotFoundError(TaskboardError):
    """Entity absent, or hidden from the caller."""
    status_code = 404
    message_key = "error.not_found"


class ConflictError(TaskboardError):
    """Unique constraint violation (e.g. an email already registered)."""
    status_code = 409
    message_key = "error.conflict"


class StoreFailureError(TaskboardError):
    """Unexpected persistence failure."""
    status_code = 500
    message_key = "error.store_failure"


def to_response(error: TaskboardError) -> Tuple[int, Dict[str, str]]:
    """
    Translate an error into a (status_code, body) pair.

    Args:
        error: Any TaskboardError raised by a service

    Returns:
        Tuple of HTTP-equivalent status code and a JSON-ready body
    """
    return error.status_code, {"message": error.message}
