"""Board error taxonomy.

Services raise these; the app converts them to
{ "error": { "code": str, "message": str, "detail": object } } responses.
"""

from typing import Any


class CommentBoardError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, detail: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class ValidationError(CommentBoardError):
    """Missing or empty required field."""

    status_code = 400
    code = "VALIDATION_ERROR"


class AuthorizationError(CommentBoardError):
    """Acting user does not own the comment, or has no valid identity."""

    status_code = 401
    code = "UNAUTHORIZED"


class NotFoundError(CommentBoardError):
    status_code = 404
    code = "NOT_FOUND"


class StoreError(CommentBoardError):
    """Any underlying query/mutation failure. The raw message is echoed."""

    status_code = 500
    code = "STORE_ERROR"
