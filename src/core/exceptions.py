"""
Custom exceptions used across layers.

Every error carries the message and HTTP status code the API layer responds with.
"""

ERROR_NOT_FOUND = "not found"
ERROR_INCOMPLETE_DATA = "incomplete data"
ERROR_TITLE_CONFLICT = "title conflict"
ERROR_METHOD_NOT_ALLOWED = "method not allowed"


class GameStoreError(Exception):
    """Top-level exception for anything the games service refuses to do."""

    status_code: int = 500
    default_message: str = "internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class GameNotFoundError(GameStoreError):
    status_code = 404
    default_message = ERROR_NOT_FOUND


class IncompleteDataError(GameStoreError):
    """Title or genre missing from a new game."""

    status_code = 422
    default_message = ERROR_INCOMPLETE_DATA


class TitleConflictError(GameStoreError):
    """A game with the same title already exists."""

    status_code = 405
    default_message = ERROR_TITLE_CONFLICT


class RepositoryError(GameStoreError):
    """Storage backend failed."""


# Domain names for the two creation failures
ValidationError = IncompleteDataError
ConflictError = TitleConflictError
