"""
Domain-specific errors for the users bounded context.

The taxonomy is closed: every failure a use case can report is either
UserNotFoundError or DatabaseError. Both are mapped to HTTP responses
by the error translator at the interface layer.
No framework imports allowed.
"""


class UserServiceError(Exception):
    """Base error for all users domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UserNotFoundError(UserServiceError):
    """Raised when a lookup or delete by id matches no row."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


class DatabaseError(UserServiceError):
    """Raised when the store fails to execute a statement.

    The underlying exception is kept on ``cause`` for logging only;
    it is never exposed to API clients.
    """

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Database error: {type(cause).__name__}")
        self.cause = cause
