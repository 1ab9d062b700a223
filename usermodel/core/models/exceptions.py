class UserModelError(Exception):
    """Base exception for user model errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ConstraintViolationError(UserModelError, ValueError):
    """Raised when a persisted row breaks a uniqueness, non-null or format constraint."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class ResourceNotFoundError(UserModelError):
    """Raised when a referenced row does not exist."""
    pass
