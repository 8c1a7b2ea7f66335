class AppError(Exception):
    """Base app error."""


class ValidationError(AppError):
    pass


class NotFoundError(AppError):
    pass


class AuthorizationError(AppError):
    pass


class SnapshotError(AppError):
    """Raised when an exported API snapshot cannot be read."""
