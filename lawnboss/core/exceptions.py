"""Custom exceptions for the LawnBoss application."""


class LawnBossException(Exception):
    """Base exception for LawnBoss application."""

    pass


class ValidationError(LawnBossException):
    """Raised when validation fails."""

    pass


class NotFoundError(LawnBossException):
    """Raised when a resource is not found."""

    pass


class ConflictError(LawnBossException):
    """Raised when a write would duplicate or contradict an existing row."""

    pass


class DatabaseError(LawnBossException):
    """Raised when a database operation fails."""

    pass


class ServiceError(LawnBossException):
    """Raised when a service operation fails."""

    pass


class UpstreamServiceError(ServiceError):
    """Raised when a third-party API rejects a request."""

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ConfigurationError(LawnBossException):
    """Raised when configuration is invalid."""

    pass
