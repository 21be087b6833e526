class ServiceError(Exception):
    """Base class for request-scoped failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    pass


class ConflictError(ServiceError):
    pass


class Unauthenticated(ServiceError):
    pass


class Forbidden(ServiceError):
    pass


class NotFoundError(ServiceError):
    pass


class InvalidTokenError(ServiceError):
    """Raised by the token codec; never rendered to clients directly."""
