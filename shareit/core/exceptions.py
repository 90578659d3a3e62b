"""
Domain errors raised by the service layer.
The HTTP boundary (shareit.api.errors) maps each type to a status code.
"""


class ShareItError(Exception):
    """Base class for all expected domain failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ShareItError):
    """Entity is absent, or the caller may not know that it exists."""


class ForbiddenError(ShareItError):
    """Mutation attempted by a user without the required role."""


class ConflictError(ShareItError):
    """Double processing or invalid date ordering."""


class UnavailableError(ShareItError):
    """Item is not available for booking."""


class ValidationError(ShareItError):
    """Malformed pagination, state or input."""
