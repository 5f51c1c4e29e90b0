# core/exceptions.py

class DomainError(Exception):
    """Base class for staffing domain errors."""
    def __init__(self, message: str, *, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when ingested data is structurally invalid."""


class NotFoundError(DomainError):
    """Raised when a resource, assignment or event id is unknown."""


class BusinessRuleError(DomainError):
    """Raised when a write would break a staffing rule."""
