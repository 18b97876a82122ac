"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A required field is missing or a value is out of range."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StoreError(DomainException):
    """The underlying store failed to read or write a record."""
