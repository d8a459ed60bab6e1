"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidQuantityError(ValidationError):
    """A line item quantity was not a positive integer."""


class ProductMismatchError(ValidationError):
    """The resolved product does not match the requested product ID."""


class AlreadyAssignedError(DomainException):
    """A line item already belongs to a different bill."""


class BillFinalizedError(DomainException):
    """A finalized bill was asked to change."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):
    """The catalog has no product with the requested ID."""


class CatalogUnavailableError(DomainException):
    """The product catalog could not be reached or read."""
