"""Domain-level exceptions.

Cart and projection operations never raise; rejected actions are no-ops.
These exceptions cover the edges around the core: malformed catalog data,
an unreachable catalog source, and lookups of unknown products.  The CLI
catches ``DomainException`` uniformly and displays the message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value failed validation."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CatalogError(DomainException):
    """The catalog could not be produced."""


class CatalogUnavailableError(CatalogError):
    """The catalog source could not be reached or answered with an error."""


class CatalogDataError(CatalogError, ValidationError):
    """A catalog record is malformed (missing field, negative price, ...)."""
