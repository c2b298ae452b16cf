"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Bad input: empty name, non-positive price, invalid quantity or stock."""


class NotFoundError(DomainException):
    """A requested product does not exist."""


class InsufficientStockError(DomainException):
    """A sale asked for more units than the product has in stock."""

    def __init__(self, product_id: int, requested: int, available: int) -> None:
        super().__init__(f"Insufficient stock. Available: {available}")
        self.product_id = product_id
        self.requested = requested
        self.available = available
