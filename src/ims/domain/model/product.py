"""Product aggregate.

Products live in the catalog independently of any sale. Receipts copy
the name and price they need, so changing or removing a product never
alters a receipt that was already written.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ims.domain.exceptions import InsufficientStockError, ValidationError
from ims.domain.model.value_objects import Money


def validate_stock(stock: int, label: str = "Stock") -> int:
    if not isinstance(stock, int) or isinstance(stock, bool):
        raise ValidationError(
            f"{label} must be an integer, got {type(stock).__name__}"
        )
    if stock < 0:
        raise ValidationError(f"{label} cannot be negative")
    return stock


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``name`` is never blank
    - ``price`` is always greater than zero
    - ``stock`` is never negative
    """

    id: int
    name: str
    price: Money
    stock: int = 0

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def validate(name: str, price: Decimal, stock: int) -> None:
        """Check the fields of a new product without building it.

        Callers that allocate IDs run this first so that a rejected
        product never uses one up.
        """
        if not name or not name.strip():
            raise ValidationError("Product name cannot be empty")
        if price <= 0:
            raise ValidationError("Price must be greater than zero")
        validate_stock(stock, label="Initial stock")

    @staticmethod
    def create(product_id: int, name: str, price: Money, stock: int) -> Product:
        """Build a new product, enforcing all invariants."""
        Product.validate(name, price.amount, stock)
        return Product(id=product_id, name=name, price=price, stock=stock)

    # --- Mutations ------------------------------------------------------------

    def rename(self, new_name: str) -> None:
        if not new_name or not new_name.strip():
            raise ValidationError("Product name cannot be empty")
        self.name = new_name

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        Does NOT affect existing receipts; they hold a price snapshot.
        """
        if new_price.amount <= 0:
            raise ValidationError("Price must be greater than zero")
        self.price = new_price

    def set_stock(self, new_stock: int) -> None:
        """Overwrite the stock level (not a delta)."""
        self.stock = validate_stock(new_stock)

    def ensure_available(self, quantity: int) -> None:
        if quantity > self.stock:
            raise InsufficientStockError(
                product_id=self.id, requested=quantity, available=self.stock
            )

    def remove_stock(self, quantity: int) -> None:
        """Take *quantity* units out of stock for a sale."""
        if quantity <= 0:
            raise ValidationError("Quantity must be positive")
        self.ensure_available(quantity)
        self.stock -= quantity

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"ID: {self.id}, Name: {self.name}, Price: {self.price}, Stock: {self.stock}"
