"""Application service: Add Product use case."""

from __future__ import annotations

from decimal import Decimal

from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money, parse_amount
from ims.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, price: str | float | Decimal, initial_stock: int) -> int:
        """Add a new product to the catalog and return its ID."""
        amount = parse_amount(price)
        Product.validate(name, amount, initial_stock)

        product = Product.create(
            product_id=self._product_repo.next_id(),
            name=name,
            price=Money(amount),
            stock=initial_stock,
        )
        self._product_repo.save(product)
        return product.id
