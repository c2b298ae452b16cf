"""Application service: Update Product use case.

Partial update by sentinel values: a missing or blank name keeps the
current name, and a missing or non-positive price keeps the current
price. Neither case is an error, so a caller cannot tell "no change
requested" apart from "invalid value supplied".
"""

from __future__ import annotations

from decimal import Decimal

from ims.application.show_product import ShowProductHandler
from ims.domain.model.value_objects import Money, parse_amount
from ims.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: int,
        name: str | None = None,
        price: str | float | Decimal | None = None,
    ) -> None:
        """Update a product's name and/or price.

        This does NOT affect any existing receipts — they captured a
        price snapshot at sale time.
        """
        product = ShowProductHandler(self._product_repo).handle(product_id)

        new_price = parse_amount(price) if price is not None else None

        if name is not None and name.strip():
            product.rename(name)
        if new_price is not None and new_price > 0:
            product.update_price(Money(new_price))

        self._product_repo.save(product)
