"""Application service: Remove Product use case.

The product's ID is retired, not recycled. Receipts that already sold
the product keep their own copy of its name and price.
"""

from __future__ import annotations

from ims.domain.exceptions import NotFoundError
from ims.domain.repository.product_repository import ProductRepository


class RemoveProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> None:
        if self._product_repo.get_by_id(product_id) is None:
            raise NotFoundError(f"Product with ID {product_id} not found")
        self._product_repo.delete(product_id)
