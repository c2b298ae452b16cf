"""Application service: Update Stock use case."""

from __future__ import annotations

from ims.application.show_product import ShowProductHandler
from ims.domain.repository.product_repository import ProductRepository


class UpdateStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, new_stock: int) -> None:
        """Overwrite a product's stock level (absolute, not a delta)."""
        product = ShowProductHandler(self._product_repo).handle(product_id)
        product.set_stock(new_stock)
        self._product_repo.save(product)
