"""Application service: Show Product use case (query)."""

from __future__ import annotations

from ims.domain.exceptions import NotFoundError
from ims.domain.model.product import Product
from ims.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID {product_id} not found")
        return product
