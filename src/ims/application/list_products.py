"""Application service: List Products use case (query)."""

from __future__ import annotations

from ims.domain.model.product import Product
from ims.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[Product]:
        return self._product_repo.list_all()
