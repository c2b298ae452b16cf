"""In-memory implementation of ProductRepository.

Products live for the lifetime of the process only. The ID counter is
kept apart from the mapping, so deleting the newest product does not
hand its ID out again.
"""

from __future__ import annotations

from ims.domain.model.product import Product
from ims.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        self._next_id = 1
        for p in products or []:
            self._store[p.id] = p
            self._next_id = max(self._next_id, p.id + 1)

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> int:
        product_id = self._next_id
        self._next_id += 1
        return product_id

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product

    def delete(self, product_id: int) -> None:
        self._store.pop(product_id, None)
