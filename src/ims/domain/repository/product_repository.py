"""Abstract repository for the Product aggregate — the catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The repository is the sole authority over product
identity: it hands out IDs and never reuses one, even after removal.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Allocate the next unique product ID."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in insertion order."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product permanently."""
