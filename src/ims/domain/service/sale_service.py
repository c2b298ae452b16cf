"""Domain service: Sale.

Adding an item to a sale touches two aggregates — the Product (stock)
and the Receipt (line items). This service keeps them in step.

Each call is validate-then-mutate: every check runs before anything is
changed, so a failed call leaves both stock and receipt as they were.
There is no rollback across calls; items already added stay sold.
"""

from __future__ import annotations

from ims.domain.exceptions import NotFoundError
from ims.domain.model.receipt import Receipt, ReceiptItem
from ims.domain.model.value_objects import Quantity
from ims.domain.repository.product_repository import ProductRepository


class SaleService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def add_item(self, receipt: Receipt, product_id: int, quantity: int) -> ReceiptItem:
        """Sell *quantity* units of a product on *receipt*.

        Raises NotFoundError, ValidationError or InsufficientStockError,
        checked in that order.
        """
        # Phase 1: validate
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID {product_id} not found")
        qty = Quantity(quantity)
        product.ensure_available(qty.value)

        item = ReceiptItem(
            product_id=product.id,
            product_name=product.name,
            unit_price=product.price,  # <-- price snapshot
            quantity=qty,
        )

        # Phase 2: mutate
        product.remove_stock(qty.value)
        self._product_repo.save(product)
        receipt._append(item)
        return item
