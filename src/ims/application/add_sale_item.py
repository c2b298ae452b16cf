"""Application service: Add Sale Item use case.

Delegates to the Sale domain service, which takes the stock and appends
the line item as one step.
"""

from __future__ import annotations

from ims.domain.model.receipt import Receipt, ReceiptItem
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.sale_service import SaleService


class AddSaleItemHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, receipt: Receipt, product_id: int, quantity: int) -> ReceiptItem:
        svc = SaleService(self._product_repo)
        return svc.add_item(receipt, product_id, quantity)
