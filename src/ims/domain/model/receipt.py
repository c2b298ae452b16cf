"""Receipt aggregate — the record of one sale.

A Receipt is owned by whoever opened it. Items are only ever appended
through the sale workflow (``SaleService.add_item``), which decrements
stock in the same step; callers see an immutable tuple.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ims.domain.model.value_objects import Money, Quantity

FIRST_RECEIPT_ID = 1001


@dataclass(frozen=True)
class ReceiptItem:
    """Captures the name and price of a product at the moment of sale."""

    product_id: int
    product_name: str
    unit_price: Money  # copied, not a live reference to the Product
    quantity: Quantity

    @property
    def total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Receipt:
    id: int
    created_at: datetime
    _items: list[ReceiptItem] = field(default_factory=list, init=False, repr=False)

    @property
    def items(self) -> tuple[ReceiptItem, ...]:
        return tuple(self._items)

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self._items:
            result = result + item.total
        return result

    @property
    def is_empty(self) -> bool:
        return not self._items

    def render_text(self) -> str:
        from ims.domain.service.receipt_renderer import render_text

        return render_text(self)

    def _append(self, item: ReceiptItem) -> None:
        # Only SaleService may call this, right after taking the stock.
        self._items.append(item)


class ReceiptSequence:
    """Hands out receipt numbers, strictly increasing."""

    def __init__(self, start: int = FIRST_RECEIPT_ID) -> None:
        self._next_id = start

    def next_id(self) -> int:
        receipt_id = self._next_id
        self._next_id += 1
        return receipt_id
