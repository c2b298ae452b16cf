"""Unit tests for the Receipt aggregate and ReceiptSequence."""

from datetime import datetime

import pytest

from ims.domain.model.receipt import FIRST_RECEIPT_ID, Receipt, ReceiptItem, ReceiptSequence
from ims.domain.model.value_objects import Money, Quantity


def _item(name: str = "Widget", price: str = "9.99", qty: int = 3) -> ReceiptItem:
    return ReceiptItem(
        product_id=1,
        product_name=name,
        unit_price=Money.of(price),
        quantity=Quantity(qty),
    )


class TestReceiptItem:

    def test_total_is_price_times_quantity(self):
        assert _item().total == Money.of("29.97")


class TestReceipt:

    def test_new_receipt_is_empty(self):
        receipt = Receipt(id=1001, created_at=datetime(2026, 1, 1))
        assert receipt.is_empty
        assert receipt.items == ()
        assert receipt.total == Money.zero()

    def test_total_sums_items(self):
        receipt = Receipt(id=1001, created_at=datetime(2026, 1, 1))
        receipt._append(_item())
        receipt._append(_item("Gadget", "19.99", 2))
        assert receipt.total == Money.of("69.95")

    def test_items_keep_insertion_order(self):
        receipt = Receipt(id=1001, created_at=datetime(2026, 1, 1))
        receipt._append(_item("B"))
        receipt._append(_item("A"))
        assert [i.product_name for i in receipt.items] == ["B", "A"]

    def test_constructor_does_not_accept_items(self):
        with pytest.raises(TypeError):
            Receipt(1001, datetime(2026, 1, 1), [_item()])  # type: ignore[call-arg]

    def test_repr_omits_items(self):
        assert "_items" not in repr(Receipt(id=1001, created_at=datetime(2026, 1, 1)))

    def test_items_view_is_immutable(self):
        receipt = Receipt(id=1001, created_at=datetime(2026, 1, 1))
        receipt._append(_item())
        assert isinstance(receipt.items, tuple)


class TestReceiptSequence:

    def test_starts_at_1001(self):
        assert ReceiptSequence().next_id() == FIRST_RECEIPT_ID == 1001

    def test_strictly_increasing(self):
        seq = ReceiptSequence()
        ids = [seq.next_id() for _ in range(3)]
        assert ids == [1001, 1002, 1003]

    def test_custom_start(self):
        assert ReceiptSequence(start=5000).next_id() == 5000
