"""Tests for the fixed-width receipt text."""

from datetime import datetime

from ims.domain.model.receipt import Receipt, ReceiptItem
from ims.domain.model.value_objects import Money, Quantity
from ims.domain.service.receipt_renderer import build_table, render_text

WHEN = datetime(2026, 10, 18, 14, 30, 5)

HEADER = [
    "===========================================",
    "          INVENTORY MANAGEMENT SYSTEM      ",
    "===========================================",
    "Receipt #: 1001",
    "Date: 10/18/2026 14:30:05",
    "-------------------------------------------",
    "Qty  Item                     Price   Total",
    "-------------------------------------------",
]

FOOTER = [
    "===========================================",
    "          Thank you for your purchase!     ",
    "===========================================",
]


def _receipt(*items: tuple[str, str, int]) -> Receipt:
    receipt = Receipt(id=1001, created_at=WHEN)
    for i, (name, price, qty) in enumerate(items, start=1):
        receipt._append(ReceiptItem(i, name, Money.of(price), Quantity(qty)))
    return receipt


class TestRenderText:

    def test_single_item_layout(self):
        text = render_text(_receipt(("Widget", "9.99", 3)))

        expected = HEADER + [
            "  3  " + "Widget".ljust(23) + " $ 9.99  $ 29.97",
            "-------------------------------------------",
            "TOTAL:" + " " * 31 + "$ 29.97",
        ] + FOOTER
        assert text == "\n".join(expected) + "\n"

    def test_empty_receipt_has_no_rows_and_zero_total(self):
        text = render_text(_receipt())

        expected = HEADER + [
            "-------------------------------------------",
            "TOTAL:" + " " * 31 + "$  0.00",
        ] + FOOTER
        assert text == "\n".join(expected) + "\n"

    def test_long_names_are_truncated(self):
        text = render_text(_receipt(("A" * 40, "1.00", 1)))
        assert "A" * 23 + " $" in text
        assert "A" * 24 not in text

    def test_rows_follow_insertion_order(self):
        text = render_text(_receipt(("Zebra", "1.00", 1), ("Apple", "2.00", 1)))
        assert text.index("Zebra") < text.index("Apple")

    def test_receipt_method_matches_function(self):
        receipt = _receipt(("Widget", "9.99", 1))
        assert receipt.render_text() == render_text(receipt)


class TestBuildTable:

    def test_table_carries_formatted_values(self):
        table = build_table(_receipt(("Widget", "9.99", 3), ("Gadget", "19.99", 1)))
        assert table.receipt_id == 1001
        assert table.date == "10/18/2026 14:30:05"
        assert [(r.quantity, r.name, r.unit_price, r.line_total) for r in table.rows] == [
            ("3", "Widget", "9.99", "29.97"),
            ("1", "Gadget", "19.99", "19.99"),
        ]
        assert table.total == "49.96"
