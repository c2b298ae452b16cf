"""Receipt rendering.

Rendering is split in two steps: ``build_table`` turns a Receipt into a
``ReceiptTable`` of preformatted strings, and ``format_table`` lays that
table out as the fixed-width printed receipt. Alternate outputs can reuse
the table without re-deriving any numbers.

Pure functions only — no I/O, no clock.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ims.domain.model.receipt import Receipt

WIDTH = 43
NAME_WIDTH = 23
DATE_FORMAT = "%m/%d/%Y %H:%M:%S"

_BANNER = "=" * WIDTH
_RULE = "-" * WIDTH
_TITLE = "          INVENTORY MANAGEMENT SYSTEM      "
_THANKS = "          Thank you for your purchase!     "
_COLUMNS = "Qty  Item                     Price   Total"


@dataclass(frozen=True)
class ReceiptRow:
    quantity: str
    name: str
    unit_price: str  # e.g. "9.99", no currency symbol
    line_total: str


@dataclass(frozen=True)
class ReceiptTable:
    receipt_id: int
    date: str
    rows: tuple[ReceiptRow, ...]
    total: str


def build_table(receipt: Receipt) -> ReceiptTable:
    return ReceiptTable(
        receipt_id=receipt.id,
        date=receipt.created_at.strftime(DATE_FORMAT),
        rows=tuple(
            ReceiptRow(
                quantity=str(item.quantity),
                name=item.product_name[:NAME_WIDTH],
                unit_price=str(item.unit_price.rounded),
                line_total=str(item.total.rounded),
            )
            for item in receipt.items
        ),
        total=str(receipt.total.rounded),
    )


def format_table(table: ReceiptTable) -> str:
    lines = [
        _BANNER,
        _TITLE,
        _BANNER,
        f"Receipt #: {table.receipt_id}",
        f"Date: {table.date}",
        _RULE,
        _COLUMNS,
        _RULE,
    ]
    for row in table.rows:
        lines.append(
            f"{row.quantity:>3}  {row.name:<{NAME_WIDTH}} "
            f"${row.unit_price:>5}  ${row.line_total:>6}"
        )
    lines += [
        _RULE,
        f"TOTAL:{'':31}${table.total:>6}",
        _BANNER,
        _THANKS,
        _BANNER,
    ]
    return "\n".join(lines) + "\n"


def render_text(receipt: Receipt) -> str:
    """Render *receipt* as the printed, fixed-width text receipt."""
    return format_table(build_table(receipt))
