"""Writes rendered receipts to text files.

File names encode the receipt number and the time of saving, e.g.
``Receipt_1001_20261018_143005.txt``.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from ims.domain.model.receipt import Receipt

logger = logging.getLogger(__name__)


class ReceiptFileWriter:

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    @staticmethod
    def file_name(receipt: Receipt, saved_at: datetime) -> str:
        return f"Receipt_{receipt.id}_{saved_at:%Y%m%d_%H%M%S}.txt"

    def write(self, receipt: Receipt, saved_at: datetime | None = None) -> Path:
        saved_at = saved_at or datetime.now()
        path = self._directory / self.file_name(receipt, saved_at)

        self._directory.mkdir(parents=True, exist_ok=True)
        path.write_text(receipt.render_text(), encoding="utf-8")

        logger.info("Saved receipt #%s (%d items, total %s) to %s",
                    receipt.id, len(receipt.items), receipt.total, path)
        return path
