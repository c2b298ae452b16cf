"""Application service: Create Sale use case.

Opens an empty receipt. The catalog keeps no reference to it; the
caller owns the receipt until it is rendered or thrown away. An empty
receipt can simply be dropped since no stock was taken.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from ims.domain.model.receipt import Receipt, ReceiptSequence


class CreateSaleHandler:

    def __init__(
        self,
        receipt_sequence: ReceiptSequence,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._receipt_sequence = receipt_sequence
        self._clock = clock

    def handle(self) -> Receipt:
        return Receipt(id=self._receipt_sequence.next_id(), created_at=self._clock())
