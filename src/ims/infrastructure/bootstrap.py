"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Nothing is persisted: each call to ``build_context`` starts an empty
catalog, and everything it holds is gone when the process exits.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ims.domain.model.receipt import ReceiptSequence
from ims.domain.repository.product_repository import ProductRepository
from ims.infrastructure.config.settings import settings
from ims.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from ims.infrastructure.persistence.receipt_file_writer import ReceiptFileWriter


@dataclass
class AppContext:
    product_repo: ProductRepository
    receipt_sequence: ReceiptSequence
    receipt_writer: ReceiptFileWriter


def build_context(receipt_dir: Path | None = None) -> AppContext:
    return AppContext(
        product_repo=InMemoryProductRepository(),
        receipt_sequence=ReceiptSequence(settings.FIRST_RECEIPT_ID),
        receipt_writer=ReceiptFileWriter(receipt_dir or settings.RECEIPT_DIR),
    )
