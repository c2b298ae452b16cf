from __future__ import annotations

from pathlib import Path

import click

from ims.application.add_product import AddProductHandler
from ims.application.add_sale_item import AddSaleItemHandler
from ims.application.create_sale import CreateSaleHandler
from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import build_context
from ims.infrastructure.cli.shell import Shell
from ims.infrastructure.logger_config import setup_logging


@click.group()
@click.option("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR.")
def cli(log_level: str | None) -> None:
    """IMS — Inventory Management System"""
    setup_logging(log_level)


@cli.command("shell")
@click.option(
    "--receipt-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Where saved receipts are written.",
)
def shell(receipt_dir: Path | None) -> None:
    """Run the interactive inventory and sales menu."""
    Shell(build_context(receipt_dir)).run()


@cli.command("demo")
def demo() -> None:
    """Stock two products, ring up a sale and print the receipt."""
    ctx = build_context()
    add_product = AddProductHandler(ctx.product_repo)
    add_item = AddSaleItemHandler(ctx.product_repo)

    widget = add_product.handle("Widget", "9.99", 10)
    gadget = add_product.handle("Gadget", "19.99", 5)

    receipt = CreateSaleHandler(ctx.receipt_sequence).handle()
    try:
        add_item.handle(receipt, widget, 3)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    try:
        add_item.handle(receipt, gadget, 10)
    except DomainException as exc:
        click.echo(f"Gadget x10 not added: {exc}")

    click.echo(receipt.render_text())
