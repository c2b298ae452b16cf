"""Interactive menu for running the store from a terminal.

Every action is a thin wrapper around one application handler. Domain
errors are reported inline and the menu keeps running.
"""

from __future__ import annotations

import logging
from decimal import Decimal

import click

from ims.application.add_product import AddProductHandler
from ims.application.add_sale_item import AddSaleItemHandler
from ims.application.create_sale import CreateSaleHandler
from ims.application.list_products import ListProductsHandler
from ims.application.remove_product import RemoveProductHandler
from ims.application.show_product import ShowProductHandler
from ims.application.update_product import UpdateProductHandler
from ims.application.update_stock import UpdateStockHandler
from ims.domain.exceptions import DomainException, ValidationError
from ims.domain.model.value_objects import parse_amount
from ims.infrastructure.bootstrap import AppContext

logger = logging.getLogger(__name__)

MENU = """
===== Inventory Management System =====
1. View all products
2. Add new product
3. Update product details
4. Update stock level
5. Create a sale (with receipt)
6. Remove product
0. Exit"""


def _ask(text: str) -> str:
    return click.prompt(text, default="", show_default=False)


def _parse_int(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _parse_new_price(raw: str) -> Decimal | None:
    # Text that is not a number keeps the current price, like 0 does
    try:
        return parse_amount(raw)
    except ValidationError:
        return None


class Shell:

    def __init__(self, context: AppContext) -> None:
        self._ctx = context
        self._actions = {
            1: self.display_products,
            2: self.add_product,
            3: self.update_product,
            4: self.update_stock,
            5: self.process_sale,
            6: self.remove_product,
        }

    def run(self) -> None:
        while True:
            click.echo(MENU)
            choice = _parse_int(_ask("\nEnter your choice"))
            click.echo()

            if choice is None:
                click.echo("Invalid input. Please enter a number.")
            elif choice == 0:
                break
            elif choice in self._actions:
                logger.debug("Menu action %d selected", choice)
                self._actions[choice]()
            else:
                click.echo("Invalid choice.")

        click.echo("Thank you for using the Inventory Management System!")

    # --- Actions --------------------------------------------------------------

    def display_products(self) -> None:
        products = ListProductsHandler(self._ctx.product_repo).handle()

        if not products:
            click.echo("No products in inventory.")
            return

        click.echo("Product List:")
        click.echo("------------")
        for product in products:
            click.echo(str(product))

    def add_product(self) -> None:
        name = _ask("Enter product name")
        price = _ask("Enter price ($)")

        stock = _parse_int(_ask("Enter initial stock"))
        if stock is None:
            click.echo("Invalid stock quantity.")
            return

        handler = AddProductHandler(self._ctx.product_repo)
        try:
            product_id = handler.handle(name=name, price=price, initial_stock=stock)
        except DomainException as exc:
            self._report(exc)
            return

        click.echo(f"Product added successfully with ID: {product_id}")

    def update_product(self) -> None:
        self.display_products()

        product_id = _parse_int(_ask("\nEnter product ID to update"))
        if product_id is None:
            click.echo("Invalid ID.")
            return

        try:
            product = ShowProductHandler(self._ctx.product_repo).handle(product_id)
            click.echo(f"Current details: {product}")

            name = _ask("Enter new name (leave empty to keep current)")
            price = _ask("Enter new price ($, 0 to keep current)")

            UpdateProductHandler(self._ctx.product_repo).handle(
                product_id, name=name, price=_parse_new_price(price)
            )
        except DomainException as exc:
            self._report(exc)
            return

        click.echo("Product updated successfully.")

    def update_stock(self) -> None:
        self.display_products()

        product_id = _parse_int(_ask("\nEnter product ID to update stock"))
        if product_id is None:
            click.echo("Invalid ID.")
            return

        stock = _parse_int(_ask("Enter new stock level"))
        if stock is None:
            click.echo("Invalid stock quantity.")
            return

        try:
            UpdateStockHandler(self._ctx.product_repo).handle(product_id, stock)
        except DomainException as exc:
            self._report(exc)
            return

        click.echo("Stock updated successfully.")

    def process_sale(self) -> None:
        receipt = CreateSaleHandler(self._ctx.receipt_sequence).handle()
        add_item = AddSaleItemHandler(self._ctx.product_repo)

        while True:
            self.display_products()

            product_id = _parse_int(_ask("\nEnter product ID to sell (0 to finish)"))
            if product_id is None or product_id < 0:
                click.echo("Invalid ID.")
                continue
            if product_id == 0:
                break

            quantity = _parse_int(_ask("Enter quantity to sell"))
            if quantity is None or quantity <= 0:
                click.echo("Invalid quantity.")
                continue

            try:
                add_item.handle(receipt, product_id, quantity)
            except DomainException as exc:
                self._report(exc)
                continue

            click.echo("Item added to sale.")
            if _ask("Add another item? (Y/N)").strip().upper() != "Y":
                break

        if receipt.is_empty:
            logger.debug("Receipt #%s discarded with no items", receipt.id)
            click.echo("Sale cancelled - no items added.")
            return

        click.echo(receipt.render_text())

        if click.confirm("Do you want to save this receipt to a file?", default=False):
            path = self._ctx.receipt_writer.write(receipt)
            click.echo(f"Receipt saved to {path}")

    def remove_product(self) -> None:
        self.display_products()

        product_id = _parse_int(_ask("\nEnter product ID to remove"))
        if product_id is None:
            click.echo("Invalid ID.")
            return

        try:
            RemoveProductHandler(self._ctx.product_repo).handle(product_id)
        except DomainException as exc:
            self._report(exc)
            return

        click.echo("Product removed successfully.")

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _report(exc: DomainException) -> None:
        logger.warning("%s rejected: %s", type(exc).__name__, exc)
        click.echo(f"Error: {exc}")
