"""Terminal implementation of ShopView.

The catalog is printed as soon as it is rendered. Cart and order history
are modal: rendering only stores the content, and it is printed when the
region is made visible.
"""

from __future__ import annotations

from typing import Callable

import click

from shopclient.application.dto import CartRow, ProductEntry
from shopclient.application.view import ShopView

ACCOUNT_CONTROLS = ("logout-btn", "view-orders-btn")


class ConsoleView(ShopView):

    def __init__(self, currency: str) -> None:
        self._currency = currency
        self._products: dict[int, ProductEntry] = {}
        self._cart_rows: dict[int, CartRow] = {}
        self._cart_total = ""
        self._order_lines: list[str] = []
        self.cart_visible = False
        self.orders_visible = False
        self.hidden_controls: set[str] = set(ACCOUNT_CONTROLS)

    # --- Actions attached to rendered entries ---------------------------------

    def product_action(self, product_id: int) -> Callable[[], None] | None:
        entry = self._products.get(product_id)
        return entry.add_to_cart if entry else None

    def remove_action(self, line_number: int) -> Callable[[], None] | None:
        row = self._cart_rows.get(line_number)
        return row.remove if row else None

    def is_control_visible(self, control_id: str) -> bool:
        return control_id not in self.hidden_controls

    # --- Catalog --------------------------------------------------------------

    def render_products(self, entries: list[ProductEntry]) -> None:
        self._products = {entry.product_id: entry for entry in entries}
        if not entries:
            click.echo("No products found.")
            return
        click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}")
        click.echo("-" * 38)
        for entry in entries:
            price = f"{self._currency} {entry.price_text}"
            click.echo(f"{entry.product_id:<6} {entry.name:<20} {price:>10}")

    def show_catalog_failure(self, message: str) -> None:
        self._products = {}
        click.echo(message)

    # --- Cart -----------------------------------------------------------------

    def render_cart(self, rows: list[CartRow], total_text: str) -> None:
        self._cart_rows = {row.line_number: row for row in rows}
        self._cart_total = total_text

    def set_cart_visible(self, visible: bool) -> None:
        self.cart_visible = visible
        if not visible:
            return
        click.echo(f"  {'#':<4} {'Product':<20} {'Qty':>5} {'Price':>10}")
        click.echo(f"  {'-'*42}")
        for row in self._cart_rows.values():
            price = f"{self._currency} {row.price_text}"
            click.echo(f"  {row.line_number:<4} {row.name:<20} {row.quantity:>5} {price:>10}")
        click.echo(f"  {'-'*42}")
        click.echo(f"  {self._cart_total}")

    def set_cart_count(self, count: int) -> None:
        click.echo(f"[cart: {count}]")

    # --- Orders ---------------------------------------------------------------

    def render_orders(self, lines: list[str]) -> None:
        self._order_lines = list(lines)

    def show_orders_placeholder(self, message: str) -> None:
        self._order_lines = [message]

    def set_orders_visible(self, visible: bool) -> None:
        self.orders_visible = visible
        if visible:
            for line in self._order_lines:
                click.echo(line)

    # --- Account --------------------------------------------------------------

    def set_auth_message(self, text: str) -> None:
        click.echo(text)

    def set_account_controls_visible(self, visible: bool) -> None:
        if visible:
            self.hidden_controls.difference_update(ACCOUNT_CONTROLS)
        else:
            self.hidden_controls.update(ACCOUNT_CONTROLS)

    # --- Notifications --------------------------------------------------------

    def alert(self, message: str) -> None:
        click.secho(f"! {message}", fg="yellow", err=True)
