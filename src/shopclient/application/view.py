"""Abstract display surface driven by the controllers.

Each method corresponds to one region or control of the screen. The
console front end implements it for a terminal; tests use a recording
fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopclient.application.dto import CartRow, ProductEntry


class ShopView(ABC):

    # --- Catalog --------------------------------------------------------------

    @abstractmethod
    def render_products(self, entries: list[ProductEntry]) -> None:
        """Replace the catalog region with *entries*."""

    @abstractmethod
    def show_catalog_failure(self, message: str) -> None:
        """Replace the catalog region with a static failure message."""

    # --- Cart -----------------------------------------------------------------

    @abstractmethod
    def render_cart(self, rows: list[CartRow], total_text: str) -> None:
        """Replace the cart line list and total line."""

    @abstractmethod
    def set_cart_visible(self, visible: bool) -> None: ...

    @abstractmethod
    def set_cart_count(self, count: int) -> None:
        """Write the item-count badge."""

    # --- Orders ---------------------------------------------------------------

    @abstractmethod
    def render_orders(self, lines: list[str]) -> None:
        """Replace the order-history region, one line per order."""

    @abstractmethod
    def show_orders_placeholder(self, message: str) -> None: ...

    @abstractmethod
    def set_orders_visible(self, visible: bool) -> None: ...

    # --- Account --------------------------------------------------------------

    @abstractmethod
    def set_auth_message(self, text: str) -> None: ...

    @abstractmethod
    def set_account_controls_visible(self, visible: bool) -> None:
        """Show or hide the logout and view-orders controls."""

    # --- Notifications --------------------------------------------------------

    @abstractmethod
    def alert(self, message: str) -> None:
        """Blocking, user-visible notification."""
