"""Application service: shopping cart and checkout.

The cart is a mirror of the server. Every mutation is a request followed
by a full ``GET /cart``; nothing is patched locally, and a failed refresh
leaves the previous snapshot in place.
"""

from __future__ import annotations

import logging
from typing import Callable

from shopclient.application.dto import CartRow
from shopclient.application.view import ShopView
from shopclient.domain.exceptions import ShopClientError
from shopclient.domain.model.cart import Cart
from shopclient.domain.model.order import OrderReceipt
from shopclient.domain.model.value_objects import Quantity
from shopclient.domain.port.api_client import ApiClient
from shopclient.domain.state import AppState

logger = logging.getLogger(__name__)


class CartController:

    def __init__(
        self,
        state: AppState,
        api: ApiClient,
        view: ShopView,
        currency: str,
    ) -> None:
        self._state = state
        self._api = api
        self._view = view
        self._currency = currency

    # --- Mutations ------------------------------------------------------------

    def add_to_cart(self, product_id: int, quantity: int = 1) -> None:
        try:
            qty = Quantity(quantity)
            self._api.request(
                "/cart/add",
                method="POST",
                body={"product_id": product_id, "quantity": qty.value},
            )
        except ShopClientError as exc:
            logger.error("add_to_cart(%s) failed: %s", product_id, exc)
            self._view.alert("Add to cart failed")
            return

        self.fetch_and_show_cart()

    def remove_from_cart(self, line_number: int) -> None:
        """Remove the cart line at 1-based *line_number*, then refresh.

        The server keys removal by position in its own list, so the number
        is only meaningful against the cart as last rendered. Two removals
        issued before the refresh lands can hit the wrong line.
        """
        try:
            self._api.request(f"/cart/remove/{line_number}", method="DELETE")
        except ShopClientError as exc:
            logger.error("remove_from_cart(%s) failed: %s", line_number, exc)
            self._view.alert("Remove failed")
            return

        self.fetch_and_show_cart()

    def checkout(self) -> None:
        """Turn the server-side cart into an order.

        An empty local cart is rejected without contacting the server.
        """
        if self._state.cart.is_empty:
            self._view.alert("Cart is empty, nothing to check out")
            return

        try:
            payload = self._api.request("/orders", method="POST")
            receipt = OrderReceipt.from_response(payload, fallback_total=self._state.cart.total)
        except ShopClientError as exc:
            logger.error("checkout failed: %s", exc)
            self._view.alert("Checkout failed")
            return

        self._view.alert(receipt.confirmation(self._currency))

        self._state.cart = Cart.empty()
        self.render_cart()
        self._view.set_cart_visible(False)
        self.update_cart_count()

    # --- Queries --------------------------------------------------------------

    def fetch_and_show_cart(self) -> None:
        try:
            cart = Cart.from_payload(self._api.request("/cart"))
        except ShopClientError as exc:
            logger.error("fetch_and_show_cart failed: %s", exc)
            self._view.alert("Cart fetch failed")
            return

        self._state.cart = cart
        self.render_cart()
        self._view.set_cart_visible(True)
        self.update_cart_count()

    def render_cart(self) -> None:
        rows = [
            CartRow(
                line_number=index,
                name=item.product.name,
                quantity=item.quantity,
                price_text=str(item.product.price),
                remove=self._bind_remove(index),
            )
            for index, item in enumerate(self._state.cart.items, start=1)
        ]
        self._view.render_cart(rows, f"Total: {self._currency} {self._state.cart.total}")

    def update_cart_count(self) -> None:
        self._view.set_cart_count(self._state.cart.item_count)

    def close_cart(self) -> None:
        self._view.set_cart_visible(False)

    def _bind_remove(self, line_number: int) -> Callable[[], None]:
        return lambda: self.remove_from_cart(line_number)
