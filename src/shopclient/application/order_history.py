"""Application service: order history (query)."""

from __future__ import annotations

import logging

from shopclient.application.view import ShopView
from shopclient.domain.exceptions import ShopClientError
from shopclient.domain.model.order import parse_order_history
from shopclient.domain.port.api_client import ApiClient

logger = logging.getLogger(__name__)

NO_ORDERS_MESSAGE = "No orders found."


class OrderHistoryView:

    def __init__(self, api: ApiClient, view: ShopView, currency: str) -> None:
        self._api = api
        self._view = view
        self._currency = currency

    def load_orders(self) -> None:
        try:
            orders = parse_order_history(self._api.request("/orders"))
        except ShopClientError as exc:
            logger.error("load_orders failed: %s", exc)
            self._view.alert("Failed to load orders")
            return

        if not orders:
            self._view.show_orders_placeholder(NO_ORDERS_MESSAGE)
        else:
            self._view.render_orders([order.summary(self._currency) for order in orders])
        self._view.set_orders_visible(True)

    def close(self) -> None:
        self._view.set_orders_visible(False)
