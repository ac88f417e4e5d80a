"""Application service: product catalog."""

from __future__ import annotations

import logging
from typing import Callable

from shopclient.application.dto import ProductEntry
from shopclient.application.view import ShopView
from shopclient.domain.exceptions import ShopClientError
from shopclient.domain.model.product import parse_catalog
from shopclient.domain.port.api_client import ApiClient
from shopclient.domain.state import AppState

logger = logging.getLogger(__name__)

CATALOG_FAILURE_MESSAGE = "Failed to load products"


class CatalogView:

    def __init__(
        self,
        state: AppState,
        api: ApiClient,
        view: ShopView,
        on_add: Callable[[int], None],
    ) -> None:
        self._state = state
        self._api = api
        self._view = view
        self._on_add = on_add

    def load_products(self) -> None:
        """Fetch the catalog, replace the cached products and re-render.

        Any failure replaces the catalog region with a static message.
        No retry.
        """
        try:
            products = parse_catalog(self._api.request("/products"))
        except ShopClientError as exc:
            logger.error("load_products failed: %s", exc)
            self._view.show_catalog_failure(CATALOG_FAILURE_MESSAGE)
            return

        self._state.products = products
        self.render()

    def render(self) -> None:
        self._view.render_products([
            ProductEntry(
                product_id=product.id,
                name=product.name,
                price_text=str(product.price),
                add_to_cart=self._bind_add(product.id),
            )
            for product in self._state.products
        ])

    def _bind_add(self, product_id: int) -> Callable[[], None]:
        return lambda: self._on_add(product_id)
