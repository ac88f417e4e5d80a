"""Top-level controller.

Owns the AppState and builds every controller around it. Links that would
otherwise point back up the component chain (a catalog entry adding to
the cart, a login refreshing catalog and badge) are passed in as callbacks
from here.
"""

from __future__ import annotations

from shopclient.application.auth_controller import AuthController
from shopclient.application.cart_controller import CartController
from shopclient.application.catalog_view import CatalogView
from shopclient.application.order_history import OrderHistoryView
from shopclient.application.view import ShopView
from shopclient.domain.port.api_client import ApiClient
from shopclient.domain.state import AppState

DEFAULT_CURRENCY = "₹"


class ShopApp:

    def __init__(
        self,
        api: ApiClient,
        view: ShopView,
        currency: str = DEFAULT_CURRENCY,
        state: AppState | None = None,
    ) -> None:
        self.state = state if state is not None else AppState()
        self.view = view

        self.cart = CartController(self.state, api, view, currency)
        self.catalog = CatalogView(
            self.state, api, view, on_add=lambda product_id: self.cart.add_to_cart(product_id)
        )
        self.orders = OrderHistoryView(api, view, currency)
        self.auth = AuthController(self.state, api, view, on_login=self._after_login)

    def _after_login(self) -> None:
        self.catalog.load_products()
        self.cart.update_cart_count()
