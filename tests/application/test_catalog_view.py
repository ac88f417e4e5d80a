"""Integration tests for the catalog view.

Uses the fake backend behind the real HTTP client, no sockets.
"""

import httpx

from shopclient.application.shop_app import ShopApp
from shopclient.domain.model.product import Product
from shopclient.domain.model.value_objects import Amount
from tests.fakes import FakeShopBackend, FakeView


def _setup(products: list[dict] | None = None) -> tuple[ShopApp, FakeShopBackend, FakeView]:
    backend = FakeShopBackend(products)
    view = FakeView()
    app = ShopApp(backend.client(), view)
    return app, backend, view


class TestLoadProducts:

    def test_renders_two_products_with_prices(self):
        app, _, view = _setup([
            {"id": 1, "name": "A", "price": 10},
            {"id": 2, "name": "B", "price": 20},
        ])
        app.catalog.load_products()
        assert len(view.products) == 2
        assert [e.price_text for e in view.products] == ["10", "20"]
        assert [e.name for e in view.products] == ["A", "B"]

    def test_replaces_cached_products(self):
        app, backend, _ = _setup()
        app.catalog.load_products()
        assert len(app.state.products) == 3

        backend.products = [{"ID": 9, "Name": "Hat", "Price": 50}]
        app.catalog.load_products()
        assert app.state.products == [Product(id=9, name="Hat", price=Amount.of(50))]

    def test_network_failure_shows_message(self):
        app, backend, view = _setup()
        backend.fail("GET", "/products")
        app.catalog.load_products()
        assert view.catalog_message == "Failed to load products"
        assert view.products == []
        assert view.alerts == []

    def test_large_price_rendered(self):
        app, _, view = _setup([{"ID": 1, "Name": "Yacht", "Price": 12345678901234567890123456789}])
        app.catalog.load_products()
        assert view.catalog_message is None
        assert view.products[0].price_text == "12345678901234567890123456789"

    def test_non_list_body_shows_message(self):
        app, backend, view = _setup()
        backend.respond("GET", "/products", httpx.Response(500, text="upstream error"))
        app.catalog.load_products()
        assert view.catalog_message == "Failed to load products"

    def test_failure_keeps_previous_cache(self):
        app, backend, _ = _setup()
        app.catalog.load_products()
        backend.fail("GET", "/products")
        app.catalog.load_products()
        assert len(app.state.products) == 3

    def test_no_retry_on_failure(self):
        app, backend, _ = _setup()
        backend.fail("GET", "/products")
        app.catalog.load_products()
        assert len(backend.calls("GET", "/products")) == 1


class TestRender:

    def test_entry_action_adds_one_unit(self):
        app, backend, view = _setup()
        app.catalog.load_products()

        jeans = next(e for e in view.products if e.product_id == 2)
        jeans.add_to_cart()

        add_calls = backend.calls("POST", "/cart/add")
        assert len(add_calls) == 1
        assert add_calls[0].content == b'{"product_id": 2, "quantity": 1}'
        assert view.cart_count == 1

    def test_render_uses_current_state(self):
        app, _, view = _setup()
        app.state.products = [Product(id=4, name="Cap", price=Amount.of(5))]
        app.catalog.render()
        assert [(e.product_id, e.price_text) for e in view.products] == [(4, "5")]
