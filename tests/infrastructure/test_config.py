"""Tests for settings and the composition root."""

from shopclient.infrastructure import bootstrap
from shopclient.infrastructure.config import Settings
from tests.fakes import FakeView


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SHOP_API_URL", raising=False)
        monkeypatch.delenv("SHOP_HTTP_TIMEOUT", raising=False)
        settings = Settings(_env_file=None)
        assert settings.API_URL == "http://localhost:8080"
        assert settings.HTTP_TIMEOUT is None

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("SHOP_API_URL", "http://shop.internal:9000")
        monkeypatch.setenv("SHOP_HTTP_TIMEOUT", "2.5")
        monkeypatch.setenv("SHOP_CURRENCY_SYMBOL", "$")
        settings = Settings(_env_file=None)
        assert settings.API_URL == "http://shop.internal:9000"
        assert settings.HTTP_TIMEOUT == 2.5
        assert settings.CURRENCY_SYMBOL == "$"


class TestBootstrap:

    def test_shop_app_uses_configured_currency(self, monkeypatch):
        monkeypatch.setattr(bootstrap.settings, "CURRENCY_SYMBOL", "$")
        view = FakeView()
        with bootstrap.api_client("http://shop.test") as api:
            bootstrap.shop_app(api, view).cart.render_cart()
        assert view.cart_total_text == "Total: $ 0"
