"""Builds the httpx API client and the ShopApp from the settings.

The CLI commands get their collaborators from here and nowhere else.
"""

from __future__ import annotations

from shopclient.application.shop_app import ShopApp
from shopclient.application.view import ShopView
from shopclient.infrastructure.config import settings
from shopclient.infrastructure.http.api_client import HttpApiClient


def api_client(
    api_url: str | None = None, timeout: float | None = None
) -> HttpApiClient:
    return HttpApiClient(
        base_url=api_url or settings.API_URL,
        timeout=timeout if timeout is not None else settings.HTTP_TIMEOUT,
    )


def shop_app(api: HttpApiClient, view: ShopView) -> ShopApp:
    return ShopApp(api=api, view=view, currency=settings.CURRENCY_SYMBOL)
