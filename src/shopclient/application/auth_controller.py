"""Application service: signup, login and logout.

The token returned by login is kept in the session but is not attached
to later requests. Whether the backend relies on a cookie instead, or
the header was never wired up, is not settled; the HTTP client's cookie
jar carries whatever the server sets.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from shopclient.application.view import ShopView
from shopclient.domain.exceptions import ShopClientError
from shopclient.domain.port.api_client import ApiClient
from shopclient.domain.state import AppState

logger = logging.getLogger(__name__)


class AuthController:

    def __init__(
        self,
        state: AppState,
        api: ApiClient,
        view: ShopView,
        on_login: Callable[[], None],
    ) -> None:
        self._state = state
        self._api = api
        self._view = view
        self._on_login = on_login

    def signup(self, username: str, password: str) -> None:
        try:
            self._api.request(
                "/users",
                method="POST",
                body={"username": username, "password": password},
            )
        except ShopClientError as exc:
            logger.error("signup failed: %s", exc)
            self._view.set_auth_message("Signup failed")
            return

        self._view.set_auth_message("Signup success, now login")

    def login(self, username: str, password: str) -> None:
        try:
            response = self._api.request(
                "/users/login",
                method="POST",
                body={"username": username, "password": password},
            )
        except ShopClientError as exc:
            logger.error("login failed: %s", exc)
            self._view.set_auth_message("Login failed")
            return

        self._state.session.start(_token_from(response))
        self._view.set_auth_message("Logged in")
        self._view.set_account_controls_visible(True)
        self._on_login()

    def logout(self) -> None:
        """Forget the token locally. The server is not told."""
        self._state.session.clear()
        self._view.set_account_controls_visible(False)
        self._view.set_auth_message("Logged out")


def _token_from(response: Any) -> str | None:
    if isinstance(response, Mapping):
        token = response.get("token")
        return str(token) if token is not None else None
    return None
