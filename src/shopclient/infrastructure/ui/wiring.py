"""Binds controls to controller handlers once, at startup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from shopclient.application.shop_app import ShopApp
from shopclient.application.view import ShopView

CREDENTIALS_REQUIRED = "Enter username & password"


@dataclass
class LoginForm:
    """The username/password inputs. Read when a control fires."""

    username: str = ""
    password: str = ""


class ControlBoard:
    """Control id -> handler. Each control has exactly one handler."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], None]] = {}

    def bind(self, control_id: str, handler: Callable[[], None]) -> None:
        if control_id in self._handlers:
            raise ValueError(f"Control '{control_id}' is already bound")
        self._handlers[control_id] = handler

    def activate(self, control_id: str) -> None:
        try:
            handler = self._handlers[control_id]
        except KeyError:
            raise KeyError(f"No handler bound to '{control_id}'") from None
        handler()

    def __contains__(self, control_id: str) -> bool:
        return control_id in self._handlers

    @property
    def control_ids(self) -> list[str]:
        return list(self._handlers)


def attach_handlers(app: ShopApp, form: LoginForm, view: ShopView) -> ControlBoard:
    board = ControlBoard()

    def with_credentials(action: Callable[[str, str], None]) -> Callable[[], None]:
        def handler() -> None:
            username, password = form.username, form.password
            if not username or not password:
                view.alert(CREDENTIALS_REQUIRED)
                return
            action(username, password)
        return handler

    board.bind("signup-btn", with_credentials(app.auth.signup))
    board.bind("login-btn", with_credentials(app.auth.login))
    board.bind("view-cart-btn", app.cart.fetch_and_show_cart)
    board.bind("close-cart", app.cart.close_cart)
    board.bind("checkout-btn", app.cart.checkout)
    board.bind("view-orders-btn", app.orders.load_orders)
    board.bind("close-orders", app.orders.close)
    board.bind("logout-btn", app.auth.logout)
    return board


def start(app: ShopApp, form: LoginForm, view: ShopView) -> ControlBoard:
    """Wire every control, then load the catalog."""
    board = attach_handlers(app, form, view)
    app.catalog.load_products()
    return board
