"""Application state shared by the controllers."""

from __future__ import annotations

from dataclasses import dataclass, field

from shopclient.domain.model.cart import Cart
from shopclient.domain.model.product import Product
from shopclient.domain.model.session import Session


@dataclass
class AppState:
    """Everything the client remembers between interactions.

    Owned by ``ShopApp`` and handed to each controller by reference. The
    fields are only reassigned after a round-trip completes, never
    speculatively.
    """

    session: Session = field(default_factory=Session)
    products: list[Product] = field(default_factory=list)
    cart: Cart = field(default_factory=Cart.empty)
