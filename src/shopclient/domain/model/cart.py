"""Cart snapshot.

The local cart is never edited item by item. Each add/remove is followed
by a full ``GET /cart`` and the snapshot here is replaced wholesale with
what the server reported, so it always mirrors the last successful
response.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from shopclient.domain.exceptions import MalformedResponseError
from shopclient.domain.model.fields import as_int, pick, require
from shopclient.domain.model.product import Product
from shopclient.domain.model.value_objects import Amount


@dataclass(frozen=True)
class CartLineItem:
    product: Product
    quantity: int

    @staticmethod
    def from_payload(raw: Any) -> CartLineItem:
        return CartLineItem(
            product=Product.from_payload(require(raw, "Product", "product", what="cart item")),
            quantity=as_int(require(raw, "Quantity", "quantity", what="cart item"), "quantity"),
        )


@dataclass(frozen=True)
class Cart:
    items: tuple[CartLineItem, ...] = field(default_factory=tuple)
    total: Amount = field(default_factory=Amount.zero)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def item_count(self) -> int:
        """Sum of quantities over all lines (the badge number)."""
        return sum(item.quantity for item in self.items)

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def empty() -> Cart:
        return Cart()

    @staticmethod
    def from_payload(payload: Any) -> Cart:
        """Normalize the ``GET /cart`` body.

        Missing ``items``/``total`` default to empty/zero. A body that is not
        a JSON object at all (an HTML error page, plain text) is read the
        same way, so it produces an empty cart rather than an error.
        """
        if not isinstance(payload, Mapping):
            return Cart.empty()

        raw_items = pick(payload, "items", "Items", default=[])
        if not isinstance(raw_items, list):
            raise MalformedResponseError(
                f"Expected a list of cart items, got {type(raw_items).__name__}"
            )
        raw_total = pick(payload, "total", "Total", default=0)
        return Cart(
            items=tuple(CartLineItem.from_payload(raw) for raw in raw_items),
            total=Amount.of(raw_total),
        )
