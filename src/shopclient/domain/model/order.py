"""Orders and the checkout response.

Orders are historical records. The client lists them and never changes
them, so everything here is frozen.

``POST /orders`` has been seen to answer either ``{"order": {...}}`` or the
order object itself. The two envelopes are kept as distinct types and
collapsed into one ``OrderReceipt`` by ``OrderReceipt.from_response``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from shopclient.domain.exceptions import MalformedResponseError
from shopclient.domain.model.fields import as_int, pick, require
from shopclient.domain.model.value_objects import Amount


@dataclass(frozen=True)
class OrderLineItem:
    product_name: str
    quantity: int

    @staticmethod
    def from_payload(raw: Any) -> OrderLineItem:
        product = require(raw, "Product", "product", what="order item")
        return OrderLineItem(
            product_name=str(require(product, "Name", "name", what="product")),
            quantity=as_int(require(raw, "Quantity", "quantity", what="order item"), "quantity"),
        )

    def __str__(self) -> str:
        return f"{self.product_name} x {self.quantity}"


@dataclass(frozen=True)
class Order:
    id: str
    items: tuple[OrderLineItem, ...]
    total: Amount

    @staticmethod
    def from_payload(raw: Any) -> Order:
        raw_items = pick(raw, "Items", "items", default=[]) if isinstance(raw, Mapping) else []
        if not isinstance(raw_items, list):
            raise MalformedResponseError(
                f"Expected a list of order items, got {type(raw_items).__name__}"
            )
        return Order(
            id=str(require(raw, "ID", "id", what="order")),
            items=tuple(OrderLineItem.from_payload(item) for item in raw_items),
            total=Amount.of(require(raw, "Total", "total", what="order")),
        )

    def summary(self, currency: str) -> str:
        """One-line description used by the order history list."""
        items_text = ", ".join(str(item) for item in self.items)
        return f"Order #{self.id}: [ {items_text} ] Total {currency} {self.total}"


def parse_order_history(payload: Any) -> list[Order]:
    """Normalize the ``GET /orders`` body. Anything but a list is no orders."""
    if not isinstance(payload, list):
        return []
    return [Order.from_payload(raw) for raw in payload]


# ---------------------------------------------------------------------------
# Checkout response shapes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class WrappedOrderResponse:
    """``{"order": {...}}``"""

    order: Mapping[str, Any]


@dataclass(frozen=True)
class BareOrderResponse:
    """The order object at the top level (or nothing usable at all)."""

    order: Mapping[str, Any] = field(default_factory=dict)


CheckoutResponse = Union[WrappedOrderResponse, BareOrderResponse]


def classify_checkout_response(payload: Any) -> CheckoutResponse:
    if isinstance(payload, Mapping):
        wrapped = payload.get("order")
        if isinstance(wrapped, Mapping):
            return WrappedOrderResponse(order=wrapped)
        if wrapped not in (None, False, 0, ""):
            # An "order" that is not an object still wins over the outer
            # fields; it just has no id or total to offer.
            return WrappedOrderResponse(order={})
        return BareOrderResponse(order=payload)
    # Plain text or a JSON scalar: there is no order object to read.
    return BareOrderResponse()


@dataclass(frozen=True)
class OrderReceipt:
    """What the client learns from a successful checkout."""

    order_id: str | None
    total: Amount

    @staticmethod
    def from_response(payload: Any, fallback_total: Amount) -> OrderReceipt:
        """Read id and total from either checkout envelope.

        The total falls back to *fallback_total* (the local cart total) when
        the server does not report one.
        """
        response = classify_checkout_response(payload)
        order = response.order
        raw_id = pick(order, "ID", "id")
        raw_total = pick(order, "Total", "total")
        return OrderReceipt(
            order_id=str(raw_id) if raw_id is not None else None,
            total=Amount.of(raw_total) if raw_total is not None else fallback_total,
        )

    def confirmation(self, currency: str) -> str:
        ref = f"#{self.order_id} " if self.order_id is not None else ""
        return f"Order {ref}placed. Total {currency} {self.total}"
