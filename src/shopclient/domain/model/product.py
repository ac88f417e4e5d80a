"""Product as listed by the catalog endpoint.

Products are read-only on the client: the whole catalog is replaced on
every fetch and nothing ever edits a single product in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from shopclient.domain.exceptions import MalformedResponseError
from shopclient.domain.model.fields import as_int, require
from shopclient.domain.model.value_objects import Amount


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: Amount

    @staticmethod
    def from_payload(raw: Any) -> Product:
        """Build a Product from one ``{ID, Name, Price}`` record."""
        return Product(
            id=as_int(require(raw, "ID", "id", what="product"), "product id"),
            name=str(require(raw, "Name", "name", what="product")),
            price=Amount.of(require(raw, "Price", "price", what="product")),
        )


def parse_catalog(payload: Any) -> list[Product]:
    """Normalize the ``GET /products`` body into a product list."""
    if not isinstance(payload, list):
        raise MalformedResponseError(
            f"Expected a product list, got {type(payload).__name__}"
        )
    return [Product.from_payload(raw) for raw in payload]
