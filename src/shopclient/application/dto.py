"""Data Transfer Objects handed from the controllers to the view.

Rendered entries carry their action as a bound callable so the view never
has to work out which product or line a control belongs to.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class ProductEntry:
    """One catalog card."""

    product_id: int
    name: str
    price_text: str  # e.g. "399", currency symbol added by the view
    add_to_cart: Callable[[], None]


@dataclass(frozen=True)
class CartRow:
    """One cart line as displayed.

    ``line_number`` is the 1-based position in the rendered list, which is
    also the key the remove endpoint expects.
    """

    line_number: int
    name: str
    quantity: int
    price_text: str
    remove: Callable[[], None]
