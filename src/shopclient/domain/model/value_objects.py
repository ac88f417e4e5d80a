"""Small frozen types for the numbers the client handles.

Amounts come from the server and are only displayed; quantities go to the
server and are checked before the request is made.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from shopclient.domain.exceptions import MalformedResponseError, ValidationError


@dataclass(frozen=True)
class Amount:
    """A price or total as reported by the server.

    The client never does arithmetic on money; it only mirrors what the
    server sends, so there is no currency field. The unit is whatever the
    backend uses.
    """

    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise MalformedResponseError(
                f"Amount must be a Decimal, got {type(self.value).__name__}"
            )

    def __str__(self) -> str:
        # Fixed-point text, no exponent, no trailing fractional zeros.
        text = f"{self.value:f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(raw: str | float | int | Decimal) -> Amount:
        """Coerce a JSON number (or numeric string) to an Amount."""
        if isinstance(raw, bool):
            raise MalformedResponseError(f"Invalid amount: {raw!r}")
        try:
            value = Decimal(str(raw))
        except (InvalidOperation, ValueError) as exc:
            raise MalformedResponseError(f"Invalid amount: {raw!r}") from exc
        if not value.is_finite():
            raise MalformedResponseError(f"Invalid amount: {raw!r}")
        return Amount(value)

    @staticmethod
    def zero() -> Amount:
        return Amount(Decimal(0))


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity for an add-to-cart request."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
