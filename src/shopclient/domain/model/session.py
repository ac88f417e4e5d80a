"""In-memory login session."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Session:
    """Holds at most one opaque token.

    There is no expiry tracking. A stale token is only noticed when a later
    request fails. The token is never persisted.
    """

    token: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def start(self, token: str | None) -> None:
        self.token = token

    def clear(self) -> None:
        self.token = None
