"""Abstract gateway to the shop HTTP API.

Defined next to the model so controllers never depend on the transport.
The concrete httpx implementation lives in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ApiClient(ABC):

    @abstractmethod
    def request(self, path: str, method: str = "GET", body: Any = None) -> Any:
        """Perform one exchange and return the parsed response body.

        The body is decoded JSON when it parses, ``{}`` when it is empty and
        the raw text otherwise. HTTP status codes are not inspected.

        Raises ApiUnavailableError if the exchange cannot complete.
        """
