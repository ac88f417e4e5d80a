"""httpx-backed implementation of ApiClient."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from shopclient.domain.exceptions import ApiUnavailableError
from shopclient.domain.port.api_client import ApiClient

logger = logging.getLogger(__name__)


class HttpApiClient(ApiClient):
    """One long-lived ``httpx.Client`` per session.

    The client keeps a cookie jar, so a cookie set by the login response
    is sent on every later request. No Authorization header is added.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
        )

    # --- ApiClient interface --------------------------------------------------

    def request(self, path: str, method: str = "GET", body: Any = None) -> Any:
        headers = {"Accept": "application/json"}
        content: str | bytes | None = None

        if body is not None:
            if isinstance(body, (str, bytes)):
                content = body
            else:
                headers["Content-Type"] = "application/json"
                content = json.dumps(body)

        try:
            response = self._client.request(method, path, content=content, headers=headers)
        except httpx.HTTPError as exc:
            raise ApiUnavailableError(f"{method} {path} failed: {exc}") from exc

        logger.debug("%s %s -> %s", method, path, response.status_code)
        return parse_body(response.text)

    # --- Lifecycle ------------------------------------------------------------

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def parse_body(text: str) -> Any:
    """Decode *text* as JSON; empty means ``{}``, anything unparseable is
    returned unchanged."""
    try:
        return json.loads(text or "{}")
    except ValueError:
        return text
