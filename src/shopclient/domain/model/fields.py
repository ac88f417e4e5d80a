"""Helpers for reading loosely-shaped JSON records.

The backend serializes some structs with Go field names (``ID``, ``Total``)
and wraps others in lower-case envelopes (``items``, ``total``). Readers
accept either spelling.
"""

from __future__ import annotations

from typing import Any, Mapping

from shopclient.domain.exceptions import MalformedResponseError

_MISSING = object()


def pick(record: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first key present with a non-null value, else *default*."""
    for key in keys:
        value = record.get(key, _MISSING)
        if value is not _MISSING and value is not None:
            return value
    return default


def require(record: Any, *keys: str, what: str) -> Any:
    """Like ``pick`` but the field must be there."""
    if not isinstance(record, Mapping):
        raise MalformedResponseError(
            f"Expected an object for {what}, got {type(record).__name__}"
        )
    value = pick(record, *keys, default=_MISSING)
    if value is _MISSING:
        raise MalformedResponseError(f"{what} is missing field '{keys[0]}'")
    return value


def as_int(raw: Any, what: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise MalformedResponseError(f"{what} must be an integer, got {raw!r}")
    if isinstance(raw, float) and not raw.is_integer():
        raise MalformedResponseError(f"{what} must be an integer, got {raw!r}")
    try:
        value = int(raw)
    except ValueError as exc:
        raise MalformedResponseError(f"{what} must be an integer, got {raw!r}") from exc
    return value
