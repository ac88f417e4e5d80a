"""Client-level exceptions.

Every failure a controller can run into is a subclass of ShopClientError
so the controllers can catch them uniformly and turn them into the
user-visible message for that operation.
"""


class ShopClientError(Exception):
    """Base class for all shop client errors."""


class ValidationError(ShopClientError):
    """A local input guard rejected the request before any network call."""


class ApiUnavailableError(ShopClientError):
    """The HTTP exchange could not complete (connection, DNS, timeout)."""


class MalformedResponseError(ShopClientError):
    """A response body did not have the shape the caller needs."""
