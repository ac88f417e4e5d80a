"""Tests for the httpx-backed API client."""

import json

import httpx
import pytest

from shopclient.domain.exceptions import ApiUnavailableError
from shopclient.infrastructure.http.api_client import HttpApiClient, parse_body


def _client(handler) -> HttpApiClient:
    return HttpApiClient("http://shop.test/", transport=httpx.MockTransport(handler))


class TestParseBody:

    def test_empty_body_is_empty_object(self):
        assert parse_body("") == {}

    def test_json_array(self):
        assert parse_body('[{"ID": 1}]') == [{"ID": 1}]

    def test_non_json_returned_as_text(self):
        assert parse_body("<html>oops</html>") == "<html>oops</html>"


class TestRequest:

    def test_get_sends_accept_header_only(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=[])

        with _client(handler) as api:
            assert api.request("/products") == []

        request = seen[0]
        assert request.method == "GET"
        assert str(request.url) == "http://shop.test/products"
        assert request.headers["accept"] == "application/json"
        assert "content-type" not in request.headers

    def test_structured_body_is_json_encoded(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"message": "added"})

        with _client(handler) as api:
            result = api.request("/cart/add", method="POST", body={"product_id": 1, "quantity": 2})

        assert result == {"message": "added"}
        assert seen[0].headers["content-type"] == "application/json"
        assert json.loads(seen[0].content) == {"product_id": 1, "quantity": 2}

    def test_string_body_sent_as_is(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, text="")

        with _client(handler) as api:
            api.request("/raw", method="POST", body="already=encoded")

        assert seen[0].content == b"already=encoded"
        assert "content-type" not in seen[0].headers

    def test_empty_response_is_empty_object(self):
        with _client(lambda request: httpx.Response(200, text="")) as api:
            assert api.request("/cart/remove/1", method="DELETE") == {}

    def test_error_status_not_raised(self):
        def handler(request):
            return httpx.Response(401, json={"error": "invalid credentials"})

        with _client(handler) as api:
            assert api.request("/users/login", method="POST", body={}) == {"error": "invalid credentials"}

    def test_error_page_returned_as_text(self):
        with _client(lambda request: httpx.Response(500, text="Internal Server Error")) as api:
            assert api.request("/cart") == "Internal Server Error"

    def test_transport_failure_raises(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with _client(handler) as api:
            with pytest.raises(ApiUnavailableError, match="GET /products failed"):
                api.request("/products")

    def test_timeout_raises(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with _client(handler) as api:
            with pytest.raises(ApiUnavailableError):
                api.request("/orders")
