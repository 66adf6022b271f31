"""Tests for the HTTP client's error handling."""

import httpx
import pytest

from storefront.client import ApiError, StorefrontClient


class TestErrors:
    def test_error_message_and_fields(self, api_client, fake_api):
        fake_api.respond("POST", "/api/register", 400, json={"message": "Invalid request data", "errors": [{"loc": []}]})
        with pytest.raises(ApiError) as exc:
            api_client.register("", "")
        assert exc.value.message == "Invalid request data"
        assert exc.value.status_code == 400
        assert exc.value.errors == [{"loc": []}]

    def test_non_json_error(self, api_client, fake_api):
        fake_api.respond("GET", "/api/products", 502, text="Bad Gateway")
        with pytest.raises(ApiError) as exc:
            api_client.get_products()
        assert exc.value.message == "Bad Gateway"
        assert exc.value.status_code == 502

    def test_non_json_success_body(self, api_client, fake_api):
        fake_api.respond("GET", "/api/products", 200, text="<html>maintenance</html>")
        with pytest.raises(ApiError) as exc:
            api_client.get_products()
        assert exc.value.message == "Unexpected response from the server"
        assert exc.value.status_code == 200

    def test_unreachable_server(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = StorefrontClient(client=httpx.Client(transport=httpx.MockTransport(handler), base_url="http://x"))
        with pytest.raises(ApiError) as exc:
            client.get_products()
        assert exc.value.status_code is None


class TestEndpoints:
    def test_products_by_category(self, api_client, fake_api):
        fake_api.respond("GET", "/api/products/category/home", json=[{"id": "p1"}])
        assert api_client.get_products("home") == [{"id": "p1"}]

    def test_all_products(self, api_client, fake_api):
        fake_api.respond("GET", "/api/products", json=[])
        assert api_client.get_products() == []

    def test_current_user_when_logged_out(self, api_client, fake_api):
        fake_api.respond("GET", "/api/user", 401, json={"message": "You must be logged in"})
        assert api_client.current_user() is None

    def test_current_user_propagates_other_errors(self, api_client, fake_api):
        fake_api.respond("GET", "/api/user", 500, json={"message": "Internal server error"})
        with pytest.raises(ApiError):
            api_client.current_user()

    def test_update_order_status_body(self, api_client, fake_api):
        fake_api.respond("PATCH", "/api/admin/orders/o1/status", json={"id": "o1", "status": "shipped"})
        api_client.update_order_status("o1", "shipped")
        assert fake_api.body() == {"status": "shipped"}
        assert fake_api.requests[-1].method == "PATCH"

    def test_context_manager_closes(self, fake_api):
        http = httpx.Client(transport=httpx.MockTransport(fake_api), base_url="http://x")
        with StorefrontClient(client=http):
            pass
        assert http.is_closed
