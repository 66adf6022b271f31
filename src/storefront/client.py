"""HTTP client for the storefront REST API."""

from typing import Any

import httpx

from shared.config import settings
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class ApiError(Exception):
    """Raised when the API answers with an error status or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None, errors: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors


class StorefrontClient:
    """Blocking client for the storefront API.

    The session cookie set by ``login``/``register`` is kept on the underlying
    ``httpx.Client`` and sent with every later request.
    """

    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.client = client or httpx.Client(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = self.client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("api_unreachable", method=method, path=path, error=str(exc))
            raise ApiError(f"Could not reach the server: {exc}") from exc

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = None
            message = body.get("message") if isinstance(body, dict) else None
            errors = body.get("errors") if isinstance(body, dict) else None
            logger.info("api_error", method=method, path=path, status_code=response.status_code)
            raise ApiError(
                message or response.text or response.reason_phrase,
                status_code=response.status_code,
                errors=errors,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            logger.warning("api_invalid_body", method=method, path=path, status_code=response.status_code)
            raise ApiError("Unexpected response from the server", status_code=response.status_code) from exc

    # -- Catalogue ---------------------------------------------------------
    def get_products(self, category: str = "all") -> list[dict]:
        if category == "all":
            return self._request("GET", "/api/products")
        return self._request("GET", f"/api/products/category/{category}")

    def get_product(self, product_id: str) -> dict:
        return self._request("GET", f"/api/products/{product_id}")

    # -- Identity ----------------------------------------------------------
    def register(self, username: str, password: str) -> dict:
        return self._request("POST", "/api/register", json={"username": username, "password": password})

    def login(self, username: str, password: str) -> dict:
        return self._request("POST", "/api/login", json={"username": username, "password": password})

    def logout(self) -> None:
        self._request("POST", "/api/logout")

    def current_user(self) -> dict | None:
        try:
            return self._request("GET", "/api/user")
        except ApiError as exc:
            if exc.status_code == 401:
                return None
            raise

    # -- Ordering ----------------------------------------------------------
    def create_order(self, payload: dict) -> dict:
        return self._request("POST", "/api/orders", json=payload)

    def my_orders(self) -> list[dict]:
        return self._request("GET", "/api/orders/my-orders")

    def admin_orders(self) -> list[dict]:
        return self._request("GET", "/api/admin/orders")

    def admin_order(self, order_id: str) -> dict:
        return self._request("GET", f"/api/admin/orders/{order_id}")

    def update_order_status(self, order_id: str, status: str) -> dict:
        return self._request("PATCH", f"/api/admin/orders/{order_id}/status", json={"status": status})

    def close(self) -> None:
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
