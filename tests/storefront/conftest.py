import json

import httpx
import pytest

from storefront.cache import QueryCache
from storefront.cart.snapshots import MemorySnapshotStore
from storefront.cart.store import CartStore
from storefront.client import StorefrontClient
from storefront.notifications import Notifier


@pytest.fixture()
def wallet():
    return {"id": "prod-wallet", "name": "Leather Wallet", "price": "10.00", "image": "wallet.jpg"}


@pytest.fixture()
def sunglasses():
    return {"id": "prod-sun", "name": "Sunglasses", "price": 5, "image": "sun.jpg"}


@pytest.fixture()
def cleaning():
    return {"id": "prod-clean", "name": "Home Cleaning", "price": "89.99", "is_service": True}


@pytest.fixture()
def snapshots():
    return MemorySnapshotStore()


@pytest.fixture()
def notifier():
    return Notifier()


@pytest.fixture()
def cart_store(snapshots, notifier):
    return CartStore(snapshots, notifier)


@pytest.fixture()
def cache():
    return QueryCache()


class FakeApi:
    """Scripted responses for ``httpx.MockTransport``, recording every request."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], dict] = {}

    def respond(self, method: str, path: str, status_code: int = 200, **kwargs):
        self.routes[(method, path)] = {"status_code": status_code, **kwargs}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "Not found"})
        return httpx.Response(**route)

    def body(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)


@pytest.fixture()
def fake_api():
    return FakeApi()


@pytest.fixture()
def api_client(fake_api):
    transport = httpx.MockTransport(fake_api)
    return StorefrontClient(client=httpx.Client(transport=transport, base_url="http://storefront.test"))
