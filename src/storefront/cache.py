"""In-memory query cache keyed by request path."""

from typing import Any

ADMIN_ORDERS_KEY = "/api/admin/orders"


def admin_order_key(order_id: str) -> str:
    return f"{ADMIN_ORDERS_KEY}/{order_id}"


class QueryCache:
    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}

    def get(self, key: str, default=None):
        return self._entries.get(key, default)

    def set(self, key: str, value) -> None:
        self._entries[key] = value

    def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def clear(self) -> None:
        self._entries.clear()
