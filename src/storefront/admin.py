"""Admin Order Viewer: cached order list and details, status changes."""

from decimal import Decimal

from shared.orders import ORDER_STATUSES, is_valid_status
from shared.pricing import subtotal, to_money
from storefront.cache import ADMIN_ORDERS_KEY, QueryCache, admin_order_key
from storefront.client import ApiError, StorefrontClient
from storefront.notifications import Notifier, Variant
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class AdminOrderViewer:
    """Reads and status changes for the admin order screens.

    Reads (``orders``, ``search``, ``order``) raise ``ApiError`` and leave
    the cache untouched, so the caller decides how to render a failed load.
    ``update_status`` is a user action and reports its outcome through the
    notifier instead of raising.
    """

    def __init__(self, client: StorefrontClient, cache: QueryCache, notifier: Notifier) -> None:
        self.client = client
        self.cache = cache
        self.notifier = notifier

    def orders(self, refresh: bool = False) -> list[dict]:
        if refresh or ADMIN_ORDERS_KEY not in self.cache:
            self.cache.set(ADMIN_ORDERS_KEY, self.client.admin_orders())
        return self.cache.get(ADMIN_ORDERS_KEY)

    def search(self, term: str) -> list[dict]:
        """Orders whose customer name, email or id contains ``term``."""
        needle = term.strip().lower()
        if not needle:
            return list(self.orders())
        return [
            order
            for order in self.orders()
            if needle in order["customer_name"].lower()
            or needle in order["customer_email"].lower()
            or needle in str(order["id"]).lower()
        ]

    def order(self, order_id: str, refresh: bool = False) -> dict:
        key = admin_order_key(order_id)
        if refresh or key not in self.cache:
            self.cache.set(key, self.client.admin_order(order_id))
        return self.cache.get(key)

    @staticmethod
    def breakdown(order: dict) -> dict[str, Decimal]:
        """Split an order total into its items subtotal and shipping."""
        items_subtotal = subtotal((item["price"], item["quantity"]) for item in order.get("items", []))
        total = to_money(order["total_amount"])
        return {"subtotal": items_subtotal, "shipping": total - items_subtotal, "total": total}

    def update_status(self, order_id: str, status: str) -> dict | None:
        if not is_valid_status(status):
            self.notifier.notify(
                "Invalid status",
                f"Status must be one of: {', '.join(ORDER_STATUSES)}.",
                Variant.WARNING,
            )
            return None

        try:
            updated = self.client.update_order_status(order_id, status)
        except ApiError as exc:
            self.notifier.notify("Update failed", exc.message, Variant.DESTRUCTIVE)
            return None

        detail_key = admin_order_key(order_id)
        cached_detail = self.cache.get(detail_key)
        if cached_detail is not None:
            self.cache.set(detail_key, {**cached_detail, **updated})
        cached_list = self.cache.get(ADMIN_ORDERS_KEY)
        if cached_list is not None:
            self.cache.set(
                ADMIN_ORDERS_KEY,
                [{**order, "status": status} if order["id"] == order_id else order for order in cached_list],
            )

        logger.info("order_status_updated", order_id=order_id, status=status)
        self.notifier.notify("Order updated", f"Order #{order_id} status changed to {status}.")
        return updated
