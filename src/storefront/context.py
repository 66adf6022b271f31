"""Explicit context object tying the storefront operations together."""

from dataclasses import dataclass
from pathlib import Path

from shared.config import settings
from storefront.admin import AdminOrderViewer
from storefront.cache import QueryCache
from storefront.cart.snapshots import FileSnapshotStore, SnapshotStore
from storefront.cart.store import CartStore
from storefront.checkout import Checkout
from storefront.client import StorefrontClient
from storefront.notifications import Notifier
from storefront.submission import OrderSubmission


@dataclass
class StorefrontContext:
    client: StorefrontClient
    cart: CartStore
    cache: QueryCache
    notifier: Notifier

    @classmethod
    def create(
        cls,
        client: StorefrontClient | None = None,
        snapshots: SnapshotStore | None = None,
    ) -> "StorefrontContext":
        notifier = Notifier()
        return cls(
            client=client or StorefrontClient(),
            cart=CartStore(snapshots or FileSnapshotStore(Path(settings.CART_STORAGE_DIR)), notifier),
            cache=QueryCache(),
            notifier=notifier,
        )

    @property
    def checkout(self) -> Checkout:
        return Checkout(self.cart.cart)

    @property
    def submission(self) -> OrderSubmission:
        return OrderSubmission(self.client, self.cart, self.cache, self.notifier)

    @property
    def admin(self) -> AdminOrderViewer:
        return AdminOrderViewer(self.client, self.cache, self.notifier)
