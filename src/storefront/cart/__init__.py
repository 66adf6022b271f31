from storefront.cart.cart import Cart, CartItem
from storefront.cart.snapshots import FileSnapshotStore, MemorySnapshotStore
from storefront.cart.store import CART_KEY, CartStore, UnknownSupplierError

__all__ = [
    "CART_KEY",
    "Cart",
    "CartItem",
    "CartStore",
    "FileSnapshotStore",
    "MemorySnapshotStore",
    "UnknownSupplierError",
]
