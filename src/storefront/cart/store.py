"""Cart Store: the single owner of the shopping cart.

Every mutation recomputes the derived totals and writes a snapshot under
``CART_KEY``. The snapshot is read once, when the store is constructed.
"""

from collections.abc import Mapping

from pydantic import ValidationError

from shared.suppliers import find_supplier
from storefront.cart.cart import Cart, CartItem
from storefront.cart.snapshots import SnapshotStore
from storefront.notifications import Notifier
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

CART_KEY = "cart"


class UnknownSupplierError(ValueError):
    def __init__(self, supplier_id) -> None:
        super().__init__(f"Unknown supplier: {supplier_id!r}")
        self.supplier_id = supplier_id


class CartStore:
    def __init__(self, snapshots: SnapshotStore, notifier: Notifier | None = None) -> None:
        self.snapshots = snapshots
        self.notifier = notifier or Notifier()
        self.cart = self._load()

    # -- Persistence -------------------------------------------------------
    def _load(self) -> Cart:
        try:
            raw = self.snapshots.get(CART_KEY)
            if raw is None:
                return Cart()
            return Cart.model_validate_json(raw)
        except (UnicodeDecodeError, ValidationError) as exc:
            logger.error("cart_snapshot_corrupt", error_type=type(exc).__name__)
            self.snapshots.delete(CART_KEY)
            return Cart()

    def _save(self) -> None:
        self.snapshots.set(CART_KEY, self.cart.model_dump_json())

    # -- Reads -------------------------------------------------------------
    @property
    def items(self) -> list[CartItem]:
        return self.cart.items

    @property
    def total(self):
        return self.cart.total

    @property
    def item_count(self) -> int:
        return self.cart.item_count

    # -- Mutations ---------------------------------------------------------
    def add(self, product: Mapping, quantity: int = 1) -> CartItem | None:
        """Add ``quantity`` of a product, merging into its existing line."""
        if quantity < 1:
            return None

        item = self.cart.find_product(str(product["id"]))
        if item is not None:
            item.quantity += quantity
        else:
            item = CartItem(
                product_id=product["id"],
                name=product["name"],
                price=product["price"],
                quantity=quantity,
                image=product.get("image") or "",
                is_service=bool(product.get("is_service", False)),
            )
            self.cart.items.append(item)

        self._save()
        self.notifier.notify("Added to cart", f"{item.name} has been added to your cart.")
        return item

    def remove(self, item_id: str) -> None:
        self.cart.items = [item for item in self.cart.items if item.id != item_id]
        self._save()

    def set_quantity(self, item_id: str, quantity: int) -> None:
        if quantity < 1:
            return
        item = self.cart.find(item_id)
        if item is not None:
            item.quantity = quantity
            self._save()

    def set_supplier(self, item_id: str, supplier_id: int) -> None:
        if find_supplier(supplier_id) is None:
            raise UnknownSupplierError(supplier_id)
        item = self.cart.find(item_id)
        if item is not None:
            item.selected_supplier_id = supplier_id
            self._save()

    def clear(self) -> None:
        self.cart = Cart()
        self._save()
