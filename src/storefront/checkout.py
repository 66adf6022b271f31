"""Checkout Aggregator: shipping and grand total for a cart."""

from collections.abc import Iterable
from decimal import Decimal

from shared.pricing import shipping_total
from shared.suppliers import SUPPLIERS, Supplier
from storefront.cart.cart import Cart, CartItem


class Checkout:
    """Totals for a cart against a supplier table.

    Shipping is charged once per distinct supplier selected across the
    lines. Supplier ids missing from the table add nothing.
    """

    def __init__(self, cart: Cart, suppliers: Iterable[Supplier] = SUPPLIERS) -> None:
        self.cart = cart
        self.suppliers = tuple(suppliers)

    @property
    def subtotal(self) -> Decimal:
        return self.cart.total

    @property
    def shipping(self) -> Decimal:
        return shipping_total((item.selected_supplier_id for item in self.cart.items), self.suppliers)

    @property
    def total(self) -> Decimal:
        return self.subtotal + self.shipping

    @property
    def missing_suppliers(self) -> list[CartItem]:
        return [item for item in self.cart.items if item.selected_supplier_id is None]

    def warnings(self) -> list[str]:
        return [f"Please select a supplier for {item.name}" for item in self.missing_suppliers]

    @property
    def ready(self) -> bool:
        return not self.cart.is_empty and not self.missing_suppliers
