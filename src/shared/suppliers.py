"""Fixed supplier table shared by checkout and order placement.

Suppliers are shipping options, not persisted records. Each order line picks
one supplier; a supplier's fee is charged once per order no matter how many
lines use it.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Supplier:
    id: int
    name: str
    rating: float
    delivery_time: str
    shipping_fee: Decimal


SUPPLIERS: tuple[Supplier, ...] = (
    Supplier(id=1, name="Fast Express", rating=4.5, delivery_time="1-2 days", shipping_fee=Decimal("5.99")),
    Supplier(id=2, name="Budget Shipping", rating=3.8, delivery_time="3-5 days", shipping_fee=Decimal("2.99")),
    Supplier(id=3, name="Premium Logistics", rating=4.9, delivery_time="Next day", shipping_fee=Decimal("9.99")),
    Supplier(id=4, name="Standard Delivery", rating=4.2, delivery_time="2-3 days", shipping_fee=Decimal("4.99")),
)

_SUPPLIERS_BY_ID = {supplier.id: supplier for supplier in SUPPLIERS}


def find_supplier(supplier_id: int | None) -> Supplier | None:
    """Return the supplier with the given id, or None if there is no such supplier."""
    if supplier_id is None:
        return None
    return _SUPPLIERS_BY_ID.get(supplier_id)


def supplier_name(supplier_id: int | None) -> str:
    """Display name for a supplier id, as shown on order details."""
    if supplier_id is None:
        return "N/A"
    supplier = find_supplier(supplier_id)
    return supplier.name if supplier else f"ID: {supplier_id}"
