"""Money arithmetic for carts and orders.

Prices travel as decimal strings (``"10.00"``) or plain numbers; everything
here converts through ``Decimal`` so totals never drift by float rounding.
Amounts too large for the decimal context surface as ``ValueError`` like any
other invalid amount.
"""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from shared.suppliers import SUPPLIERS, Supplier

CENT = Decimal("0.01")


def to_money(value) -> Decimal:
    """Coerce a price given as string, int, float or Decimal."""
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Invalid amount: {value!r}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValueError(f"Invalid amount: {value!r}") from exc
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return amount


def quantize(value, exponent: Decimal = CENT) -> Decimal:
    """Round half up to ``exponent`` places."""
    amount = to_money(value)
    try:
        return amount.quantize(exponent, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueError(f"Invalid amount: {value!r}") from exc


def format_amount(value) -> str:
    """Render an amount as a two-place decimal string."""
    return str(quantize(value))


def line_total(price, quantity: int) -> Decimal:
    amount = to_money(price)
    try:
        return amount * quantity
    except ArithmeticError as exc:
        raise ValueError(f"Invalid amount: {price!r} x {quantity}") from exc


def subtotal(lines: Iterable[tuple[object, int]]) -> Decimal:
    """Sum of price x quantity over ``(price, quantity)`` pairs."""
    try:
        return sum((line_total(price, quantity) for price, quantity in lines), Decimal("0"))
    except ArithmeticError as exc:
        raise ValueError("Invalid amount: subtotal out of range") from exc


def shipping_total(supplier_ids: Iterable[int | None], suppliers: Iterable[Supplier] = SUPPLIERS) -> Decimal:
    """Shipping fee for an order: one fee per distinct supplier.

    Missing ids (lines without a supplier) and ids not present in the
    supplier table contribute nothing.
    """
    fees = {supplier.id: supplier.shipping_fee for supplier in suppliers}
    distinct = {supplier_id for supplier_id in supplier_ids if supplier_id is not None}
    return sum((fees[supplier_id] for supplier_id in distinct if supplier_id in fees), Decimal("0"))


def amounts_match(left, right) -> bool:
    """Compare two amounts to the cent."""
    return quantize(left) == quantize(right)
