"""Order aggregate: a persisted checkout record and its lines.

Statuses form a closed set (pending, processing, shipped, delivered,
cancelled) with no enforced lifecycle: an admin may move an order from any
status to any other.

When an order is placed, every line must name a supplier and the submitted
total must equal the item subtotal plus one shipping fee per distinct
supplier.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String, Text

from ordering.domain import ordering
from ordering.order.events import OrderPlaced, OrderStatusChanged
from shared.orders import OrderStatus, PaymentMethod
from shared.pricing import amounts_match, format_amount, line_total, shipping_total, subtotal
from shared.suppliers import find_supplier


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderItem:
    """One product line in an order, priced at checkout time and shipped by one supplier."""

    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    quantity = Integer(required=True, min_value=1)
    price = String(required=True, max_length=20)
    supplier_id = Integer(required=True)
    created_at = DateTime()

    @property
    def line_total(self):
        return line_total(self.price, self.quantity)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    user_id = Identifier(required=True)
    total_amount = String(required=True, max_length=20)
    customer_name = String(required=True, max_length=255)
    customer_email = String(required=True, max_length=254)
    shipping_address = Text(required=True)
    payment_method = String(required=True, choices=PaymentMethod)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    items = HasMany(OrderItem)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(
        cls,
        user_id,
        customer_name,
        customer_email,
        shipping_address,
        payment_method,
        total_amount,
        items_data,
    ):
        """Record a new pending order.

        Args:
            items_data: List of dicts with product_id, product_name, quantity,
                        price and supplier_id.
        """
        if not items_data:
            raise ValidationError({"items": ["An order must contain at least one item"]})

        for item in items_data:
            supplier_id = item.get("supplier_id")
            if supplier_id is None:
                raise ValidationError({"items": ["Each item must have a supplier selected before checkout"]})
            if find_supplier(supplier_id) is None:
                raise ValidationError({"items": [f"Unknown supplier: {supplier_id}"]})

        try:
            line_prices = [format_amount(item["price"]) for item in items_data]
        except ValueError as exc:
            raise ValidationError({"items": [str(exc)]}) from None
        try:
            expected_total = subtotal((item["price"], item["quantity"]) for item in items_data) + shipping_total(
                item["supplier_id"] for item in items_data
            )
            total_matches = amounts_match(total_amount, expected_total)
        except ValueError as exc:
            raise ValidationError({"total_amount": [str(exc)]}) from None
        if not total_matches:
            raise ValidationError(
                {
                    "total_amount": [
                        f"Order total {total_amount} does not match items and shipping ({format_amount(expected_total)})"
                    ]
                }
            )

        now = datetime.now(UTC)
        order = cls(
            user_id=user_id,
            total_amount=format_amount(total_amount),
            customer_name=customer_name,
            customer_email=customer_email,
            shipping_address=shipping_address,
            payment_method=payment_method,
            status=OrderStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )
        for item, price in zip(items_data, line_prices, strict=True):
            order.add_items(
                OrderItem(
                    product_id=item["product_id"],
                    product_name=item["product_name"],
                    quantity=item["quantity"],
                    price=price,
                    supplier_id=item["supplier_id"],
                    created_at=now,
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                total_amount=order.total_amount,
                item_count=len(items_data),
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------
    def update_status(self, new_status):
        """Move the order to ``new_status``. Any status may follow any other."""
        try:
            target = OrderStatus(new_status)
        except ValueError:
            raise ValidationError({"status": [f"Invalid order status: {new_status}"]}) from None

        previous = self.status
        self.status = target.value
        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=previous,
                new_status=target.value,
                changed_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Pricing breakdown
    # -------------------------------------------------------------------
    @property
    def subtotal(self):
        return subtotal((item.price, item.quantity) for item in self.items)

    @property
    def shipping(self):
        return shipping_total(item.supplier_id for item in self.items)


@ordering.repository(part_of=Order)
class OrderRepository:
    """Listings return every matching order, oldest first."""

    def _listing(self, **filters) -> list[Order]:
        query = self._dao.query.filter(**filters) if filters else self._dao.query
        # limit(None) lifts the per-aggregate default page size
        return query.order_by("created_at").limit(None).all().items

    def all_orders(self) -> list[Order]:
        return self._listing()

    def for_user(self, user_id) -> list[Order]:
        return self._listing(user_id=str(user_id))
