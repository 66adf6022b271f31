"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderPlaced:
    """A customer checked out their cart and an order was recorded."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    total_amount = String(required=True)
    item_count = Integer(required=True)
    placed_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderStatusChanged:
    """An admin moved the order to a different status."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    changed_at = DateTime(required=True)
