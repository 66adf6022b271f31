"""Order placement: command and handler."""

import json

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from ordering.domain import logger, ordering
from ordering.order.order import Order


@ordering.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    total_amount = String(required=True, max_length=20)
    customer_name = String(required=True, max_length=255)
    customer_email = String(required=True, max_length=254)
    shipping_address = Text(required=True)
    payment_method = String(required=True, max_length=20)
    items = Text(required=True)  # JSON: list of item dicts


@ordering.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        items_data = json.loads(command.items) if isinstance(command.items, str) else command.items

        order = Order.place(
            user_id=command.user_id,
            customer_name=command.customer_name,
            customer_email=command.customer_email,
            shipping_address=command.shipping_address,
            payment_method=command.payment_method,
            total_amount=command.total_amount,
            items_data=items_data,
        )
        current_domain.repository_for(Order).add(order)
        logger.info(
            "order_placed",
            order_id=str(order.id),
            user_id=str(order.user_id),
            total_amount=order.total_amount,
            item_count=len(order.items),
        )
        return str(order.id)
