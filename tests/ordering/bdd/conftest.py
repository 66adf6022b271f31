"""Shared BDD fixtures and step definitions for the Ordering domain."""

import pytest
from ordering.order.order import Order
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then


@pytest.fixture()
def lines():
    return []


@pytest.fixture()
def outcome():
    """Holds the order or the error produced by a When step."""
    return {}


@given(parsers.cfparse('a line of {quantity:d} x "{price}" shipped by supplier {supplier_id:d}'))
def _(lines, quantity, price, supplier_id):
    lines.append(
        {
            "product_id": f"prod-{len(lines) + 1:03d}",
            "product_name": f"Product {len(lines) + 1}",
            "quantity": quantity,
            "price": price,
            "supplier_id": supplier_id,
        }
    )


@given("a placed order", target_fixture="order")
def _():
    order = Order.place(
        user_id="user-001",
        customer_name="Jane Doe",
        customer_email="jane@example.com",
        shipping_address="1 Main St, Springfield, IL 62701",
        payment_method="credit_card",
        total_amount="15.99",
        items_data=[
            {"product_id": "p-1", "product_name": "Mug", "quantity": 1, "price": "10.00", "supplier_id": 1}
        ],
    )
    order._events.clear()
    return order


@then(parsers.cfparse('the order is rejected with "{text}"'))
def _(outcome, text):
    assert isinstance(outcome.get("error"), ValidationError)
    assert text in str(outcome["error"])
