"""BDD tests for order placement and shipping fees."""

from decimal import Decimal

from ordering.order.order import Order
from protean.exceptions import ValidationError
from pytest_bdd import parsers, scenarios, then, when

scenarios("features/order_placement.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the order is placed with a total of "{total}"'))
def _(lines, outcome, total):
    try:
        outcome["order"] = Order.place(
            user_id="user-001",
            customer_name="Jane Doe",
            customer_email="jane@example.com",
            shipping_address="1 Main St, Springfield, IL 62701",
            payment_method="credit_card",
            total_amount=total,
            items_data=lines,
        )
    except ValidationError as exc:
        outcome["error"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the order is pending")
def _(outcome):
    assert outcome["order"].status == "pending"


@then(parsers.cfparse("the order subtotal is {amount}"))
def _(outcome, amount):
    assert outcome["order"].subtotal == Decimal(amount)


@then(parsers.cfparse("the order shipping is {amount}"))
def _(outcome, amount):
    assert outcome["order"].shipping == Decimal(amount)
