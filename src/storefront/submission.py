"""Order Submission: turns the cart and buyer details into a placed order."""

from typing import Literal

from pydantic import BaseModel, Field

from shared.pricing import format_amount
from storefront.cache import ADMIN_ORDERS_KEY, QueryCache
from storefront.cart.cart import Cart
from storefront.cart.store import CartStore
from storefront.checkout import Checkout
from storefront.client import ApiError, StorefrontClient
from storefront.notifications import Notifier, Variant
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class BuyerDetails(BaseModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    address: str = Field(min_length=1)
    city: str = Field(min_length=1)
    state: str = Field(min_length=1)
    zip_code: str = Field(min_length=1)
    payment_method: Literal["credit_card", "cash", "bank_transfer"] = "credit_card"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def full_address(self) -> str:
        return f"{self.address}, {self.city}, {self.state} {self.zip_code}"


def build_order_payload(cart: Cart, buyer: BuyerDetails, checkout: Checkout | None = None) -> dict:
    checkout = checkout or Checkout(cart)
    return {
        "total_amount": format_amount(checkout.total),
        "customer_name": buyer.full_name,
        "customer_email": buyer.email,
        "shipping_address": buyer.full_address,
        "payment_method": buyer.payment_method,
        "items": [
            {
                "product_id": item.product_id,
                "product_name": item.name,
                "quantity": item.quantity,
                "price": str(item.price),
                "supplier_id": item.selected_supplier_id,
            }
            for item in cart.items
        ],
    }


class OrderSubmission:
    def __init__(
        self,
        client: StorefrontClient,
        cart_store: CartStore,
        cache: QueryCache,
        notifier: Notifier,
    ) -> None:
        self.client = client
        self.cart_store = cart_store
        self.cache = cache
        self.notifier = notifier

    def submit(self, buyer: BuyerDetails) -> dict | None:
        """Place an order for the current cart.

        Returns the created order, or None when the submission was blocked
        or rejected. Either way the outcome is reported through the notifier.
        Nothing guards against submitting the same cart twice.
        """
        cart = self.cart_store.cart
        if cart.is_empty:
            self.notifier.notify("Your cart is empty", "Add some products before checking out.", Variant.DESTRUCTIVE)
            return None

        checkout = Checkout(cart)
        if not checkout.ready:
            self.notifier.notify(
                "Please select suppliers",
                "Each item must have a supplier selected before checkout.",
                Variant.DESTRUCTIVE,
            )
            return None

        try:
            payload = build_order_payload(cart, buyer, checkout)
        except ValueError as exc:
            logger.warning("order_payload_invalid", error=str(exc))
            self.notifier.notify("Order placement failed", str(exc), Variant.DESTRUCTIVE)
            return None

        try:
            order = self.client.create_order(payload)
        except ApiError as exc:
            logger.warning("order_submission_failed", status_code=exc.status_code, message=exc.message)
            self.notifier.notify("Order placement failed", exc.message, Variant.DESTRUCTIVE)
            return None

        self.cart_store.clear()
        self.cache.invalidate(ADMIN_ORDERS_KEY)
        logger.info("order_submitted", order_id=order.get("id"), total_amount=payload["total_amount"])
        self.notifier.notify(
            "Order placed successfully!",
            "Your order has been received and is being processed.",
            Variant.SUCCESS,
        )
        return order
