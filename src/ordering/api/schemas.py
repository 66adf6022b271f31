"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands.
"""

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, field_validator


def _amount_as_string(value):
    if isinstance(value, int | float | Decimal) and not isinstance(value, bool):
        return str(value)
    return value


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class OrderItemSchema(BaseModel):
    product_id: str
    product_name: str = Field(min_length=1)
    quantity: int = Field(ge=1)
    price: str
    supplier_id: int | None = None

    _price_as_string = field_validator("price", mode="before")(_amount_as_string)


class CreateOrderRequest(BaseModel):
    total_amount: str
    customer_name: str = Field(min_length=1, max_length=255)
    customer_email: str = Field(min_length=3, max_length=254)
    shipping_address: str = Field(min_length=1)
    payment_method: Literal["credit_card", "cash", "bank_transfer"]
    items: list[OrderItemSchema] = Field(min_length=1)

    _total_as_string = field_validator("total_amount", mode="before")(_amount_as_string)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "total_amount": "30.99",
                    "customer_name": "Jane Doe",
                    "customer_email": "jane@example.com",
                    "shipping_address": "1 Main St, Springfield, IL 62701",
                    "payment_method": "credit_card",
                    "items": [
                        {
                            "product_id": "prod-001",
                            "product_name": "Leather Wallet",
                            "quantity": 2,
                            "price": "10.00",
                            "supplier_id": 1,
                        },
                        {
                            "product_id": "prod-002",
                            "product_name": "Sunglasses",
                            "quantity": 1,
                            "price": "5.00",
                            "supplier_id": 1,
                        },
                    ],
                }
            ]
        }
    }


class UpdateOrderStatusRequest(BaseModel):
    status: str = Field(min_length=1)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class OrderItemResponse(BaseModel):
    id: str
    product_id: str
    product_name: str
    quantity: int
    price: str
    supplier_id: int | None = None
    created_at: datetime | None = None


class OrderResponse(BaseModel):
    id: str
    user_id: str
    total_amount: str
    customer_name: str
    customer_email: str
    shipping_address: str
    payment_method: str
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OrderDetailResponse(OrderResponse):
    items: list[OrderItemResponse] = []
