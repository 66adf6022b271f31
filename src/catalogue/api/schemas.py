"""Pydantic request/response schemas for the Catalogue API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator


class CreateProductRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    price: str
    category: str = Field(min_length=1, max_length=100)
    image: str = Field(min_length=1)
    rating: str
    badge: str | None = None
    discount_price: str | None = None
    is_service: bool = False

    @field_validator("price", "rating", "discount_price", mode="before")
    @classmethod
    def numbers_as_strings(cls, value):
        # Accept 19.99 as well as "19.99"
        if isinstance(value, int | float | Decimal) and not isinstance(value, bool):
            return str(value)
        return value

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Smartwatch X1",
                    "description": "Premium smartwatch with health tracking and long battery life.",
                    "price": "999.99",
                    "category": "electronics",
                    "image": "https://images.example.com/smartwatch.jpg",
                    "rating": "4.5",
                    "badge": "NEW",
                    "is_service": False,
                }
            ]
        }
    }


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str
    price: str
    category: str
    image: str
    rating: str
    badge: str | None = None
    discount_price: str | None = None
    is_service: bool = False
    created_at: datetime | None = None
