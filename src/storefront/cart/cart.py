"""Cart and CartItem models.

``total`` and ``item_count`` are derived from the lines every time they are
read. A total carried in a stored snapshot is ignored on load.
"""

from decimal import Decimal
from uuid import uuid4

from pydantic import BaseModel, Field, computed_field, field_validator

from shared.pricing import line_total, subtotal, to_money


class CartItem(BaseModel):
    id: str = Field(default_factory=lambda: uuid4().hex)
    product_id: str
    name: str
    price: str
    quantity: int = Field(default=1, ge=1)
    image: str = ""
    is_service: bool = False
    selected_supplier_id: int | None = None

    @field_validator("product_id", mode="before")
    @classmethod
    def _id_as_string(cls, value):
        return str(value) if isinstance(value, int) else value

    @field_validator("price", mode="before")
    @classmethod
    def _valid_price(cls, value):
        to_money(value)
        return str(value).strip()

    @property
    def line_total(self) -> Decimal:
        return line_total(self.price, self.quantity)


class Cart(BaseModel):
    items: list[CartItem] = []

    @computed_field
    @property
    def total(self) -> Decimal:
        return subtotal((item.price, item.quantity) for item in self.items)

    @computed_field
    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def find(self, item_id: str) -> CartItem | None:
        return next((item for item in self.items if item.id == item_id), None)

    def find_product(self, product_id: str) -> CartItem | None:
        return next((item for item in self.items if item.product_id == product_id), None)
