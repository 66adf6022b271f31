"""Domain events for the Product aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String

from catalogue.domain import catalogue


@catalogue.event(part_of="Product")
class ProductCreated:
    """A new product was added to the catalogue."""

    __version__ = "v1"

    product_id: Identifier(required=True)
    name: String(required=True)
    category: String(required=True)
    price: String(required=True)
    is_service: Boolean(default=False)
    created_at: DateTime(required=True)
