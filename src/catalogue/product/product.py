"""Product aggregate: an item or service offered in the catalogue.

Products are immutable once created. Prices and ratings are stored as
decimal strings (``"999.99"``, ``"4.5"``) so that they round-trip through the
API without float noise.
"""

from datetime import UTC, datetime
from decimal import Decimal

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, String, Text

from catalogue.domain import catalogue
from shared.pricing import format_amount, quantize, to_money

ALL_CATEGORIES = "all"


def _format_rating(value) -> str:
    return str(quantize(value, Decimal("0.1")))


def _normalize(field_name, value, formatter):
    if value in (None, ""):
        return None
    try:
        return formatter(value)
    except ValueError as exc:
        raise ValidationError({field_name: [str(exc)]}) from None


@catalogue.aggregate
class Product:
    """Product aggregate root."""

    name: String(required=True, max_length=255)
    description: Text(required=True)
    price: String(required=True, max_length=20)
    category: String(required=True, max_length=100)
    image: String(required=True, max_length=1024)
    rating: String(required=True, max_length=5)
    badge: String(max_length=50)
    discount_price: String(max_length=20)
    is_service: Boolean(default=False)
    created_at: DateTime()

    @invariant.post
    def price_must_be_a_non_negative_amount(self):
        for field_name in ("price", "discount_price"):
            value = getattr(self, field_name)
            if value is None:
                continue
            try:
                amount = to_money(value)
            except ValueError:
                raise ValidationError({field_name: [f"Invalid amount: {value}"]}) from None
            if amount < 0:
                raise ValidationError({field_name: ["Amount cannot be negative"]})

    @invariant.post
    def rating_must_be_between_zero_and_five(self):
        if self.rating is None:
            return
        try:
            rating = to_money(self.rating)
        except ValueError:
            raise ValidationError({"rating": [f"Invalid rating: {self.rating}"]}) from None
        if not Decimal("0") <= rating <= Decimal("5"):
            raise ValidationError({"rating": ["Rating must be between 0 and 5"]})

    @classmethod
    def create(
        cls,
        name,
        description,
        price,
        category,
        image,
        rating,
        badge=None,
        discount_price=None,
        is_service=False,
    ):
        from catalogue.product.events import ProductCreated

        price = _normalize("price", price, format_amount)
        rating = _normalize("rating", rating, _format_rating)
        discount_price = _normalize("discount_price", discount_price, format_amount)

        now = datetime.now(UTC)
        product = cls(
            name=name,
            description=description,
            price=price,
            category=category,
            image=image,
            rating=rating,
            badge=badge or None,
            discount_price=discount_price,
            is_service=bool(is_service),
            created_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                name=name,
                category=category,
                price=price,
                is_service=product.is_service,
                created_at=now,
            )
        )
        return product


@catalogue.repository(part_of=Product)
class ProductRepository:
    """Listings return every matching product, oldest first."""

    def _listing(self, **filters) -> list[Product]:
        query = self._dao.query.filter(**filters) if filters else self._dao.query
        # limit(None) lifts the per-aggregate default page size
        return query.order_by("created_at").limit(None).all().items

    def all_products(self) -> list[Product]:
        return self._listing()

    def in_category(self, category: str) -> list[Product]:
        if category == ALL_CATEGORIES:
            return self.all_products()
        return self._listing(category=category)
