"""Client-side filtering and sorting of catalogue listings."""

from collections.abc import Iterable

from shared.pricing import to_money

SORT_OPTIONS = ("featured", "price-asc", "price-desc", "name-asc", "name-desc", "rating-desc")


def _price(product: dict):
    return to_money(product["price"])


def _rating(product: dict):
    return to_money(product.get("rating") or 0)


def filter_products(
    products: Iterable[dict],
    search: str = "",
    min_price=None,
    max_price=None,
    min_rating=None,
    sort: str = "featured",
) -> list[dict]:
    result = list(products)

    if search:
        needle = search.lower()
        result = [
            p for p in result if needle in p["name"].lower() or needle in (p.get("description") or "").lower()
        ]

    if min_price is not None:
        result = [p for p in result if _price(p) >= to_money(min_price)]
    if max_price is not None:
        result = [p for p in result if _price(p) <= to_money(max_price)]
    if min_rating is not None:
        result = [p for p in result if _rating(p) >= to_money(min_rating)]

    # "featured" and unrecognised options keep the listing order
    if sort == "price-asc":
        result.sort(key=_price)
    elif sort == "price-desc":
        result.sort(key=_price, reverse=True)
    elif sort == "name-asc":
        result.sort(key=lambda p: p["name"].lower())
    elif sort == "name-desc":
        result.sort(key=lambda p: p["name"].lower(), reverse=True)
    elif sort == "rating-desc":
        result.sort(key=_rating, reverse=True)
    return result
