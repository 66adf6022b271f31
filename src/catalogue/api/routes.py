"""FastAPI routes for the Catalogue domain."""

from fastapi import APIRouter, HTTPException
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from catalogue.api.schemas import CreateProductRequest, ProductResponse
from catalogue.product.creation import CreateProduct
from catalogue.product.product import Product

product_router = APIRouter(prefix="/api/products", tags=["products"])


def _product_response(product) -> ProductResponse:
    return ProductResponse(
        id=str(product.id),
        name=product.name,
        description=product.description,
        price=product.price,
        category=product.category,
        image=product.image,
        rating=product.rating,
        badge=product.badge,
        discount_price=product.discount_price,
        is_service=bool(product.is_service),
        created_at=product.created_at,
    )


@product_router.get("", response_model=list[ProductResponse])
async def list_products() -> list[ProductResponse]:
    products = current_domain.repository_for(Product).all_products()
    return [_product_response(p) for p in products]


@product_router.get("/category/{category}", response_model=list[ProductResponse])
async def list_products_in_category(category: str) -> list[ProductResponse]:
    products = current_domain.repository_for(Product).in_category(category)
    return [_product_response(p) for p in products]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    try:
        product = current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail="Product not found") from None
    return _product_response(product)


@product_router.post("", status_code=201, response_model=ProductResponse)
async def create_product(body: CreateProductRequest) -> ProductResponse:
    command = CreateProduct(**body.model_dump())
    product_id = current_domain.process(command, asynchronous=False)
    product = current_domain.repository_for(Product).get(product_id)
    return _product_response(product)
