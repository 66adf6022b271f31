"""Product creation: command and handler."""

from protean import handle
from protean.fields import Boolean, String, Text
from protean.utils.globals import current_domain

from catalogue.domain import catalogue, logger
from catalogue.product.product import Product


@catalogue.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255)
    description: Text(required=True)
    price: String(required=True, max_length=20)
    category: String(required=True, max_length=100)
    image: String(required=True, max_length=1024)
    rating: String(required=True, max_length=5)
    badge: String(max_length=50)
    discount_price: String(max_length=20)
    is_service: Boolean(default=False)


@catalogue.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            category=command.category,
            image=command.image,
            rating=command.rating,
            badge=command.badge,
            discount_price=command.discount_price,
            is_service=command.is_service,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("product_created", product_id=str(product.id), category=product.category)
        return str(product.id)
