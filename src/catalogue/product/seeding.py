"""Demo catalogue loaded into an empty store at startup."""

from protean.utils.globals import current_domain

from catalogue.domain import logger
from catalogue.product.creation import CreateProduct
from catalogue.product.product import Product

_IMAGE = "https://images.unsplash.com/{}?auto=format&fit=crop&w=400&h=300"

DEMO_PRODUCTS = [
    {
        "name": "Smartwatch X1",
        "description": "Premium smartwatch with health tracking and long battery life.",
        "price": "999.99",
        "category": "electronics",
        "image": _IMAGE.format("photo-1546868871-0f936769675e"),
        "rating": "4.5",
        "badge": "NEW",
    },
    {
        "name": "Wireless Headphones",
        "description": "Noise-cancelling headphones with crystal clear sound quality.",
        "price": "449.99",
        "category": "electronics",
        "image": _IMAGE.format("photo-1492107376256-4026437926cd"),
        "rating": "4.8",
        "badge": "SALE",
        "discount_price": "599.99",
    },
    {
        "name": "Designer Backpack",
        "description": "Stylish and functional backpack with multiple compartments.",
        "price": "79.99",
        "category": "fashion",
        "image": _IMAGE.format("photo-1598033129183-c4f50c736f10"),
        "rating": "4.3",
    },
    {
        "name": "Smart Coffee Maker",
        "description": "App-controlled coffee maker with programmable brewing.",
        "price": "199.99",
        "category": "home",
        "image": _IMAGE.format("photo-1540574163026-643ea20ade25"),
        "rating": "4.6",
    },
    {
        "name": "Premium Web Design",
        "description": "Professional web design services for your business or personal site.",
        "price": "149.00",
        "category": "services",
        "image": _IMAGE.format("photo-1590650046871-92c887180603"),
        "rating": "4.9",
        "badge": "POPULAR",
        "is_service": True,
    },
    {
        "name": "Leather Wallet",
        "description": "Handcrafted genuine leather wallet with RFID protection.",
        "price": "59.99",
        "category": "fashion",
        "image": _IMAGE.format("photo-1602810318660-d2c46b750f88"),
        "rating": "4.1",
    },
    {
        "name": "Smart Home Hub",
        "description": "Control all your smart home devices from one central hub.",
        "price": "299.99",
        "category": "home",
        "image": _IMAGE.format("photo-1579656381226-5fc0f0100c3b"),
        "rating": "4.4",
    },
    {
        "name": "Ultra Slim Laptop",
        "description": "Powerful laptop with all-day battery life and stunning display.",
        "price": "1299.99",
        "category": "electronics",
        "image": _IMAGE.format("photo-1593642702909-dec73df255d7"),
        "rating": "4.7",
        "badge": "BESTSELLER",
    },
    {
        "name": "Mobile App Development",
        "description": "Custom mobile application development for iOS and Android.",
        "price": "89.99",
        "category": "services",
        "image": _IMAGE.format("photo-1551650975-87deedd944c3"),
        "rating": "4.5",
        "is_service": True,
    },
    {
        "name": "Indoor Plant Set",
        "description": "Set of 3 low-maintenance indoor plants with decorative pots.",
        "price": "49.99",
        "category": "home",
        "image": _IMAGE.format("photo-1554244933-d876deb6b2ff"),
        "rating": "4.2",
        "badge": "SALE",
        "discount_price": "69.99",
    },
    {
        "name": "Running Shoes",
        "description": "Lightweight running shoes with ergonomic design and extra cushioning.",
        "price": "129.99",
        "category": "fashion",
        "image": _IMAGE.format("photo-1520639888713-7851133b1ed0"),
        "rating": "4.3",
    },
    {
        "name": "Smart Security Camera",
        "description": "Wireless security camera with motion detection and cloud storage.",
        "price": "349.99",
        "category": "electronics",
        "image": _IMAGE.format("photo-1546435770-a3e426bf472b"),
        "rating": "4.6",
    },
    {
        "name": "Professional Photography",
        "description": "Professional photography services for events, portraits, and products.",
        "price": "199.99",
        "category": "services",
        "image": _IMAGE.format("photo-1542038784456-1ea8e935640e"),
        "rating": "4.7",
        "is_service": True,
    },
    {
        "name": "Wireless Earbuds",
        "description": "True wireless earbuds with touch controls and noise isolation.",
        "price": "129.99",
        "category": "electronics",
        "image": _IMAGE.format("photo-1588423771073-b8903fbb85b5"),
        "rating": "4.3",
    },
    {
        "name": "Stylish Sunglasses",
        "description": "Polarized sunglasses with UV protection and durable frame.",
        "price": "89.99",
        "category": "fashion",
        "image": _IMAGE.format("photo-1577803645773-f96470509666"),
        "rating": "4.2",
    },
]


def seed_products(products=None) -> int:
    """Create the demo products if the catalogue is empty. Returns how many were created."""
    if current_domain.repository_for(Product).all_products():
        logger.debug("catalogue_already_seeded")
        return 0

    products = DEMO_PRODUCTS if products is None else products
    for data in products:
        current_domain.process(CreateProduct(**data), asynchronous=False)

    logger.info("catalogue_seeded", count=len(products))
    return len(products)
