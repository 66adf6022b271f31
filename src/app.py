"""Storefront FastAPI application.

Multi-domain web server that processes commands synchronously via HTTP.
Each request is wrapped in the correct domain context based on URL prefix.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from contextlib import asynccontextmanager

from catalogue.domain import catalogue
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from identity.domain import identity, logger
from identity.utils.logging import add_context, clear_context
from ordering.domain import ordering
from starlette.middleware.sessions import SessionMiddleware

from shared.config import settings
from shared.errors import register_error_handlers

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Domains are initialized at module level so uvicorn workers share them.
identity.init()
catalogue.init()
ordering.init()

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/api/register": identity,
    "/api/login": identity,
    "/api/logout": identity,
    "/api/user": identity,
    "/api/products": catalogue,
    "/api/orders": ordering,
    "/api/admin": ordering,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path == prefix or path.startswith(prefix + "/"):
            return domain
    return None


# ---------------------------------------------------------------------------
# Startup seeding
# ---------------------------------------------------------------------------
def seed_data() -> None:
    """Create the admin account and the demo catalogue if they are missing."""
    from catalogue.product.seeding import seed_products
    from identity.user.authentication import seed_admin

    with identity.domain_context():
        seed_admin(settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)
    with catalogue.domain_context():
        seed_products()


@asynccontextmanager
async def lifespan(app: FastAPI):
    seed_data()
    logger.info("storefront_started", environment=settings.ENVIRONMENT)
    yield


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title=f"{settings.PROJECT_NAME} API",
    description="Storefront: Identity, Catalogue and Ordering domains",
    lifespan=lifespan,
)

register_error_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context for each request."""
    clear_context()
    add_context(method=request.method, path=request.url.path)
    domain = _resolve_domain(request.url.path)
    if domain is not None:
        with domain.domain_context():
            response = await call_next(request)
        return response
    # No domain match: health check and docs pass through
    return await call_next(request)


# Added after the domain middleware so sessions are decoded before it runs.
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SESSION_SECRET,
    max_age=settings.SESSION_MAX_AGE,
    same_site="lax",
    https_only=settings.is_production,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from catalogue.api import product_router  # noqa: E402
from identity.api.routes import router as identity_router  # noqa: E402
from ordering.api import admin_order_router, order_router  # noqa: E402

app.include_router(identity_router)
app.include_router(product_router)
app.include_router(order_router)
app.include_router(admin_order_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "identity": {"name": identity.name},
                "catalogue": {"name": catalogue.name},
                "ordering": {"name": ordering.name},
            },
        }
    )
