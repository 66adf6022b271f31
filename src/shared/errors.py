"""HTTP error translation shared by every router.

Every error body has the same shape: ``{"message": ...}`` plus ``errors``
for field-level validation failures.

    400  malformed body (FastAPI) or domain ValidationError (Protean)
    401  not logged in           403  not an admin
    404  entity not found        500  anything else
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = structlog.get_logger(__name__)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


async def domain_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    messages = exc.messages if isinstance(exc.messages, dict) else {"_entity": [str(exc.messages)]}
    first = next((errs[0] for errs in messages.values() if errs), "Invalid data")
    return JSONResponse(
        status_code=400,
        content={"message": str(first), "errors": jsonable_encoder(messages)},
    )


async def not_found_handler(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"message": "Not found"})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", path=request.url.path, method=request.method)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, domain_validation_handler)
    app.add_exception_handler(ObjectNotFoundError, not_found_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
