import time
import traceback
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException

from petadopt.config import settings
from petadopt.db.session import shutdown
from petadopt.dependencies import DB
from petadopt.errors import (
    AppError,
    ErrorCode,
    internal_server_error,
    invalid_request,
    resource_not_found,
    validation_error,
)
from petadopt.logging import get_logger
from petadopt.middleware import RequestIDMiddleware
from petadopt.routers import adoptions, mocks, pets, users
from petadopt.schemas.error import ErrorDetail, ErrorResponse

logger = get_logger(__name__)

STARTED_AT = time.monotonic()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup logs the environment; shutdown closes pooled database connections."""
    logger.info("app_started", environment=settings.environment, port=settings.port)
    yield
    await shutdown()


app = FastAPI(title="Pet Adoption API", lifespan=lifespan)
app.add_middleware(RequestIDMiddleware)


def error_response(exc: AppError, name: str | None = None) -> JSONResponse:
    """Render an AppError into the standard error envelope.

    This is the single place error responses are written. The stack trace is
    attached only outside production.
    """
    stack = None
    if not settings.is_production and exc.__traceback__ is not None:
        stack = "".join(traceback.format_exception(exc))
    body = ErrorResponse(
        status=exc.status,
        message=exc.message,
        error=ErrorDetail(
            name=name or type(exc).__name__,
            code=exc.code.value,
            details=jsonable_encoder(exc.details),
            stack=stack,
        ),
    )
    return JSONResponse(status_code=exc.status, content=body.model_dump(exclude_none=True))


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Return the status carried by the error."""
    if exc.code is ErrorCode.INTERNAL_SERVER_ERROR:
        logger.error("app_error", code=exc.code.value, error=exc.message, path=request.url.path)
    else:
        logger.warning("app_error", code=exc.code.value, error=exc.message, path=request.url.path)
    return error_response(exc)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return 400 VALIDATION_ERROR with the offending fields in details."""
    errors: list[dict[str, Any]] = [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]} for err in exc.errors()
    ]
    logger.warning("validation_error", path=request.url.path, errors=errors)
    error = validation_error(details=errors)
    return error_response(error, name="ValidationError")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown routes (and wrong methods) use the same envelope.

    The status comes from the error code, so a 405 from routing is reported
    as a 400 INVALID_REQUEST like any other client error.
    """
    details = {"path": request.url.path, "method": request.method}
    if exc.status_code == 404:
        error = resource_not_found("Resource", details=details)
    elif exc.status_code < 500:
        error = invalid_request(str(exc.detail), details)
    else:
        error = internal_server_error(str(exc.detail), details)
    return error_response(error, name="HTTPException")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unhandled exceptions and return a safe error response.

    - Logs full exception with traceback (includes request_id from context)
    - Returns INTERNAL_SERVER_ERROR to the client; the original message is
      only exposed outside production
    """
    logger.exception("unhandled_exception", path=request.url.path, method=request.method)
    message = "Internal Server Error" if settings.is_production else str(exc) or "Internal Server Error"
    error = internal_server_error(message)
    error.__traceback__ = exc.__traceback__
    return error_response(error, name=type(exc).__name__)


health_router = APIRouter(tags=["health"])


@health_router.get("/health")
async def health(db: DB) -> dict[str, object]:
    """Health check: verifies database connectivity and reports uptime in seconds."""
    await db.execute(text("SELECT 1"))
    return {
        "status": "ok",
        "timestamp": datetime.now(UTC).isoformat(),
        "uptime": round(time.monotonic() - STARTED_AT, 3),
    }


for router in (pets.router, users.router, adoptions.router, mocks.router, health_router):
    app.include_router(router, prefix=settings.api_prefix)
