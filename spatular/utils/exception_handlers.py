import logging
import uuid

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from slowapi.errors import RateLimitExceeded

from spatular.utils.exceptions import SpatularError

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Expected HTTP errors (400, 404, ...) in the standard error envelope."""
    detail = exc.detail if isinstance(exc.detail, dict) else {}
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "code": detail.get("code", "HTTP_ERROR"),
                "message": detail.get("message", str(exc.detail)),
            }
        },
    )


async def spatular_exception_handler(request: Request, exc: SpatularError):
    """Domain errors that escaped a route, e.g. a dictionary that failed to load."""
    logger.error(f"❌ {type(exc).__name__} for {request.url}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": {"code": exc.code, "message": str(exc)}},
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """Unexpected server errors (500) with a short reference id."""
    error_id = str(uuid.uuid4())[:8]

    logger.exception(f"💥 Error ID {error_id} for {request.url}", exc_info=exc)

    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "INTERNAL_SERVER_ERROR",
                "message": f"Internal server error. Reference ID: {error_id}",
            }
        },
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={
            "error": {
                "code": "RATE_LIMIT_EXCEEDED",
                "message": f"Too many requests: {exc.detail}. Please try again later.",
            }
        },
        headers={"Retry-After": "60"},
    )
