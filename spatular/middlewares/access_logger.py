import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("access")

_SILENT_PATHS = {"/", "/health", "/liveness"}


class AccessLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        x_forwarded_for = request.headers.get("x-forwarded-for")
        if x_forwarded_for:
            ip = x_forwarded_for.split(",")[0].strip()
        else:
            ip = request.client.host if request.client else "-"

        path = request.url.path
        started = time.perf_counter()
        response = await call_next(request)

        # probes hit these every few seconds
        if path in _SILENT_PATHS:
            return response

        logger.info(
            f"🛰️ {request.method} {path} -> {response.status_code}",
            extra={
                "ip": ip,
                "path": path,
                "method": request.method,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return response
