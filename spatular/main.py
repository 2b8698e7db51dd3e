from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from slowapi.errors import RateLimitExceeded

from spatular.api import analysis, dictionary, tokenize
from spatular.core.config import settings
from spatular.middlewares.access_logger import AccessLoggingMiddleware
from spatular.middlewares.logging import setup_logging
from spatular.middlewares.security import (
    SecurityHeadersMiddleware,
    add_cors_middleware,
    add_rate_limit,
)
from spatular.services.tokenization_service import TokenizationService
from spatular.utils.exception_handlers import (
    generic_exception_handler,
    http_exception_handler,
    rate_limit_exceeded_handler,
    spatular_exception_handler,
)
from spatular.utils.exceptions import DictionaryLoadError, SpatularError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    service: TokenizationService = app.state.tokenization_service
    if service.dictionary_path:
        try:
            await service.reload_dictionary()
        except DictionaryLoadError as e:
            # Thai falls back to heuristic segmentation until a reload succeeds
            logger.warning(f"❌ Thai dictionary not loaded - {e}")
    yield


# ✅ SETUP LOGGING FIRST
setup_logging()

app = FastAPI(
    title="Spatular Tokenizer API",
    description="Multilingual word tokenization with Thai dictionary segmentation",
    version="1.2.0",
    lifespan=lifespan,
    debug=(not settings.ENV == "production"),
)
app.state.tokenization_service = TokenizationService.from_settings(settings)


# ===============
# Middlewares
# ===============
add_cors_middleware(app)
add_rate_limit(app)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(AccessLoggingMiddleware)


# ===============
# Routers
# ===============
app.include_router(tokenize.router)
app.include_router(dictionary.router)
app.include_router(analysis.router)


# ===============
# Health Checks
# ===============
@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/liveness", status_code=204)
def liveness():
    return Response(status_code=204)


# ===============
# Global Error Handlers
# ===============
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(SpatularError, spatular_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)
