"""
Document Search - FastAPI Application

Loads the document catalog at startup and serves JSON search over it.
"""

import logging
import uvicorn
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from slowapi.errors import RateLimitExceeded

from docsearch.core.config import settings
from docsearch.exceptions import CatalogError
from docsearch.services.search import search_service
from docsearch.api.routers import search_api
from docsearch.api.routers.system import root_router as system_root_router
from docsearch.api.middleware.rate_limiter import limiter, rate_limit_exceeded_handler
from docsearch.api.middleware.request_logging import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- Index loading ---
    try:
        search_service.reload()
    except CatalogError as e:
        # Stay up; readiness reports 503 until a reload succeeds
        logger.error(f"Failed to load document catalog: {e}")
    yield


app = FastAPI(
    lifespan=lifespan,
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Full-text proximity search over a fixed set of paged documents.",
    openapi_tags=[
        {"name": "search", "description": "Search and index endpoints"},
        {"name": "system", "description": "Health checks"},
    ],
)

# --- Rate Limiter ---
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

# --- Middleware (order matters: last added = first executed) ---
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.ALLOWED_HOSTS)

if settings.CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

# Include Routers
app.include_router(system_root_router, tags=["system"])
app.include_router(search_api.router, prefix="/api/v1", tags=["search"])


if __name__ == "__main__":
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "docsearch.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
