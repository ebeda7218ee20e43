"""
System Router

Health check endpoints:
- /health: Simple health for load balancers
- /health/ready: Readiness probe (document index loaded)
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from docsearch.services.search import search_service

root_router = APIRouter()


@root_router.get("/health")
async def health():
    """Simple health check for load balancers."""
    return {"status": "ok"}


@root_router.get("/health/ready")
async def readiness():
    """Readiness probe - is the document index loaded?"""
    ready = search_service.ready
    return JSONResponse(
        {
            "status": "ok" if ready else "loading",
            "documents": len(search_service.documents),
        },
        status_code=200 if ready else 503,
    )
