"""Search API Router - JSON endpoints for search and index management."""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from docsearch.api.middleware.rate_limiter import limiter
from docsearch.core.config import settings
from docsearch.exceptions import CatalogError
from docsearch.services.search import search_service

logger = logging.getLogger(__name__)


router = APIRouter()


@router.get("/search")
@limiter.limit(settings.SEARCH_RATE_LIMIT)
async def api_search(request: Request, q: str | None = None):
    """
    Search every indexed document.

    `searched` is false when the query is empty: no search was performed.
    Each match carries the page number to navigate to.
    """
    return JSONResponse(search_service.search(q))


@router.get("/documents")
async def api_documents():
    """List indexed documents."""
    return {
        "documents": [
            {
                "id": document.id,
                "title": document.title,
                "path": document.path,
                "page_count": document.page_count,
            }
            for document in search_service.documents
        ]
    }


@router.post("/index/reload")
def api_reload_index():
    """Reload the catalog and rebuild (or re-read cached) indexes."""
    try:
        report = search_service.reload()
    except CatalogError as e:
        logger.error(f"Index reload failed: {e}")
        return JSONResponse(
            {"error": "catalog_unavailable", "detail": e.message},
            status_code=503,
        )
    return {"ok": True, "report": asdict(report)}
