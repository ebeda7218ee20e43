import logging
from dataclasses import asdict
from typing import Any

from docsearch.catalog import load_catalog
from docsearch.core.config import settings
from docsearch.db.index_cache import SqliteIndexStore
from docsearch.models import DocumentIndex
from docsearch.search import IndexLoader, IndexMemo, LoadReport, SearchEngine
from docsearch.search.snippet import highlight

logger = logging.getLogger(__name__)


class SearchService:
    """
    Owns the current document snapshot and answers queries against it.

    reload() builds a new engine and swaps it in with a single assignment, so
    searches running concurrently keep using the snapshot they started with.
    """

    def __init__(self):
        self.memo = IndexMemo()
        self._engine: SearchEngine | None = None
        self.last_report: LoadReport | None = None

    @property
    def ready(self) -> bool:
        return self._engine is not None

    @property
    def documents(self) -> tuple[DocumentIndex, ...]:
        return self._engine.documents if self._engine else ()

    def use_documents(self, documents: list[DocumentIndex]) -> None:
        self._engine = SearchEngine(
            documents,
            context_radius=settings.SNIPPET_CONTEXT_RADIUS,
            max_matches_per_page=settings.MAX_MATCHES_PER_PAGE,
        )

    def reload(self) -> LoadReport:
        """Load the catalog and (re)build indexes. Raises CatalogError."""
        catalog = load_catalog(settings.CATALOG_PATH)
        store = (
            SqliteIndexStore(settings.INDEX_CACHE_DB)
            if settings.INDEX_CACHE_ENABLED
            else None
        )
        loader = IndexLoader(
            catalog,
            memo=self.memo,
            store=store,
            keep_partial=settings.KEEP_PARTIAL_DOCUMENTS,
        )
        documents = loader.load()
        self.use_documents(documents)
        self.last_report = loader.last_report
        logger.info(f"Search index ready: {len(documents)} documents")
        return loader.last_report

    def search(self, q: str | None) -> dict[str, Any]:
        query = (q or "").strip()[: settings.MAX_QUERY_LEN]
        if self._engine is None:
            return self._empty_result(query)

        response = self._engine.search(query)
        results = []
        for result in response.results:
            data = asdict(result)
            for match in data["matches"]:
                match["highlighted"] = highlight(
                    match["snippet"], match["match_index"], match["highlight_length"]
                )
            results.append(data)

        return {
            "query": query,
            "searched": response.searched,
            "tokens": response.tokens,
            "total": response.total_matches,
            "results": results,
        }

    def _empty_result(self, query: str) -> dict[str, Any]:
        return {
            "query": query,
            "searched": False,
            "tokens": [],
            "total": 0,
            "results": [],
        }


search_service = SearchService()
