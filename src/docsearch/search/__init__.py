"""Multi-token proximity search over paged documents."""

from docsearch.search.indexer import (
    IndexLoader,
    IndexMemo,
    LoadReport,
    build_document_index,
    build_page,
)
from docsearch.search.searcher import (
    SearchEngine,
    SearchResponse,
    SearchResult,
    SearchResultPage,
    prepare_query,
    search,
)
from docsearch.search.snippet import Snippet, build_snippet, highlight
from docsearch.search.windows import MatchWindow, find_windows

__all__ = [
    "IndexLoader",
    "IndexMemo",
    "LoadReport",
    "build_document_index",
    "build_page",
    "SearchEngine",
    "SearchResponse",
    "SearchResult",
    "SearchResultPage",
    "prepare_query",
    "search",
    "Snippet",
    "build_snippet",
    "highlight",
    "MatchWindow",
    "find_windows",
]
