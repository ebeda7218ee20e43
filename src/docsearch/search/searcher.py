"""
Document Search Engine

Multi-token proximity search over in-memory document indexes.
A page matches only if it contains every query token (AND logic); each
matching page contributes up to a few snippets built around the tightest
windows that cover all tokens.
"""

import logging
from dataclasses import dataclass, field
from typing import Sequence

from docsearch.analyzer import analyzer
from docsearch.core.constants import DEFAULT_CONTEXT_RADIUS, MAX_MATCHES_PER_PAGE
from docsearch.models import DocumentIndex, PageContent
from docsearch.search.snippet import build_snippet
from docsearch.search.windows import find_windows

logger = logging.getLogger(__name__)


@dataclass
class SearchResultPage:
    """A single match on a page."""

    page_number: int
    snippet: str
    match_index: int
    highlight_length: int


@dataclass
class SearchResult:
    """All matches in one document."""

    document_id: str
    title: str
    path: str
    matches: list[SearchResultPage] = field(default_factory=list)


@dataclass
class SearchResponse:
    """Search results with metadata."""

    query: str
    tokens: list[str]
    results: list[SearchResult]
    searched: bool  # False when the query was empty: no search performed

    @property
    def total_matches(self) -> int:
        return sum(len(result.matches) for result in self.results)


def prepare_query(query: str | None) -> list[str] | None:
    """
    Normalize and tokenize a raw query.

    Returns:
        None for an empty/whitespace query (no search is performed),
        otherwise the token list, which may be empty (e.g. punctuation only).
    """
    trimmed = query.strip() if query else ""
    if not trimmed:
        return None
    return analyzer.tokenize(analyzer.normalize(trimmed))


def _contains_all(text: str, tokens: Sequence[str]) -> bool:
    return all(token in text for token in tokens)


def _page_matches(
    page: PageContent,
    tokens: Sequence[str],
    context_radius: int,
    max_matches: int,
) -> list[SearchResultPage]:
    matches: list[SearchResultPage] = []
    seen_snippets: set[str] = set()

    for window in find_windows(page.normalized_text, tokens):
        snippet = build_snippet(page.text, window.start, window.end, context_radius)
        # Distinct windows can render the same visible text
        if snippet.snippet in seen_snippets:
            continue
        seen_snippets.add(snippet.snippet)
        matches.append(
            SearchResultPage(
                page_number=page.page_number,
                snippet=snippet.snippet,
                match_index=snippet.match_index,
                highlight_length=snippet.highlight_length,
            )
        )
        if len(matches) >= max_matches:
            break

    return matches


def search_tokens(
    documents: Sequence[DocumentIndex],
    tokens: Sequence[str],
    context_radius: int = DEFAULT_CONTEXT_RADIUS,
    max_matches_per_page: int = MAX_MATCHES_PER_PAGE,
) -> list[SearchResult]:
    """Search already-tokenized input; documents keep their input order."""
    if not tokens:
        return []

    results = []
    for document in documents:
        # Cheap rejection before scanning pages
        if not _contains_all(document.aggregated_normalized_text, tokens):
            continue

        matches: list[SearchResultPage] = []
        for page in document.pages:
            if not _contains_all(page.normalized_text, tokens):
                continue
            matches.extend(
                _page_matches(page, tokens, context_radius, max_matches_per_page)
            )

        if matches:
            results.append(
                SearchResult(
                    document_id=document.id,
                    title=document.title,
                    path=document.path,
                    matches=matches,
                )
            )
    return results


def search(
    documents: Sequence[DocumentIndex],
    query: str,
    context_radius: int = DEFAULT_CONTEXT_RADIUS,
    max_matches_per_page: int = MAX_MATCHES_PER_PAGE,
) -> list[SearchResult]:
    """
    Search documents for pages containing every query token.

    Args:
        documents: Indexed documents
        query: Raw user query
        context_radius: Snippet context on each side of a match
        max_matches_per_page: Cap on snippets per page

    Returns:
        One SearchResult per matching document, in input order. Empty for an
        empty query, a query without tokens, or no matches.
    """
    tokens = prepare_query(query)
    if not tokens:
        return []
    return search_tokens(documents, tokens, context_radius, max_matches_per_page)


class SearchEngine:
    """
    Search over an immutable snapshot of document indexes.

    Safe to share between concurrent searches: nothing is mutated.
    """

    def __init__(
        self,
        documents: Sequence[DocumentIndex],
        context_radius: int = DEFAULT_CONTEXT_RADIUS,
        max_matches_per_page: int = MAX_MATCHES_PER_PAGE,
    ):
        if context_radius < 0:
            raise ValueError("context_radius must be >= 0")
        if max_matches_per_page < 1:
            raise ValueError("max_matches_per_page must be >= 1")
        self.documents: tuple[DocumentIndex, ...] = tuple(documents)
        self.context_radius = context_radius
        self.max_matches_per_page = max_matches_per_page

    def search(self, query: str) -> SearchResponse:
        tokens = prepare_query(query)
        if tokens is None:
            return self._empty_result(query, searched=False)

        results = search_tokens(
            self.documents, tokens, self.context_radius, self.max_matches_per_page
        )
        response = SearchResponse(
            query=query, tokens=tokens, results=results, searched=True
        )
        logger.debug(
            f"Query {query!r}: tokens={tokens} "
            f"documents={len(results)} matches={response.total_matches}"
        )
        return response

    def _empty_result(self, query: str, searched: bool) -> SearchResponse:
        return SearchResponse(query=query, tokens=[], results=[], searched=searched)
