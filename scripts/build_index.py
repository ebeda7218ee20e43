#!/usr/bin/env python3
"""
Build the document index and warm the persistent index cache.

Reads the catalog (CATALOG_PATH), extracts every document, and writes the
index cache (INDEX_CACHE_DB). With --query, also runs a search and prints
the matches.

Usage:
    ENVIRONMENT=development python scripts/build_index.py [--catalog data/catalog.json]
        [--no-cache] [--query "quick fox"]
"""

import argparse
import logging
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from docsearch.catalog import load_catalog  # noqa: E402
from docsearch.core.config import settings  # noqa: E402
from docsearch.db.index_cache import SqliteIndexStore  # noqa: E402
from docsearch.search import IndexLoader, SearchEngine  # noqa: E402


def print_results(engine: SearchEngine, query: str) -> None:
    response = engine.search(query)
    if not response.searched:
        print("Empty query: nothing searched.")
        return
    print(f"Tokens: {response.tokens}")
    print(f"Matches: {response.total_matches}")
    for result in response.results:
        print(f"\n{result.title} ({result.document_id})")
        for match in result.matches:
            print(f"  p.{match.page_number}: {match.snippet}")


def main():
    parser = argparse.ArgumentParser(description="Build the document search index")
    parser.add_argument("--catalog", default=settings.CATALOG_PATH)
    parser.add_argument("--cache-db", default=settings.INDEX_CACHE_DB)
    parser.add_argument(
        "--no-cache", action="store_true", help="Do not read or write the index cache"
    )
    parser.add_argument("--query", help="Run a search after indexing")
    args = parser.parse_args()

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    catalog = load_catalog(args.catalog)
    store = None if args.no_cache else SqliteIndexStore(args.cache_db)
    loader = IndexLoader(
        catalog, store=store, keep_partial=settings.KEEP_PARTIAL_DOCUMENTS
    )
    documents = loader.load()
    report = loader.last_report

    print(f"Documents in catalog: {len(catalog)}")
    print(f"Indexed: {len(documents)} (from cache: {report.from_cache})")
    for document in documents:
        print(f"  {document.id}: {document.page_count} pages")
    if report.partial:
        print(f"Partially indexed: {', '.join(report.partial)}")
    if report.skipped:
        print(f"Skipped (unreadable): {', '.join(report.skipped)}")
    print(f"Cache written: {report.cache_written}")

    if args.query is not None:
        engine = SearchEngine(
            documents,
            context_radius=settings.SNIPPET_CONTEXT_RADIUS,
            max_matches_per_page=settings.MAX_MATCHES_PER_PAGE,
        )
        print()
        print_results(engine, args.query)


if __name__ == "__main__":
    main()
