"""Test fixtures for docsearch tests."""

import os
import sys
from pathlib import Path

# Set ENVIRONMENT before importing any modules that use infrastructure_config
os.environ.setdefault("ENVIRONMENT", "test")

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import json  # noqa: E402
import pytest  # noqa: E402

from docsearch.models import DocumentEntry  # noqa: E402
from docsearch.search.indexer import build_document_index, build_page  # noqa: E402


def make_document(doc_id: str, pages: list[str], title: str | None = None):
    """Build a DocumentIndex from page texts (page numbers start at 1)."""
    entry = DocumentEntry(id=doc_id, title=title or doc_id.title(), path=f"/{doc_id}.pdf")
    return build_document_index(
        entry, [build_page(number, text) for number, text in enumerate(pages, start=1)]
    )


@pytest.fixture
def document_factory():
    return make_document


@pytest.fixture
def catalog_dir(tmp_path):
    """A catalog of two text documents; pages are separated by form feeds."""
    (tmp_path / "loops.txt").write_text(
        "Chapter 1. Variables and types\fChapter 2. The while loop repeats a block\f",
        encoding="utf-8",
    )
    (tmp_path / "graphs.txt").write_text(
        "Глава 1. Графы\fГлава 2. Обход графа в ширину",
        encoding="utf-8",
    )
    catalog = [
        {"id": "loops", "title": "Loops", "path": "loops.txt"},
        {"id": "graphs", "title": "Графы", "path": "graphs.txt"},
    ]
    (tmp_path / "catalog.json").write_text(
        json.dumps(catalog, ensure_ascii=False), encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def cache_db_path(tmp_path):
    """Provide a temporary index cache path."""
    return str(tmp_path / "index_cache.db")
