"""
Document Indexer

Builds DocumentIndex objects from extracted page text and loads the whole
catalog, reusing the in-memory memo and the persistent cache when the
catalog signature still matches.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable

from docsearch.analyzer import analyzer
from docsearch.catalog import Catalog
from docsearch.core.constants import PAGE_SEPARATOR
from docsearch.db.index_cache import SqliteIndexStore
from docsearch.exceptions import DocumentUnreadable
from docsearch.extractors import PageExtractor, extractor_for
from docsearch.models import CachedIndexPayload, DocumentEntry, DocumentIndex, PageContent

logger = logging.getLogger(__name__)

ExtractorFactory = Callable[[str], PageExtractor]


def build_page(page_number: int, text: str) -> PageContent:
    return PageContent(
        page_number=page_number,
        text=text,
        normalized_text=analyzer.normalize(text),
    )


def build_document_index(
    entry: DocumentEntry, pages: Iterable[PageContent]
) -> DocumentIndex:
    """Assemble a document index; pages are kept in the given order."""
    pages = tuple(pages)
    return DocumentIndex(
        id=entry.id,
        title=entry.title,
        path=entry.path,
        pages=pages,
        aggregated_text=PAGE_SEPARATOR.join(page.text for page in pages),
        aggregated_normalized_text=PAGE_SEPARATOR.join(
            page.normalized_text for page in pages
        ),
    )


class IndexMemo:
    """
    In-memory indexes keyed by document id, valid for one catalog signature.

    sync() drops every entry when the signature changes; entries are never
    updated one by one.
    """

    def __init__(self):
        self._signature: str | None = None
        self._documents: dict[str, DocumentIndex] = {}

    @property
    def signature(self) -> str | None:
        return self._signature

    def sync(self, signature: str) -> bool:
        """Bind the memo to signature. Returns True if entries were dropped."""
        if signature == self._signature:
            return False
        dropped = bool(self._documents)
        self._documents.clear()
        self._signature = signature
        return dropped

    def invalidate(self) -> None:
        self._documents.clear()
        self._signature = None

    def get(self, document_id: str) -> DocumentIndex | None:
        return self._documents.get(document_id)

    def put(self, document: DocumentIndex) -> None:
        self._documents[document.id] = document

    def __len__(self) -> int:
        return len(self._documents)


@dataclass
class LoadReport:
    """What happened during the last catalog load."""

    signature: str
    from_cache: bool = False
    indexed: list[str] = field(default_factory=list)
    reused: list[str] = field(default_factory=list)
    partial: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    cache_written: bool = False

    @property
    def complete(self) -> bool:
        return not self.partial and not self.skipped


class IndexLoader:
    """Loads indexes for every catalog document."""

    def __init__(
        self,
        catalog: Catalog,
        memo: IndexMemo | None = None,
        store: SqliteIndexStore | None = None,
        extractor_factory: ExtractorFactory = extractor_for,
        keep_partial: bool = True,
    ):
        self.catalog = catalog
        self.memo = memo if memo is not None else IndexMemo()
        self.store = store
        self.extractor_factory = extractor_factory
        self.keep_partial = keep_partial
        self.last_report: LoadReport | None = None

    def load(self) -> list[DocumentIndex]:
        signature = self.catalog.signature()
        report = LoadReport(signature=signature)
        self.last_report = report

        if self.memo.sync(signature):
            logger.info("Catalog changed; dropped in-memory indexes")

        cached = self._read_cache(signature)
        if cached:
            for document in cached:
                self.memo.put(document)
            report.from_cache = True
            report.reused = [document.id for document in cached]
            logger.info(f"Loaded {len(cached)} document indexes from cache")
            return cached

        documents = []
        for entry in self.catalog:
            memoized = self.memo.get(entry.id)
            if memoized is not None:
                documents.append(memoized)
                report.reused.append(entry.id)
                continue

            document = self._index_entry(entry, report)
            if document is None:
                continue
            # Partial documents are re-extracted on the next load
            if entry.id not in report.partial:
                self.memo.put(document)
            documents.append(document)

        if report.complete:
            self._write_cache(signature, documents, report)
        else:
            logger.warning(
                f"Index incomplete (partial={report.partial}, skipped={report.skipped}); "
                "not writing cache"
            )
        return documents

    def _index_entry(
        self, entry: DocumentEntry, report: LoadReport
    ) -> DocumentIndex | None:
        """Extract pages sequentially; keep pages read before a failure."""
        pages: list[PageContent] = []
        try:
            extractor = self.extractor_factory(entry.path)
            for page_number, text in extractor.extract_pages(entry.path):
                pages.append(build_page(page_number, text))
        except DocumentUnreadable as e:
            if self.keep_partial and pages:
                logger.warning(
                    f"Keeping {len(pages)} pages of {entry.id} after failure: {e}"
                )
                report.partial.append(entry.id)
                return build_document_index(entry, pages)
            logger.warning(f"Skipping document {entry.id}: {e}")
            report.skipped.append(entry.id)
            return None

        logger.info(f"Indexed {entry.id}: {len(pages)} pages")
        report.indexed.append(entry.id)
        return build_document_index(entry, pages)

    def _read_cache(self, signature: str) -> list[DocumentIndex] | None:
        if self.store is None:
            return None
        result = self.store.read(signature)
        if not result.ok:
            logger.warning(f"Index cache unavailable: {result.reason}")
            return None
        if result.payload is None or not result.payload.documents:
            return None
        return list(result.payload.documents)

    def _write_cache(
        self, signature: str, documents: list[DocumentIndex], report: LoadReport
    ) -> None:
        if self.store is None:
            return
        result = self.store.write(
            CachedIndexPayload(signature=signature, documents=documents)
        )
        if result.ok:
            report.cache_written = True
        else:
            logger.warning(f"Failed to write index cache: {result.reason}")
