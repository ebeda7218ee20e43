"""
Page Extractors

Turn a raw document into (page_number, text) pairs, one page at a time.
Pages are yielded as soon as they are read so a caller keeps everything
extracted before a later page fails.
"""

import logging
from pathlib import Path
from typing import Iterator, Protocol

import fitz

from docsearch.exceptions import DocumentUnreadable

logger = logging.getLogger(__name__)

PAGE_BREAK = "\f"


class PageExtractor(Protocol):
    def extract_pages(self, path: str) -> Iterator[tuple[int, str]]:
        """Yield (1-based page number, page text). Raises DocumentUnreadable."""
        ...


def _flatten_lines(text: str) -> str:
    # PDF text comes back one line per text run; search works on a single line
    return " ".join(line.strip() for line in text.splitlines() if line.strip())


class PdfPageExtractor:
    """Extracts page text from PDF files with PyMuPDF."""

    def extract_pages(self, path: str) -> Iterator[tuple[int, str]]:
        try:
            doc = fitz.open(filename=str(path))
        except Exception as e:
            raise DocumentUnreadable(
                str(path), f"failed to open PDF: {e}", original_error=e
            ) from e

        try:
            if doc.needs_pass:
                raise DocumentUnreadable(str(path), "document is password protected")

            logger.debug(f"Extracting {doc.page_count} pages from {path}")
            for index in range(doc.page_count):
                page_number = index + 1
                try:
                    text = doc.load_page(index).get_text("text")
                except Exception as e:
                    raise DocumentUnreadable(
                        str(path),
                        f"failed to read page text: {e}",
                        page_number=page_number,
                        original_error=e,
                    ) from e
                yield page_number, _flatten_lines(text)
        finally:
            doc.close()


class TextPageExtractor:
    """Extracts pages from UTF-8 text files; pages are separated by form feeds."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def extract_pages(self, path: str) -> Iterator[tuple[int, str]]:
        try:
            content = Path(path).read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentUnreadable(str(path), str(e), original_error=e) from e

        pages = content.split(PAGE_BREAK)
        if len(pages) > 1 and not pages[-1].strip():
            pages.pop()
        for page_number, text in enumerate(pages, start=1):
            yield page_number, text


_EXTRACTORS: dict[str, type] = {
    ".pdf": PdfPageExtractor,
    ".txt": TextPageExtractor,
}


def extractor_for(path: str) -> PageExtractor:
    """
    Pick an extractor by file suffix.

    Raises:
        DocumentUnreadable: If the format is not supported
    """
    suffix = Path(path).suffix.lower()
    extractor_cls = _EXTRACTORS.get(suffix)
    if extractor_cls is None:
        raise DocumentUnreadable(str(path), f"unsupported document format '{suffix}'")
    return extractor_cls()
