"""
Exceptions

- DocsearchError (base)
  - DocumentUnreadable: a catalog document cannot be opened or parsed
  - CacheUnavailable: the persistent index cache cannot be read or written
  - CatalogError: the document catalog is missing or malformed

Search itself never raises: an empty query or zero matches are normal results.
"""


class DocsearchError(Exception):
    """Base class for docsearch errors."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class DocumentUnreadable(DocsearchError):
    """
    Raised by page extractors when a document cannot be opened or parsed.

    Args:
        path: Locator of the document
        reason: Human-readable failure description
        page_number: Page being extracted when the failure happened, if any
    """

    def __init__(
        self,
        path: str,
        reason: str,
        page_number: int | None = None,
        original_error: Exception | None = None,
    ):
        where = f" (page {page_number})" if page_number is not None else ""
        super().__init__(
            f"Cannot read document {path}{where}: {reason}",
            original_error=original_error,
        )
        self.path = path
        self.reason = reason
        self.page_number = page_number


class CacheUnavailable(DocsearchError):
    """Raised inside index cache stores; never escapes them."""


class CatalogError(DocsearchError):
    """Raised when the document catalog cannot be loaded."""
