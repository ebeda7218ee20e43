"""
Document Catalog

The fixed list of documents to index, loaded from a JSON file, and the
signature used to invalidate cached indexes when the list changes.
"""

import hashlib
import json
import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from docsearch.exceptions import CatalogError
from docsearch.models import DocumentEntry

logger = logging.getLogger(__name__)

_entries_adapter = TypeAdapter(list[DocumentEntry])


@dataclass(frozen=True)
class Catalog:
    entries: tuple[DocumentEntry, ...]

    def signature(self) -> str:
        """
        Stable fingerprint of (id, title, path) for every entry, in order.

        Any change to the document list or its metadata changes the signature.
        """
        canonical = json.dumps(
            [{"id": e.id, "title": e.title, "path": e.path} for e in self.entries],
            ensure_ascii=False,
            separators=(",", ":"),
        )
        return hashlib.sha256(canonical.encode("utf-8")).hexdigest()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)


def parse_catalog(raw: str, base_dir: Path | None = None) -> Catalog:
    """
    Parse catalog JSON.

    Args:
        raw: JSON list of {"id", "title", "path"} objects
        base_dir: Relative paths are resolved against this directory

    Raises:
        CatalogError: On invalid JSON, schema errors or duplicate ids
    """
    try:
        entries = _entries_adapter.validate_json(raw)
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog: {e}", original_error=e) from e

    seen: set[str] = set()
    for entry in entries:
        if entry.id in seen:
            raise CatalogError(f"Duplicate document id in catalog: {entry.id}")
        seen.add(entry.id)

    if base_dir is not None:
        entries = [
            entry
            if Path(entry.path).is_absolute()
            else entry.model_copy(update={"path": str(base_dir / entry.path)})
            for entry in entries
        ]
    return Catalog(entries=tuple(entries))


def load_catalog(path: str | Path) -> Catalog:
    """Load the catalog file; relative document paths are relative to it."""
    catalog_path = Path(path)
    try:
        raw = catalog_path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"Cannot read catalog {catalog_path}: {e}", original_error=e) from e

    catalog = parse_catalog(raw, base_dir=catalog_path.resolve().parent)
    logger.info(f"Loaded catalog {catalog_path} with {len(catalog)} documents")
    return catalog
