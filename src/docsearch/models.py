"""
Document Models

Pydantic models for the document catalog and the per-document search index.
Index models are frozen and JSON-serialisable so they can be shared across
concurrent searches and stored in the persistent index cache.
"""

from pydantic import BaseModel, ConfigDict, Field


class DocumentEntry(BaseModel):
    """A catalog item: which document to index and how to present it."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Stable document identifier")
    title: str = Field(..., description="Display title")
    path: str = Field(..., min_length=1, description="Locator of the raw document")


class PageContent(BaseModel):
    """Text of one page, original and normalized (index-aligned)."""

    model_config = ConfigDict(frozen=True)

    page_number: int = Field(..., ge=1)
    text: str
    normalized_text: str


class DocumentIndex(BaseModel):
    """Searchable form of one document."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    path: str
    pages: tuple[PageContent, ...] = ()
    aggregated_text: str = ""
    # Gate for skipping documents that obviously lack a token
    aggregated_normalized_text: str = ""

    @property
    def page_count(self) -> int:
        return len(self.pages)


class CachedIndexPayload(BaseModel):
    """What the persistent index cache stores."""

    signature: str
    documents: list[DocumentIndex] = Field(default_factory=list)
