from __future__ import annotations

"""Core data types for documents and search results."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

SUPPORTED_CONTENT_TYPES = ("pdf", "docx", "txt", "pptx")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Document:
    """Uploaded document with optional extracted text."""
    doc_id: str
    name: str
    content_type: str
    size: int
    content: str | None = None
    uploaded_at: datetime = field(default_factory=_utcnow)


@dataclass(frozen=True)
class SearchResult:
    """Ranked document with a highlighted preview snippet."""
    document: Document
    relevance_score: int
    matched_snippet: str
