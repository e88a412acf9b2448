from __future__ import annotations

"""In-memory document store for the demo service."""

from dataclasses import dataclass, field, replace
from typing import Any

from src.search.types import Document

_UPDATABLE_FIELDS = {"name", "content_type", "size", "content"}

DEMO_DOCUMENTS: tuple[dict[str, Any], ...] = (
    {
        "name": "Q1 Financial Report 2023.pdf",
        "content_type": "pdf",
        "size": int(2.4 * 1024 * 1024),
        "content": (
            "This document contains financial growth analysis for Q1 2023. Revenue "
            "increased by 15% compared to previous quarter. Market expansion led to "
            "economic growth across all sectors."
        ),
    },
    {
        "name": "Project Proposal.docx",
        "content_type": "docx",
        "size": int(1.8 * 1024 * 1024),
        "content": (
            "Detailed proposal for the new market expansion project. Includes budget "
            "allocation, resource requirements, and expected revenue increase."
        ),
    },
    {
        "name": "Sales Presentation.pptx",
        "content_type": "pptx",
        "size": int(5.1 * 1024 * 1024),
        "content": (
            "Quarterly sales presentation showing financial growth, customer acquisition "
            "metrics, and revenue projections."
        ),
    },
)


class DocumentNotFoundError(LookupError):
    """Raised when a document ID is not in the store."""
    pass


@dataclass
class InMemoryDocumentStore:
    """Keep documents in insertion order with sequential string IDs."""
    documents: dict[str, Document] = field(default_factory=dict)
    next_id: int = 1

    @classmethod
    def with_demo_documents(cls) -> "InMemoryDocumentStore":
        """Build a store seeded with the sample documents."""
        store = cls()
        for payload in DEMO_DOCUMENTS:
            store.add_document(**payload)
        return store

    def list_documents(self, content_type: str | None = None) -> list[Document]:
        """Return stored documents, optionally filtered by content type."""
        if content_type is None:
            return list(self.documents.values())
        wanted = content_type.strip().lower()
        return [doc for doc in self.documents.values() if doc.content_type == wanted]

    def get_document(self, doc_id: str) -> Document:
        try:
            return self.documents[doc_id]
        except KeyError as exc:
            raise DocumentNotFoundError(doc_id) from exc

    def add_document(
        self,
        name: str,
        content_type: str,
        size: int,
        content: str | None = None,
    ) -> Document:
        """Create a document and assign the next ID."""
        doc_id = str(self.next_id)
        self.next_id += 1
        document = Document(
            doc_id=doc_id,
            name=name,
            content_type=content_type.lower(),
            size=size,
            content=content,
        )
        self.documents[doc_id] = document
        return document

    def update_document(self, doc_id: str, **changes: Any) -> Document:
        """Replace a document with updated fields."""
        current = self.get_document(doc_id)
        unknown = set(changes) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unsupported document fields: {', '.join(sorted(unknown))}")
        if "content_type" in changes and changes["content_type"] is not None:
            changes["content_type"] = str(changes["content_type"]).lower()
        updated = replace(current, **changes)
        self.documents[doc_id] = updated
        return updated

    def delete_document(self, doc_id: str) -> bool:
        """Delete a document, returning False when it did not exist."""
        return self.documents.pop(doc_id, None) is not None

    def stats(self) -> dict[str, Any]:
        """Return document counts grouped by content type."""
        by_type: dict[str, int] = {}
        total_bytes = 0
        for doc in self.documents.values():
            by_type[doc.content_type] = by_type.get(doc.content_type, 0) + 1
            total_bytes += doc.size
        return {
            "backend": "memory",
            "document_count": len(self.documents),
            "total_bytes": total_bytes,
            "by_type": by_type,
        }
