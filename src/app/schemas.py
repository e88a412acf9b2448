from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

ContentType = Literal["pdf", "docx", "txt", "pptx"]
SummaryFocus = Literal["key-points", "detailed", "executive", "action-items"]


class DocumentCreate(BaseModel):
    name: str = Field(min_length=1)
    content_type: ContentType
    size: int = Field(ge=0)
    content: str | None = None


class DocumentUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    content_type: ContentType | None = None
    size: int | None = Field(default=None, ge=0)
    content: str | None = None


class DocumentOut(BaseModel):
    doc_id: str
    name: str
    content_type: str
    size: int
    size_label: str
    content: str | None = None
    uploaded_at: datetime


class SearchResultOut(BaseModel):
    document: DocumentOut
    relevance_score: int = Field(ge=0, le=100)
    matched_snippet: str


class SummarizeRequest(BaseModel):
    length: int = Field(default=3, ge=1, le=5)
    focus: SummaryFocus = "key-points"


class SummaryResponse(BaseModel):
    document_id: str
    title: str
    file_type: str
    pages: int
    focus: str
    points: list[str]
    themes: list[str]


class StatsResponse(BaseModel):
    backend: str
    document_count: int
    total_bytes: int
    by_type: dict[str, int]
