from __future__ import annotations

"""Upload helpers: file kind detection, text extraction and size labels."""

import re
from dataclasses import dataclass
from pathlib import Path

from src.search.types import SUPPORTED_CONTENT_TYPES

_UNSAFE_FILENAME_RE = re.compile(r"[^a-zA-Z0-9.-]")

MOCK_EXTRACTION_TEMPLATE = (
    "Mock extracted content from {name}. This would contain the actual text content "
    "extracted from the document using appropriate parsing libraries in a real "
    "implementation."
)


class UnsupportedFileTypeError(ValueError):
    """Raised when an uploaded file has an unsupported extension."""
    pass


@dataclass(frozen=True)
class ExtractedUpload:
    """Upload ready to be stored as a document."""
    name: str
    content_type: str
    size: int
    content: str | None


def get_file_type(filename: str) -> str:
    """Return the lowercase extension without the dot."""
    return Path(filename).suffix.lstrip(".").lower()


def is_supported_file_type(file_type: str) -> bool:
    return file_type.lower() in SUPPORTED_CONTENT_TYPES


def sanitize_filename(filename: str) -> str:
    """Replace characters outside letters, digits, dots and dashes."""
    return _UNSAFE_FILENAME_RE.sub("_", filename)


def format_file_size(size: int) -> str:
    """Render a byte count as B, KB or MB."""
    if size < 1024:
        return f"{size} B"
    if size < 1048576:
        return f"{size / 1024:.1f} KB"
    return f"{size / 1048576:.1f} MB"


def load_text_bytes(data: bytes) -> str:
    """Decode plain text bytes, dropping invalid sequences."""
    return data.decode("utf-8", errors="ignore")


def extract_upload(filename: str, data: bytes) -> ExtractedUpload:
    """Turn raw upload bytes into document fields.

    Plain text is decoded directly. Other supported kinds get a placeholder
    body since binary formats are not parsed.
    """
    name = sanitize_filename(filename)
    file_type = get_file_type(name)
    if not is_supported_file_type(file_type):
        raise UnsupportedFileTypeError(f"Unsupported file type: .{file_type or '?'}")
    if file_type == "txt":
        content = load_text_bytes(data)
    else:
        content = MOCK_EXTRACTION_TEMPLATE.format(name=name)
    return ExtractedUpload(name=name, content_type=file_type, size=len(data), content=content)
