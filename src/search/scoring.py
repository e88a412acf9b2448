from __future__ import annotations

"""Heuristic relevance scoring with bounded random jitter."""

from typing import Protocol

MAX_SCORE = 100
COVERAGE_WEIGHT = 60.0
EXACT_MATCH_WEIGHT = 40.0
JITTER_LOW = 0.9
JITTER_SPAN = 0.2


class RandomSource(Protocol):
    def random(self) -> float:
        """Return a float in [0.0, 1.0)."""
        ...


def score_document(
    text: str,
    terms: list[str],
    anchor: str,
    rng: RandomSource,
) -> int:
    """Score how well text covers the expanded terms, from 0 to 100.

    Coverage of distinct terms carries 60 points and a hit on the anchor
    (the first token of the raw query) carries 40, both divided by the term
    count. The result is scaled by a jitter factor in [0.9, 1.1).
    """
    if not terms:
        return 0
    lowered = text.lower()
    matches = sum(1 for term in dict.fromkeys(terms) if term and term.lower() in lowered)
    exact = 1 if anchor and anchor.lower() in lowered else 0
    total = len(terms)
    base = min(
        float(MAX_SCORE),
        (matches / total) * COVERAGE_WEIGHT + (exact / total) * EXACT_MATCH_WEIGHT,
    )
    jitter = JITTER_LOW + rng.random() * JITTER_SPAN
    return max(0, min(MAX_SCORE, round(base * jitter)))
