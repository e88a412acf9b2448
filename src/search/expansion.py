from __future__ import annotations

"""Static synonym and related-concept tables used for query expansion."""

from types import MappingProxyType
from typing import Mapping

SYNONYMS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "financial": ("monetary", "fiscal", "economic", "revenue", "budgetary"),
        "growth": ("increase", "expansion", "development", "rise", "gain"),
        "report": ("document", "analysis", "assessment", "evaluation", "review"),
        "market": ("industry", "sector", "business", "commercial", "trade"),
        "research": ("study", "investigation", "analysis", "examination", "survey"),
        "data": ("information", "statistics", "figures", "metrics", "records"),
        "customer": ("client", "consumer", "user", "buyer", "patron"),
        "product": ("item", "merchandise", "goods", "commodity", "offering"),
        "sales": ("revenue", "income", "earnings", "turnover", "proceeds"),
        "strategy": ("plan", "approach", "method", "tactic", "procedure"),
        "innovation": ("invention", "creation", "advancement", "breakthrough", "development"),
        "technology": ("tech", "digital", "electronic", "IT", "computing"),
        "performance": ("achievement", "accomplishment", "result", "output", "efficiency"),
        "improvement": ("enhancement", "upgrade", "advancement", "progress", "refinement"),
        "challenge": ("problem", "difficulty", "obstacle", "issue", "hurdle"),
    }
)

RELATED_CONCEPTS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "financial": ("profit", "investment", "cash flow", "assets", "capital"),
        "growth": ("profit margin", "market share", "scaling", "trajectory", "upward trend"),
        "report": ("findings", "conclusions", "recommendations", "insights", "summary"),
        "market": ("competition", "demand", "supply", "consumer behavior", "trends"),
        "research": ("methodology", "findings", "hypothesis", "data collection", "literature"),
        "data": ("analysis", "collection", "interpretation", "visualization", "insights"),
        "customer": ("satisfaction", "experience", "retention", "acquisition", "feedback"),
        "product": ("development", "design", "features", "quality", "lifecycle"),
        "sales": ("marketing", "conversion", "pipeline", "forecast", "quota"),
        "strategy": ("vision", "goals", "objectives", "implementation", "execution"),
        "innovation": ("disruption", "creativity", "R&D", "patents", "intellectual property"),
        "technology": ("software", "hardware", "infrastructure", "platform", "solution"),
        "performance": ("KPI", "metrics", "benchmark", "evaluation", "assessment"),
        "improvement": (
            "optimization",
            "streamlining",
            "iteration",
            "incremental change",
            "transformation",
        ),
        "challenge": ("risk", "threat", "weakness", "limitation", "constraint"),
    }
)


def query_tokens(query: str) -> list[str]:
    """Split a query on whitespace and lowercase each token."""
    return [token.lower() for token in query.split()]


def expand_terms(query: str, include_related: bool = True) -> list[str]:
    """Expand query tokens with synonyms and, optionally, related concepts.

    Tokens always come through verbatim. The result holds no duplicates and
    keeps first-seen order, so downstream context extraction is stable.
    """
    tokens = query_tokens(query)
    expanded: dict[str, None] = dict.fromkeys(tokens)
    for token in tokens:
        for synonym in SYNONYMS.get(token, ()):
            expanded.setdefault(synonym)
        if include_related:
            for concept in RELATED_CONCEPTS.get(token, ()):
                expanded.setdefault(concept)
    return list(expanded)
