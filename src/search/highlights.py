from __future__ import annotations

"""Context snippets and term highlighting for search previews."""

import re

PRIMARY_MARKERS = ("[[", "]]")
SECONDARY_MARKERS = ("{{", "}}")
ELLIPSIS = "..."
FALLBACK_WORDS = 20


def extract_context(text: str, terms: list[str], window: int = 10) -> str:
    """Return the words around the first token matching any term.

    Terms are tried in order and each scans the text left to right, so the
    earliest term in the list wins even if a later term appears sooner.
    """
    words = text.split()
    for term in terms:
        needle = term.lower()
        if not needle:
            continue
        for idx, word in enumerate(words):
            if needle in word.lower():
                start = max(0, idx - window)
                end = min(len(words), idx + window + 1)
                return " ".join(words[start:end]) + ELLIPSIS
    return " ".join(words[:FALLBACK_WORDS]) + ELLIPSIS


def highlight_matches(
    snippet: str,
    terms: list[str],
    original_term: str,
    primary: tuple[str, str] = PRIMARY_MARKERS,
    secondary: tuple[str, str] = SECONDARY_MARKERS,
) -> str:
    """Wrap the original term with primary markers and expansions with secondary ones.

    Replacements run one term at a time over the already-marked text, so a
    term nested inside another match gets marked twice. No overlap
    resolution is attempted.
    """
    result = _wrap(snippet, original_term, primary)
    original_lower = original_term.lower()
    for term in terms:
        if term.lower() == original_lower:
            continue
        result = _wrap(result, term, secondary)
    return result


def _wrap(text: str, term: str, markers: tuple[str, str]) -> str:
    """Wrap every case-insensitive occurrence of term in markers."""
    if not term:
        return text
    opening, closing = markers
    pattern = re.compile(re.escape(term), re.IGNORECASE)
    return pattern.sub(lambda match: f"{opening}{match.group(0)}{closing}", text)
