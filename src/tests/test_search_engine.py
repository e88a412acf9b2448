from __future__ import annotations

import random

from src.search.engine import RelevanceSearchEngine, searchable_text
from src.search.types import Document


class FixedRandom:
    def __init__(self, value: float = 0.5) -> None:
        self.value = value

    def random(self) -> float:
        return self.value


def build_documents() -> list[Document]:
    return [
        Document(
            doc_id="1",
            name="Q1 Financial Report 2023.pdf",
            content_type="pdf",
            size=2048,
            content="Financial growth analysis for Q1. Revenue increased by 15%.",
        ),
        Document(
            doc_id="2",
            name="Project Proposal.docx",
            content_type="docx",
            size=1024,
            content="Proposal for the new market expansion project with budget allocation.",
        ),
        Document(
            doc_id="3",
            name="Team Notes.txt",
            content_type="txt",
            size=512,
            content="Weekly notes about hiring and office moves.",
        ),
    ]


def test_search_empty_collection() -> None:
    engine = RelevanceSearchEngine()
    assert engine.search([], "anything", semantic=True) == []


def test_search_blank_query_returns_nothing() -> None:
    engine = RelevanceSearchEngine()
    assert engine.search(build_documents(), "", semantic=True) == []
    assert engine.search(build_documents(), "   ", semantic=True) == []


def test_search_without_matches_returns_nothing() -> None:
    engine = RelevanceSearchEngine()
    assert engine.search(build_documents(), "zzz_no_match", semantic=True) == []


def test_search_financial_scenario() -> None:
    engine = RelevanceSearchEngine(rng=FixedRandom())
    document = Document(
        doc_id="a",
        name="growth.txt",
        content_type="txt",
        size=40,
        content="revenue increased due to financial growth",
    )

    results = engine.search([document], "financial", semantic=True)

    assert len(results) == 1
    assert results[0].relevance_score > 0
    assert results[0].matched_snippet == "{{revenue}} increased due to [[financial]] growth..."


def test_search_results_sorted_and_scored() -> None:
    engine = RelevanceSearchEngine(rng=random.Random(1))

    results = engine.search(build_documents(), "financial growth", semantic=True)

    scores = [result.relevance_score for result in results]
    assert scores == sorted(scores, reverse=True)
    assert all(0 < score <= 100 for score in scores)
    assert {result.document.doc_id for result in results} == {"1", "2"}


def test_search_ties_keep_collection_order() -> None:
    engine = RelevanceSearchEngine(rng=FixedRandom())
    documents = [
        Document(doc_id=str(idx), name=f"doc{idx}.txt", content_type="txt", size=1, content="market data")
        for idx in range(5)
    ]

    results = engine.search(documents, "market", semantic=True)

    assert [result.document.doc_id for result in results] == ["0", "1", "2", "3", "4"]


def test_literal_match_outranks_synonym_match() -> None:
    literal = Document(
        doc_id="literal",
        name="a.txt",
        content_type="txt",
        size=1,
        content="financial statements for the year",
    )
    synonym = Document(
        doc_id="synonym",
        name="b.txt",
        content_type="txt",
        size=1,
        content="revenue went up",
    )
    engine = RelevanceSearchEngine(rng=random.Random(42))
    literal_total = 0
    synonym_total = 0
    for _ in range(30):
        results = engine.search([synonym, literal], "financial", semantic=True)
        by_id = {result.document.doc_id: result.relevance_score for result in results}
        assert set(by_id) == {"literal", "synonym"}
        literal_total += by_id["literal"]
        synonym_total += by_id["synonym"]
    assert literal_total > synonym_total

    results = engine.search([synonym, literal], "financial", semantic=False)
    assert [result.document.doc_id for result in results] == ["literal"]


def test_non_semantic_search_uses_whole_query() -> None:
    engine = RelevanceSearchEngine(rng=FixedRandom())
    documents = build_documents()

    phrase = engine.search(documents, "financial growth", semantic=False)
    reversed_phrase = engine.search(documents, "growth financial", semantic=False)

    assert [result.document.doc_id for result in phrase] == ["1"]
    assert phrase[0].relevance_score == 100
    # only the first-token bonus applies when the phrase itself is absent
    assert [result.document.doc_id for result in reversed_phrase] == ["1"]
    assert reversed_phrase[0].relevance_score == 40


def test_missing_content_uses_placeholder() -> None:
    engine = RelevanceSearchEngine(rng=FixedRandom())
    document = Document(doc_id="9", name="Scan.pdf", content_type="pdf", size=10)

    results = engine.search([document], "zzz_no_match", semantic=True)

    assert len(results) == 1
    assert "Scan.pdf" in results[0].matched_snippet
    assert "[[zzz_no_match]]," in results[0].matched_snippet
    assert searchable_text(document, "q").startswith("This is sample content for Scan.pdf")
