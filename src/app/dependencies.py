from __future__ import annotations

import random
from functools import lru_cache

from src.app.settings import settings
from src.metadata.audit import AuditStore
from src.search.engine import RelevanceSearchEngine
from src.store.inmemory import InMemoryDocumentStore


@lru_cache
def get_document_store() -> InMemoryDocumentStore:
    if settings.seed_demo:
        return InMemoryDocumentStore.with_demo_documents()
    return InMemoryDocumentStore()


@lru_cache
def get_search_engine() -> RelevanceSearchEngine:
    return RelevanceSearchEngine(
        rng=random.Random(settings.search_seed),
        context_window=settings.context_window,
    )


@lru_cache
def get_audit_store() -> AuditStore | None:
    if not settings.audit_db_uri:
        return None
    return AuditStore(settings.audit_db_uri)


def reset_caches() -> None:
    """Drop cached components so the next request rebuilds them."""
    get_document_store.cache_clear()
    get_search_engine.cache_clear()
    get_audit_store.cache_clear()
