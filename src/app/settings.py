from __future__ import annotations

import os
from dataclasses import dataclass

try:
    from dotenv import load_dotenv
except ImportError:  # pragma: no cover - optional in minimal setups
    load_dotenv = None

if load_dotenv is not None:
    load_dotenv()

_TRUE_VALUES = {"1", "true", "yes"}


@dataclass(frozen=True)
class Settings:
    log_level: str = os.getenv("DOCS_LOG_LEVEL", "INFO")
    seed_demo_raw: str = os.getenv("DOCS_SEED_DEMO", "true")
    max_upload_bytes_raw: str = os.getenv("DOCS_MAX_UPLOAD_BYTES", "52428800")
    metrics_enabled_raw: str = os.getenv("DOCS_METRICS_ENABLED", "true")
    search_seed_raw: str | None = os.getenv("DOCS_SEARCH_SEED")
    context_window_raw: str = os.getenv("DOCS_CONTEXT_WINDOW", "10")
    audit_db_uri_raw: str | None = os.getenv("DOCS_AUDIT_DB_URI")

    @property
    def seed_demo(self) -> bool:
        return os.getenv("DOCS_SEED_DEMO", self.seed_demo_raw).lower() in _TRUE_VALUES

    @property
    def max_upload_bytes(self) -> int:
        raw = os.getenv("DOCS_MAX_UPLOAD_BYTES", self.max_upload_bytes_raw).strip()
        try:
            return int(raw)
        except ValueError:
            return 52428800

    @property
    def context_window(self) -> int:
        raw = os.getenv("DOCS_CONTEXT_WINDOW", self.context_window_raw).strip()
        try:
            value = int(raw)
        except ValueError:
            return 10
        return value if value >= 0 else 10

    @property
    def metrics_enabled(self) -> bool:
        return os.getenv("DOCS_METRICS_ENABLED", self.metrics_enabled_raw).lower() in _TRUE_VALUES

    @property
    def search_seed(self) -> int | None:
        raw = os.getenv("DOCS_SEARCH_SEED", self.search_seed_raw or "").strip()
        if not raw:
            return None
        try:
            return int(raw)
        except ValueError:
            return None

    @property
    def audit_db_uri(self) -> str | None:
        return os.getenv("DOCS_AUDIT_DB_URI", self.audit_db_uri_raw or "") or None


settings = Settings()
