from __future__ import annotations

"""Shared pytest fixtures and test environment defaults."""

import os
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("DOCS_SEED_DEMO", "true")
os.environ.setdefault("DOCS_METRICS_ENABLED", "true")
os.environ.pop("DOCS_AUDIT_DB_URI", None)
os.environ.pop("DOCS_SEARCH_SEED", None)
