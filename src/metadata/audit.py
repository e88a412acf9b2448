from __future__ import annotations

"""Audit event storage for document and search activity."""

import json
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


class AuditStoreError(RuntimeError):
    """Raised when audit storage fails."""
    pass


@dataclass(frozen=True)
class AuditEvent:
    """Audit event payload captured during request processing."""
    event_type: str
    request_id: str
    status: str
    document_id: str | None = None
    detail: dict[str, Any] | None = None


class AuditStore:
    """Persist audit events to a SQL database."""
    def __init__(self, connection_uri: str) -> None:
        """Initialize the audit store and ensure tables exist."""
        try:
            from sqlalchemy import Column, DateTime, MetaData, String, Table, Text, create_engine
        except ImportError as exc:  # pragma: no cover - optional dependency
            raise AuditStoreError(
                "sqlalchemy is required to use the audit store"
            ) from exc

        self._engine = create_engine(connection_uri)
        self._metadata = MetaData()
        self._table = Table(
            "audit_events",
            self._metadata,
            Column("id", String(36), primary_key=True),
            Column("request_id", String(64), nullable=False),
            Column("event_type", String(64), nullable=False),
            Column("document_id", String(64), nullable=True),
            Column("status", String(32), nullable=False),
            Column("detail", Text, nullable=True),
            Column("created_at", DateTime(timezone=True), nullable=False),
        )
        self._metadata.create_all(self._engine)

    def record_event(self, event: AuditEvent) -> str:
        """Insert a new audit event row and return its ID."""
        event_id = str(uuid.uuid4())
        payload = {
            "id": event_id,
            "request_id": event.request_id,
            "event_type": event.event_type,
            "document_id": event.document_id,
            "status": event.status,
            "detail": json.dumps(event.detail or {}, ensure_ascii=True, default=str),
            "created_at": datetime.now(timezone.utc),
        }
        with self._engine.begin() as conn:
            conn.execute(self._table.insert().values(**payload))
        return event_id

    def list_events(self, event_type: str | None = None) -> list[dict[str, Any]]:
        """Return stored events, oldest first."""
        query = self._table.select().order_by(self._table.c.created_at)
        if event_type:
            query = query.where(self._table.c.event_type == event_type)
        with self._engine.connect() as conn:
            rows = conn.execute(query).mappings().all()
        events: list[dict[str, Any]] = []
        for row in rows:
            item = dict(row)
            item["detail"] = json.loads(item["detail"]) if item["detail"] else {}
            events.append(item)
        return events
