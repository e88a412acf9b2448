from __future__ import annotations

import sqlite3

from src.metadata.audit import AuditEvent, AuditStore


def test_audit_store_records_events(tmp_path) -> None:
    db_path = tmp_path / "audit.db"
    store = AuditStore(f"sqlite:///{db_path}")
    event_id = store.record_event(
        AuditEvent(
            event_type="search",
            request_id="req-1",
            status="completed",
            detail={"results": 2},
        )
    )
    store.record_event(
        AuditEvent(event_type="delete", request_id="req-2", status="not_found", document_id="7")
    )

    conn = sqlite3.connect(db_path)
    try:
        row = conn.execute(
            "SELECT event_type, status FROM audit_events WHERE id = ?",
            (event_id,),
        ).fetchone()
    finally:
        conn.close()
    assert row == ("search", "completed")

    searches = store.list_events("search")
    assert len(searches) == 1
    assert searches[0]["detail"] == {"results": 2}
    assert sorted(event["event_type"] for event in store.list_events()) == ["delete", "search"]
