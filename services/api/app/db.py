"""Session and event store.

Supports two modes:
- On-disk JSON when DATA_DIR is set: a full ``state.json`` snapshot plus an
  append-only ``events.jsonl`` log, both under DATA_DIR
- In-memory only when DATA_DIR is unset (local development and tests)

All reads are served from memory. Every recorded event rewrites the snapshot
and appends one line to the log; writes are serialized with a lock. The routes
that write are plain ``def`` handlers, so this file I/O runs in FastAPI's
threadpool and never on the event loop.
"""

from __future__ import annotations

import json
import logging
import os
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from shared.schemas import (
    EVENT_TYPES,
    DailyCounts,
    EventCounts,
    EventRecord,
    ListingSession,
    PaymentProof,
)
from src.config.models import ListingInput, ListingPack

logger = logging.getLogger(__name__)

DATA_DIR = os.environ.get("DATA_DIR", "")
STATE_FILE_NAME = "state.json"
EVENTS_FILE_NAME = "events.jsonl"

_write_lock = threading.Lock()

# ---------------------------------------------------------------------------
# In-memory stores
# ---------------------------------------------------------------------------

_mem_sessions: Dict[str, ListingSession] = {}
_mem_events: List[EventRecord] = []


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------

def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _uuid() -> str:
    return str(uuid.uuid4())


def _use_disk() -> bool:
    return bool(DATA_DIR)


def _state_path() -> Path:
    return Path(DATA_DIR) / STATE_FILE_NAME


def _events_path() -> Path:
    return Path(DATA_DIR) / EVENTS_FILE_NAME


def _snapshot() -> dict:
    return {
        "sessions": {
            sid: s.model_dump(mode="json", by_alias=True) for sid, s in _mem_sessions.items()
        },
        "events": [e.model_dump(mode="json", by_alias=True) for e in _mem_events],
    }


def _write_snapshot() -> None:
    path = _state_path()
    tmp = path.with_suffix(".json.tmp")
    tmp.write_text(json.dumps(_snapshot(), ensure_ascii=False), encoding="utf-8")
    os.replace(tmp, path)


def _append_event_line(event: EventRecord) -> None:
    line = json.dumps(event.model_dump(mode="json", by_alias=True), ensure_ascii=False)
    with open(_events_path(), "a", encoding="utf-8") as f:
        f.write(line + "\n")


# ===================================================================
# Lifecycle
# ===================================================================

def load_state() -> None:
    """Load the snapshot from DATA_DIR (no-op in memory mode).

    Events with an unknown type are dropped. A missing or unreadable snapshot
    is replaced by the current (normally empty) in-memory state.
    """
    if not _use_disk():
        logger.info("No DATA_DIR set - using in-memory store")
        return

    Path(DATA_DIR).mkdir(parents=True, exist_ok=True)
    try:
        raw = json.loads(_state_path().read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.info("No state file at %s - starting fresh", _state_path())
        raw = None
    except (OSError, ValueError) as e:
        logger.warning("Unreadable state file %s: %s - starting fresh", _state_path(), e)
        raw = None

    with _write_lock:
        if isinstance(raw, dict):
            _load_sessions(raw.get("sessions"))
            _load_events(raw.get("events"))
        else:
            _write_snapshot()
        _events_path().touch(exist_ok=True)

    logger.info(
        "Loaded state from %s: %d sessions, %d events",
        DATA_DIR, len(_mem_sessions), len(_mem_events),
    )


def _load_sessions(sessions: Any) -> None:
    if not isinstance(sessions, dict):
        return
    _mem_sessions.clear()
    for sid, data in sessions.items():
        try:
            _mem_sessions[sid] = ListingSession.model_validate(data)
        except ValidationError as e:
            logger.warning("Skipping malformed session %s: %s", sid, e.error_count())


def _load_events(events: Any) -> None:
    if not isinstance(events, list):
        return
    _mem_events.clear()
    for data in events:
        if not isinstance(data, dict) or data.get("eventType") not in EVENT_TYPES:
            continue
        try:
            _mem_events.append(EventRecord.model_validate(data))
        except ValidationError as e:
            logger.warning("Skipping malformed event: %s", e.error_count())


def reset() -> None:
    """Drop everything held in memory (files are left alone)."""
    with _write_lock:
        _mem_sessions.clear()
        _mem_events.clear()


# ===================================================================
# Sessions
# ===================================================================

def create_session(
    listing: ListingInput, pack: ListingPack, source: str, self_test: bool,
) -> ListingSession:
    """Register a new unpaid session. Persisted with the next recorded event."""
    now = _now_iso()
    session = ListingSession(
        session_id=_uuid(),
        created_at=now,
        updated_at=now,
        source=source,
        self_test=self_test,
        input=listing,
        pack=pack,
        paid=False,
    )
    with _write_lock:
        _mem_sessions[session.session_id] = session
    return session


def get_session(session_id: str) -> Optional[ListingSession]:
    return _mem_sessions.get(session_id)


def session_count() -> int:
    return len(_mem_sessions)


def mark_session_paid(
    session_id: str,
    payer_email: str,
    transaction_id: str,
    evidence_url: Optional[str] = None,
    note: Optional[str] = None,
) -> Optional[ListingSession]:
    """Attach payment proof and unlock export. Persisted with the next recorded event."""
    now = _now_iso()
    proof = PaymentProof(
        submitted_at=now,
        payer_email=payer_email,
        transaction_id=transaction_id,
        evidence_url=evidence_url,
        note=note,
    )
    with _write_lock:
        session = _mem_sessions.get(session_id)
        if session is None:
            return None
        session.paid = True
        session.updated_at = now
        session.payment_proof = proof
    return session


# ===================================================================
# Events
# ===================================================================

def record_event(
    event_type: str,
    source: str,
    self_test: bool,
    session_id: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
) -> EventRecord:
    event = EventRecord(
        event_id=_uuid(),
        event_type=event_type,
        timestamp=_now_iso(),
        source=source,
        self_test=self_test,
        session_id=session_id,
        details=details or {},
    )
    with _write_lock:
        _mem_events.append(event)
        if _use_disk():
            try:
                _write_snapshot()
                _append_event_line(event)
            except OSError:
                logger.exception("Failed to persist event %s (%s)", event.event_id, event_type)
                raise
    logger.info("Recorded %s (source=%s, session=%s)", event_type, source, session_id)
    return event


def list_events() -> List[EventRecord]:
    return list(_mem_events)


def _matches(event: EventRecord, self_test: Optional[bool]) -> bool:
    return self_test is None or event.self_test == self_test


def _bump(counts: EventCounts, event_type: str) -> None:
    setattr(counts, event_type, getattr(counts, event_type) + 1)


def count_events(self_test: Optional[bool] = None) -> EventCounts:
    """Count events per type. ``self_test`` None counts everything."""
    counts = EventCounts()
    for event in _mem_events:
        if _matches(event, self_test):
            _bump(counts, event.event_type)
    return counts


def daily_counts(self_test: Optional[bool] = None) -> List[DailyCounts]:
    """Per-UTC-day event counts, oldest day first."""
    buckets: Dict[str, EventCounts] = {}
    for event in _mem_events:
        if not _matches(event, self_test):
            continue
        day = event.timestamp[:10]
        _bump(buckets.setdefault(day, EventCounts()), event.event_type)
    return [DailyCounts(date=day, counts=buckets[day]) for day in sorted(buckets)]


def count_payment_proofs(self_test: Optional[bool] = None) -> int:
    return sum(
        1 for e in _mem_events
        if e.event_type == "payment_evidence_submitted" and _matches(e, self_test)
    )
