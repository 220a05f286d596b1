"""Shared fixtures for API integration tests.

Uses FastAPI TestClient (in-memory, no network) so tests run
without a live server or a data directory.
"""

from __future__ import annotations

import os
import sys

import pytest

# Ensure project root is on sys.path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

# Force the in-memory store (no state files written by tests)
os.environ.pop("DATA_DIR", None)


SMOKE_BRIEF = {
    "shopName": "Self Test Studio",
    "productType": "ceramic mug",
    "targetAudience": "book lovers",
    "primaryKeyword": "book lover mug",
    "supportingKeywordsCsv": "gift for reader, cozy mug, literary gift",
    "materialsCsv": "ceramic, glaze",
    "tone": "warm",
    "priceBand": "$18-$30",
    "processingTimeDays": 3,
    "personalization": True,
    "includeUkSpelling": False,
}


@pytest.fixture(autouse=True)
def _reset_store(monkeypatch):
    """Clear in-memory stores before each test for isolation."""
    from services.api.app import db

    monkeypatch.setattr(db, "DATA_DIR", "")
    db.reset()
    yield
    db.reset()


@pytest.fixture()
def client():
    """FastAPI TestClient: no network, no server startup needed."""
    from fastapi.testclient import TestClient

    from services.api.app.main import app

    return TestClient(app)


@pytest.fixture()
def brief():
    return dict(SMOKE_BRIEF)


@pytest.fixture()
def sample_session(client, brief):
    """Generate a pack and return its session id."""
    resp = client.post("/api/listings/generate", json={**brief, "source": "smoke", "selfTest": True})
    assert resp.status_code == 200
    return resp.json()["sessionId"]


@pytest.fixture()
def paid_session(client, sample_session):
    """A session with payment proof on file."""
    resp = client.post(
        "/api/billing/proof",
        json={
            "sessionId": sample_session,
            "payerEmail": "buyer@example.com",
            "transactionId": "txn_123",
        },
    )
    assert resp.status_code == 200
    return sample_session
