"""Session, payment-proof and event record schemas (persisted to state.json)."""

from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from pydantic import Field

from src.config.models import ListingInput, ListingPack

from .base import CamelModel

EventType = Literal[
    "landing_view",
    "brief_generated",
    "checkout_started",
    "payment_evidence_submitted",
    "listing_exported",
]

EVENT_TYPES: tuple[str, ...] = (
    "landing_view",
    "brief_generated",
    "checkout_started",
    "payment_evidence_submitted",
    "listing_exported",
)

BriefIntent = Literal["manual_submit", "auto_preview", "sample_cta", "unknown"]


class PaymentProof(CamelModel):
    """What the buyer told us about their payment. Not verified server-side."""

    submitted_at: str
    payer_email: str
    transaction_id: str
    evidence_url: Optional[str] = None
    note: Optional[str] = None


class ListingSession(CamelModel):
    session_id: str
    created_at: str
    updated_at: str
    source: str = "web"
    self_test: bool = False
    input: ListingInput
    pack: ListingPack
    paid: bool = False
    payment_proof: Optional[PaymentProof] = None


class EventRecord(CamelModel):
    event_id: str
    event_type: EventType
    timestamp: str
    source: str
    self_test: bool = False
    session_id: Optional[str] = None
    details: Dict[str, Any] = Field(default_factory=dict)
