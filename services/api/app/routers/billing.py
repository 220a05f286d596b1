"""Manual payment gate: payment-link checkout and proof submission.

Nothing here talks to a payment provider. Checkout hands out the static
payment link; proof submission records what the buyer reports and unlocks
export for the session.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from shared.schemas import CheckoutResponse, ProofResponse
from src.listing.brief import optional_string, parse_flag, required_string

from .. import db, settings
from ..payload import normalize_source, parse_session_id, read_json_object

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/billing/checkout", response_model=CheckoutResponse, response_model_by_alias=True)
def start_checkout(payload: Dict[str, Any] = Depends(read_json_object)):
    session_id = parse_session_id(payload)
    session = db.get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail={"error": "session_not_found"})

    db.record_event(
        "checkout_started",
        source=normalize_source(payload.get("source"), session.source),
        self_test=parse_flag(payload.get("selfTest")) or session.self_test,
        session_id=session_id,
        details={"priceUsd": settings.PRICE_USD},
    )
    return CheckoutResponse(payment_url=settings.PAYMENT_URL, price_usd=settings.PRICE_USD)


@router.post("/billing/proof", response_model=ProofResponse, response_model_by_alias=True)
def submit_payment_proof(payload: Dict[str, Any] = Depends(read_json_object)):
    """Accept buyer-reported payment evidence and unlock the session."""
    session_id = parse_session_id(payload)
    session = db.get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail={"error": "session_not_found"})

    payer_email = required_string(payload, "payerEmail", 160)
    transaction_id = required_string(payload, "transactionId", 120)
    evidence_url = optional_string(payload, "evidenceUrl", 300)
    note = optional_string(payload, "note", 400)
    source = normalize_source(payload.get("source"), session.source)
    self_test = parse_flag(payload.get("selfTest")) or session.self_test

    db.mark_session_paid(
        session_id,
        payer_email=payer_email,
        transaction_id=transaction_id,
        evidence_url=evidence_url,
        note=note,
    )
    db.record_event(
        "payment_evidence_submitted",
        source=source,
        self_test=self_test,
        session_id=session_id,
        details={"transactionId": transaction_id, "payerEmail": payer_email},
    )
    logger.info("Session %s unlocked by proof %s", session_id, transaction_id)
    return ProofResponse(session_id=session_id)
