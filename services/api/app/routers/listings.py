"""Listing generation and export endpoints."""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from shared.schemas import (
    ExportBundle,
    ExportResponse,
    GenerateResponse,
    PaymentRequired,
    Paywall,
)
from src.listing import build_export_text, build_listing_pack, parse_brief
from src.listing.brief import optional_string, parse_flag
from src.listing.export import export_file_name

from .. import db, settings
from ..payload import (
    normalize_brief_intent,
    normalize_source,
    parse_session_id,
    read_json_object,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/listings/generate",
    response_model=GenerateResponse,
    response_model_by_alias=True,
)
def generate_listing(payload: Dict[str, Any] = Depends(read_json_object)):
    """Sanitize a brief, build its pack and open an unpaid session."""
    listing = parse_brief(payload)
    source = normalize_source(payload.get("source"), "web")
    self_test = parse_flag(payload.get("selfTest"))
    brief_intent = normalize_brief_intent(payload.get("briefIntent"))

    pack = build_listing_pack(listing)
    session = db.create_session(listing, pack, source=source, self_test=self_test)

    db.record_event(
        "brief_generated",
        source=source,
        self_test=self_test,
        session_id=session.session_id,
        details={
            "score": pack.score,
            "tags": len(pack.tags),
            "tone": listing.tone,
            "briefIntent": brief_intent,
        },
    )

    return GenerateResponse(
        session_id=session.session_id,
        pack=pack,
        paywall=Paywall(price_usd=settings.PRICE_USD, payment_url=settings.PAYMENT_URL),
    )


@router.post(
    "/listings/export",
    response_model=ExportResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
)
def export_listing(payload: Dict[str, Any] = Depends(read_json_object)):
    """Return the full pack as JSON or text once payment proof is on file."""
    session_id = parse_session_id(payload)
    session = db.get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail={"error": "session_not_found"})

    if not session.paid:
        body = PaymentRequired(payment_url=settings.PAYMENT_URL, price_usd=settings.PRICE_USD)
        return JSONResponse(status_code=402, content=body.model_dump(by_alias=True))

    source = normalize_source(payload.get("source"), session.source)
    self_test = parse_flag(payload.get("selfTest")) or session.self_test
    export_format = optional_string(payload, "format", 20) or "json"

    db.record_event(
        "listing_exported",
        source=source,
        self_test=self_test,
        session_id=session_id,
        details={
            "format": export_format,
            "tags": len(session.pack.tags),
            "score": session.pack.score,
        },
    )

    if export_format == "text":
        return ExportResponse(
            session_id=session_id,
            format="text",
            file_name=export_file_name(session_id, "txt"),
            content=build_export_text(session_id, session.input, session.pack),
        )

    return ExportResponse(
        session_id=session_id,
        format="json",
        file_name=export_file_name(session_id, "json"),
        export=ExportBundle(input=session.input, pack=session.pack),
    )
