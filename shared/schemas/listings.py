"""Generate / export / billing response schemas."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel

from src.config.models import ListingInput, ListingPack

from .base import CamelModel


class Paywall(CamelModel):
    price_usd: float
    payment_url: str
    unlock_action: str = "listing_export"


class GenerateResponse(CamelModel):
    session_id: str
    pack: ListingPack
    paywall: Paywall


class CheckoutResponse(CamelModel):
    checkout_mode: Literal["payment_link"] = "payment_link"
    payment_url: str
    price_usd: float


class ProofResponse(CamelModel):
    status: Literal["accepted"] = "accepted"
    session_id: str
    unlocked: bool = True


class PaymentRequired(CamelModel):
    error: str = "payment_required"
    checkout_mode: Literal["payment_link"] = "payment_link"
    payment_url: str
    price_usd: float


class ExportBundle(BaseModel):
    input: ListingInput
    pack: ListingPack


class ExportResponse(CamelModel):
    session_id: str
    format: Literal["json", "text"]
    file_name: str
    content: Optional[str] = None
    export: Optional[ExportBundle] = None
