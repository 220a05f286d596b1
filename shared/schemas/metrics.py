"""Funnel metrics schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .base import CamelModel


class EventCounts(BaseModel):
    """Event totals keyed by event type (snake_case on the wire)."""

    landing_view: int = 0
    brief_generated: int = 0
    checkout_started: int = 0
    payment_evidence_submitted: int = 0
    listing_exported: int = 0


class MetricsTotals(CamelModel):
    including_self_tests: EventCounts = Field(default_factory=EventCounts)
    excluding_self_tests: EventCounts = Field(default_factory=EventCounts)


class MetricsResponse(CamelModel):
    generated_at: str
    totals: MetricsTotals
    active_sessions: int = 0


class DailyCounts(BaseModel):
    date: str
    counts: EventCounts


class DailyMetricsResponse(CamelModel):
    generated_at: str
    self_test_filter: Optional[bool] = None
    days: List[DailyCounts] = Field(default_factory=list)


class PaidProofCountResponse(CamelModel):
    payment_evidence_events: int = 0
    self_test_filter: Optional[bool] = None
