"""Funnel metrics computed from the recorded events."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Query

from shared.schemas import (
    DailyMetricsResponse,
    MetricsResponse,
    MetricsTotals,
    PaidProofCountResponse,
)

from .. import db
from ..payload import self_test_query

router = APIRouter()


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/metrics", response_model=MetricsResponse, response_model_by_alias=True)
async def get_metrics():
    return MetricsResponse(
        generated_at=_now_iso(),
        totals=MetricsTotals(
            including_self_tests=db.count_events(),
            excluding_self_tests=db.count_events(self_test=False),
        ),
        active_sessions=db.session_count(),
    )


@router.get("/metrics/daily", response_model=DailyMetricsResponse, response_model_by_alias=True)
async def get_daily_metrics(self_test: Optional[str] = Query(None, alias="selfTest")):
    self_test_filter = self_test_query(self_test)
    return DailyMetricsResponse(
        generated_at=_now_iso(),
        self_test_filter=self_test_filter,
        days=db.daily_counts(self_test_filter),
    )


@router.get("/paid-proof/count", response_model=PaidProofCountResponse, response_model_by_alias=True)
async def get_paid_proof_count(self_test: Optional[str] = Query(None, alias="selfTest")):
    self_test_filter = self_test_query(self_test)
    return PaidProofCountResponse(
        payment_evidence_events=db.count_payment_proofs(self_test_filter),
        self_test_filter=self_test_filter,
    )
