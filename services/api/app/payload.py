"""Request body parsing and the small field normalizers the routes share."""

from __future__ import annotations

import json
import re
from typing import Any, Dict, Optional

from fastapi import Request

from src.listing.brief import parse_flag, required_string
from src.listing.errors import ListingValidationError

from . import settings

_SOURCE_RE = re.compile(r"^[a-z0-9][a-z0-9_-]{0,39}$")
_SESSION_ID_RE = re.compile(r"^[a-zA-Z0-9-]{8,120}$")
_BRIEF_INTENTS = ("manual_submit", "auto_preview", "sample_cta")


async def read_json_object(request: Request) -> Dict[str, Any]:
    """Return the JSON object body; an empty body is ``{}``.

    Raises ``invalid_body_too_large`` past MAX_BODY_BYTES and ``invalid_json``
    for malformed JSON or a non-object top level.
    """
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > settings.MAX_BODY_BYTES:
        raise ListingValidationError("body_too_large")

    body = await request.body()
    if len(body) > settings.MAX_BODY_BYTES:
        raise ListingValidationError("body_too_large")

    raw = body.decode("utf-8", errors="replace").strip()
    if not raw:
        return {}
    try:
        parsed = json.loads(raw)
    except (ValueError, RecursionError):
        raise ListingValidationError("json")
    if not isinstance(parsed, dict):
        raise ListingValidationError("json")
    return parsed


def normalize_source(value: Any, fallback: str = "web") -> str:
    """Lower-cased traffic source tag, or ``fallback`` when malformed."""
    if not isinstance(value, str):
        return fallback
    normalized = value.strip().lower()
    if not _SOURCE_RE.match(normalized):
        return fallback
    return normalized


def normalize_brief_intent(value: Any) -> str:
    if not isinstance(value, str):
        return "unknown"
    normalized = value.strip().lower()
    return normalized if normalized in _BRIEF_INTENTS else "unknown"


def parse_session_id(payload: Dict[str, Any]) -> str:
    session_id = required_string(payload, "sessionId", 120)
    if not _SESSION_ID_RE.match(session_id):
        raise ListingValidationError("sessionId")
    return session_id


def self_test_query(value: Optional[str]) -> Optional[bool]:
    """``?selfTest=`` filter: absent means no filter."""
    if value is None:
        return None
    return parse_flag(value)
