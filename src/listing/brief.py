"""Coerce a loosely typed JSON brief into a sanitized ListingInput.

Clients post camelCase JSON (``shopName``, ``supportingKeywordsCsv`` ...)
with most fields optional. This module fills in defaults, picks between the
CSV and array variants of the keyword/material lists, then hands the result
to :func:`sanitize_listing_input`.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Mapping, Optional

from src.config.models import MAX_KEYWORDS, MAX_MATERIALS, ListingInput

from .errors import ListingValidationError
from .sanitizer import (
    build_fallback_keywords,
    parse_keyword_csv,
    parse_materials_csv,
    sanitize_listing_input,
)

DEFAULT_SHOP_NAME = "Your Etsy Shop"
DEFAULT_AUDIENCE = "etsy shoppers"
DEFAULT_TONE = "warm"
DEFAULT_PRICE_BAND = "$20-$45"
DEFAULT_PROCESSING_DAYS = 3

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


# ---------------------------------------------------------------------------
# Field helpers (shared with the HTTP layer)
# ---------------------------------------------------------------------------

def parse_flag(value: Any) -> bool:
    """Interpret checkbox-ish values: True, 1, "true", "1", "yes"."""
    if value is True:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return value == 1
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return False


def optional_string(payload: Mapping[str, Any], key: str, max_length: int = 200) -> Optional[str]:
    raw = payload.get(key)
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ListingValidationError(key)
    trimmed = raw.strip()
    if not trimmed:
        return None
    if len(trimmed) > max_length:
        raise ListingValidationError(key)
    return trimmed


def required_string(payload: Mapping[str, Any], key: str, max_length: int = 200) -> str:
    value = optional_string(payload, key, max_length)
    if not value:
        raise ListingValidationError(key)
    return value


def optional_integer(payload: Mapping[str, Any], key: str) -> Optional[int]:
    """Accept ints, integral floats and strings with a leading integer ("4 days")."""
    raw = payload.get(key)
    if raw is None or raw == "":
        return None
    if isinstance(raw, bool):
        raise ListingValidationError(key)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, str):
        match = _LEADING_INT_RE.match(raw)
        if match:
            return int(match.group(1))
    raise ListingValidationError(key)


def optional_flag(payload: Mapping[str, Any], key: str) -> Optional[bool]:
    if key not in payload:
        return None
    return parse_flag(payload[key])


def string_array(payload: Mapping[str, Any], key: str, max_items: int, max_length: int) -> List[str]:
    value = payload.get(key)
    if not isinstance(value, list):
        raise ListingValidationError(key)

    result: List[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ListingValidationError(key)
        trimmed = item.strip()
        if not trimmed or len(trimmed) > max_length:
            raise ListingValidationError(key)
        result.append(trimmed)
        if len(result) >= max_items:
            break
    return result


# ---------------------------------------------------------------------------
# Lists
# ---------------------------------------------------------------------------

def _parse_keywords(payload: Mapping[str, Any]) -> List[str]:
    keywords_csv = optional_string(payload, "supportingKeywordsCsv", 5000)
    if keywords_csv:
        return parse_keyword_csv(keywords_csv)
    if "supportingKeywords" in payload:
        return string_array(payload, "supportingKeywords", MAX_KEYWORDS, 80)
    return []


def _parse_materials(payload: Mapping[str, Any]) -> List[str]:
    materials_csv = optional_string(payload, "materialsCsv", 3000)
    if materials_csv:
        return parse_materials_csv(materials_csv)
    if "materials" not in payload:
        return []
    return string_array(payload, "materials", MAX_MATERIALS, 80)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def brief_to_raw(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Apply defaults and list variants; return the sanitizer's raw input."""
    shop_name = optional_string(payload, "shopName", 80) or DEFAULT_SHOP_NAME
    product_type = required_string(payload, "productType", 80)
    target_audience = optional_string(payload, "targetAudience", 80) or DEFAULT_AUDIENCE
    primary_keyword = optional_string(payload, "primaryKeyword", 80) or product_type

    supporting_keywords = _parse_keywords(payload)
    if not supporting_keywords:
        supporting_keywords = build_fallback_keywords(primary_keyword, product_type, target_audience)

    processing_time_days = optional_integer(payload, "processingTimeDays")
    personalization = optional_flag(payload, "personalization")
    include_uk_spelling = optional_flag(payload, "includeUkSpelling")

    return {
        "shop_name": shop_name,
        "product_type": product_type,
        "target_audience": target_audience,
        "primary_keyword": primary_keyword,
        "supporting_keywords": supporting_keywords,
        "materials": _parse_materials(payload),
        "tone": (optional_string(payload, "tone", 20) or DEFAULT_TONE).lower(),
        "price_band": optional_string(payload, "priceBand", 80) or DEFAULT_PRICE_BAND,
        "processing_time_days": (
            DEFAULT_PROCESSING_DAYS if processing_time_days is None else processing_time_days
        ),
        "personalization": True if personalization is None else personalization,
        "include_uk_spelling": False if include_uk_spelling is None else include_uk_spelling,
    }


def parse_brief(payload: Mapping[str, Any]) -> ListingInput:
    """Parse and sanitize a client brief in one step."""
    return sanitize_listing_input(brief_to_raw(payload))
