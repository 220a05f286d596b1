"""Brief sanitization: phrase/keyword normalization and validation.

Every failure raises :class:`ListingValidationError` with an
``invalid_<fieldName>`` code; nothing is partially accepted.
"""

from __future__ import annotations

import re
from typing import Any, List, Mapping

from src.config.models import MAX_KEYWORDS, MAX_MATERIALS, TONES, ListingInput

from .errors import ListingValidationError

_WS_RE = re.compile(r"\s+")
_KEYWORD_STRIP_RE = re.compile(r"[^a-z0-9&\-\s]")
_LIST_SPLIT_RE = re.compile(r"[\n,]")

MAX_PHRASE_LENGTH = 80
MAX_FALLBACK_KEYWORDS = 8


# ---------------------------------------------------------------------------
# Primitive normalizers
# ---------------------------------------------------------------------------

def normalize_phrase(value: Any, key: str, max_length: int = MAX_PHRASE_LENGTH) -> str:
    """Trim and collapse whitespace; reject non-strings, empties and overlong text."""
    if not isinstance(value, str):
        raise ListingValidationError(key)
    trimmed = _WS_RE.sub(" ", value.strip())
    if not trimmed or len(trimmed) > max_length:
        raise ListingValidationError(key)
    return trimmed


def normalize_keyword(value: str) -> str:
    """Lower-case and keep only letters, digits, ``&``, ``-`` and single spaces.

    Examples:
        "  Wedding   Gift! " -> "wedding gift"
        "Mr & Mrs" -> "mr & mrs"
    """
    text = _KEYWORD_STRIP_RE.sub("", value.strip().lower())
    return _WS_RE.sub(" ", text).strip()


def _normalize_keyword_seed(value: str) -> str:
    # Disallowed characters become spaces here: "mug/cup" -> "mug cup".
    text = _KEYWORD_STRIP_RE.sub(" ", value.strip().lower())
    return _WS_RE.sub(" ", text).strip()


def _normalize_days(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ListingValidationError("processingTimeDays")
    if value < 1 or value > 45:
        raise ListingValidationError("processingTimeDays")
    return value


def _normalize_tone(value: Any) -> str:
    if not isinstance(value, str):
        raise ListingValidationError("tone")
    tone = value.strip().lower()
    if tone not in TONES:
        raise ListingValidationError("tone")
    return tone


def dedupe_phrases(values: Any, max_count: int, key: str) -> List[str]:
    """Normalize, drop empties and duplicates, keep first-seen order, cap at ``max_count``."""
    if not isinstance(values, (list, tuple)):
        raise ListingValidationError(key)

    seen: set[str] = set()
    result: List[str] = []
    for value in values:
        if not isinstance(value, str):
            raise ListingValidationError(key)
        normalized = normalize_keyword(value)
        if not normalized or normalized in seen:
            continue
        seen.add(normalized)
        result.append(normalized)
        if len(result) >= max_count:
            break
    return result


# ---------------------------------------------------------------------------
# Public operations
# ---------------------------------------------------------------------------

def sanitize_listing_input(raw: Mapping[str, Any]) -> ListingInput:
    """Validate a raw brief and return a normalized :class:`ListingInput`.

    ``raw`` uses the snake_case attribute names of ``ListingInput``. Missing
    keys are treated like wrong-typed values and fail with the field's code.
    """
    shop_name = normalize_phrase(raw.get("shop_name"), "shopName")
    product_type = normalize_phrase(raw.get("product_type"), "productType").lower()
    target_audience = normalize_phrase(raw.get("target_audience"), "targetAudience").lower()
    primary_keyword = normalize_keyword(normalize_phrase(raw.get("primary_keyword"), "primaryKeyword"))
    if not primary_keyword:
        raise ListingValidationError("primaryKeyword")

    supporting_keywords = dedupe_phrases(
        raw.get("supporting_keywords"), MAX_KEYWORDS, "supportingKeywords",
    )
    if not supporting_keywords:
        raise ListingValidationError("supportingKeywords")

    materials = dedupe_phrases(raw.get("materials", []), MAX_MATERIALS, "materials")
    tone = _normalize_tone(raw.get("tone"))
    price_band = normalize_phrase(raw.get("price_band"), "priceBand")
    processing_time_days = _normalize_days(raw.get("processing_time_days"))

    return ListingInput(
        shop_name=shop_name,
        product_type=product_type,
        target_audience=target_audience,
        primary_keyword=primary_keyword,
        supporting_keywords=supporting_keywords,
        materials=materials,
        tone=tone,
        price_band=price_band,
        processing_time_days=processing_time_days,
        personalization=raw.get("personalization") is True,
        include_uk_spelling=raw.get("include_uk_spelling") is True,
    )


def _split_list(text: str) -> List[str]:
    values = [normalize_keyword(v) for v in _LIST_SPLIT_RE.split(text)]
    return [v for v in values if v]


def parse_keyword_csv(text: Any) -> List[str]:
    """Parse comma/newline separated keywords.

    >>> parse_keyword_csv("wedding gift, bridesmaid gift\\nhandmade box")
    ['wedding gift', 'bridesmaid gift', 'handmade box']
    """
    if not isinstance(text, str):
        raise ListingValidationError("keywordsCsv")
    values = _split_list(text)
    if not values:
        raise ListingValidationError("keywordsCsv")
    return dedupe_phrases(values, MAX_KEYWORDS, "supportingKeywords")


def parse_materials_csv(text: Any) -> List[str]:
    """Parse comma/newline separated materials. An empty result is allowed."""
    if not isinstance(text, str):
        raise ListingValidationError("materialsCsv")
    return dedupe_phrases(_split_list(text), MAX_MATERIALS, "materials")


def build_fallback_keywords(
    primary_keyword: str, product_type: str, target_audience: str,
) -> List[str]:
    """Synthesize supporting keywords when the brief supplies none."""
    candidates = [
        primary_keyword,
        f"{primary_keyword} gift",
        f"{product_type} gift",
        f"{target_audience} gift",
        f"{product_type} etsy",
        "handmade gift",
    ]

    seen: set[str] = set()
    result: List[str] = []
    for candidate in candidates:
        normalized = _normalize_keyword_seed(candidate)
        if not normalized or len(normalized) > MAX_PHRASE_LENGTH or normalized in seen:
            continue
        seen.add(normalized)
        result.append(normalized)

    if not result:
        return ["etsy gift"]
    return result[:MAX_FALLBACK_KEYWORDS]
