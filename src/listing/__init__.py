"""Listing pack generation: brief sanitization, tags, copy and scoring."""

from .brief import parse_brief
from .errors import ListingValidationError, error_code
from .export import build_export_text
from .generator import build_listing_pack
from .sanitizer import (
    build_fallback_keywords,
    parse_keyword_csv,
    parse_materials_csv,
    sanitize_listing_input,
)
from .spelling import apply_uk_spelling

__all__ = [
    "ListingValidationError",
    "apply_uk_spelling",
    "build_export_text",
    "build_fallback_keywords",
    "build_listing_pack",
    "error_code",
    "parse_brief",
    "parse_keyword_csv",
    "parse_materials_csv",
    "sanitize_listing_input",
]
