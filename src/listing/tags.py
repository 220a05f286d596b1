"""Tag selection under the marketplace limits (13 tags, 20 chars each)."""

from __future__ import annotations

from typing import List

from src.config.models import MAX_TAG_LENGTH, MAX_TAGS, ListingInput

from .sanitizer import normalize_keyword

FALLBACK_TAGS = (
    "small business",
    "handmade",
    "gift for her",
    "gift for him",
    "home decor",
    "custom order",
)


def _push_tag(tags: List[str], seen: set[str], candidate: str) -> None:
    normalized = normalize_keyword(candidate)
    if not normalized or len(normalized) > MAX_TAG_LENGTH:
        return
    if normalized in seen or len(tags) >= MAX_TAGS:
        return
    seen.add(normalized)
    tags.append(normalized)


def candidate_pool(listing: ListingInput) -> List[str]:
    """Return every tag candidate in priority order (before filtering)."""
    pool = [
        listing.primary_keyword,
        *listing.supporting_keywords,
        f"{listing.product_type} gift",
        f"{listing.target_audience} gift",
        listing.product_type,
        listing.target_audience,
        "personalized gift" if listing.personalization else "ready to ship",
        "etsy seller",
    ]
    for word in listing.primary_keyword.split(" "):
        if len(word) < 3:
            continue
        pool.extend([word, f"{word} decor", f"{word} idea"])
    pool.extend(FALLBACK_TAGS)
    return pool


def build_tags(listing: ListingInput) -> List[str]:
    """Walk the candidate pool and keep up to 13 unique, short-enough tags."""
    tags: List[str] = []
    seen: set[str] = set()
    for candidate in candidate_pool(listing):
        if len(tags) >= MAX_TAGS:
            break
        _push_tag(tags, seen, candidate)
    return tags
