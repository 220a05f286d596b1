"""Heuristic listing-readiness score."""

from __future__ import annotations

from src.config.models import ListingInput

BASE_SCORE = 55


def _clamp_score(value: float) -> int:
    return max(0, min(100, round(value)))


def calculate_score(listing: ListingInput, tag_count: int) -> int:
    """Score a brief and its tag count on a 0-100 scale.

    score = 55
          + min(20, tags)
          + min(8, supporting keywords)
          + 7 if personalized else 4
          + 6 if 3+ materials else 2
          + 4 if processing <= 3 days else 1
    """
    score = BASE_SCORE
    score += min(20, tag_count)
    score += min(8, len(listing.supporting_keywords))
    score += 7 if listing.personalization else 4
    score += 6 if len(listing.materials) >= 3 else 2
    score += 4 if listing.processing_time_days <= 3 else 1
    return _clamp_score(score)
