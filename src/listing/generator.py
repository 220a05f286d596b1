"""Listing pack assembly: tags -> copy -> score -> locale pass."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from src.config.models import FaqItem, ListingInput, ListingPack

from .composer import (
    compact_title,
    compose_description,
    compose_faq,
    compose_highlights,
    compose_launch_checklist,
    compose_photo_shot_list,
    title_segments,
)
from .scoring import calculate_score
from .spelling import localize, localize_lines
from .tags import build_tags

logger = logging.getLogger(__name__)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def build_listing_pack(listing: ListingInput) -> ListingPack:
    """Build a complete pack from a sanitized brief.

    Deterministic for a given ``listing`` except for ``generated_at``.
    """
    uk = listing.include_uk_spelling
    tags = build_tags(listing)

    faq = [
        FaqItem(question=item.question, answer=localize(item.answer, uk))
        for item in compose_faq(listing)
    ]

    pack = ListingPack(
        generated_at=_now_iso(),
        score=calculate_score(listing, len(tags)),
        # Segments are localized before compaction so "colour"/"favourite"
        # cannot push a full-length title past the limit.
        title=compact_title(localize_lines(title_segments(listing), uk)),
        tags=tags,
        highlights=localize_lines(compose_highlights(listing, len(tags)), uk),
        description=localize(compose_description(listing), uk),
        faq=faq,
        photo_shot_list=localize_lines(compose_photo_shot_list(listing), uk),
        launch_checklist=localize_lines(compose_launch_checklist(), uk),
    )
    logger.debug(
        "Built pack for %r: %d tags, score %d", listing.primary_keyword, len(tags), pack.score,
    )
    return pack
