"""Plain-text rendering of a generated pack for download."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, List, Optional

from src.config.models import ListingInput, ListingPack

EXPORT_HEADING = "Etsy Listing Sprint Assistant Export"


def _bullets(lines: List[str], items: Iterable[str]) -> None:
    for item in items:
        lines.append(f"- {item}")


def build_export_text(
    session_id: str,
    listing: ListingInput,
    pack: ListingPack,
    exported_at: Optional[str] = None,
) -> str:
    """Render the pack as sectioned plain text (TITLE, TAGS, ... LAUNCH CHECKLIST)."""
    lines: List[str] = [
        EXPORT_HEADING,
        f"Session: {session_id}",
        f"Generated: {exported_at or datetime.now(timezone.utc).isoformat()}",
        f"Shop: {listing.shop_name}",
        f"Product: {listing.product_type}",
        f"Score: {pack.score}",
        "",
        "TITLE",
        pack.title,
        "",
        "TAGS",
    ]
    _bullets(lines, pack.tags)

    lines += ["", "HIGHLIGHTS"]
    _bullets(lines, pack.highlights)

    lines += ["", "DESCRIPTION", pack.description, "", "FAQ"]
    for item in pack.faq:
        lines.append(f"Q: {item.question}")
        lines.append(f"A: {item.answer}")

    lines += ["", "PHOTO SHOT LIST"]
    _bullets(lines, pack.photo_shot_list)

    lines += ["", "LAUNCH CHECKLIST"]
    _bullets(lines, pack.launch_checklist)
    return "\n".join(lines)


def export_file_name(session_id: str, extension: str) -> str:
    return f"etsy-listing-{session_id[:8]}.{extension}"
