"""Template assembly for the text parts of a listing pack.

Every function here is a pure template fill over an already sanitized
:class:`ListingInput`. Locale spelling is applied afterwards by the
generator, never here.
"""

from __future__ import annotations

from typing import Dict, List

from src.config.models import MAX_TITLE_LENGTH, FaqItem, ListingInput, Tone

TITLE_SEPARATOR = " | "
DEFAULT_TITLE = "Etsy listing"
DEFAULT_SUPPORTING_SEGMENT = "Etsy Bestseller"

TONE_DESCRIPTORS: Dict[Tone, str] = {
    "playful": "written with energetic, friendly language and quick-read rhythm",
    "minimal": "kept clean, concise, and practical for fast scanning",
    "luxury": "framed with premium cues and elevated craftsmanship language",
    "warm": "balanced for warmth, clarity, and trust",
}

LAUNCH_CHECKLIST = (
    "Upload all 8 photos before publishing",
    "Keep first 40 title characters keyword-dense",
    "Place shipping timeline in description paragraph 1",
    "Pin one buyer FAQ in shop announcement",
    "Track clicks and favorites after 24 hours",
)


def to_title_case(value: str) -> str:
    """Upper-case the first character of each space-separated token.

    The rest of each token is left alone, so "iPhone case" -> "IPhone Case".
    """
    words = [word for word in value.split(" ") if word]
    return " ".join(word[0].upper() + word[1:] for word in words)


def tone_descriptor(tone: Tone) -> str:
    return TONE_DESCRIPTORS[tone]


# ---------------------------------------------------------------------------
# Title
# ---------------------------------------------------------------------------

def compact_title(parts: List[str], max_length: int = MAX_TITLE_LENGTH) -> str:
    """Join segments with ``" | "`` while the result fits in ``max_length``.

    Stops at the first segment that would overflow. When not even the first
    segment fits, that segment is returned verbatim.
    """
    filtered = [part.strip() for part in parts if part.strip()]

    title = ""
    for part in filtered:
        candidate = f"{title}{TITLE_SEPARATOR}{part}" if title else part
        if len(candidate) > max_length:
            break
        title = candidate

    if title:
        return title
    return filtered[0] if filtered else DEFAULT_TITLE


def title_segments(listing: ListingInput) -> List[str]:
    first_keyword = listing.supporting_keywords[0] if listing.supporting_keywords else ""
    return [
        to_title_case(listing.primary_keyword),
        to_title_case(listing.product_type),
        "Personalized" if listing.personalization else "Ready to Ship",
        f"Gift for {to_title_case(listing.target_audience)}",
        to_title_case(first_keyword or DEFAULT_SUPPORTING_SEGMENT),
    ]


def compose_title(listing: ListingInput) -> str:
    return compact_title(title_segments(listing))


# ---------------------------------------------------------------------------
# Body copy
# ---------------------------------------------------------------------------

def compose_description(listing: ListingInput) -> str:
    if listing.materials:
        materials_line = f"Materials include {', '.join(listing.materials[:5])}."
    else:
        materials_line = "Materials are selected for durability and consistent finish."

    if listing.personalization:
        framing = (
            "Personalization is highlighted in the first fold so buyers know exactly "
            "what can be customized before checkout."
        )
    else:
        framing = (
            "The listing emphasizes ready-to-ship speed to reduce hesitation and "
            "increase conversion from search traffic."
        )

    sentences = [
        f"{to_title_case(listing.primary_keyword)} from {listing.shop_name} is built for "
        f"{listing.target_audience} buyers searching Etsy for a fast yes/no purchase decision.",
        f"The copy is {tone_descriptor(listing.tone)}, with a {listing.price_band} price anchor "
        f"and {listing.processing_time_days}-day processing promise.",
        materials_line,
        framing,
        "Use the photo order and FAQ below as-is to keep listing production under 15 minutes.",
    ]
    return " ".join(sentences)


def compose_highlights(listing: ListingInput, tag_count: int) -> List[str]:
    return [
        f"{to_title_case(listing.primary_keyword)} headline tuned for Etsy search intent",
        f"{tag_count} tags included with <=20 character constraint respected",
        f"Tone set to {listing.tone} for consistent brand voice",
        f"{listing.processing_time_days}-day processing expectation placed above the fold",
        "Personalization CTA included in title and FAQ"
        if listing.personalization
        else "Fast dispatch angle included in title and FAQ",
    ]


def compose_faq(listing: ListingInput) -> List[FaqItem]:
    days = listing.processing_time_days
    plural = "" if days == 1 else "s"

    if listing.personalization:
        custom_question = "What personalization can I request?"
        custom_answer = (
            "Include names, dates, or short text in the personalization field. "
            "A preview can be requested before production."
        )
    else:
        custom_question = "Can I request a custom variation?"
        custom_answer = (
            "Yes. Message the shop before checkout with size, color, or packaging "
            "requests and we will confirm availability."
        )

    return [
        FaqItem(
            question="How quickly can this order ship?",
            answer=(
                f"Standard processing is {days} day{plural}. "
                "Rush requests can be discussed in messages before purchase."
            ),
        ),
        FaqItem(question=custom_question, answer=custom_answer),
        FaqItem(
            question="What should I include in my first product photo?",
            answer=(
                f"Lead with a clean hero shot of the {listing.product_type}, then show scale, "
                f"materials, and one lifestyle image for {listing.target_audience}."
            ),
        ),
    ]


def compose_photo_shot_list(listing: ListingInput) -> List[str]:
    if listing.materials:
        materials_shot = f"Materials flat lay: {', '.join(listing.materials[:4])}"
    else:
        materials_shot = "Materials and components flat lay"

    return [
        f"{to_title_case(listing.product_type)} on plain background (hero image)",
        "Close-up detail of texture and finish",
        "Personalized sample with realistic name/date"
        if listing.personalization
        else "Ready-to-ship packaging and dispatch view",
        "Scale reference in hand or beside common object",
        f"{to_title_case(listing.target_audience)} lifestyle context shot",
        materials_shot,
        "Color or variation comparison grid",
        "Gift-ready final presentation",
    ]


def compose_launch_checklist() -> List[str]:
    return list(LAUNCH_CHECKLIST)
