"""
Listing Sprint Assistant - Data Models
======================================

Defines the Pydantic v2 models shared by the listing pipeline:

  Brief : ListingInput, Tone
  Pack  : ListingPack, FaqItem

Convention
----------
- Python attributes are snake_case; the JSON wire format is camelCase
  (``shopName``, ``supportingKeywords`` ...) through ``to_camel`` aliases.
  Dump with ``model_dump(by_alias=True)`` when talking to clients.
- Both models are frozen: a pack is produced once from a sanitized brief
  and never edited afterwards.
"""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


MAX_KEYWORDS = 16
MAX_MATERIALS = 12
MAX_TAGS = 13
MAX_TAG_LENGTH = 20
MAX_TITLE_LENGTH = 140

Tone = Literal["playful", "minimal", "luxury", "warm"]
TONES: tuple[str, ...] = ("playful", "minimal", "luxury", "warm")


_WIRE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
)


# ============================================================
# Brief
# ============================================================


class ListingInput(BaseModel):
    """A sanitized product brief.

    Instances are normally built by
    :func:`src.listing.sanitizer.sanitize_listing_input`, which guarantees
    the normalization rules (trimmed, whitespace-collapsed, lower-cased
    keywords, deduplicated lists).

    Attributes:
        shop_name:            Display name of the shop.
        product_type:         What is being sold (lower-cased).
        target_audience:      Who it is for (lower-cased).
        primary_keyword:      Main search phrase (keyword-normalized).
        supporting_keywords:  1-16 unique keyword phrases, first-seen order.
        materials:            0-12 unique material phrases.
        tone:                 Voice of the generated copy.
        price_band:           Free-text price anchor, e.g. ``$20-$45``.
        processing_time_days: Days before dispatch (1-45).
        personalization:      Whether the item can be personalized.
        include_uk_spelling:  Rewrite US spellings in the finished pack.
    """

    model_config = _WIRE_CONFIG

    shop_name: str = Field(..., min_length=1, max_length=80)
    product_type: str = Field(..., min_length=1, max_length=80)
    target_audience: str = Field(..., min_length=1, max_length=80)
    primary_keyword: str = Field(..., min_length=1, max_length=80)
    supporting_keywords: List[str] = Field(
        ..., min_length=1, max_length=MAX_KEYWORDS,
    )
    materials: List[str] = Field(default_factory=list, max_length=MAX_MATERIALS)
    tone: Tone = "warm"
    price_band: str = Field(..., min_length=1, max_length=80)
    processing_time_days: int = Field(default=3, ge=1, le=45)
    personalization: bool = True
    include_uk_spelling: bool = False


# ============================================================
# Pack
# ============================================================


class FaqItem(BaseModel):
    """One buyer question with its prepared answer."""

    model_config = _WIRE_CONFIG

    question: str
    answer: str


class ListingPack(BaseModel):
    """Everything a seller needs to publish one listing."""

    model_config = _WIRE_CONFIG

    generated_at: str
    score: int = Field(..., ge=0, le=100)
    title: str = Field(..., max_length=MAX_TITLE_LENGTH)
    tags: List[str] = Field(default_factory=list, max_length=MAX_TAGS)
    highlights: List[str] = Field(default_factory=list)
    description: str = ""
    faq: List[FaqItem] = Field(default_factory=list)
    photo_shot_list: List[str] = Field(default_factory=list)
    launch_checklist: List[str] = Field(default_factory=list)

    # -- validators ----------------------------------------------------------

    @field_validator("tags")
    @classmethod
    def _check_tags(cls, v: List[str]) -> List[str]:
        if len(set(v)) != len(v):
            raise ValueError("Tags must be unique.")
        for tag in v:
            if len(tag) > MAX_TAG_LENGTH:
                raise ValueError(f"Tag longer than {MAX_TAG_LENGTH} chars: {tag!r}")
        return v
