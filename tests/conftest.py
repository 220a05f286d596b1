"""Shared fixtures for the listing pipeline test suite.

Provides raw briefs (snake_case, as the sanitizer takes them), camelCase
client briefs (as the API and CLI take them) and sanitized inputs.
"""

import pytest

from src.listing.sanitizer import sanitize_listing_input


# ---------------------------------------------------------------------------
# Raw briefs
# ---------------------------------------------------------------------------

def _ring_dish_raw(**overrides):
    raw = {
        "shop_name": "Copper Pine Studio",
        "product_type": "ring dish",
        "target_audience": "bridal party",
        "primary_keyword": "personalized ring dish",
        "supporting_keywords": ["engagement gift", "bridal shower gift", "ceramic tray"],
        "materials": ["ceramic", "glaze", "gold paint"],
        "tone": "warm",
        "price_band": "$20-$35",
        "processing_time_days": 3,
        "personalization": True,
        "include_uk_spelling": False,
    }
    raw.update(overrides)
    return raw


@pytest.fixture
def ring_dish_raw():
    """The ring-dish brief from the product walkthrough."""
    return _ring_dish_raw()


@pytest.fixture
def make_raw():
    """Factory: ring-dish brief with field overrides."""
    return _ring_dish_raw


@pytest.fixture
def ring_dish_input(ring_dish_raw):
    return sanitize_listing_input(ring_dish_raw)


@pytest.fixture
def make_input():
    """Factory: sanitized ring-dish brief with field overrides."""
    def _make(**overrides):
        return sanitize_listing_input(_ring_dish_raw(**overrides))
    return _make


@pytest.fixture
def mug_brief():
    """A camelCase client brief using the CSV list variants."""
    return {
        "shopName": "Self Test Studio",
        "productType": "ceramic mug",
        "targetAudience": "book lovers",
        "primaryKeyword": "book lover mug",
        "supportingKeywordsCsv": "gift for reader, cozy mug, literary gift",
        "materialsCsv": "ceramic, glaze",
        "tone": "warm",
        "priceBand": "$18-$30",
        "processingTimeDays": 3,
        "personalization": True,
        "includeUkSpelling": False,
    }
