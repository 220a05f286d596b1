"""Tests for src.listing.sanitizer -- brief normalization and validation."""

import pytest

from src.listing.errors import ListingValidationError
from src.listing.sanitizer import (
    build_fallback_keywords,
    normalize_keyword,
    parse_keyword_csv,
    parse_materials_csv,
    sanitize_listing_input,
)


def _code(excinfo) -> str:
    return excinfo.value.code


# ===================================================================
# normalize_keyword
# ===================================================================

class TestNormalizeKeyword:
    def test_lowercases_and_collapses(self):
        assert normalize_keyword("  Wedding   Gift ") == "wedding gift"

    def test_keeps_ampersand_and_hyphen(self):
        assert normalize_keyword("Mr & Mrs Ring-Dish") == "mr & mrs ring-dish"

    def test_strips_punctuation(self):
        assert normalize_keyword("gift!!! (for her)") == "gift for her"

    def test_only_punctuation_is_empty(self):
        assert normalize_keyword("!!!") == ""

    def test_strips_non_ascii_letters(self):
        assert normalize_keyword("\u017ftuff \u0131nk") == "tuff nk"
        assert normalize_keyword("Caf\u00e9 D\u00e9cor") == "caf dcor"


# ===================================================================
# sanitize_listing_input
# ===================================================================

class TestSanitizePhrases:
    def test_valid_brief(self, ring_dish_input):
        assert ring_dish_input.shop_name == "Copper Pine Studio"
        assert ring_dish_input.primary_keyword == "personalized ring dish"
        assert ring_dish_input.tone == "warm"

    def test_collapses_whitespace(self, make_raw):
        listing = sanitize_listing_input(make_raw(shop_name="  Copper   Pine \n Studio "))
        assert listing.shop_name == "Copper Pine Studio"

    def test_lowercases_product_and_audience(self, make_raw):
        listing = sanitize_listing_input(make_raw(product_type="Ring Dish", target_audience="Bridal Party"))
        assert listing.product_type == "ring dish"
        assert listing.target_audience == "bridal party"

    def test_primary_keyword_normalized(self, make_raw):
        listing = sanitize_listing_input(make_raw(primary_keyword="Personalized Ring-Dish!!"))
        assert listing.primary_keyword == "personalized ring-dish"

    def test_primary_keyword_only_punctuation(self, make_raw):
        with pytest.raises(ListingValidationError) as excinfo:
            sanitize_listing_input(make_raw(primary_keyword="!!!"))
        assert _code(excinfo) == "invalid_primaryKeyword"

    def test_empty_shop_name(self, make_raw):
        with pytest.raises(ListingValidationError) as excinfo:
            sanitize_listing_input(make_raw(shop_name="   "))
        assert _code(excinfo) == "invalid_shopName"

    def test_overlong_phrase(self, make_raw):
        with pytest.raises(ListingValidationError) as excinfo:
            sanitize_listing_input(make_raw(price_band="$" * 81))
        assert _code(excinfo) == "invalid_priceBand"

    def test_eighty_chars_allowed(self, make_raw):
        listing = sanitize_listing_input(make_raw(shop_name="s" * 80))
        assert len(listing.shop_name) == 80

    def test_wrong_type_uses_field_code(self, make_raw):
        with pytest.raises(ListingValidationError) as excinfo:
            sanitize_listing_input(make_raw(target_audience=42))
        assert _code(excinfo) == "invalid_targetAudience"

    def test_missing_field_uses_field_code(self, ring_dish_raw):
        del ring_dish_raw["shop_name"]
        with pytest.raises(ListingValidationError) as excinfo:
            sanitize_listing_input(ring_dish_raw)
        assert _code(excinfo) == "invalid_shopName"


class TestSanitizeLists:
    def test_dedupes_by_normalized_form(self, make_raw):
        listing = sanitize_listing_input(make_raw(
            supporting_keywords=["Engagement Gift", "engagement   gift", "", "ceramic tray"],
        ))
        assert listing.supporting_keywords == ["engagement gift", "ceramic tray"]

    def test_empty_supporting_keywords_rejected(self, make_raw):
        with pytest.raises(ListingValidationError) as excinfo:
            sanitize_listing_input(make_raw(supporting_keywords=[]))
        assert _code(excinfo) == "invalid_supportingKeywords"

    def test_keywords_empty_after_normalization_rejected(self, make_raw):
        with pytest.raises(ListingValidationError) as excinfo:
            sanitize_listing_input(make_raw(supporting_keywords=["!!!", "  "]))
        assert _code(excinfo) == "invalid_supportingKeywords"

    def test_keywords_not_a_list(self, make_raw):
        with pytest.raises(ListingValidationError) as excinfo:
            sanitize_listing_input(make_raw(supporting_keywords="wedding gift"))
        assert _code(excinfo) == "invalid_supportingKeywords"

    def test_keywords_non_string_item(self, make_raw):
        with pytest.raises(ListingValidationError) as excinfo:
            sanitize_listing_input(make_raw(supporting_keywords=["gift", 7]))
        assert _code(excinfo) == "invalid_supportingKeywords"

    def test_keywords_capped_at_sixteen(self, make_raw):
        keywords = [f"keyword {i}" for i in range(20)]
        listing = sanitize_listing_input(make_raw(supporting_keywords=keywords))
        assert listing.supporting_keywords == keywords[:16]

    def test_materials_capped_at_twelve(self, make_raw):
        materials = [f"material {i}" for i in range(15)]
        listing = sanitize_listing_input(make_raw(materials=materials))
        assert len(listing.materials) == 12

    def test_materials_may_be_empty(self, make_raw):
        listing = sanitize_listing_input(make_raw(materials=[]))
        assert listing.materials == []

    def test_materials_not_a_list(self, make_raw):
        with pytest.raises(ListingValidationError) as excinfo:
            sanitize_listing_input(make_raw(materials="ceramic"))
        assert _code(excinfo) == "invalid_materials"


class TestSanitizeScalars:
    @pytest.mark.parametrize("days", [1, 45])
    def test_days_bounds_accepted(self, make_raw, days):
        assert sanitize_listing_input(make_raw(processing_time_days=days)).processing_time_days == days

    @pytest.mark.parametrize("days", [0, 46, -3, 3.5, "3", True, None])
    def test_days_rejected(self, make_raw, days):
        with pytest.raises(ListingValidationError) as excinfo:
            sanitize_listing_input(make_raw(processing_time_days=days))
        assert _code(excinfo) == "invalid_processingTimeDays"

    def test_tone_case_insensitive(self, make_raw):
        assert sanitize_listing_input(make_raw(tone=" LUXURY ")).tone == "luxury"

    @pytest.mark.parametrize("tone", ["bold", "", None, 3])
    def test_tone_rejected(self, make_raw, tone):
        with pytest.raises(ListingValidationError) as excinfo:
            sanitize_listing_input(make_raw(tone=tone))
        assert _code(excinfo) == "invalid_tone"

    def test_flags_require_true(self, make_raw):
        listing = sanitize_listing_input(make_raw(personalization="true", include_uk_spelling=1))
        assert listing.personalization is False
        assert listing.include_uk_spelling is False


# ===================================================================
# CSV variants
# ===================================================================

class TestParseKeywordCsv:
    def test_splits_by_comma_and_newline(self):
        keywords = parse_keyword_csv("wedding gift, bridesmaid gift\nhandmade box")
        assert keywords[:3] == ["wedding gift", "bridesmaid gift", "handmade box"]

    def test_dedupes(self):
        assert parse_keyword_csv("Mug, mug,  MUG , cup") == ["mug", "cup"]

    def test_only_separators_rejected(self):
        with pytest.raises(ListingValidationError) as excinfo:
            parse_keyword_csv(",, \n ,")
        assert _code(excinfo) == "invalid_keywordsCsv"

    def test_non_string_rejected(self):
        with pytest.raises(ListingValidationError) as excinfo:
            parse_keyword_csv(None)
        assert _code(excinfo) == "invalid_keywordsCsv"

    def test_capped_at_sixteen(self):
        text = ",".join(f"kw {i}" for i in range(30))
        assert len(parse_keyword_csv(text)) == 16


class TestParseMaterialsCsv:
    def test_parses(self):
        assert parse_materials_csv("Ceramic, glaze\nGold Paint") == ["ceramic", "glaze", "gold paint"]

    def test_empty_allowed(self):
        assert parse_materials_csv(" , ") == []

    def test_non_string_rejected(self):
        with pytest.raises(ListingValidationError) as excinfo:
            parse_materials_csv(["ceramic"])
        assert _code(excinfo) == "invalid_materialsCsv"


class TestBuildFallbackKeywords:
    def test_combinations(self):
        assert build_fallback_keywords("ceramic mug", "ceramic mug", "book lovers") == [
            "ceramic mug",
            "ceramic mug gift",
            "book lovers gift",
            "ceramic mug etsy",
            "handmade gift",
        ]

    def test_disallowed_characters_become_spaces(self):
        result = build_fallback_keywords("Mug/Cup", "mug", "Mom")
        assert result[0] == "mug cup"

    def test_non_ascii_letters_become_spaces(self):
        assert build_fallback_keywords("\u017fmug", "mug", "mom")[0] == "mug"

    def test_empty_seeds(self):
        assert build_fallback_keywords("", "", "") == ["gift", "etsy", "handmade gift"]

    def test_capped_at_eight(self):
        assert len(build_fallback_keywords("a", "b", "c")) <= 8
