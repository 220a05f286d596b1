"""Tests for src.listing.generator -- end-to-end pack assembly."""

from datetime import datetime

from src.listing import build_listing_pack


class TestBuildListingPack:
    def test_ring_dish_walkthrough(self, ring_dish_input):
        pack = build_listing_pack(ring_dish_input)
        assert pack.title == (
            "Personalized Ring Dish | Ring Dish | Personalized | "
            "Gift for Bridal Party | Engagement Gift"
        )
        assert len(pack.tags) == 13
        assert pack.tags[0] == "engagement gift"
        assert pack.tags[-1] == "ring"
        assert pack.score == 88
        assert len(pack.highlights) == 5
        assert len(pack.faq) == 3
        assert len(pack.photo_shot_list) == 8
        assert len(pack.launch_checklist) == 5

    def test_generated_at_is_iso_utc(self, ring_dish_input):
        stamp = datetime.fromisoformat(build_listing_pack(ring_dish_input).generated_at)
        assert stamp.utcoffset().total_seconds() == 0

    def test_deterministic_apart_from_timestamp(self, ring_dish_input):
        first = build_listing_pack(ring_dish_input).model_dump(exclude={"generated_at"})
        second = build_listing_pack(ring_dish_input).model_dump(exclude={"generated_at"})
        assert first == second

    def test_highlight_reports_tag_count(self, ring_dish_input):
        pack = build_listing_pack(ring_dish_input)
        assert pack.highlights[1].startswith(f"{len(pack.tags)} tags included")


class TestUkSpelling:
    def test_off_by_default(self, ring_dish_input):
        pack = build_listing_pack(ring_dish_input)
        assert "Color or variation comparison grid" in pack.photo_shot_list
        assert pack.launch_checklist[-1] == "Track clicks and favorites after 24 hours"

    def test_applied_to_copy(self, make_input):
        pack = build_listing_pack(make_input(include_uk_spelling=True))
        assert "colour or variation comparison grid" in pack.photo_shot_list
        assert pack.launch_checklist[-1] == "Track clicks and favourites after 24 hours"
        assert pack.highlights[-1] == "personalisation CTA included in title and FAQ"
        assert "personalisation is highlighted" in pack.description
        assert "personalisation field" in pack.faq[1].answer

    def test_faq_questions_untouched(self, make_input):
        pack = build_listing_pack(make_input(include_uk_spelling=True))
        assert pack.faq[1].question == "What personalization can I request?"

    def test_title_localized(self, make_input):
        listing = make_input(
            primary_keyword="color block ring dish",
            include_uk_spelling=True,
        )
        assert build_listing_pack(listing).title.startswith("colour Block Ring Dish")

    def test_title_stays_within_limit(self, make_input):
        listing = make_input(
            primary_keyword=" ".join(["color"] * 13),
            product_type="c" * 60,
            include_uk_spelling=True,
        )
        assert len(build_listing_pack(listing).title) <= 140

    def test_tags_untouched(self, make_input):
        listing = make_input(primary_keyword="color dish", include_uk_spelling=True)
        pack = build_listing_pack(listing)
        assert "color dish" in pack.tags
