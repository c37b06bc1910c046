"""
Tests for signal extraction

Covers keyword matching, color precedence, product-name selection and
section gating, including the intentionally lax substring matching.
"""
import pytest
from pydantic import ValidationError

from landing_synth.core.extractor import extract, extract_product_name
from landing_synth.core.signals import (
    FALLBACK_PRODUCT_NAME,
    ColorScheme,
    SectionFlags,
    SignalBundle,
    ToneFlags,
)


class TestTotality:
    """extract never fails and falls back to defaults"""

    @pytest.mark.parametrize("text", ["", "   ", "\n\t", "1234 5678", "<<>>&&\"'", "🚀🚀🚀 ✓"])
    def test_degenerate_input_gives_valid_bundle(self, text):
        bundle = extract(text)
        assert isinstance(bundle, SignalBundle)
        assert bundle.product_name

    def test_empty_input_uses_all_defaults(self):
        bundle = extract("")
        assert bundle.tone == ToneFlags()
        assert bundle.color_scheme is ColorScheme.DEFAULT
        assert bundle.product_name == FALLBACK_PRODUCT_NAME
        assert bundle.sections == SectionFlags(has_cta=True)

    def test_none_is_treated_as_empty(self):
        assert extract(None) == extract("")

    def test_deterministic(self):
        text = "A dark SaaS page for Nimbus with pricing and reviews"
        assert extract(text) == extract(text)

    def test_bundle_is_frozen(self):
        bundle = extract("anything")
        with pytest.raises(ValidationError):
            bundle.product_name = "Other"


class TestToneFlags:
    """Each tone flag is evaluated independently"""

    @pytest.mark.parametrize("text,flag", [
        ("a dark theme", "is_dark"),
        ("all BLACK everything", "is_dark"),
        ("minimal look", "is_minimal"),
        ("clean layout", "is_minimal"),
        ("a SaaS tool", "is_saas"),
        ("our software", "is_saas"),
        ("a product launch", "is_product"),
        ("mobile app", "is_product"),
        ("creative agency", "is_agency"),
        ("cleaning service", "is_agency"),
    ])
    def test_keyword_sets_flag(self, text, flag):
        assert getattr(extract(text).tone, flag) is True

    def test_multiple_flags_can_be_set(self):
        tone = extract("dark minimal saas product agency").tone
        assert tone == ToneFlags(
            is_dark=True, is_minimal=True, is_saas=True, is_product=True, is_agency=True
        )

    def test_substring_matching_is_lax(self):
        """'application' contains 'app'; 'happy' does too"""
        assert extract("an application").tone.is_product is True
        assert extract("happy customers").tone.is_product is True


class TestColorScheme:
    """Dark first, then named colors in fixed order, else default"""

    def test_dark_beats_blue(self):
        assert extract("a dark blue page").color_scheme is ColorScheme.DARK

    def test_black_selects_dark(self):
        assert extract("black and green").color_scheme is ColorScheme.DARK

    @pytest.mark.parametrize("text,scheme", [
        ("blue", ColorScheme.BLUE),
        ("green", ColorScheme.GREEN),
        ("purple", ColorScheme.PURPLE),
        ("red", ColorScheme.RED),
        ("orange", ColorScheme.DEFAULT),
    ])
    def test_named_colors(self, text, scheme):
        assert extract(f"use a {text} palette").color_scheme is scheme

    def test_named_color_order_not_position(self):
        """blue is checked before red regardless of where each appears"""
        assert extract("red accents on a blue base").color_scheme is ColorScheme.BLUE
        assert extract("purple and green").color_scheme is ColorScheme.GREEN

    def test_red_substring_false_positive_is_kept(self):
        assert extract("a page for our credit union").color_scheme is ColorScheme.RED

    def test_palette_values(self):
        assert extract("").palette == ("#4F46E5", "#3B82F6", "#FFFFFF", "#1F2937")
        assert extract("dark").palette == ("#6366F1", "#8B5CF6", "#111827", "#F9FAFB")
        assert extract("green").palette.primary == "#10B981"


class TestProductName:
    """Product-name extraction from original casing"""

    def test_introducing_acme(self):
        assert extract("Introducing Acme today").product_name == "Acme"

    def test_lowercase_falls_back(self):
        assert extract("just lowercase words").product_name == FALLBACK_PRODUCT_NAME

    def test_first_word_used_when_only_candidate(self):
        assert extract_product_name("Acme for small teams") == "Acme"

    def test_short_tokens_ignored(self):
        assert extract_product_name("a page for IBM and Zed") == FALLBACK_PRODUCT_NAME

    def test_first_qualifying_token_wins(self):
        assert extract_product_name("a page for Nimbus and Stratus") == "Nimbus"

    def test_trailing_punctuation_stripped(self):
        assert extract_product_name("build a site for Nimbus.") == "Nimbus"

    def test_leading_name_wins_over_later_capitals(self):
        """The first qualifying token wins, even when another capitalized word follows"""
        assert extract("Acme Rockets landing page").product_name == "Acme"
        assert extract("TaskFlow SaaS landing page with pricing").product_name == "TaskFlow"

    @pytest.mark.parametrize("text", [
        "Create a landing page for Zenith",
        "Build Zenith a landing page",
        "MAKE a page. Design it for Zenith",
    ])
    def test_lead_in_words_are_skipped(self, text):
        assert extract_product_name(text) == "Zenith"

    def test_only_lead_in_words_falls_back(self):
        assert extract_product_name("Create something clean") == FALLBACK_PRODUCT_NAME

    def test_punctuation_does_not_count_towards_length(self):
        """Trailing punctuation does not count towards the four-letter minimum"""
        assert extract_product_name("Wow! a page for Nimbus") == "Nimbus"
        assert extract_product_name("Hey!! make it pop") == FALLBACK_PRODUCT_NAME
        assert extract_product_name("built by Acme, for teams") == "Acme"

    def test_original_casing_preserved(self):
        assert extract_product_name("landing page for TaskFlow") == "TaskFlow"

    def test_uppercase_keyword_can_become_the_name(self):
        bundle = extract("A DARK page for Orbit")
        assert bundle.tone.is_dark is True
        assert bundle.product_name == "DARK"


class TestSectionFlags:
    """Section gating"""

    def test_minimal_page_with_pricing(self):
        sections = extract("A minimal landing page with pricing").sections
        assert sections.has_pricing is True
        assert sections.has_testimonials is False
        assert sections.has_features is False
        assert sections.has_cta is True

    def test_features_implied_by_saas_or_product(self):
        assert extract("software").sections.has_features is True
        assert extract("product").sections.has_features is True
        assert extract("list the features").sections.has_features is True

    def test_price_and_review_variants(self):
        sections = extract("show the price and a review").sections
        assert sections.has_pricing is True
        assert sections.has_testimonials is True

    def test_cta_always_on(self):
        assert extract("").sections.has_cta is True
