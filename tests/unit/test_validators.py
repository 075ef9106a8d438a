"""
Unit tests for the content validators.

Covers:
- Title length, brand and title-case rules
- Meta description length, keywords, action words and stuffing
- Structured data (JSON-LD) required and recommended fields
- Head meta tags of rendered pages
"""
import pytest

from contentaudit.services.audit_config import AuditConfig
from contentaudit.services.validators import (
    find_repeated_words,
    is_title_case,
    validate_description,
    validate_meta_tags,
    validate_structured_data,
    validate_title,
)
from tests.fixtures.sample_pages import (
    GOOD_DESCRIPTION,
    GOOD_STRUCTURED_DATA,
    GOOD_TITLE,
    HOMEPAGE_TITLE,
    INVALID_JSON_LD_PAGE_HTML,
    PERFECT_PAGE_HTML,
    POOR_PAGE_HTML,
    SOFTWARE_APPLICATION_DATA,
)


class TestTitleValidation:
    """Test title length, brand and case rules."""

    def test_good_title(self, audit_config):
        result = validate_title(GOOD_TITLE, audit_config)

        assert result.score == 100
        assert result.is_valid is True
        assert result.warnings == []

    def test_long_homepage_title_is_only_a_warning(self, audit_config):
        result = validate_title(HOMEPAGE_TITLE, audit_config)

        assert result.errors == []
        assert result.is_valid is True
        assert any("too long" in w for w in result.warnings)
        # "with" breaks title case
        assert result.score == 80

    def test_short_title_is_an_error(self, audit_config):
        result = validate_title("Hi", audit_config)

        assert result.is_valid is False
        assert len(result.errors) == 1
        assert "too short" in result.errors[0]
        assert result.score == 60

    def test_min_length_boundary(self, audit_config):
        assert validate_title("Mifty Framework " + "X" * 14, audit_config).errors == []
        assert validate_title("Mifty Framework " + "X" * 13, audit_config).is_valid is False

    @pytest.mark.parametrize("extra,expected_score,fragment", [
        (42, 95, "approaching maximum"),
        (44, 95, "approaching maximum"),
        (45, 85, "too long"),
    ])
    def test_length_rules_are_exclusive(self, audit_config, extra, expected_score, fragment):
        result = validate_title("Mifty Framework " + "X" * extra, audit_config)

        assert result.score == expected_score
        assert len(result.warnings) == 1
        assert fragment in result.warnings[0]

    def test_missing_brand(self, audit_config):
        result = validate_title("Getting Started With The Node Framework", audit_config)

        assert result.score == 90
        assert any('"Mifty"' in w for w in result.warnings)

    def test_brand_from_config(self):
        config = AuditConfig(brand_token="Acme")

        result = validate_title("Getting Started With Acme Framework", config)

        assert result.score == 100

    def test_title_case_warning(self, audit_config):
        result = validate_title("Mifty framework for building apps quickly", audit_config)

        assert result.warnings == ["Consider using title case for better readability."]
        assert result.score == 95

    def test_idempotent(self, audit_config):
        assert validate_title(HOMEPAGE_TITLE, audit_config) == validate_title(HOMEPAGE_TITLE, audit_config)

    def test_none_title_is_treated_as_empty(self, audit_config):
        result = validate_title(None, audit_config)

        assert result.is_valid is False
        assert 0 <= result.score <= 100


class TestTitleCase:

    @pytest.mark.parametrize("title,expected", [
        ("Mifty Framework - Node.js Guide", True),
        ("Getting Started With Mifty", True),
        ("Mifty framework", False),
        ("Mifty 2024 Guide", False),
        ("", False),
        ("- -", False),
    ])
    def test_is_title_case(self, title, expected):
        assert is_title_case(title) is expected


class TestDescriptionValidation:
    """Test meta description rules."""

    def test_good_description(self, audit_config):
        result = validate_description(GOOD_DESCRIPTION, audit_config)

        assert result.score == 100
        assert result.warnings == []
        assert result.errors == []

    def test_empty_description_only_warns(self, audit_config):
        result = validate_description("", audit_config)

        assert result.errors == []
        assert result.is_valid is True
        assert len(result.warnings) == 3
        assert result.score == 55

    def test_too_long_is_an_error(self, audit_config):
        result = validate_description("a" * 161, audit_config)

        assert result.is_valid is False
        assert "too long" in result.errors[0]
        assert result.score == 50

    def test_could_be_longer(self, audit_config):
        description = "Learn Mifty framework " + "x" * 108

        result = validate_description(description, audit_config)

        assert len(description) == 130
        assert result.warnings == [
            "Description could be longer (130 chars). Optimal range: 140-160 characters."
        ]
        assert result.score == 95

    def test_single_primary_keyword(self, audit_config):
        result = validate_description("Learn Mifty " + "x" * 130, audit_config)

        assert result.warnings == ["Consider including more primary keywords in the description."]
        assert result.score == 95

    def test_missing_action_word(self, audit_config):
        result = validate_description("Mifty framework " + "x" * 130, audit_config)

        assert len(result.warnings) == 1
        assert "action-oriented" in result.warnings[0]
        assert result.score == 90

    def test_keyword_stuffing(self, audit_config):
        result = validate_description("build build build mifty framework", audit_config)

        assert "Potential keyword stuffing detected. Repeated words: build" in result.warnings
        assert result.score == 70

    def test_stuffing_lists_all_words_once(self, audit_config):
        result = validate_description("docs docs docs mifty mifty mifty framework", audit_config)

        stuffing = [w for w in result.warnings if "stuffing" in w]
        assert stuffing == ["Potential keyword stuffing detected. Repeated words: docs, mifty"]
        assert result.score == 60

    def test_short_words_are_not_stuffing(self):
        assert find_repeated_words("the the the the mifty framework build") == []

    def test_stuffing_is_case_insensitive(self):
        assert find_repeated_words("Build build BUILD") == ["build"]

    def test_keywords_from_config(self):
        config = AuditConfig(primary_keywords=("acme", "widgets"))

        result = validate_description(GOOD_DESCRIPTION, config)

        assert any("at least one primary keyword (acme, widgets)" in w for w in result.warnings)


class TestStructuredDataValidation:
    """Test JSON-LD schema checks."""

    def test_empty_schema(self, audit_config):
        result = validate_structured_data({}, audit_config)

        assert len(result.errors) == 2
        assert "@context" in result.errors[0]
        assert "@type" in result.errors[1]
        assert result.score == 40

    def test_valid_schema(self, audit_config):
        result = validate_structured_data(GOOD_STRUCTURED_DATA, audit_config)

        assert result.score == 100
        assert result.is_valid is True

    def test_non_canonical_context(self, audit_config):
        schema = dict(GOOD_STRUCTURED_DATA, **{"@context": "http://schema.org"})

        result = validate_structured_data(schema, audit_config)

        assert result.is_valid is True
        assert len(result.warnings) == 1
        assert result.score == 95

    def test_complete_software_application(self, audit_config):
        result = validate_structured_data(SOFTWARE_APPLICATION_DATA, audit_config)

        assert result.score == 100
        assert result.warnings == []

    def test_minimal_software_application(self, audit_config):
        schema = {"@context": "https://schema.org", "@type": "SoftwareApplication"}

        result = validate_structured_data(schema, audit_config)

        assert len(result.errors) == 3
        assert len(result.warnings) == 4
        assert result.score == 35
        assert result.is_valid is False

    def test_empty_values(self, audit_config):
        schema = dict(GOOD_STRUCTURED_DATA, name="", url=None)

        result = validate_structured_data(schema, audit_config)

        # Warnings follow the schema's key order; "url" precedes the added "name"
        assert result.warnings == [
            'Empty value for property "url".',
            'Empty value for property "name".',
        ]
        assert result.score == 90

    def test_score_clamped_at_zero(self, audit_config):
        schema = {
            "@type": "SoftwareApplication",
            "name": "",
            "description": None,
            "applicationCategory": "",
        }

        result = validate_structured_data(schema, audit_config)

        assert result.score == 0
        assert len(result.errors) == 4


class TestMetaTagValidation:
    """Test head meta tags of rendered pages."""

    def test_complete_page(self):
        result = validate_meta_tags(PERFECT_PAGE_HTML)

        assert result.score == 100
        assert result.is_valid is True
        assert result.warnings == []

    def test_bare_page(self):
        result = validate_meta_tags(POOR_PAGE_HTML)

        assert result.errors == [
            "Missing Meta description.",
            "Missing Meta keywords.",
            "Missing Canonical URL.",
        ]
        assert len(result.warnings) == 10
        assert result.score == 0

    def test_invalid_json_ld(self):
        result = validate_meta_tags(INVALID_JSON_LD_PAGE_HTML)

        assert result.errors == ["Invalid JSON-LD structured data."]
        assert result.score == 85

    def test_empty_canonical(self):
        html = PERFECT_PAGE_HTML.replace(
            '<link rel="canonical" href="https://mifty.dev/docs/getting-started">',
            '<link rel="canonical" href="">',
        )

        result = validate_meta_tags(html)

        assert result.errors == ["Empty Canonical URL."]
        assert result.score == 85

    def test_missing_open_graph_image(self):
        html = PERFECT_PAGE_HTML.replace("og:image", "og:picture")

        result = validate_meta_tags(html)

        assert result.warnings == ["Missing Open Graph tag: og:image."]
        assert result.score == 95

    def test_empty_document(self):
        result = validate_meta_tags("")

        assert result.is_valid is False
        assert result.score == 0
