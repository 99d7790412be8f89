"""Tests for automatic SEO generation and advisory suggestions."""

import pytest

from event_seo.config import DEFAULT_CONFIG, EngineConfig
from event_seo.generator import (
    generate_auto_seo,
    generate_seo_description,
    generate_seo_keywords,
    generate_seo_suggestions,
    generate_seo_title,
)
from event_seo.models import (
    ContentType,
    RawContentContext,
    SEOContent,
    SuggestionPriority,
    SuggestionType,
)

EVENT_CTA = " Book now for an unforgettable experience with Gema Events in UAE."
ARTICLE_CTA = " Discover expert tips and guides for family activities with Gema Events."


def _event(title="Art Camp", description="", **kwargs) -> RawContentContext:
    return RawContentContext(title=title, description=description, content_type=ContentType.EVENT, **kwargs)


def _article(title="Tips", description="", **kwargs) -> RawContentContext:
    return RawContentContext(title=title, description=description, content_type=ContentType.ARTICLE, **kwargs)


class TestGenerateTitle:
    """Tests for SEO title generation."""

    def test_event_title_suffix(self, event_context):
        """Test event titles get category, location and brand."""
        assert generate_seo_title(event_context) == "Art Camp | Kids Workshops in Dubai | Gema Events"

    def test_event_title_defaults(self):
        """Test missing category and location fall back to defaults."""
        assert generate_seo_title(_event("Zoo")) == "Zoo | Kids Activities in UAE | Gema Events"

    def test_article_title_suffix(self):
        """Test article titles get the guide suffix."""
        assert generate_seo_title(_article("Tips")) == "Tips | Kids Activities Guide | Gema Events"

    def test_branded_title_unchanged(self):
        """Test titles already mentioning the brand are kept."""
        title = "GEMA Summer Festival"
        assert generate_seo_title(_event(title)) == title

    def test_long_title_falls_back_to_brand_only(self, make_text):
        """Test suffix is replaced by the brand alone when too long."""
        title = make_text(40)
        assert generate_seo_title(_event(title)) == f"{title} | Gema Events"

    def test_very_long_title_is_truncated(self, make_text):
        """Test titles too long even for the brand suffix are truncated."""
        result = generate_seo_title(_event(make_text(80)))
        assert len(result) == DEFAULT_CONFIG.title_limits.max
        assert result.endswith("...")

    def test_long_branded_title_is_truncated(self, make_text):
        """Test branded titles over the maximum are truncated too."""
        result = generate_seo_title(_event("Gema " + make_text(70)))
        assert len(result) <= DEFAULT_CONFIG.title_limits.max

    def test_custom_brand(self):
        """Test brand comes from the config."""
        config = EngineConfig.with_brand("Funzone")
        assert generate_seo_title(_article("Tips"), config) == "Tips | Kids Activities Guide | Funzone"


class TestGenerateDescription:
    """Tests for meta description generation."""

    def test_short_event_description_gets_cta(self):
        """Test short descriptions get the event call-to-action."""
        assert generate_seo_description(_event(description="Fun day.")) == "Fun day." + EVENT_CTA

    def test_event_cta_uses_location(self):
        """Test the event call-to-action names the location."""
        result = generate_seo_description(_event(description="Fun day.", location="Abu Dhabi"))
        assert result.endswith("with Gema Events in Abu Dhabi.")

    def test_short_article_description_gets_cta(self):
        """Test short descriptions get the article call-to-action."""
        assert generate_seo_description(_article(description="Games.")) == "Games." + ARTICLE_CTA

    def test_cta_only_added_when_it_fits(self, make_text):
        """Test no partial suffix is added when the full suffix does not fit."""
        description = make_text(100)
        assert len(description) + len(EVENT_CTA) > 160
        assert generate_seo_description(_event(description=description)) == description

    def test_long_description_truncated(self, make_text):
        """Test long descriptions are cut to max - 3 plus an ellipsis."""
        description = make_text(250)
        result = generate_seo_description(_event(description=description))
        assert result == description[:157] + "..."
        assert len(result) == 160

    def test_in_range_description_unchanged(self, make_text):
        """Test descriptions within limits are kept."""
        description = make_text(140)
        assert generate_seo_description(_event(description=description)) == description


class TestGenerateKeywords:
    """Tests for keyword list generation."""

    def test_event_keywords(self, event_context):
        """Test event keywords: base terms, location, category, three tags."""
        assert generate_seo_keywords(event_context) == [
            "kids activities", "events", "family fun",
            "Dubai", "Workshops",
            "painting", "crafts", "summer",
        ]

    def test_article_keywords_default_location(self, article_context):
        """Test article keywords use the default locale when no location."""
        assert generate_seo_keywords(article_context) == [
            "kids activities", "parenting tips", "family guide", "UAE", "indoor games",
        ]

    def test_empty_values_dropped(self):
        """Test blank category and tags are dropped."""
        context = _event(category="", tags=["", "  ", "music"])
        assert generate_seo_keywords(context) == [
            "kids activities", "events", "family fun", "UAE", "music",
        ]

    def test_duplicates_dropped(self):
        """Test tags repeating base keywords are dropped."""
        context = _event(tags=["Events", "Family Fun", "music"])
        assert generate_seo_keywords(context) == [
            "kids activities", "events", "family fun", "UAE", "music",
        ]


class TestGenerateAutoSeo:
    """Tests for full payload generation."""

    def test_generates_all_fields(self, event_context):
        """Test a complete payload is produced."""
        generated = generate_auto_seo(event_context)
        assert generated.title.endswith("| Gema Events")
        assert generated.description.endswith("Dubai.")
        assert len(generated.keywords) == 8

    @pytest.mark.parametrize("title_len,desc_len,tag_count", [
        (0, 0, 0),
        (5, 10, 1),
        (40, 100, 3),
        (59, 159, 10),
        (60, 160, 20),
        (200, 500, 50),
    ])
    @pytest.mark.parametrize("content_type", list(ContentType))
    def test_never_exceeds_limits(self, make_text, title_len, desc_len, tag_count, content_type):
        """Test generated fields always fit the configured maximums."""
        context = RawContentContext(
            title=make_text(title_len),
            description=make_text(desc_len),
            content_type=content_type,
            category="Sports",
            location="Sharjah",
            tags=[f"tag{i}" for i in range(tag_count)],
        )
        generated = generate_auto_seo(context)
        limits = DEFAULT_CONFIG.thresholds

        assert len(generated.title) <= limits.title.max
        assert len(generated.description) <= limits.description.max
        assert len(generated.keywords) <= limits.keywords.max

    def test_to_content(self, event_context):
        """Test generated payload converts to validator input."""
        content = generate_auto_seo(event_context).to_content("https://gema-events.com/events/1")
        assert isinstance(content, SEOContent)
        assert content.canonical_url == "https://gema-events.com/events/1"

    def test_blog_alias(self):
        """Test 'blog' is accepted as an article content type."""
        context = RawContentContext(title="Tips", description="", content_type="blog")
        assert context.content_type == ContentType.ARTICLE


class TestGenerateSeoSuggestions:
    """Tests for advisory suggestions."""

    def test_empty_content(self):
        """Test empty content gets title, description and keyword suggestions."""
        suggestions = generate_seo_suggestions(SEOContent(), content_type=ContentType.EVENT)

        assert [s.type for s in suggestions] == [
            SuggestionType.TITLE, SuggestionType.DESCRIPTION, SuggestionType.KEYWORDS,
        ]
        assert suggestions[0].priority == SuggestionPriority.HIGH
        assert suggestions[0].message == "Add a compelling title that includes your main keywords"
        assert suggestions[1].priority == SuggestionPriority.HIGH
        assert suggestions[2].priority == SuggestionPriority.MEDIUM
        assert suggestions[2].suggestion == "kids activities, events, UAE, entertainment"

    def test_short_event_title_expansion(self):
        """Test short event titles get an expanded title."""
        suggestions = generate_seo_suggestions(
            SEOContent(title="Art Camp", keywords=["art"]),
            category="Workshops",
            location="Dubai",
            content_type=ContentType.EVENT,
        )
        title = next(s for s in suggestions if s.type == SuggestionType.TITLE)
        assert title.message == "Title is too short. Consider expanding it."
        assert title.suggestion == "Art Camp | Kids Workshops in Dubai | Gema Events"

    def test_short_article_title_expansion(self):
        """Test short titles without a type use the guide template."""
        suggestions = generate_seo_suggestions(SEOContent(title="Tips", keywords=["x"]))
        assert suggestions[0].suggestion == "Tips | Kids Activities Guide | Gema Events"

    def test_short_description_is_medium(self):
        """Test short descriptions get a medium priority suggestion."""
        suggestions = generate_seo_suggestions(
            SEOContent(title="x" * 40, description="Too short.", keywords=["x"])
        )
        assert len(suggestions) == 1
        assert suggestions[0].type == SuggestionType.DESCRIPTION
        assert suggestions[0].priority == SuggestionPriority.MEDIUM

    def test_article_default_keywords(self):
        """Test article keyword suggestion."""
        suggestions = generate_seo_suggestions(SEOContent(title="x" * 40, description="y" * 130))
        assert suggestions[-1].suggestion == "kids activities, parenting tips, family fun, UAE"

    def test_complete_content_has_no_suggestions(self, optimal_content):
        """Test nothing is suggested for complete content."""
        assert generate_seo_suggestions(optimal_content) == []

    def test_to_dict(self):
        """Test suggestions serialize with plain values."""
        data = generate_seo_suggestions(SEOContent())[0].to_dict()
        assert data == {
            "type": "title",
            "priority": "high",
            "message": "Add a compelling title that includes your main keywords",
            "suggestion": None,
        }
