"""
Automatic SEO generation.

Synthesizes a complete SEO payload (title, description, keywords) from the
raw content of an event or article, and produces advisory suggestions when
the author has not filled in the SEO fields yet.

Generated fields never exceed the configured maximums.
"""

import logging
from typing import Optional

from .config import DEFAULT_CONFIG, EngineConfig
from .keyword_extractor import deduplicate_keywords
from .models import (
    ContentType,
    GeneratedSEO,
    RawContentContext,
    SEOContent,
    Suggestion,
    SuggestionPriority,
    SuggestionType,
)
from .preview import truncate_text

logger = logging.getLogger(__name__)

DEFAULT_EVENT_CATEGORY = "Activities"

# Generic domain terms every generated keyword list starts with
BASE_KEYWORDS = {
    ContentType.EVENT: ("kids activities", "events", "family fun"),
    ContentType.ARTICLE: ("kids activities", "parenting tips", "family guide"),
}

# Tags taken into the generated keyword list
MAX_TAG_KEYWORDS = 3


def _title_suffix(context: RawContentContext, config: EngineConfig) -> str:
    if context.is_event:
        category = context.category or DEFAULT_EVENT_CATEGORY
        location = context.location or config.default_location
        return f" | Kids {category} in {location} | {config.brand_name}"
    return f" | Kids Activities Guide | {config.brand_name}"


def _description_suffix(context: RawContentContext, config: EngineConfig) -> str:
    if context.is_event:
        location = context.location or config.default_location
        return (
            f" Book now for an unforgettable experience with "
            f"{config.brand_name} in {location}."
        )
    return f" Discover expert tips and guides for family activities with {config.brand_name}."


def generate_seo_title(context: RawContentContext, config: EngineConfig = DEFAULT_CONFIG) -> str:
    """
    Generate an SEO title from the content title.

    A branded suffix is appended unless the title already mentions the
    brand. If the result is too long the suffix falls back to the brand
    alone; if even that is too long the title is truncated.
    """
    limits = config.title_limits
    title = context.title

    if config.has_brand(title):
        seo_title = title
    else:
        seo_title = f"{title}{_title_suffix(context, config)}"
        if len(seo_title) > limits.max:
            seo_title = f"{title} | {config.brand_name}"

    if len(seo_title) > limits.max:
        seo_title = truncate_text(seo_title, limits.max)

    return seo_title


def generate_seo_description(
    context: RawContentContext, config: EngineConfig = DEFAULT_CONFIG
) -> str:
    """
    Generate a meta description from the content description.

    Long descriptions are truncated with an ellipsis. Short descriptions get
    a call-to-action suffix, but only when the whole suffix fits.
    """
    limits = config.description_limits
    description = context.description

    if len(description) > limits.max:
        return truncate_text(description, limits.max)

    if len(description) < limits.min:
        suffix = _description_suffix(context, config)
        if len(description) + len(suffix) <= limits.max:
            return description + suffix

    return description


def generate_seo_keywords(
    context: RawContentContext, config: EngineConfig = DEFAULT_CONFIG
) -> list[str]:
    """
    Generate a keyword list: base terms, location, category, then tags.

    Empty values and case-insensitive duplicates are dropped and the list
    is capped at the keyword maximum.
    """
    candidates = list(BASE_KEYWORDS[context.content_type])
    candidates.append(context.location or config.default_location)
    candidates.append(context.category or "")
    candidates.extend(context.tags[:MAX_TAG_KEYWORDS])

    keywords = deduplicate_keywords([k.strip() for k in candidates if k and k.strip()])
    return keywords[: config.keyword_limits.max]


def generate_auto_seo(
    context: RawContentContext, config: EngineConfig = DEFAULT_CONFIG
) -> GeneratedSEO:
    """
    Generate a complete SEO payload from raw content.

    Args:
        context: Raw title, description and metadata of an event or article.
        config: Engine configuration.

    Returns:
        GeneratedSEO with title, description and keywords.
    """
    generated = GeneratedSEO(
        title=generate_seo_title(context, config),
        description=generate_seo_description(context, config),
        keywords=generate_seo_keywords(context, config),
    )

    logger.debug(
        f"Generated SEO for {context.content_type.value}: "
        f"title={len(generated.title)} chars, "
        f"description={len(generated.description)} chars, "
        f"{len(generated.keywords)} keywords"
    )

    return generated


def _default_keyword_suggestion(
    content_type: Optional[ContentType],
    category: Optional[str],
    location: Optional[str],
    config: EngineConfig,
) -> list[str]:
    if content_type == ContentType.EVENT:
        return [
            "kids activities",
            "events",
            location or config.default_location,
            category or "entertainment",
        ]
    return ["kids activities", "parenting tips", "family fun", config.default_location]


def generate_seo_suggestions(
    content: SEOContent,
    category: Optional[str] = None,
    location: Optional[str] = None,
    content_type: Optional[ContentType] = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> list[Suggestion]:
    """
    Generate advisory suggestions from the content and its context.

    Unlike the validator's suggestion strings, these carry a type and a
    priority, and may include a concrete replacement value.

    Args:
        content: Current SEO fields (possibly empty).
        category: Event category, used in expanded titles and keywords.
        location: Event location, used in expanded titles and keywords.
        content_type: Event or article. None is treated as article.
        config: Engine configuration.

    Returns:
        Ordered list of suggestions: title, description, then keywords.
    """
    if content_type is not None:
        content_type = ContentType.parse(content_type)

    suggestions: list[Suggestion] = []
    title = content.title
    description = content.description

    if not title:
        suggestions.append(Suggestion(
            type=SuggestionType.TITLE,
            priority=SuggestionPriority.HIGH,
            message="Add a compelling title that includes your main keywords",
        ))
    elif len(title) < config.title_limits.min:
        context = RawContentContext(
            title=title,
            description=description,
            content_type=content_type or ContentType.ARTICLE,
            category=category,
            location=location,
        )
        suggestions.append(Suggestion(
            type=SuggestionType.TITLE,
            priority=SuggestionPriority.HIGH,
            message="Title is too short. Consider expanding it.",
            suggestion=f"{title}{_title_suffix(context, config)}",
        ))

    if not description:
        suggestions.append(Suggestion(
            type=SuggestionType.DESCRIPTION,
            priority=SuggestionPriority.HIGH,
            message="Add a meta description to improve click-through rates",
        ))
    elif len(description) < config.description_limits.min:
        suggestions.append(Suggestion(
            type=SuggestionType.DESCRIPTION,
            priority=SuggestionPriority.MEDIUM,
            message="Expand your description to provide more context for search engines",
        ))

    if not content.keywords:
        defaults = _default_keyword_suggestion(content_type, category, location, config)
        suggestions.append(Suggestion(
            type=SuggestionType.KEYWORDS,
            priority=SuggestionPriority.MEDIUM,
            message="Add relevant keywords to improve discoverability",
            suggestion=", ".join(defaults),
        ))

    return suggestions
