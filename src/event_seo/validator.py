"""
SEO field validation.

Validates a content payload and explains the result: warnings for problems
that should be fixed before publishing, suggestions for optional
improvements. Scores come from the shared scoring module.
"""

import logging
import re

from .config import DEFAULT_CONFIG, EngineConfig
from .models import SEOContent, ValidationResult
from .scoring import (
    effective_length,
    overall_score,
    score_description,
    score_keywords,
    score_title,
)

logger = logging.getLogger(__name__)


def _cta_pattern(verbs: tuple[str, ...]) -> re.Pattern:
    return re.compile(r"\b(" + "|".join(re.escape(v) for v in verbs) + r")\b", re.IGNORECASE)


def has_call_to_action(text: str, config: EngineConfig = DEFAULT_CONFIG) -> bool:
    """Check if text contains one of the call-to-action verbs as a whole word."""
    return _cta_pattern(config.cta_verbs).search(text) is not None


def _check_title(title: str, config: EngineConfig, warnings: list[str], suggestions: list[str]) -> None:
    limits = config.title_limits
    length = effective_length(title)

    if length == 0:
        warnings.append("Title is required")
        return

    if length < limits.min:
        warnings.append(
            f"Title is too short ({length} chars). "
            f"Aim for {limits.min}-{limits.max} characters."
        )
    elif length > limits.max:
        warnings.append(
            f"Title is too long ({length} chars). It may be truncated in search results."
        )
    elif limits.is_optimal(length):
        suggestions.append("Title length is optimal for search engines.")

    if not config.has_brand(title):
        suggestions.append(
            f'Consider including "{config.brand_name}" in your title for brand recognition.'
        )

    if not config.has_locale(title):
        locales = ", ".join(term.upper() if len(term) <= 3 else term.capitalize() for term in config.locale_terms)
        suggestions.append(
            f"Consider including location ({locales}) in your title for local SEO."
        )


def _check_description(
    description: str, config: EngineConfig, warnings: list[str], suggestions: list[str]
) -> None:
    limits = config.description_limits
    length = effective_length(description)

    if length == 0:
        warnings.append("Meta description is required")
        return

    if length < limits.min:
        warnings.append(
            f"Description is too short ({length} chars). "
            f"Aim for {limits.min}-{limits.max} characters."
        )
    elif length > limits.max:
        warnings.append(
            f"Description is too long ({length} chars). It may be truncated in search results."
        )
    elif limits.is_optimal(length):
        suggestions.append("Description length is optimal for search engines.")

    if not has_call_to_action(description, config):
        suggestions.append(
            "Consider adding a call-to-action (book, register, join, etc.) in your description."
        )


def _check_keywords(
    keywords: list[str], config: EngineConfig, warnings: list[str], suggestions: list[str]
) -> None:
    limits = config.keyword_limits
    count = len(keywords)

    if count == 0:
        warnings.append("Keywords are recommended for better SEO")
    elif count < limits.min:
        suggestions.append(
            f"Consider adding more keywords. Current: {count}, "
            f"Recommended: {limits.min}-{limits.max}"
        )
    elif count > limits.max:
        warnings.append(
            f"Too many keywords ({count}). Focus on {limits.max} most relevant keywords."
        )
    elif count == limits.optimal:
        suggestions.append("Keyword count is optimal.")


def validate_seo(content: SEOContent, config: EngineConfig = DEFAULT_CONFIG) -> ValidationResult:
    """
    Validate SEO fields and provide optimization suggestions.

    Never raises for empty or oversized fields; those are reported as
    warnings.

    Args:
        content: The SEO payload to validate.
        config: Engine configuration.

    Returns:
        ValidationResult with warnings, suggestions and scores.
    """
    warnings: list[str] = []
    suggestions: list[str] = []

    _check_title(content.title, config, warnings, suggestions)
    _check_description(content.description, config, warnings, suggestions)
    _check_keywords(content.keywords, config, warnings, suggestions)

    title_score = score_title(content.title, config)
    description_score = score_description(content.description, config)
    keyword_score = score_keywords(content.keywords, config)
    score = overall_score(title_score, description_score, keyword_score)

    logger.debug(
        f"SEO validation: score={score} (title={title_score}, "
        f"description={description_score}, keywords={keyword_score}), "
        f"{len(warnings)} warnings"
    )

    return ValidationResult(
        warnings=warnings,
        suggestions=suggestions,
        score=score,
        title_score=title_score,
        description_score=description_score,
        keyword_score=keyword_score,
    )
