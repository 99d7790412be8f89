# -*- coding: utf-8 -*-
"""
Centralized configuration for the Event SEO engine.

This module provides the immutable limits and settings that every engine
operation reads: field length thresholds, keyword count bounds, brand and
locale terms, call-to-action verbs, and the per-platform preview budgets.
"""

from dataclasses import dataclass, field, replace
from typing import Optional


@dataclass(frozen=True)
class FieldLimits:
    """
    Character bounds for a text field (title or description).

    Attributes:
        min: Shortest acceptable length.
        max: Longest length before search engines truncate.
        optimal_min: Lower edge of the optimal band.
        optimal_max: Upper edge of the optimal band.
    """

    min: int
    max: int
    optimal_min: int
    optimal_max: int

    def __post_init__(self):
        """Validate that the bounds nest correctly."""
        if self.min < 1:
            raise ValueError(f"min must be >= 1, got {self.min}")
        if not self.min <= self.optimal_min <= self.optimal_max <= self.max:
            raise ValueError(
                f"limits must satisfy min <= optimal_min <= optimal_max <= max, "
                f"got ({self.min}, {self.optimal_min}, {self.optimal_max}, {self.max})"
            )

    def is_optimal(self, length: int) -> bool:
        """Check if a length falls within the optimal band."""
        return self.optimal_min <= length <= self.optimal_max


@dataclass(frozen=True)
class KeywordLimits:
    """Keyword count bounds with a single optimal value."""

    min: int
    max: int
    optimal: int

    def __post_init__(self):
        if self.min < 1:
            raise ValueError(f"min must be >= 1, got {self.min}")
        if not self.min <= self.optimal <= self.max:
            raise ValueError(
                f"keyword limits must satisfy min <= optimal <= max, "
                f"got ({self.min}, {self.optimal}, {self.max})"
            )


@dataclass(frozen=True)
class Thresholds:
    """Length and count bounds for every scored SEO field."""

    title: FieldLimits = field(default_factory=lambda: FieldLimits(30, 60, 50, 60))
    description: FieldLimits = field(default_factory=lambda: FieldLimits(120, 160, 150, 160))
    keywords: KeywordLimits = field(default_factory=lambda: KeywordLimits(3, 10, 5))


@dataclass(frozen=True)
class PreviewBudget:
    """Title/description character budgets of one rendering platform."""

    title: int
    description: int

    def __post_init__(self):
        if self.title < 1 or self.description < 1:
            raise ValueError(
                f"preview budgets must be >= 1, got ({self.title}, {self.description})"
            )


# Call-to-action verbs recognised in meta descriptions
CTA_VERBS = ("book", "register", "join", "discover", "find", "explore", "learn")

# Terms that mark a title as localized
LOCALE_TERMS = ("uae", "dubai")


@dataclass(frozen=True)
class EngineConfig:
    """
    Engine-wide settings shared by validation, generation and previews.

    Attributes:
        thresholds: Field length and keyword count bounds.
        brand_name: Brand as it appears in generated titles and copy.
        brand_term: Lowercase term whose presence marks a title as branded.
        locale_terms: Lowercase terms whose presence marks a title as localized.
        default_location: Location used when content has none.
        cta_verbs: Call-to-action verbs looked for in descriptions.
        search_budget: Budget of the search result preview.
        social_card_a_budget: Budget of the large social card (Facebook-style).
        social_card_b_budget: Budget of the compact social card (Twitter-style).
        base_url: Site root used to build canonical URLs.
        default_og_image: Path of the fallback Open Graph image.
        logo_path: Path of the publisher logo in structured data.
        country_code: ISO 3166 country code of event addresses.
        currency: ISO 4217 currency of event offers.
    """

    thresholds: Thresholds = field(default_factory=Thresholds)
    brand_name: str = "Gema Events"
    brand_term: str = "gema"
    locale_terms: tuple[str, ...] = LOCALE_TERMS
    default_location: str = "UAE"
    cta_verbs: tuple[str, ...] = CTA_VERBS
    search_budget: PreviewBudget = field(default_factory=lambda: PreviewBudget(60, 160))
    social_card_a_budget: PreviewBudget = field(default_factory=lambda: PreviewBudget(88, 300))
    social_card_b_budget: PreviewBudget = field(default_factory=lambda: PreviewBudget(70, 200))
    base_url: str = "https://gema-events.com"
    default_og_image: str = "/assets/images/og-default.jpg"
    logo_path: str = "/assets/images/logo.png"
    country_code: str = "AE"
    currency: str = "AED"

    def __post_init__(self):
        """Validate configuration values."""
        if not self.brand_name.strip():
            raise ValueError("brand_name must not be empty")
        if not self.brand_term.strip():
            raise ValueError("brand_term must not be empty")
        if self.brand_term != self.brand_term.lower():
            raise ValueError(f"brand_term must be lowercase, got '{self.brand_term}'")
        if not self.locale_terms:
            raise ValueError("locale_terms must not be empty")
        if not self.cta_verbs:
            raise ValueError("cta_verbs must not be empty")
        if not self.default_location.strip():
            raise ValueError("default_location must not be empty")

    @property
    def title_limits(self) -> FieldLimits:
        return self.thresholds.title

    @property
    def description_limits(self) -> FieldLimits:
        return self.thresholds.description

    @property
    def keyword_limits(self) -> KeywordLimits:
        return self.thresholds.keywords

    def has_brand(self, text: str) -> bool:
        """Check if text mentions the brand (case-insensitive)."""
        return self.brand_term in text.lower()

    def has_locale(self, text: str) -> bool:
        """Check if text mentions any locale term (case-insensitive)."""
        lowered = text.lower()
        return any(term in lowered for term in self.locale_terms)

    @classmethod
    def default(cls) -> "EngineConfig":
        """Create config with the storefront defaults."""
        return cls()

    @classmethod
    def with_brand(cls, brand_name: str, brand_term: Optional[str] = None, **overrides) -> "EngineConfig":
        """Create config for a different brand.

        Args:
            brand_name: Brand as it should appear in generated copy.
            brand_term: Term that marks a title as branded. Defaults to the
                first word of the brand name, lowercased.
            **overrides: Override any other config values.

        Returns:
            EngineConfig with the brand settings replaced.
        """
        if brand_term is None:
            words = brand_name.split()
            brand_term = words[0] if words else ""
        defaults = {
            "brand_name": brand_name,
            "brand_term": brand_term.lower(),
        }
        defaults.update(overrides)
        return cls(**defaults)

    def with_base_url(self, base_url: str) -> "EngineConfig":
        """Return a copy of this config pointing at another site root."""
        return replace(self, base_url=base_url.rstrip("/"))


DEFAULT_CONFIG = EngineConfig()
