"""
Data models for the Event SEO engine.

This module defines the payloads passed into and returned from the engine:
SEO content, validation and analysis results, advisory suggestions, raw
content context for generation, score bands, platform previews and the page
details structured data is built from.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ContentType(Enum):
    """Kind of content an SEO payload is attached to."""
    EVENT = "event"
    ARTICLE = "article"

    @classmethod
    def parse(cls, value: "str | ContentType") -> "ContentType":
        """Parse a content type, accepting 'blog' as an alias for article."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        if normalized == "blog":
            return cls.ARTICLE
        return cls(normalized)


class SuggestionType(Enum):
    """Field an advisory suggestion refers to."""
    TITLE = "title"
    DESCRIPTION = "description"
    KEYWORDS = "keywords"


class SuggestionPriority(Enum):
    """How urgently a suggestion should be acted on."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ScoreColor(Enum):
    """Display color of a score band."""
    GREEN = "green"
    YELLOW = "yellow"
    ORANGE = "orange"
    RED = "red"


class ScoreLabel(Enum):
    """Display label of a score band."""
    EXCELLENT = "Excellent"
    GOOD = "Good"
    NEEDS_IMPROVEMENT = "Needs Improvement"
    POOR = "Poor"


class PreviewPlatform(Enum):
    """External rendering targets a preview is produced for."""
    SEARCH_RESULT = "search_result"
    SOCIAL_CARD_A = "social_card_a"  # Facebook-style share card
    SOCIAL_CARD_B = "social_card_b"  # Twitter-style card


def _unique_keywords(keywords: list[str]) -> list[str]:
    """Strip keywords, drop empties and case-insensitive duplicates."""
    seen: set[str] = set()
    unique: list[str] = []
    for keyword in keywords:
        cleaned = keyword.strip()
        if not cleaned or cleaned.lower() in seen:
            continue
        seen.add(cleaned.lower())
        unique.append(cleaned)
    return unique


@dataclass
class SEOContent:
    """SEO metadata of one event or article."""
    title: str = ""
    description: str = ""
    keywords: list[str] = field(default_factory=list)
    canonical_url: Optional[str] = None

    def __post_init__(self) -> None:
        """Normalize the keyword list."""
        self.title = self.title or ""
        self.description = self.description or ""
        self.keywords = _unique_keywords(list(self.keywords or []))

    @property
    def keyword_count(self) -> int:
        return len(self.keywords)

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "title": self.title,
            "description": self.description,
            "keywords": list(self.keywords),
            "canonical_url": self.canonical_url,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SEOContent":
        """Build content from a loosely shaped dictionary.

        Keywords may be given as a list or as a comma-separated string.

        Raises:
            ValueError: If a field has the wrong type.
        """
        title = data.get("title") or ""
        description = data.get("description") or ""
        keywords = data.get("keywords") or []
        canonical_url = data.get("canonical_url") or data.get("canonicalUrl")

        for name, value in (("title", title), ("description", description)):
            if not isinstance(value, str):
                raise ValueError(f"'{name}' must be a string, got {type(value).__name__}")
        if canonical_url is not None and not isinstance(canonical_url, str):
            raise ValueError(f"'canonical_url' must be a string, got {type(canonical_url).__name__}")

        if isinstance(keywords, str):
            keywords = keywords.split(",")
        elif not isinstance(keywords, list):
            raise ValueError(
                f"'keywords' must be a list or a comma-separated string, got {type(keywords).__name__}"
            )

        return cls(
            title=title,
            description=description,
            keywords=[str(k) for k in keywords],
            canonical_url=canonical_url,
        )


@dataclass
class ValidationResult:
    """Pass/fail verdict with human-readable feedback."""
    warnings: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    score: int = 0
    title_score: int = 0
    description_score: int = 0
    keyword_score: int = 0

    @property
    def is_valid(self) -> bool:
        """Content is valid when no warnings were emitted."""
        return len(self.warnings) == 0

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "warnings": list(self.warnings),
            "suggestions": list(self.suggestions),
            "score": self.score,
            "title_score": self.title_score,
            "description_score": self.description_score,
            "keyword_score": self.keyword_score,
        }


@dataclass
class AnalysisResult:
    """Raw metrics and sub-scores for compact score badges."""
    title_length: int
    description_length: int
    keyword_count: int
    title_score: int
    description_score: int
    keyword_score: int
    overall_score: int

    def to_dict(self) -> dict:
        return {
            "title_length": self.title_length,
            "description_length": self.description_length,
            "keyword_count": self.keyword_count,
            "title_score": self.title_score,
            "description_score": self.description_score,
            "keyword_score": self.keyword_score,
            "overall_score": self.overall_score,
        }


@dataclass
class Suggestion:
    """Advisory recommendation synthesized from raw content context."""
    type: SuggestionType
    priority: SuggestionPriority
    message: str
    suggestion: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "priority": self.priority.value,
            "message": self.message,
            "suggestion": self.suggestion,
        }


@dataclass
class RawContentContext:
    """Source content an SEO payload is generated from."""
    title: str
    description: str
    content_type: ContentType = ContentType.EVENT
    category: Optional[str] = None
    location: Optional[str] = None
    tags: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.content_type = ContentType.parse(self.content_type)
        self.title = self.title or ""
        self.description = self.description or ""
        self.tags = list(self.tags or [])

    @property
    def is_event(self) -> bool:
        return self.content_type == ContentType.EVENT


@dataclass
class GeneratedSEO:
    """SEO fields synthesized by the generator."""
    title: str
    description: str
    keywords: list[str] = field(default_factory=list)

    def to_content(self, canonical_url: Optional[str] = None) -> SEOContent:
        """Convert to an SEOContent payload ready for validation."""
        return SEOContent(
            title=self.title,
            description=self.description,
            keywords=list(self.keywords),
            canonical_url=canonical_url,
        )

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "keywords": list(self.keywords),
        }


@dataclass(frozen=True)
class ScoreBand:
    """Display band a numeric score falls into."""
    color: ScoreColor
    label: ScoreLabel

    def to_dict(self) -> dict:
        return {"color": self.color.value, "label": self.label.value}


@dataclass
class PreviewRendering:
    """How content renders on a single platform."""
    platform: PreviewPlatform
    title: str
    description: str
    display_url: str
    title_budget: int
    description_budget: int

    def to_dict(self) -> dict:
        return {
            "platform": self.platform.value,
            "title": self.title,
            "description": self.description,
            "display_url": self.display_url,
            "title_budget": self.title_budget,
            "description_budget": self.description_budget,
        }


@dataclass
class PlatformPreview:
    """Renderings for every supported platform."""
    search_result: PreviewRendering
    social_card_a: PreviewRendering
    social_card_b: PreviewRendering
    title_length: int = 0
    description_length: int = 0

    @property
    def renderings(self) -> list[PreviewRendering]:
        return [self.search_result, self.social_card_a, self.social_card_b]

    def to_dict(self) -> dict:
        return {
            "search_result": self.search_result.to_dict(),
            "social_card_a": self.social_card_a.to_dict(),
            "social_card_b": self.social_card_b.to_dict(),
            "title_length": self.title_length,
            "description_length": self.description_length,
        }


@dataclass
class ContentAuditRow:
    """One content item loaded from a bulk audit file."""
    row_id: str
    content: SEOContent


@dataclass
class EventDetails:
    """Event fields rendered as schema.org Event markup.

    Dates are ISO 8601 strings and are passed through unchanged.
    """
    title: str
    description: str = ""
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    price: float = 0
    currency: Optional[str] = None


@dataclass
class BlogPostDetails:
    """Blog post fields rendered as schema.org BlogPosting markup."""
    title: str
    excerpt: str = ""
    image: Optional[str] = None
    published_at: Optional[str] = None
    modified_at: Optional[str] = None
    author_name: Optional[str] = None


@dataclass
class BreadcrumbItem:
    """One step of a breadcrumb trail; url is site-relative or absolute."""
    name: str
    url: str


@dataclass
class CategoryDetails:
    """Category listing fields used to build the category page SEO."""
    name: str
    slug: str
    description: Optional[str] = None
    keywords: list[str] = field(default_factory=list)
