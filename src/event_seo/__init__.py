"""
Event SEO Engine

SEO scoring, validation and generation for event and article pages:
- Scores and validates meta titles, descriptions and keyword lists
- Extracts keywords from free text by frequency
- Generates SEO fields from raw event or article content
- Previews how the fields render in search results and social cards
- Builds schema.org structured data for events, blog posts and breadcrumbs
"""

__version__ = "1.0.0"
__author__ = "Gema Events Team"

from .config import (
    DEFAULT_CONFIG,
    EngineConfig,
    FieldLimits,
    KeywordLimits,
    PreviewBudget,
    Thresholds,
)

from .models import (
    AnalysisResult,
    BlogPostDetails,
    BreadcrumbItem,
    CategoryDetails,
    ContentAuditRow,
    ContentType,
    EventDetails,
    GeneratedSEO,
    PlatformPreview,
    PreviewPlatform,
    PreviewRendering,
    RawContentContext,
    ScoreBand,
    ScoreColor,
    ScoreLabel,
    SEOContent,
    Suggestion,
    SuggestionPriority,
    SuggestionType,
    ValidationResult,
)

from .scoring import (
    overall_score,
    score_band,
    score_description,
    score_keywords,
    score_title,
)

from .validator import validate_seo
from .analysis import analyze_seo, length_status

from .keyword_extractor import (
    STOPWORDS,
    add_keyword,
    deduplicate_keywords,
    extract_keywords,
    merge_extracted_keywords,
    normalize_keyword,
)

from .generator import generate_auto_seo, generate_seo_suggestions

from .preview import (
    build_meta_tags,
    format_display_url,
    preview_content,
    resolve_canonical_url,
    truncate_text,
)

from .structured_data import (
    build_blog_structured_data,
    build_breadcrumbs,
    build_event_structured_data,
    generate_category_seo,
    render_json_ld,
)

__all__ = [
    # Configuration
    "DEFAULT_CONFIG",
    "EngineConfig",
    "FieldLimits",
    "KeywordLimits",
    "PreviewBudget",
    "Thresholds",
    # Models
    "AnalysisResult",
    "BlogPostDetails",
    "BreadcrumbItem",
    "CategoryDetails",
    "ContentAuditRow",
    "ContentType",
    "EventDetails",
    "GeneratedSEO",
    "PlatformPreview",
    "PreviewPlatform",
    "PreviewRendering",
    "RawContentContext",
    "ScoreBand",
    "ScoreColor",
    "ScoreLabel",
    "SEOContent",
    "Suggestion",
    "SuggestionPriority",
    "SuggestionType",
    "ValidationResult",
    # Scoring
    "overall_score",
    "score_band",
    "score_description",
    "score_keywords",
    "score_title",
    # Validation and analysis
    "validate_seo",
    "analyze_seo",
    "length_status",
    # Keywords
    "STOPWORDS",
    "add_keyword",
    "deduplicate_keywords",
    "extract_keywords",
    "merge_extracted_keywords",
    "normalize_keyword",
    # Generation
    "generate_auto_seo",
    "generate_seo_suggestions",
    # Previews
    "build_meta_tags",
    "format_display_url",
    "preview_content",
    "resolve_canonical_url",
    "truncate_text",
    # Structured data
    "build_blog_structured_data",
    "build_breadcrumbs",
    "build_event_structured_data",
    "generate_category_seo",
    "render_json_ld",
]
