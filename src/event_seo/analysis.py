"""
SEO metrics analysis.

Produces raw lengths and counts alongside the shared bucket scores. Intended
for compact score badges; use the validator for detailed feedback.
"""

from .config import DEFAULT_CONFIG, EngineConfig, FieldLimits
from .models import AnalysisResult, SEOContent
from .scoring import overall_score, score_description, score_keywords, score_title


def analyze_seo(content: SEOContent, config: EngineConfig = DEFAULT_CONFIG) -> AnalysisResult:
    """
    Analyze SEO content and provide detailed metrics.

    Args:
        content: The SEO payload to analyze.
        config: Engine configuration.

    Returns:
        AnalysisResult with lengths, counts and scores.
    """
    title_score = score_title(content.title, config)
    description_score = score_description(content.description, config)
    keyword_score = score_keywords(content.keywords, config)

    return AnalysisResult(
        title_length=len(content.title),
        description_length=len(content.description),
        keyword_count=len(content.keywords),
        title_score=title_score,
        description_score=description_score,
        keyword_score=keyword_score,
        overall_score=overall_score(title_score, description_score, keyword_score),
    )


def length_status(length: int, limits: FieldLimits) -> str:
    """
    Classify a live character count for an editor counter.

    Returns:
        "empty", "over" (past max), "optimal" (inside the optimal band)
        or "ok".
    """
    if length == 0:
        return "empty"
    if length > limits.max:
        return "over"
    if limits.is_optimal(length):
        return "optimal"
    return "ok"
