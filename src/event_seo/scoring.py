"""
Bucketed SEO scoring.

Every score the validator and the analyzer report comes from the functions
in this module, so both always agree for the same content.
"""

import math

from .config import DEFAULT_CONFIG, EngineConfig, FieldLimits, KeywordLimits
from .models import ScoreBand, ScoreColor, ScoreLabel

# Bucket scores for text fields (title, description)
EMPTY_SCORE = 0
TOO_SHORT_SCORE = 30
TOO_LONG_SCORE = 60
OPTIMAL_SCORE = 100
ACCEPTABLE_SCORE = 80

# Bucket scores for keyword counts
FEW_KEYWORDS_SCORE = 50
MANY_KEYWORDS_SCORE = 60
ACCEPTABLE_KEYWORDS_SCORE = 85

# (minimum score, band), checked top-down
SCORE_BANDS = (
    (85, ScoreBand(ScoreColor.GREEN, ScoreLabel.EXCELLENT)),
    (70, ScoreBand(ScoreColor.YELLOW, ScoreLabel.GOOD)),
    (50, ScoreBand(ScoreColor.ORANGE, ScoreLabel.NEEDS_IMPROVEMENT)),
)
POOR_BAND = ScoreBand(ScoreColor.RED, ScoreLabel.POOR)


def effective_length(text: str) -> int:
    """Length used for scoring. Whitespace-only text counts as empty."""
    if not text or not text.strip():
        return 0
    return len(text)


def score_field_length(length: int, limits: FieldLimits) -> int:
    """
    Score a text field length against its limits.

    Args:
        length: Character count of the field.
        limits: Bounds of the field.

    Returns:
        0 when empty, 30 below min, 60 above max, 100 inside the optimal
        band, 80 otherwise.
    """
    if length <= 0:
        return EMPTY_SCORE
    if length < limits.min:
        return TOO_SHORT_SCORE
    if length > limits.max:
        return TOO_LONG_SCORE
    if limits.is_optimal(length):
        return OPTIMAL_SCORE
    return ACCEPTABLE_SCORE


def score_keyword_count(count: int, limits: KeywordLimits) -> int:
    """Score a keyword count: 0, 50 below min, 60 above max, 100 at optimal, else 85."""
    if count <= 0:
        return EMPTY_SCORE
    if count < limits.min:
        return FEW_KEYWORDS_SCORE
    if count > limits.max:
        return MANY_KEYWORDS_SCORE
    if count == limits.optimal:
        return OPTIMAL_SCORE
    return ACCEPTABLE_KEYWORDS_SCORE


def score_title(title: str, config: EngineConfig = DEFAULT_CONFIG) -> int:
    return score_field_length(effective_length(title), config.title_limits)


def score_description(description: str, config: EngineConfig = DEFAULT_CONFIG) -> int:
    return score_field_length(effective_length(description), config.description_limits)


def score_keywords(keywords: list[str], config: EngineConfig = DEFAULT_CONFIG) -> int:
    return score_keyword_count(len(keywords), config.keyword_limits)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def overall_score(title_score: int, description_score: int, keyword_score: int) -> int:
    """Rounded mean of the three sub-scores."""
    return round_half_up((title_score + description_score + keyword_score) / 3)


def score_band(score: float) -> ScoreBand:
    """
    Map a 0-100 score to its display band.

    >= 85 Excellent/green, >= 70 Good/yellow, >= 50 Needs Improvement/orange,
    anything lower Poor/red.
    """
    for minimum, band in SCORE_BANDS:
        if score >= minimum:
            return band
    return POOR_BAND
