"""
Keyword extraction and keyword-list maintenance.

Extraction is frequency based: text is lowercased, punctuation is replaced
by spaces, short tokens and stop words are dropped, and the remaining
words are ranked by how often they occur. Ties keep first-occurrence order.
"""

import re
from collections import Counter
from typing import Optional

from .config import DEFAULT_CONFIG, EngineConfig

# Common English function words never returned as keywords
STOPWORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "this", "that", "these", "those", "is", "are",
    "was", "were", "be", "been", "being", "have", "has", "had", "will",
    "would", "should", "could", "can", "may", "might",
})

# Tokens this short or shorter are dropped
MIN_TOKEN_LENGTH = 3

DEFAULT_MAX_KEYWORDS = 5

_NON_WORD = re.compile(r"[^\w\s]", re.ASCII)


def tokenize(text: str) -> list[str]:
    """
    Split text into candidate keyword tokens.

    Args:
        text: Free text to tokenize.

    Returns:
        Lowercase tokens in original order, without stop words and
        without tokens shorter than MIN_TOKEN_LENGTH.
    """
    cleaned = _NON_WORD.sub(" ", text.lower())
    return [
        word for word in cleaned.split()
        if len(word) >= MIN_TOKEN_LENGTH and word not in STOPWORDS
    ]


def extract_keywords(text: str, max_keywords: int = DEFAULT_MAX_KEYWORDS) -> list[str]:
    """
    Extract the most frequent words from text.

    Args:
        text: Text to analyze.
        max_keywords: Number of keywords to return.

    Returns:
        Up to max_keywords single words, most frequent first. Words with
        equal frequency keep the order in which they first appear.

    Examples:
        >>> extract_keywords("the quick brown fox the fox runs", 2)
        ['fox', 'quick']
    """
    if max_keywords <= 0 or not text:
        return []

    # Counter keeps first-insertion order and sorted() is stable
    counts = Counter(tokenize(text))
    ranked = sorted(counts.items(), key=lambda item: -item[1])

    return [word for word, _ in ranked[:max_keywords]]


def normalize_keyword(keyword: str) -> str:
    """Normalize a typed-in keyword: strip and lowercase."""
    return keyword.strip().lower()


def deduplicate_keywords(keywords: list[str]) -> list[str]:
    """
    Remove duplicate keywords (case-insensitive).

    Keeps the first occurrence of each keyword and drops empty entries.
    """
    seen: set[str] = set()
    unique: list[str] = []

    for keyword in keywords:
        if not keyword or not keyword.strip():
            continue
        key = keyword.strip().lower()
        if key not in seen:
            seen.add(key)
            unique.append(keyword)

    return unique


def add_keyword(
    keywords: list[str],
    keyword: str,
    config: EngineConfig = DEFAULT_CONFIG,
) -> list[str]:
    """
    Add a typed-in keyword to a keyword list.

    The keyword is normalized first. It is not added when empty, already
    present, or when the list already holds the maximum number of keywords.

    Returns:
        A new list; the input list is not modified.
    """
    normalized = normalize_keyword(keyword)
    result = list(keywords)

    if not normalized or len(result) >= config.keyword_limits.max:
        return result
    if normalized in {k.lower() for k in result}:
        return result

    result.append(normalized)
    return result


def merge_extracted_keywords(
    existing: list[str],
    text: str,
    config: EngineConfig = DEFAULT_CONFIG,
    max_keywords: Optional[int] = None,
) -> list[str]:
    """
    Extend a keyword list with keywords extracted from text.

    Extracts the optimal number of keywords (or max_keywords), keeps those
    not already present and appends them until the list reaches the keyword
    maximum. Existing keywords are never removed or reordered.

    Args:
        existing: Current keyword list.
        text: Source text, typically title and description of the content.
        config: Engine configuration.
        max_keywords: Override for the number of keywords to extract.

    Returns:
        The merged keyword list.
    """
    limits = config.keyword_limits
    wanted = limits.optimal if max_keywords is None else max_keywords

    present = {k.lower() for k in existing}
    candidates = [k for k in extract_keywords(text, wanted) if k not in present]

    room = max(limits.max - len(existing), 0)
    return list(existing) + candidates[:room]
