"""
Pairwise document similarity for related-content recommendations.

Formula:
    similarity(a, b) = 0.6 × jaccard + author_boost + 0.2 × recency

Where:
    jaccard = |K(a) ∩ K(b)| / |K(a) ∪ K(b)|, K = keywords of title + preview
    author_boost = 0.2 if both documents share an author, else 0
    recency = max(0, 1 - days_apart / 365)  (linear decay over one year)

The score lies in [0, 1.0]. A document is never similar to itself (same id
scores 0), and documents without keywords score 0 regardless of author or
date. Apart from the identity rule the function is symmetric.
"""

from typing import FrozenSet, Optional

from .cache import KeywordCache
from .models import Document, as_utc
from .tokenizer import extract_keywords

JACCARD_WEIGHT = 0.6
AUTHOR_BOOST = 0.2
RECENCY_WEIGHT = 0.2
RECENCY_WINDOW_DAYS = 365

SECONDS_PER_DAY = 60 * 60 * 24


def _keywords(document: Document, cache: Optional[KeywordCache]) -> FrozenSet[str]:
    if cache is not None:
        return cache.get(document)
    return extract_keywords(document.keyword_source)


def jaccard_index(a: FrozenSet[str], b: FrozenSet[str]) -> float:
    """Intersection size over union size (0.0 when both are empty)"""
    union = len(a | b)
    if union == 0:
        return 0.0
    return len(a & b) / union


def recency_factor(a: Document, b: Document) -> float:
    """Linear decay from 1.0 (same moment) to 0.0 (a year or more apart)"""
    days_apart = abs(
        (as_utc(a.created_at) - as_utc(b.created_at)).total_seconds()
    ) / SECONDS_PER_DAY
    return max(0.0, 1 - days_apart / RECENCY_WINDOW_DAYS)


def similarity(a: Document, b: Document, cache: Optional[KeywordCache] = None) -> float:
    """
    Compute similarity between two documents.

    Args:
        a, b: Documents to compare
        cache: Optional KeywordCache to reuse keyword sets across calls

    Returns:
        Similarity score (higher = more related)

    Example:
        >>> similarity(delhi_diaries, delhi_stories)  # same author, 2 days apart
        0.699...
    """
    if a.id == b.id:
        return 0.0

    keywords_a = _keywords(a, cache)
    keywords_b = _keywords(b, cache)

    if not keywords_a or not keywords_b:
        return 0.0

    jaccard = jaccard_index(keywords_a, keywords_b)
    author_boost = AUTHOR_BOOST if a.author_id == b.author_id else 0.0

    return (
        jaccard * JACCARD_WEIGHT
        + author_boost
        + recency_factor(a, b) * RECENCY_WEIGHT
    )
