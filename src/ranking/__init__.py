"""
Content ranking engine: recommendations, trending and search relevance.

All operations are pure functions over a caller-supplied corpus. Nothing is
persisted or indexed; keyword sets and matches are recomputed on every call
(pass a KeywordCache to recommend()/similarity() to memoize keywords).

Components:
- tokenizer: keyword extraction with stopword filtering
- similarity: Jaccard + author + recency pairwise similarity
- recommender: related-content ranking against a reference document
- trending: exponential recency decay ordering
- relevance: tiered title/preview/full-text query scoring
- search: substring filter + relevance ranking
- cache: optional keyword memoization keyed by content hash
"""

from .models import Document, ScoredResult, SearchResult
from .tokenizer import extract_keywords, STOPWORDS
from .similarity import similarity
from .recommender import recommend
from .trending import trending, trending_score
from .relevance import RelevanceScorer, relevance
from .search import search, parse_query
from .cache import KeywordCache

__all__ = [
    "Document",
    "ScoredResult",
    "SearchResult",
    "extract_keywords",
    "STOPWORDS",
    "similarity",
    "recommend",
    "trending",
    "trending_score",
    "RelevanceScorer",
    "relevance",
    "search",
    "parse_query",
    "KeywordCache",
]
