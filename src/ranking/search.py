"""
Free-text search over an in-memory corpus.

Two stages:
1. Filter: keep documents whose title + preview contains ANY query term as a
   substring (looser than the word-boundary tiers used for scoring)
2. Rank: sort matches by relevance score (descending, ties keep corpus order)

An empty query is not a search: the corpus is returned untouched.
"""

import logging
from typing import List, Sequence

from .models import Document, SearchResult, rank_by_score
from .relevance import relevance

logger = logging.getLogger(__name__)


def parse_query(query: str) -> List[str]:
    """
    Split a raw query into lowercase, non-empty terms.

    Examples:
        >>> parse_query("  Delhi   MONSOON ")
        ['delhi', 'monsoon']
        >>> parse_query("   ")
        []
    """
    if not query:
        return []
    return [term for term in query.lower().split() if term]


def _matches_any(document: Document, terms: List[str]) -> bool:
    searchable = document.keyword_source.lower()
    return any(term in searchable for term in terms)


def search(corpus: Sequence[Document], query: str) -> SearchResult:
    """
    Filter and rank documents for a free-text query.

    Args:
        corpus: Documents to search
        query: Raw query text

    Returns:
        SearchResult with ranked documents and reportable flags:
        - has_query: query is non-empty after trimming
        - has_results: returned list is non-empty
    """
    documents = list(corpus)
    has_query = bool(query and query.strip())

    terms = parse_query(query) if has_query else []
    if not terms:
        return SearchResult(
            results=documents,
            has_query=has_query,
            has_results=bool(documents),
        )

    matched = [doc for doc in documents if _matches_any(doc, terms)]
    ranked = rank_by_score(matched, lambda doc: relevance(doc, terms))
    results = [item.document for item in ranked]

    logger.debug(f"Search {terms}: {len(results)} of {len(documents)} documents matched")

    return SearchResult(
        results=results,
        has_query=has_query,
        has_results=bool(results),
    )
