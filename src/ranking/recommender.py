"""
Related-content recommendations.

Ranks a corpus against one reference document by pairwise similarity
(see similarity.py) and returns the top matches.
"""

import logging
from typing import List, Optional, Sequence

from .cache import KeywordCache
from .models import Document, rank_by_score
from .similarity import similarity

logger = logging.getLogger(__name__)

DEFAULT_RECOMMEND_LIMIT = 3


def recommend(
    reference: Optional[Document],
    corpus: Sequence[Document],
    limit: int = DEFAULT_RECOMMEND_LIMIT,
    cache: Optional[KeywordCache] = None,
) -> List[Document]:
    """
    Recommend documents related to a reference document.

    Args:
        reference: Document being viewed (None yields no recommendations)
        corpus: Candidate documents (may include the reference itself)
        limit: Maximum number of recommendations (<= 0 yields none)
        cache: Optional KeywordCache shared across calls

    Returns:
        Up to `limit` documents, most similar first. Ties keep corpus order.
    """
    if reference is None or not corpus or limit <= 0:
        return []

    # Every copy of the reference is excluded, not only the first
    candidates = [doc for doc in corpus if doc.id != reference.id]

    ranked = rank_by_score(
        candidates,
        lambda doc: similarity(reference, doc, cache=cache),
    )

    logger.debug(
        f"Recommendations for {reference.id}: scored {len(candidates)} candidates, "
        f"returning {min(limit, len(ranked))}"
    )

    return [item.document for item in ranked[:limit]]
