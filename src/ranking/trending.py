"""
Trending ordering by recency decay.

Formula:
    score = exp(-age_hours / 168)

168 is the number of hours in a week: a week-old document scores 1/e of a
brand new one. Scores lie in (0, 1] for documents in the past; documents
dated in the future score above 1 and rank first.
"""

import logging
import math
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from .models import Document, as_utc, rank_by_score

logger = logging.getLogger(__name__)

DECAY_HOURS = 168
DEFAULT_TRENDING_LIMIT = 5

SECONDS_PER_HOUR = 60 * 60
MAX_EXPONENT = 700.0


def trending_score(document: Document, now: datetime) -> float:
    """Recency score of a document relative to `now`"""
    age_hours = (as_utc(now) - as_utc(document.created_at)).total_seconds() / SECONDS_PER_HOUR
    # Capped so far-future dates cannot overflow math.exp
    return math.exp(min(-age_hours / DECAY_HOURS, MAX_EXPONENT))


def trending(
    corpus: Sequence[Document],
    limit: int = DEFAULT_TRENDING_LIMIT,
    now: Optional[datetime] = None,
) -> List[Document]:
    """
    Order documents by recency decay.

    Args:
        corpus: Documents to rank
        limit: Maximum number of documents (<= 0 yields none)
        now: Reference time; defaults to the current UTC time. Captured once
            per call so every document is scored against the same instant.

    Returns:
        Up to `limit` documents, newest first. Ties keep corpus order.
    """
    if not corpus or limit <= 0:
        return []

    if now is None:
        now = datetime.now(timezone.utc)

    ranked = rank_by_score(corpus, lambda doc: trending_score(doc, now))

    logger.debug(f"Trending: ranked {len(ranked)} documents, returning {min(limit, len(ranked))}")

    return [item.document for item in ranked[:limit]]
