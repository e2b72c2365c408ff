"""
Data model for the ranking engine.

Documents are supplied by the caller for the duration of one ranking call;
the engine never mutates or stores them.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional


@dataclass(frozen=True)
class Document:
    """A rankable text document"""
    id: str
    title: str
    preview_text: str
    author_id: str
    created_at: datetime
    full_text: Optional[str] = None  # Only needed for full-text relevance

    @property
    def keyword_source(self) -> str:
        """Text used for keyword extraction (title + preview)"""
        return f"{self.title} {self.preview_text}"


@dataclass
class ScoredResult:
    """Document paired with its score (discarded after sorting)"""
    document: Document
    score: float


@dataclass
class SearchResult:
    """Ranked search output plus flags reported to the caller"""
    results: List[Document] = field(default_factory=list)
    has_query: bool = False
    has_results: bool = False


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with aware ones"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def rank_by_score(
    documents: Iterable[Document],
    score_fn: Callable[[Document], float],
) -> List[ScoredResult]:
    """
    Score documents and sort them descending.

    sorted() is stable, also with reverse=True, so documents with equal
    scores keep their input order (first seen wins).
    """
    scored = [ScoredResult(document=doc, score=score_fn(doc)) for doc in documents]
    return sorted(scored, key=lambda item: item.score, reverse=True)
