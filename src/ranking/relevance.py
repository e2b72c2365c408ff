"""
Multi-factor relevance scoring of a document against a search query.

Per query term, points are accumulated over three lower-cased fields:

    Title (only the highest applicable tier fires):
        exact equality      +100
        starts with term     +50
        whole-word match     +30
        substring match      +15

    Preview (independent of the title tier):
        whole-word match     +10
        substring match       +5

    Full text (optional field, absent = empty):
        whole-word match      +3
        substring match       +1

    Frequency bonus (always applied):
        title_occurrences × 5 + preview_occurrences × 2

The document score is the sum over all terms. A term matching nothing
contributes 0, so scores are always non-negative.
"""

from typing import Iterable

from .matching import contains_whole_word, count_occurrences
from .models import Document


class RelevanceScorer:
    """
    Weighted tiered relevance scoring.

    Weights default to the production values; they are constructor arguments
    only so tests and experiments can isolate individual factors.
    """

    def __init__(
        self,
        title_exact: float = 100,
        title_prefix: float = 50,
        title_word: float = 30,
        title_substring: float = 15,
        preview_word: float = 10,
        preview_substring: float = 5,
        full_text_word: float = 3,
        full_text_substring: float = 1,
        title_frequency: float = 5,
        preview_frequency: float = 2,
    ):
        self.title_exact = title_exact
        self.title_prefix = title_prefix
        self.title_word = title_word
        self.title_substring = title_substring
        self.preview_word = preview_word
        self.preview_substring = preview_substring
        self.full_text_word = full_text_word
        self.full_text_substring = full_text_substring
        self.title_frequency = title_frequency
        self.preview_frequency = preview_frequency

    def _title_points(self, title: str, term: str) -> float:
        if title == term:
            return self.title_exact
        if title.startswith(term):
            return self.title_prefix
        if contains_whole_word(title, term):
            return self.title_word
        if term in title:
            return self.title_substring
        return 0.0

    @staticmethod
    def _field_points(text: str, term: str, word: float, substring: float) -> float:
        if contains_whole_word(text, term):
            return word
        if term in text:
            return substring
        return 0.0

    def score(self, document: Document, search_terms: Iterable[str]) -> float:
        """
        Compute relevance of a document for the given search terms.

        Args:
            document: Document to score
            search_terms: Query terms (lowercase, non-empty); empty terms are
                skipped and terms are lowercased defensively

        Returns:
            Relevance score (higher = more relevant, 0.0 = no match)

        Example:
            >>> scorer = RelevanceScorer()
            >>> scorer.score(Document(id="1", title="Hello", preview_text="", ...), ["hello"])
            105.0  # exact title match (100) + one title occurrence (5)
        """
        title = document.title.lower()
        preview = document.preview_text.lower()
        full_text = (document.full_text or "").lower()

        score = 0.0

        for term in search_terms:
            term = term.lower()
            if not term:
                continue

            score += self._title_points(title, term)
            score += self._field_points(
                preview, term, self.preview_word, self.preview_substring
            )
            score += self._field_points(
                full_text, term, self.full_text_word, self.full_text_substring
            )

            score += (
                count_occurrences(title, term) * self.title_frequency
                + count_occurrences(preview, term) * self.preview_frequency
            )

        return score


_default_scorer = RelevanceScorer()


def relevance(document: Document, search_terms: Iterable[str]) -> float:
    """Score a document with the default weights (see RelevanceScorer.score)"""
    return _default_scorer.score(document, search_terms)
