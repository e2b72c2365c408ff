"""
Unit tests for related-content recommendations.
"""

import pytest
from src.ranking import KeywordCache
from src.ranking.recommender import recommend, DEFAULT_RECOMMEND_LIMIT


class TestRecommend:
    """Test recommendation ranking"""

    def test_related_post_ranks_first(self, monsoon_corpus):
        """Test shared keywords + same author beat an unrelated post"""
        doc1, doc2, doc3 = monsoon_corpus
        results = recommend(doc1, monsoon_corpus, 2)
        assert [doc.id for doc in results] == ["doc2", "doc3"]

    def test_reference_excluded(self, monsoon_corpus):
        doc1 = monsoon_corpus[0]
        results = recommend(doc1, monsoon_corpus, 10)
        assert doc1 not in results
        assert len(results) == 2

    def test_reference_appearing_twice_excluded(self, monsoon_corpus):
        doc1 = monsoon_corpus[0]
        corpus = monsoon_corpus + [doc1]
        results = recommend(doc1, corpus, 10)
        assert all(doc.id != "doc1" for doc in results)

    def test_missing_reference(self, monsoon_corpus):
        assert recommend(None, monsoon_corpus) == []

    def test_empty_corpus(self, monsoon_corpus):
        assert recommend(monsoon_corpus[0], []) == []

    @pytest.mark.parametrize("limit", [0, -1])
    def test_non_positive_limit(self, monsoon_corpus, limit):
        assert recommend(monsoon_corpus[0], monsoon_corpus, limit) == []

    def test_default_limit(self, make_document):
        reference = make_document(id="ref", title="Monsoon")
        corpus = [make_document(id=f"doc{i}", title="Monsoon") for i in range(6)]
        results = recommend(reference, corpus)
        assert len(results) == DEFAULT_RECOMMEND_LIMIT == 3

    def test_ties_keep_corpus_order(self, make_document):
        """Test stable sort: equal scores keep input order"""
        reference = make_document(id="ref", title="Monsoon Diaries")
        first = make_document(id="b", title="Monsoon Diaries")
        second = make_document(id="a", title="Monsoon Diaries")
        results = recommend(reference, [first, second])
        assert [doc.id for doc in results] == ["b", "a"]

    def test_documents_without_keywords_rank_last(self, make_document):
        reference = make_document(id="ref", title="Delhi Monsoon")
        empty = make_document(id="empty", title="It is so")
        related = make_document(id="related", title="Monsoon", author_id="other", days=300)
        results = recommend(reference, [empty, related])
        assert [doc.id for doc in results] == ["related", "empty"]

    def test_with_cache(self, monsoon_corpus):
        cache = KeywordCache()
        doc1 = monsoon_corpus[0]
        cached = recommend(doc1, monsoon_corpus, 2, cache=cache)
        assert cached == recommend(doc1, monsoon_corpus, 2)
        assert len(cache) == 3

    def test_corpus_not_mutated(self, monsoon_corpus):
        original = list(monsoon_corpus)
        recommend(monsoon_corpus[0], monsoon_corpus)
        assert monsoon_corpus == original
