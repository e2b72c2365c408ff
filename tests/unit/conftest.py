"""Unit test configuration - shared document fixtures"""

import os
import tempfile
from datetime import datetime, timedelta, timezone

import pytest

# Set env vars BEFORE any test imports src.main
# main.py reads settings and configures logging at module level (on import)
os.environ.setdefault(
    "LOG_FILE",
    os.path.join(tempfile.gettempdir(), "content-ranking-tests", "content-ranking.log"),
)
os.environ.setdefault("LOG_LEVEL", "WARNING")

BASE_TIME = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def base_time():
    """Fixed reference instant for time-dependent scores"""
    return BASE_TIME


@pytest.fixture
def make_document():
    """
    Factory for Document instances with sensible defaults.

    `days` / `hours` offset created_at from BASE_TIME (negative = older).
    """
    from src.ranking import Document

    def _make(
        id="doc",
        title="",
        preview_text="",
        author_id="author",
        days=0.0,
        hours=0.0,
        full_text=None,
    ):
        return Document(
            id=id,
            title=title,
            preview_text=preview_text,
            author_id=author_id,
            created_at=BASE_TIME + timedelta(days=days, hours=hours),
            full_text=full_text,
        )

    return _make


@pytest.fixture
def monsoon_corpus(make_document):
    """Two related Delhi monsoon posts by one author and an unrelated recipe"""
    return [
        make_document(id="doc1", title="Delhi Monsoon Diaries", author_id="A", days=0),
        make_document(id="doc2", title="Monsoon Stories From Delhi", author_id="A", days=2),
        make_document(id="doc3", title="A Recipe for Biryani", author_id="B", days=1),
    ]
