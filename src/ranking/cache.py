"""
Optional keyword memoization for high call volumes.

The engine recomputes keyword sets on every call by default. A KeywordCache
can be passed to similarity()/recommend() to reuse them across calls.

Entries are keyed by document id and a SHA256 hash of the keyword source
(title + preview), so editing a document invalidates its entry on the next
lookup. The cache is owned by the caller; the engine never creates one.
"""

import logging
import threading
from collections import OrderedDict
from typing import FrozenSet, Tuple

from ..utils import calculate_content_hash
from .models import Document
from .tokenizer import extract_keywords

logger = logging.getLogger(__name__)


class KeywordCache:
    """
    Thread-safe LRU cache of document keyword sets.

    One entry per document id; a stale entry (content hash mismatch) is
    replaced rather than kept alongside the new one.
    """

    def __init__(self, max_size: int = 10000):
        """
        Args:
            max_size: Maximum number of cached documents (oldest evicted first)
        """
        if max_size < 1:
            raise ValueError(f"max_size must be >= 1, got {max_size}")
        self.max_size = max_size
        self._entries: "OrderedDict[str, Tuple[str, FrozenSet[str]]]" = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, document: Document) -> FrozenSet[str]:
        """Return keywords for document, computing them on a miss"""
        content_hash = calculate_content_hash(document.title, document.preview_text)

        with self._lock:
            entry = self._entries.get(document.id)
            if entry is not None and entry[0] == content_hash:
                self._entries.move_to_end(document.id)
                self.hits += 1
                return entry[1]
            self.misses += 1

        keywords = extract_keywords(document.keyword_source)

        with self._lock:
            self._entries[document.id] = (content_hash, keywords)
            self._entries.move_to_end(document.id)
            while len(self._entries) > self.max_size:
                evicted_id, _ = self._entries.popitem(last=False)
                logger.debug(f"Evicted keywords for document {evicted_id}")

        return keywords

    def invalidate(self, document_id: str) -> bool:
        """Drop a document's entry. Returns True if one existed."""
        with self._lock:
            return self._entries.pop(document_id, None) is not None

    def clear(self):
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, document_id: str) -> bool:
        with self._lock:
            return document_id in self._entries
