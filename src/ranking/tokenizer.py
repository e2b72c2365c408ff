"""
Keyword extraction for document similarity.

Tokenization pipeline:
1. Lowercase conversion
2. Replace everything except ASCII letters and whitespace with a space
   (digits are dropped, not kept: "web3" → "web")
3. Split on runs of whitespace
4. Drop short tokens (length <= 3)
5. Filter stopwords
6. Return a set (duplicates collapse)

No stemming: "stories" and "story" are distinct keywords.
"""

import re
from typing import FrozenSet, Optional

MIN_KEYWORD_LENGTH = 4

# Pronouns, articles, conjunctions, auxiliary verbs and common function words.
# Most are shorter than MIN_KEYWORD_LENGTH anyway; the list is kept complete
# so the length threshold can change without leaking them.
STOPWORDS = frozenset([
    'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for',
    'of', 'with', 'by', 'from', 'is', 'it', 'that', 'this', 'was', 'were',
    'are', 'be', 'been', 'being', 'have', 'has', 'had', 'do', 'does', 'did',
    'will', 'would', 'could', 'should', 'may', 'might', 'must', 'shall',
    'i', 'you', 'he', 'she', 'we', 'they', 'my', 'your', 'his', 'her', 'our',
    'their', 'its', 'who', 'what', 'when', 'where', 'why', 'how', 'which',
    'as', 'if', 'so', 'than', 'very', 'just', 'about', 'into', 'through',
])

_NON_LETTER = re.compile(r'[^a-z\s]')


def extract_keywords(text: Optional[str]) -> FrozenSet[str]:
    """
    Extract significant keywords from text.

    Args:
        text: Raw text (title, preview, ...). None is treated as empty.

    Returns:
        Set of lowercase keywords without stopwords

    Examples:
        >>> sorted(extract_keywords("Delhi Monsoon Diaries"))
        ['delhi', 'diaries', 'monsoon']

        >>> sorted(extract_keywords("Web3 is THE future!"))
        ['future']

        >>> extract_keywords("")
        frozenset()
    """
    if not text:
        return frozenset()

    text = _NON_LETTER.sub(' ', text.lower())

    return frozenset(
        token for token in text.split()
        if len(token) >= MIN_KEYWORD_LENGTH and token not in STOPWORDS
    )
