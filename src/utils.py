"""Utility functions for the ranking engine"""

import hashlib
from typing import Optional


def calculate_content_hash(*parts: Optional[str]) -> str:
    """
    Calculate SHA256 hash of text content

    Parts are joined with a NUL separator so ("ab", "c") and ("a", "bc")
    hash differently. None is hashed as an empty string.

    Args:
        parts: Text fields to hash (e.g. title, preview)

    Returns:
        Hexadecimal hash string (64 characters)

    Examples:
        >>> calculate_content_hash("Delhi Monsoon Diaries", "Rain again")
        '5c1f...'
    """
    content = "\0".join(part or "" for part in parts)
    return hashlib.sha256(content.encode("utf-8")).hexdigest()
