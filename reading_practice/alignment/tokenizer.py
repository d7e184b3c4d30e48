"""Reference text tokenization and word boundary indexing."""
from __future__ import annotations

import re
from typing import List

from reading_practice.models.word import Word


def split_words(text: str) -> List[str]:
    """Split text on runs of whitespace.

    Example: "  The cat,  sat. " -> ["The", "cat,", "sat."]

    Punctuation stays attached to its word; blank text yields an empty list.
    """
    stripped = text.strip()
    if not stripped:
        return []
    return re.split(r"\s+", stripped)


def index_words(text: str) -> List[Word]:
    """Build the word boundary table for a reference text.

    Each word's start offset is found with a forward search that begins where
    the previous word ended, so repeated words resolve to successive
    occurrences instead of all pointing at the first one.

    Example: "the cat the dog" -> offsets [0, 4, 8, 12]

    Args:
        text: The raw reference text

    Returns:
        List of Word entries in reading order
    """
    words: List[Word] = []
    cursor = 0
    for index, token in enumerate(split_words(text)):
        start = text.find(token, cursor)
        if start < 0:
            # Only reachable if the tokenizer and the text disagree on whitespace
            raise ValueError(f"Token {token!r} not found after offset {cursor}")
        words.append(Word(text=token, start_offset=start, index=index))
        cursor = start + len(token)
    return words
