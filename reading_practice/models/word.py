"""Data model for a word of the reference text."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Word:
    """A whitespace-delimited token of the reference text.

    Attributes:
        text: The token as it appears in the text, punctuation included
        start_offset: Character offset of the token's first character
        index: Position of the token in the word sequence
    """
    text: str
    start_offset: int
    index: int
