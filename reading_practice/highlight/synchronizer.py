"""Map synthesizer boundary offsets to reference word indices."""
from __future__ import annotations

from typing import Optional, Sequence

from reading_practice.models.word import Word


class HighlightSynchronizer:
    """Resolves the word being spoken from a character offset.

    Boundary events arrive in increasing offset order, so the table is scanned
    from the end: the match is almost always one of the last entries.
    """

    def __init__(self, words: Sequence[Word]):
        self._words = list(words)

    def word_index_at(self, char_index: int) -> Optional[int]:
        """Index of the last word whose start offset is <= char_index.

        Returns None for an offset before the first word or an empty table.
        """
        for word in reversed(self._words):
            if char_index >= word.start_offset:
                return word.index
        return None

    def __len__(self) -> int:
        return len(self._words)
