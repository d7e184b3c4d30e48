"""The passage a learner reads aloud."""
from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import List

from reading_practice.alignment.tokenizer import index_words
from .word import Word


@dataclass(frozen=True)
class ReferenceText:
    """Immutable reference passage with its word boundary table.

    The table is computed on first access and reused for the lifetime of the
    instance by both the matcher and the highlight synchronizer.
    """
    title: str
    content: str

    @cached_property
    def words(self) -> List[Word]:
        return index_words(self.content)

    @property
    def word_count(self) -> int:
        return len(self.words)
