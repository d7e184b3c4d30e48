"""Monotonic token matching between a live transcript and the reference words."""
from __future__ import annotations

from typing import List, Sequence, Set

from reading_practice.models.word import Word
from .normalizer import normalize_spoken_token
from .tokenizer import split_words


def tokenize_transcript(transcript: str) -> List[str]:
    """Lowercase and split a transcript, dropping tokens that normalize to nothing."""
    tokens: List[str] = []
    for raw in split_words(transcript.lower()):
        normalized = normalize_spoken_token(raw)
        if normalized:
            tokens.append(normalized)
    return tokens


def match_transcript(words: Sequence[Word], transcript: str) -> Set[int]:
    """Return the indices of reference words matched by the transcript.

    Spoken tokens are consumed in order. Each one is matched against the first
    reference word strictly after the last matched word whose normalized text
    is equal to it; tokens with no such word are skipped and leave the pointer
    where it was. Repeating a common word therefore cannot match earlier
    occurrences again.

    Args:
        words: Reference word boundary table
        transcript: Full transcript received so far

    Returns:
        Set of matched reference word indices
    """
    reference = [normalize_spoken_token(w.text) for w in words]
    matched: Set[int] = set()
    last_found = -1

    for spoken in tokenize_transcript(transcript):
        for i in range(last_found + 1, len(reference)):
            if reference[i] == spoken:
                matched.add(words[i].index)
                last_found = i
                break

    return matched
