"""Final score computation for a listening session."""
from __future__ import annotations

import math
import statistics
from typing import Optional, Sequence

from .rules import DEFAULT_LEVEL_LABEL, LEVEL_LABELS


def round_half_up(x: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return int(math.floor(x + 0.5))


def match_score(matched_count: int, total_words: int) -> Optional[int]:
    """Share of reference words matched, as an integer percentage in [0, 100].

    Returns None for a reference without words.
    """
    if total_words <= 0:
        return None
    return round_half_up(matched_count / total_words * 100)


def confidence_score(confidences: Sequence[float]) -> Optional[int]:
    """Mean recognizer confidence as an integer percentage.

    Example: [0.9, 0.8, 1.0] -> 90
    """
    if not confidences:
        return None
    return round_half_up(statistics.fmean(confidences) * 100)


def speaking_level(score: Optional[int]) -> Optional[str]:
    """Map a score to the label shown next to it."""
    if score is None:
        return None
    for threshold in sorted(LEVEL_LABELS, reverse=True):
        if score >= threshold:
            return LEVEL_LABELS[threshold]
    return DEFAULT_LEVEL_LABEL
