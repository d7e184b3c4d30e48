"""Improvement suggestions derived from a finished reading session."""
from __future__ import annotations

from typing import List, Optional

from .rules import (
    COMPLETENESS_TIP,
    EXCELLENT_SCORE,
    EXCELLENT_SCORE_TIPS,
    FAIR_SCORE_TIPS,
    GOOD_SCORE,
    GOOD_SCORE_TIPS,
    GREAT_SCORE,
    LOW_CONFIDENCE,
    LOW_SCORE_TIPS,
    MAX_SUGGESTIONS,
    MICROPHONE_TIP,
    MIN_COMPLETENESS_RATIO,
)


def generate_suggestions(
    score: int,
    mean_confidence: Optional[float],
    transcript_length: int,
    reference_length: int,
) -> List[str]:
    """Generate short, actionable tips for the learner.

    Order: score band tips, then the microphone tip (mean confidence below
    0.5), then the completeness tip (transcript under 30% of the reference
    length). The list is capped at four entries.

    Args:
        score: Final session score in [0, 100]
        mean_confidence: Mean recognizer confidence, or None if none was reported
        transcript_length: Length of the final transcript in characters
        reference_length: Length of the reference text in characters
    """
    suggestions: List[str] = []

    if score < GOOD_SCORE:
        suggestions.extend(LOW_SCORE_TIPS)
    elif score < GREAT_SCORE:
        suggestions.extend(FAIR_SCORE_TIPS)
    elif score < EXCELLENT_SCORE:
        suggestions.extend(GOOD_SCORE_TIPS)
    else:
        suggestions.extend(EXCELLENT_SCORE_TIPS)

    if mean_confidence is not None and mean_confidence < LOW_CONFIDENCE:
        suggestions.append(MICROPHONE_TIP)

    if reference_length > 0 and transcript_length / reference_length < MIN_COMPLETENESS_RATIO:
        suggestions.append(COMPLETENESS_TIP)

    return suggestions[:MAX_SUGGESTIONS]
