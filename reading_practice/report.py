"""Final report for a read-aloud session."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List

if TYPE_CHECKING:
    from reading_practice.session import ReadingSession


def build_report(session: "ReadingSession") -> Dict[str, Any]:
    """Build the per-word report and summary shown after listening stops.

    Returns:
        Dict with 'words' (list of {word, index, status}) and 'summary' (stats dict).
        Word status is "correct" for matched words and "missed" otherwise.
    """
    matched = session.matched_indices
    words: List[Dict[str, Any]] = [
        {
            "word": w.text,
            "index": w.index,
            "status": "correct" if w.index in matched else "missed",
        }
        for w in session.reference.words
    ]

    correct = len(matched)
    summary = {
        "total_words": session.total_words,
        "correct": correct,
        "missed": session.total_words - correct,
        "score": session.score,
        "strategy": session.strategy.value,
        "average_confidence": session.transcript.mean_confidence,
        "level": session.level,
        "suggestions": list(session.suggestions),
    }
    return {"words": words, "summary": summary}
