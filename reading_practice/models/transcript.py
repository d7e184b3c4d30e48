"""Mutable state of a listening session."""
from __future__ import annotations

import statistics
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from reading_practice.speech.events import RecognitionResult


@dataclass
class TranscriptState:
    """Latest transcript and per-final-segment confidences.

    Attributes:
        text: Concatenation of every finalized and interim result received so far
        confidences: One value in [0, 1] per finalized recognition segment
    """
    text: str = ""
    confidences: List[float] = field(default_factory=list)

    def reset(self) -> None:
        self.text = ""
        self.confidences = []

    def update(self, results: Sequence[RecognitionResult]) -> None:
        """Replace the state with the full result list of a recognizer event.

        Recognizers report every result of the session on each event, so the
        transcript is rebuilt rather than appended to.
        """
        parts: List[str] = []
        confidences: List[float] = []
        for result in results:
            best = result.best
            if best is None:
                continue
            parts.append(best.transcript)
            if result.is_final:
                confidences.append(_clamp01(best.confidence))
        self.text = "".join(parts)
        self.confidences = confidences

    @property
    def mean_confidence(self) -> Optional[float]:
        if not self.confidences:
            return None
        return statistics.fmean(self.confidences)

    @property
    def has_content(self) -> bool:
        return len(self.text) > 0


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, float(x)))
