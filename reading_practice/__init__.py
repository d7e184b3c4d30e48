"""Read-aloud practice: transcript alignment, scoring and highlighted playback."""
from .errors import (
    ReadingPracticeError,
    RecognitionError,
    RecognitionErrorKind,
    RecognitionUnsupported,
    SynthesisError,
)
from .models.reference_text import ReferenceText
from .scorer.rules import ScoringStrategy
from .session import ReadingSession

__all__ = [
    "ReadingPracticeError",
    "ReadingSession",
    "RecognitionError",
    "RecognitionErrorKind",
    "RecognitionUnsupported",
    "ReferenceText",
    "ScoringStrategy",
    "SynthesisError",
]
