"""Speech recognition and synthesis capabilities."""
from .events import (
    RecognitionAlternative,
    RecognitionEndEvent,
    RecognitionErrorEvent,
    RecognitionResult,
    RecognitionResultEvent,
    SynthesisBoundaryEvent,
    SynthesisEndEvent,
    SynthesisErrorEvent,
    SynthesisStartEvent,
)
from .interfaces import SpeechRecognizer, SpeechSynthesizer, Voice, select_voice

__all__ = [
    "RecognitionAlternative",
    "RecognitionEndEvent",
    "RecognitionErrorEvent",
    "RecognitionResult",
    "RecognitionResultEvent",
    "SpeechRecognizer",
    "SpeechSynthesizer",
    "SynthesisBoundaryEvent",
    "SynthesisEndEvent",
    "SynthesisErrorEvent",
    "SynthesisStartEvent",
    "Voice",
    "select_voice",
]
