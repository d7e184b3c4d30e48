"""Errors raised or reported by read-aloud practice."""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ReadingPracticeError(Exception):
    """Base class for read-aloud practice errors."""


class RecognitionUnsupported(ReadingPracticeError):
    """The host has no speech-to-text capability."""

    def __init__(self, message: str = "Speech recognition is not supported on this device."):
        super().__init__(message)


class RecognitionErrorKind(str, Enum):
    PERMISSION_DENIED = "permission-denied"
    NO_SPEECH = "no-speech"
    NETWORK = "network"
    OTHER = "other"


# Host error codes -> error kind; unknown codes map to OTHER
_HOST_CODES = {
    "not-allowed": RecognitionErrorKind.PERMISSION_DENIED,
    "service-not-allowed": RecognitionErrorKind.PERMISSION_DENIED,
    "permission-denied": RecognitionErrorKind.PERMISSION_DENIED,
    "no-speech": RecognitionErrorKind.NO_SPEECH,
    "network": RecognitionErrorKind.NETWORK,
}

_MESSAGES = {
    RecognitionErrorKind.PERMISSION_DENIED: "Microphone access was denied.",
    RecognitionErrorKind.NO_SPEECH: "No speech was detected. Please try again and speak clearly.",
    RecognitionErrorKind.NETWORK: "A network error interrupted speech recognition. Check your connection.",
    RecognitionErrorKind.OTHER: "Speech recognition failed. Please try again.",
}

PERMISSION_REMEDIATION = (
    "Allow microphone access for this app in your browser or system settings, "
    "then reload the page."
)


def classify_recognition_error(code: str) -> RecognitionErrorKind:
    return _HOST_CODES.get((code or "").strip().lower(), RecognitionErrorKind.OTHER)


class RecognitionError(ReadingPracticeError):
    """A recognition session failed.

    Attributes:
        kind: Classified error kind
        code: Raw host error code
    """

    def __init__(self, kind: RecognitionErrorKind, code: str = "", detail: str = ""):
        self.kind = kind
        self.code = code
        self.detail = detail
        super().__init__(self.message)

    @classmethod
    def from_code(cls, code: str, detail: str = "") -> "RecognitionError":
        return cls(classify_recognition_error(code), code=code, detail=detail)

    @property
    def message(self) -> str:
        return _MESSAGES[self.kind]

    @property
    def remediation(self) -> Optional[str]:
        if self.kind is RecognitionErrorKind.PERMISSION_DENIED:
            return PERMISSION_REMEDIATION
        return None


class SynthesisError(ReadingPracticeError):
    """Playback failed. Logged only; the learner sees playback stop."""

    def __init__(self, code: str = ""):
        self.code = code
        super().__init__(f"Speech synthesis failed: {code or 'unknown error'}")
