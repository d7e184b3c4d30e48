"""Events emitted by speech recognizers and synthesizers.

Hosts deliver these through the listener bound to a capability handle. Every
event is a plain immutable value so fakes and real adapters can share them.

`generation` echoes the token passed to start() or speak() for the activity
that produced the event. Adapters that cannot tell activities apart leave it
as None.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class RecognitionAlternative:
    transcript: str
    confidence: float = 0.0


@dataclass(frozen=True)
class RecognitionResult:
    """One recognition segment with its ranked alternatives."""
    alternatives: Tuple[RecognitionAlternative, ...]
    is_final: bool = False

    @property
    def best(self) -> Optional[RecognitionAlternative]:
        return self.alternatives[0] if self.alternatives else None


@dataclass(frozen=True)
class RecognitionResultEvent:
    """All results of the current recognition session, oldest first."""
    results: Tuple[RecognitionResult, ...] = field(default_factory=tuple)
    generation: Optional[int] = None


@dataclass(frozen=True)
class RecognitionEndEvent:
    generation: Optional[int] = None


@dataclass(frozen=True)
class RecognitionErrorEvent:
    code: str
    message: str = ""
    generation: Optional[int] = None


@dataclass(frozen=True)
class SynthesisStartEvent:
    generation: Optional[int] = None


@dataclass(frozen=True)
class SynthesisBoundaryEvent:
    char_index: int
    generation: Optional[int] = None


@dataclass(frozen=True)
class SynthesisEndEvent:
    generation: Optional[int] = None


@dataclass(frozen=True)
class SynthesisErrorEvent:
    code: str = ""
    generation: Optional[int] = None


RecognitionEvent = Union[RecognitionResultEvent, RecognitionEndEvent, RecognitionErrorEvent]
SynthesisEvent = Union[SynthesisStartEvent, SynthesisBoundaryEvent, SynthesisEndEvent, SynthesisErrorEvent]
