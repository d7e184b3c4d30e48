"""Capability interfaces for host speech recognition and synthesis.

Host speech APIs are injected as handles with an explicit lifecycle instead
of being reached through globals:

- create: a factory returns a handle, or None when the host lacks the capability
- bind/unbind: register the single listener that receives events
- start/speak and stop/cancel: drive the activity
- dispose: release the handle

Listeners are invoked by the host audio subsystem, never synchronously from
start() or speak(). Each start() and speak() call carries a generation token
that the adapter echoes on the events of that activity, so late events from a
cancelled activity can be told apart from those of its replacement.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .events import RecognitionEvent, SynthesisEvent

RecognitionListener = Callable[[RecognitionEvent], None]
SynthesisListener = Callable[[SynthesisEvent], None]


@dataclass(frozen=True)
class Voice:
    name: str
    language: str


class SpeechRecognizer(ABC):
    """Speech-to-text handle."""

    language: str = "en-US"
    continuous: bool = True
    interim_results: bool = True

    @abstractmethod
    def bind(self, listener: RecognitionListener) -> None:
        ...

    @abstractmethod
    def unbind(self) -> None:
        ...

    @abstractmethod
    def start(self, generation: Optional[int] = None) -> None:
        ...

    @abstractmethod
    def stop(self) -> None:
        """Stop recognition. Calling stop when already stopped is a no-op."""

    @abstractmethod
    def dispose(self) -> None:
        ...


class SpeechSynthesizer(ABC):
    """Text-to-speech handle."""

    @abstractmethod
    def voices(self) -> List[Voice]:
        ...

    @abstractmethod
    def bind(self, listener: SynthesisListener) -> None:
        ...

    @abstractmethod
    def unbind(self) -> None:
        ...

    @abstractmethod
    def speak(
        self,
        text: str,
        voice: Optional[Voice] = None,
        rate: Optional[float] = None,
        language: Optional[str] = None,
        generation: Optional[int] = None,
    ) -> None:
        ...

    @abstractmethod
    def cancel(self) -> None:
        """Cancel any queued or current utterance. No-op when idle."""

    @abstractmethod
    def dispose(self) -> None:
        ...


RecognizerFactory = Callable[[], Optional[SpeechRecognizer]]
SynthesizerFactory = Callable[[], Optional[SpeechSynthesizer]]

# Substrings of voice names that identify the preferred (female) English voices
PREFERRED_VOICE_HINTS = ("female", "zira", "samantha")


def select_voice(voices: Sequence[Voice], language_prefix: str = "en") -> Optional[Voice]:
    """Pick the voice used for read-aloud playback.

    Prefers an English voice whose name hints at a female voice, then any
    English voice. Returns None when no English voice is installed.
    """
    english = [v for v in voices if v.language.startswith(language_prefix)]
    for voice in english:
        name = voice.name.lower()
        if any(hint in name for hint in PREFERRED_VOICE_HINTS):
            return voice
    return english[0] if english else None
