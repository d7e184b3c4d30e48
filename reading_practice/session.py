"""Read-aloud practice session.

Owns one reference text, one recognizer handle and one synthesizer handle.
Host callbacks are delivered to handle_recognition_event() and
handle_synthesis_event(); state is updated synchronously on receipt, and at
most one of listening and playback is active at any time.
"""
from __future__ import annotations

import itertools
import logging
from typing import Any, Dict, FrozenSet, List, Optional, Set

from reading_practice import config
from reading_practice.alignment.matcher import match_transcript
from reading_practice.errors import RecognitionError, RecognitionUnsupported, SynthesisError
from reading_practice.highlight.synchronizer import HighlightSynchronizer
from reading_practice.models.playback import PlaybackState
from reading_practice.models.reference_text import ReferenceText
from reading_practice.models.transcript import TranscriptState
from reading_practice.report import build_report
from reading_practice.scorer.rules import ScoringStrategy
from reading_practice.scorer.scoring import confidence_score, match_score, speaking_level
from reading_practice.scorer.suggestions import generate_suggestions
from reading_practice.speech.events import (
    RecognitionEndEvent,
    RecognitionErrorEvent,
    RecognitionEvent,
    RecognitionResultEvent,
    SynthesisBoundaryEvent,
    SynthesisEndEvent,
    SynthesisErrorEvent,
    SynthesisEvent,
    SynthesisStartEvent,
)
from reading_practice.speech.interfaces import (
    RecognizerFactory,
    SpeechRecognizer,
    SpeechSynthesizer,
    SynthesizerFactory,
    select_voice,
)

logger = logging.getLogger(__name__)


class ReadingSession:
    """Listening, scoring and highlighted playback for one reference text.

    Use as a context manager so the speech handles are released on every exit
    path:

        with ReadingSession(story, make_recognizer, make_synthesizer) as session:
            session.start_listening()
            ...
    """

    def __init__(
        self,
        reference: ReferenceText,
        recognizer_factory: Optional[RecognizerFactory] = None,
        synthesizer_factory: Optional[SynthesizerFactory] = None,
        strategy: Optional[ScoringStrategy] = None,
    ):
        self.reference = reference
        self.strategy = ScoringStrategy(strategy or config.SCORING_STRATEGY)
        self.highlighter = HighlightSynchronizer(reference.words)

        self.transcript = TranscriptState()
        self.playback = PlaybackState()
        self.listening = False
        self.score: Optional[int] = None
        self.suggestions: List[str] = []
        self.error: Optional[RecognitionError] = None

        self._matched: Set[int] = set()
        self._closed = False
        self._generations = itertools.count(1)
        self._listen_generation: Optional[int] = None
        self._speak_generation: Optional[int] = None

        self._recognizer: Optional[SpeechRecognizer] = recognizer_factory() if recognizer_factory else None
        self._synthesizer: Optional[SpeechSynthesizer] = synthesizer_factory() if synthesizer_factory else None

        if self._recognizer is not None:
            self._recognizer.language = config.SPEECH_LANGUAGE
            self._recognizer.continuous = True
            self._recognizer.interim_results = True
            self._recognizer.bind(self.handle_recognition_event)
        else:
            logger.info("Speech recognition unavailable; reading score disabled")

        if self._synthesizer is not None:
            self._synthesizer.bind(self.handle_synthesis_event)

    # ------------------------------------------------------------------
    # Scoped resource handling
    # ------------------------------------------------------------------
    def __enter__(self) -> "ReadingSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Cancel any activity and release both speech handles. Idempotent."""
        if self._closed:
            return
        self._closed = True
        try:
            self._discard_listening()
            self._cancel_playback()
        finally:
            for handle in (self._recognizer, self._synthesizer):
                if handle is None:
                    continue
                handle.unbind()
                handle.dispose()
            self._recognizer = None
            self._synthesizer = None
            logger.debug("Reading session for %r closed", self.reference.title)

    @property
    def closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # Capabilities
    # ------------------------------------------------------------------
    @property
    def recognition_supported(self) -> bool:
        return self._recognizer is not None

    @property
    def synthesis_supported(self) -> bool:
        return self._synthesizer is not None

    # ------------------------------------------------------------------
    # Listening
    # ------------------------------------------------------------------
    def start_listening(self) -> None:
        """Start a new listening session, cancelling playback first.

        Raises:
            RecognitionUnsupported: if the host has no recognizer
        """
        if self._recognizer is None:
            raise RecognitionUnsupported()
        if self.listening:
            return

        self._cancel_playback()

        self.transcript.reset()
        self._matched = set()
        self.score = None
        self.suggestions = []
        self.error = None

        self.listening = True
        self._listen_generation = next(self._generations)
        try:
            self._recognizer.start(self._listen_generation)
        except Exception:
            self.listening = False
            logger.warning("Speech recognition failed to start for %r", self.reference.title, exc_info=True)
            raise
        logger.debug("Listening started for %r", self.reference.title)

    def stop_listening(self) -> None:
        """Stop listening and finalize the score. No-op when not listening."""
        self._cancel_listening()

    def handle_recognition_event(self, event: RecognitionEvent) -> None:
        if not _is_current(event, self._listen_generation):
            logger.debug("Dropping stale recognition event %r", event)
            return
        if isinstance(event, RecognitionResultEvent):
            if not self.listening:
                return
            self.transcript.update(event.results)
            # Matches only accumulate during a session
            self._matched |= match_transcript(self.reference.words, self.transcript.text)
        elif isinstance(event, RecognitionEndEvent):
            if self.listening:
                self._end_listening()
        elif isinstance(event, RecognitionErrorEvent):
            if not self.listening:
                return
            self.error = RecognitionError.from_code(event.code, event.message)
            logger.warning(
                "Speech recognition error %r (%s): %s",
                event.code, self.error.kind.value, event.message,
            )
            self._end_listening()
        else:
            raise TypeError(f"Unknown recognition event: {event!r}")

    def _cancel_listening(self) -> None:
        if not self.listening:
            return
        self._end_listening()
        if self._recognizer is not None:
            self._recognizer.stop()

    def _discard_listening(self) -> None:
        if not self.listening:
            return
        self.listening = False
        if self._recognizer is not None:
            self._recognizer.stop()

    def _end_listening(self) -> None:
        self.listening = False
        self._finalize()

    def _finalize(self) -> None:
        """Derive the score and suggestions once per listening session."""
        if self.strategy is ScoringStrategy.CONFIDENCE:
            if not self.transcript.confidences:
                return
            score = confidence_score(self.transcript.confidences)
        else:
            if not self.transcript.has_content:
                return
            score = match_score(len(self._matched), self.reference.word_count)

        if score is None:
            return

        self.score = score
        self.suggestions = generate_suggestions(
            score,
            self.transcript.mean_confidence,
            len(self.transcript.text),
            len(self.reference.content),
        )
        logger.info(
            "Reading score for %r: %d (%s, %d/%d words)",
            self.reference.title, score, self.strategy.value,
            len(self._matched), self.reference.word_count,
        )

    # ------------------------------------------------------------------
    # Playback
    # ------------------------------------------------------------------
    def speak(self) -> None:
        """Read the reference text aloud with live highlighting.

        Cancels listening first. No-op without a synthesizer, for an empty
        text, or while playback is already active.
        """
        if self._synthesizer is None or not self.reference.content.strip() or self.playback.active:
            return

        self._cancel_listening()

        self._synthesizer.cancel()
        self.playback.active = True
        self.playback.current_word_index = None
        self._speak_generation = next(self._generations)
        voice = select_voice(self._synthesizer.voices())
        self._synthesizer.speak(
            self.reference.content,
            voice=voice,
            rate=config.SPEECH_RATE,
            language=config.SPEECH_LANGUAGE,
            generation=self._speak_generation,
        )

    def stop_playback(self) -> None:
        """Stop playback. No-op when nothing is playing."""
        self._cancel_playback()

    def handle_synthesis_event(self, event: SynthesisEvent) -> None:
        if not _is_current(event, self._speak_generation):
            logger.debug("Dropping stale synthesis event %r", event)
            return
        if isinstance(event, SynthesisStartEvent):
            if self.playback.active:
                self.playback.current_word_index = None
        elif isinstance(event, SynthesisBoundaryEvent):
            if self.playback.active:
                self.playback.current_word_index = self.highlighter.word_index_at(event.char_index)
        elif isinstance(event, SynthesisEndEvent):
            self.playback.clear()
        elif isinstance(event, SynthesisErrorEvent):
            if self.playback.active:
                logger.debug("%s", SynthesisError(event.code))
            self.playback.clear()
        else:
            raise TypeError(f"Unknown synthesis event: {event!r}")

    def _cancel_playback(self) -> None:
        if not self.playback.active:
            return
        self.playback.clear()
        if self._synthesizer is not None:
            self._synthesizer.cancel()

    # ------------------------------------------------------------------
    # Reset and results
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Stop everything and clear transcript, score and highlight."""
        self._discard_listening()
        self._cancel_playback()
        self.transcript.reset()
        self._matched = set()
        self.score = None
        self.suggestions = []
        self.error = None

    @property
    def matched_indices(self) -> FrozenSet[int]:
        return frozenset(self._matched)

    @property
    def correct_count(self) -> int:
        return len(self._matched)

    @property
    def total_words(self) -> int:
        return self.reference.word_count

    @property
    def level(self) -> Optional[str]:
        return speaking_level(self.score)

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error else None

    def report(self) -> Dict[str, Any]:
        """Per-word status plus summary for the last finished session."""
        return build_report(self)


def _is_current(event, generation: Optional[int]) -> bool:
    # Events without a token come from adapters that cannot tell activities apart
    token = getattr(event, "generation", None)
    return token is None or token == generation
