"""Runtime configuration for read-aloud practice, read from the environment."""
import os

from reading_practice.scorer.rules import ScoringStrategy

# Scoring strategy used by new sessions: "monotonic" or "confidence"
SCORING_STRATEGY = ScoringStrategy(os.getenv("READING_SCORING_STRATEGY", ScoringStrategy.MONOTONIC.value))

# Language tag for both recognition and playback
SPEECH_LANGUAGE = os.getenv("READING_LANGUAGE", "en-US")

# Playback rate for read-aloud (1.0 is the host default)
SPEECH_RATE = float(os.getenv("READING_SPEECH_RATE", "0.85"))
