"""Scoring strategies, thresholds and tip texts for read-aloud practice."""
from __future__ import annotations

from enum import Enum


class ScoringStrategy(str, Enum):
    # Share of reference words matched in reading order
    MONOTONIC = "monotonic"
    # Mean recognizer confidence over finalized segments
    CONFIDENCE = "confidence"


# Score bands (lower bounds, inclusive) used for suggestions and levels
EXCELLENT_SCORE = 90
GREAT_SCORE = 75
GOOD_SCORE = 60

# Below this mean confidence the recording itself is suspect
LOW_CONFIDENCE = 0.5

# Transcript shorter than this share of the reference means the passage was not finished
MIN_COMPLETENESS_RATIO = 0.3

MAX_SUGGESTIONS = 4

LEVEL_LABELS = {
    EXCELLENT_SCORE: "Excellent!",
    GREAT_SCORE: "Great!",
    GOOD_SCORE: "Good",
}
DEFAULT_LEVEL_LABEL = "Keep Practicing"

LOW_SCORE_TIPS = (
    "Speak clearly and slow down your pace so each word can be recognized.",
    "Pause briefly between words you find difficult instead of rushing through them.",
)
FAIR_SCORE_TIPS = (
    "Raise your volume a little and keep it steady through the whole sentence.",
    "Stress the key syllables and enunciate word endings fully.",
)
GOOD_SCORE_TIPS = (
    "Work on your intonation: let your voice rise and fall naturally with the sentence.",
    "Read with more expression, as if telling the story to a friend.",
)
EXCELLENT_SCORE_TIPS = (
    "Excellent reading! Your pronunciation is clear and easy to follow.",
    "Try a longer or more challenging story next.",
)
MICROPHONE_TIP = "Check your microphone and try reading in a quieter place."
COMPLETENESS_TIP = "Try to read the whole passage from start to finish."
