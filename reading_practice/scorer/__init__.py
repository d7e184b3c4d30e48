"""Scoring and feedback for read-aloud practice."""
from .rules import ScoringStrategy
from .scoring import confidence_score, match_score, round_half_up, speaking_level
from .suggestions import generate_suggestions

__all__ = [
    "ScoringStrategy",
    "confidence_score",
    "generate_suggestions",
    "match_score",
    "round_half_up",
    "speaking_level",
]
