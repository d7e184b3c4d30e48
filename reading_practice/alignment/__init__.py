"""Alignment utilities for matching reference text to speech transcripts."""
from .matcher import match_transcript, tokenize_transcript
from .normalizer import normalize_spoken_token
from .tokenizer import index_words, split_words

__all__ = [
    "index_words",
    "match_transcript",
    "normalize_spoken_token",
    "split_words",
    "tokenize_transcript",
]
