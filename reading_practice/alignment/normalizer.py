"""Token normalization utilities for alignment."""
from __future__ import annotations

import re


# Punctuation removed from both spoken and reference tokens before comparison
STRIPPED_PUNCTUATION = {".", ",", "!", "?"}

_STRIP_RE = re.compile("[" + re.escape("".join(sorted(STRIPPED_PUNCTUATION))) + "]")


def normalize_spoken_token(token: str) -> str:
    """Normalize a token for comparison between transcript and reference.

    Only . , ! ? are removed. Apostrophes, hyphens and other marks stay in the
    token, so "don't" and "dont" do not match.

    Args:
        token: The token string to normalize

    Returns:
        Normalized token string (lowercase, stripped, punctuation removed)
    """
    token = token.lower().strip()
    return _STRIP_RE.sub("", token)
