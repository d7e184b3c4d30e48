"""Playback state for synthesized read-aloud."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class PlaybackState:
    active: bool = False
    current_word_index: Optional[int] = None

    def clear(self) -> None:
        self.active = False
        self.current_word_index = None
