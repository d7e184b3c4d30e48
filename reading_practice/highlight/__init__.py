"""Live word highlighting during synthesized playback."""
from .synchronizer import HighlightSynchronizer

__all__ = ["HighlightSynchronizer"]
