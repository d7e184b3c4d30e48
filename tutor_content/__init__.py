"""Content generation and tutoring chat backed by a chat-completions API."""
from .chat import TutorChat, is_end_request
from .client import ContentClient
from .errors import GenerationFailure
from .flow import FlowState, PracticeFlow
from .schemas import (
    ChatMessage,
    Exercise,
    ExerciseCategory,
    ExerciseListItem,
    Feedback,
    MessageRole,
    Story,
)

__all__ = [
    "ChatMessage",
    "ContentClient",
    "Exercise",
    "ExerciseCategory",
    "ExerciseListItem",
    "Feedback",
    "FlowState",
    "GenerationFailure",
    "MessageRole",
    "PracticeFlow",
    "Story",
    "TutorChat",
    "is_end_request",
]
