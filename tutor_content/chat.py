"""Tutoring conversation around a single exercise."""
from __future__ import annotations

import uuid
from typing import List

from .client import ContentClient
from .prompts import CONVERSATION_SYSTEM_TEMPLATE, TUTOR_SYSTEM_TEMPLATE
from .schemas import ChatMessage, Exercise, ExerciseCategory, MessageRole

OPENING_MESSAGE = "Let's begin."

# Phrases that end a free conversation and request feedback
END_KEYWORDS = (
    "i'm done",
    "give me feedback",
    "end chat",
    "that's all",
    "end conversation",
    "stop now",
)


def system_instruction(exercise: Exercise) -> str:
    if exercise.category is ExerciseCategory.CONVERSATION:
        return CONVERSATION_SYSTEM_TEMPLATE.format(title=exercise.title)
    return TUTOR_SYSTEM_TEMPLATE.format(
        category=exercise.category.value,
        title=exercise.title,
        description=exercise.description,
    )


def is_end_request(text: str) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in END_KEYWORDS)


def new_message(role: MessageRole, text: str) -> ChatMessage:
    return ChatMessage(id=f"{role.value}-{uuid.uuid4().hex[:12]}", role=role, text=text)


class TutorChat:
    """Conversation history sent to the tutor on every turn.

    The history includes the hidden opening message; what the learner sees is
    kept by the caller.
    """

    def __init__(self, client: ContentClient, exercise: Exercise):
        self.client = client
        self.exercise = exercise
        self.instruction = system_instruction(exercise)
        self.history: List[ChatMessage] = []

    def start(self) -> str:
        """Ask the tutor to open the exercise."""
        return self.send(OPENING_MESSAGE)

    def send(self, text: str) -> str:
        """Send a learner turn and return the tutor reply.

        On failure the learner turn is removed again so the same text can be
        resent.

        Raises:
            GenerationFailure: if the tutor did not answer
        """
        turn = new_message(MessageRole.USER, text)
        self.history.append(turn)
        try:
            reply = self.client.complete_chat(self.instruction, self.history)
        except Exception:
            self.history.remove(turn)
            raise
        self.history.append(new_message(MessageRole.MODEL, reply))
        return reply
