"""Exercise selection -> chat -> feedback flow of the tutoring mode."""
from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from . import catalog
from .chat import TutorChat, is_end_request, new_message
from .client import ContentClient
from .errors import GenerationFailure
from .schemas import ChatMessage, Exercise, ExerciseCategory, ExerciseListItem, Feedback, MessageRole

logger = logging.getLogger(__name__)

START_FAILED_MESSAGE = "Sorry, I couldn't start the exercise. Please go back and try again."
SEND_FAILED_MESSAGE = "Sorry, something went wrong. Please try again."


class FlowState(str, Enum):
    CATEGORY = "category"
    LIST = "list"
    CHAT = "chat"
    FEEDBACK = "feedback"


class PracticeFlow:
    """State machine behind the tutoring screens.

    Collaborator failures never escape: selection errors land in `error`
    (the learner retries by repeating the action), chat errors are appended
    to `messages` as tutor apologies.
    """

    def __init__(self, client: ContentClient):
        self.client = client
        self.state = FlowState.CATEGORY
        self.category: Optional[ExerciseCategory] = None
        self.exercises: List[ExerciseListItem] = []
        self.exercise: Optional[Exercise] = None
        self.chat: Optional[TutorChat] = None
        self.messages: List[ChatMessage] = []
        self.feedback: Optional[Feedback] = None
        self.error: Optional[str] = None

    def select_category(self, category: ExerciseCategory) -> None:
        category = ExerciseCategory(category)
        self.category = category
        self.exercises = []
        self.error = None
        try:
            if catalog.has_builtin_exercises(category):
                self.exercises = catalog.list_exercises(category)
            else:
                self.exercises = self.client.generate_exercise_list(category)
        except GenerationFailure as e:
            self.error = str(e)
            self.category = None
            self.state = FlowState.CATEGORY
            return
        self.state = FlowState.LIST

    def select_exercise(self, item: ExerciseListItem) -> None:
        if self.category is None:
            return
        self.error = None
        try:
            exercise = self._exercise_details(item)
        except GenerationFailure as e:
            self.error = str(e)
            return

        self.exercise = exercise
        self.chat = TutorChat(self.client, exercise)
        self.messages = []
        self.feedback = None
        self.state = FlowState.CHAT

        try:
            reply = self.chat.start()
        except GenerationFailure as e:
            logger.error("Failed to start conversation: %s", e)
            self.messages.append(new_message(MessageRole.MODEL, START_FAILED_MESSAGE))
            return
        self.messages.append(new_message(MessageRole.MODEL, reply))

    def _exercise_details(self, item: ExerciseListItem) -> Exercise:
        if self.category is ExerciseCategory.CONVERSATION:
            return catalog.conversation_exercise(item)
        if catalog.has_builtin_exercises(self.category):
            exercise = catalog.get_exercise(self.category, item.title)
            if exercise is None:
                raise GenerationFailure("Exercise not found")
            return exercise
        return self.client.get_exercise_details(item.title, item.description, self.category)

    def send(self, text: str) -> Optional[str]:
        """Send a learner message; returns the tutor reply, if any."""
        text = text.strip()
        if not text or self.chat is None or self.state is not FlowState.CHAT:
            return None

        if self.exercise.category is ExerciseCategory.CONVERSATION and is_end_request(text):
            self.end_conversation()
            return None

        self.messages.append(new_message(MessageRole.USER, text))
        try:
            reply = self.chat.send(text)
        except GenerationFailure as e:
            logger.error("Error sending message: %s", e)
            self.messages.append(new_message(MessageRole.MODEL, SEND_FAILED_MESSAGE))
            return None
        self.messages.append(new_message(MessageRole.MODEL, reply))
        return reply

    def end_conversation(self) -> None:
        """Request feedback, or leave the chat if the learner never spoke."""
        if not any(m.role is MessageRole.USER for m in self.messages):
            self.go_back()
            return
        self.feedback = self.client.get_feedback(self.messages)
        self.state = FlowState.FEEDBACK

    def go_back(self) -> None:
        self.state = FlowState.CATEGORY
        self.category = None
        self.exercises = []
        self.exercise = None
        self.chat = None
        self.messages = []
        self.feedback = None
        self.error = None
