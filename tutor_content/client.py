"""Chat-completions client for stories, translations, exercises and feedback."""
from __future__ import annotations

import json
import logging
import os
import warnings
from typing import Any, Dict, List, Optional, Sequence

import requests
from pydantic import ValidationError

from .errors import GenerationFailure
from .prompts import (
    CONVERSATION_TOPICS_PROMPT,
    EXERCISE_DETAILS_PROMPT_TEMPLATE,
    EXERCISE_IDEAS_PROMPT_TEMPLATE,
    EXERCISES_SYSTEM_PROMPT,
    FEEDBACK_PROMPT_TEMPLATE,
    FEEDBACK_SYSTEM_PROMPT,
    STORIES_PROMPT,
    STORIES_SYSTEM_PROMPT,
    TRANSLATE_PROMPT_TEMPLATE,
)
from .schemas import (
    ChatMessage,
    Exercise,
    ExerciseCategory,
    ExerciseList,
    ExerciseListItem,
    Feedback,
    MessageRole,
    Story,
    StoryList,
)

logger = logging.getLogger(__name__)

# Configuration for the external chat-completions service
LLM_API_URL = os.getenv("TUTOR_LLM_API_URL", "https://api.openai.com/v1/chat/completions")
LLM_MODEL = os.getenv("TUTOR_LLM_MODEL", "gpt-4o-mini")
LLM_TIMEOUT = float(os.getenv("TUTOR_LLM_TIMEOUT", "30"))

FALLBACK_FEEDBACK = Feedback(
    score=75,
    grammar="Good effort! Keep practicing your grammar.",
    vocabulary="Nice vocabulary usage! Continue expanding your word choices.",
    fluency="Good conversation flow! Keep practicing to improve fluency.",
)


class ContentClient:
    """Thin wrapper over a chat-completions endpoint.

    Every call is a single request; nothing is retried. Failures raise
    GenerationFailure with a message meant for the learner, except
    get_feedback(), which falls back to a default evaluation.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: str = LLM_API_URL,
        model: str = LLM_MODEL,
        timeout: float = LLM_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        api_key = api_key or os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise ValueError("OPENAI_API_KEY environment variable is not set")
        self.api_url = api_url
        self.model = model
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Authorization": f"Bearer {api_key}"})

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------
    def _complete(self, messages: List[Dict[str, str]], json_mode: bool = False) -> str:
        """Send one chat-completions request and return the reply text.

        Raises:
            GenerationFailure: on connection errors, non-200 responses or an empty reply
        """
        payload: Dict[str, Any] = {"model": self.model, "messages": messages}
        if json_mode:
            payload["response_format"] = {"type": "json_object"}

        try:
            response = self.session.post(self.api_url, json=payload, timeout=self.timeout)
        except requests.exceptions.ConnectionError as e:
            logger.error("Could not connect to content service at %s: %s", self.api_url, e)
            raise GenerationFailure("Could not reach the content service.") from e
        except requests.exceptions.RequestException as e:
            logger.error("Content request failed: %s", e)
            raise GenerationFailure("The content request failed.") from e

        if response.status_code != 200:
            logger.error("Content service returned error: %s - %s", response.status_code, response.text)
            raise GenerationFailure(f"The content service returned an error ({response.status_code}).")

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise GenerationFailure("The content service returned an unexpected response.") from e

        if not content:
            raise GenerationFailure("No content in response.")
        return content

    def _complete_json(self, messages: List[Dict[str, str]]) -> Any:
        content = self._complete(messages, json_mode=True)
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            logger.error("Content service returned invalid JSON: %.200s", content)
            raise GenerationFailure("The content service returned invalid JSON.") from e

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def generate_stories(self) -> List[Story]:
        try:
            parsed = self._complete_json([
                {"role": "system", "content": STORIES_SYSTEM_PROMPT},
                {"role": "user", "content": STORIES_PROMPT},
            ])
            return StoryList.validate_python(unwrap_list(parsed, ("stories", "data")))
        except (GenerationFailure, ValidationError) as e:
            logger.error("Error getting reading stories: %s", e)
            raise GenerationFailure("Failed to generate stories from AI.") from e

    def translate(self, text: str) -> str:
        """Translate an Urdu sentence to English."""
        try:
            return self._complete([
                {"role": "user", "content": TRANSLATE_PROMPT_TEMPLATE.format(text=text)},
            ]).strip()
        except GenerationFailure as e:
            logger.error("Error translating text: %s", e)
            raise GenerationFailure("Failed to translate text.") from e

    def generate_exercise_list(self, category: ExerciseCategory) -> List[ExerciseListItem]:
        category = ExerciseCategory(category)
        if category is ExerciseCategory.CONVERSATION:
            prompt = CONVERSATION_TOPICS_PROMPT
        else:
            prompt = EXERCISE_IDEAS_PROMPT_TEMPLATE.format(category=category.value)

        try:
            parsed = self._complete_json([
                {"role": "system", "content": EXERCISES_SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ])
            return ExerciseList.validate_python(unwrap_list(parsed, ("exercises", "topics", "data")))
        except (GenerationFailure, ValidationError) as e:
            logger.error("Error getting %s exercise list: %s", category.value, e)
            raise GenerationFailure(f"Failed to generate {category.value} exercises from AI.") from e

    def get_exercise_details(self, title: str, description: str, category: ExerciseCategory) -> Exercise:
        category = ExerciseCategory(category)
        prompt = EXERCISE_DETAILS_PROMPT_TEMPLATE.format(
            category=category.value, title=title, description=description,
        )
        try:
            parsed = self._complete_json([{"role": "user", "content": prompt}])
            if not isinstance(parsed, dict):
                raise GenerationFailure("Exercise details must be a JSON object.")
            parsed.setdefault("title", title)
            # The requested category wins over whatever the model echoed back
            return Exercise.model_validate({**parsed, "category": category})
        except (GenerationFailure, ValidationError) as e:
            logger.error("Error getting exercise details: %s", e)
            raise GenerationFailure("Failed to generate exercise details from AI.") from e

    def complete_chat(self, system_instruction: str, history: Sequence[ChatMessage]) -> str:
        """Send the tutoring conversation so far and return the tutor's reply."""
        messages = [{"role": "system", "content": system_instruction}]
        messages.extend(
            {
                "role": "user" if msg.role is MessageRole.USER else "assistant",
                "content": msg.text,
            }
            for msg in history
        )
        try:
            return self._complete(messages)
        except GenerationFailure as e:
            logger.error("Error sending message: %s", e)
            raise GenerationFailure("Failed to send message to AI.") from e

    def get_feedback(self, history: Sequence[ChatMessage]) -> Feedback:
        """Evaluate a finished conversation.

        Any failure returns FALLBACK_FEEDBACK instead of raising.
        """
        chat_history = "\n".join(
            f"{'Student' if msg.role is MessageRole.USER else 'Tutor'}: {msg.text}"
            for msg in history
        )
        try:
            parsed = self._complete_json([
                {"role": "system", "content": FEEDBACK_SYSTEM_PROMPT},
                {"role": "user", "content": FEEDBACK_PROMPT_TEMPLATE.format(chat_history=chat_history)},
            ])
            return Feedback.model_validate(parsed)
        except (GenerationFailure, ValidationError) as e:
            warnings.warn(f"Conversation feedback unavailable, using default feedback: {e}")
            return FALLBACK_FEEDBACK.model_copy()


def unwrap_list(parsed: Any, keys: Sequence[str]) -> List[Any]:
    """Extract the item list from a JSON reply.

    Models answer in JSON mode with either a bare array or an object wrapping
    it under one of a few keys.

    Raises:
        GenerationFailure: if no list is found
    """
    if isinstance(parsed, list):
        return parsed
    if isinstance(parsed, dict):
        for key in keys:
            value = parsed.get(key)
            if isinstance(value, list):
                return value
    raise GenerationFailure("Expected a JSON list of items.")
