"""Data models exchanged with the content service."""
from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, Field, TypeAdapter


class MessageRole(str, Enum):
    USER = "user"
    MODEL = "model"


class ExerciseCategory(str, Enum):
    GRAMMAR = "Grammar"
    VOCABULARY = "Vocabulary"
    CONVERSATION = "Conversation"


class Story(BaseModel):
    title: str
    content: str


class ExerciseListItem(BaseModel):
    title: str
    description: str


class Exercise(BaseModel):
    category: ExerciseCategory
    title: str
    description: str
    example: str = ""


class ChatMessage(BaseModel):
    id: str
    role: MessageRole
    text: str


class Feedback(BaseModel):
    score: int = Field(ge=0, le=100)
    grammar: str
    vocabulary: str
    fluency: str


StoryList = TypeAdapter(List[Story])
ExerciseList = TypeAdapter(List[ExerciseListItem])
