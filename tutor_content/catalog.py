"""
Built-in exercise catalog.

Grammar and Vocabulary exercises ship with the package; Conversation topics
are generated on demand and turned into exercises locally.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional

from .schemas import Exercise, ExerciseCategory, ExerciseListItem

DATA_DIR = Path(__file__).resolve().parent / "data"
EXERCISES_FILE = DATA_DIR / "exercises.json"

CONVERSATION_DESCRIPTION = "Freely discuss this topic. When you're done, say 'I'm done' to get feedback."
CONVERSATION_EXAMPLE = "You can start by sharing your first thoughts on the topic."


@lru_cache(maxsize=1)
def load_catalog() -> Dict[str, List[Dict]]:
    """Load the exercise catalog from JSON file."""
    if not EXERCISES_FILE.exists():
        return {}

    with open(EXERCISES_FILE, "r", encoding="utf-8") as f:
        return json.load(f)


def has_builtin_exercises(category: ExerciseCategory) -> bool:
    return bool(load_catalog().get(ExerciseCategory(category).value))


def list_exercises(category: ExerciseCategory) -> List[ExerciseListItem]:
    """Get the built-in topics for a category (empty for Conversation)."""
    entries = load_catalog().get(ExerciseCategory(category).value, [])
    return [ExerciseListItem(title=e["title"], description=e["summary"]) for e in entries]


def get_exercise(category: ExerciseCategory, title: str) -> Optional[Exercise]:
    """Get a built-in exercise by title."""
    category = ExerciseCategory(category)
    for entry in load_catalog().get(category.value, []):
        if entry.get("title") == title:
            return Exercise(
                category=category,
                title=entry["title"],
                description=entry["description"],
                example=entry.get("example", ""),
            )
    return None


def conversation_exercise(item: ExerciseListItem) -> Exercise:
    """Turn a generated conversation topic into an exercise."""
    return Exercise(
        category=ExerciseCategory.CONVERSATION,
        title=item.title,
        description=CONVERSATION_DESCRIPTION,
        example=CONVERSATION_EXAMPLE,
    )
