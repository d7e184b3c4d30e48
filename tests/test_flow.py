from unittest.mock import MagicMock

import pytest

from tutor_content import (
    ContentClient,
    Exercise,
    ExerciseCategory,
    ExerciseListItem,
    Feedback,
    FlowState,
    GenerationFailure,
    MessageRole,
    PracticeFlow,
    TutorChat,
    is_end_request,
)
from tutor_content import catalog
from tutor_content.chat import OPENING_MESSAGE, system_instruction
from tutor_content.flow import SEND_FAILED_MESSAGE, START_FAILED_MESSAGE


@pytest.fixture
def client():
    client = MagicMock(spec=ContentClient)
    client.complete_chat.return_value = "Welcome! Let's practice."
    client.get_feedback.return_value = Feedback(score=88, grammar="g", vocabulary="v", fluency="f")
    return client


TOPIC = ExerciseListItem(title="Your hometown", description="Describe where you grew up.")


def test_catalog_has_builtin_grammar_and_vocabulary():
    grammar = catalog.list_exercises(ExerciseCategory.GRAMMAR)
    vocabulary = catalog.list_exercises(ExerciseCategory.VOCABULARY)
    assert len(grammar) == 10 and len(vocabulary) == 10
    assert catalog.list_exercises(ExerciseCategory.CONVERSATION) == []

    exercise = catalog.get_exercise(ExerciseCategory.GRAMMAR, "Modal Verbs")
    assert exercise.category is ExerciseCategory.GRAMMAR
    assert "can" in exercise.example
    assert catalog.get_exercise(ExerciseCategory.GRAMMAR, "Unknown") is None


@pytest.mark.parametrize(
    "text, expected",
    [("OK I'm done now", True), ("Please give me feedback", True), ("That's all!", True),
     ("I'm doing fine", False), ("stop", False)],
)
def test_is_end_request(text, expected):
    assert is_end_request(text) is expected


def test_system_instruction_depends_on_category():
    conversation = catalog.conversation_exercise(TOPIC)
    assert "conversational partner" in system_instruction(conversation)
    grammar = catalog.get_exercise(ExerciseCategory.GRAMMAR, "Future Tense")
    instruction = system_instruction(grammar)
    assert "English tutor" in instruction and "Future Tense" in instruction


def test_tutor_chat_keeps_history(client):
    chat = TutorChat(client, catalog.conversation_exercise(TOPIC))
    assert chat.start() == "Welcome! Let's practice."
    assert [m.text for m in chat.history] == [OPENING_MESSAGE, "Welcome! Let's practice."]
    assert [m.role for m in chat.history] == [MessageRole.USER, MessageRole.MODEL]


def test_tutor_chat_rolls_back_failed_turn(client):
    chat = TutorChat(client, catalog.conversation_exercise(TOPIC))
    client.complete_chat.side_effect = GenerationFailure("Failed to send message to AI.")
    with pytest.raises(GenerationFailure):
        chat.send("Hello")
    assert chat.history == []


def test_builtin_category_does_not_call_service(client):
    flow = PracticeFlow(client)
    flow.select_category(ExerciseCategory.VOCABULARY)
    assert flow.state is FlowState.LIST
    assert flow.exercises[0].title == "Daily Activities"
    client.generate_exercise_list.assert_not_called()


def test_conversation_flow_to_feedback(client):
    client.generate_exercise_list.return_value = [TOPIC]
    flow = PracticeFlow(client)

    flow.select_category(ExerciseCategory.CONVERSATION)
    assert flow.state is FlowState.LIST
    flow.select_exercise(TOPIC)
    assert flow.state is FlowState.CHAT
    assert flow.exercise.category is ExerciseCategory.CONVERSATION
    assert [m.text for m in flow.messages] == ["Welcome! Let's practice."]

    client.complete_chat.return_value = "Tell me more!"
    assert flow.send("I grew up in Lahore.") == "Tell me more!"
    assert [m.role for m in flow.messages] == [MessageRole.MODEL, MessageRole.USER, MessageRole.MODEL]

    assert flow.send("I'm done") is None
    assert flow.state is FlowState.FEEDBACK
    assert flow.feedback.score == 88
    # Feedback is based on what the learner saw, without the hidden opener
    history = client.get_feedback.call_args.args[0]
    assert OPENING_MESSAGE not in [m.text for m in history]


def test_end_without_learner_messages_goes_back(client):
    flow = PracticeFlow(client)
    flow.select_category(ExerciseCategory.GRAMMAR)
    flow.select_exercise(flow.exercises[0])
    flow.end_conversation()
    assert flow.state is FlowState.CATEGORY
    client.get_feedback.assert_not_called()


def test_end_keywords_only_apply_to_conversation(client):
    flow = PracticeFlow(client)
    flow.select_category(ExerciseCategory.GRAMMAR)
    flow.select_exercise(flow.exercises[0])
    flow.send("that's all I know")
    assert flow.state is FlowState.CHAT
    assert flow.messages[-2].text == "that's all I know"


def test_exercise_list_failure_returns_to_categories(client):
    client.generate_exercise_list.side_effect = GenerationFailure("Failed to generate Conversation exercises from AI.")
    flow = PracticeFlow(client)
    flow.select_category(ExerciseCategory.CONVERSATION)
    assert flow.state is FlowState.CATEGORY
    assert flow.error == "Failed to generate Conversation exercises from AI."

    client.generate_exercise_list.side_effect = None
    client.generate_exercise_list.return_value = [TOPIC]
    flow.select_category(ExerciseCategory.CONVERSATION)
    assert flow.state is FlowState.LIST
    assert flow.error is None


def test_start_failure_shows_apology(client):
    client.complete_chat.side_effect = GenerationFailure("Failed to send message to AI.")
    flow = PracticeFlow(client)
    flow.select_category(ExerciseCategory.GRAMMAR)
    flow.select_exercise(flow.exercises[0])
    assert flow.state is FlowState.CHAT
    assert flow.messages[-1].text == START_FAILED_MESSAGE


def test_send_failure_shows_apology(client):
    flow = PracticeFlow(client)
    flow.select_category(ExerciseCategory.GRAMMAR)
    flow.select_exercise(flow.exercises[0])
    client.complete_chat.side_effect = GenerationFailure("Failed to send message to AI.")
    assert flow.send("Hello") is None
    assert [m.text for m in flow.messages[-2:]] == ["Hello", SEND_FAILED_MESSAGE]


def test_unknown_builtin_exercise_sets_error(client):
    flow = PracticeFlow(client)
    flow.select_category(ExerciseCategory.GRAMMAR)
    flow.select_exercise(ExerciseListItem(title="Nope", description="?"))
    assert flow.state is FlowState.LIST
    assert flow.error == "Exercise not found"


def test_blank_message_is_ignored(client):
    flow = PracticeFlow(client)
    flow.select_category(ExerciseCategory.GRAMMAR)
    flow.select_exercise(flow.exercises[0])
    client.complete_chat.reset_mock()
    assert flow.send("   ") is None
    client.complete_chat.assert_not_called()
