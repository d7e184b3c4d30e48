import pytest

from fakes import FakeRecognizer, FakeSynthesizer
from reading_practice.models.reference_text import ReferenceText


@pytest.fixture
def calls():
    return []


@pytest.fixture
def recognizer(calls):
    return FakeRecognizer(calls)


@pytest.fixture
def synthesizer(calls):
    return FakeSynthesizer(calls)


@pytest.fixture
def story():
    return ReferenceText(
        title="The Market",
        content="Ali went to the market. He bought apples, bread and milk. Then he walked home.",
    )
