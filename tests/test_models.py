from fakes import result_event
from reading_practice.errors import RecognitionError, RecognitionErrorKind, classify_recognition_error
from reading_practice.models.reference_text import ReferenceText
from reading_practice.models.transcript import TranscriptState
from reading_practice.speech import RecognitionResult, RecognitionResultEvent, Voice, select_voice


def test_reference_words_are_cached():
    ref = ReferenceText("T", "one two one")
    assert ref.words is ref.words
    assert ref.word_count == 3


def test_transcript_concatenates_results_and_keeps_final_confidences():
    state = TranscriptState()
    event = result_event(("Hello there.", 0.8), (" General", 0.6))
    state.update(event.results)
    assert state.text == "Hello there. General"
    assert state.confidences == [0.8, 0.6]


def test_transcript_ignores_interim_confidence_and_empty_results():
    state = TranscriptState()
    results = result_event(("done", 0.9)).results + result_event((" going", 0.2), final=False).results
    results += (RecognitionResult(()),)
    state.update(RecognitionResultEvent(results).results)
    assert state.text == "done going"
    assert state.confidences == [0.9]
    assert state.mean_confidence == 0.9


def test_transcript_reset():
    state = TranscriptState(text="x", confidences=[0.3])
    state.reset()
    assert state.text == "" and state.confidences == []
    assert state.mean_confidence is None
    assert not state.has_content


def test_select_voice_prefers_female_english_voice():
    voices = [Voice("Daniel", "en-GB"), Voice("Samantha", "en-US"), Voice("Amélie", "fr-CA")]
    assert select_voice(voices) == Voice("Samantha", "en-US")


def test_select_voice_falls_back_to_any_english_voice():
    assert select_voice([Voice("Thomas", "fr-FR"), Voice("Daniel", "en-GB")]) == Voice("Daniel", "en-GB")
    assert select_voice([Voice("Thomas", "fr-FR")]) is None


def test_classify_recognition_error():
    assert classify_recognition_error("not-allowed") is RecognitionErrorKind.PERMISSION_DENIED
    assert classify_recognition_error("service-not-allowed") is RecognitionErrorKind.PERMISSION_DENIED
    assert classify_recognition_error("No-Speech") is RecognitionErrorKind.NO_SPEECH
    assert classify_recognition_error("network") is RecognitionErrorKind.NETWORK
    assert classify_recognition_error("audio-capture") is RecognitionErrorKind.OTHER
    assert classify_recognition_error("") is RecognitionErrorKind.OTHER


def test_each_error_kind_has_distinct_message():
    messages = {RecognitionError(kind).message for kind in RecognitionErrorKind}
    assert len(messages) == len(RecognitionErrorKind)
    assert str(RecognitionError.from_code("network")) == RecognitionError(RecognitionErrorKind.NETWORK).message
