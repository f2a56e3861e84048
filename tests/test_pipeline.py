import uuid

import pytest

from shadowing.errors import (
    MissingTranscriptError,
    RecognitionUnavailableError,
    RecordingError,
)
from shadowing.models.practice_result import PracticeMode, RecordingInfo
from shadowing.pipeline import evaluate_attempt, evaluate_recording

MATERIAL_ID = uuid.uuid4()


@pytest.fixture
def audio_file(tmp_path):
    path = tmp_path / "take.wav"
    path.write_bytes(b"RIFF0000WAVE")
    return path


def test_evaluate_attempt_builds_result():
    result = evaluate_attempt(
        MATERIAL_ID,
        "This is a sample text for testing",
        "This is a sample text",
        recording=RecordingInfo(duration=15.5),
    )
    assert result.material_id == MATERIAL_ID
    assert result.missing_words == 2
    assert result.recording.duration == 15.5


@pytest.mark.parametrize("transcript", [None, "", "   "])
def test_missing_transcript_is_rejected(transcript):
    with pytest.raises(MissingTranscriptError):
        evaluate_attempt(MATERIAL_ID, transcript, "hello")


def test_empty_recognition_is_not_an_error():
    result = evaluate_attempt(MATERIAL_ID, "hello world", "")
    assert result.missing_words == 2
    assert result.overall_score == 0.0


def test_evaluate_recording_uses_transcriber(audio_file):
    calls = []

    def fake_transcriber(path):
        calls.append(path)
        return "I do not know"

    recording = RecordingInfo(url=str(audio_file), duration=3.0, practice_type=PracticeMode.SHADOWING)
    result = evaluate_recording(MATERIAL_ID, "I don't know", recording, transcriber=fake_transcriber)

    assert calls == [str(audio_file)]
    assert result.recognized_text == "I do not know"
    assert result.accuracy_score == pytest.approx(100.0)
    assert result.recording.practice_type is PracticeMode.SHADOWING
    assert result.words_per_minute == pytest.approx(4 / (3.0 / 60))


def test_missing_transcript_checked_before_recognition(audio_file):
    def fail(path):
        raise AssertionError("recognizer must not run")

    with pytest.raises(MissingTranscriptError):
        evaluate_recording(MATERIAL_ID, None, RecordingInfo(url=str(audio_file)), transcriber=fail)


@pytest.mark.parametrize("url", [None, "/nonexistent/take.wav"])
def test_inaccessible_recording(url):
    with pytest.raises(RecordingError):
        evaluate_recording(MATERIAL_ID, "hello", RecordingInfo(url=url), transcriber=lambda p: "hello")


def test_recognition_errors_propagate(audio_file):
    def unavailable(path):
        raise RecognitionUnavailableError("service down")

    with pytest.raises(RecognitionUnavailableError):
        evaluate_recording(MATERIAL_ID, "hello", RecordingInfo(url=str(audio_file)), transcriber=unavailable)
