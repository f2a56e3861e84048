import logging
import uuid
from collections.abc import Mapping

from flask import Flask, jsonify, request

from api.file_utils import get_upload_filepath, remove_upload
from shadowing.asr.recognizer import transcribe_audio
from shadowing.comparison import compare_texts
from shadowing.config import load_options
from shadowing.errors import (
    ConfigurationError,
    MissingTranscriptError,
    PracticeError,
    RecognitionFailedError,
    RecognitionUnavailableError,
    RecordingError,
    ResultFormatError,
)
from shadowing.history import calculate_statistics
from shadowing.models.practice_result import PracticeMode, RecordingInfo
from shadowing.pipeline import evaluate_attempt, evaluate_recording
from shadowing.report import practice_result_from_dict, practice_result_to_dict

logger = logging.getLogger(__name__)

app = Flask(__name__)

# ============================================================================
# ERROR HANDLING
# ============================================================================
ERROR_STATUS = [
    (ConfigurationError, 400),
    (ResultFormatError, 400),
    (RecordingError, 400),
    (MissingTranscriptError, 422),
    (RecognitionFailedError, 502),
    (RecognitionUnavailableError, 503),
]


class BadRequest(PracticeError):
    """Request body is missing or has the wrong shape."""


def status_for(error):
    for error_type, status in ERROR_STATUS:
        if isinstance(error, error_type):
            return status
    if isinstance(error, BadRequest):
        return 400
    return 500


@app.errorhandler(PracticeError)
def handle_practice_error(error):
    status = status_for(error)
    if status >= 500:
        logger.warning("Practice request failed: %s", error)
    body = {"error": str(error), "kind": type(error).__name__}
    if error.recovery_suggestion:
        body["recoverySuggestion"] = error.recovery_suggestion
    return jsonify(body), status


# ============================================================================
# UTILITY
# ============================================================================
def json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequest("Expected a JSON object body")
    return data


def require_text(data, key):
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise BadRequest(f"'{key}' must be a string")
    return value


def parse_material_id(value):
    if not value:
        return uuid.uuid4()
    try:
        return uuid.UUID(str(value))
    except ValueError as e:
        raise BadRequest(f"Invalid materialId: {value!r}") from e


def parse_recording(data):
    """Build RecordingInfo from {url, duration, practiceType}."""
    data = data or {}
    if not isinstance(data, Mapping):
        raise BadRequest("'recording' must be an object")
    try:
        return RecordingInfo(
            url=data.get("url"),
            duration=float(data.get("duration") or 0.0),
            practice_type=PracticeMode(data.get("practiceType") or PracticeMode.READING.value),
        )
    except (TypeError, ValueError) as e:
        raise BadRequest(f"Invalid recording metadata: {e}") from e


# ============================================================================
# ROUTES
# ============================================================================
@app.route('/health')
def health():
    return jsonify({"status": "ok"})


@app.route('/api/compare', methods=['POST'])
def compare():
    """Compare reference text and recognized text; returns tokens, diff and scores."""
    data = json_body()
    options = load_options(data.get("options"))
    result = compare_texts(
        require_text(data, "originalText"),
        require_text(data, "recognizedText"),
        options,
    )
    return jsonify(result.to_dict())


@app.route('/api/evaluate', methods=['POST'])
def evaluate():
    """Evaluate an attempt whose recognized text is already known."""
    data = json_body()
    options = load_options(data.get("options"))
    original_text = data.get("originalText")
    if original_text is not None and not isinstance(original_text, str):
        raise BadRequest("'originalText' must be a string")

    result = evaluate_attempt(
        parse_material_id(data.get("materialId")),
        original_text,
        require_text(data, "recognizedText"),
        recording=parse_recording(data.get("recording")),
        options=options,
    )
    return jsonify(practice_result_to_dict(result, include_derived=True))


@app.route('/api/evaluate/audio', methods=['POST'])
def evaluate_audio():
    """Recognize an uploaded recording, then evaluate it against the reference text."""
    if 'audio' not in request.files:
        raise RecordingError("No audio file")

    file = request.files['audio']
    recording = parse_recording(request.form)
    audio_path = get_upload_filepath(recording.practice_type.value, file.filename or '')

    try:
        file.save(audio_path)
        result = evaluate_recording(
            parse_material_id(request.form.get("materialId")),
            request.form.get("originalText"),
            RecordingInfo(url=audio_path, duration=recording.duration, practice_type=recording.practice_type),
            transcriber=transcribe_audio,
        )
    finally:
        remove_upload(audio_path)

    return jsonify(practice_result_to_dict(result, include_derived=True))


@app.route('/api/statistics', methods=['POST'])
def statistics():
    """Aggregate statistics over a list of stored practice results."""
    data = json_body()
    records = data.get("results")
    if not isinstance(records, list):
        raise BadRequest("'results' must be a list")

    results = [practice_result_from_dict(record) for record in records]
    return jsonify(calculate_statistics(results).to_dict())


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app.run(debug=True, host='0.0.0.0', port=5000)
