"""Assemble practice results from a diff and convert them to/from JSON records."""
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional

from .errors import ResultFormatError
from .models.diff_entry import DiffEntry, DiffType
from .models.practice_result import PracticeMode, PracticeResult, RecordingInfo
from .scorer.scoring import score


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def build_practice_result(
    material_id: uuid.UUID,
    original_text: str,
    recognized_text: str,
    diff_entries: Iterable[DiffEntry],
    recording: Optional[RecordingInfo] = None,
    *,
    result_id: Optional[uuid.UUID] = None,
    created_at: Optional[datetime] = None,
) -> PracticeResult:
    """Build the immutable result of one attempt.

    Counters are tallied from the diff; scores come from the scoring engine,
    so a stored result always agrees with a fresh comparison of the same diff.

    Args:
        material_id: Material the attempt was made against
        original_text: Raw reference text
        recognized_text: Raw recognized text
        diff_entries: Alignment output
        recording: Recording metadata (url/duration/type)
        result_id: Identity to use instead of a fresh UUID
        created_at: Creation time to use instead of now (UTC)

    Returns:
        PracticeResult snapshot
    """
    entries = tuple(diff_entries)
    counts = {kind: 0 for kind in DiffType}
    for entry in entries:
        counts[entry.type] += 1

    correct = counts[DiffType.CORRECT]
    incorrect = counts[DiffType.INCORRECT]
    missing = counts[DiffType.MISSING]
    scores = score(entries)

    return PracticeResult(
        id=result_id or uuid.uuid4(),
        created_at=created_at or _utc_now(),
        material_id=material_id,
        original_text=original_text,
        recognized_text=recognized_text,
        recording=recording or RecordingInfo(),
        diff_entries=entries,
        # extra words are excluded from the total
        total_words=correct + incorrect + missing,
        correct_words=correct,
        incorrect_words=incorrect,
        missing_words=missing,
        extra_words=counts[DiffType.EXTRA],
        accuracy_score=scores.accuracy,
        fluency_score=scores.fluency,
        overall_score=scores.overall,
    )


def practice_result_to_dict(result: PracticeResult, *, include_derived: bool = False) -> Dict[str, Any]:
    """Encode a result as a JSON-compatible record (camelCase keys, ISO-8601 dates).

    With include_derived, the read-only metrics (grade, rates, WPM) are added
    for presentation; they are ignored when decoding.
    """
    record: Dict[str, Any] = {
        "id": str(result.id),
        "createdAt": result.created_at.isoformat(),
        "materialId": str(result.material_id),
        "originalText": result.original_text,
        "recognizedText": result.recognized_text,
        "recordingURL": result.recording.url,
        "duration": result.recording.duration,
        "practiceType": result.recording.practice_type.value,
        "wordAnalysis": [entry.to_dict() for entry in result.diff_entries],
        "totalWords": result.total_words,
        "correctWords": result.correct_words,
        "incorrectWords": result.incorrect_words,
        "missingWords": result.missing_words,
        "extraWords": result.extra_words,
        "accuracyScore": result.accuracy_score,
        "fluencyScore": result.fluency_score,
        "overallScore": result.overall_score,
    }
    if include_derived:
        record.update(
            {
                "grade": result.grade,
                "accuracyRate": result.accuracy_rate,
                "wordErrorRate": result.word_error_rate,
                "wordsPerMinute": result.words_per_minute,
            }
        )
    return record


def _parse_datetime(value: str) -> datetime:
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _parse_entry(raw: Dict[str, Any]) -> DiffEntry:
    return DiffEntry(word=str(raw["word"]), type=DiffType(raw["type"]), position=int(raw["position"]))


def practice_result_from_dict(data: Dict[str, Any]) -> PracticeResult:
    """Decode a record produced by ``practice_result_to_dict``.

    Stored counters and scores are taken as-is; nothing is recomputed.

    Raises:
        ResultFormatError: On missing keys, bad values, or counters that break
            correct + incorrect + missing == total
    """
    try:
        result = PracticeResult(
            id=uuid.UUID(data["id"]),
            created_at=_parse_datetime(data["createdAt"]),
            material_id=uuid.UUID(data["materialId"]),
            original_text=data["originalText"],
            recognized_text=data["recognizedText"],
            recording=RecordingInfo(
                url=data.get("recordingURL"),
                duration=float(data.get("duration", 0.0)),
                practice_type=PracticeMode(data.get("practiceType", PracticeMode.READING.value)),
            ),
            diff_entries=tuple(_parse_entry(raw) for raw in data.get("wordAnalysis", [])),
            total_words=int(data["totalWords"]),
            correct_words=int(data["correctWords"]),
            incorrect_words=int(data["incorrectWords"]),
            missing_words=int(data["missingWords"]),
            extra_words=int(data["extraWords"]),
            accuracy_score=float(data["accuracyScore"]),
            fluency_score=float(data["fluencyScore"]),
            overall_score=float(data["overallScore"]),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise ResultFormatError(f"Malformed practice result record: {exc!r}") from exc

    if result.correct_words + result.incorrect_words + result.missing_words != result.total_words:
        raise ResultFormatError(
            f"Inconsistent word counters in result {result.id}: "
            f"{result.correct_words} + {result.incorrect_words} + {result.missing_words} "
            f"!= {result.total_words}"
        )
    return result
