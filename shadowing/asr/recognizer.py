"""Client for the external speech-recognition service."""
from __future__ import annotations

import logging
import os
from typing import Optional

import requests

from .. import config
from ..errors import RecognitionFailedError, RecognitionUnavailableError, RecordingError

logger = logging.getLogger(__name__)


def transcribe_audio(
    audio_path: str,
    service_url: Optional[str] = None,
    timeout: Optional[float] = None,
    retries: Optional[int] = None,
) -> str:
    """
    Transcribe a recording with the external recognition service.

    The file is posted as multipart field ``file``; the service answers with
    JSON carrying the transcript under ``text``.

    Args:
        audio_path: Path to the recorded audio file.
        service_url: Endpoint to call (default: SHADOWING_ASR_SERVICE_URL).
        timeout: Per-request timeout in seconds (default: SHADOWING_ASR_TIMEOUT).
        retries: Extra attempts after a connection error or timeout
            (default: SHADOWING_ASR_RETRIES).

    Returns:
        The transcribed text, stripped. May be empty if nothing was said.

    Raises:
        RecordingError: The audio file does not exist.
        RecognitionUnavailableError: The service could not be reached.
        RecognitionFailedError: The service returned an error or bad payload.
    """
    if not os.path.isfile(audio_path):
        raise RecordingError(f"Audio file not found: {audio_path}")

    url = service_url or config.ASR_SERVICE_URL
    timeout = config.ASR_TIMEOUT if timeout is None else timeout
    retries = config.ASR_RETRIES if retries is None else max(0, retries)

    last_error: Optional[Exception] = None
    for attempt in range(retries + 1):
        try:
            with open(audio_path, "rb") as f:
                response = requests.post(url, files={"file": f}, timeout=timeout)
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            last_error = e
            logger.warning("ASR request to %s failed (attempt %d/%d): %s", url, attempt + 1, retries + 1, e)
            continue
        except requests.exceptions.RequestException as e:
            raise RecognitionFailedError(f"ASR request failed: {e}") from e

        if response.status_code != 200:
            raise RecognitionFailedError(
                f"ASR service returned error: {response.status_code} - {response.text}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise RecognitionFailedError("ASR service returned a non-JSON response") from e

        text = data.get("text") if isinstance(data, dict) else None
        if not isinstance(text, str):
            raise RecognitionFailedError("ASR service response has no 'text' field")

        logger.info("Transcribed %s (%d characters)", audio_path, len(text))
        return text.strip()

    raise RecognitionUnavailableError(
        f"Could not connect to ASR service at {url}: {last_error}"
    ) from last_error
