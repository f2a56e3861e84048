"""
File utilities for the practice API.
Handles naming and placement of uploaded recordings.
"""

import datetime
import os
import tempfile
import uuid
from pathlib import Path

UPLOAD_DIR = Path(os.getenv("SHADOWING_UPLOAD_DIR", Path(tempfile.gettempdir()) / "shadowing_uploads"))


def generate_recording_filename(practice_type: str, extension: str = 'wav') -> str:
    """
    Generate a unique filename for an uploaded recording.

    Args:
        practice_type: reading or shadowing
        extension: File extension (default: wav)

    Returns:
        Filename in format: {practice_type}_{YYYYMMDD}_{HHMMSS}_{uuid8}.{ext}

    Example:
        >>> generate_recording_filename('reading')
        'reading_20260131_143022_a3b4c5d6.wav'
    """
    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    unique_id = str(uuid.uuid4())[:8]
    return f"{practice_type}_{timestamp}_{unique_id}.{extension}"


def get_upload_filepath(practice_type: str, original_filename: str = '') -> str:
    """
    Get a full path for saving an uploaded recording, keeping its extension.

    Args:
        practice_type: reading or shadowing
        original_filename: Name the client sent, used only for the extension

    Returns:
        Absolute path inside UPLOAD_DIR
    """
    os.makedirs(UPLOAD_DIR, exist_ok=True)
    extension = Path(original_filename).suffix.lstrip('.') or 'wav'
    return str(UPLOAD_DIR / generate_recording_filename(practice_type, extension))


def remove_upload(path: str) -> None:
    """Delete a temporary upload if it is still there."""
    if path and os.path.exists(path):
        os.remove(path)
