"""Speech recognition integration (external service client)."""
from .recognizer import transcribe_audio

__all__ = ["transcribe_audio"]
