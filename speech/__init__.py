"""Speech-to-text for uploaded audio."""

from .errors import TranscriptionError
from .recognizer import ENGINES, SpeechTranscriber, Transcriber


__all__ = [
    "SpeechTranscriber",
    "Transcriber",
    "TranscriptionError",
    "ENGINES",
]
