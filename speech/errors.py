"""Custom exceptions for speech-to-text."""

from typing import Any


class TranscriptionError(Exception):
    """Raised when a speech recognizer cannot produce a transcript.
    
    Common codes:
        - NO_SPEECH: The engine heard nothing it could transcribe.
        - SERVICE_UNAVAILABLE: The engine request failed (network, quota, missing backend).
        - UNREADABLE_AUDIO: The recognizer could not open the WAV data.
        
    Attributes:
        message: Human-readable error description.
        code: Short error code string.
        details: Optional dictionary with additional context.
    """
    
    def __init__(
        self,
        message: str,
        code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
    
    def __str__(self) -> str:
        if self.details:
            return f"[{self.code}] {self.message} (details: {self.details})"
        return f"[{self.code}] {self.message}"
