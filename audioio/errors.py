"""Custom exceptions for audio decoding and validation."""

from typing import Any


class AudioIOError(Exception):
    """Base exception for all audio I/O errors.
    
    Attributes:
        message: Human-readable error description.
        code: Short error code string (e.g., "INVALID_AUDIO").
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


class AudioDecodeError(AudioIOError):
    """Raised when uploaded audio cannot be decoded.
    
    Common codes:
        - EMPTY_FILE: Upload has zero bytes.
        - INVALID_AUDIO: Bytes are not in a format soundfile can read.
        - EMPTY_AUDIO: Decoded audio has no frames.
    """


class AudioValidationError(AudioIOError):
    """Raised when decoded audio is unsuitable for transcription.
    
    Common codes:
        - TOO_SHORT: Duration below minimum threshold.
        - TOO_LONG: Duration exceeds maximum threshold.
        - NON_FINITE: Samples contain NaN or Inf values.
        - SILENCE: Audio is near-silent (RMS below threshold).
    """
