"""Error handling and HTTP mapping for the API.

This module provides:
- API-specific exception classes
- Mapping from internal errors to HTTP status codes
- Exception handlers for FastAPI

Error Code Mapping:
    - AudioDecodeError -> 400 INVALID_AUDIO
    - AudioValidationError -> 422 INVALID_INPUT
    - TranscriptionError (NO_SPEECH) -> 422 NO_SPEECH_RECOGNIZED
    - TranscriptionError (other) -> 502 TRANSCRIPTION_FAILED
    - RequestValidationError -> 422 INVALID_INPUT
    - Generic exceptions -> 500 INTERNAL_ERROR
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from audioio.errors import AudioDecodeError, AudioValidationError
from speech.errors import TranscriptionError

from .schemas import ApiErrorResponse, ErrorDetail


logger = logging.getLogger(__name__)


# =============================================================================
# API Exception Classes
# =============================================================================


class ApiError(Exception):
    """Base exception for API errors.
    
    Attributes:
        status_code: HTTP status code to return.
        code: Machine-readable error code.
        message: Human-readable error message.
        details: Optional additional context.
    """
    
    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details


class InvalidAudioError(ApiError):
    """Raised when audio cannot be decoded or read."""
    
    def __init__(
        self,
        message: str = "Failed to decode audio file",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=400,
            code="INVALID_AUDIO",
            message=message,
            details=details,
        )


class InvalidInputError(ApiError):
    """Raised when input validation fails."""
    
    def __init__(
        self,
        message: str = "Invalid input",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=422,
            code="INVALID_INPUT",
            message=message,
            details=details,
        )


class NoSpeechError(ApiError):
    """Raised when the recognizer heard no intelligible speech."""
    
    def __init__(
        self,
        message: str = "No speech could be recognized",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=422,
            code="NO_SPEECH_RECOGNIZED",
            message=message,
            details=details,
        )


class TranscriptionFailedError(ApiError):
    """Raised when the speech recognition backend fails."""
    
    def __init__(
        self,
        message: str = "Transcription failed",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=502,
            code="TRANSCRIPTION_FAILED",
            message=message,
            details=details,
        )


class InternalError(ApiError):
    """Raised for unexpected internal errors."""
    
    def __init__(
        self,
        message: str = "Internal server error",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=500,
            code="INTERNAL_ERROR",
            message=message,
            details=details,
        )


# =============================================================================
# Error Mapping Functions
# =============================================================================


def map_exception_to_api_error(exc: Exception) -> ApiError:
    """Map internal exceptions to appropriate API errors.
    
    Args:
        exc: The exception raised during processing.
        
    Returns:
        An ApiError subclass with appropriate HTTP status and code.
    """
    if isinstance(exc, ApiError):
        return exc
    
    if isinstance(exc, AudioDecodeError):
        return InvalidAudioError(
            message=exc.message,
            details={"reason": exc.code, **exc.details},
        )
    
    if isinstance(exc, AudioValidationError):
        return InvalidInputError(
            message=exc.message,
            details={"reason": exc.code, **exc.details},
        )
    
    if isinstance(exc, TranscriptionError):
        details = {"reason": exc.code, **exc.details}
        if exc.code == "NO_SPEECH":
            return NoSpeechError(message=exc.message, details=details)
        return TranscriptionFailedError(message=exc.message, details=details)
    
    if isinstance(exc, RequestValidationError):
        return InvalidInputError(
            message="Request validation failed",
            details={"errors": jsonable_encoder(exc.errors())},
        )
    
    return InternalError(
        message=str(exc) or "An unexpected error occurred",
        details={"exception_type": type(exc).__name__},
    )


def create_error_response(api_error: ApiError) -> ApiErrorResponse:
    """Create a structured error response from an API error.
    
    Args:
        api_error: The API error to convert.
        
    Returns:
        ApiErrorResponse with properly structured error details.
    """
    return ApiErrorResponse(
        error=ErrorDetail(
            code=api_error.code,
            message=api_error.message,
            details=api_error.details,
        )
    )


# =============================================================================
# Exception Handlers
# =============================================================================


async def api_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render any exception as the standard error envelope.
    
    Client errors are logged at WARNING, server errors at ERROR with the
    traceback.
    
    Args:
        request: The incoming request.
        exc: The raised exception.
        
    Returns:
        JSONResponse with error details.
    """
    request_id = getattr(request.state, "request_id", "unknown")
    api_error = map_exception_to_api_error(exc)
    
    if api_error.status_code >= 500:
        logger.error(
            "Internal error: code=%s message=%s request_id=%s",
            api_error.code,
            api_error.message,
            request_id,
            exc_info=exc,
        )
    else:
        logger.warning(
            "Request error: code=%s message=%s request_id=%s",
            api_error.code,
            api_error.message,
            request_id,
        )
    
    response = create_error_response(api_error)
    return JSONResponse(
        status_code=api_error.status_code,
        content=response.model_dump(),
        headers={"X-Request-ID": request_id},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app.
    
    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(ApiError, api_exception_handler)
    app.add_exception_handler(RequestValidationError, api_exception_handler)
    app.add_exception_handler(AudioDecodeError, api_exception_handler)
    app.add_exception_handler(AudioValidationError, api_exception_handler)
    app.add_exception_handler(TranscriptionError, api_exception_handler)
    
    # Catch-all for unexpected errors
    app.add_exception_handler(Exception, api_exception_handler)
