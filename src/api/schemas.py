"""Pydantic schemas for API request/response models.

Response field names follow the public JSON contract (camelCase); Python
attributes stay snake_case and are mapped through aliases.

Example:
    >>> from src.api.schemas import TextAnalysisSchema
    >>> TextAnalysisSchema(
    ...     word_count=5,
    ...     sentence_count=2,
    ...     average_word_length="5.00",
    ...     unique_words=5,
    ... ).model_dump(by_alias=True)
    {'wordCount': 5, 'sentenceCount': 2, 'averageWordLength': '5.00', 'uniqueWords': 5}
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase field names."""
    
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Health Endpoint
# =============================================================================


class HealthResponse(CamelModel):
    """Response schema for /health endpoint."""
    
    status: str = Field(
        default="ok",
        description="Service status",
        examples=["ok"],
    )
    version: str = Field(
        description="Service version",
        examples=["1.0.0"],
    )
    emotion_match_mode: str = Field(
        description="Emotion keyword matching mode",
        examples=["substring", "token"],
    )
    stt_engine: str = Field(
        description="Speech recognition engine",
        examples=["google"],
    )


# =============================================================================
# Text Emotion Endpoint
# =============================================================================


class TextEmotionRequest(BaseModel):
    """Request body for /api/text-emotion."""
    
    text: str | None = Field(
        default=None,
        description="Text to analyze. Missing or null is treated as empty text.",
        examples=["I am so happy today!"],
    )


class TextAnalysisSchema(CamelModel):
    """Text statistics of the analyzed transcript."""
    
    word_count: int = Field(
        ge=0,
        description="Number of whitespace-separated tokens",
        examples=[5],
    )
    sentence_count: int = Field(
        ge=0,
        description="Number of non-blank sentences",
        examples=[2],
    )
    average_word_length: str = Field(
        pattern=r"^\d+\.\d{2}$",
        description="Text length divided by word count, two decimals",
        examples=["5.00"],
    )
    unique_words: int = Field(
        ge=0,
        description="Number of distinct lower-cased tokens",
        examples=[5],
    )


class TextEmotionResponse(CamelModel):
    """Response schema for /api/text-emotion."""
    
    success: bool = Field(
        default=True,
        description="Always true for successful analyses",
    )
    score: int = Field(
        description="Lexicon sentiment score",
        examples=[3],
    )
    comparative: float = Field(
        description="Sentiment score divided by token count",
        examples=[0.75],
    )
    emotion: dict[str, bool] = Field(
        description="Emotion category -> whether a trigger word occurred",
        examples=[{"joy": True, "sadness": False, "anger": False, "fear": False}],
    )
    text_analysis: TextAnalysisSchema = Field(
        description="Text statistics",
    )


# =============================================================================
# Audio Emotion Endpoint
# =============================================================================


class AudioEmotionResponse(TextEmotionResponse):
    """Response schema for /api/audio-emotion."""
    
    transcript: str = Field(
        description="Transcript recognized from the audio",
        examples=["I am so happy today"],
    )
    duration_sec: float = Field(
        ge=0.0,
        description="Duration of the uploaded audio in seconds",
        examples=[2.5],
    )


# =============================================================================
# Error Response
# =============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""
    
    code: str = Field(
        description="Error code for programmatic handling",
        examples=["INVALID_INPUT", "TRANSCRIPTION_FAILED"],
    )
    message: str = Field(
        description="Human-readable error message",
        examples=["Failed to decode audio"],
    )
    details: dict[str, Any] | None = Field(
        default=None,
        description="Additional error context",
    )


class ApiErrorResponse(BaseModel):
    """Standard error response wrapper."""
    
    success: bool = Field(
        default=False,
        description="Always false for errors",
    )
    error: ErrorDetail = Field(
        description="Error details",
    )
