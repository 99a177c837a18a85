"""Configuration management for the text emotion API service.

This module provides centralized configuration using pydantic-settings,
loading values from environment variables with sensible defaults.

Example:
    >>> from src.api.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.emotion_match_mode)
    substring
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.
    
    All settings can be overridden via environment variables.
    Environment variables use uppercase names matching the attribute names.
    
    Attributes:
        app_name: Name of the application for OpenAPI docs.
        app_version: API version string.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Bind address used when run as a script.
        port: Bind port used when run as a script.
        emotion_match_mode: Keyword matching, "substring" or whole-word "token".
        drop_empty_tokens: Exclude empty whitespace-split tokens from text statistics.
        max_text_chars: Maximum accepted text length for /api/text-emotion.
        stt_engine: Speech recognition engine ("google" or "sphinx").
        stt_language: Language tag for speech recognition.
        min_audio_duration_sec: Minimum accepted audio duration.
        max_audio_duration_sec: Maximum accepted audio duration.
        reject_silence: Whether to reject near-silent uploads.
        silence_rms_threshold: RMS below which an upload is silent.
        static_dir: Directory served at "/" when it exists.
        cors_allow_origins: Allowed CORS origins.
    """
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # Application settings
    app_name: str = "Text Emotion Service"
    app_version: str = "1.0.0"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000
    
    # Analysis settings
    emotion_match_mode: Literal["substring", "token"] = "substring"
    drop_empty_tokens: bool = False
    max_text_chars: int = 100_000
    
    # Speech settings
    stt_engine: Literal["google", "sphinx"] = "google"
    stt_language: str = "en-US"
    
    # Audio settings
    min_audio_duration_sec: float = 0.1
    max_audio_duration_sec: float = 120.0
    reject_silence: bool = True
    silence_rms_threshold: float = 1e-4
    
    # Serving
    static_dir: str | None = "public"
    cors_allow_origins: list[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.
    
    Uses lru_cache to ensure settings are only loaded once.
    
    Returns:
        Settings instance with values from environment.
    """
    return Settings()
