"""FastAPI dependencies for the text emotion API.

Shared collaborators (sentiment scorer, speech transcriber) are built once
per application in init_services() and stored on app.state; endpoints
receive them through these dependency functions, which tests can replace
with app.dependency_overrides.

Example:
    >>> from fastapi import Depends
    >>> from src.api.deps import get_scorer
    
    >>> @app.post("/score")
    >>> async def endpoint(scorer = Depends(get_scorer)):
    ...     return scorer.score("great").to_dict()
"""

import logging

from fastapi import FastAPI, Request

from analysis import AnalysisConfig
from audioio import AudioConfig
from sentiment import SentimentScorer
from speech import SpeechTranscriber, Transcriber

from .config import Settings


logger = logging.getLogger(__name__)


# =============================================================================
# Service Setup
# =============================================================================


def init_services(app: FastAPI, settings: Settings) -> None:
    """Build shared services and attach them to the application state.
    
    Args:
        app: The FastAPI application.
        settings: Application settings.
    """
    app.state.settings = settings
    app.state.scorer = SentimentScorer()
    app.state.transcriber = SpeechTranscriber(
        engine=settings.stt_engine,
        language=settings.stt_language,
    )
    logger.info(
        "Services initialized: match_mode=%s stt_engine=%s stt_language=%s",
        settings.emotion_match_mode,
        settings.stt_engine,
        settings.stt_language,
    )


# =============================================================================
# Dependencies
# =============================================================================


def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


def get_scorer(request: Request) -> SentimentScorer:
    """Get the shared sentiment scorer."""
    return request.app.state.scorer


def get_transcriber(request: Request) -> Transcriber:
    """Get the shared speech transcriber."""
    return request.app.state.transcriber


# =============================================================================
# Configuration Builders
# =============================================================================


def get_analysis_config(settings: Settings) -> AnalysisConfig:
    """Build analysis options from settings.
    
    Args:
        settings: Application settings.
        
    Returns:
        AnalysisConfig with settings applied.
    """
    return AnalysisConfig(
        match_mode=settings.emotion_match_mode,
        drop_empty_tokens=settings.drop_empty_tokens,
    )


def get_audio_config(settings: Settings) -> AudioConfig:
    """Build audio validation options from settings.
    
    Args:
        settings: Application settings.
        
    Returns:
        AudioConfig with settings applied.
    """
    return AudioConfig(
        min_duration_sec=settings.min_audio_duration_sec,
        max_duration_sec=settings.max_audio_duration_sec,
        reject_silence=settings.reject_silence,
        silence_rms_threshold=settings.silence_rms_threshold,
    )
