"""FastAPI application for text and speech emotion analysis.

This module provides the main FastAPI application with endpoints for:
- GET /health: Service health check
- POST /api/text-emotion: Sentiment, emotion and statistics for JSON text
- POST /api/audio-emotion: The same analysis for a transcribed audio upload

Example:
    Run with uvicorn:
    
    $ uvicorn src.api.main:app --host 0.0.0.0 --port 3000
    
    Or directly:
    
    $ python -m src.api.main
"""

import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Annotated

from fastapi import Body, Depends, FastAPI, File, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.concurrency import run_in_threadpool

from analysis import analyze_transcript
from audioio import load_validate_encode
from sentiment import SentimentScorer
from speech import Transcriber

from .config import Settings, get_settings
from .deps import (
    get_analysis_config,
    get_app_settings,
    get_audio_config,
    get_scorer,
    get_transcriber,
    init_services,
)
from .errors import InvalidInputError, register_exception_handlers
from .logging import add_middleware, setup_logging
from .schemas import (
    AudioEmotionResponse,
    HealthResponse,
    TextEmotionRequest,
    TextEmotionResponse,
)


logger = logging.getLogger(__name__)


# =============================================================================
# Application Lifecycle
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    settings: Settings = app.state.settings
    
    setup_logging(settings.log_level, service=settings.app_name)
    logger.info(
        "Starting %s v%s",
        settings.app_name,
        settings.app_version,
    )
    
    yield
    
    logger.info("Application shutdown")


# =============================================================================
# Application Factory
# =============================================================================


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.
    
    Args:
        settings: Application settings. If None, loads from environment.
        
    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = get_settings()
    
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Text Emotion API - Sentiment score, keyword emotions and text statistics for text or speech.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    
    init_services(app, settings)
    
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    # Request ID and timing
    add_middleware(app)
    
    register_exception_handlers(app)
    
    register_routes(app)
    
    # Mounted last so API routes take precedence over files
    if settings.static_dir and Path(settings.static_dir).is_dir():
        app.mount(
            "/",
            StaticFiles(directory=settings.static_dir, html=True),
            name="static",
        )
        logger.info("Serving static files from %s", settings.static_dir)
    
    return app


def register_routes(app: FastAPI) -> None:
    """Register all API routes on the application.
    
    Args:
        app: The FastAPI application.
    """
    
    # =========================================================================
    # Health Endpoint
    # =========================================================================
    
    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
        description="Check service health and analysis configuration.",
    )
    async def health(
        settings: Annotated[Settings, Depends(get_app_settings)],
    ) -> HealthResponse:
        return HealthResponse(
            status="ok",
            version=settings.app_version,
            emotion_match_mode=settings.emotion_match_mode,
            stt_engine=settings.stt_engine,
        )
    
    # =========================================================================
    # Text Emotion Endpoint
    # =========================================================================
    
    @app.post(
        "/api/text-emotion",
        response_model=TextEmotionResponse,
        tags=["Analysis"],
        summary="Analyze text",
        description="Score sentiment, detect keyword emotions and compute text statistics.",
    )
    async def text_emotion(
        settings: Annotated[Settings, Depends(get_app_settings)],
        scorer: Annotated[SentimentScorer, Depends(get_scorer)],
        payload: Annotated[TextEmotionRequest | None, Body()] = None,
    ) -> TextEmotionResponse:
        """Analyze the `text` field of a JSON body.
        
        A missing body, missing field or null field is analyzed as "".
        """
        text = payload.text if payload is not None and payload.text is not None else ""
        
        if len(text) > settings.max_text_chars:
            raise InvalidInputError(
                message=f"Text too long: {len(text)} > {settings.max_text_chars} characters",
                details={"length": len(text), "max_text_chars": settings.max_text_chars},
            )
        
        analysis = analyze_transcript(text, scorer, get_analysis_config(settings))
        
        logger.info(
            "Text analyzed: chars=%d score=%d emotions=%s",
            len(text),
            analysis.sentiment.score,
            ",".join(k for k, v in analysis.emotion.items() if v) or "-",
        )
        
        return TextEmotionResponse(**analysis.to_dict())
    
    # =========================================================================
    # Audio Emotion Endpoint
    # =========================================================================
    
    @app.post(
        "/api/audio-emotion",
        response_model=AudioEmotionResponse,
        tags=["Analysis"],
        summary="Analyze speech",
        description="Transcribe an audio upload, then analyze the transcript.",
    )
    async def audio_emotion(
        file: Annotated[UploadFile, File(description="Audio file (WAV, FLAC, OGG, ...)")],
        settings: Annotated[Settings, Depends(get_app_settings)],
        scorer: Annotated[SentimentScorer, Depends(get_scorer)],
        transcriber: Annotated[Transcriber, Depends(get_transcriber)],
    ) -> AudioEmotionResponse:
        """Transcribe and analyze an uploaded audio file.
        
        Transcription failures are surfaced as-is; nothing is retried.
        """
        audio_bytes = await file.read()
        
        if not audio_bytes:
            raise InvalidInputError(
                message="Empty file uploaded",
                details={"filename": file.filename},
            )
        
        wav_bytes, clip = load_validate_encode(audio_bytes, get_audio_config(settings))
        
        start_time = time.perf_counter()
        transcript = await run_in_threadpool(transcriber.transcribe, wav_bytes)
        transcribe_ms = (time.perf_counter() - start_time) * 1000
        
        analysis = analyze_transcript(transcript, scorer, get_analysis_config(settings))
        
        logger.info(
            "Audio analyzed: duration_sec=%.2f transcript_chars=%d score=%d transcribe_ms=%.2f",
            clip.duration_sec,
            len(transcript),
            analysis.sentiment.score,
            transcribe_ms,
        )
        
        return AudioEmotionResponse(
            **analysis.to_dict(),
            transcript=transcript,
            duration_sec=clip.duration_sec,
        )


# =============================================================================
# Application Instance
# =============================================================================


app = create_app()


if __name__ == "__main__":
    import uvicorn
    
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
