"""FastAPI application for text and speech emotion analysis.

This module provides a REST API with endpoints for:
- /health: Service health check
- /api/text-emotion: Analysis of JSON text
- /api/audio-emotion: Analysis of transcribed audio

Example:
    To run the API server:
    
    $ uvicorn src.api.main:app --host 0.0.0.0 --port 3000
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
