"""Structured logging and request middleware for the API.

This module provides:
- Structured logging configuration (key=value format)
- Request ID middleware for tracing
- Request timing middleware

Example:
    >>> from src.api.logging import setup_logging
    >>> setup_logging("INFO", service="Text Emotion Service")
"""

import logging
import sys
import time
import uuid
from contextvars import ContextVar
from typing import Callable

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware


# Request ID of the request being handled, "" outside a request
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


# =============================================================================
# Custom Logging Formatter
# =============================================================================


class StructuredFormatter(logging.Formatter):
    """Structured log formatter producing key=value output.
    
    Formats log messages as:
        timestamp=ISO8601 level=LEVEL service=NAME logger=NAME request_id=ID message="MSG"
    """
    
    def __init__(self, service: str = "-", datefmt: str | None = None) -> None:
        super().__init__(datefmt=datefmt)
        self.service = service.replace(" ", "_")
    
    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as structured key=value pairs."""
        parts = [
            f"timestamp={self.formatTime(record, self.datefmt)}",
            f"level={record.levelname}",
            f"service={self.service}",
            f"logger={record.name}",
            f"request_id={request_id_var.get() or '-'}",
        ]
        
        message = record.getMessage().replace('"', '\\"')
        parts.append(f'message="{message}"')
        
        if record.exc_info:
            exc_text = self.formatException(record.exc_info)
            exc_text = exc_text.replace("\n", " | ").replace('"', '\\"')
            parts.append(f'exception="{exc_text}"')
        
        return " ".join(parts)


# =============================================================================
# Logging Setup
# =============================================================================


def setup_logging(log_level: str = "INFO", service: str = "-") -> None:
    """Configure structured logging for the application.
    
    Replaces any root handlers with a single stdout handler.
    
    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR).
        service: Service name stamped on every line.
    """
    formatter = StructuredFormatter(service=service, datefmt="%Y-%m-%dT%H:%M:%S%z")
    
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level.upper())
    
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(formatter)
    stdout_handler.setLevel(log_level.upper())
    root_logger.addHandler(stdout_handler)
    
    # Reduce noise from third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# =============================================================================
# Middleware
# =============================================================================


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns a request ID to each request.
    
    The incoming X-Request-ID header is reused when present, otherwise a
    UUID4 is generated. The ID is stored in request.state.request_id, in
    request_id_var for log lines, and echoed in the X-Request-ID header.
    """
    
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        
        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            request_id_var.reset(token)


class TimingMiddleware(BaseHTTPMiddleware):
    """Logs request duration and adds an X-Response-Time header."""
    
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000
        
        response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"
        
        logging.getLogger("api.timing").info(
            "method=%s path=%s status=%d duration_ms=%.2f",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response


def add_middleware(app: FastAPI) -> None:
    """Add request ID and timing middleware to the application.
    
    Args:
        app: The FastAPI application instance.
    """
    # Order matters: RequestID must be added last to run first
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)
