"""Transcript analysis combining sentiment, emotion and text statistics."""

from .pipeline import AnalysisConfig, TranscriptAnalysis, analyze_transcript


__all__ = [
    "analyze_transcript",
    "AnalysisConfig",
    "TranscriptAnalysis",
]
