"""Sentiment scoring for transcripts."""

from .scorer import (
    SentimentResult,
    SentimentScorer,
    compound_to_valence_sum,
    round_half_up,
)


__all__ = [
    "SentimentScorer",
    "SentimentResult",
    "compound_to_valence_sum",
    "round_half_up",
]
