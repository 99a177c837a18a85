"""Pytest configuration and fixtures for the test suite."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Ensure project root is in path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from audioio import AudioClip  # noqa: E402
from sentiment import SentimentScorer  # noqa: E402


class FixedAnalyzer:
    """Analyzer returning preset compound values per text.

    Compound values are picked so the recovered valence sum is exact:
    0.25 -> 1, 0.875 -> 7.
    """

    def __init__(self, compounds: dict[str, float]) -> None:
        self.compounds = compounds
        self.calls: list[str] = []

    def polarity_scores(self, text: str) -> dict[str, float]:
        self.calls.append(text)
        compound = self.compounds.get(text, 0.0)
        if compound > 0:
            return {"neg": 0.0, "neu": 0.5, "pos": 0.5, "compound": compound}
        if compound < 0:
            return {"neg": 0.5, "neu": 0.5, "pos": 0.0, "compound": compound}
        return {"neg": 0.0, "neu": 1.0, "pos": 0.0, "compound": 0.0}


@pytest.fixture
def fixed_analyzer() -> FixedAnalyzer:
    """Deterministic analyzer for a handful of texts."""
    return FixedAnalyzer({
        "a good day": 0.25,
        "A great day. Not bad!": 0.875,
        "awful": -0.875,
    })


@pytest.fixture
def small_scorer(fixed_analyzer: FixedAnalyzer) -> SentimentScorer:
    """Sentiment scorer backed by the fixed analyzer."""
    return SentimentScorer(analyzer=fixed_analyzer)


@pytest.fixture
def sine_clip() -> AudioClip:
    """One second of a 440 Hz mono sine at 16 kHz."""
    sample_rate = 16000
    t = np.linspace(0, 1.0, sample_rate, dtype=np.float32)
    samples = (0.5 * np.sin(2 * np.pi * 440.0 * t)).astype(np.float32)
    return AudioClip(samples=samples.reshape(-1, 1), sample_rate=sample_rate)
