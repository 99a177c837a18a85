"""Sentiment scoring backed by the VADER analyzer.

VADER handles negation, intensifiers, capitalization and punctuation
emphasis itself; this module only maps its ``polarity_scores`` output onto
an integer score and a per-word comparative.

VADER's compound value is the raw valence sum squashed into [-1, 1] with
``x / sqrt(x**2 + alpha)``. The integer score inverts that normalization to
recover the valence sum and rounds it half away from zero.

Example:
    >>> from sentiment.scorer import SentimentScorer
    >>> scorer = SentimentScorer()
    >>> result = scorer.score("What a wonderful day")
    >>> result.score > 0
    True
"""

import logging
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Protocol

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer


logger = logging.getLogger(__name__)

# Default alpha of vaderSentiment.normalize
VADER_ALPHA = 15.0

# polarity_scores rounds compound to 4 places, so +-1.0 means "at least 0.99995"
_MAX_COMPOUND = 0.9999

_ONE = Decimal("1")


class PolarityAnalyzer(Protocol):
    """Anything exposing VADER's polarity_scores interface."""

    def polarity_scores(self, text: str) -> dict[str, float]:
        ...


@dataclass(frozen=True)
class SentimentResult:
    """Sentiment score for a text.

    Attributes:
        score: Valence sum recovered from the compound value, rounded.
        comparative: score divided by word count (0.0 for no words).
        compound: VADER compound value in [-1, 1].
        positive: Proportion of the text rated positive.
        neutral: Proportion of the text rated neutral.
        negative: Proportion of the text rated negative.
    """

    score: int
    comparative: float
    compound: float = 0.0
    positive: float = 0.0
    neutral: float = 0.0
    negative: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "score": self.score,
            "comparative": self.comparative,
            "compound": self.compound,
            "positive": self.positive,
            "neutral": self.neutral,
            "negative": self.negative,
        }


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-0.5)
        -1
    """
    return int(Decimal(str(value)).quantize(_ONE, rounding=ROUND_HALF_UP))


def compound_to_valence_sum(compound: float, alpha: float = VADER_ALPHA) -> float:
    """Invert VADER's normalization of a valence sum.

    Args:
        compound: Normalized score in [-1, 1].
        alpha: Normalization constant used by VADER.

    Returns:
        The valence sum that normalizes to ``compound``.
    """
    compound = max(-_MAX_COMPOUND, min(_MAX_COMPOUND, compound))
    return compound * math.sqrt(alpha / (1.0 - compound * compound))


class SentimentScorer:
    """Scores text with a VADER sentiment analyzer.

    The analyzer loads its lexicon once on construction and only reads it
    afterwards, so a single instance can be shared across requests.

    Attributes:
        analyzer: Object providing ``polarity_scores(text)``.
    """

    def __init__(self, analyzer: PolarityAnalyzer | None = None) -> None:
        """Initialize the scorer.

        Args:
            analyzer: Optional analyzer. If None, a SentimentIntensityAnalyzer
                with the lexicon shipped by vaderSentiment is created.
        """
        if analyzer is None:
            analyzer = SentimentIntensityAnalyzer()
            logger.debug("Loaded VADER analyzer")
        self.analyzer = analyzer

    def score(self, text: str) -> SentimentResult:
        """Score a text.

        Args:
            text: Text to score.

        Returns:
            SentimentResult with integer score, comparative and the VADER
            polarity breakdown.
        """
        polarity = self.analyzer.polarity_scores(text)
        compound = float(polarity["compound"])

        score = round_half_up(compound_to_valence_sum(compound))
        word_count = len(text.split())
        comparative = score / word_count if word_count else 0.0

        return SentimentResult(
            score=score,
            comparative=comparative,
            compound=compound,
            positive=float(polarity.get("pos", 0.0)),
            neutral=float(polarity.get("neu", 0.0)),
            negative=float(polarity.get("neg", 0.0)),
        )
