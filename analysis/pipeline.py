"""Combined sentiment, emotion and statistics analysis of a transcript.

Example:
    >>> from analysis.pipeline import AnalysisConfig, analyze_transcript
    >>> from sentiment import SentimentScorer
    >>> result = analyze_transcript("I am so happy!", SentimentScorer())
    >>> result.emotion["joy"]
    True
"""

from dataclasses import dataclass
from typing import Any

from emotion import MATCH_MODES, MatchMode, detect_emotions
from sentiment import SentimentResult, SentimentScorer
from textstats import TextStatistics, summarize_text


@dataclass
class AnalysisConfig:
    """Options for transcript analysis.
    
    Attributes:
        match_mode: Emotion keyword matching, "substring" or "token".
        drop_empty_tokens: Exclude empty whitespace-split tokens from
            text statistics.
    """
    
    match_mode: MatchMode = "substring"
    drop_empty_tokens: bool = False
    
    def __post_init__(self) -> None:
        if self.match_mode not in MATCH_MODES:
            raise ValueError(
                f"Invalid match_mode: {self.match_mode!r}. Must be one of {MATCH_MODES}"
            )


@dataclass(frozen=True)
class TranscriptAnalysis:
    """Result of analyzing one transcript.
    
    Attributes:
        transcript: The analyzed text.
        sentiment: Lexicon sentiment score.
        emotion: Category -> whether any trigger word occurred.
        text_statistics: Word and sentence statistics.
    """
    
    transcript: str
    sentiment: SentimentResult
    emotion: dict[str, bool]
    text_statistics: TextStatistics
    
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary using API field names."""
        return {
            "score": self.sentiment.score,
            "comparative": self.sentiment.comparative,
            "emotion": dict(self.emotion),
            "textAnalysis": self.text_statistics.to_dict(),
        }


def analyze_transcript(
    transcript: str,
    scorer: SentimentScorer,
    config: AnalysisConfig | None = None,
) -> TranscriptAnalysis:
    """Run sentiment scoring, emotion detection and text statistics.
    
    Args:
        transcript: Text to analyze. Must already be a string.
        scorer: Sentiment scorer to use.
        config: Analysis options. If None, uses default AnalysisConfig().
        
    Returns:
        TranscriptAnalysis for the transcript.
    """
    if config is None:
        config = AnalysisConfig()
    
    return TranscriptAnalysis(
        transcript=transcript,
        sentiment=scorer.score(transcript),
        emotion=detect_emotions(transcript, match_mode=config.match_mode),
        text_statistics=summarize_text(
            transcript, drop_empty_tokens=config.drop_empty_tokens
        ),
    )
