"""Keyword-based multi-label emotion detection.

Each category of the keyword table is tested independently, so a transcript
can carry several emotions at once (or none).

Example:
    >>> from emotion.detect import detect_emotions
    >>> detect_emotions("I was so happy but also a bit worried")
    {'joy': True, 'sadness': False, 'anger': False, 'fear': True}
"""

import re
from typing import Literal, Mapping

from .keywords import EMOTION_KEYWORDS


MatchMode = Literal["substring", "token"]

MATCH_MODES: tuple[str, ...] = ("substring", "token")

_TOKEN_PATTERN = re.compile(r"[\w']+")


def detect_emotions(
    transcript: str,
    match_mode: MatchMode = "substring",
    keywords: Mapping[str, tuple[str, ...]] = EMOTION_KEYWORDS,
) -> dict[str, bool]:
    """Flag which emotion categories occur in a transcript.
    
    In "substring" mode a trigger word matches anywhere in the lower-cased
    transcript, including inside a longer word ("madness" contains "mad").
    In "token" mode it must equal a whole word token.
    
    Args:
        transcript: Text to scan. Callers coerce missing input to "".
        match_mode: "substring" (default) or "token".
        keywords: Category -> trigger words table.
        
    Returns:
        Dictionary with every category of the table mapped to a bool.
        
    Raises:
        ValueError: If match_mode is not a known mode.
        
    Examples:
        >>> detect_emotions("HAPPY day")["joy"]
        True
        >>> detect_emotions("she made dinner", match_mode="token")["anger"]
        False
    """
    if match_mode not in MATCH_MODES:
        raise ValueError(
            f"Invalid match_mode: {match_mode!r}. Must be one of {MATCH_MODES}"
        )
    
    lowered = transcript.lower()
    
    if match_mode == "token":
        tokens = set(_TOKEN_PATTERN.findall(lowered))
        return {
            category: any(word in tokens for word in words)
            for category, words in keywords.items()
        }
    
    return {
        category: any(word in lowered for word in words)
        for category, words in keywords.items()
    }
