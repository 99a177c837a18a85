"""Keyword emotion detection for transcripts.

Example:
    >>> from emotion import detect_emotions, EMOTION_CATEGORIES
    >>> result = detect_emotions("That was terrible")
    >>> [c for c in EMOTION_CATEGORIES if result[c]]
    ['sadness']
"""

from .detect import MATCH_MODES, MatchMode, detect_emotions
from .keywords import EMOTION_CATEGORIES, EMOTION_KEYWORDS, get_trigger_words


__all__ = [
    "detect_emotions",
    "MatchMode",
    "MATCH_MODES",
    "EMOTION_KEYWORDS",
    "EMOTION_CATEGORIES",
    "get_trigger_words",
]
