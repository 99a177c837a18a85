"""Emotion categories and their trigger words.

The table is fixed process-wide configuration. Trigger words are matched
case-insensitively against a transcript; the same word may appear under
more than one category.

Categories:
    - joy: positive, upbeat language
    - sadness: low mood, disappointment
    - anger: frustration, hostility
    - fear: worry, anxiety
"""

from types import MappingProxyType
from typing import Final, Mapping


EMOTION_KEYWORDS: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType({
    "joy": ("happy", "excited", "wonderful", "amazing", "great"),
    "sadness": ("sad", "unhappy", "terrible", "awful", "down"),
    "anger": ("angry", "furious", "mad", "upset", "irritated"),
    "fear": ("scared", "afraid", "terrified", "worried", "anxious"),
})

# Category names in table order
EMOTION_CATEGORIES: Final[tuple[str, ...]] = tuple(EMOTION_KEYWORDS)


def get_trigger_words(category: str) -> tuple[str, ...]:
    """Get the trigger words for a category.
    
    Args:
        category: Emotion category name (e.g. "joy").
        
    Returns:
        Tuple of lower-case trigger words.
        
    Raises:
        KeyError: If the category is not in the table.
        
    Examples:
        >>> get_trigger_words("fear")
        ('scared', 'afraid', 'terrified', 'worried', 'anxious')
    """
    return EMOTION_KEYWORDS[category]
