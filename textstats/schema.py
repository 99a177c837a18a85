"""Schema for text statistics output."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class TextStatistics:
    """Summary statistics for a transcript.
    
    Attributes:
        word_count: Number of whitespace-separated tokens.
        sentence_count: Number of non-blank sentence fragments.
        average_word_length: Transcript length divided by word_count,
            quantized to two decimal places.
        unique_word_count: Number of distinct lower-cased tokens.
    """
    
    word_count: int
    sentence_count: int
    average_word_length: Decimal
    unique_word_count: int
    
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary using API field names.
        
        averageWordLength is rendered as a string so both decimals survive
        JSON encoding ("5.00", not 5.0).
        """
        return {
            "wordCount": self.word_count,
            "sentenceCount": self.sentence_count,
            "averageWordLength": f"{self.average_word_length:.2f}",
            "uniqueWords": self.unique_word_count,
        }
