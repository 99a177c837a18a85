"""Text statistics for transcripts.

Example:
    >>> from textstats import summarize_text
    >>> summarize_text("Hi there!").to_dict()
    {'wordCount': 2, 'sentenceCount': 1, 'averageWordLength': '4.50', 'uniqueWords': 2}
"""

from .schema import TextStatistics
from .summarize import count_sentences, split_words, summarize_text


__all__ = [
    "summarize_text",
    "TextStatistics",
    "split_words",
    "count_sentences",
]
