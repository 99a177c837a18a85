"""Word, sentence and lexical diversity counts for a transcript.

Tokenization is a plain whitespace split. Splitting "" yields a single empty
token, and leading or trailing whitespace yields empty edge tokens; these
count as words unless drop_empty_tokens is set.

Example:
    >>> from textstats.summarize import summarize_text
    >>> stats = summarize_text("Hello world. How are you?")
    >>> stats.word_count, stats.sentence_count, stats.unique_word_count
    (5, 2, 5)
    >>> str(stats.average_word_length)
    '5.00'
"""

import re
from decimal import ROUND_HALF_UP, Decimal

from .schema import TextStatistics


_WHITESPACE_PATTERN = re.compile(r"\s+")
_SENTENCE_TERMINATORS = re.compile(r"[.!?]+")
_TWO_PLACES = Decimal("0.01")


def split_words(transcript: str, drop_empty_tokens: bool = False) -> list[str]:
    """Split a transcript into word tokens on runs of whitespace.
    
    Args:
        transcript: Text to split.
        drop_empty_tokens: Remove the empty tokens produced by empty input
            or by leading/trailing whitespace.
        
    Returns:
        List of tokens with attached punctuation kept.
        
    Examples:
        >>> split_words("")
        ['']
        >>> split_words(" a b ")
        ['', 'a', 'b', '']
        >>> split_words(" a b ", drop_empty_tokens=True)
        ['a', 'b']
    """
    tokens = _WHITESPACE_PATTERN.split(transcript)
    if drop_empty_tokens:
        return [token for token in tokens if token]
    return tokens


def count_sentences(transcript: str) -> int:
    """Count sentence fragments delimited by runs of ".", "!" or "?".
    
    Fragments that are blank after stripping are not counted.
    """
    fragments = _SENTENCE_TERMINATORS.split(transcript)
    return sum(1 for fragment in fragments if fragment.strip())


def summarize_text(transcript: str, drop_empty_tokens: bool = False) -> TextStatistics:
    """Compute text statistics for a transcript.
    
    Args:
        transcript: Text to summarize.
        drop_empty_tokens: Exclude empty tokens from word and unique counts.
        
    Returns:
        TextStatistics for the transcript.
    """
    words = split_words(transcript, drop_empty_tokens=drop_empty_tokens)
    word_count = len(words)
    
    if word_count == 0:
        average = Decimal("0.00")
    else:
        average = (Decimal(len(transcript)) / Decimal(word_count)).quantize(
            _TWO_PLACES, rounding=ROUND_HALF_UP
        )
    
    return TextStatistics(
        word_count=word_count,
        sentence_count=count_sentences(transcript),
        average_word_length=average,
        unique_word_count=len({word.lower() for word in words}),
    )
