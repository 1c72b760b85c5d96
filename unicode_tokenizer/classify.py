"""Segment filtering and token classification.

Each predicate is a pure function of its input. :func:`classify` composes
them in a fixed priority order: ideographic, then numeric, then
alphanumeric as the default.
"""

import regex

from .models import SegmentCategory, TokenType

# Hiragana, Katakana and Hangul are typed as ideographic on purpose; indexes
# built with earlier releases rely on it.
_IDEOGRAPHIC = regex.compile(
    r"[\p{Ideographic}\p{Script=Han}\p{Script=Hiragana}\p{Script=Katakana}"
    r"\p{Script=Hangul}\p{Word_Break=Katakana}]"
)

_DIGIT = r"[\p{Nd}\p{Word_Break=Numeric}]"
_NUMERIC_JOINER = (
    r"[\p{Word_Break=MidNum}\p{Word_Break=MidNumLet}\p{Word_Break=Single_Quote}"
    r"\p{Word_Break=ExtendNumLet}\p{Word_Break=Extend}\p{Word_Break=Format}"
    r"\p{Word_Break=ZWJ}]"
)
_NUMERIC_RUN = regex.compile(f"{_NUMERIC_JOINER}*{_DIGIT}(?:{_DIGIT}|{_NUMERIC_JOINER})*")


def _decode(term: bytes) -> str:
    return term.decode("utf-8", errors="surrogateescape")


def is_word_like(category: SegmentCategory) -> bool:
    """Keep segments carrying letters, ideographs or digits."""
    return category is SegmentCategory.LETTER or category is SegmentCategory.NUMBER


def is_ideographic(term: bytes) -> bool:
    """Check whether a segment contains any ideographic-typed codepoint."""
    return _IDEOGRAPHIC.search(_decode(term)) is not None


def is_numeric(term: bytes) -> bool:
    """Check whether a segment is a numeric run such as ``25`` or ``3.14``."""
    return _NUMERIC_RUN.fullmatch(_decode(term)) is not None


def classify(term: bytes) -> TokenType:
    """Assign a token type to the bytes of a kept segment."""
    if is_ideographic(term):
        return TokenType.IDEOGRAPHIC
    if is_numeric(term):
        return TokenType.NUMERIC
    return TokenType.ALPHANUMERIC
