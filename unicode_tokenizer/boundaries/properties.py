"""Unicode property lookups used by the word-boundary rules.

The property tables themselves come from the ``regex`` module's Unicode
database; this module only maps a codepoint to the Word_Break value the
rules in :mod:`.words` switch on.
"""

from enum import Enum
from functools import lru_cache

import regex


class WordBreak(Enum):
    """Word_Break property values (UAX #29), plus a marker for undecodable bytes."""

    CR = "CR"
    LF = "LF"
    NEWLINE = "Newline"
    EXTEND = "Extend"
    ZWJ = "ZWJ"
    REGIONAL_INDICATOR = "Regional_Indicator"
    FORMAT = "Format"
    KATAKANA = "Katakana"
    HEBREW_LETTER = "Hebrew_Letter"
    ALETTER = "ALetter"
    SINGLE_QUOTE = "Single_Quote"
    DOUBLE_QUOTE = "Double_Quote"
    MID_NUM_LET = "MidNumLet"
    MID_LETTER = "MidLetter"
    MID_NUM = "MidNum"
    NUMERIC = "Numeric"
    EXTEND_NUM_LET = "ExtendNumLet"
    WSEG_SPACE = "WSegSpace"
    OTHER = "Other"
    INVALID = "Invalid"


# Lone surrogates produced by decoding with errors="surrogateescape"
ESCAPED_BYTE_FIRST = "\udc80"
ESCAPED_BYTE_LAST = "\udcff"

_LOOKUP_ORDER = [
    value for value in WordBreak if value not in (WordBreak.OTHER, WordBreak.INVALID)
]

_WORD_BREAK_PATTERN = regex.compile(
    "|".join(
        f"(?P<{value.name}>\\p{{Word_Break={value.value}}})" for value in _LOOKUP_ORDER
    )
)

_EXTENDED_PICTOGRAPHIC = regex.compile(r"\p{Extended_Pictographic}")


def is_escaped_byte(char: str) -> bool:
    """Check whether a character stands in for an undecodable input byte."""
    return ESCAPED_BYTE_FIRST <= char <= ESCAPED_BYTE_LAST


@lru_cache(maxsize=8192)
def word_break(char: str) -> WordBreak:
    """Return the Word_Break property of a single character."""
    if is_escaped_byte(char):
        return WordBreak.INVALID
    match = _WORD_BREAK_PATTERN.match(char)
    if match is None:
        return WordBreak.OTHER
    return WordBreak[match.lastgroup]


@lru_cache(maxsize=1024)
def is_extended_pictographic(char: str) -> bool:
    return _EXTENDED_PICTOGRAPHIC.match(char) is not None
