"""Data models for the tokenizer."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Protocol


class TokenType(str, Enum):
    """Content category assigned to an emitted token."""

    ALPHANUMERIC = "AlphaNumeric"
    NUMERIC = "Numeric"
    IDEOGRAPHIC = "Ideographic"


class SegmentCategory(Enum):
    """Coarse category hint attached to a segment by the boundary walker."""

    LETTER = "letter"
    NUMBER = "number"
    OTHER = "other"


@dataclass(frozen=True)
class Segment:
    """A boundary-delimited byte range of the input."""

    term: bytes
    start: int
    end: int
    category: SegmentCategory


@dataclass(frozen=True)
class Token:
    """A classified, positioned segment.

    ``term`` is a copy of ``input[start:end]``, so a token stays valid after
    the caller mutates or releases the buffer it was cut from.
    """

    term: bytes
    start: int
    end: int
    position: int  # 1-based, counts emitted tokens only
    type: TokenType

    @property
    def text(self) -> str:
        return self.term.decode("utf-8", errors="replace")


TokenStream = List[Token]


class Tokenizer(Protocol):
    def tokenize(self, data: bytes) -> TokenStream:
        ...
