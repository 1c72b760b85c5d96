"""Word-boundary walker following the UAX #29 default word-boundary rules."""

import regex

from ..models import Segment, SegmentCategory
from .base import BoundaryWalker
from .properties import WordBreak, is_extended_pictographic, word_break

WB = WordBreak

NEWLINES = frozenset({WB.CR, WB.LF, WB.NEWLINE})

# Absorbed into the preceding character (WB4)
IGNORABLE = frozenset({WB.EXTEND, WB.FORMAT, WB.ZWJ})

# Never absorb a following ignorable run
HARD_STOPS = NEWLINES | {WB.INVALID}

AHLETTER = frozenset({WB.ALETTER, WB.HEBREW_LETTER})
MID_LETTER_Q = frozenset({WB.MID_LETTER, WB.MID_NUM_LET, WB.SINGLE_QUOTE})
MID_NUM_Q = frozenset({WB.MID_NUM, WB.MID_NUM_LET, WB.SINGLE_QUOTE})
EXTENDABLE = AHLETTER | {WB.NUMERIC, WB.KATAKANA, WB.EXTEND_NUM_LET}
WORD_RUN = AHLETTER | {WB.NUMERIC}

_LETTER = regex.compile(r"\p{L}")
_NUMBER = regex.compile(r"\p{N}")


def segment_category(text: str) -> SegmentCategory:
    """Category hint for a segment: letters win over numbers, anything else is OTHER."""
    if _LETTER.search(text):
        return SegmentCategory.LETTER
    if _NUMBER.search(text):
        return SegmentCategory.NUMBER
    return SegmentCategory.OTHER


class WordBoundaryWalker(BoundaryWalker):
    """Walk a UTF-8 buffer segment by segment.

    The buffer is decoded with ``errors="surrogateescape"`` so that each
    undecodable byte survives as a single stand-in character. Those
    characters are hard boundaries on both sides, which makes every bad byte
    its own one-byte segment with category OTHER.
    """

    def __init__(self, data: bytes):
        super().__init__(data)
        self._text = data.decode("utf-8", errors="surrogateescape")
        self._props = [word_break(char) for char in self._text]
        self._pos = 0  # next segment start, in characters
        self._byte_offset = 0
        self._ri_run = 0  # regional indicators seen back to back, ignoring WB4 runs

    def __next__(self) -> Segment:
        size = len(self._props)
        start = self._pos
        if start >= size:
            raise StopIteration

        self._observe(start)
        end = start + 1
        while end < size and not self._is_boundary(end):
            self._observe(end)
            end += 1
        self._pos = end

        text = self._text[start:end]
        term = text.encode("utf-8", errors="surrogateescape")
        byte_start = self._byte_offset
        self._byte_offset += len(term)
        return Segment(
            term=term,
            start=byte_start,
            end=self._byte_offset,
            category=segment_category(text),
        )

    def _observe(self, index: int) -> None:
        prop = self._props[index]
        if prop in IGNORABLE:
            return
        if prop is WB.REGIONAL_INDICATOR:
            self._ri_run += 1
        else:
            self._ri_run = 0

    def _skip_back(self, index: int) -> int:
        """Index of the character an ignorable run at ``index`` attaches to.

        When the run follows start of text, a newline or a bad byte nothing
        absorbs it (WB4), so the run's own last character is returned.
        """
        props = self._props
        k = index
        while k >= 0 and props[k] in IGNORABLE:
            k -= 1
        if k < 0 or props[k] in HARD_STOPS:
            return index
        return k

    def _next_is(self, index: int, wanted: frozenset) -> bool:
        """Check the first non-ignorable character after ``index``."""
        props = self._props
        k = index + 1
        while k < len(props) and props[k] in IGNORABLE:
            k += 1
        return k < len(props) and props[k] in wanted

    def _is_boundary(self, index: int) -> bool:
        """Decide whether a word boundary falls between ``index - 1`` and ``index``."""
        props = self._props
        before = props[index - 1]
        after = props[index]

        # WB5, WB8, WB9, WB10 on the common path
        if before in WORD_RUN and after in WORD_RUN:
            return False
        if before is WB.INVALID or after is WB.INVALID:
            return True
        # WB3, WB3a, WB3b
        if before is WB.CR and after is WB.LF:
            return False
        if before in NEWLINES or after in NEWLINES:
            return True
        # WB3c
        if before is WB.ZWJ and is_extended_pictographic(self._text[index]):
            return False
        # WB3d
        if before is WB.WSEG_SPACE and after is WB.WSEG_SPACE:
            return False
        # WB4
        if after in IGNORABLE:
            return False

        prev_index = self._skip_back(index - 1)
        prev = props[prev_index]
        prev_prev = None
        if prev_index > 0 and prev not in IGNORABLE:
            prev_prev = props[self._skip_back(prev_index - 1)]

        if prev in AHLETTER:
            # WB5
            if after in AHLETTER:
                return False
            # WB6
            if after in MID_LETTER_Q and self._next_is(index, AHLETTER):
                return False
            if prev is WB.HEBREW_LETTER:
                # WB7a
                if after is WB.SINGLE_QUOTE:
                    return False
                # WB7b
                if after is WB.DOUBLE_QUOTE and self._next_is(
                    index, frozenset({WB.HEBREW_LETTER})
                ):
                    return False
            # WB9
            if after is WB.NUMERIC:
                return False
        # WB7
        if prev in MID_LETTER_Q and after in AHLETTER and prev_prev in AHLETTER:
            return False
        # WB7c
        if (
            prev is WB.DOUBLE_QUOTE
            and after is WB.HEBREW_LETTER
            and prev_prev is WB.HEBREW_LETTER
        ):
            return False

        if prev is WB.NUMERIC:
            # WB8, WB10
            if after is WB.NUMERIC or after in AHLETTER:
                return False
            # WB12
            if after in MID_NUM_Q and self._next_is(index, frozenset({WB.NUMERIC})):
                return False
        # WB11
        if prev in MID_NUM_Q and after is WB.NUMERIC and prev_prev is WB.NUMERIC:
            return False

        # WB13, WB13a, WB13b
        if prev is WB.KATAKANA and after is WB.KATAKANA:
            return False
        if after is WB.EXTEND_NUM_LET and prev in EXTENDABLE:
            return False
        if prev is WB.EXTEND_NUM_LET and after in EXTENDABLE - {WB.EXTEND_NUM_LET}:
            return False

        # WB15, WB16
        if (
            prev is WB.REGIONAL_INDICATOR
            and after is WB.REGIONAL_INDICATOR
            and self._ri_run % 2 == 1
        ):
            return False

        # WB999
        return True
