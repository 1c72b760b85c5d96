"""Unicode word tokenizer."""

import logging
from typing import Any, Callable, Mapping, Optional

from .boundaries import BoundaryWalker, WordBoundaryWalker
from .classify import classify, is_word_like
from .models import Token, TokenStream

logger = logging.getLogger(__name__)

# Average bytes per token in mixed natural-language text
GUESS_BYTES_PER_TOKEN = 6


class _TokenBuffer:
    """Output slots pre-sized from the input length.

    When the slots run out before the input does, the remaining token count
    is re-estimated from the density observed so far and that many slots
    are added in one step.
    """

    def __init__(self, input_length: int, bytes_per_token: int):
        self._input_length = input_length
        self._slots: list = [None] * max(1, input_length // bytes_per_token)
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def append(self, token: Token, consumed: int) -> None:
        if self._count >= len(self._slots):
            self._grow(consumed)
        self._slots[self._count] = token
        self._count += 1

    def _grow(self, consumed: int) -> None:
        avg_bytes_per_token = max(1, consumed // max(1, self._count))
        remaining = max(1, (self._input_length - consumed) // avg_bytes_per_token)
        logger.debug(
            "Token buffer full at %d/%d bytes, adding %d slots (%d bytes/token)",
            consumed,
            self._input_length,
            remaining,
            avg_bytes_per_token,
        )
        self._slots.extend([None] * remaining)

    def finish(self) -> TokenStream:
        del self._slots[self._count:]
        return self._slots


class UnicodeTokenizer:
    """Split text into word tokens using Unicode word boundaries.

    Whitespace, punctuation and symbol runs are dropped; everything else is
    typed as ideographic, numeric or alphanumeric and numbered from 1 in
    the order it appears. The tokenizer holds no state between calls.
    """

    name = "unicode"

    def __init__(
        self,
        bytes_per_token: int = GUESS_BYTES_PER_TOKEN,
        adaptive: bool = True,
        walker: Callable[[bytes], BoundaryWalker] = WordBoundaryWalker,
    ):
        """Initialize tokenizer.

        Args:
            bytes_per_token: Initial guess of input bytes per emitted token
            adaptive: Pre-size the output and re-estimate it as tokens are
                found; plain list growth otherwise. Output is identical.
            walker: Boundary walker factory
        """
        if bytes_per_token < 1:
            raise ValueError(f"bytes_per_token must be >= 1, got {bytes_per_token}")
        self.bytes_per_token = bytes_per_token
        self.adaptive = adaptive
        self.walker = walker

    def tokenize(self, data: bytes) -> TokenStream:
        """Tokenize a byte buffer.

        Args:
            data: UTF-8 text; malformed bytes are tolerated and skipped

        Returns:
            Token stream in textual order
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"tokenize() expects a bytes-like object, got {type(data).__name__}"
            )
        data = bytes(data)

        if not self.adaptive:
            tokens: TokenStream = []
            for segment in self.walker(data):
                if not is_word_like(segment.category):
                    continue
                tokens.append(
                    Token(
                        term=segment.term,
                        start=segment.start,
                        end=segment.end,
                        position=len(tokens) + 1,
                        type=classify(segment.term),
                    )
                )
            return tokens

        buffer = _TokenBuffer(len(data), self.bytes_per_token)
        for segment in self.walker(data):
            if not is_word_like(segment.category):
                continue
            token = Token(
                term=segment.term,
                start=segment.start,
                end=segment.end,
                position=len(buffer) + 1,
                type=classify(segment.term),
            )
            buffer.append(token, consumed=segment.end)
        return buffer.finish()


def unicode_tokenizer_constructor(config: Optional[Mapping[str, Any]] = None) -> UnicodeTokenizer:
    """Registry constructor; unknown configuration keys are ignored."""
    config = config or {}
    return UnicodeTokenizer(
        bytes_per_token=config.get("bytes_per_token", GUESS_BYTES_PER_TOKEN),
        adaptive=config.get("adaptive", True),
    )


def tokenize(data: bytes) -> TokenStream:
    """Tokenize with a default-configured :class:`UnicodeTokenizer`."""
    return UnicodeTokenizer().tokenize(data)
