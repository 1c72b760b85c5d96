"""Unicode word tokenizer for search indexing."""

from .models import Segment, SegmentCategory, Token, TokenStream, TokenType
from .registry import TokenizerRegistry, register_builtin_tokenizers
from .tokenizer import UnicodeTokenizer, tokenize

__version__ = "0.1.0"

__all__ = [
    "Segment",
    "SegmentCategory",
    "Token",
    "TokenStream",
    "TokenType",
    "TokenizerRegistry",
    "UnicodeTokenizer",
    "register_builtin_tokenizers",
    "tokenize",
]
