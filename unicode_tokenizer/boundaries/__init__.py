"""Boundary walkers."""

from .base import BoundaryWalker
from .properties import WordBreak, word_break
from .words import WordBoundaryWalker, segment_category

__all__ = ["BoundaryWalker", "WordBoundaryWalker", "WordBreak", "word_break", "segment_category"]
