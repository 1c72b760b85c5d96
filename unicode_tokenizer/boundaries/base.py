"""Base class for boundary walkers."""

from abc import ABC, abstractmethod

from ..models import Segment


class BoundaryWalker(ABC):
    """One forward pass over an input buffer, yielding segments.

    Segments are contiguous and non-overlapping, and together they cover
    every byte of the input. A walker is not restartable: construct a new
    one for each buffer.
    """

    def __init__(self, data: bytes):
        """Initialize walker.

        Args:
            data: Input buffer to segment
        """
        self.data = data

    def __iter__(self) -> "BoundaryWalker":
        return self

    @abstractmethod
    def __next__(self) -> Segment:
        """Advance to the next segment.

        Returns:
            The next Segment

        Raises:
            StopIteration: When the input is exhausted
        """
        pass
