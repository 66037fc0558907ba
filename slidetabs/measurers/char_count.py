"""
Character-count width heuristic.

No font metrics: every character is assumed to be a fixed fraction of the
font size wide.
"""

from slidetabs.measurers.base import BaseTextMeasurer

DEFAULT_CHAR_WIDTH_FACTOR = 0.6


class CharCountMeasurer(BaseTextMeasurer):
    """Estimate width as ``len(text) * size * char_width_factor``."""

    def __init__(self, char_width_factor: float = DEFAULT_CHAR_WIDTH_FACTOR):
        super().__init__()
        if char_width_factor <= 0:
            raise ValueError(f"char_width_factor must be positive, got {char_width_factor}")
        self.char_width_factor = char_width_factor

    def measure(self, text: str, font: str, size: float) -> float:
        return len(text) * size * self.char_width_factor
