"""
Text measurers used by the tab layout engine.

- CharCountMeasurer (default heuristic)
- PillowFontMeasurer (TrueType metrics)
"""

from slidetabs.measurers.base import BaseTextMeasurer
from slidetabs.measurers.char_count import CharCountMeasurer
from slidetabs.measurers.pillow_font import PillowFontMeasurer

__all__ = ["BaseTextMeasurer", "CharCountMeasurer", "PillowFontMeasurer"]
