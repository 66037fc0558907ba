"""
TrueType width measurement using Pillow.

Fonts are loaded once per family at a fixed reference size and the
advance width is scaled to the requested point size.
"""

from pathlib import Path
from typing import Dict, Optional, Union
from PIL import ImageFont

from slidetabs.measurers.base import BaseTextMeasurer
from slidetabs.measurers.char_count import CharCountMeasurer, DEFAULT_CHAR_WIDTH_FACTOR

# Large enough that integer hinting does not distort the scaled width
REFERENCE_SIZE = 100


class PillowFontMeasurer(BaseTextMeasurer):
    """
    Measure text with real font metrics.

    Families without a loadable font file fall back to the
    character-count heuristic so a layout pass never aborts on a
    missing font.
    """

    def __init__(
        self,
        font_files: Optional[Dict[str, Union[str, Path]]] = None,
        default_font_file: Optional[Union[str, Path]] = None,
        char_width_factor: float = DEFAULT_CHAR_WIDTH_FACTOR,
    ):
        """
        Initialize measurer.

        Args:
            font_files: Mapping of font family name -> .ttf/.otf path
            default_font_file: Font used for families missing from font_files
            char_width_factor: Factor for the fallback heuristic
        """
        super().__init__()
        self.font_files = {k.lower(): Path(v) for k, v in (font_files or {}).items()}
        self.default_font_file = Path(default_font_file) if default_font_file else None
        self.fallback = CharCountMeasurer(char_width_factor)
        self._fonts: Dict[str, Optional[ImageFont.FreeTypeFont]] = {}

    def measure(self, text: str, font: str, size: float) -> float:
        loaded = self._load(font)
        if loaded is None:
            return self.fallback.measure(text, font, size)
        return loaded.getlength(text) * size / REFERENCE_SIZE

    def _load(self, font: str) -> Optional[ImageFont.FreeTypeFont]:
        key = (font or "").lower()
        if key in self._fonts:
            return self._fonts[key]

        path = self.font_files.get(key, self.default_font_file)
        loaded = None
        if path is None:
            print(f"[Measure] Warning: No font file for '{font}', using character-count estimate")
        else:
            try:
                loaded = ImageFont.truetype(str(path), REFERENCE_SIZE)
            except OSError as e:
                print(f"[Measure] Warning: Could not load font {path}: {e}")

        self._fonts[key] = loaded
        return loaded
