"""
Hex color parsing shared by the adapters.

Malformed colors resolve to black instead of raising, so one bad style
value never aborts a whole batch.
"""

import re
from typing import Dict, Optional, Tuple

FALLBACK_RGB = (0, 0, 0)

_HEX_RE = re.compile(r"^#?([0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)


def parse_hex_color(hex_color: Optional[str]) -> Tuple[int, int, int]:
    """
    Parse ``#rrggbb``, ``rrggbb`` or ``#rgb`` into 0-255 channels.

    Returns black for anything else.
    """
    if not isinstance(hex_color, str):
        return FALLBACK_RGB
    match = _HEX_RE.match(hex_color.strip())
    if not match:
        return FALLBACK_RGB

    digits = match.group(1)
    if len(digits) == 3:  # short form #f00
        digits = "".join(c * 2 for c in digits)
    return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))


def hex_to_rgb_fraction(hex_color: Optional[str]) -> Dict[str, float]:
    """Convert a hex color to {'red', 'green', 'blue'} in the 0-1 range."""
    r, g, b = parse_hex_color(hex_color)
    return {"red": r / 255, "green": g / 255, "blue": b / 255}
