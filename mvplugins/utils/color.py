#!/usr/bin/env python3
"""
A simple colour value for plugin parameters and tinting.

Colours arrive from plugin parameters as packed 24-bit integers laid out
little-endian: red is the low byte, blue the high one (0x0000FF is red,
0xFF0000 is blue).
Channels are kept exactly as computed, so blending can produce fractional
values; rounding happens only when converting for display.
"""

import math
from dataclasses import dataclass
from typing import Any, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Color:
    """An RGB triple. Channels are 0-255 by convention but not clamped."""
    r: Number
    g: Number
    b: Number

    @classmethod
    def from_hex(cls, value: Number) -> 'Color':
        """Decode a packed 24-bit integer (red in the low byte)."""
        return cls(
            value % 0x100,
            (value // 0x100) % 0x100,
            value // 0x10000,
        )

    @classmethod
    def parse(cls, value: Any) -> 'Color':
        """Decode a raw parameter value such as "16711680" or "0xFF00"."""
        # Imported here: parsers imports this module
        from mvplugins.utils.parsers import to_number
        return cls.from_hex(to_number(value))

    @classmethod
    def from_qcolor(cls, qcolor) -> 'Color':
        """Build a Color from a QColor."""
        return cls(qcolor.red(), qcolor.green(), qcolor.blue())

    def blend(self, other: 'Color', amount: float) -> 'Color':
        """
        Move each channel toward another colour.

        Args:
            other: The colour to blend toward.
            amount: 0 keeps this colour, 1 gives ``other``.

        Returns:
            A new Color. Channels are not rounded.
        """
        return Color(
            self.r + (other.r - self.r) * amount,
            self.g + (other.g - self.g) * amount,
            self.b + (other.b - self.b) * amount,
        )

    def blend_toward_white(self, amount: float) -> 'Color':
        """Shorthand for blending with 0xFFFFFF."""
        return self.blend(WHITE, amount)

    def to_hex(self) -> Number:
        """Pack back into an integer. Fractional channels stay fractional."""
        return self.r + self.g * 0x100 + self.b * 0x10000

    def to_rgb(self) -> tuple:
        """Channels rounded and clamped to 0-255. A NaN channel becomes 0."""
        return tuple(0 if math.isnan(c) else max(0, min(255, int(round(c))))
                     for c in (self.r, self.g, self.b))

    def to_css(self) -> str:
        """Format as ``#rrggbb`` for stylesheets and bitmap drawing."""
        return '#{:02x}{:02x}{:02x}'.format(*self.to_rgb())

    def to_qcolor(self):
        """Convert to a QColor."""
        # Imported lazily so headless hosts without Qt's GUI libraries can use Color
        from PySide6.QtGui import QColor
        return QColor(*self.to_rgb())


WHITE = Color(0xFF, 0xFF, 0xFF)
BLACK = Color(0, 0, 0)
