"""
Digit — одна десятичная цифра 0..9 (零..九)

Glyph output is contextual:
- glyph: bare glyph, used for a standalone digit (units slot, fractions)
- prefix_glyph: glyph written before 千/百/十 or a magnitude marker,
  where 零 and 一 are elided ("千", not "一千")
"""

from enum import Enum
from typing import Final, Optional


# =============================================================================
# GLYPH TABLE
# =============================================================================

# Index == digit value
DIGIT_GLYPHS: Final[str] = "零一二三四五六七八九"


# =============================================================================
# DIGIT ENUM
# =============================================================================


class Digit(int, Enum):
    """Цифра кансудзи. Total order by integer value."""

    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9

    @classmethod
    def from_value(cls, n: int) -> "Digit":
        """
        Цифра по целому значению.

        Args:
            n: Значение 0..9

        Raises:
            ValueError: Если n вне диапазона 0..9
        """
        if not 0 <= n <= 9:
            raise ValueError(f"digit value must be in 0..9, got {n}")
        return cls(n)

    @classmethod
    def from_glyph(cls, char: str) -> Optional["Digit"]:
        """Цифра по глифу или None, если символ не является цифрой."""
        index = DIGIT_GLYPHS.find(char) if len(char) == 1 else -1
        if index < 0:
            return None
        return cls(index)

    @property
    def glyph(self) -> str:
        return DIGIT_GLYPHS[self.value]

    @property
    def prefix_glyph(self) -> str:
        if self.value <= 1:
            return ""
        return DIGIT_GLYPHS[self.value]
