"""
Markers — place, magnitude and fractional marker glyphs.

Every marker has an integer level. Within one numeral the levels of the
markers that appear must strictly decrease:

    垓 5 > 京 4 > 兆 3 > 億 2 > 万 1 > (base) 0 > 分 -1 > 厘 -2 > 毛 -3

Place markers use a separate scale inside a single four-digit group:

    (start) 4 > 千 3 > 百 2 > 十 1
"""

from enum import Enum
from typing import Final

from kansuji.core.domain.digit import DIGIT_GLYPHS


# =============================================================================
# LEVELS
# =============================================================================

# Magnitude parser starts above 垓
TOP_LEVEL: Final[int] = 6

# Level of the base (10^0) group
BASE_LEVEL: Final[int] = 0

# Group parser starts above 千
PLACE_TOP_LEVEL: Final[int] = 4


# =============================================================================
# ENUMS
# =============================================================================


class Place(str, Enum):
    """Разряд внутри группы из четырёх цифр."""

    THOUSANDS = "千"
    HUNDREDS = "百"
    TENS = "十"

    @property
    def level(self) -> int:
        return _PLACE_LEVELS[self]

    @property
    def field(self) -> str:
        return self.name.lower()


class Magnitude(str, Enum):
    """Множитель 10^4k над базовой группой."""

    GAI = "垓"
    KEI = "京"
    CHO = "兆"
    OKU = "億"
    MAN = "万"

    @property
    def level(self) -> int:
        return _MAGNITUDE_LEVELS[self]

    @property
    def exponent(self) -> int:
        return 4 * _MAGNITUDE_LEVELS[self]

    @property
    def field(self) -> str:
        return self.name.lower()


class FractionMarker(str, Enum):
    """Дробный разряд: 分 = 10^-1, 厘 = 10^-2, 毛 = 10^-3."""

    TENTHS = "分"
    HUNDREDTHS = "厘"
    THOUSANDTHS = "毛"

    @property
    def level(self) -> int:
        return _FRACTION_LEVELS[self]

    @property
    def field(self) -> str:
        return self.name.lower()


_PLACE_LEVELS: Final = {Place.THOUSANDS: 3, Place.HUNDREDS: 2, Place.TENS: 1}

_MAGNITUDE_LEVELS: Final = {
    Magnitude.GAI: 5,
    Magnitude.KEI: 4,
    Magnitude.CHO: 3,
    Magnitude.OKU: 2,
    Magnitude.MAN: 1,
}

_FRACTION_LEVELS: Final = {
    FractionMarker.TENTHS: -1,
    FractionMarker.HUNDREDTHS: -2,
    FractionMarker.THOUSANDTHS: -3,
}


# =============================================================================
# GLYPH SETS
# =============================================================================

PLACE_GLYPHS: Final[frozenset] = frozenset(m.value for m in Place)
MAGNITUDE_GLYPHS: Final[frozenset] = frozenset(m.value for m in Magnitude)
FRACTION_GLYPHS: Final[frozenset] = frozenset(m.value for m in FractionMarker)

# Full input alphabet
NUMERAL_GLYPHS: Final[frozenset] = (
    frozenset(DIGIT_GLYPHS) | PLACE_GLYPHS | MAGNITUDE_GLYPHS | FRACTION_GLYPHS
)
