"""
Domain models and value objects.

Contains the digit, four-digit group and full numeral value types, plus the
marker tables that drive the parser and renderer.
"""

from kansuji.core.domain.digit import DIGIT_GLYPHS, Digit
from kansuji.core.domain.keta import KETA_BASE, Keta
from kansuji.core.domain.markers import (
    BASE_LEVEL,
    FRACTION_GLYPHS,
    MAGNITUDE_GLYPHS,
    NUMERAL_GLYPHS,
    PLACE_GLYPHS,
    PLACE_TOP_LEVEL,
    TOP_LEVEL,
    FractionMarker,
    Magnitude,
    Place,
)
from kansuji.core.domain.numeral import FRACTION_SCALE, KANSUJI_LIMIT, Kansuji

__all__ = [
    # Digit
    "DIGIT_GLYPHS",
    "Digit",
    # Keta
    "KETA_BASE",
    "Keta",
    # Markers
    "BASE_LEVEL",
    "FRACTION_GLYPHS",
    "MAGNITUDE_GLYPHS",
    "NUMERAL_GLYPHS",
    "PLACE_GLYPHS",
    "PLACE_TOP_LEVEL",
    "TOP_LEVEL",
    "FractionMarker",
    "Magnitude",
    "Place",
    # Numeral value
    "FRACTION_SCALE",
    "KANSUJI_LIMIT",
    "Kansuji",
]
