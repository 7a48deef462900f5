"""
Numeric Converters — конверсия Kansuji <-> беззнаковые целые / float

Поддерживаемые типы:
- unsigned integers: 8, 16, 32, 64, 128 bit
- floating point: 32, 64 bit (32-bit arithmetic emulated with IEEE single
  rounding)

Integer part: successive division by 10^4 into six groups (垓..一); smaller
widths simply leave the upper groups zero.

Fractional part (float only): trunc((x - trunc(x)) * 1000) split into
分/厘/毛. Lossy beyond three fractional digits, by construction of the
notation; truncation is silent and never an error.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. to_uint(from_uint(n, bits), bits) == n для всех n < min(2^bits, 10^24)
2. from_* никогда не возвращает значение с целой частью >= 10^24
"""

import math
import struct
from typing import Final, Tuple

from kansuji.core.domain.digit import Digit
from kansuji.core.domain.keta import KETA_BASE, Keta
from kansuji.core.domain.markers import Magnitude
from kansuji.core.domain.numeral import FRACTION_SCALE, KANSUJI_LIMIT, Kansuji
from kansuji.core.errors import TooLarge


# =============================================================================
# WIDTHS
# =============================================================================

UINT_BITS: Final[Tuple[int, ...]] = (8, 16, 32, 64, 128)
FLOAT_BITS: Final[Tuple[int, ...]] = (32, 64)

# Largest integer part representable in the notation
KANSUJI_MAX: Final[int] = KANSUJI_LIMIT - 1


# =============================================================================
# VALIDATION
# =============================================================================


def _validate_uint_bits(bits: int) -> None:
    if bits not in UINT_BITS:
        raise ValueError(f"bits must be one of {UINT_BITS}, got {bits}")


def _validate_float_bits(bits: int) -> None:
    if bits not in FLOAT_BITS:
        raise ValueError(f"bits must be one of {FLOAT_BITS}, got {bits}")


def _to_f32(x: float) -> float:
    """Округление float64 до ближайшего float32."""
    return struct.unpack("f", struct.pack("f", x))[0]


# =============================================================================
# DECOMPOSITION
# =============================================================================


def _decompose(n: int) -> dict:
    """
    Разложение целой части на шесть групп по основанию 10^4.

    Returns:
        {"gai": Keta, ..., "man": Keta, "base": Keta}
    """
    fields = {"base": Keta.from_int(n % KETA_BASE)}
    n //= KETA_BASE
    for magnitude in reversed(Magnitude):
        fields[magnitude.field] = Keta.from_int(n % KETA_BASE)
        n //= KETA_BASE
    return fields


def _fraction_digits(thousandths: int) -> dict:
    return {
        "tenths": Digit(thousandths // 100),
        "hundredths": Digit(thousandths % 100 // 10),
        "thousandths": Digit(thousandths % 10),
    }


# =============================================================================
# UNSIGNED INTEGERS
# =============================================================================


def from_uint(value: int, bits: int = 128) -> Kansuji:
    """
    Kansuji из беззнакового целого заданной ширины.

    Args:
        value: Целое 0 <= value < 2^bits
        bits: Ширина типа (8, 16, 32, 64, 128)

    Returns:
        Kansuji без дробной части

    Raises:
        ValueError: Если value не int, отрицательно или шире bits
        TooLarge: Если value >= 10^24 (выше 9999垓)
    """
    _validate_uint_bits(bits)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"value must be int, got {type(value).__name__}")
    if value < 0 or value >= 1 << bits:
        raise ValueError(f"value {value} out of range for u{bits}")
    if value > KANSUJI_MAX:
        raise TooLarge(value, KANSUJI_MAX)
    return Kansuji(**_decompose(value))


def to_uint(kansuji: Kansuji, bits: int = 128) -> int:
    """
    Целая часть Kansuji как беззнаковое целое заданной ширины.

    Дробная часть отбрасывается.

    Raises:
        TooLarge: Если целая часть не помещается в bits
    """
    _validate_uint_bits(bits)
    n = kansuji.integer_value()
    if n >= 1 << bits:
        raise TooLarge(n, (1 << bits) - 1)
    return n


def from_u8(value: int) -> Kansuji:
    return from_uint(value, 8)


def from_u16(value: int) -> Kansuji:
    return from_uint(value, 16)


def from_u32(value: int) -> Kansuji:
    return from_uint(value, 32)


def from_u64(value: int) -> Kansuji:
    return from_uint(value, 64)


def from_u128(value: int) -> Kansuji:
    return from_uint(value, 128)


def to_u8(kansuji: Kansuji) -> int:
    return to_uint(kansuji, 8)


def to_u16(kansuji: Kansuji) -> int:
    return to_uint(kansuji, 16)


def to_u32(kansuji: Kansuji) -> int:
    return to_uint(kansuji, 32)


def to_u64(kansuji: Kansuji) -> int:
    return to_uint(kansuji, 64)


def to_u128(kansuji: Kansuji) -> int:
    return to_uint(kansuji, 128)


# =============================================================================
# FLOATING POINT
# =============================================================================


def from_float(value: float, bits: int = 64) -> Kansuji:
    """
    Kansuji из float.

    Целая часть раскладывается как у from_uint; дробная часть усекается до
    трёх знаков (分/厘/毛).

    Args:
        value: Неотрицательное конечное число
        bits: 32 или 64; при 32 value сначала округляется до float32 и все
            промежуточные операции выполняются с одинарной точностью

    Raises:
        ValueError: Если value NaN/Inf или отрицательно
        TooLarge: Если целая часть >= 10^24

    Examples:
        >>> str(from_float(1.234))
        '一二分三厘四毛'
    """
    _validate_float_bits(bits)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"value must be float, got {type(value).__name__}")
    if isinstance(value, int) and value >= KANSUJI_LIMIT:
        # float() переполняется раньше, чем проверка диапазона
        raise TooLarge(value, KANSUJI_MAX)
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"value must be finite, got {value}")
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")

    if value >= KANSUJI_LIMIT:
        raise TooLarge(value, KANSUJI_MAX)

    single = bits == 32
    if single:
        value = _to_f32(value)

    n = int(value)
    if n > KANSUJI_MAX:
        raise TooLarge(n, KANSUJI_MAX)

    # x - trunc(x) is exact in both precisions
    scaled = (value - float(n)) * float(FRACTION_SCALE)
    if single:
        scaled = _to_f32(scaled)
    thousandths = min(int(scaled), FRACTION_SCALE - 1)

    return Kansuji(**_decompose(n), **_fraction_digits(thousandths))


def to_float(kansuji: Kansuji, bits: int = 64) -> float:
    """
    Kansuji как float: integer_value + fraction_thousandths * 0.001.

    При bits=32 результат округлён до float32.
    """
    _validate_float_bits(bits)
    n = kansuji.integer_value()
    fraction = kansuji.fraction_thousandths()
    if bits == 32:
        return _to_f32(_to_f32(float(n)) + _to_f32(_to_f32(float(fraction)) * _to_f32(0.001)))
    return float(n) + fraction * 0.001


def from_f32(value: float) -> Kansuji:
    return from_float(value, 32)


def from_f64(value: float) -> Kansuji:
    return from_float(value, 64)


def to_f32(kansuji: Kansuji) -> float:
    return to_float(kansuji, 32)


def to_f64(kansuji: Kansuji) -> float:
    return to_float(kansuji, 64)
