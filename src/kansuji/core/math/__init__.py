"""
Core math modules для kansuji

Конверсия Kansuji <-> беззнаковые целые и float.
"""

from kansuji.core.math.converters import (
    FLOAT_BITS,
    KANSUJI_MAX,
    UINT_BITS,
    from_f32,
    from_f64,
    from_float,
    from_u8,
    from_u16,
    from_u32,
    from_u64,
    from_u128,
    from_uint,
    to_f32,
    to_f64,
    to_float,
    to_u8,
    to_u16,
    to_u32,
    to_u64,
    to_u128,
    to_uint,
)

__all__ = [
    # Constants
    "FLOAT_BITS",
    "KANSUJI_MAX",
    "UINT_BITS",
    # Unsigned integers
    "from_uint",
    "from_u8",
    "from_u16",
    "from_u32",
    "from_u64",
    "from_u128",
    "to_uint",
    "to_u8",
    "to_u16",
    "to_u32",
    "to_u64",
    "to_u128",
    # Floating point
    "from_float",
    "from_f32",
    "from_f64",
    "to_float",
    "to_f32",
    "to_f64",
]
