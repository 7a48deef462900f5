"""
kansuji — разбор, рендеринг и конверсия японских числительных (漢数字)

Supported range: 垓 (10^20) down to 毛 (10^-3).

    >>> from kansuji import parse_kansuji, from_u128, to_u128
    >>> to_u128(parse_kansuji("二百五垓百万二十一"))
    20500000000000001000021
    >>> str(from_u128(1999999))
    '百九十九万九千九百九十九'
"""

from kansuji.core.domain import Digit, FractionMarker, Kansuji, Keta, Magnitude, Place
from kansuji.core.errors import KansujiError, TooLarge, UnexpectedChar, UnexpectedEnd
from kansuji.core.math import (
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
from kansuji.core.render import render, render_keta
from kansuji.parser import (
    KansujiParser,
    ParserConfig,
    ParseResult,
    parse_kansuji,
    parse_kansuji_prefix,
)

__version__ = "0.1.0"

__all__ = [
    # Domain
    "Digit",
    "Keta",
    "Kansuji",
    "Place",
    "Magnitude",
    "FractionMarker",
    # Errors
    "KansujiError",
    "UnexpectedChar",
    "UnexpectedEnd",
    "TooLarge",
    # Parser
    "KansujiParser",
    "ParserConfig",
    "ParseResult",
    "parse_kansuji",
    "parse_kansuji_prefix",
    # Renderer
    "render",
    "render_keta",
    # Converters
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
    "from_float",
    "from_f32",
    "from_f64",
    "to_float",
    "to_f32",
    "to_f64",
]
