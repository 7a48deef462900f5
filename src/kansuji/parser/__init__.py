"""
Parser — разбор строки кансудзи в Kansuji.

- keta_parser: одна группа из четырёх цифр (千/百/十/一)
- state_machine: порядки 垓..万 и дробные разряды 分/厘/毛
"""

from .config import ParserConfig
from .keta_parser import Cursor, KetaScan, parse_keta
from .levels import DescendingLevel
from .state_machine import (
    KansujiParser,
    ParseResult,
    parse_kansuji,
    parse_kansuji_prefix,
)

__all__ = [
    "ParserConfig",
    "Cursor",
    "KetaScan",
    "parse_keta",
    "DescendingLevel",
    "KansujiParser",
    "ParseResult",
    "parse_kansuji",
    "parse_kansuji_prefix",
]
