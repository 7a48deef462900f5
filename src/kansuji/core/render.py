"""
Renderer — каноническая строковая форма кансудзи

Rules, in descending order of magnitude:
- a group is written as [d]千 [d]百 [d]十 u, skipping zero places; the digit
  before 千/百/十 uses the prefix glyph (一 elided), the units digit the bare glyph
- a non-zero magnitude group is followed by its marker; a group equal to one
  is written as the marker alone (万, not 一万)
- the base group is written without a marker (one renders as 一)
- each non-zero fractional digit is written as glyph + 分/厘/毛
- a value with every group and fraction zero renders as 零

Canonical form is the round-trip target: parse(render(v)) == v for every
integer value.
"""

from typing import TYPE_CHECKING, Final

from kansuji.core.domain.digit import Digit
from kansuji.core.domain.keta import Keta
from kansuji.core.domain.markers import FractionMarker, Place

if TYPE_CHECKING:
    from kansuji.core.domain.numeral import Kansuji


ZERO_TEXT: Final[str] = Digit.ZERO.glyph


def render_keta(keta: Keta) -> str:
    """
    Текст одной группы без маркера порядка.

    Returns:
        Например: Keta(hundreds=1, tens=3, units=1) -> "百三十一"; пустая
        строка для нулевой группы
    """
    parts = []
    for place in Place:
        digit = getattr(keta, place.field)
        if digit != Digit.ZERO:
            parts.append(digit.prefix_glyph + place.value)
    if keta.units != Digit.ZERO:
        parts.append(keta.units.glyph)
    return "".join(parts)


def render(kansuji: "Kansuji") -> str:
    """Каноническая форма значения."""
    if kansuji.is_zero():
        return ZERO_TEXT

    parts = []
    for magnitude, keta in kansuji.groups():
        if keta.is_zero():
            continue
        if magnitude is None:
            parts.append(render_keta(keta))
        elif keta.is_one():
            parts.append(magnitude.value)
        else:
            parts.append(render_keta(keta) + magnitude.value)

    for marker in FractionMarker:
        digit = getattr(kansuji, marker.field)
        if digit != Digit.ZERO:
            parts.append(digit.glyph + marker.value)

    return "".join(parts)
