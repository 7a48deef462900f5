"""
Keta Parser — разбор одной группы из четырёх цифр

Consumes the longest prefix of the input that forms a single group
(千/百/十 places plus a units digit) and leaves the terminating magnitude
or fractional marker unconsumed for the magnitude parser.

Правила:
- цифра задаёт pending digit (последняя цифра перед 千/百/十 побеждает)
- 千/百/十 принимаются только в строго убывающем порядке; записывают
  pending digit (или 一, если цифры не было) в свой разряд
- 万/億/兆/京/垓, 分/厘/毛 или конец ввода завершают группу; pending digit
  (или 零) становится units
- цифра, которая следует за уже заданной pending digit и сама стоит перед
  分/厘/毛, начинает дробную часть: группа завершается перед ней
  ("一二分" = 一 + 二分)
- любой другой символ -> UnexpectedChar
"""

import logging
from dataclasses import dataclass
from typing import Optional

from kansuji.core.domain.digit import Digit
from kansuji.core.domain.keta import Keta
from kansuji.core.domain.markers import (
    FRACTION_GLYPHS,
    MAGNITUDE_GLYPHS,
    PLACE_GLYPHS,
    PLACE_TOP_LEVEL,
    Place,
)
from kansuji.core.errors import UnexpectedChar
from kansuji.parser.levels import DescendingLevel

logger = logging.getLogger(__name__)


# =============================================================================
# CURSOR
# =============================================================================


class Cursor:
    """Позиция в строке ввода с просмотром вперёд без возврата."""

    def __init__(self, text: str, position: int = 0):
        self.text = text
        self.position = position

    def peek(self, offset: int = 0) -> Optional[str]:
        index = self.position + offset
        if index < len(self.text):
            return self.text[index]
        return None

    def advance(self) -> str:
        char = self.text[self.position]
        self.position += 1
        return char

    def at_end(self) -> bool:
        return self.position >= len(self.text)

    def __repr__(self) -> str:
        return f"Cursor(position={self.position}, remaining={self.text[self.position:]!r})"


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class KetaScan:
    """Результат разбора группы."""

    keta: Keta
    start: int  # Позиция первого символа группы
    end: int  # Позиция сразу после группы
    places: int  # Сколько маркеров 千/百/十 поглощено

    @property
    def consumed(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.end == self.start


# =============================================================================
# PARSER
# =============================================================================


def _is_terminator(char: Optional[str]) -> bool:
    return char is None or char in MAGNITUDE_GLYPHS or char in FRACTION_GLYPHS


def parse_keta(cursor: Cursor) -> KetaScan:
    """
    Разбор одной группы, начиная с позиции курсора.

    Args:
        cursor: Курсор; после возврата стоит на первом непоглощённом символе

    Returns:
        KetaScan с группой и границами поглощённого текста

    Raises:
        UnexpectedChar: Недопустимый символ или нарушение порядка 千/百/十
    """
    start = cursor.position
    ceiling = DescendingLevel(PLACE_TOP_LEVEL)
    slots = {}
    pending: Optional[Digit] = None
    places = 0

    while not _is_terminator(cursor.peek()):
        char = cursor.peek()

        digit = Digit.from_glyph(char)
        if digit is not None:
            if pending is not None and cursor.peek(1) in FRACTION_GLYPHS:
                break
            pending = digit
            cursor.advance()
            continue

        if char in PLACE_GLYPHS:
            place = Place(char)
            ceiling.descend(place.level, char, cursor.position)
            slots[place.field] = pending if pending is not None else Digit.ONE
            pending = None
            places += 1
            cursor.advance()
            continue

        logger.debug(f"Unexpected {char!r} inside group at {cursor.position}")
        raise UnexpectedChar(char, cursor.position)

    slots["units"] = pending if pending is not None else Digit.ZERO
    return KetaScan(keta=Keta(**slots), start=start, end=cursor.position, places=places)
