"""
DescendingLevel — явное состояние строго убывающего уровня

Both grammars of the parser share one rule: every marker carries an integer
level, and each accepted marker must sit strictly below the previous one.
Place markers inside a group start below level 4; magnitude and fractional
markers across the whole numeral start below level 6.
"""

import logging
from typing import Optional

from kansuji.core.errors import UnexpectedChar

logger = logging.getLogger(__name__)


class DescendingLevel:
    """Монотонно убывающий целочисленный уровень."""

    def __init__(self, start: int):
        self.start = start
        self.level = start

    def can_descend(self, level: int) -> bool:
        return level < self.level

    def descend(self, level: int, char: str, position: Optional[int] = None) -> None:
        """
        Переход на уровень level.

        Args:
            level: Уровень маркера char
            char: Маркер (для сообщения об ошибке)
            position: Позиция маркера во входной строке

        Raises:
            UnexpectedChar: Если level >= текущего уровня (повтор или
                нарушение порядка)
        """
        if not self.can_descend(level):
            logger.debug(f"Rejected {char!r} at {position}: level {level} >= {self.level}")
            raise UnexpectedChar(char, position)
        self.level = level

    def __repr__(self) -> str:
        return f"DescendingLevel(start={self.start}, level={self.level})"
