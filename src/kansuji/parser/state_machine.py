"""Magnitude Parser — сборка Kansuji из последовательности групп.

Цикл:
1. parse_keta -> группа
2. следующий символ:
   - 垓/京/兆/億/万: уровень должен быть выше уровня маркера; группа
     записывается в соответствующий порядок
   - 分/厘/毛: уровень выше уровня маркера и группа из одной цифры;
     цифра записывается в дробный разряд; после 毛 разбор завершается
   - цифра (начало дробной части): при уровне > 0 группа становится
     базовой, уровень -> 0; иначе разбор останавливается
   - конец ввода: при уровне > 0 группа становится базовой; при уровне <= 0
     непустая группа без дробного маркера не поглощается, её позиция
     возвращается в ParseResult.truncated_at (strict parse -> UnexpectedEnd)

Уровень — явное целое состояние (DescendingLevel), стартует с 6 (выше 垓).
"""

import logging
from dataclasses import dataclass
from typing import Optional

from kansuji.core.domain.keta import Keta
from kansuji.core.domain.markers import (
    BASE_LEVEL,
    FRACTION_GLYPHS,
    MAGNITUDE_GLYPHS,
    NUMERAL_GLYPHS,
    TOP_LEVEL,
    FractionMarker,
    Magnitude,
)
from kansuji.core.domain.numeral import Kansuji
from kansuji.core.errors import UnexpectedChar, UnexpectedEnd
from kansuji.parser.config import ParserConfig
from kansuji.parser.keta_parser import Cursor, parse_keta
from kansuji.parser.levels import DescendingLevel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    """Результат разбора префикса строки."""

    value: Kansuji
    consumed: int  # Число символов text, вошедших в value
    text: str
    truncated_at: Optional[int] = None  # Конец ввода перед дробным маркером

    @property
    def remainder(self) -> str:
        return self.text[self.consumed:]

    @property
    def complete(self) -> bool:
        return self.consumed == len(self.text)


class KansujiParser:
    """Парсер кансудзи.

    Entry points:
    - parse(text): всё число; при config.strict хвост -> UnexpectedChar,
      оборванная дробная часть -> UnexpectedEnd
    - parse_prefix(text): ведущий отрезок из глифов кансудзи, хвост
      возвращается в ParseResult.remainder
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        """
        Args:
            config: конфигурация парсера (default: ParserConfig())
        """
        self.config = config or ParserConfig()

    def parse(self, text: str) -> Kansuji:
        """
        Разбор строки целиком.

        Raises:
            UnexpectedChar: Символ недопустим в текущей позиции (или, при
                config.strict, остался непоглощённый хвост)
            UnexpectedEnd: Ввод оборвался перед дробным маркером, или пустой
                ввод при allow_empty=False
        """
        result = self._run(text)
        if self.config.strict and result.truncated_at is not None:
            raise UnexpectedEnd(result.truncated_at)
        if self.config.strict and not result.complete:
            position = result.consumed
            logger.debug(f"Trailing input {result.remainder!r} at {position}")
            raise UnexpectedChar(text[position], position)
        return result.value

    def parse_prefix(self, text: str) -> ParseResult:
        """
        Разбор ведущего числа; остальной текст не проверяется.

        Example:
            parse_prefix("百万一円") -> value=1000001, remainder="円"
        """
        end = 0
        while end < len(text) and text[end] in NUMERAL_GLYPHS:
            end += 1
        result = self._run(text[:end])
        return ParseResult(
            value=result.value,
            consumed=result.consumed,
            text=text,
            truncated_at=result.truncated_at,
        )

    def _run(self, text: str) -> ParseResult:
        if not text and not self.config.allow_empty:
            raise UnexpectedEnd(0)

        cursor = Cursor(text)
        state = DescendingLevel(TOP_LEVEL)
        fields = {}
        consumed = 0
        truncated_at = None

        while True:
            scan = parse_keta(cursor)
            char = cursor.peek()

            # 1. Конец ввода
            if char is None:
                if state.level > BASE_LEVEL:
                    fields["base"] = scan.keta
                    consumed = cursor.position
                elif not scan.is_empty:
                    # Хвост не поглощается; strict parse превращает его в UnexpectedEnd
                    logger.debug(f"Input ended at {cursor.position} before a fractional marker")
                    truncated_at = cursor.position
                break

            # 2. Порядок 垓..万
            if char in MAGNITUDE_GLYPHS:
                magnitude = Magnitude(char)
                state.descend(magnitude.level, char, cursor.position)
                keta = scan.keta
                if scan.is_empty and self.config.elide_magnitude_one:
                    keta = Keta.one()
                fields[magnitude.field] = keta
                cursor.advance()
                consumed = cursor.position
                logger.debug(f"{char} <- {keta.to_int()}")
                continue

            # 3. Дробные разряды 分/厘/毛
            if char in FRACTION_GLYPHS:
                marker = FractionMarker(char)
                if not scan.keta.is_single_digit():
                    logger.debug(f"Rejected {char!r} at {cursor.position}: multi-digit group")
                    raise UnexpectedChar(char, cursor.position)
                state.descend(marker.level, char, cursor.position)
                fields[marker.field] = scan.keta.units
                cursor.advance()
                consumed = cursor.position
                if marker is FractionMarker.THOUSANDTHS:
                    break
                continue

            # 4. Начало дробной части после базовой группы
            if state.level > BASE_LEVEL:
                state.descend(BASE_LEVEL, char, cursor.position)
                fields["base"] = scan.keta
                consumed = cursor.position
                continue

            # Хвост после базовой группы не поглощается
            break

        return ParseResult(
            value=Kansuji(**fields),
            consumed=consumed,
            text=text,
            truncated_at=truncated_at,
        )


# Глобальный экземпляр парсера с конфигурацией по умолчанию
_DEFAULT_PARSER = KansujiParser()


def parse_kansuji(text: str) -> Kansuji:
    """Разбор строки целиком (strict)."""
    return _DEFAULT_PARSER.parse(text)


def parse_kansuji_prefix(text: str) -> ParseResult:
    """Разбор ведущего числа строки."""
    return _DEFAULT_PARSER.parse_prefix(text)
