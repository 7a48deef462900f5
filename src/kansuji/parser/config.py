"""Конфигурация парсера кансудзи."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """Конфигурация KansujiParser.

    - strict: символы после распознанного числа -> UnexpectedChar
      (parse_prefix игнорирует этот флаг и всегда возвращает остаток)
    - allow_empty: пустой ввод разбирается как 零; иначе UnexpectedEnd
    - elide_magnitude_one: пустая группа перед 万/億/兆/京/垓 означает один
      (万 = 10^4); иначе ноль
    """
    strict: bool = True
    allow_empty: bool = True
    elide_magnitude_one: bool = True
