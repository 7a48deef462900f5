"""
Errors — исключения разбора и конверсии кансудзи

All parse failures are terminal: the first invalid character aborts the
whole parse and no partial value is returned.

Hierarchy:
- KansujiError (ValueError)
  - UnexpectedChar — character invalid at the current grammar position
  - UnexpectedEnd  — input ended while a fractional marker was still required
  - TooLarge       — value outside 0 .. 10^24 - 1 or outside a target width
"""

from typing import Optional


class KansujiError(ValueError):
    """Базовое исключение пакета (parse error)."""


class UnexpectedChar(KansujiError):
    """
    Недопустимый символ в текущей позиции грамматики.

    Raised for out-of-order or repeated place/magnitude markers, characters
    outside the numeral alphabet, and fractional markers that follow a group
    with more than a single units digit.
    """

    def __init__(self, char: str, position: Optional[int] = None):
        self.char = char
        self.position = position
        if position is None:
            message = f"unexpected char: {char}"
        else:
            message = f"unexpected char: {char} (position {position})"
        super().__init__(message)


class UnexpectedEnd(KansujiError):
    """Ввод закончился раньше, чем допускает грамматика."""

    def __init__(self, position: Optional[int] = None):
        self.position = position
        super().__init__("unexpected end" if position is None else f"unexpected end (position {position})")


class TooLarge(KansujiError):
    """Значение не помещается в поддерживаемый диапазон."""

    def __init__(self, value: object, limit: Optional[int] = None):
        self.value = value
        self.limit = limit
        if limit is None:
            message = f"too large: {value}"
        else:
            message = f"too large: {value} (max {limit})"
        super().__init__(message)
