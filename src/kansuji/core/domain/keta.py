"""
Keta — группа из четырёх цифр (千/百/十/一), значение 0..9999

Immutable Pydantic модель. Any combination of four digits is valid, so a
group is bounded to 0..9999 by construction.
"""

from typing import Final

from pydantic import BaseModel, Field

from kansuji.core.domain.digit import Digit


# Radix of one group
KETA_BASE: Final[int] = 10_000


class Keta(BaseModel):
    """
    Группа разрядов: thousands, hundreds, tens, units.

    Value = units + 10·tens + 100·hundreds + 1000·thousands
    """

    thousands: Digit = Field(Digit.ZERO, description="千 slot")
    hundreds: Digit = Field(Digit.ZERO, description="百 slot")
    tens: Digit = Field(Digit.ZERO, description="十 slot")
    units: Digit = Field(Digit.ZERO, description="一 slot")

    model_config = {"frozen": True}

    @classmethod
    def from_int(cls, n: int) -> "Keta":
        """
        Разложение целого 0..9999 по разрядам.

        Raises:
            ValueError: Если n вне диапазона 0..9999
        """
        if not 0 <= n < KETA_BASE:
            raise ValueError(f"keta value must be in 0..9999, got {n}")
        return cls(
            thousands=Digit(n // 1000),
            hundreds=Digit(n % 1000 // 100),
            tens=Digit(n % 100 // 10),
            units=Digit(n % 10),
        )

    @classmethod
    def one(cls) -> "Keta":
        return cls(units=Digit.ONE)

    def to_int(self) -> int:
        return self.units + 10 * self.tens + 100 * self.hundreds + 1000 * self.thousands

    def is_zero(self) -> bool:
        return self.is_single_digit() and self.units == Digit.ZERO

    def is_one(self) -> bool:
        """Ровно 1: 千 = 百 = 十 = 零, 一 = 一."""
        return self.is_single_digit() and self.units == Digit.ONE

    def is_single_digit(self) -> bool:
        """Заполнен не более чем units (требование для дробных разрядов)."""
        return (
            self.thousands == Digit.ZERO
            and self.hundreds == Digit.ZERO
            and self.tens == Digit.ZERO
        )
