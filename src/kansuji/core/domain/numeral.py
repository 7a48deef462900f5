"""
Kansuji — значение кансудзи от 垓 (10^20) до 毛 (10^-3)

Immutable Pydantic модель:
- шесть групп Keta: gai (10^20), kei (10^16), cho (10^12), oku (10^8),
  man (10^4), base (10^0)
- три дробные цифры: tenths (分), hundredths (厘), thousandths (毛)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Целая часть Σ group·10^exponent < 10^24 (помещается в u128)
2. Значение создаётся заново на каждый parse / конверсию и не мутирует
"""

from typing import Final, Iterator, Optional, Tuple

from pydantic import BaseModel, Field

from kansuji.core.domain.digit import Digit
from kansuji.core.domain.keta import KETA_BASE, Keta
from kansuji.core.domain.markers import Magnitude
from kansuji.core.render import render


# Exclusive upper bound of the integer part: 10000 垓
KANSUJI_LIMIT: Final[int] = KETA_BASE ** 6

# Denominator of the fractional part (毛 = 1/1000)
FRACTION_SCALE: Final[int] = 1000


class Kansuji(BaseModel):
    """
    Структурированное значение кансудзи.

    Immutable модель (frozen=True). Equality and hashing are by value.
    """

    gai: Keta = Field(default_factory=Keta, description="垓 group (10^20)")
    kei: Keta = Field(default_factory=Keta, description="京 group (10^16)")
    cho: Keta = Field(default_factory=Keta, description="兆 group (10^12)")
    oku: Keta = Field(default_factory=Keta, description="億 group (10^8)")
    man: Keta = Field(default_factory=Keta, description="万 group (10^4)")
    base: Keta = Field(default_factory=Keta, description="一 group (10^0)")

    tenths: Digit = Field(Digit.ZERO, description="分 (10^-1)")
    hundredths: Digit = Field(Digit.ZERO, description="厘 (10^-2)")
    thousandths: Digit = Field(Digit.ZERO, description="毛 (10^-3)")

    model_config = {"frozen": True}

    def groups(self) -> Iterator[Tuple[Optional[Magnitude], Keta]]:
        """
        Группы в порядке убывания порядка.

        Yields:
            (Magnitude, Keta) для 垓..万, затем (None, base)
        """
        for magnitude in Magnitude:
            yield magnitude, getattr(self, magnitude.field)
        yield None, self.base

    def integer_value(self) -> int:
        """Целая часть: Σ group·10^exponent."""
        n = 0
        for _, keta in self.groups():
            n = n * KETA_BASE + keta.to_int()
        return n

    def fraction_thousandths(self) -> int:
        """Дробная часть в тысячных долях, 0..999."""
        return 100 * self.tenths + 10 * self.hundredths + self.thousandths

    def has_fraction(self) -> bool:
        return self.fraction_thousandths() != 0

    def is_zero(self) -> bool:
        return all(keta.is_zero() for _, keta in self.groups()) and not self.has_fraction()

    def __str__(self) -> str:
        return render(self)
