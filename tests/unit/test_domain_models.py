"""
Тесты для базовых доменных моделей: Digit, Keta, Kansuji

Проверяет:
1. Конверсию цифр (значение, глифы, elision)
2. Разложение/сборку группы 0..9999
3. Immutability (frozen=True)
4. Целую и дробную части Kansuji
"""

import pytest
from pydantic import ValidationError

from kansuji.core.domain import (
    KANSUJI_LIMIT,
    NUMERAL_GLYPHS,
    Digit,
    FractionMarker,
    Kansuji,
    Keta,
    Magnitude,
    Place,
)


# =============================================================================
# DIGIT TESTS
# =============================================================================


class TestDigit:
    """Тесты для Digit"""

    @pytest.mark.parametrize("n", range(10))
    def test_from_value_roundtrip(self, n: int) -> None:
        """from_value(n).value == n"""
        assert Digit.from_value(n).value == n
        assert int(Digit.from_value(n)) == n

    @pytest.mark.parametrize("n", [-1, 10, 100])
    def test_from_value_out_of_range(self, n: int) -> None:
        with pytest.raises(ValueError, match="0..9"):
            Digit.from_value(n)

    def test_total_order(self) -> None:
        """Порядок по значению"""
        assert Digit.ZERO < Digit.ONE < Digit.FIVE < Digit.NINE
        assert max(Digit) is Digit.NINE

    def test_from_glyph(self) -> None:
        assert Digit.from_glyph("零") is Digit.ZERO
        assert Digit.from_glyph("一") is Digit.ONE
        assert Digit.from_glyph("九") is Digit.NINE
        assert Digit.from_glyph("十") is None
        assert Digit.from_glyph("壱") is None
        assert Digit.from_glyph("") is None

    def test_bare_glyph(self) -> None:
        assert Digit.ZERO.glyph == "零"
        assert Digit.ONE.glyph == "一"
        assert Digit.SEVEN.glyph == "七"

    def test_prefix_glyph_elides_zero_and_one(self) -> None:
        """零 и 一 перед маркером не пишутся"""
        assert Digit.ZERO.prefix_glyph == ""
        assert Digit.ONE.prefix_glyph == ""
        assert Digit.TWO.prefix_glyph == "二"
        assert Digit.NINE.prefix_glyph == "九"


# =============================================================================
# MARKER TESTS
# =============================================================================


class TestMarkers:
    """Тесты таблиц маркеров"""

    def test_place_levels_descend(self) -> None:
        assert [p.level for p in Place] == [3, 2, 1]

    def test_magnitude_levels_and_exponents(self) -> None:
        assert [m.level for m in Magnitude] == [5, 4, 3, 2, 1]
        assert [m.exponent for m in Magnitude] == [20, 16, 12, 8, 4]
        assert Magnitude("億") is Magnitude.OKU

    def test_fraction_levels(self) -> None:
        assert [m.level for m in FractionMarker] == [-1, -2, -3]
        assert [m.field for m in FractionMarker] == ["tenths", "hundredths", "thousandths"]

    def test_alphabet(self) -> None:
        assert set("零一二三四五六七八九十百千万億兆京垓分厘毛") == NUMERAL_GLYPHS


# =============================================================================
# KETA TESTS
# =============================================================================


class TestKeta:
    """Тесты для Keta"""

    def test_default_is_zero(self) -> None:
        keta = Keta()
        assert keta.is_zero()
        assert not keta.is_one()
        assert keta.to_int() == 0

    def test_is_one(self) -> None:
        assert Keta.one().is_one()
        assert Keta(units=Digit.ONE).is_one()
        assert not Keta(tens=Digit.ONE, units=Digit.ONE).is_one()
        assert not Keta(thousands=Digit.ONE).is_one()

    @pytest.mark.parametrize("n", [0, 1, 9, 10, 11, 101, 999, 1000, 1234, 9999])
    def test_int_roundtrip(self, n: int) -> None:
        assert Keta.from_int(n).to_int() == n

    def test_from_int_places(self) -> None:
        keta = Keta.from_int(1203)
        assert keta.thousands is Digit.ONE
        assert keta.hundreds is Digit.TWO
        assert keta.tens is Digit.ZERO
        assert keta.units is Digit.THREE

    @pytest.mark.parametrize("n", [-1, 10_000])
    def test_from_int_out_of_range(self, n: int) -> None:
        with pytest.raises(ValueError):
            Keta.from_int(n)

    def test_single_digit(self) -> None:
        assert Keta(units=Digit.FIVE).is_single_digit()
        assert not Keta(tens=Digit.ONE).is_single_digit()

    def test_frozen(self) -> None:
        keta = Keta.from_int(42)
        with pytest.raises(ValidationError):
            keta.units = Digit.ONE

    def test_invalid_digit_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Keta(units=10)

    def test_accepts_int_digits(self) -> None:
        assert Keta(tens=4, units=2) == Keta.from_int(42)


# =============================================================================
# KANSUJI TESTS
# =============================================================================


class TestKansuji:
    """Тесты для Kansuji"""

    def test_default_is_zero(self) -> None:
        value = Kansuji()
        assert value.is_zero()
        assert value.integer_value() == 0
        assert value.fraction_thousandths() == 0

    def test_integer_value(self) -> None:
        value = Kansuji(gai=Keta.from_int(205), man=Keta.from_int(100), base=Keta.from_int(21))
        assert value.integer_value() == 205 * 10**20 + 100 * 10**4 + 21

    def test_max_integer_value_below_limit(self) -> None:
        nines = Keta.from_int(9999)
        value = Kansuji(gai=nines, kei=nines, cho=nines, oku=nines, man=nines, base=nines)
        assert value.integer_value() == KANSUJI_LIMIT - 1
        assert value.integer_value() < 2**128

    def test_fraction_thousandths(self) -> None:
        value = Kansuji(tenths=Digit.TWO, hundredths=Digit.ZERO, thousandths=Digit.THREE)
        assert value.fraction_thousandths() == 203
        assert value.has_fraction()
        assert not value.is_zero()

    def test_groups_order(self) -> None:
        magnitudes = [m for m, _ in Kansuji().groups()]
        assert magnitudes == [
            Magnitude.GAI,
            Magnitude.KEI,
            Magnitude.CHO,
            Magnitude.OKU,
            Magnitude.MAN,
            None,
        ]

    def test_str_is_canonical_form(self) -> None:
        value = Kansuji(gai=Keta.from_int(205), man=Keta.from_int(100), base=Keta.from_int(21))
        assert str(value) == "二百五垓百万二十一"
        assert str(Kansuji()) == "零"

    def test_value_equality_and_hash(self) -> None:
        a = Kansuji(base=Keta.from_int(7))
        b = Kansuji(base=Keta.from_int(7))
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_frozen(self) -> None:
        value = Kansuji()
        with pytest.raises(ValidationError):
            value.base = Keta.one()
