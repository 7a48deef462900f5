"""
Sanity-тест для модуля Numeric Converters

Проверяет:
1. Разложение беззнаковых целых всех ширин по группам 10^4
2. Обратимость to_uint(from_uint(n)) == n
3. Усечение дробной части float до 分/厘/毛
4. Валидацию диапазонов (ValueError / TooLarge)
"""

import pytest

from kansuji.core.domain import Digit, Kansuji, Keta
from kansuji.core.errors import TooLarge
from kansuji.core.math.converters import (
    KANSUJI_MAX,
    from_f32,
    from_f64,
    from_float,
    from_u8,
    from_u16,
    from_u32,
    from_u64,
    from_u128,
    from_uint,
    to_f32,
    to_f64,
    to_u8,
    to_u16,
    to_u32,
    to_u64,
    to_u128,
    to_uint,
)


class TestUnsignedIntegers:
    """Тесты конверсий беззнаковых целых"""

    def test_decomposition(self) -> None:
        value = from_u128(205 * 10**20 + 100 * 10**4 + 21)
        assert value.gai == Keta.from_int(205)
        assert value.kei == Keta()
        assert value.man == Keta.from_int(100)
        assert value.base == Keta.from_int(21)
        assert not value.has_fraction()

    @pytest.mark.parametrize(
        "from_fn, to_fn, n",
        [
            (from_u8, to_u8, 255),
            (from_u16, to_u16, 65_535),
            (from_u32, to_u32, 4_294_967_295),
            (from_u64, to_u64, 18_446_744_073_709_551_615),
            (from_u128, to_u128, KANSUJI_MAX),
        ],
    )
    def test_width_max_roundtrip(self, from_fn, to_fn, n: int) -> None:
        """Инвариант: to(from(n)) == n на верхней границе ширины"""
        assert to_fn(from_fn(n)) == n

    def test_small_widths_leave_upper_groups_zero(self) -> None:
        value = from_u16(65_535)
        assert value.man == Keta.from_int(6)
        assert value.base == Keta.from_int(5535)
        assert value.oku == value.cho == value.kei == value.gai == Keta()

    @pytest.mark.parametrize("n", [0, 1, 2, 3, 10, 11, 15, 200, 76_492_334, 764_923_341, 1_999_999])
    def test_roundtrip(self, n: int) -> None:
        assert to_u128(from_u128(n)) == n

    def test_u64_max_groups(self) -> None:
        """18446744073709551615 = 1844京6744兆737億955万1615"""
        value = from_u64(2**64 - 1)
        assert value.kei.to_int() == 1844
        assert value.cho.to_int() == 6744
        assert value.oku.to_int() == 737
        assert value.man.to_int() == 955
        assert value.base.to_int() == 1615

    def test_too_large(self) -> None:
        with pytest.raises(TooLarge):
            from_u128(KANSUJI_MAX + 1)

    @pytest.mark.parametrize("bits, n", [(8, 256), (16, -1), (32, 2**32), (128, 2**128)])
    def test_out_of_width(self, bits: int, n: int) -> None:
        with pytest.raises(ValueError):
            from_uint(n, bits)

    @pytest.mark.parametrize("value", [1.5, "1", True, None])
    def test_non_int_rejected(self, value) -> None:
        with pytest.raises(ValueError):
            from_u128(value)

    def test_unsupported_width(self) -> None:
        with pytest.raises(ValueError, match="bits"):
            from_uint(1, 24)

    def test_to_narrow_width_too_large(self) -> None:
        with pytest.raises(TooLarge):
            to_u8(from_u128(300))
        assert to_u16(from_u128(300)) == 300

    def test_to_uint_drops_fraction(self) -> None:
        value = Kansuji(base=Keta.from_int(7), tenths=Digit.NINE)
        assert to_uint(value) == 7
        assert to_u32(value) == 7


class TestFloats:
    """Тесты конверсий float"""

    def test_fraction_digits(self) -> None:
        value = from_f64(1.234)
        assert value.base == Keta.one()
        assert (value.tenths, value.hundredths, value.thousandths) == (
            Digit.TWO,
            Digit.THREE,
            Digit.FOUR,
        )

    def test_zero_hundredths(self) -> None:
        value = from_f64(1.203)
        assert value.hundredths is Digit.ZERO
        assert value.fraction_thousandths() == 203

    def test_truncates_beyond_thousandths(self) -> None:
        """Четвёртый знак отбрасывается (усечение, не округление)"""
        value = from_f64(2.5009)
        assert value.base == Keta.from_int(2)
        assert value.fraction_thousandths() == 500

    def test_integer_float(self) -> None:
        value = from_f64(10_000.0)
        assert value == from_u128(10_000)

    def test_large_float(self) -> None:
        value = from_f64(1e20)
        assert value.gai == Keta.one()
        assert value.kei == Keta()

    def test_int_accepted(self) -> None:
        assert from_float(3) == from_u128(3)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), -1.0])
    def test_invalid_float(self, value: float) -> None:
        with pytest.raises(ValueError):
            from_f64(value)

    def test_too_large_float(self) -> None:
        with pytest.raises(TooLarge):
            from_f64(1e25)
        with pytest.raises(TooLarge):
            from_f32(1e30)

    def test_huge_int_too_large(self) -> None:
        """int за пределами float: TooLarge, а не OverflowError"""
        with pytest.raises(TooLarge):
            from_float(10**400)
        with pytest.raises(TooLarge):
            from_f32(10**24)

    def test_to_f64(self) -> None:
        assert to_f64(from_f64(1.234)) == pytest.approx(1.234, abs=1e-12)
        assert to_f64(from_u128(764_923_341)) == 764_923_341.0

    def test_f32_roundtrip(self) -> None:
        value = from_f32(1.5)
        assert value.base == Keta.one()
        assert value.tenths is Digit.FIVE
        assert to_f32(value) == 1.5

    def test_f32_fraction_rendering(self) -> None:
        """1.234 в float32 чуть меньше 1.234: 毛 усекается до 3"""
        value = from_f32(1.234)
        assert value.fraction_thousandths() == 233
        assert str(value) == "一二分三厘三毛"
        assert str(from_f64(1.234)) == "一二分三厘四毛"

    def test_f32_precision(self) -> None:
        """float32 хранит 16777217 как 16777216"""
        assert from_f32(16_777_217.0).base.to_int() == 7216
        assert from_f64(16_777_217.0).base.to_int() == 7217

    def test_unsupported_float_width(self) -> None:
        with pytest.raises(ValueError, match="bits"):
            from_float(1.0, 16)
