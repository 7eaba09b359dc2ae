"""
Тесты для Float Rounding

Проверяет:
1. Пять режимов MathRoundingMode
2. Отрицательные decimal_places
3. Inf без изменений, NaN → ParseError
4. Большие значения, чей сдвиг переполняет float
"""

import math

import pytest

from numkit.errors import InvalidArgumentError, ParseError
from numkit.math.rounding import (
    DEFAULT_MATH_ROUNDING_MODE,
    MathRoundingMode,
    ceil_to,
    floor_to,
    round_to,
    truncate,
)


class TestRoundTo:
    """Тесты для round_to"""

    def test_default_standard(self) -> None:
        """Режим по умолчанию STANDARD, 0 знаков"""
        assert DEFAULT_MATH_ROUNDING_MODE is MathRoundingMode.STANDARD
        assert round_to(123.456, 2) == 123.46
        assert round_to(2.5) == 3.0

    def test_standard_half_towards_positive_infinity(self) -> None:
        """STANDARD: floor(x + 0.5), поэтому -2.5 → -2"""
        assert round_to(-2.5) == -2.0
        assert round_to(-2.6) == -3.0

    def test_ceil_floor_truncate(self) -> None:
        """Направленные режимы на положительных и отрицательных"""
        assert round_to(1.21, 1, MathRoundingMode.CEIL) == 1.3
        assert round_to(-1.29, 1, MathRoundingMode.FLOOR) == -1.3
        assert round_to(-1.29, 1, MathRoundingMode.TRUNCATE) == -1.2

    @pytest.mark.parametrize(
        ("value", "places", "expected"),
        [
            (2.5, 0, 2.0),
            (3.5, 0, 4.0),
            (-2.5, 0, -2.0),
            (2.6, 0, 3.0),
            (2.4, 0, 2.0),
            (2.55, 1, 2.6),
        ],
    )
    def test_bankers(self, value: float, places: int, expected: float) -> None:
        """BANKERS: ровно половина → к чётному, иначе как STANDARD"""
        assert round_to(value, places, MathRoundingMode.BANKERS) == expected

    def test_string_mode_accepted(self) -> None:
        """Режим можно передать строкой"""
        assert round_to(1.01, 0, "CEIL") == 2.0

    def test_string_value_accepted(self) -> None:
        """Значение можно передать строкой"""
        assert round_to("1.234", 2) == 1.23

    def test_negative_decimal_places(self) -> None:
        """decimal_places < 0 округляет до десятков/сотен"""
        assert round_to(1234, -2) == 1200.0
        assert round_to(1250, -2) == 1300.0

    def test_infinity_passthrough(self) -> None:
        """±Inf возвращаются без изменений"""
        assert round_to(math.inf, 2) == math.inf
        assert round_to("-inf", 2) == -math.inf

    def test_nan_rejected(self) -> None:
        """NaN не округляется: ParseError"""
        with pytest.raises(ParseError):
            round_to(float("nan"), 2)

    @pytest.mark.parametrize("mode", list(MathRoundingMode))
    def test_large_value_shift_overflow(self, mode: MathRoundingMode) -> None:
        """Сдвиг 1e300 * 10^10 переполняет float: значение возвращается как есть"""
        assert round_to(1e300, 10, mode) == 1e300
        assert round_to(-1.7e308, 2, mode) == -1.7e308

    def test_huge_decimal_places(self) -> None:
        """decimal_places > 308 не ломает округление"""
        assert round_to(2.5, 400) == 2.5
        assert round_to(0.1, 309, MathRoundingMode.CEIL) == 0.1

    def test_unknown_mode(self) -> None:
        """Неизвестный режим → InvalidArgumentError"""
        with pytest.raises(InvalidArgumentError, match="Unknown rounding mode"):
            round_to(1.5, 0, "HALF_UP")

    def test_invalid_value(self) -> None:
        """Нечисловое значение → ParseError"""
        with pytest.raises(ParseError):
            round_to("abc", 2)


class TestShortcuts:
    """Тесты ceil_to / floor_to / truncate"""

    def test_ceil_to(self) -> None:
        """Вверх к +∞"""
        assert ceil_to(123.001, 2) == 123.01
        assert ceil_to(-1.5) == -1.0

    def test_floor_to(self) -> None:
        """Вниз к -∞"""
        assert floor_to(123.999, 2) == 123.99
        assert floor_to(-1.5) == -2.0

    def test_truncate(self) -> None:
        """Отбрасывание дробной части к нулю"""
        assert truncate(-123.999, 2) == -123.99
        assert truncate(123.999, 2) == 123.99
        assert truncate(-1.9) == -1.0
