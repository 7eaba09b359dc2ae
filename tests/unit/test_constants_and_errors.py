"""
Тесты для констант и иерархии исключений numkit
"""

import math

import pytest

from numkit import constants
from numkit.errors import (
    DivisionByZeroError,
    DomainError,
    EmptyInputError,
    InvalidArgumentError,
    NumericError,
    ParseError,
)
from numkit.math.statistics import percentiles
from numkit.precise import is_valid_decimal_format, precise_multiply, precise_round


class TestErrorHierarchy:
    """Все ошибки — NumericError и совместимы со встроенными"""

    @pytest.mark.parametrize(
        ("error", "builtin"),
        [
            (ParseError, ValueError),
            (DivisionByZeroError, ZeroDivisionError),
            (InvalidArgumentError, ValueError),
            (EmptyInputError, ValueError),
            (DomainError, ValueError),
        ],
    )
    def test_hierarchy(self, error: type, builtin: type) -> None:
        """Ошибка — NumericError и встроенный аналог"""
        assert issubclass(error, NumericError)
        assert issubclass(error, builtin)

    def test_catch_as_numeric_error(self) -> None:
        """Любая ошибка ловится как NumericError"""
        with pytest.raises(NumericError):
            raise DomainError("x")


class TestMathConstants:
    """Строковые константы высокой точности"""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("PI", math.pi),
            ("E", math.e),
            ("SQRT2", math.sqrt(2)),
            ("SQRT3", math.sqrt(3)),
            ("PHI", (1 + math.sqrt(5)) / 2),
            ("LN2", math.log(2)),
            ("LN10", math.log(10)),
        ],
    )
    def test_matches_float(self, name: str, expected: float) -> None:
        """Строковая константа совпадает с float-значением"""
        value = getattr(constants, name)
        assert is_valid_decimal_format(value)
        assert float(value) == pytest.approx(expected, rel=1e-15)

    def test_usable_in_precise_layer(self) -> None:
        """Окружность радиуса 1 с точностью до 10 знаков"""
        assert precise_round(precise_multiply(constants.PI, "2"), 10) == "6.2831853072"

    def test_angle_conversion_factors(self) -> None:
        """DEG_TO_RAD и RAD_TO_DEG взаимно обратны"""
        assert constants.DEG_TO_RAD * constants.RAD_TO_DEG == pytest.approx(1.0)


class TestStatisticalConstants:
    """Статистические константы"""

    def test_z_scores_increase_with_confidence(self) -> None:
        """Z-оценка растёт с уровнем доверия"""
        scores = constants.CONFIDENCE_Z_SCORES
        assert scores[90] < scores[95] < scores[99]

    def test_quartiles(self) -> None:
        """Квартили выборки 1..5"""
        ps = [
            constants.PERCENTILE_QUARTILE_1,
            constants.PERCENTILE_MEDIAN,
            constants.PERCENTILE_QUARTILE_3,
        ]
        results = percentiles([1, 2, 3, 4, 5], ps)
        assert [r.value for r in results] == [2.0, 3.0, 4.0]

    def test_precision_ordering(self) -> None:
        """DEFAULT < MAX < HIGH"""
        assert constants.MATH_PRECISION_DEFAULT < constants.MATH_PRECISION_MAX
        assert constants.MATH_PRECISION_MAX < constants.MATH_PRECISION_HIGH
