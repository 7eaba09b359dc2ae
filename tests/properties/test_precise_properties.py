"""
Property-Based Tests for Precise Decimal Arithmetic

Свойства проверяются на случайных десятичных строках (Hypothesis),
эталон — decimal.Decimal с увеличенной точностью контекста.

Properties tested:
- add / multiply совпадают с Decimal
- compare антисимметрично и согласовано с Decimal
- add(a, negate(a)) == "0", ассоциативность сложения
- divide усекает к нулю; деление на ноль всегда ошибка
- precise_round совпадает с Decimal.quantize и идемпотентно
- normalize идемпотентно, compose(decompose(x)) == normalize(x)
- distribute / allocate сохраняют итоговую сумму
"""

from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    Decimal,
    localcontext,
)

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from numkit.errors import DivisionByZeroError
from numkit.precise import (
    PrecisionRoundingMode,
    compose,
    decompose,
    normalize,
    precise_add,
    precise_allocate,
    precise_compare,
    precise_distribute,
    precise_divide,
    precise_max,
    precise_min,
    precise_multiply,
    precise_negate,
    precise_round,
    precise_subtract,
    precise_sum,
)

# =============================================================================
# HYPOTHESIS STRATEGIES
# =============================================================================


def _decimal_strings(places: int, bound: str = "1000000") -> st.SearchStrategy[str]:
    return st.decimals(
        min_value=Decimal("-" + bound),
        max_value=Decimal(bound),
        places=places,
        allow_nan=False,
        allow_infinity=False,
    ).map(lambda d: format(d, "f"))


decimal_strategy = _decimal_strings(places=6)
money_strategy = _decimal_strings(places=2)

ratio_strategy = st.decimals(
    min_value=Decimal("0"),
    max_value=Decimal("100"),
    places=3,
    allow_nan=False,
    allow_infinity=False,
).map(lambda d: format(d, "f"))

# Режимы с прямым аналогом в модуле decimal
DECIMAL_ROUNDING = {
    PrecisionRoundingMode.DOWN: ROUND_DOWN,
    PrecisionRoundingMode.CEIL: ROUND_CEILING,
    PrecisionRoundingMode.FLOOR: ROUND_FLOOR,
    PrecisionRoundingMode.HALF_UP: ROUND_HALF_UP,
    PrecisionRoundingMode.HALF_DOWN: ROUND_HALF_DOWN,
    PrecisionRoundingMode.HALF_EVEN: ROUND_HALF_EVEN,
}


def _expected(value: Decimal) -> str:
    return normalize(format(value, "f"))


# =============================================================================
# ARITHMETIC
# =============================================================================


class TestArithmeticMatchesDecimal:
    """Арифметика совпадает с decimal.Decimal"""

    @settings(max_examples=100)
    @given(a=decimal_strategy, b=decimal_strategy)
    def test_add(self, a: str, b: str) -> None:
        """a + b совпадает с Decimal"""
        assert precise_add(a, b) == _expected(Decimal(a) + Decimal(b))

    @settings(max_examples=100)
    @given(a=decimal_strategy, b=decimal_strategy)
    def test_subtract(self, a: str, b: str) -> None:
        """a - b совпадает с Decimal"""
        assert precise_subtract(a, b) == _expected(Decimal(a) - Decimal(b))

    @settings(max_examples=100)
    @given(a=decimal_strategy, b=decimal_strategy)
    def test_multiply(self, a: str, b: str) -> None:
        """a * b совпадает с Decimal без потери знаков"""
        with localcontext() as ctx:
            ctx.prec = 100
            expected = _expected(Decimal(a) * Decimal(b))
        assert precise_multiply(a, b) == expected

    @settings(max_examples=100)
    @given(a=decimal_strategy, b=decimal_strategy)
    def test_divide_truncates_toward_zero(self, a: str, b: str) -> None:
        """a / b усекается к нулю до 10 знаков"""
        assume(Decimal(b) != 0)
        with localcontext() as ctx:
            ctx.prec = 100
            expected = _expected(
                (Decimal(a) / Decimal(b)).quantize(Decimal("1e-10"), rounding=ROUND_DOWN)
            )
        assert precise_divide(a, b, 10) == expected

    @settings(max_examples=50)
    @given(a=decimal_strategy, zero=st.sampled_from(["0", "-0", "0.000", 0, 0.0]))
    def test_divide_by_zero_always_raises(self, a: str, zero) -> None:
        """Ноль в любой записи → DivisionByZeroError"""
        with pytest.raises(DivisionByZeroError):
            precise_divide(a, zero)


class TestAlgebraicProperties:
    """Алгебраические свойства сложения и сравнения"""

    @settings(max_examples=100)
    @given(a=decimal_strategy)
    def test_additive_inverse(self, a: str) -> None:
        """a + (-a) == "0" без знака"""
        assert precise_add(a, precise_negate(a)) == "0"

    @settings(max_examples=100)
    @given(a=decimal_strategy, b=decimal_strategy, c=decimal_strategy)
    def test_add_associative(self, a: str, b: str, c: str) -> None:
        """(a + b) + c == a + (b + c)"""
        assert precise_add(precise_add(a, b), c) == precise_add(a, precise_add(b, c))

    @settings(max_examples=100)
    @given(a=decimal_strategy, b=decimal_strategy)
    def test_add_commutative(self, a: str, b: str) -> None:
        """a + b == b + a"""
        assert precise_add(a, b) == precise_add(b, a)

    @settings(max_examples=100)
    @given(a=decimal_strategy, b=decimal_strategy)
    def test_compare_antisymmetric(self, a: str, b: str) -> None:
        """compare(a, b) == -compare(b, a)"""
        assert precise_compare(a, b) == -precise_compare(b, a)

    @settings(max_examples=100)
    @given(a=decimal_strategy, b=decimal_strategy)
    def test_compare_matches_decimal(self, a: str, b: str) -> None:
        """Знак сравнения совпадает с Decimal"""
        expected = (Decimal(a) > Decimal(b)) - (Decimal(a) < Decimal(b))
        assert precise_compare(a, b) == expected

    @settings(max_examples=50)
    @given(values=st.lists(decimal_strategy, min_size=1, max_size=20))
    def test_aggregates(self, values: list[str]) -> None:
        """min/max/sum совпадают с Decimal"""
        decimals = [Decimal(v) for v in values]
        assert precise_min(values) == _expected(min(decimals))
        assert precise_max(values) == _expected(max(decimals))
        assert precise_sum(values) == _expected(sum(decimals, Decimal(0)))


# =============================================================================
# ROUNDING
# =============================================================================


class TestRoundingProperties:
    """precise_round против Decimal.quantize"""

    @settings(max_examples=200)
    @given(
        value=decimal_strategy,
        places=st.integers(min_value=0, max_value=5),
        mode=st.sampled_from(sorted(DECIMAL_ROUNDING, key=lambda m: m.value)),
    )
    def test_matches_decimal_quantize(
        self, value: str, places: int, mode: PrecisionRoundingMode
    ) -> None:
        """Совпадает с Decimal.quantize для режимов с аналогом"""
        quantum = Decimal(1).scaleb(-places)
        expected = Decimal(value).quantize(quantum, rounding=DECIMAL_ROUNDING[mode])

        result = precise_round(value, places, mode)

        assert normalize(result) == _expected(expected)

    @settings(max_examples=100)
    @given(value=decimal_strategy, places=st.integers(min_value=0, max_value=5))
    def test_exact_fraction_length(self, value: str, places: int) -> None:
        """Ровно places дробных знаков"""
        result = precise_round(value, places)
        if places == 0:
            assert "." not in result
        else:
            assert len(result.split(".")[1]) == places

    @settings(max_examples=100)
    @given(
        value=decimal_strategy,
        places=st.integers(min_value=0, max_value=5),
        mode=st.sampled_from(list(PrecisionRoundingMode)),
    )
    def test_idempotent(
        self, value: str, places: int, mode: PrecisionRoundingMode
    ) -> None:
        """Повторное округление ничего не меняет"""
        once = precise_round(value, places, mode)
        assert precise_round(once, places, mode) == once

    @settings(max_examples=100)
    @given(value=decimal_strategy, places=st.integers(min_value=0, max_value=5))
    def test_up_matches_ceil(self, value: str, places: int) -> None:
        """UP совпадает с CEIL"""
        assert precise_round(value, places, PrecisionRoundingMode.UP) == precise_round(
            value, places, PrecisionRoundingMode.CEIL
        )


# =============================================================================
# CODEC
# =============================================================================


class TestCodecProperties:
    """Каноническая форма"""

    @settings(max_examples=100)
    @given(value=decimal_strategy)
    def test_normalize_idempotent(self, value: str) -> None:
        """normalize(normalize(x)) == normalize(x)"""
        assert normalize(normalize(value)) == normalize(value)

    @settings(max_examples=100)
    @given(value=decimal_strategy)
    def test_compose_decompose(self, value: str) -> None:
        """compose(decompose(x)) == normalize(x), ноль без знака"""
        assert compose(decompose(value)) == normalize(value)
        assert normalize(value) != "-0"


# =============================================================================
# DISTRIBUTION
# =============================================================================


class TestDistributionProperties:
    """Распределение сохраняет итоговую сумму"""

    @settings(max_examples=100)
    @given(amount=money_strategy, parts=st.integers(min_value=1, max_value=50))
    def test_distribute_preserves_total(self, amount: str, parts: int) -> None:
        """Сумма долей равна amount"""
        result = precise_distribute(amount, parts)

        assert len(result) == parts
        assert precise_compare(precise_sum(result), amount) == 0

    @settings(max_examples=100)
    @given(amount=money_strategy, parts=st.integers(min_value=1, max_value=50))
    def test_distribute_parts_differ_by_at_most_one_unit(
        self, amount: str, parts: int
    ) -> None:
        """Доли отличаются не более чем на 0.01"""
        result = precise_distribute(amount, parts)
        spread = precise_subtract(precise_max(result), precise_min(result))

        assert precise_compare(spread, "0.01") <= 0

    @settings(max_examples=100)
    @given(
        amount=money_strategy,
        ratios=st.lists(ratio_strategy, min_size=1, max_size=10),
    )
    def test_allocate_preserves_total(self, amount: str, ratios: list[str]) -> None:
        """Сумма долей равна amount"""
        assume(any(Decimal(r) > 0 for r in ratios))

        result = precise_allocate(amount, ratios)

        assert len(result) == len(ratios)
        assert precise_compare(precise_sum(result), amount) == 0
