"""
Derived Precise Operations

Операции поверх арифметического ядра и движка округления:
- Сравнения и предикаты (compare, equals, greater/less, is_zero, ...)
- Агрегаты над последовательностью (min, max, sum, average)
- Ограничение диапазоном (clamp, in_range)
- Проценты (percentage, add/subtract percentage, percentage_of)
- Распределение суммы (distribute, allocate) с точным сохранением итога

Все агрегаты требуют хотя бы одно значение (EmptyInputError).
"""

import logging
from collections.abc import Sequence

from numkit.constants import (
    PRECISE_DECIMAL_PLACES_DEFAULT,
    PRECISE_DIVISION_PRECISION_DEFAULT,
    PRECISE_EQUALITY_THRESHOLD_DEFAULT,
)
from numkit.errors import EmptyInputError, InvalidArgumentError
from numkit.precise.arithmetic import (
    precise_abs,
    precise_add,
    precise_divide,
    precise_multiply,
    precise_subtract,
)
from numkit.precise.codec import DecimalInput, decompose, normalize
from numkit.precise.rounding import decimal_unit, precise_round

logger = logging.getLogger(__name__)


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def precise_compare(a: DecimalInput, b: DecimalInput) -> int:
    """
    Точное сравнение двух десятичных значений.

    Returns:
        -1 если a < b, 0 если a == b, 1 если a > b

    Examples:
        >>> precise_compare("0.1", "0.2")
        -1
        >>> precise_compare("0.30", "0.3")
        0
        >>> precise_compare("1.5", "1.499")
        1
    """
    diff = decompose(precise_subtract(a, b))

    if diff.is_zero():
        return 0
    return -1 if diff.is_negative else 1


def precise_equals(a: DecimalInput, b: DecimalInput) -> bool:
    """True если a == b численно ("1.0" == "1")."""
    return precise_compare(a, b) == 0


def precise_greater_than(a: DecimalInput, b: DecimalInput) -> bool:
    """True если a > b."""
    return precise_compare(a, b) > 0


def precise_greater_than_or_equal(a: DecimalInput, b: DecimalInput) -> bool:
    """True если a >= b."""
    return precise_compare(a, b) >= 0


def precise_less_than(a: DecimalInput, b: DecimalInput) -> bool:
    """True если a < b."""
    return precise_compare(a, b) < 0


def precise_less_than_or_equal(a: DecimalInput, b: DecimalInput) -> bool:
    """True если a <= b."""
    return precise_compare(a, b) <= 0


def precise_is_zero(value: DecimalInput) -> bool:
    """True если все цифры значения нули ("-0.000" тоже ноль)."""
    return decompose(value).is_zero()


def precise_is_positive(value: DecimalInput) -> bool:
    """True если значение строго больше нуля."""
    parts = decompose(value)
    return not parts.is_negative and not parts.is_zero()


def precise_is_negative(value: DecimalInput) -> bool:
    """True если значение строго меньше нуля."""
    # decompose снимает знак с нуля
    return decompose(value).is_negative


def precise_equals_within_threshold(
    a: DecimalInput,
    b: DecimalInput,
    threshold: DecimalInput = PRECISE_EQUALITY_THRESHOLD_DEFAULT,
) -> bool:
    """
    Равенство с допуском: |a - b| <= threshold.

    Полезно для сумм, накопивших малые расхождения (например, после
    усечения в precise_divide).
    """
    return precise_less_than_or_equal(precise_abs(precise_subtract(a, b)), threshold)


# =============================================================================
# АГРЕГАТЫ
# =============================================================================


def _require_values(values: Sequence[DecimalInput]) -> list[DecimalInput]:
    items = list(values)
    if not items:
        raise EmptyInputError("At least one value is required")
    return items


def precise_min(values: Sequence[DecimalInput]) -> str:
    """Минимум последовательности (каноническая форма)."""
    items = _require_values(values)

    result = normalize(items[0])
    for current in items[1:]:
        if precise_less_than(current, result):
            result = normalize(current)
    return result


def precise_max(values: Sequence[DecimalInput]) -> str:
    """Максимум последовательности (каноническая форма)."""
    items = _require_values(values)

    result = normalize(items[0])
    for current in items[1:]:
        if precise_greater_than(current, result):
            result = normalize(current)
    return result


def precise_sum(values: Sequence[DecimalInput]) -> str:
    """
    Точная сумма последовательности.

    Examples:
        >>> precise_sum(["0.1", "0.2", "0.3"])
        '0.6'
    """
    items = _require_values(values)

    total = "0"
    for current in items:
        total = precise_add(total, current)
    return total


def precise_average(
    values: Sequence[DecimalInput],
    precision: int = PRECISE_DIVISION_PRECISION_DEFAULT,
) -> str:
    """
    Среднее арифметическое (деление усечено до precision знаков).

    Examples:
        >>> precise_average(["1", "2", "4"], precision=4)
        '2.3333'
    """
    items = _require_values(values)
    return precise_divide(precise_sum(items), len(items), precision)


# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================


def precise_clamp(
    value: DecimalInput,
    min_value: DecimalInput,
    max_value: DecimalInput,
) -> str:
    """
    Ограничение значения диапазоном [min_value, max_value].

    Examples:
        >>> precise_clamp("15", "0", "10")
        '10'
        >>> precise_clamp("-0.01", "0", "10")
        '0'
    """
    if precise_less_than(value, min_value):
        return normalize(min_value)
    if precise_greater_than(value, max_value):
        return normalize(max_value)
    return normalize(value)


def precise_in_range(
    value: DecimalInput,
    min_value: DecimalInput,
    max_value: DecimalInput,
) -> bool:
    """Проверка min_value <= value <= max_value (границы включены)."""
    return precise_greater_than_or_equal(
        value, min_value
    ) and precise_less_than_or_equal(value, max_value)


# =============================================================================
# ПРОЦЕНТЫ
# =============================================================================


def precise_percentage(value: DecimalInput, percent: DecimalInput) -> str:
    """
    percent% от value: value * percent / 100.

    Examples:
        >>> precise_percentage("1000", "18")
        '180'
        >>> precise_percentage("250", "15")
        '37.5'
    """
    return precise_divide(precise_multiply(value, percent), "100")


def precise_add_percentage(value: DecimalInput, percent: DecimalInput) -> str:
    """
    Examples:
        >>> precise_add_percentage("1000", "10")
        '1100'
    """
    return precise_add(value, precise_percentage(value, percent))


def precise_subtract_percentage(value: DecimalInput, percent: DecimalInput) -> str:
    """
    Examples:
        >>> precise_subtract_percentage("1000", "10")
        '900'
    """
    return precise_subtract(value, precise_percentage(value, percent))


def precise_percentage_of(part: DecimalInput, whole: DecimalInput) -> str:
    """
    Какую долю в процентах part составляет от whole: (part / whole) * 100.

    Raises:
        DivisionByZeroError: Если whole равен нулю

    Examples:
        >>> precise_percentage_of("25", "100")
        '25'
        >>> precise_percentage_of("3", "12")
        '25'
    """
    return precise_multiply(precise_divide(part, whole), "100")


# =============================================================================
# РАСПРЕДЕЛЕНИЕ
# =============================================================================


def precise_distribute(
    amount: DecimalInput,
    parts: int,
    decimal_places: int = PRECISE_DECIMAL_PLACES_DEFAULT,
) -> list[str]:
    """
    Равномерное распределение суммы на parts частей.

    Алгоритм:
        1. base = round(amount / parts, decimal_places)
        2. remainder = amount - base * parts
        3. По одной единице 10^-decimal_places добавляется (или вычитается)
           к слотам 0, 1, 2, ... пока remainder не станет нулём,
           но не более parts итераций

    Для amount с числом знаков <= decimal_places остаток не превышает
    parts - 1 единиц, и сумма результата точно равна amount.

    Args:
        amount: Распределяемая сумма
        parts: Число частей (> 0)
        decimal_places: Точность частей (default: 2)

    Returns:
        Список из parts канонических строк

    Raises:
        InvalidArgumentError: Если parts <= 0

    Examples:
        >>> precise_distribute("100", 3)
        ['33.34', '33.33', '33.33']
        >>> precise_distribute("10", 4)
        ['2.5', '2.5', '2.5', '2.5']
    """
    if parts <= 0:
        raise InvalidArgumentError(f"parts must be greater than zero, got {parts}")

    amount_str = normalize(amount)
    base = normalize(
        precise_round(precise_divide(amount_str, parts), decimal_places)
    )
    results = [base] * parts

    remainder = precise_subtract(amount_str, precise_multiply(base, parts))
    increment = decimal_unit(decimal_places)

    index = 0
    while not precise_is_zero(remainder) and index < parts:
        if precise_is_positive(remainder):
            results[index] = precise_add(results[index], increment)
            remainder = precise_subtract(remainder, increment)
        else:
            results[index] = precise_subtract(results[index], increment)
            remainder = precise_add(remainder, increment)
        index += 1

    if not precise_is_zero(remainder):
        logger.warning(
            "distribute left unsettled remainder %s (amount=%s, parts=%d, "
            "decimal_places=%d)",
            remainder,
            amount_str,
            parts,
            decimal_places,
        )

    return results


def precise_allocate(
    amount: DecimalInput,
    ratios: Sequence[DecimalInput],
    decimal_places: int = PRECISE_DECIMAL_PLACES_DEFAULT,
) -> list[str]:
    """
    Пропорциональное распределение суммы по ratios.

    Каждый слот, кроме последнего, получает round(amount * ratio / sum(ratios)).
    Последний слот получает точный остаток, поэтому сумма результата всегда
    равна amount. Цена этого: доля последнего слота может немного отклоняться
    от пропорциональной.

    Raises:
        EmptyInputError: Если ratios пуст
        InvalidArgumentError: Если есть отрицательный ratio или сумма ratios = 0

    Examples:
        >>> precise_allocate("1000", [3, 2, 1])
        ['500', '333.33', '166.67']
    """
    if not ratios:
        raise EmptyInputError("At least one ratio is required")

    ratio_values = [normalize(ratio) for ratio in ratios]

    if any(precise_is_negative(ratio) for ratio in ratio_values):
        raise InvalidArgumentError("Ratios must be non-negative")

    total_ratio = precise_sum(ratio_values)
    if precise_is_zero(total_ratio):
        raise InvalidArgumentError("Total ratio must be greater than zero")

    amount_str = normalize(amount)
    results: list[str] = []
    remainder = amount_str

    for ratio in ratio_values[:-1]:
        share = normalize(
            precise_round(
                precise_divide(precise_multiply(amount_str, ratio), total_ratio),
                decimal_places,
            )
        )
        results.append(share)
        remainder = precise_subtract(remainder, share)

    # Последний слот — точный остаток
    results.append(remainder)

    return results
