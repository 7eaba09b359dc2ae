"""
Numerical Safeguards — Parsing, Validation & Epsilon Comparisons

Фундамент float-слоя:
- Разбор NumericInput (int | float | str) в float с явной ошибкой
- «Мягкий» разбор с fallback для недоверенного ввода
- NaN/Inf санитизация
- Epsilon-сравнения, min/max/clamp/in_range
- Предикаты знака (is_zero, is_positive, is_negative, sign)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. to_number никогда не возвращает NaN (ParseError вместо этого)
2. safe_to_number никогда не поднимает исключение
3. Сравнения на равенство учитывают EPS_MATH_COMPARE
"""

import logging
import math
from collections.abc import Sequence
from typing import Any, Union

from numkit.constants import EPS_MATH_COMPARE
from numkit.errors import EmptyInputError, ParseError

logger = logging.getLogger(__name__)

NumericInput = Union[int, float, str]


# =============================================================================
# РАЗБОР И ВАЛИДАЦИЯ
# =============================================================================


def to_number(value: NumericInput) -> float:
    """
    Приведение NumericInput к float.

    Строки разбираются строго (float() после strip). Бесконечность
    допустима, NaN нет: ни float("nan"), ни строка "nan".

    Args:
        value: int, float или строка с числом

    Returns:
        Значение как float

    Raises:
        ParseError: Если значение не является числом или NaN

    Examples:
        >>> to_number("123.45")
        123.45
        >>> to_number(123)
        123.0
    """
    if isinstance(value, bool):
        raise ParseError(f"Invalid numeric value: {value!r}")

    if isinstance(value, (int, float)):
        parsed = float(value)
    elif isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError as e:
            raise ParseError(f"Invalid numeric value: {value!r}") from e
    else:
        raise ParseError(f"Invalid numeric value: {value!r}")

    if math.isnan(parsed):
        raise ParseError(f"Invalid numeric value: {value!r}")
    return parsed


def safe_to_number(value: Any, default: float = 0.0) -> float:
    """
    Разбор с fallback: default для None, нечисел, NaN и Inf.

    Examples:
        >>> safe_to_number("invalid")
        0.0
        >>> safe_to_number(None, 10.0)
        10.0
        >>> safe_to_number(float("inf"), -1.0)
        -1.0
    """
    if value is None:
        return default

    try:
        parsed = to_number(value)
    except ParseError:
        logger.debug("safe_to_number fallback for %r", value)
        return default

    return sanitize_float(parsed, fallback=default)


def is_valid_number(value: Any) -> bool:
    """
    Проверка: конечное число или строка, разбираемая в конечное число.

    Examples:
        >>> is_valid_number("123.45")
        True
        >>> is_valid_number(float("nan"))
        False
    """
    if value is None:
        return False
    try:
        return is_valid_float(to_number(value))
    except ParseError:
        return False


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """True если значение конечное (не NaN, не Inf)."""
    return math.isfinite(value)


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Замена NaN/Inf на fallback.

    Examples:
        >>> sanitize_float(10.0)
        10.0
        >>> sanitize_float(float("nan"))
        0.0
        >>> sanitize_float(float("-inf"), fallback=-1.0)
        -1.0
    """
    if is_valid_float(value):
        return value
    return fallback


def sanitize_array(values: Sequence[float], fallback: float = 0.0) -> list[float]:
    """Поэлементный sanitize_float."""
    return [sanitize_float(v, fallback) for v in values]


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def compare(a: NumericInput, b: NumericInput, tol: float = EPS_MATH_COMPARE) -> int:
    """
    Сравнение двух чисел с учётом толерантности.

    Returns:
        -1 если a < b, 0 если |a - b| < tol, 1 если a > b

    Examples:
        >>> compare(5, 3)
        1
        >>> compare(1.0, 1.0 + 1e-13)
        0
    """
    diff = to_number(a) - to_number(b)

    if abs(diff) < tol:
        return 0
    elif diff < 0:
        return -1
    else:
        return 1


def equals(a: NumericInput, b: NumericInput, epsilon: float = EPS_MATH_COMPARE) -> bool:
    """
    Равенство в пределах epsilon: |a - b| < epsilon.

    Examples:
        >>> equals(0.1 + 0.2, 0.3)
        True
        >>> equals(5.000000001, 5, 0.01)
        True
    """
    return abs(to_number(a) - to_number(b)) < epsilon


def min_value(values: Sequence[NumericInput]) -> float:
    """Минимум последовательности; EmptyInputError для пустой."""
    if not values:
        raise EmptyInputError("At least one value required")
    return min(to_number(v) for v in values)


def max_value(values: Sequence[NumericInput]) -> float:
    """Максимум последовательности; EmptyInputError для пустой."""
    if not values:
        raise EmptyInputError("At least one value required")
    return max(to_number(v) for v in values)


def clamp(
    value: NumericInput,
    min_val: NumericInput,
    max_val: NumericInput,
) -> float:
    """
    Ограничение значения в диапазоне [min_val, max_val].

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
    """
    result = to_number(value)
    result = min(result, to_number(max_val))
    result = max(result, to_number(min_val))
    return result


def in_range(
    value: NumericInput,
    min_val: NumericInput,
    max_val: NumericInput,
) -> bool:
    """Проверка min_val <= value <= max_val (границы включены)."""
    num = to_number(value)
    return to_number(min_val) <= num <= to_number(max_val)


# =============================================================================
# ПРЕДИКАТЫ ЗНАКА
# =============================================================================


def is_zero(value: NumericInput, epsilon: float = EPS_MATH_COMPARE) -> bool:
    """True если |value| < epsilon."""
    return abs(to_number(value)) < epsilon


def is_positive(value: NumericInput) -> bool:
    """True если value > 0."""
    return to_number(value) > 0


def is_negative(value: NumericInput) -> bool:
    """True если value < 0."""
    return to_number(value) < 0


def sign(value: NumericInput) -> int:
    """
    Знак числа.

    Returns:
        1, -1 или 0
    """
    num = to_number(value)
    if num > 0:
        return 1
    if num < 0:
        return -1
    return 0


def abs_value(value: NumericInput) -> float:
    """Абсолютное значение как float."""
    return abs(to_number(value))
