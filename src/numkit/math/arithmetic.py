"""
Float Arithmetic — Operations, Powers, Logarithms, Angles

Однопроходная арифметика над float:
- add/subtract/multiply/divide/mod над парой значений
- product/difference/quotient над последовательностью
- Степени и корни (power, sqrt, cbrt, nth_root)
- Логарифмы и экспонента (ln, log10, log, exp)
- Конверсия углов
- Целочисленные предикаты (is_integer, is_even, is_odd)

Ошибки области определения (корень чётной степени из отрицательного,
логарифм неположительного) поднимают DomainError, а не возвращают NaN.
"""

import math
from collections.abc import Sequence

from numkit.constants import DEG_TO_RAD, RAD_TO_DEG
from numkit.errors import (
    DivisionByZeroError,
    DomainError,
    EmptyInputError,
    InvalidArgumentError,
)
from numkit.math.numerical_safeguards import NumericInput, to_number

# =============================================================================
# БАЗОВАЯ АРИФМЕТИКА
# =============================================================================


def add(a: NumericInput, b: NumericInput) -> float:
    """Сумма a + b."""
    return to_number(a) + to_number(b)


def subtract(a: NumericInput, b: NumericInput) -> float:
    """Разность a - b."""
    return to_number(a) - to_number(b)


def multiply(a: NumericInput, b: NumericInput) -> float:
    """Произведение a * b."""
    return to_number(a) * to_number(b)


def divide(a: NumericInput, b: NumericInput) -> float:
    """
    Деление a / b.

    Raises:
        DivisionByZeroError: Если b == 0
    """
    divisor = to_number(b)
    if divisor == 0:
        raise DivisionByZeroError("Division by zero")
    return to_number(a) / divisor


def mod(value: NumericInput, divisor: NumericInput) -> float:
    """
    Остаток от деления со знаком делимого (усечённое деление).

    В отличие от оператора %, mod(-7, 3) == -1.0.

    Raises:
        DivisionByZeroError: Если divisor == 0
    """
    div = to_number(divisor)
    if div == 0:
        raise DivisionByZeroError("Division by zero")
    return math.fmod(to_number(value), div)


def product(values: Sequence[NumericInput]) -> float:
    """Произведение последовательности; 0.0 для пустой."""
    if not values:
        return 0.0

    result = 1.0
    for v in values:
        result *= to_number(v)
    return result


def difference(values: Sequence[NumericInput]) -> float:
    """
    Последовательное вычитание: values[0] - values[1] - values[2] - ...

    Raises:
        EmptyInputError: Если values пуст

    Examples:
        >>> difference([10, 3, 2])
        5.0
    """
    if not values:
        raise EmptyInputError("At least one value required")

    result = to_number(values[0])
    for v in values[1:]:
        result -= to_number(v)
    return result


def quotient(values: Sequence[NumericInput]) -> float:
    """
    Последовательное деление: values[0] / values[1] / values[2] / ...

    Raises:
        EmptyInputError: Если values пуст
        DivisionByZeroError: Если любой делитель равен 0

    Examples:
        >>> quotient([100, 2, 5])
        10.0
    """
    if not values:
        raise EmptyInputError("At least one value required")

    result = to_number(values[0])
    for v in values[1:]:
        divisor = to_number(v)
        if divisor == 0:
            raise DivisionByZeroError("Division by zero")
        result /= divisor
    return result


# =============================================================================
# СТЕПЕНИ И КОРНИ
# =============================================================================


def power(base: NumericInput, exponent: NumericInput) -> float:
    """
    base ** exponent.

    Raises:
        DomainError: Для отрицательного base с дробным exponent
            и для 0 в отрицательной степени
    """
    try:
        return math.pow(to_number(base), to_number(exponent))
    except ValueError as e:
        raise DomainError(f"power({base!r}, {exponent!r}) is undefined") from e


def sqrt(value: NumericInput) -> float:
    """
    Квадратный корень.

    Raises:
        DomainError: Если value < 0
    """
    num = to_number(value)
    if num < 0:
        raise DomainError("Cannot calculate square root of negative number")
    return math.sqrt(num)


def cbrt(value: NumericInput) -> float:
    """Кубический корень (определён для отрицательных)."""
    return math.cbrt(to_number(value))


def nth_root(value: NumericInput, n: NumericInput) -> float:
    """
    Корень степени n.

    Корень нечётной целой степени из отрицательного числа вещественный:
    nth_root(-8, 3) == -2.0.

    Raises:
        InvalidArgumentError: Если n == 0
        DomainError: Если value < 0 и n — чётное целое (или не целое)
    """
    num = to_number(value)
    root = to_number(n)

    if root == 0:
        raise InvalidArgumentError("Cannot calculate 0th root")

    if num < 0:
        if not root.is_integer() or root % 2 == 0:
            raise DomainError("Cannot calculate even root of negative number")
        return -math.pow(-num, 1.0 / root)

    return math.pow(num, 1.0 / root)


# =============================================================================
# ЛОГАРИФМЫ
# =============================================================================


def ln(value: NumericInput) -> float:
    """Натуральный логарифм; DomainError для value <= 0."""
    num = to_number(value)
    if num <= 0:
        raise DomainError("Logarithm undefined for non-positive values")
    return math.log(num)


def log10(value: NumericInput) -> float:
    """Десятичный логарифм; DomainError для value <= 0."""
    num = to_number(value)
    if num <= 0:
        raise DomainError("Logarithm undefined for non-positive values")
    return math.log10(num)


def log(value: NumericInput, base: NumericInput) -> float:
    """
    Логарифм по произвольному основанию.

    Raises:
        DomainError: Если value <= 0, base <= 0 или base == 1

    Examples:
        >>> log(8, 2)
        3.0
    """
    num = to_number(value)
    b = to_number(base)
    if num <= 0 or b <= 0 or b == 1:
        raise DomainError("Invalid logarithm parameters")
    return math.log(num, b)


def exp(value: NumericInput) -> float:
    """e ** value."""
    return math.exp(to_number(value))


# =============================================================================
# УГЛЫ
# =============================================================================


def degrees_to_radians(degrees: NumericInput) -> float:
    """Градусы → радианы."""
    return to_number(degrees) * DEG_TO_RAD


def radians_to_degrees(radians: NumericInput) -> float:
    """Радианы → градусы."""
    return to_number(radians) * RAD_TO_DEG


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ПРЕДИКАТЫ
# =============================================================================


def is_integer(value: NumericInput) -> bool:
    """True если значение целое (3.0 — целое)."""
    return to_number(value).is_integer()


def is_even(value: NumericInput) -> bool:
    """True для чётного целого; нецелые не чётны и не нечётны."""
    num = to_number(value)
    return num.is_integer() and num % 2 == 0


def is_odd(value: NumericInput) -> bool:
    """True для нечётного целого."""
    num = to_number(value)
    return num.is_integer() and num % 2 != 0
