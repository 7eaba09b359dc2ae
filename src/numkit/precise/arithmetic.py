"""
Scaled-Integer Arithmetic Core

Сложение, вычитание, умножение и деление десятичных строк без ошибок
binary floating-point.

Все операции сводятся к операциям над целыми произвольной точности
(встроенный int): десятичная точка «сдвигается» за пределы числа, операция
выполняется над целыми, затем точка возвращается на место.

    "12.5" + "0.75"  →  1250 + 75 (масштаб 2)  →  1325  →  "13.25"

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. add/subtract/multiply точны (без потерь)
2. divide — единственная операция с потерей; ошибка ≤ 10^-precision
   (усечение, не округление)
3. Результат всегда в канонической форме (см. codec)
4. Ноль никогда не имеет знака
"""

from numkit.constants import PRECISE_DIVISION_PRECISION_DEFAULT
from numkit.errors import DivisionByZeroError, InvalidArgumentError
from numkit.precise.codec import (
    DecimalInput,
    DecomposedDecimal,
    compose,
    decompose,
    normalize,
)

# =============================================================================
# МАСШТАБИРОВАНИЕ
# =============================================================================


def _to_scaled_int(parts: DecomposedDecimal, fraction_length: int) -> int:
    """Знаковое целое integer+fraction, дробь дополнена нулями справа."""
    magnitude = int(parts.integer + parts.fraction.ljust(fraction_length, "0"))
    return -magnitude if parts.is_negative else magnitude


def _from_scaled_int(scaled: int, fraction_length: int) -> str:
    """Возврат точки на fraction_length знаков справа и нормализация."""
    digits = str(abs(scaled))

    if fraction_length == 0:
        integer, fraction = digits, ""
    else:
        padded = digits.rjust(fraction_length + 1, "0")
        integer = padded[:-fraction_length]
        fraction = padded[-fraction_length:]

    return compose(DecomposedDecimal(integer, fraction, scaled < 0))


# =============================================================================
# ЗНАК
# =============================================================================


def precise_negate(value: DecimalInput) -> str:
    """
    Смена знака.

    Examples:
        >>> precise_negate("1.5")
        '-1.5'
        >>> precise_negate("-0.00")
        '0'
    """
    canonical = normalize(value)
    if canonical == "0":
        return canonical
    return canonical[1:] if canonical.startswith("-") else "-" + canonical


def precise_abs(value: DecimalInput) -> str:
    """Абсолютное значение в канонической форме."""
    return normalize(value).lstrip("-")


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


def precise_add(a: DecimalInput, b: DecimalInput) -> str:
    """
    Точное сложение a + b.

    Дробные части обоих операндов дополняются нулями до общей длины F,
    сумма считается над целыми и масштабируется обратно на F знаков.

    Examples:
        >>> precise_add("0.1", "0.2")
        '0.3'
        >>> precise_add("123.456", "789.012")
        '912.468'
        >>> precise_add("-5.5", "3.3")
        '-2.2'
    """
    a_parts = decompose(a)
    b_parts = decompose(b)

    fraction_length = max(len(a_parts.fraction), len(b_parts.fraction))

    total = _to_scaled_int(a_parts, fraction_length) + _to_scaled_int(
        b_parts, fraction_length
    )
    return _from_scaled_int(total, fraction_length)


def precise_subtract(a: DecimalInput, b: DecimalInput) -> str:
    """
    Точное вычитание a - b (эквивалентно a + (-b)).

    Examples:
        >>> precise_subtract("0.3", "0.1")
        '0.2'
        >>> precise_subtract("100", "33.33")
        '66.67'
        >>> precise_subtract("5", "8")
        '-3'
    """
    return precise_add(a, precise_negate(b))


def precise_multiply(a: DecimalInput, b: DecimalInput) -> str:
    """
    Точное умножение a * b.

    Выравнивание не нужно: число дробных знаков произведения равно
    len(fraction_a) + len(fraction_b). Знак — XOR знаков операндов.

    Examples:
        >>> precise_multiply("0.1", "0.2")
        '0.02'
        >>> precise_multiply("123.45", "67.89")
        '8381.0205'
        >>> precise_multiply("-5", "3")
        '-15'
    """
    a_parts = decompose(a)
    b_parts = decompose(b)

    product = _to_scaled_int(a_parts, len(a_parts.fraction)) * _to_scaled_int(
        b_parts, len(b_parts.fraction)
    )
    return _from_scaled_int(product, len(a_parts.fraction) + len(b_parts.fraction))


def precise_divide(
    a: DecimalInput,
    b: DecimalInput,
    precision: int = PRECISE_DIVISION_PRECISION_DEFAULT,
) -> str:
    """
    Деление a / b с precision дробными знаками.

    Делимое масштабируется на 10^precision перед целочисленным делением
    модулей, поэтому результат УСЕЧЁН (не округлён) до precision знаков.
    Для округлённого результата примените precise_round к частному.

    Args:
        a: Делимое
        b: Делитель
        precision: Число дробных знаков частного (default: 20)

    Returns:
        Частное в канонической форме

    Raises:
        DivisionByZeroError: Если b равен нулю
        InvalidArgumentError: Если precision < 0

    Examples:
        >>> precise_divide("1", "3")
        '0.33333333333333333333'
        >>> precise_divide("10", "4", 2)
        '2.5'
        >>> precise_divide("100", "7", 10)
        '14.2857142857'
    """
    if precision < 0:
        raise InvalidArgumentError(f"precision must be non-negative, got {precision}")

    a_parts = decompose(a)
    b_parts = decompose(b)

    if b_parts.is_zero():
        raise DivisionByZeroError("Division by zero")

    fraction_length = max(len(a_parts.fraction), len(b_parts.fraction))

    dividend = abs(_to_scaled_int(a_parts, fraction_length)) * 10**precision
    divisor = abs(_to_scaled_int(b_parts, fraction_length))

    quotient = dividend // divisor
    if a_parts.is_negative != b_parts.is_negative:
        quotient = -quotient

    return _from_scaled_int(quotient, precision)
