"""
Float Rounding — Five-Mode Rounding over Native Floats

Быстрое приближённое округление float до заданного числа знаков.
Для точного округления денежных сумм используйте precise_round
(numkit.precise.rounding): MathRoundingMode и PrecisionRoundingMode —
разные типы и не взаимозаменяемы.

Алгоритм:
    shifted = value * 10^decimal_places
    rounded = <режим>(shifted)
    result  = rounded / 10^decimal_places

Режимы:
    STANDARD  half-up к +∞: floor(shifted + 0.5)
    CEIL      к +∞
    FLOOR     к -∞
    TRUNCATE  к нулю
    BANKERS   если shifted в пределах EPS_MATH_COMPARE от x.5 → к чётному,
              иначе как STANDARD
"""

import math
from enum import Enum
from typing import Final, Union

from numkit.constants import EPS_MATH_COMPARE
from numkit.errors import InvalidArgumentError
from numkit.math.numerical_safeguards import NumericInput, to_number

# =============================================================================
# ТИПЫ
# =============================================================================


class MathRoundingMode(str, Enum):
    """Режим округления float"""

    STANDARD = "STANDARD"  # Стандартное (half up)
    CEIL = "CEIL"  # К +∞
    FLOOR = "FLOOR"  # К -∞
    TRUNCATE = "TRUNCATE"  # К нулю
    BANKERS = "BANKERS"  # Half to even


DEFAULT_MATH_ROUNDING_MODE: Final[MathRoundingMode] = MathRoundingMode.STANDARD


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_to(
    value: NumericInput,
    decimal_places: int = 0,
    mode: Union[MathRoundingMode, str] = DEFAULT_MATH_ROUNDING_MODE,
) -> float:
    """
    Округление float до decimal_places знаков.

    Args:
        value: Округляемое значение
        decimal_places: Число знаков после запятой (default: 0);
            отрицательное значение округляет до десятков, сотен и т.д.
        mode: Режим округления (default: STANDARD)

    Returns:
        Округлённое значение; ±Inf и значения, чей сдвиг на
        10^decimal_places переполняет float, возвращаются без изменений

    Raises:
        ParseError: Если value не число или NaN
        InvalidArgumentError: Если режим неизвестен

    Examples:
        >>> round_to(123.456, 2)
        123.46
        >>> round_to(2.5, 0, MathRoundingMode.BANKERS)
        2.0
        >>> round_to(3.5, 0, MathRoundingMode.BANKERS)
        4.0
        >>> round_to(2.55, 1, MathRoundingMode.BANKERS)
        2.6
    """
    try:
        mode = MathRoundingMode(mode)
    except ValueError as e:
        raise InvalidArgumentError(f"Unknown rounding mode: {mode!r}") from e

    num = to_number(value)
    if not math.isfinite(num):
        return num

    try:
        multiplier = 10.0**decimal_places
    except OverflowError:
        # decimal_places > 308: точнее, чем хранит любой float
        return num
    shifted = num * multiplier

    # Переполнение сдвига: у таких float нет дробных знаков для округления
    if not math.isfinite(shifted):
        return num

    if mode is MathRoundingMode.CEIL:
        rounded = math.ceil(shifted)
    elif mode is MathRoundingMode.FLOOR:
        rounded = math.floor(shifted)
    elif mode is MathRoundingMode.TRUNCATE:
        rounded = math.trunc(shifted)
    elif mode is MathRoundingMode.BANKERS:
        floor_value = math.floor(shifted)
        fraction = shifted - floor_value
        if abs(fraction - 0.5) < EPS_MATH_COMPARE:
            # Ровно половина → к чётному
            rounded = floor_value if floor_value % 2 == 0 else floor_value + 1
        else:
            rounded = math.floor(shifted + 0.5)
    else:
        rounded = math.floor(shifted + 0.5)

    return rounded / multiplier


def ceil_to(value: NumericInput, decimal_places: int = 0) -> float:
    """Округление вверх (к +∞)."""
    return round_to(value, decimal_places, MathRoundingMode.CEIL)


def floor_to(value: NumericInput, decimal_places: int = 0) -> float:
    """Округление вниз (к -∞)."""
    return round_to(value, decimal_places, MathRoundingMode.FLOOR)


def truncate(value: NumericInput, decimal_places: int = 0) -> float:
    """Усечение (к нулю)."""
    return round_to(value, decimal_places, MathRoundingMode.TRUNCATE)
