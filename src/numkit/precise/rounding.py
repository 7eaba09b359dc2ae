"""
Rounding Engine — Exact Decimal Rounding

Округление десятичных строк до заданного числа знаков с девятью режимами.
Решение «округлять вверх по модулю или нет» принимается по цифрам строки,
само увеличение выполняется через precise_add.

Таблица режимов (next = первая отбрасываемая цифра, more = есть ли
ненулевые цифры после неё):

    UP          не отрицательное И (next > 0 ИЛИ more)
    DOWN        никогда
    CEIL        не отрицательное И (next > 0 ИЛИ more)
    FLOOR       отрицательное И (next > 0 ИЛИ more)
    HALF_UP     next >= 5
    HALF_DOWN   next > 5, ИЛИ next == 5 И more
    HALF_EVEN   next > 5, ИЛИ next == 5 И more,
                ИЛИ next == 5 ровно И последняя сохраняемая цифра нечётна
    HALF_CEIL   next >= 5 И не отрицательное
    HALF_FLOOR  next >= 5 И отрицательное

UP и CEIL совпадают намеренно: таблица сохранена в исходном виде для
совместимости. Для отрицательных значений UP ведёт себя как CEIL (к нулю),
а не «от нуля».
"""

from enum import Enum
from typing import Final, Union

from numkit.constants import PRECISE_DECIMAL_PLACES_DEFAULT
from numkit.errors import InvalidArgumentError
from numkit.precise.arithmetic import precise_add, precise_negate
from numkit.precise.codec import DecimalInput, decompose

# =============================================================================
# ТИПЫ
# =============================================================================


class PrecisionRoundingMode(str, Enum):
    """Режим точного округления десятичных строк"""

    UP = "UP"
    DOWN = "DOWN"  # Усечение к нулю
    CEIL = "CEIL"  # К +∞
    FLOOR = "FLOOR"  # К -∞
    HALF_UP = "HALF_UP"  # Половина — от нуля
    HALF_DOWN = "HALF_DOWN"  # Половина — к нулю
    HALF_EVEN = "HALF_EVEN"  # Banker's rounding
    HALF_CEIL = "HALF_CEIL"  # Половина — к +∞
    HALF_FLOOR = "HALF_FLOOR"  # Половина — к -∞


DEFAULT_PRECISION_ROUNDING_MODE: Final[PrecisionRoundingMode] = (
    PrecisionRoundingMode.HALF_EVEN
)


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ
# =============================================================================


def decimal_unit(decimal_places: int) -> str:
    """
    Единица последнего разряда: 10^-decimal_places.

    Examples:
        >>> decimal_unit(0)
        '1'
        >>> decimal_unit(3)
        '0.001'
    """
    if decimal_places < 0:
        raise InvalidArgumentError(
            f"decimal_places must be non-negative, got {decimal_places}"
        )
    if decimal_places == 0:
        return "1"
    return "0." + "0" * (decimal_places - 1) + "1"


def _format_fixed(
    is_negative: bool, integer: str, fraction: str, decimal_places: int
) -> str:
    """Строка ровно с decimal_places дробными знаками."""
    integer = integer.lstrip("0") or "0"
    fraction = fraction.ljust(decimal_places, "0")[:decimal_places]

    body = f"{integer}.{fraction}" if decimal_places else integer

    if is_negative and (integer.strip("0") or fraction.strip("0")):
        return "-" + body
    return body


def _should_round_up(
    mode: PrecisionRoundingMode,
    is_negative: bool,
    next_digit: int,
    has_more_digits: bool,
    last_kept_digit: int,
) -> bool:
    """Решение по таблице режимов (см. docstring модуля)."""
    has_remainder = next_digit > 0 or has_more_digits

    if mode is PrecisionRoundingMode.UP:
        return not is_negative and has_remainder
    elif mode is PrecisionRoundingMode.DOWN:
        return False
    elif mode is PrecisionRoundingMode.CEIL:
        return not is_negative and has_remainder
    elif mode is PrecisionRoundingMode.FLOOR:
        return is_negative and has_remainder
    elif mode is PrecisionRoundingMode.HALF_UP:
        return next_digit >= 5
    elif mode is PrecisionRoundingMode.HALF_DOWN:
        return next_digit > 5 or (next_digit == 5 and has_more_digits)
    elif mode is PrecisionRoundingMode.HALF_EVEN:
        if next_digit > 5:
            return True
        if next_digit == 5:
            # Ровно половина → к чётному
            return has_more_digits or last_kept_digit % 2 != 0
        return False
    elif mode is PrecisionRoundingMode.HALF_CEIL:
        return next_digit >= 5 and not is_negative
    elif mode is PrecisionRoundingMode.HALF_FLOOR:
        return next_digit >= 5 and is_negative

    raise InvalidArgumentError(f"Unknown rounding mode: {mode!r}")


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def precise_round(
    value: DecimalInput,
    decimal_places: int = PRECISE_DECIMAL_PLACES_DEFAULT,
    mode: Union[PrecisionRoundingMode, str] = DEFAULT_PRECISION_ROUNDING_MODE,
) -> str:
    """
    Точное округление до decimal_places знаков.

    Результат всегда содержит ровно decimal_places дробных знаков
    (дополняется нулями), при decimal_places == 0 — без дробной части.

    Args:
        value: Округляемое значение
        decimal_places: Число знаков после запятой (default: 2)
        mode: Режим округления (default: HALF_EVEN)

    Returns:
        Округлённая строка

    Raises:
        InvalidArgumentError: Если decimal_places < 0 или режим неизвестен

    Examples:
        >>> precise_round("2.5", 0, PrecisionRoundingMode.HALF_UP)
        '3'
        >>> precise_round("2.5", 0, PrecisionRoundingMode.HALF_EVEN)
        '2'
        >>> precise_round("2.555", 2)
        '2.56'
        >>> precise_round("-2.5", 0, PrecisionRoundingMode.FLOOR)
        '-3'
        >>> precise_round("7", 2)
        '7.00'
    """
    if decimal_places < 0:
        raise InvalidArgumentError(
            f"decimal_places must be non-negative, got {decimal_places}"
        )

    try:
        mode = PrecisionRoundingMode(mode)
    except ValueError as e:
        raise InvalidArgumentError(f"Unknown rounding mode: {mode!r}") from e

    parts = decompose(value)

    if len(parts.fraction) <= decimal_places:
        # Округление не требуется
        return _format_fixed(
            parts.is_negative, parts.integer, parts.fraction, decimal_places
        )

    keep_digits = parts.fraction[:decimal_places]
    next_digit = int(parts.fraction[decimal_places])
    has_more_digits = bool(parts.fraction[decimal_places + 1 :].rstrip("0"))
    last_kept_digit = int(keep_digits[-1] if keep_digits else parts.integer[-1])

    if not _should_round_up(
        mode, parts.is_negative, next_digit, has_more_digits, last_kept_digit
    ):
        return _format_fixed(
            parts.is_negative, parts.integer, keep_digits, decimal_places
        )

    # Увеличение модуля на одну единицу последнего разряда
    sign = "-" if parts.is_negative else ""
    truncated = sign + parts.integer + ("." + keep_digits if keep_digits else "")
    increment = decimal_unit(decimal_places)

    rounded = decompose(
        precise_add(
            truncated,
            precise_negate(increment) if parts.is_negative else increment,
        )
    )

    # Перенос мог уйти в целую часть, дробь заново приводится к decimal_places
    return _format_fixed(
        rounded.is_negative, rounded.integer, rounded.fraction, decimal_places
    )
