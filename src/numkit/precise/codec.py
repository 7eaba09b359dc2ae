"""
Decimal String Codec — Parsing & Canonical Form

Модуль конвертирует человекочитаемые десятичные строки в нормализованную
тройку (целая часть, дробная часть, знак) и обратно:
- parse_to_string: число или строка → строка (без валидации формата)
- decompose: строка → DecomposedDecimal
- compose: DecomposedDecimal → каноническая строка
- is_valid_decimal_format / safe_parse: проверка и «мягкий» разбор
  недоверенного ввода

КАНОНИЧЕСКАЯ ФОРМА:
1. Нет ведущих нулей в целой части (кроме одиночного "0")
2. Нет хвостовых нулей в дробной части
3. Нет точки, если дробная часть пуста
4. Нет знака у нуля ("-0" → "0")

Экспоненциальная нотация в строках не поддерживается.
"""

import logging
import math
import re
from decimal import Decimal
from typing import NamedTuple, Union

from numkit.errors import ParseError

logger = logging.getLogger(__name__)

DecimalInput = Union[str, int, float, Decimal]

_DECIMAL_FORMAT_RE = re.compile(r"-?[0-9]+(\.[0-9]+)?")
_DIGITS_RE = re.compile(r"[0-9]*")
_NON_DECIMAL_CHARS_RE = re.compile(r"[^0-9.\-]")


# =============================================================================
# ТИПЫ
# =============================================================================


class DecomposedDecimal(NamedTuple):
    """
    Разобранное десятичное значение.

    Эфемерная запись: создаётся на каждый вызов и нигде не хранится.
    """

    integer: str  # Цифры целой части, всегда непустые ("0" по умолчанию)
    fraction: str  # Цифры дробной части ("0" означает «дроби нет»)
    is_negative: bool  # True только для ненулевого значения со знаком "-"

    def is_zero(self) -> bool:
        """True если все цифры — нули."""
        return not self.integer.strip("0") and not self.fraction.strip("0")


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_to_string(value: DecimalInput) -> str:
    """
    Приведение входа к строке без проверки формата.

    Строки обрезаются по пробелам. Числа переводятся в позиционную запись:
    float берётся в кратчайшем repr и разворачивается без экспоненты, поэтому
    1e-07 превращается в "0.0000001".

    Args:
        value: Строка, int, float или Decimal

    Returns:
        Строковое представление значения

    Raises:
        ParseError: Для bool, NaN/Inf и неподдерживаемых типов

    Examples:
        >>> parse_to_string("  12.50 ")
        '12.50'
        >>> parse_to_string(0.1)
        '0.1'
        >>> parse_to_string(1e-07)
        '0.0000001'
    """
    if isinstance(value, str):
        return value.strip()

    if isinstance(value, bool):
        raise ParseError(f"Boolean is not a decimal value: {value!r}")

    if isinstance(value, int):
        return str(value)

    if isinstance(value, float):
        if not math.isfinite(value):
            raise ParseError(f"Non-finite value cannot be a decimal: {value!r}")
        return format(Decimal(repr(value)), "f")

    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ParseError(f"Non-finite value cannot be a decimal: {value!r}")
        return format(value, "f")

    raise ParseError(f"Unsupported decimal input type: {type(value).__name__}")


def decompose(value: DecimalInput) -> DecomposedDecimal:
    """
    Разбор десятичной строки на целую часть, дробную часть и знак.

    Алгоритм:
        1. Отрезать ведущий "-"
        2. Разделить по первой "."
        3. Пустая целая часть → "0" (например, "-.5")
        4. Отсутствующая дробная часть → "0"
        5. is_negative = False, если значение численно равно нулю

    Цифры сохраняются как есть (без обрезки нулей): длина дробной части
    определяет масштаб в арифметике.

    Raises:
        ParseError: Если значение не является десятичным числом

    Examples:
        >>> decompose("-12.340")
        DecomposedDecimal(integer='12', fraction='340', is_negative=True)
        >>> decompose("-.5")
        DecomposedDecimal(integer='0', fraction='5', is_negative=True)
        >>> decompose("-0")
        DecomposedDecimal(integer='0', fraction='0', is_negative=False)
    """
    text = parse_to_string(value)
    has_minus = text.startswith("-")
    absolute = text[1:] if has_minus else text

    integer, _, fraction = absolute.partition(".")

    if not integer and not fraction:
        raise ParseError(f"Invalid decimal value: {text!r}")
    if not _DIGITS_RE.fullmatch(integer) or not _DIGITS_RE.fullmatch(fraction):
        raise ParseError(f"Invalid decimal value: {text!r}")

    parts = DecomposedDecimal(
        integer=integer or "0",
        fraction=fraction or "0",
        is_negative=has_minus,
    )

    if parts.is_negative and parts.is_zero():
        return parts._replace(is_negative=False)
    return parts


def compose(parts: DecomposedDecimal) -> str:
    """
    Сборка канонической строки из DecomposedDecimal.

    Examples:
        >>> compose(DecomposedDecimal("007", "500", True))
        '-7.5'
        >>> compose(DecomposedDecimal("0", "000", True))
        '0'
    """
    integer = parts.integer.lstrip("0") or "0"
    fraction = parts.fraction.rstrip("0")

    body = f"{integer}.{fraction}" if fraction else integer

    if body == "0" or not parts.is_negative:
        return body
    return "-" + body


def normalize(value: DecimalInput) -> str:
    """
    Каноническая форма десятичного значения.

    Examples:
        >>> normalize("-000.100")
        '-0.1'
        >>> normalize("-0.0")
        '0'
    """
    return compose(decompose(value))


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_decimal_format(value: object) -> bool:
    """
    Проверка формата десятичной строки.

    Допустимо: необязательный "-", одна или больше цифр, затем необязательно
    "." и одна или больше цифр. Экспоненты, ведущий "+", несколько точек и
    пустые группы цифр недопустимы.

    Args:
        value: Проверяемое значение (не-строки всегда невалидны)

    Returns:
        True если строка (после strip) полностью соответствует формату
    """
    if not isinstance(value, str) or not value:
        return False
    return _DECIMAL_FORMAT_RE.fullmatch(value.strip()) is not None


def safe_parse(value: object, fallback: str = "0") -> str:
    """
    Безопасный разбор недоверенного ввода в каноническую десятичную строку.

    Для строк, не прошедших проверку формата, делается попытка извлечения:
    удаляются все символы, кроме цифр, "." и "-" (например, "$1,234.50" →
    "1234.50").

    Args:
        value: Любое значение
        fallback: Результат для невалидного ввода (default: "0")

    Returns:
        Каноническая строка или fallback

    Examples:
        >>> safe_parse("$1,234.50")
        '1234.5'
        >>> safe_parse(None)
        '0'
        >>> safe_parse(float("nan"), fallback="-1")
        '-1'
    """
    if value is None or isinstance(value, bool):
        logger.debug("safe_parse fallback for %r", value)
        return fallback

    if isinstance(value, (int, float, Decimal)):
        try:
            return normalize(value)
        except ParseError:
            logger.debug("safe_parse fallback for non-finite %r", value)
            return fallback

    if isinstance(value, str):
        trimmed = value.strip()
        if is_valid_decimal_format(trimmed):
            return normalize(trimmed)

        extracted = _NON_DECIMAL_CHARS_RE.sub("", trimmed)
        if is_valid_decimal_format(extracted):
            return normalize(extracted)

    logger.debug("safe_parse fallback for %r", value)
    return fallback
