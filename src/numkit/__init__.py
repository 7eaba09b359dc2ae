"""
numkit — численные утилиты

Два независимых слоя:
- numkit.math: быстрые float-хелперы (округление, статистика, интерполяция,
  проценты, арифметика)
- numkit.precise: точная десятичная арифметика над строками на базе
  масштабированных целых (без ошибок binary floating-point)

Для денежных расчётов используйте numkit.precise.
"""

from numkit.errors import (
    DivisionByZeroError,
    DomainError,
    EmptyInputError,
    InvalidArgumentError,
    NumericError,
    ParseError,
)
from numkit.math.rounding import MathRoundingMode, round_to
from numkit.precise.rounding import PrecisionRoundingMode, precise_round

__all__ = [
    # Errors
    "NumericError",
    "ParseError",
    "DivisionByZeroError",
    "InvalidArgumentError",
    "EmptyInputError",
    "DomainError",
    # Rounding
    "MathRoundingMode",
    "PrecisionRoundingMode",
    "round_to",
    "precise_round",
]
