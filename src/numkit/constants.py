"""
Константы и параметры по умолчанию numkit

Библиотека не читает ни файлов, ни переменных окружения: вся конфигурация —
это набор Final-констант этого модуля.
"""

import math
from typing import Final

# =============================================================================
# FLOAT ТОЧНОСТЬ
# =============================================================================

# Точность по умолчанию для десятичных расчётов на float
MATH_PRECISION_DEFAULT: Final[int] = 10

# Повышенная точность для финансовых расчётов
MATH_PRECISION_HIGH: Final[int] = 20

# Максимальная безопасная точность для float (≈ 15-17 значащих цифр)
MATH_PRECISION_MAX: Final[int] = 15

# Epsilon для сравнения float (compare, equals, is_zero, BANKERS-округление)
EPS_MATH_COMPARE: Final[float] = 1e-10


# =============================================================================
# PRECISE ПАРАМЕТРЫ
# =============================================================================

# Число дробных знаков частного в precise_divide
PRECISE_DIVISION_PRECISION_DEFAULT: Final[int] = 20

# Число знаков после запятой для precise_round / distribute / allocate
PRECISE_DECIMAL_PLACES_DEFAULT: Final[int] = 2

# Порог для precise_equals_within_threshold
PRECISE_EQUALITY_THRESHOLD_DEFAULT: Final[str] = "0.0000000001"


# =============================================================================
# МАТЕМАТИЧЕСКИЕ КОНСТАНТЫ (строки высокой точности)
# =============================================================================

PI: Final[str] = "3.14159265358979323846"
E: Final[str] = "2.71828182845904523536"
SQRT2: Final[str] = "1.41421356237309504880"
SQRT3: Final[str] = "1.73205080756887729352"
PHI: Final[str] = "1.61803398874989484820"  # золотое сечение
LN2: Final[str] = "0.69314718055994530942"
LN10: Final[str] = "2.30258509299404568402"


# =============================================================================
# СТАТИСТИЧЕСКИЕ КОНСТАНТЫ
# =============================================================================

# z-scores для стандартных уровней доверия
CONFIDENCE_Z_SCORES: Final[dict[int, float]] = {
    90: 1.645,
    95: 1.96,
    99: 2.576,
}

PERCENTILE_QUARTILE_1: Final[int] = 25
PERCENTILE_MEDIAN: Final[int] = 50
PERCENTILE_QUARTILE_3: Final[int] = 75


# =============================================================================
# УГЛЫ
# =============================================================================

DEG_TO_RAD: Final[float] = math.pi / 180
RAD_TO_DEG: Final[float] = 180 / math.pi
