"""
Descriptive Statistics over Floats

Все функции принимают последовательность NumericInput.

- sum_values, mean, median, mode
- variance / standard_deviation (выборочные, делитель n - 1)
- population_variance / population_standard_deviation (делитель n)
- describe → StatisticsResult
- percentile / percentiles (линейная интерполяция между соседними рангами)

ФОРМУЛА percentile:
    index  = p / 100 * (n - 1)
    lower  = floor(index), upper = ceil(index)
    result = sorted[lower] * (1 - w) + sorted[upper] * w,  w = index - lower
"""

import math
from collections import Counter
from collections.abc import Sequence

from numkit.domain.statistics import PercentileResult, StatisticsResult
from numkit.errors import EmptyInputError, InvalidArgumentError
from numkit.math.numerical_safeguards import (
    NumericInput,
    max_value,
    min_value,
    to_number,
)


def _require_numbers(values: Sequence[NumericInput]) -> list[float]:
    if not values:
        raise EmptyInputError("At least one value required")
    return [to_number(v) for v in values]


def _average(numbers: list[float]) -> float:
    """Среднее; если сумма переполнилась, слагаемые делятся на n заранее."""
    total = sum(numbers)
    if math.isfinite(total) or not all(math.isfinite(x) for x in numbers):
        return total / len(numbers)
    return sum(x / len(numbers) for x in numbers)


# =============================================================================
# ЦЕНТРАЛЬНАЯ ТЕНДЕНЦИЯ
# =============================================================================


def sum_values(values: Sequence[NumericInput]) -> float:
    """Сумма; 0.0 для пустой последовательности."""
    return sum((to_number(v) for v in values), 0.0)


def mean(values: Sequence[NumericInput]) -> float:
    """
    Среднее арифметическое.

    Raises:
        EmptyInputError: Если values пуст
    """
    numbers = _require_numbers(values)
    return _average(numbers)


def median(values: Sequence[NumericInput]) -> float:
    """
    Медиана (для чётного n — среднее двух центральных).

    Examples:
        >>> median([1, 3, 5, 7, 9])
        5.0
        >>> median([1, 2, 3, 4])
        2.5
    """
    numbers = sorted(_require_numbers(values))
    mid = len(numbers) // 2

    if len(numbers) % 2 == 0:
        return numbers[mid - 1] / 2 + numbers[mid] / 2
    return numbers[mid]


def mode(values: Sequence[NumericInput]) -> list[float]:
    """
    Наиболее частые значения, по возрастанию.

    Examples:
        >>> mode([1, 2, 2, 3, 3, 3])
        [3.0]
        >>> mode([1, 1, 2, 2])
        [1.0, 2.0]
    """
    frequency = Counter(_require_numbers(values))
    max_freq = max(frequency.values())
    return sorted(value for value, freq in frequency.items() if freq == max_freq)


# =============================================================================
# РАЗБРОС
# =============================================================================


def _sum_squared_deviations(numbers: list[float]) -> float:
    avg = _average(numbers)
    # d * d, не d ** 2: float.__pow__ поднимает OverflowError вместо inf
    return sum((x - avg) * (x - avg) for x in numbers)


def variance(values: Sequence[NumericInput]) -> float:
    """Выборочная дисперсия; 0.0 при n < 2."""
    if len(values) < 2:
        return 0.0
    numbers = [to_number(v) for v in values]
    return _sum_squared_deviations(numbers) / (len(numbers) - 1)


def population_variance(values: Sequence[NumericInput]) -> float:
    """Дисперсия генеральной совокупности; 0.0 для пустой."""
    if not values:
        return 0.0
    numbers = [to_number(v) for v in values]
    return _sum_squared_deviations(numbers) / len(numbers)


def standard_deviation(values: Sequence[NumericInput]) -> float:
    """Выборочное стандартное отклонение; 0.0 при n < 2."""
    return math.sqrt(variance(values))


def population_standard_deviation(values: Sequence[NumericInput]) -> float:
    """Стандартное отклонение генеральной совокупности."""
    return math.sqrt(population_variance(values))


# =============================================================================
# СВОДКА
# =============================================================================


def describe(values: Sequence[NumericInput]) -> StatisticsResult:
    """
    Полная описательная статистика выборки.

    Raises:
        EmptyInputError: Если values пуст

    Examples:
        >>> stats = describe([1, 2, 3, 4, 5])
        >>> stats.mean, stats.median, stats.range
        (3.0, 3.0, 4.0)
    """
    numbers = _require_numbers(values)

    total = sum(numbers)
    lowest = min_value(numbers)
    highest = max_value(numbers)
    sample_variance = variance(numbers)

    return StatisticsResult(
        count=len(numbers),
        sum=total,
        mean=_average(numbers),
        median=median(numbers),
        mode=mode(numbers),
        min=lowest,
        max=highest,
        range=highest - lowest,
        variance=sample_variance,
        standard_deviation=math.sqrt(sample_variance),
    )


# =============================================================================
# ПЕРЦЕНТИЛИ
# =============================================================================


def percentile(values: Sequence[NumericInput], p: float) -> float:
    """
    Перцентиль p выборки.

    Args:
        values: Выборка
        p: Перцентиль в [0, 100]

    Returns:
        p == 0 → минимум, p == 100 → максимум, иначе линейная интерполяция

    Raises:
        EmptyInputError: Если values пуст
        InvalidArgumentError: Если p вне [0, 100]

    Examples:
        >>> percentile([1, 2, 3, 4, 5], 50)
        3.0
        >>> percentile([1, 2, 3, 4], 25)
        1.75
    """
    numbers = sorted(_require_numbers(values))

    if p < 0 or p > 100:
        raise InvalidArgumentError(f"Percentile must be between 0 and 100, got {p}")

    if p == 0:
        return numbers[0]
    if p == 100:
        return numbers[-1]

    index = (p / 100) * (len(numbers) - 1)
    lower = math.floor(index)
    upper = math.ceil(index)

    if lower == upper:
        return numbers[lower]

    weight = index - lower
    return numbers[lower] * (1 - weight) + numbers[upper] * weight


def percentiles(
    values: Sequence[NumericInput], ps: Sequence[float]
) -> list[PercentileResult]:
    """Несколько перцентилей одной выборки."""
    return [PercentileResult(percentile=p, value=percentile(values, p)) for p in ps]
