"""
Float Distribution & Allocation

Распределение суммы на части с округлением каждой части до decimal_places.
Сумма частей совпадает с итогом с точностью float; для точного совпадения
используйте precise_distribute / precise_allocate.
"""

import logging
from collections.abc import Sequence
from typing import Final

from numkit.errors import InvalidArgumentError
from numkit.math.numerical_safeguards import NumericInput, to_number
from numkit.math.rounding import round_to

logger = logging.getLogger(__name__)

# Бюджет итераций распределения остатка: parts * DISTRIBUTE_ITERATION_FACTOR
DISTRIBUTE_ITERATION_FACTOR: Final[int] = 100


def distribute(
    total: NumericInput,
    parts: int,
    decimal_places: int = 2,
) -> list[float]:
    """
    Равномерное распределение total на parts частей.

    Остаток после округления базовой части раздаётся по одному шагу
    10^-decimal_places слотам 0, 1, 2, ...

    Raises:
        InvalidArgumentError: Если parts <= 0

    Examples:
        >>> distribute(100, 3)
        [33.34, 33.33, 33.33]
    """
    if parts <= 0:
        raise InvalidArgumentError(f"Parts must be positive, got {parts}")

    total_num = to_number(total)
    base_amount = round_to(total_num / parts, decimal_places)
    result = [base_amount] * parts

    remainder = round_to(total_num - base_amount * parts, decimal_places)
    increment = 1 / 10**decimal_places

    index = 0
    budget = parts * DISTRIBUTE_ITERATION_FACTOR
    while abs(remainder) >= increment / 2 and index < budget:
        slot = index % parts
        if remainder > 0:
            result[slot] = round_to(result[slot] + increment, decimal_places)
            remainder = round_to(remainder - increment, decimal_places)
        else:
            result[slot] = round_to(result[slot] - increment, decimal_places)
            remainder = round_to(remainder + increment, decimal_places)
        index += 1

    if abs(remainder) >= increment / 2:
        logger.warning(
            "distribute left unsettled remainder %s (total=%s, parts=%d)",
            remainder,
            total_num,
            parts,
        )

    return result


def allocate(
    total: NumericInput,
    ratios: Sequence[NumericInput],
    decimal_places: int = 2,
) -> list[float]:
    """
    Пропорциональное распределение total по ratios.

    Последний слот получает остаток, чтобы сумма совпала с total.

    Returns:
        Список частей; [] для пустых ratios

    Raises:
        InvalidArgumentError: Если сумма ratios равна 0

    Examples:
        >>> allocate(1000, [3, 2, 1])
        [500.0, 333.33, 166.67]
    """
    if not ratios:
        return []

    total_num = to_number(total)
    ratio_nums = [to_number(r) for r in ratios]
    ratio_sum = sum(ratio_nums)

    if ratio_sum == 0:
        raise InvalidArgumentError("Total ratio must be greater than zero")

    result: list[float] = []
    allocated = 0.0

    for ratio in ratio_nums[:-1]:
        share = round_to(total_num * ratio / ratio_sum, decimal_places)
        result.append(share)
        allocated += share

    # Последний слот — остаток
    result.append(round_to(total_num - allocated, decimal_places))

    return result
