"""
Float Percentages

Процентные вычисления над float. Для денежных сумм используйте
precise_percentage и соседние функции из numkit.precise.
"""

import math

from numkit.math.numerical_safeguards import NumericInput, to_number


def percent(value: NumericInput, percentage: NumericInput) -> float:
    """
    percentage% от value.

    Examples:
        >>> percent(200, 15)
        30.0
    """
    return to_number(value) * (to_number(percentage) / 100)


def percent_of(part: NumericInput, whole: NumericInput) -> float:
    """
    Доля part от whole в процентах; 0.0 при whole == 0.

    Examples:
        >>> percent_of(50, 200)
        25.0
    """
    whole_num = to_number(whole)
    if whole_num == 0:
        return 0.0
    return (to_number(part) / whole_num) * 100


def percent_change(old_value: NumericInput, new_value: NumericInput) -> float:
    """
    Изменение в процентах относительно |old_value|.

    При old_value == 0: 0.0 если new_value тоже 0, иначе +inf.

    Examples:
        >>> percent_change(100, 150)
        50.0
        >>> percent_change(-100, -50)
        50.0
    """
    old_num = to_number(old_value)
    new_num = to_number(new_value)

    if old_num == 0:
        return 0.0 if new_num == 0 else math.inf

    return ((new_num - old_num) / abs(old_num)) * 100


def add_percent(value: NumericInput, percentage: NumericInput) -> float:
    """value, увеличенное на percentage%."""
    return to_number(value) * (1 + to_number(percentage) / 100)


def subtract_percent(value: NumericInput, percentage: NumericInput) -> float:
    """value, уменьшенное на percentage%."""
    return to_number(value) * (1 - to_number(percentage) / 100)
