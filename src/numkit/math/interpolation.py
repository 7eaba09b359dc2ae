"""
Linear Interpolation

lerp / inverse_lerp / map_range над float.
"""

from numkit.math.numerical_safeguards import NumericInput, to_number


def lerp(start: NumericInput, end: NumericInput, t: NumericInput) -> float:
    """
    Линейная интерполяция: start + (end - start) * t.

    t не ограничивается [0, 1]: значения вне диапазона экстраполируют.

    Examples:
        >>> lerp(0, 100, 0.5)
        50.0
        >>> lerp(10, 20, 1.5)
        25.0
    """
    start_num = to_number(start)
    end_num = to_number(end)
    return start_num + (end_num - start_num) * to_number(t)


def inverse_lerp(start: NumericInput, end: NumericInput, value: NumericInput) -> float:
    """
    Обратная интерполяция: t такое, что lerp(start, end, t) == value.

    Returns:
        (value - start) / (end - start); 0.0 если start == end
    """
    start_num = to_number(start)
    end_num = to_number(end)

    if start_num == end_num:
        return 0.0

    return (to_number(value) - start_num) / (end_num - start_num)


def map_range(
    value: NumericInput,
    in_min: NumericInput,
    in_max: NumericInput,
    out_min: NumericInput,
    out_max: NumericInput,
) -> float:
    """
    Перенос значения из диапазона [in_min, in_max] в [out_min, out_max].

    Examples:
        >>> map_range(5.0, 0.0, 10.0, 0.0, 1.0)
        0.5
        >>> map_range(2.5, 0.0, 10.0, -1.0, 1.0)
        -0.5
    """
    t = inverse_lerp(in_min, in_max, value)
    return lerp(out_min, out_max, t)
