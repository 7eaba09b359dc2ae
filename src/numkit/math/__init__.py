"""
Float math modules для numkit

Быстрые приближённые вычисления над native float. Для денежных расчётов
используйте numkit.precise.
"""

# Numerical Safeguards
from numkit.math.numerical_safeguards import (
    NumericInput,
    # Parsing
    is_valid_number,
    safe_to_number,
    to_number,
    # NaN/Inf sanitization
    is_valid_float,
    sanitize_array,
    sanitize_float,
    # Comparison
    clamp,
    compare,
    equals,
    in_range,
    max_value,
    min_value,
    # Sign predicates
    abs_value,
    is_negative,
    is_positive,
    is_zero,
    sign,
)

# Rounding
from numkit.math.rounding import (
    DEFAULT_MATH_ROUNDING_MODE,
    MathRoundingMode,
    ceil_to,
    floor_to,
    round_to,
    truncate,
)

# Arithmetic
from numkit.math.arithmetic import (
    add,
    cbrt,
    degrees_to_radians,
    difference,
    divide,
    exp,
    is_even,
    is_integer,
    is_odd,
    ln,
    log,
    log10,
    mod,
    multiply,
    nth_root,
    power,
    product,
    quotient,
    radians_to_degrees,
    sqrt,
    subtract,
)

# Statistics
from numkit.math.statistics import (
    describe,
    mean,
    median,
    mode,
    percentile,
    percentiles,
    population_standard_deviation,
    population_variance,
    standard_deviation,
    sum_values,
    variance,
)

# Percentages
from numkit.math.percentages import (
    add_percent,
    percent,
    percent_change,
    percent_of,
    subtract_percent,
)

# Interpolation
from numkit.math.interpolation import inverse_lerp, lerp, map_range

# Distribution
from numkit.math.distribution import allocate, distribute

__all__ = [
    # Numerical Safeguards — Types
    "NumericInput",
    # Numerical Safeguards — Parsing
    "is_valid_number",
    "safe_to_number",
    "to_number",
    # Numerical Safeguards — NaN/Inf sanitization
    "is_valid_float",
    "sanitize_array",
    "sanitize_float",
    # Numerical Safeguards — Comparison
    "clamp",
    "compare",
    "equals",
    "in_range",
    "max_value",
    "min_value",
    # Numerical Safeguards — Sign predicates
    "abs_value",
    "is_negative",
    "is_positive",
    "is_zero",
    "sign",
    # Rounding
    "DEFAULT_MATH_ROUNDING_MODE",
    "MathRoundingMode",
    "ceil_to",
    "floor_to",
    "round_to",
    "truncate",
    # Arithmetic
    "add",
    "cbrt",
    "degrees_to_radians",
    "difference",
    "divide",
    "exp",
    "is_even",
    "is_integer",
    "is_odd",
    "ln",
    "log",
    "log10",
    "mod",
    "multiply",
    "nth_root",
    "power",
    "product",
    "quotient",
    "radians_to_degrees",
    "sqrt",
    "subtract",
    # Statistics
    "describe",
    "mean",
    "median",
    "mode",
    "percentile",
    "percentiles",
    "population_standard_deviation",
    "population_variance",
    "standard_deviation",
    "sum_values",
    "variance",
    # Percentages
    "add_percent",
    "percent",
    "percent_change",
    "percent_of",
    "subtract_percent",
    # Interpolation
    "inverse_lerp",
    "lerp",
    "map_range",
    # Distribution
    "allocate",
    "distribute",
]
