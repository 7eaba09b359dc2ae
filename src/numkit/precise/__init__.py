"""
Precise decimal arithmetic для numkit

Строки на входе и на выходе, целые произвольной точности внутри.
Ноль ошибок binary floating-point: precise_add("0.1", "0.2") == "0.3".
"""

# Decimal String Codec
from numkit.precise.codec import (
    DecimalInput,
    DecomposedDecimal,
    compose,
    decompose,
    is_valid_decimal_format,
    normalize,
    parse_to_string,
    safe_parse,
)

# Scaled-Integer Arithmetic Core
from numkit.precise.arithmetic import (
    precise_abs,
    precise_add,
    precise_divide,
    precise_multiply,
    precise_negate,
    precise_subtract,
)

# Rounding Engine
from numkit.precise.rounding import (
    DEFAULT_PRECISION_ROUNDING_MODE,
    PrecisionRoundingMode,
    decimal_unit,
    precise_round,
)

# Derived Operations
from numkit.precise.operations import (
    precise_add_percentage,
    precise_allocate,
    precise_average,
    precise_clamp,
    precise_compare,
    precise_distribute,
    precise_equals,
    precise_equals_within_threshold,
    precise_greater_than,
    precise_greater_than_or_equal,
    precise_in_range,
    precise_is_negative,
    precise_is_positive,
    precise_is_zero,
    precise_less_than,
    precise_less_than_or_equal,
    precise_max,
    precise_min,
    precise_percentage,
    precise_percentage_of,
    precise_subtract_percentage,
    precise_sum,
)

__all__ = [
    # Codec — Types
    "DecimalInput",
    "DecomposedDecimal",
    # Codec — Functions
    "compose",
    "decompose",
    "is_valid_decimal_format",
    "normalize",
    "parse_to_string",
    "safe_parse",
    # Arithmetic
    "precise_abs",
    "precise_add",
    "precise_divide",
    "precise_multiply",
    "precise_negate",
    "precise_subtract",
    # Rounding
    "DEFAULT_PRECISION_ROUNDING_MODE",
    "PrecisionRoundingMode",
    "decimal_unit",
    "precise_round",
    # Operations — Comparison
    "precise_compare",
    "precise_equals",
    "precise_equals_within_threshold",
    "precise_greater_than",
    "precise_greater_than_or_equal",
    "precise_less_than",
    "precise_less_than_or_equal",
    "precise_is_negative",
    "precise_is_positive",
    "precise_is_zero",
    # Operations — Aggregates
    "precise_average",
    "precise_max",
    "precise_min",
    "precise_sum",
    # Operations — Ranges
    "precise_clamp",
    "precise_in_range",
    # Operations — Percentages
    "precise_add_percentage",
    "precise_percentage",
    "precise_percentage_of",
    "precise_subtract_percentage",
    # Operations — Distribution
    "precise_allocate",
    "precise_distribute",
]
