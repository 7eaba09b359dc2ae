"""
Domain models и value objects.

Immutable результаты вычислений, возвращаемые float-слоем.
"""

from numkit.domain.statistics import PercentileResult, StatisticsResult

__all__ = [
    "PercentileResult",
    "StatisticsResult",
]
