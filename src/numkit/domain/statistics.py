"""
Statistics Results — Immutable Pydantic Models

Результаты описательной статистики float-слоя (numkit.math.statistics).
"""

from pydantic import BaseModel, Field, model_validator


class StatisticsResult(BaseModel):
    """
    Сводная описательная статистика выборки.

    Immutable модель (frozen=True). variance и standard_deviation —
    выборочные (делитель n - 1), для n == 1 равны 0.
    """

    count: int = Field(..., ge=1, description="Размер выборки")
    sum: float = Field(..., description="Сумма значений")
    mean: float = Field(..., description="Среднее арифметическое")
    median: float = Field(..., description="Медиана")
    mode: list[float] = Field(..., min_length=1, description="Наиболее частые значения (по возрастанию)")
    min: float = Field(..., description="Минимум")
    max: float = Field(..., description="Максимум")
    range: float = Field(..., ge=0, description="max - min")
    variance: float = Field(..., ge=0, description="Выборочная дисперсия")
    standard_deviation: float = Field(..., ge=0, description="Выборочное стандартное отклонение")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_bounds(self) -> "StatisticsResult":
        """Проверка, что min <= max"""
        if self.min > self.max:
            raise ValueError(f"min {self.min} must not exceed max {self.max}")
        return self


class PercentileResult(BaseModel):
    """Значение выборки на заданном перцентиле."""

    percentile: float = Field(..., ge=0, le=100, description="Перцентиль (0-100)")
    value: float = Field(..., description="Значение на перцентиле")

    model_config = {"frozen": True}
