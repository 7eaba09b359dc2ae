"""
Тесты для Float Distribution & Allocation
"""

import pytest

from numkit.errors import InvalidArgumentError
from numkit.math.distribution import allocate, distribute


class TestDistribute:
    """Тесты distribute"""

    def test_remainder_goes_to_first_slots(self) -> None:
        """Остаток в центах уходит первым долям"""
        assert distribute(100, 3) == [33.34, 33.33, 33.33]

    def test_even_split(self) -> None:
        """Делится без остатка"""
        assert distribute(10, 4) == [2.5, 2.5, 2.5, 2.5]

    def test_negative_total(self) -> None:
        """Отрицательная сумма делится симметрично"""
        result = distribute(-100, 3)
        assert result == [-33.34, -33.33, -33.33]
        assert sum(result) == pytest.approx(-100)

    @pytest.mark.parametrize(("total", "parts"), [(100, 7), ("999.99", 11), (1, 6)])
    def test_sum_close_to_total(self, total, parts: int) -> None:
        """Сумма долей равна total"""
        result = distribute(total, parts)
        assert len(result) == parts
        assert sum(result) == pytest.approx(float(total), abs=1e-9)

    @pytest.mark.parametrize("parts", [0, -3])
    def test_non_positive_parts(self, parts: int) -> None:
        """parts <= 0 → InvalidArgumentError"""
        with pytest.raises(InvalidArgumentError, match="Parts must be positive"):
            distribute(100, parts)


class TestAllocate:
    """Тесты allocate"""

    def test_proportional(self) -> None:
        """Доли пропорциональны ratios"""
        assert allocate(1000, [3, 2, 1]) == [500.0, 333.33, 166.67]

    def test_last_slot_takes_remainder(self) -> None:
        """Последняя доля забирает остаток округления"""
        result = allocate(100, [1, 1, 1])
        assert result[:2] == [33.33, 33.33]
        assert result[2] == pytest.approx(33.34)

    def test_empty_ratios(self) -> None:
        """Пустые ratios → пустой список"""
        assert allocate(100, []) == []

    def test_zero_total_ratio(self) -> None:
        """Сумма ratios == 0 → InvalidArgumentError"""
        with pytest.raises(InvalidArgumentError, match="greater than zero"):
            allocate(100, [0, 0])
