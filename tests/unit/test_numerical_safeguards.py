"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Приведение вещественных целых к int
2. Отказ для bool, complex, NaN/Inf, нецелых и отрицательных значений
3. Валидацию индекса k <= n
4. Точное целочисленное деление
5. Границу точного представления целых в float64
"""

import math
from fractions import Fraction

import numpy as np
import pytest

from numtri.core.math.numerical_safeguards import (
    FLOAT64_EXACT_INT_LIMIT,
    InvalidArgumentError,
    NonIntegralDivisionError,
    as_integer,
    exact_divide,
    is_exact_in_float64,
    validate_index,
    validate_min_order,
    validate_order,
)

# =============================================================================
# ТЕСТЫ ПРИВЕДЕНИЯ К ЦЕЛОМУ
# =============================================================================


class TestAsInteger:
    """Тесты для as_integer"""

    def test_plain_int(self) -> None:
        assert as_integer(7, "n") == 7
        assert as_integer(0, "n") == 0

    def test_integral_float_accepted(self) -> None:
        """3.0 — валидное целое (как в validateattributes 'integer')"""
        assert as_integer(3.0, "n") == 3
        assert isinstance(as_integer(3.0, "n"), int)

    def test_numpy_scalars_accepted(self) -> None:
        assert as_integer(np.int64(5), "n") == 5
        assert as_integer(np.float64(4.0), "n") == 4

    def test_integral_fraction_accepted(self) -> None:
        assert as_integer(Fraction(6, 2), "n") == 3

    def test_non_integer_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="must be an integer"):
            as_integer(2.5, "n")

        with pytest.raises(InvalidArgumentError, match="must be an integer"):
            as_integer(Fraction(1, 2), "n")

    def test_bool_rejected(self) -> None:
        """bool формально Integral, но не является порядком"""
        with pytest.raises(InvalidArgumentError, match="bool"):
            as_integer(True, "n")

    def test_non_real_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="real number"):
            as_integer(complex(3, 0), "n")

        with pytest.raises(InvalidArgumentError, match="real number"):
            as_integer("3", "n")

        with pytest.raises(InvalidArgumentError, match="real number"):
            as_integer(None, "n")

    def test_nan_inf_rejected(self) -> None:
        for value in (math.nan, math.inf, -math.inf):
            with pytest.raises(InvalidArgumentError, match="finite"):
                as_integer(value, "n")

    def test_error_is_value_error(self) -> None:
        """InvalidArgumentError совместим с ValueError"""
        with pytest.raises(ValueError):
            as_integer(1.5, "n")

    def test_name_in_message(self) -> None:
        with pytest.raises(InvalidArgumentError, match="^f "):
            as_integer(1.5, "f")


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ ПОРЯДКА И ИНДЕКСА
# =============================================================================


class TestValidateOrder:
    """Тесты для validate_order / validate_min_order"""

    def test_non_negative_passes(self) -> None:
        assert validate_order(0) == 0
        assert validate_order(50) == 50

    def test_negative_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="non-negative"):
            validate_order(-1)

    def test_negative_float_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="non-negative"):
            validate_order(-2.0)

    def test_min_order(self) -> None:
        assert validate_min_order(1, 1) == 1
        with pytest.raises(InvalidArgumentError, match=">= 1"):
            validate_min_order(0, 1)


class TestValidateIndex:
    """Тесты для validate_index"""

    def test_in_range(self) -> None:
        assert validate_index(0, 4) == 0
        assert validate_index(4, 4) == 4

    def test_k_greater_than_n(self) -> None:
        with pytest.raises(InvalidArgumentError, match="less than or equal to n"):
            validate_index(5, 4)

    def test_negative_k(self) -> None:
        with pytest.raises(InvalidArgumentError, match="non-negative"):
            validate_index(-1, 4)


# =============================================================================
# ТЕСТЫ ТОЧНОЙ АРИФМЕТИКИ
# =============================================================================


class TestExactDivide:
    """Тесты для exact_divide"""

    def test_exact(self) -> None:
        assert exact_divide(50, 5) == 10
        assert exact_divide(-36, 4) == -9

    def test_remainder_raises(self) -> None:
        with pytest.raises(NonIntegralDivisionError, match="not divisible"):
            exact_divide(7, 2)

    def test_zero_denominator_raises(self) -> None:
        with pytest.raises(NonIntegralDivisionError, match="by zero"):
            exact_divide(7, 0)

    def test_big_integers_stay_exact(self) -> None:
        big = 3**200
        assert exact_divide(big * 7, 7) == big


class TestFloat64Exactness:
    """Тесты для is_exact_in_float64"""

    def test_limit(self) -> None:
        assert FLOAT64_EXACT_INT_LIMIT == 2**53
        assert is_exact_in_float64(2**53)
        assert is_exact_in_float64(-(2**53))
        assert not is_exact_in_float64(2**53 + 1)

    def test_custom_limit(self) -> None:
        assert is_exact_in_float64(100, limit=100)
        assert not is_exact_in_float64(101, limit=100)
