"""
Numerical Safeguards — валидация аргументов и точная целочисленная арифметика

Модуль обеспечивает корректность входов и точность вычислений engine:
- Валидация порядка n и индекса k (целое, неотрицательное, вещественное)
- Точное целочисленное деление с проверкой делимости
- Проверки точного представления целых в float64

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Невалидный аргумент никогда не доходит до построения буфера
2. bool, complex, NaN/Inf и нецелые значения отвергаются
3. Деление в рекуррентностях никогда не округляет молча
"""

import math
import numbers
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Все целые |x| <= 2**53 точно представимы в IEEE-754 double
FLOAT64_EXACT_INT_LIMIT: Final[int] = 2**53


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgumentError(ValueError):
    """
    Невалидный аргумент публичной операции.

    Фатально для вызова: частичный результат не возвращается.
    Примеры: отрицательный n, нецелый n, k > n, отсутствующий f для Clark.
    """

    pass


class NonIntegralDivisionError(ArithmeticError):
    """
    Деление в целочисленной рекуррентности дало остаток.

    Для валидных порядков не возникает: используется как assertion
    целочисленности (например, diamond rule треугольника Rascal).
    """

    pass


# =============================================================================
# ВАЛИДАЦИЯ АРГУМЕНТОВ
# =============================================================================


def as_integer(value: object, name: str) -> int:
    """
    Приведение вещественного целого значения к int.

    Допускаются int, numpy integer, integral float (3.0) и Fraction с
    знаменателем 1. bool отвергается, хотя формально является Integral.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Значение как int

    Raises:
        InvalidArgumentError: Если value не является вещественным целым

    Examples:
        >>> as_integer(5, "n")
        5
        >>> as_integer(5.0, "n")
        5
        >>> as_integer(5.5, "n")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidArgumentError: n must be an integer, got 5.5
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be an integer, got bool {value!r}")

    if isinstance(value, numbers.Integral):
        return int(value)

    if not isinstance(value, numbers.Real):
        raise InvalidArgumentError(f"{name} must be a real number, got {value!r}")

    if isinstance(value, numbers.Rational):
        if value.denominator != 1:
            raise InvalidArgumentError(f"{name} must be an integer, got {value}")
        return int(value.numerator)

    as_float = float(value)
    if not math.isfinite(as_float):
        raise InvalidArgumentError(f"{name} must be finite (not NaN/Inf), got {value}")

    if not as_float.is_integer():
        raise InvalidArgumentError(f"{name} must be an integer, got {value}")

    return int(as_float)


def validate_order(value: object, name: str = "n") -> int:
    """
    Валидация порядка треугольника: вещественное неотрицательное целое.

    Args:
        value: Проверяемое значение
        name: Имя параметра (default: "n")

    Returns:
        Порядок как int

    Raises:
        InvalidArgumentError: Если value нецелое, отрицательное или не вещественное
    """
    order = as_integer(value, name)
    if order < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {order}")
    return order


def validate_min_order(value: object, minimum: int, name: str = "n") -> int:
    """Валидация порядка с нижней границей (например, Moser: n >= 1)."""
    order = as_integer(value, name)
    if order < minimum:
        raise InvalidArgumentError(f"{name} must be >= {minimum}, got {order}")
    return order


def validate_index(k: object, n: int, name: str = "k") -> int:
    """
    Валидация индекса столбца: 0 <= k <= n.

    Args:
        k: Проверяемый индекс
        n: Уже провалидированный порядок
        name: Имя параметра (default: "k")

    Returns:
        Индекс как int

    Raises:
        InvalidArgumentError: Если k невалиден или k > n
    """
    index = validate_order(k, name)
    if index > n:
        raise InvalidArgumentError(f"{name} must be less than or equal to n ({n}), got {index}")
    return index


# =============================================================================
# ТОЧНАЯ АРИФМЕТИКА
# =============================================================================


def exact_divide(numerator: int, denominator: int) -> int:
    """
    Точное целочисленное деление.

    Args:
        numerator: Делимое
        denominator: Делитель (ненулевой)

    Returns:
        numerator // denominator

    Raises:
        NonIntegralDivisionError: Если denominator == 0 или деление с остатком

    Examples:
        >>> exact_divide(50, 5)
        10
        >>> exact_divide(7, 2)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        NonIntegralDivisionError: 7 is not divisible by 2
    """
    if denominator == 0:
        raise NonIntegralDivisionError(f"division of {numerator} by zero")

    quotient, remainder = divmod(numerator, denominator)
    if remainder != 0:
        raise NonIntegralDivisionError(f"{numerator} is not divisible by {denominator}")

    return quotient


def is_exact_in_float64(value: int, limit: int = FLOAT64_EXACT_INT_LIMIT) -> bool:
    """
    Проверка, представимо ли целое значение точно в float64.

    Examples:
        >>> is_exact_in_float64(2**53)
        True
        >>> is_exact_in_float64(2**53 + 1)
        False
    """
    return abs(value) <= limit
