"""
Тесты для гармонического треугольника Лейбница

Проверяет:
1. Знаменатели D(i, j) = (i+1) * C(i, j)
2. Дроби lm(i, j) = 1 / D(i, j), lm * D == 1 на треугольнике
3. Правило Лейбница: lm(i, j) = lm(i+1, j) + lm(i+1, j+1)
4. Суммы ряда и advisory
"""

import math
from fractions import Fraction

import pytest

from numtri import (
    AdvisoryKind,
    FamilyId,
    InvalidArgumentError,
    LeibnizTriangle,
    PrecisionConfig,
    build_triangle,
    leibniz_triangle,
)


class TestLeibnizDenominators:
    """Знаменатели"""

    def test_order_three(self) -> None:
        result = leibniz_triangle(3)
        assert result.denominators.to_lists() == [
            [1, 0, 0, 0],
            [2, 2, 0, 0],
            [3, 6, 3, 0],
            [4, 12, 12, 4],
        ]

    def test_closed_form(self) -> None:
        denominators = leibniz_triangle(20).denominators
        for i in range(21):
            for j in range(i + 1):
                assert denominators.cell(i, j) == (i + 1) * math.comb(i, j)


class TestLeibnizFractions:
    """Дроби 1 / D"""

    def test_result_type(self) -> None:
        result = leibniz_triangle(4)
        assert isinstance(result, LeibnizTriangle)
        assert result.fraction(2, 1) == Fraction(1, 6)
        assert isinstance(result.fraction(2, 1), Fraction)
        assert result.fraction(1, 2) == 0

    def test_product_with_denominator_is_one(self) -> None:
        result = leibniz_triangle(15)
        for i in range(16):
            for j in range(i + 1):
                assert result.fractions.cell(i, j) * result.denominators.cell(i, j) == 1

    def test_zero_above_diagonal(self) -> None:
        result = leibniz_triangle(6)
        for i in range(7):
            for j in range(i + 1, 7):
                assert result.fractions.cell(i, j) == 0
                assert result.denominators.cell(i, j) == 0

    def test_leibniz_rule(self) -> None:
        result = leibniz_triangle(12)
        for i in range(12):
            for j in range(i + 1):
                assert result.fraction(i, j) == result.fraction(i + 1, j) + result.fraction(i + 1, j + 1)

    def test_build_triangle_matches_fractions(self) -> None:
        buffer = build_triangle(FamilyId.LEIBNIZ, 5).buffer
        assert buffer.rows == leibniz_triangle(5).fractions.rows
        assert buffer.is_symmetric()


class TestLeibnizArguments:
    """Валидация и advisory"""

    def test_order_zero(self) -> None:
        result = leibniz_triangle(0)
        assert result.denominators.to_lists() == [[1]]
        assert result.fraction(0, 0) == 1

    def test_invalid_order(self) -> None:
        with pytest.raises(InvalidArgumentError):
            leibniz_triangle(-3)

    def test_advisory_above_threshold(self) -> None:
        config = PrecisionConfig(family_thresholds={FamilyId.LEIBNIZ: 3})
        assert leibniz_triangle(3, config=config).advisories == ()

        advisories = leibniz_triangle(4, config=config).advisories
        assert len(advisories) == 1
        assert advisories[0].kind == AdvisoryKind.PRECISION_LOSS
        assert advisories[0].subject == "LEIBNIZ"
