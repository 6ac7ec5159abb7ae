"""
Тесты для seeds и рекуррентных правил

Проверяет:
1. RowView: чтение вне треугольника возвращает 0
2. Seeds: базовые условия каждого семейства
3. Правила на небольших контекстах (одна ячейка за вызов)
"""

import pytest

from numtri.core.domain.buffer import TriangularBuffer
from numtri.core.domain.family import FamilyId
from numtri.core.math.numerical_safeguards import NonIntegralDivisionError
from numtri.core.math.recurrences import (
    RowView,
    bell_rule,
    catalan_rule,
    eulerian_rule,
    floyd_rule,
    lozanic_rule,
    natural_length,
    pascal_rule,
    rascal_rule,
    sea_rule,
    seed_catalan,
    seed_clark,
    seed_trinomial,
    seed_unit_edges,
    seed_vertex,
    trinomial_length,
    trinomial_rule,
)

# =============================================================================
# ТЕСТЫ ROW VIEW
# =============================================================================


class TestRowView:
    """Тесты для RowView"""

    def test_above_in_range(self) -> None:
        view = RowView(previous=[(1,), (1, 1)], current=[1, 0, 1], row=2)
        assert view.above(0) == 1
        assert view.above(1) == 1
        assert view.above(0, lag=2) == 1

    def test_above_out_of_range_is_zero(self) -> None:
        view = RowView(previous=[(1,), (1, 1)], current=[1, 0, 1], row=2)
        assert view.above(-1) == 0
        assert view.above(2) == 0
        assert view.above(0, lag=3) == 0

    def test_left(self) -> None:
        view = RowView(previous=[(1,)], current=[3, 5], row=1)
        assert view.left(-1) == 0
        assert view.left(1) == 5


# =============================================================================
# ТЕСТЫ SEEDS
# =============================================================================


class TestSeeds:
    """Тесты базовых условий"""

    def test_row_lengths(self) -> None:
        assert natural_length(0) == 1
        assert natural_length(4) == 5
        assert trinomial_length(0) == 1
        assert trinomial_length(3) == 7

    def test_unit_edges(self) -> None:
        assert seed_unit_edges(0, 1) == [1]
        assert seed_unit_edges(1, 2) == [1, 1]
        assert seed_unit_edges(4, 5) == [1, 0, 0, 0, 1]

    def test_trinomial(self) -> None:
        assert seed_trinomial(0, 1) == [1]
        assert seed_trinomial(1, 3) == [1, 1, 1]
        assert seed_trinomial(3, 7) == [1, 3, 0, 0, 0, 0, 1]

    def test_clark_vertex_is_zero(self) -> None:
        assert seed_clark(0, 1, f=3) == [0]
        assert seed_clark(1, 2, f=3) == [1, 3]
        assert seed_clark(3, 4, f=3) == [1, 0, 0, 9]

    def test_catalan(self) -> None:
        assert seed_catalan(0, 1) == [1]
        assert seed_catalan(1, 2) == [1, 1]
        assert seed_catalan(4, 5) == [1, 4, 0, 0, 0]

    def test_vertex(self) -> None:
        assert seed_vertex(0, 1) == [1]
        assert seed_vertex(3, 4) == [0, 0, 0, 0]


# =============================================================================
# ТЕСТЫ ПРАВИЛ
# =============================================================================


class TestRules:
    """Тесты рекуррентных правил"""

    def test_pascal(self) -> None:
        view = RowView(previous=[(1,), (1, 1), (1, 2, 1), (1, 3, 3, 1)], current=[1, 0, 0, 0, 1], row=4)
        assert pascal_rule(view, 1) == 4
        assert pascal_rule(view, 2) == 6

    def test_eulerian(self) -> None:
        view = RowView(previous=[(1,), (1, 1), (1, 4, 1), (1, 11, 11, 1)], current=[1, 0, 0, 0, 1], row=4)
        assert eulerian_rule(view, 1) == 26
        assert eulerian_rule(view, 2) == 66

    def test_rascal_small_rows_follow_pascal(self) -> None:
        view = RowView(previous=[(1,), (1, 1), (1, 2, 1)], current=[1, 0, 0, 1], row=3)
        assert rascal_rule(view, 1) == 3

    def test_rascal_diamond(self) -> None:
        previous = [(1,), (1, 1), (1, 2, 1), (1, 3, 3, 1), (1, 4, 5, 4, 1), (1, 5, 7, 7, 5, 1)]
        view = RowView(previous=previous, current=[1, 0, 0, 0, 0, 0, 1], row=6)
        # (7 * 7 + 1) / 5
        assert rascal_rule(view, 3) == 10
        # (5 * 7 + 1) / 4
        assert rascal_rule(view, 2) == 9

    def test_rascal_non_integral_division_raises(self) -> None:
        previous = [(1,), (1, 1), (1, 2, 1), (1, 3, 3, 1), (1, 4, 4, 4, 1)]
        view = RowView(previous=previous, current=[1, 0, 0, 0, 0, 1], row=5)
        # (4 * 4 + 1) / 3
        with pytest.raises(NonIntegralDivisionError):
            rascal_rule(view, 2)

    def test_lozanic_correction(self) -> None:
        pascal = TriangularBuffer.from_rows(FamilyId.PASCAL, 2, [(1,), (1, 1), (1, 2, 1)], 3)
        previous = [(1,), (1, 1), (1, 1, 1), (1, 2, 2, 1), (1, 2, 4, 2, 1), (1, 3, 6, 6, 3, 1)]
        view = RowView(previous=previous, current=[1, 0, 0, 0, 0, 0, 1], row=6, aux={"pascal": pascal})
        # 3 + 1 - C(2, 0)
        assert lozanic_rule(view, 1) == 3
        # чётный столбец: без поправки
        assert lozanic_rule(view, 2) == 9
        # 6 + 6 - C(2, 1)
        assert lozanic_rule(view, 3) == 10

    def test_lozanic_odd_row_has_no_correction(self) -> None:
        view = RowView(previous=[(1,), (1, 1), (1, 1, 1)], current=[1, 0, 0, 1], row=3, aux={})
        assert lozanic_rule(view, 1) == 2

    def test_trinomial_window(self) -> None:
        view = RowView(previous=[(1,), (1, 1, 1), (1, 2, 3, 2, 1)], current=[1, 3, 0, 0, 0, 0, 1], row=3)
        assert trinomial_rule(view, 2) == 6
        assert trinomial_rule(view, 3) == 7

    def test_catalan(self) -> None:
        current = [1, 3, 0, 0]
        view = RowView(previous=[(1,), (1, 1), (1, 2, 2)], current=current, row=3)
        assert catalan_rule(view, 2) == 5
        current[2] = 5
        assert catalan_rule(view, 3) == 5

    def test_bell_carries_last_entry(self) -> None:
        current = [0, 0, 0, 0]
        view = RowView(previous=[(1,), (1, 2), (2, 3, 5)], current=current, row=3)
        assert bell_rule(view, 0) == 5
        current[0] = 5
        assert bell_rule(view, 1) == 7

    def test_sea_reads_mirrored_column(self) -> None:
        current = [0, 0, 0, 0, 0]
        view = RowView(previous=[(1,), (0, 1), (0, 1, 1), (0, 1, 2, 2)], current=current, row=4)
        # L(4, 1) = L(4, 0) + L(3, 3)
        assert sea_rule(view, 1) == 2
        current[1] = 2
        # L(4, 2) = L(4, 1) + L(3, 2)
        assert sea_rule(view, 2) == 4

    def test_floyd_counts_on(self) -> None:
        current = [0, 0, 0]
        view = RowView(previous=[(1,), (2, 3)], current=current, row=2)
        assert floyd_rule(view, 0) == 4
        current[0] = 4
        assert floyd_rule(view, 1) == 5
