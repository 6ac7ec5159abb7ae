"""Families — таблица FamilySpec для всех семейств треугольников.

Каждое семейство описывается одной записью {seed, rule, strategy, ...}.
Builder не знает о конкретных семействах: он только исполняет запись.

Стратегии:
- SYMMETRIC: левая половина правилом + зеркало (Pascal, Eulerian, Rascal,
  Lozanić, trinomial)
- STRAIGHT: вся строка слева направо (Bell, Catalan, Clark, Floyd)
- BOUSTROPHEDON: STRAIGHT + разворот каждой второй строки (SEA)
- DERIVED: поэлементное преобразование другого треугольника того же порядка
  (Bernoulli triangle, Sierpiński, Leibniz)
"""

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from itertools import accumulate
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from numtri.core.domain.buffer import Cell
from numtri.core.domain.family import FamilyId
from numtri.core.math.recurrences import (
    Rule,
    Seed,
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
    seed_sea,
    seed_trinomial,
    seed_unit_edges,
    seed_vertex,
    trinomial_length,
    trinomial_rule,
)

Rows = Sequence[Sequence[Cell]]


class CompletionStrategy(str, Enum):
    """Способ построения строк семейства."""

    SYMMETRIC = "SYMMETRIC"
    STRAIGHT = "STRAIGHT"
    BOUSTROPHEDON = "BOUSTROPHEDON"
    DERIVED = "DERIVED"


@dataclass(frozen=True)
class AuxiliarySpec:
    """Вспомогательный треугольник меньшего порядка, доступный правилу как view.aux[name]."""

    name: str
    family: FamilyId
    order: Callable[[int], int]


@dataclass(frozen=True)
class FamilySpec:
    """Запись таблицы семейств.

    Attributes:
        family: идентификатор семейства
        strategy: стратегия заполнения строк
        seed: базовые условия строки
        rule: рекуррентное правило
        first_column: первый столбец, вычисляемый правилом
        general_from: первая строка, к которой применяется правило
            (строки ниже — чистые seeds, т.е. литералы для n = 0, 1)
        row_length: длина строки r
        interior_only: STRAIGHT не трогает последний столбец (диагональ из seed)
        auxiliary: вспомогательные треугольники
        source: исходное семейство для DERIVED
        derive: преобразование строк исходного семейства
        symmetric: строки зеркально симметричны
        takes_multiplier: семейство принимает параметр f
    """

    family: FamilyId
    strategy: CompletionStrategy
    seed: Optional[Seed] = None
    rule: Optional[Rule] = None
    first_column: int = 1
    general_from: int = 2
    row_length: Callable[[int], int] = natural_length
    interior_only: bool = False
    auxiliary: Tuple[AuxiliarySpec, ...] = ()
    source: Optional[FamilyId] = None
    derive: Optional[Callable[[Rows], List[List[Cell]]]] = None
    symmetric: bool = False
    takes_multiplier: bool = False

    def width(self, order: int) -> int:
        """Ширина буфера порядка order: длина последней строки."""
        return self.row_length(order)


# =============================================================================
# DERIVATIONS
# =============================================================================


def running_row_sums(rows: Rows) -> List[List[Cell]]:
    """Bernoulli triangle: накопленные суммы каждой строки Паскаля."""
    return [list(accumulate(row)) for row in rows]


def parity_rows(rows: Rows) -> List[List[Cell]]:
    """Sierpiński triangle: треугольник Паскаля по модулю 2."""
    return [[value % 2 for value in row] for row in rows]


def leibniz_denominator_rows(rows: Rows) -> List[List[Cell]]:
    """D(i, j) = (i+1) * C(i, j)."""
    return [[(index + 1) * value for value in row] for index, row in enumerate(rows)]


def leibniz_fraction_rows(rows: Rows) -> List[List[Cell]]:
    """lm(i, j) = 1 / D(i, j) на ненулевых знаменателях."""
    return [
        [Fraction(1, value) if value else 0 for value in row]
        for row in leibniz_denominator_rows(rows)
    ]


# =============================================================================
# REGISTRY
# =============================================================================


FAMILY_SPECS: Dict[FamilyId, FamilySpec] = {
    FamilyId.PASCAL: FamilySpec(
        family=FamilyId.PASCAL,
        strategy=CompletionStrategy.SYMMETRIC,
        seed=seed_unit_edges,
        rule=pascal_rule,
        symmetric=True,
    ),
    FamilyId.EULERIAN: FamilySpec(
        family=FamilyId.EULERIAN,
        strategy=CompletionStrategy.SYMMETRIC,
        seed=seed_unit_edges,
        rule=eulerian_rule,
        symmetric=True,
    ),
    FamilyId.RASCAL: FamilySpec(
        family=FamilyId.RASCAL,
        strategy=CompletionStrategy.SYMMETRIC,
        seed=seed_unit_edges,
        rule=rascal_rule,
        symmetric=True,
    ),
    FamilyId.LOZANIC: FamilySpec(
        family=FamilyId.LOZANIC,
        strategy=CompletionStrategy.SYMMETRIC,
        seed=seed_unit_edges,
        rule=lozanic_rule,
        auxiliary=(AuxiliarySpec(name="pascal", family=FamilyId.PASCAL, order=lambda n: n // 2),),
        symmetric=True,
    ),
    FamilyId.TRINOMIAL: FamilySpec(
        family=FamilyId.TRINOMIAL,
        strategy=CompletionStrategy.SYMMETRIC,
        seed=seed_trinomial,
        rule=trinomial_rule,
        first_column=2,
        row_length=trinomial_length,
        symmetric=True,
    ),
    FamilyId.CLARK: FamilySpec(
        family=FamilyId.CLARK,
        strategy=CompletionStrategy.STRAIGHT,
        seed=seed_clark,
        rule=pascal_rule,
        interior_only=True,
        takes_multiplier=True,
    ),
    FamilyId.CATALAN: FamilySpec(
        family=FamilyId.CATALAN,
        strategy=CompletionStrategy.STRAIGHT,
        seed=seed_catalan,
        rule=catalan_rule,
        first_column=2,
    ),
    FamilyId.BELL: FamilySpec(
        family=FamilyId.BELL,
        strategy=CompletionStrategy.STRAIGHT,
        seed=seed_vertex,
        rule=bell_rule,
        first_column=0,
        general_from=1,
    ),
    FamilyId.FLOYD: FamilySpec(
        family=FamilyId.FLOYD,
        strategy=CompletionStrategy.STRAIGHT,
        seed=seed_vertex,
        rule=floyd_rule,
        first_column=0,
        general_from=1,
    ),
    FamilyId.SEA: FamilySpec(
        family=FamilyId.SEA,
        strategy=CompletionStrategy.BOUSTROPHEDON,
        seed=seed_sea,
        rule=sea_rule,
        general_from=1,
    ),
    FamilyId.BERNOULLI_TRIANGLE: FamilySpec(
        family=FamilyId.BERNOULLI_TRIANGLE,
        strategy=CompletionStrategy.DERIVED,
        source=FamilyId.PASCAL,
        derive=running_row_sums,
    ),
    FamilyId.SIERPINSKI: FamilySpec(
        family=FamilyId.SIERPINSKI,
        strategy=CompletionStrategy.DERIVED,
        source=FamilyId.PASCAL,
        derive=parity_rows,
        symmetric=True,
    ),
    FamilyId.LEIBNIZ: FamilySpec(
        family=FamilyId.LEIBNIZ,
        strategy=CompletionStrategy.DERIVED,
        source=FamilyId.PASCAL,
        derive=leibniz_fraction_rows,
        symmetric=True,
    ),
}


def get_family_spec(family: FamilyId) -> FamilySpec:
    """Запись таблицы для семейства; KeyError для неизвестного FamilyId."""
    return FAMILY_SPECS[family]
