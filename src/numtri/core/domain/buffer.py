"""TriangularBuffer — хранилище одного экземпляра числового треугольника.

Квадратная сетка (n+1)x(n+1), для trinomial — (n+1)x(2n+1).
Осмысленные значения лежат только в нижнем левом треугольнике
(для trinomial — в полосе ширины 2r+1, симметричной относительно столбца r),
остальное заполнено нулями.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Буфер immutable: строки хранятся как tuple of tuples
2. Все строки имеют одинаковую ширину (width)
3. cell(i, j) == 0 для j вне полосы строки i
"""

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import List, Sequence, Tuple, Union

import numpy as np

from numtri.core.domain.family import FamilyId

Cell = Union[int, Fraction]
Row = Tuple[Cell, ...]


def _as_float(value: Cell) -> float:
    # значения вне диапазона float64 становятся ±inf
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


@dataclass(frozen=True)
class TriangularBuffer:
    """Готовый (read-only) треугольник.

    Attributes:
        family: семейство, которое породило буфер
        order: порядок n (индекс последней строки)
        rows: строки, дополненные нулями до width
    """

    family: FamilyId
    order: int
    rows: Tuple[Row, ...]

    @classmethod
    def from_rows(
        cls,
        family: FamilyId,
        order: int,
        rows: Sequence[Sequence[Cell]],
        width: int,
    ) -> "TriangularBuffer":
        """Собрать буфер из строк натуральной длины, дополнив их нулями справа."""
        if len(rows) != order + 1:
            raise ValueError(f"expected {order + 1} rows, got {len(rows)}")

        padded = []
        for index, row in enumerate(rows):
            if len(row) > width:
                raise ValueError(
                    f"row {index} has {len(row)} cells, wider than buffer width {width}"
                )
            padded.append(tuple(row) + (0,) * (width - len(row)))

        return cls(family=family, order=order, rows=tuple(padded))

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def shape(self) -> Tuple[int, int]:
        return (len(self.rows), self.width)

    def band_length(self, row: int) -> int:
        """Длина осмысленной части строки row."""
        if self.family == FamilyId.TRINOMIAL:
            return 2 * row + 1
        return row + 1

    def cell(self, row: int, col: int) -> Cell:
        """Значение ячейки (row, col); IndexError вне сетки."""
        if not (0 <= row < len(self.rows)) or not (0 <= col < self.width):
            raise IndexError(f"cell ({row}, {col}) outside buffer of shape {self.shape}")
        return self.rows[row][col]

    def row(self, row: int) -> Row:
        if not 0 <= row < len(self.rows):
            raise IndexError(f"row {row} outside buffer of shape {self.shape}")
        return self.rows[row]

    def column(self, col: int) -> Row:
        if not 0 <= col < self.width:
            raise IndexError(f"column {col} outside buffer of shape {self.shape}")
        return tuple(row[col] for row in self.rows)

    def last_row(self) -> Row:
        return self.rows[-1]

    def row_sums(self) -> Row:
        return tuple(sum(row) for row in self.rows)

    def is_symmetric(self) -> bool:
        """Проверка зеркальной симметрии каждой строки в пределах её полосы."""
        for index, row in enumerate(self.rows):
            band = row[: self.band_length(index)]
            if band != band[::-1]:
                return False
        return True

    def to_lists(self) -> List[List[Cell]]:
        return [list(row) for row in self.rows]

    def to_numpy(self) -> np.ndarray:
        """Float64 копия сетки.

        ВАЖНО: целые значения больше 2**53 теряют точность при конвертации,
        именно об этом предупреждает PrecisionAdvisory. Значения больше
        максимального float64 (~1.8e308) превращаются в ±inf.
        """
        return np.array([[_as_float(value) for value in row] for row in self.rows], dtype=np.float64)

