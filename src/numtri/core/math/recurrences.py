"""
Recurrences — base conditions (seeds) и локальные рекуррентные правила

Каждое семейство задаёт:
- seed(row, length, f) -> список ячеек строки с заполненными базовыми условиями
  (единичный первый столбец, единичная диагональ, литералы малых строк)
- rule(view, col) -> значение одной ячейки по уже вычисленным ячейкам

Правила чистые: они читают только предыдущие строки и уже вычисленную часть
текущей строки через RowView и ничего не записывают. Запись выполняет
стратегия заполнения (см. completion.py).

Нумерация 0-based: строка r, столбец c. Чтение вне строки возвращает 0.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Mapping, Sequence

from numtri.core.domain.buffer import Cell, TriangularBuffer
from numtri.core.math.numerical_safeguards import exact_divide

# =============================================================================
# ROW VIEW
# =============================================================================


@dataclass(frozen=True)
class RowView:
    """Read-only окно правила на строящийся треугольник.

    Attributes:
        previous: завершённые строки 0..row-1 (натуральной длины)
        current: строящаяся строка row (заполняется стратегией)
        row: индекс текущей строки
        f: множитель диагонали (только Clark)
        aux: вспомогательные треугольники меньшего порядка
    """

    previous: Sequence[Sequence[Cell]]
    current: Sequence[Cell]
    row: int
    f: int = 0
    aux: Mapping[str, TriangularBuffer] = field(default_factory=dict)

    def above(self, col: int, lag: int = 1) -> Cell:
        """Ячейка (row - lag, col); 0 вне треугольника."""
        source_row = self.row - lag
        if source_row < 0 or col < 0:
            return 0
        source = self.previous[source_row]
        if col >= len(source):
            return 0
        return source[col]

    def left(self, col: int) -> Cell:
        """Уже вычисленная ячейка текущей строки; 0 при col < 0."""
        if col < 0:
            return 0
        return self.current[col]


Rule = Callable[[RowView, int], Cell]
Seed = Callable[[int, int, int], List[Cell]]


# =============================================================================
# ДЛИНА СТРОКИ
# =============================================================================


def natural_length(row: int) -> int:
    """Треугольные семейства: строка r содержит r+1 ячеек."""
    return row + 1


def trinomial_length(row: int) -> int:
    """Trinomial: строка r содержит 2r+1 ячеек."""
    return 2 * row + 1


# =============================================================================
# SEEDS
# =============================================================================


def seed_unit_edges(row: int, length: int, f: int = 0) -> List[Cell]:
    """Первый столбец и диагональ равны 1 (Pascal, Eulerian, Rascal, Lozanić)."""
    cells: List[Cell] = [0] * length
    cells[0] = 1
    cells[-1] = 1
    return cells


def seed_trinomial(row: int, length: int, f: int = 0) -> List[Cell]:
    """col 0 = 1, col 1 = r, col 2r = 1; строка 1 — литерал [1, 1, 1]."""
    cells: List[Cell] = [0] * length
    cells[0] = 1
    if length > 1:
        cells[1] = row
        cells[-1] = 1
    return cells


def seed_clark(row: int, length: int, f: int = 0) -> List[Cell]:
    """Диагональ r*f, первый столбец 1 начиная со строки 1 (вершина равна 0)."""
    cells: List[Cell] = [0] * length
    cells[-1] = row * f
    if row >= 1:
        cells[0] = 1
    return cells


def seed_catalan(row: int, length: int, f: int = 0) -> List[Cell]:
    """Первый столбец 1, второй столбец равен индексу строки."""
    cells: List[Cell] = [0] * length
    cells[0] = 1
    if length > 1:
        cells[1] = row
    return cells


def seed_vertex(row: int, length: int, f: int = 0) -> List[Cell]:
    """Только вершина cell(0, 0) = 1, остальное выводится правилом (Bell, Floyd)."""
    cells: List[Cell] = [0] * length
    if row == 0:
        cells[0] = 1
    return cells


def seed_sea(row: int, length: int, f: int = 0) -> List[Cell]:
    """Seidel–Entringer–Arnold: вершина 1, первый столбец остальных строк 0."""
    return seed_vertex(row, length, f)


# =============================================================================
# RULES
# =============================================================================


def pascal_rule(view: RowView, col: int) -> Cell:
    """L(r, c) = L(r-1, c) + L(r-1, c-1)."""
    return view.above(col) + view.above(col - 1)


def eulerian_rule(view: RowView, col: int) -> Cell:
    """L(r, c) = (c+1) * L(r-1, c) + (r+1-c) * L(r-1, c-1).

    Строка r хранит числа Эйлера A(r+1, c).
    """
    return (col + 1) * view.above(col) + (view.row + 1 - col) * view.above(col - 1)


def rascal_rule(view: RowView, col: int) -> Cell:
    """Diamond rule: South = (West * East + 1) / North.

    Для r <= 3 совпадает с Pascal. Деление обязано быть точным.
    """
    if view.row <= 3:
        return pascal_rule(view, col)
    west = view.above(col - 1)
    east = view.above(col)
    north = view.above(col - 1, lag=2)
    return exact_divide(west * east + 1, north)


def lozanic_rule(view: RowView, col: int) -> Cell:
    """Pascal rule с поправкой C(r/2 - 1, (c-1)/2) для нечётного c и чётного r.

    Биномиальный коэффициент читается из вспомогательного Pascal буфера aux["pascal"].
    """
    value = pascal_rule(view, col)
    if col % 2 == 1 and view.row % 2 == 0:
        value -= view.aux["pascal"].cell(view.row // 2 - 1, (col - 1) // 2)
    return value


def trinomial_rule(view: RowView, col: int) -> Cell:
    """L(r, c) = L(r-1, c-2) + L(r-1, c-1) + L(r-1, c)."""
    return view.above(col - 2) + view.above(col - 1) + view.above(col)


def catalan_rule(view: RowView, col: int) -> Cell:
    """Диагональ копирует соседний столбец, внутренняя ячейка — накопленная сумма
    предыдущей строки до столбца c включительно."""
    if col == view.row:
        return view.left(col - 1)
    return sum(view.above(j) for j in range(col + 1))


def bell_rule(view: RowView, col: int) -> Cell:
    """col 0 переносит последний элемент предыдущей строки,
    иначе L(r, c) = L(r, c-1) + L(r-1, c-1)."""
    if col == 0:
        return view.above(view.row - 1)
    return view.left(col - 1) + view.above(col - 1)


def sea_rule(view: RowView, col: int) -> Cell:
    """L(r, c) = L(r, c-1) + L(r-1, r-c): читается зеркальный столбец предыдущей строки."""
    return view.left(col - 1) + view.above(view.row - col)


def floyd_rule(view: RowView, col: int) -> Cell:
    """Последовательная нумерация: продолжение предыдущей строки или левого соседа."""
    if col == 0:
        return view.above(view.row - 1) + 1
    return view.left(col - 1) + 1
