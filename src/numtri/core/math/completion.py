"""
Completion — стратегии заполнения строки и boustrophedon transform

Стратегии:
- complete_symmetric_row: вычислить левую половину правилом, отзеркалить правую
- complete_straight_row: вычислить строку слева направо целиком
- boustrophedon: развернуть каждую вторую строку (3-ю, 5-ю, ...)

Symmetric-Row Completion (строка длины L):
    M = ceil(L / 2)
    столбцы first..M-1 вычисляются правилом
    row[M-1+e:] = reversed(row[0:M]), e = 1 для чётного L, 0 для нечётного

При нечётном L центральный столбец M-1 копируется сам в себя (единственный
не дублирующийся центр), при чётном L половины зеркалятся без общего центра.
Отзеркаленная половина никогда не пересчитывается.
"""

from typing import List, Sequence, Tuple

from numtri.core.domain.buffer import Cell
from numtri.core.math.recurrences import RowView, Rule


def half_length(length: int) -> int:
    """M = ceil(L / 2)."""
    return (length + 1) // 2


def mirror_start(length: int) -> int:
    """Первый 0-based столбец правой (отзеркаленной) половины."""
    parity_offset = 0 if length % 2 else 1
    return half_length(length) - 1 + parity_offset


def mirror_left_half(row: List[Cell]) -> None:
    """Скопировать развёрнутую левую половину строки в правую (in-place)."""
    length = len(row)
    start = mirror_start(length)
    row[start:] = row[: length - start][::-1]


def complete_symmetric_row(view: RowView, rule: Rule, first: int) -> None:
    """
    Symmetric-Row Completion.

    Args:
        view: RowView, view.current — строка с заполненными seeds
        rule: правило семейства
        first: первый вычисляемый столбец (столбцы < first — seeds)
    """
    row = view.current
    for col in range(first, half_length(len(row))):
        row[col] = rule(view, col)
    mirror_left_half(row)


def complete_straight_row(view: RowView, rule: Rule, first: int, interior_only: bool = False) -> None:
    """
    Заполнение строки слева направо без симметрии.

    Args:
        view: RowView
        rule: правило семейства
        first: первый вычисляемый столбец
        interior_only: не трогать последний столбец (диагональ задана seed)
    """
    row = view.current
    stop = len(row) - 1 if interior_only else len(row)
    for col in range(first, stop):
        row[col] = rule(view, col)


def boustrophedon(rows: Sequence[Sequence[Cell]]) -> List[Tuple[Cell, ...]]:
    """
    Boustrophedon transform: развернуть строки 2, 4, 6, ... (0-based).

    Преобразование — инволюция: повторное применение возвращает
    натуральный порядок (используется для чисел Энтрингера).
    """
    result = []
    for index, row in enumerate(rows):
        if index >= 2 and index % 2 == 0:
            result.append(tuple(row)[::-1])
        else:
            result.append(tuple(row))
    return result
