"""Builder — построение треугольника по записи FamilySpec.

Порядок работы build_triangle:
1. Валидация n (и f для Clark) → InvalidArgumentError
2. Построение вспомогательных треугольников (aux) и/или исходного семейства
3. Построение строк 0..n строго по возрастанию: build_row(previous, spec, r)
4. Пост-обработка (boustrophedon для SEA)
5. Заморозка в TriangularBuffer и выдача PrecisionAdvisory
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from numtri.core.domain.buffer import Cell, TriangularBuffer
from numtri.core.domain.family import FamilyId
from numtri.core.domain.results import LeibnizTriangle, TriangleResult
from numtri.core.math.completion import (
    boustrophedon,
    complete_straight_row,
    complete_symmetric_row,
)
from numtri.core.math.numerical_safeguards import InvalidArgumentError, validate_order
from numtri.core.math.precision import PrecisionConfig, check_precision
from numtri.core.math.recurrences import RowView
from numtri.engine.families import (
    CompletionStrategy,
    FamilySpec,
    get_family_spec,
    leibniz_denominator_rows,
    leibniz_fraction_rows,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ROW CONSTRUCTION
# =============================================================================


def build_row(
    previous: Sequence[Sequence[Cell]],
    spec: FamilySpec,
    row_index: int,
    f: int = 0,
    aux: Optional[Dict[str, TriangularBuffer]] = None,
) -> Tuple[Cell, ...]:
    """
    Построить одну строку по уже завершённым строкам.

    Args:
        previous: строки 0..row_index-1
        spec: запись семейства (не DERIVED)
        row_index: индекс строящейся строки
        f: множитель диагонали (Clark)
        aux: вспомогательные треугольники

    Returns:
        Строка натуральной длины как tuple
    """
    current = spec.seed(row_index, spec.row_length(row_index), f)

    if row_index >= spec.general_from:
        view = RowView(previous=previous, current=current, row=row_index, f=f, aux=aux or {})
        if spec.strategy == CompletionStrategy.SYMMETRIC:
            complete_symmetric_row(view, spec.rule, spec.first_column)
        else:
            complete_straight_row(view, spec.rule, spec.first_column, spec.interior_only)

    return tuple(current)


def build_rows(family: FamilyId, n: int, f: int = 0) -> List[Tuple[Cell, ...]]:
    """
    Построить строки 0..n семейства без валидации и advisory.

    Используется внутри engine для вспомогательных треугольников.
    """
    spec = get_family_spec(family)

    if spec.strategy == CompletionStrategy.DERIVED:
        return [tuple(row) for row in spec.derive(build_rows(spec.source, n, f))]

    aux = {
        auxiliary.name: build_buffer(auxiliary.family, auxiliary.order(n))
        for auxiliary in spec.auxiliary
    }

    rows: List[Tuple[Cell, ...]] = []
    for row_index in range(n + 1):
        rows.append(build_row(rows, spec, row_index, f, aux))

    if spec.strategy == CompletionStrategy.BOUSTROPHEDON:
        rows = boustrophedon(rows)

    return rows


def build_buffer(family: FamilyId, n: int, f: int = 0) -> TriangularBuffer:
    """Построить TriangularBuffer без валидации и advisory."""
    spec = get_family_spec(family)
    logger.debug("building %s triangle of order %d (%s)", family.value, n, spec.strategy.value)
    return TriangularBuffer.from_rows(family, n, build_rows(family, n, f), spec.width(n))


# =============================================================================
# PUBLIC API
# =============================================================================


def _resolve_multiplier(spec: FamilySpec, f: object) -> int:
    if spec.takes_multiplier:
        if f is None:
            raise InvalidArgumentError(
                f"{spec.family.value} triangle requires the diagonal multiplier f"
            )
        return validate_order(f, "f")

    if f is not None:
        raise InvalidArgumentError(f"f is only accepted by the CLARK family, not {spec.family.value}")
    return 0


def build_triangle(
    family: FamilyId,
    n: object,
    *,
    f: object = None,
    config: Optional[PrecisionConfig] = None,
) -> TriangleResult:
    """
    Построить треугольник семейства family порядка n.

    Args:
        family: семейство треугольника
        n: порядок (индекс последней строки), неотрицательное целое
        f: множитель диагонали, обязателен только для CLARK
        config: пороги advisory (default: PrecisionConfig())

    Returns:
        TriangleResult с буфером и advisories

    Raises:
        InvalidArgumentError: невалидный n или f, неизвестное семейство

    Examples:
        >>> build_triangle(FamilyId.PASCAL, 3).buffer.last_row()
        (1, 3, 3, 1)
    """
    try:
        family = FamilyId(family)
    except ValueError:
        raise InvalidArgumentError(f"unknown triangle family: {family!r}") from None

    spec = get_family_spec(family)
    order = validate_order(n)
    multiplier = _resolve_multiplier(spec, f)

    advisories = check_precision(family, order, config)
    return TriangleResult(buffer=build_buffer(family, order, multiplier), advisories=advisories)


def leibniz_triangle(n: object, *, config: Optional[PrecisionConfig] = None) -> LeibnizTriangle:
    """
    Гармонический треугольник Лейбница: знаменатели D и дроби lm = 1 / D.

    Raises:
        InvalidArgumentError: невалидный n
    """
    order = validate_order(n)
    advisories = check_precision(FamilyId.LEIBNIZ, order, config)

    pascal_rows = build_rows(FamilyId.PASCAL, order)
    denominators = TriangularBuffer.from_rows(
        FamilyId.LEIBNIZ, order, leibniz_denominator_rows(pascal_rows), order + 1
    )
    fractions = TriangularBuffer.from_rows(
        FamilyId.LEIBNIZ, order, leibniz_fraction_rows(pascal_rows), order + 1
    )

    return LeibnizTriangle(denominators=denominators, fractions=fractions, advisories=advisories)
