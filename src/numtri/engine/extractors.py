"""Extractors — скалярные последовательности из готовых треугольников.

Политики извлечения (закрытый набор):
- LAST_ROW_FIRST: первый элемент последней строки (Bell, lazy caterer)
- LAST_ROW_LAST: последний элемент последней строки (Catalan)
- LAST_ROW_SUM: сумма последней строки (cake)
- LAST_ROW_PREFIX_SUM: сумма первых width элементов последней строки (Moser)
- CELL: прямой доступ к (row, col) с проверкой 0 <= k <= n (Eulerian, Entringer)

Bernoulli вычисляется через determinant extractor (core/math/determinant.py).
"""

import logging
from enum import Enum
from fractions import Fraction
from typing import Dict, Optional, Tuple

from numtri.core.domain.buffer import Cell, TriangularBuffer
from numtri.core.domain.family import INDEXED_SEQUENCES, FamilyId, SequenceId
from numtri.core.domain.results import Number, NumberResult
from numtri.core.math.completion import boustrophedon
from numtri.core.math.determinant import bernoulli_from_determinant
from numtri.core.math.numerical_safeguards import (
    InvalidArgumentError,
    validate_index,
    validate_min_order,
    validate_order,
)
from numtri.core.math.precision import PrecisionConfig, check_precision
from numtri.engine.builder import build_buffer

logger = logging.getLogger(__name__)

# Moser: сумма первых min(5, n) биномиальных коэффициентов строки n-1
MOSER_PREFIX_WIDTH = 5


class ExtractionPolicy(str, Enum):
    """Способ свести буфер к одному числу."""

    LAST_ROW_FIRST = "LAST_ROW_FIRST"
    LAST_ROW_LAST = "LAST_ROW_LAST"
    LAST_ROW_SUM = "LAST_ROW_SUM"
    LAST_ROW_PREFIX_SUM = "LAST_ROW_PREFIX_SUM"
    CELL = "CELL"


def extract(
    buffer: TriangularBuffer,
    policy: ExtractionPolicy,
    *,
    col: Optional[int] = None,
    width: Optional[int] = None,
) -> Cell:
    """
    Применить политику извлечения к готовому буферу.

    Args:
        buffer: готовый треугольник
        policy: политика извлечения
        col: столбец последней строки для CELL
        width: длина префикса для LAST_ROW_PREFIX_SUM

    Returns:
        Значение ячейки или сумма
    """
    last_row = buffer.last_row()

    if policy == ExtractionPolicy.LAST_ROW_FIRST:
        return last_row[0]
    if policy == ExtractionPolicy.LAST_ROW_LAST:
        return last_row[buffer.band_length(buffer.order) - 1]
    if policy == ExtractionPolicy.LAST_ROW_SUM:
        return sum(last_row)
    if policy == ExtractionPolicy.LAST_ROW_PREFIX_SUM:
        if width is None:
            raise ValueError("LAST_ROW_PREFIX_SUM requires width")
        return sum(last_row[:width])
    if policy == ExtractionPolicy.CELL:
        if col is None:
            raise ValueError("CELL requires col")
        return buffer.cell(buffer.order, col)

    raise ValueError(f"unsupported extraction policy: {policy!r}")


# Последовательности, индексируемые только n: источник и политика
_SEQUENCE_SOURCES: Dict[SequenceId, Tuple[FamilyId, ExtractionPolicy]] = {
    SequenceId.BELL: (FamilyId.BELL, ExtractionPolicy.LAST_ROW_FIRST),
    SequenceId.CATALAN: (FamilyId.CATALAN, ExtractionPolicy.LAST_ROW_LAST),
    SequenceId.CAKE: (FamilyId.RASCAL, ExtractionPolicy.LAST_ROW_SUM),
    SequenceId.LAZY_CATERER: (FamilyId.FLOYD, ExtractionPolicy.LAST_ROW_FIRST),
}


# =============================================================================
# SEQUENCE VALUES (index n)
# =============================================================================


def _moser(n: int) -> Cell:
    pascal = build_buffer(FamilyId.PASCAL, n - 1)
    return extract(pascal, ExtractionPolicy.LAST_ROW_PREFIX_SUM, width=min(MOSER_PREFIX_WIDTH, n))


def _bernoulli(n: int) -> Number:
    if n == 0:
        return 1
    if n == 1:
        return Fraction(1, 2)
    if n % 2 == 1:
        return 0
    return bernoulli_from_determinant(n, build_buffer(FamilyId.PASCAL, n + 1))


def extract_sequence_value(
    sequence: SequenceId,
    n: object,
    *,
    config: Optional[PrecisionConfig] = None,
) -> NumberResult:
    """
    Значение последовательности с фиксированной политикой извлечения.

    Args:
        sequence: BELL, CATALAN, CAKE, LAZY_CATERER, MOSER или BERNOULLI
        n: порядок (для MOSER n >= 1)
        config: пороги advisory

    Returns:
        NumberResult

    Raises:
        InvalidArgumentError: невалидный n или последовательность с индексом k

    Examples:
        >>> extract_sequence_value(SequenceId.BELL, 7).value
        877
    """
    sequence = _resolve_sequence(sequence)
    if sequence in INDEXED_SEQUENCES:
        raise InvalidArgumentError(
            f"{sequence.value} numbers are indexed by (n, k); use extract_number"
        )

    if sequence == SequenceId.MOSER:
        order = validate_min_order(n, 1)
    else:
        order = validate_order(n)

    advisories = check_precision(sequence, order, config)

    if sequence == SequenceId.MOSER:
        value = _moser(order)
    elif sequence == SequenceId.BERNOULLI:
        value = _bernoulli(order)
    else:
        family, policy = _SEQUENCE_SOURCES[sequence]
        value = extract(build_buffer(family, order), policy)

    logger.debug("%s(%d) = %s", sequence.value, order, value)
    return NumberResult(sequence=sequence, order=order, value=value, advisories=advisories)


# =============================================================================
# INDEXED NUMBERS (n, k)
# =============================================================================


def _eulerian(n: int, k: int) -> int:
    # A(0, 0) = 1, A(n, n) = 0 для n >= 1; строка n-1 треугольника хранит A(n, ·)
    if n == 0:
        return 1
    if k == n:
        return 0
    return extract(build_buffer(FamilyId.EULERIAN, n - 1), ExtractionPolicy.CELL, col=k)


def _entringer(n: int, k: int) -> int:
    sea = build_buffer(FamilyId.SEA, n)
    natural = boustrophedon([row[: index + 1] for index, row in enumerate(sea.rows)])
    unfolded = TriangularBuffer.from_rows(FamilyId.SEA, n, natural, n + 1)
    return extract(unfolded, ExtractionPolicy.CELL, col=k)


def extract_number(
    sequence: SequenceId,
    n: object,
    k: object,
    *,
    config: Optional[PrecisionConfig] = None,
) -> NumberResult:
    """
    Число с двумя индексами: Eulerian A(n, k) или Entringer E(n, k).

    Raises:
        InvalidArgumentError: невалидные n/k, k > n, последовательность без k

    Examples:
        >>> extract_number(SequenceId.EULERIAN, 5, 2).value
        66
        >>> extract_number(SequenceId.ENTRINGER, 4, 3).value
        5
    """
    sequence = _resolve_sequence(sequence)
    if sequence not in INDEXED_SEQUENCES:
        raise InvalidArgumentError(
            f"{sequence.value} numbers are indexed by n only; use extract_sequence_value"
        )

    order = validate_order(n)
    index = validate_index(k, order)
    advisories = check_precision(sequence, order, config)

    if sequence == SequenceId.EULERIAN:
        value = _eulerian(order, index)
    else:
        value = _entringer(order, index)

    return NumberResult(
        sequence=sequence, order=order, index=index, value=value, advisories=advisories
    )


def _resolve_sequence(sequence: object) -> SequenceId:
    try:
        return SequenceId(sequence)
    except ValueError:
        raise InvalidArgumentError(f"unknown sequence: {sequence!r}") from None


# =============================================================================
# SHORTCUTS
# =============================================================================


def bell_number(n: object) -> int:
    return extract_sequence_value(SequenceId.BELL, n).value


def catalan_number(n: object) -> int:
    return extract_sequence_value(SequenceId.CATALAN, n).value


def cake_number(n: object) -> int:
    return extract_sequence_value(SequenceId.CAKE, n).value


def lazy_caterer_number(n: object) -> int:
    return extract_sequence_value(SequenceId.LAZY_CATERER, n).value


def moser_number(n: object) -> int:
    """Максимальное число областей круга, разрезанного хордами между n точками."""
    return extract_sequence_value(SequenceId.MOSER, n).value


def bernoulli_number(n: object) -> Number:
    """B_n: 1, 1/2 (Fraction), 0 для нечётных n > 1, иначе float."""
    return extract_sequence_value(SequenceId.BERNOULLI, n).value


def eulerian_number(n: object, k: object) -> int:
    return extract_number(SequenceId.EULERIAN, n, k).value


def entringer_number(n: object, k: object) -> int:
    return extract_number(SequenceId.ENTRINGER, n, k).value
