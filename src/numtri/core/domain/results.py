"""Результаты публичных операций engine.

Каждый результат несёт значение и tuple выданных PrecisionAdvisory.
to_contract() возвращает JSON-совместимый dict, соответствующий схемам
numtri/core/contracts/schema/*.json.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Dict, List, Optional, Tuple, Union

from numtri.core.domain.advisory import PrecisionAdvisory
from numtri.core.domain.buffer import Cell, TriangularBuffer
from numtri.core.domain.family import SequenceId

Number = Union[int, float, Fraction]


def _serialize_value(value: Number) -> Union[int, float, str]:
    # Fraction -> "p/q", целые дроби схлопываются в int
    if isinstance(value, Fraction):
        if value.denominator == 1:
            return value.numerator
        return f"{value.numerator}/{value.denominator}"
    return value


def _serialize_rows(buffer: TriangularBuffer) -> List[List[Union[int, float, str]]]:
    return [[_serialize_value(cell) for cell in row] for row in buffer.rows]


def _serialize_advisories(advisories: Tuple[PrecisionAdvisory, ...]) -> List[Dict[str, Any]]:
    return [advisory.model_dump(mode="json") for advisory in advisories]


@dataclass(frozen=True)
class TriangleResult:
    """Результат build_triangle."""

    buffer: TriangularBuffer
    advisories: Tuple[PrecisionAdvisory, ...] = ()

    @property
    def has_advisories(self) -> bool:
        return bool(self.advisories)

    def to_contract(self) -> Dict[str, Any]:
        return {
            "family": self.buffer.family.value,
            "order": self.buffer.order,
            "width": self.buffer.width,
            "rows": _serialize_rows(self.buffer),
            "advisories": _serialize_advisories(self.advisories),
        }


@dataclass(frozen=True)
class NumberResult:
    """Результат extract_number / extract_sequence_value."""

    sequence: SequenceId
    order: int
    value: Number
    index: Optional[int] = None
    advisories: Tuple[PrecisionAdvisory, ...] = ()

    @property
    def has_advisories(self) -> bool:
        return bool(self.advisories)

    def to_contract(self) -> Dict[str, Any]:
        return {
            "sequence": self.sequence.value,
            "order": self.order,
            "index": self.index,
            "value": _serialize_value(self.value),
            "advisories": _serialize_advisories(self.advisories),
        }


@dataclass(frozen=True)
class LeibnizTriangle:
    """Гармонический треугольник Лейбница.

    denominators: D(i, j) = (i+1) * C(i, j)
    fractions:    lm(i, j) = 1 / D(i, j), ноль над диагональю
    """

    denominators: TriangularBuffer
    fractions: TriangularBuffer
    advisories: Tuple[PrecisionAdvisory, ...] = ()

    def fraction(self, row: int, col: int) -> Cell:
        return self.fractions.cell(row, col)
