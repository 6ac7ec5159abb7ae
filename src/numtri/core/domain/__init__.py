"""
Domain models and value objects.

Contains the triangle/sequence identifiers, the immutable TriangularBuffer,
precision advisories and the result wrappers returned by the engine.
"""

from numtri.core.domain.advisory import AdvisoryKind, PrecisionAdvisory
from numtri.core.domain.buffer import Cell, Row, TriangularBuffer
from numtri.core.domain.family import INDEXED_SEQUENCES, FamilyId, SequenceId
from numtri.core.domain.results import (
    LeibnizTriangle,
    Number,
    NumberResult,
    TriangleResult,
)

__all__ = [
    # Identifiers
    "FamilyId",
    "SequenceId",
    "INDEXED_SEQUENCES",
    # Buffer
    "Cell",
    "Row",
    "TriangularBuffer",
    # Advisories
    "AdvisoryKind",
    "PrecisionAdvisory",
    # Results
    "Number",
    "NumberResult",
    "TriangleResult",
    "LeibnizTriangle",
]
