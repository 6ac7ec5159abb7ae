"""
numtri — number triangles and the integer sequences derived from them.

Pascal, Bell, Catalan, Eulerian, Rascal, Lozanić, trinomial, Clark, Leibniz,
Seidel–Entringer–Arnold, Bernoulli, Floyd and Sierpiński triangles built by a
shared recurrence/symmetry engine.
"""

from numtri.core.domain import (
    AdvisoryKind,
    FamilyId,
    LeibnizTriangle,
    NumberResult,
    PrecisionAdvisory,
    SequenceId,
    TriangleResult,
    TriangularBuffer,
)
from numtri.core.math import (
    InvalidArgumentError,
    NonIntegralDivisionError,
    PrecisionConfig,
)
from numtri.engine import (
    bell_number,
    bernoulli_number,
    build_triangle,
    cake_number,
    catalan_number,
    entringer_number,
    eulerian_number,
    extract_number,
    extract_sequence_value,
    lazy_caterer_number,
    leibniz_triangle,
    moser_number,
)

__version__ = "0.1.0"

__all__ = [
    # Identifiers
    "FamilyId",
    "SequenceId",
    # Types
    "TriangularBuffer",
    "TriangleResult",
    "NumberResult",
    "LeibnizTriangle",
    "PrecisionAdvisory",
    "AdvisoryKind",
    "PrecisionConfig",
    # Exceptions
    "InvalidArgumentError",
    "NonIntegralDivisionError",
    # Operations
    "build_triangle",
    "leibniz_triangle",
    "extract_number",
    "extract_sequence_value",
    # Shortcuts
    "bell_number",
    "bernoulli_number",
    "cake_number",
    "catalan_number",
    "entringer_number",
    "eulerian_number",
    "lazy_caterer_number",
    "moser_number",
]
