"""Engine — построение треугольников и извлечение последовательностей.

- families: таблица FamilySpec (seed, rule, strategy) для каждого семейства
- builder: build_triangle, leibniz_triangle
- extractors: extract_number, extract_sequence_value и именованные shortcuts
"""

from .builder import build_buffer, build_row, build_rows, build_triangle, leibniz_triangle
from .extractors import (
    ExtractionPolicy,
    bell_number,
    bernoulli_number,
    cake_number,
    catalan_number,
    entringer_number,
    eulerian_number,
    extract,
    extract_number,
    extract_sequence_value,
    lazy_caterer_number,
    moser_number,
)
from .families import (
    FAMILY_SPECS,
    AuxiliarySpec,
    CompletionStrategy,
    FamilySpec,
    get_family_spec,
)

__all__ = [
    # Families
    "FAMILY_SPECS",
    "AuxiliarySpec",
    "CompletionStrategy",
    "FamilySpec",
    "get_family_spec",
    # Builder
    "build_buffer",
    "build_row",
    "build_rows",
    "build_triangle",
    "leibniz_triangle",
    # Extractors
    "ExtractionPolicy",
    "extract",
    "extract_number",
    "extract_sequence_value",
    "bell_number",
    "bernoulli_number",
    "cake_number",
    "catalan_number",
    "entringer_number",
    "eulerian_number",
    "lazy_caterer_number",
    "moser_number",
]
