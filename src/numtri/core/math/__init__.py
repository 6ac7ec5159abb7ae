"""
Core math modules для numtri

Рекуррентные правила, стратегии заполнения строк, определители и
численные гарантии (валидация, точное деление, пороги точности).
"""

# Numerical Safeguards
from numtri.core.math.numerical_safeguards import (
    FLOAT64_EXACT_INT_LIMIT,
    InvalidArgumentError,
    NonIntegralDivisionError,
    as_integer,
    exact_divide,
    is_exact_in_float64,
    validate_index,
    validate_min_order,
    validate_order,
)

# Precision advisories
from numtri.core.math.precision import (
    DEFAULT_FAMILY_THRESHOLDS,
    DEFAULT_SEQUENCE_THRESHOLDS,
    PrecisionConfig,
    check_precision,
    fits_float64,
)

# Recurrences
from numtri.core.math.recurrences import (
    RowView,
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

# Completion strategies
from numtri.core.math.completion import (
    boustrophedon,
    complete_straight_row,
    complete_symmetric_row,
    half_length,
    mirror_left_half,
    mirror_start,
)

# Determinant extractor
from numtri.core.math.determinant import (
    bernoulli_from_determinant,
    hessenberg_band,
    hessenberg_determinant,
)

__all__ = [
    # Numerical Safeguards: Constants
    "FLOAT64_EXACT_INT_LIMIT",
    # Numerical Safeguards: Exceptions
    "InvalidArgumentError",
    "NonIntegralDivisionError",
    # Numerical Safeguards: Functions
    "as_integer",
    "exact_divide",
    "is_exact_in_float64",
    "validate_index",
    "validate_min_order",
    "validate_order",
    # Precision
    "DEFAULT_FAMILY_THRESHOLDS",
    "DEFAULT_SEQUENCE_THRESHOLDS",
    "PrecisionConfig",
    "check_precision",
    "fits_float64",
    # Recurrences: Types
    "RowView",
    "Rule",
    "Seed",
    # Recurrences: Row lengths
    "natural_length",
    "trinomial_length",
    # Recurrences: Seeds
    "seed_catalan",
    "seed_clark",
    "seed_sea",
    "seed_trinomial",
    "seed_unit_edges",
    "seed_vertex",
    # Recurrences: Rules
    "bell_rule",
    "catalan_rule",
    "eulerian_rule",
    "floyd_rule",
    "lozanic_rule",
    "pascal_rule",
    "rascal_rule",
    "sea_rule",
    "trinomial_rule",
    # Completion
    "boustrophedon",
    "complete_straight_row",
    "complete_symmetric_row",
    "half_length",
    "mirror_left_half",
    "mirror_start",
    # Determinant
    "bernoulli_from_determinant",
    "hessenberg_band",
    "hessenberg_determinant",
]
