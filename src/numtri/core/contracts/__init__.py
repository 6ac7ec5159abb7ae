"""
Contract Validation Module

Модуль для валидации JSON контрактов результатов numtri.
"""

from .validators import (
    ContractValidator,
    NumberResultValidator,
    SchemaLoader,
    TriangleResultValidator,
    validate_number_result,
    validate_triangle_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TriangleResultValidator",
    "NumberResultValidator",
    # Functions
    "validate_triangle_result",
    "validate_number_result",
]
