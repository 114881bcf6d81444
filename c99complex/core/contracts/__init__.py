"""
Contract Validation Module

Модуль для валидации JSON-представления комплексных значений.
"""

from .validators import (
    ComplexValueValidator,
    ContractValidator,
    SchemaLoader,
    complex_from_json,
    complex_to_json,
    validate_complex_value,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ComplexValueValidator",
    # Functions
    "validate_complex_value",
    "complex_to_json",
    "complex_from_json",
]
