"""
Domain models and value objects.

Contains the Complex value type, its classification and text representation.
"""

from c99complex.core.domain.complex_value import (
    I,
    INF_COMPLEX,
    NAN_COMPLEX,
    ONE,
    ZERO,
    Complex,
    ComponentKind,
    ValueClass,
    classify,
    component_kind,
)
from c99complex.core.domain.text_format import (
    ComplexFormatError,
    FormatConfig,
    format_complex,
    parse_complex,
)

__all__ = [
    # Value type
    "Complex",
    "ComponentKind",
    "ValueClass",
    "classify",
    "component_kind",
    # Constants
    "ZERO",
    "ONE",
    "I",
    "NAN_COMPLEX",
    "INF_COMPLEX",
    # Text format
    "ComplexFormatError",
    "FormatConfig",
    "format_complex",
    "parse_complex",
]
