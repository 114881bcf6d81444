"""
c99complex — комплексные числа с семантикой C99 Annex G

Неизменяемый тип Complex (пара IEEE-754 double), арифметика, элементарные
функции и семейство обратных тригонометрических/гиперболических функций с
точным поведением на нулях (со знаком), бесконечностях, NaN и разрезах.
"""

from c99complex.core.contracts import (
    ComplexValueValidator,
    complex_from_json,
    complex_to_json,
    validate_complex_value,
)
from c99complex.core.domain import (
    I,
    INF_COMPLEX,
    NAN_COMPLEX,
    ONE,
    ZERO,
    Complex,
    ComplexFormatError,
    ComponentKind,
    FormatConfig,
    ValueClass,
    classify,
    component_kind,
    format_complex,
    parse_complex,
)
from c99complex.core.math import (
    ToleranceConfig,
    acos,
    acosh,
    acot,
    acoth,
    acsc,
    acsch,
    add,
    arg,
    asec,
    asech,
    asin,
    asinh,
    atan,
    atanh,
    ceil,
    complex_is_close,
    conj,
    cos,
    cosh,
    cot,
    coth,
    csc,
    csch,
    div,
    exp,
    floor,
    ln,
    log,
    log10,
    log2,
    modulus,
    mul,
    mult_i,
    mult_minus_i,
    neg,
    polar,
    power,
    reciprocal,
    rect,
    round_parts,
    same_value,
    sec,
    sech,
    sign,
    sin,
    sinh,
    sqrt,
    sub,
    tan,
    tanh,
    to_polar,
)

__version__ = "1.0.0"

__all__ = [
    # Value type
    "Complex",
    "ComponentKind",
    "ValueClass",
    "classify",
    "component_kind",
    "ZERO",
    "ONE",
    "I",
    "NAN_COMPLEX",
    "INF_COMPLEX",
    # Comparisons
    "ToleranceConfig",
    "same_value",
    "complex_is_close",
    # Arithmetic
    "add",
    "sub",
    "mul",
    "div",
    "neg",
    "conj",
    "reciprocal",
    "mult_i",
    "mult_minus_i",
    "modulus",
    "arg",
    # Elementary
    "exp",
    "ln",
    "log",
    "log2",
    "log10",
    "sqrt",
    "power",
    "polar",
    "rect",
    "to_polar",
    # Inverse functions
    "asin",
    "acos",
    "atan",
    "asinh",
    "acosh",
    "atanh",
    "acsc",
    "asec",
    "acot",
    "acsch",
    "asech",
    "acoth",
    # Forward functions
    "sin",
    "cos",
    "tan",
    "sec",
    "csc",
    "cot",
    "sinh",
    "cosh",
    "tanh",
    "sech",
    "csch",
    "coth",
    # Rounding
    "sign",
    "round_parts",
    "ceil",
    "floor",
    # Text format
    "ComplexFormatError",
    "FormatConfig",
    "format_complex",
    "parse_complex",
    # JSON contract
    "ComplexValueValidator",
    "validate_complex_value",
    "complex_to_json",
    "complex_from_json",
]
