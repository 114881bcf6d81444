"""
Core math modules для c99complex

Комплексная арифметика и функции с поведением C99 Annex G на нулях,
бесконечностях, NaN и разрезах.
"""

# Numerical Safeguards
from c99complex.core.math.numerical_safeguards import (
    # Constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Config
    ToleranceConfig,
    # Signed zero / infinities
    axis_cos_sin,
    box_infinity,
    directional_infinity,
    has_sign_bit,
    normalize_phase,
    safe_exp,
    signed_zero,
    # Comparisons
    complex_is_close,
    is_close,
    same_float,
    same_value,
)

# Arithmetic (Annex G.5)
from c99complex.core.math.arithmetic import (
    add,
    arg,
    conj,
    div,
    modulus,
    mul,
    mult_i,
    mult_minus_i,
    neg,
    reciprocal,
    sub,
)

# Elementary (Annex G.6.3, G.6.4)
from c99complex.core.math.elementary import (
    exp,
    ln,
    log,
    log10,
    log2,
    polar,
    power,
    rect,
    sqrt,
    to_polar,
)

# Inverse circular / hyperbolic (Annex G.6.1, G.6.2)
from c99complex.core.math.inverse_circular import acos, asin, atan
from c99complex.core.math.inverse_hyperbolic import acosh, asinh, atanh
from c99complex.core.math.reciprocal_inverse import (
    acot,
    acoth,
    acsc,
    acsch,
    asec,
    asech,
)

# Forward circular / hyperbolic
from c99complex.core.math.forward_circular import cos, cot, csc, sec, sin, tan
from c99complex.core.math.forward_hyperbolic import (
    cosh,
    coth,
    csch,
    sech,
    sinh,
    tanh,
)

# Rounding
from c99complex.core.math.rounding import ceil, floor, round_parts, sign

__all__ = [
    # Numerical Safeguards — Constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Config
    "ToleranceConfig",
    # Numerical Safeguards — Signed zero / infinities
    "axis_cos_sin",
    "box_infinity",
    "directional_infinity",
    "has_sign_bit",
    "normalize_phase",
    "safe_exp",
    "signed_zero",
    # Numerical Safeguards — Comparisons
    "complex_is_close",
    "is_close",
    "same_float",
    "same_value",
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
    # Inverse circular
    "asin",
    "acos",
    "atan",
    # Inverse hyperbolic
    "asinh",
    "acosh",
    "atanh",
    # Reciprocal inverse
    "acsc",
    "asec",
    "acot",
    "acsch",
    "asech",
    "acoth",
    # Forward circular
    "sin",
    "cos",
    "tan",
    "sec",
    "csc",
    "cot",
    # Forward hyperbolic
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
]
