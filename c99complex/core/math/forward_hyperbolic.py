"""
Forward Hyperbolic — sinh, cosh, tanh и обратные величины

C99: Annex G.6.2.4 (ccosh), G.6.2.5 (csinh), G.6.2.6 (ctanh)

Прямые формулы над вещественными sin/cos/sinh/cosh. Для |x| > log(DBL_MAX/4)
множитель e^|x| выносится как e^(|x| − 1)·e, чтобы не переполниться раньше
времени. Бесконечная вещественная часть при конечной ненулевой мнимой даёт
направленную бесконечность (cosh, sinh) или ±1 (tanh).
"""

import math

from c99complex.core.domain.complex_value import Complex
from c99complex.core.math.arithmetic import reciprocal
from c99complex.core.math.numerical_safeguards import (
    LOG_LARGE_DOUBLE,
    directional_infinity,
    safe_exp,
)
from c99complex.core.math.special_values import (
    COSH_SPECIAL_VALUES,
    SINH_SPECIAL_VALUES,
    TANH_SPECIAL_VALUES,
    special_value,
)


def _infinite_real_with_angle(z: Complex) -> bool:
    return math.isinf(z.re) and math.isfinite(z.im) and z.im != 0.0


def _large_half_exp(x: float) -> float:
    # cosh(|x| − 1) = sinh(|x| − 1) = e^(|x| − 1) / 2 при |x| > LOG_LARGE_DOUBLE
    return safe_exp(abs(x) - 1.0) / 2.0


def cosh(z: Complex) -> Complex:
    x, y = z.re, z.im
    if not z.is_finite():
        if _infinite_real_with_angle(z):
            c, s = math.cos(y), math.sin(y)
            re, im = directional_infinity(c, s if x > 0.0 else -s)
            return Complex(re, im)
        return special_value(COSH_SPECIAL_VALUES, z)

    if abs(x) > LOG_LARGE_DOUBLE:
        half = _large_half_exp(x)
        re = math.cos(y) * half * math.e
        if y == 0.0:
            im = y * math.copysign(1.0, x)
        else:
            im = math.sin(y) * math.copysign(half, x) * math.e
    else:
        re = math.cos(y) * math.cosh(x)
        im = math.sin(y) * math.sinh(x)
    return Complex(re, im)


def sinh(z: Complex) -> Complex:
    x, y = z.re, z.im
    if not z.is_finite():
        if _infinite_real_with_angle(z):
            c, s = math.cos(y), math.sin(y)
            re, im = directional_infinity(c if x > 0.0 else -c, s)
            return Complex(re, im)
        return special_value(SINH_SPECIAL_VALUES, z)

    if abs(x) > LOG_LARGE_DOUBLE:
        half = _large_half_exp(x)
        re = math.cos(y) * math.copysign(half, x) * math.e
        im = y if y == 0.0 else math.sin(y) * half * math.e
    else:
        re = math.cos(y) * math.sinh(x)
        im = math.sin(y) * math.cosh(x)
    return Complex(re, im)


def tanh(z: Complex) -> Complex:
    """
    Гиперболический тангенс.

    Формула через tanh(x), tan(y) и 1/cosh(x) без вычитаний:
        re = tx·(1 + ty²) / (1 + tx²·ty²)
        im = ty / (1 + tx²·ty²) / cosh²(x)
    """
    x, y = z.re, z.im
    if not z.is_finite():
        if _infinite_real_with_angle(z):
            return Complex(
                1.0 if x > 0.0 else -1.0,
                math.copysign(0.0, 2.0 * math.sin(y) * math.cos(y)),
            )
        return special_value(TANH_SPECIAL_VALUES, z)

    if abs(x) > LOG_LARGE_DOUBLE:
        return Complex(
            math.copysign(1.0, x),
            4.0 * math.sin(y) * math.cos(y) * math.exp(-2.0 * abs(x)),
        )

    tx = math.tanh(x)
    ty = math.tan(y)
    cx = 1.0 / math.cosh(x)
    txty = tx * ty
    denom = 1.0 + txty * txty
    return Complex(tx * (1.0 + ty * ty) / denom, ((ty / denom) * cx) * cx)


def sech(z: Complex) -> Complex:
    return reciprocal(cosh(z))


def csch(z: Complex) -> Complex:
    return reciprocal(sinh(z))


def coth(z: Complex) -> Complex:
    return reciprocal(tanh(z))
