"""
Reciprocal Inverse — acsc, asec, acot, acsch, asech, acoth

Каждая функция сводится к основной обратной функции от 1/z:

    acsc(z) = asin(1/z)     acsch(z) = asinh(1/z)
    asec(z) = acos(1/z)     asech(z) = acosh(1/z)
    acot(z) = atan(1/z)     acoth(z) = atanh(1/z)

Полюс z = ±0 ± 0i: значение берётся из POLE_VALUES и не зависит от знаков
нулей аргумента:

    acsc(0) = π/2 + ∞i      acsch(0) = +∞ + 0i
    asec(0) = π/2 + ∞i      asech(0) = +∞ + 0i
    acot(0) = π/2 + 0i      acoth(0) = 0 + πi/2

Бесконечный z даёт 1/z = ±0 ± 0i (reciprocal берёт знаки нулей от conj z),
что попадает в нулевые случаи основной функции: acsc(∞ + 0i) = 0 − 0i,
asec(∞ + 0i) = π/2 + 0i. Тождество acsc(z) = π/2 − asec(z) выполняется
для ненулевых z.
"""

import math
from typing import Callable, Final

from c99complex.core.domain.complex_value import Complex
from c99complex.core.math.arithmetic import reciprocal
from c99complex.core.math.inverse_circular import acos, asin, atan
from c99complex.core.math.inverse_hyperbolic import acosh, asinh, atanh

HALF_PI: Final[float] = 0.5 * math.pi

# Значения в полюсе z = ±0 ± 0i
POLE_VALUES: Final[dict[str, Complex]] = {
    "acsc": Complex(HALF_PI, math.inf),
    "asec": Complex(HALF_PI, math.inf),
    "acot": Complex(HALF_PI, 0.0),
    "acsch": Complex(math.inf, 0.0),
    "asech": Complex(math.inf, 0.0),
    "acoth": Complex(0.0, HALF_PI),
}


def _of_reciprocal(name: str, inner: Callable[[Complex], Complex], z: Complex) -> Complex:
    if z.is_zero():
        return POLE_VALUES[name]
    return inner(reciprocal(z))


def acsc(z: Complex) -> Complex:
    """Арккосеканс: asin(1/z)."""
    return _of_reciprocal("acsc", asin, z)


def asec(z: Complex) -> Complex:
    """
    Арксеканс: acos(1/z).

    На отрезке 0 < x < 1 значения asec(x ± 0i) сопряжены:
    asec(0.5 + 0i) = 0 + 1.3169i, asec(0.5 − 0i) = 0 − 1.3169i.
    """
    return _of_reciprocal("asec", acos, z)


def acot(z: Complex) -> Complex:
    """
    Арккотангенс: atan(1/z).

    Разрез на мнимой оси между −i и i; acot(±i) = 0 ∓ ∞i.
    """
    return _of_reciprocal("acot", atan, z)


def acsch(z: Complex) -> Complex:
    return _of_reciprocal("acsch", asinh, z)


def asech(z: Complex) -> Complex:
    return _of_reciprocal("asech", acosh, z)


def acoth(z: Complex) -> Complex:
    return _of_reciprocal("acoth", atanh, z)
