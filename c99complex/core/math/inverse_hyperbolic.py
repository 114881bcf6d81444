"""
Inverse Hyperbolic — asinh, acosh, atanh через поворот на 90°

C99: Annex G.6.2.1 (cacosh), G.6.2.2 (casinh), G.6.2.3 (catanh)

    asinh(z) = i·asin(−iz)
    atanh(z) = −i·atan(iz)
    acosh(z) = ±i·acos(z), знак выбирается так, чтобы Re(acosh) ≥ 0

Умножение на ±i — точная перестановка компонент со сменой знака, поэтому
таблицы специальных значений и симметрии переносятся из обратных
тригонометрических функций без потерь. Погрешность общей формулы
наследуется от asin/acos/atan.
"""

import math

from c99complex.core.domain.complex_value import NAN_COMPLEX, Complex
from c99complex.core.math.inverse_circular import acos, asin, atan
from c99complex.core.math.numerical_safeguards import has_sign_bit


def asinh(z: Complex) -> Complex:
    """
    Главное значение arsinh, Im ∈ [−π/2, π/2].

    Examples:
        >>> asinh(Complex(0.0, 0.0))
        Complex(re=0.0, im=0.0)
    """
    # −iz = (y, −x); i·(p + iq) = (−q, p)
    w = asin(Complex(z.im, -z.re))
    return Complex(-w.im, w.re)


def acosh(z: Complex) -> Complex:
    """
    Главное значение arcosh, Re ≥ 0, Im ∈ [−π, π].

    acosh(−∞ + i·y) = +∞ ± πi по знаку y; при двух бесконечных компонентах
    мнимая часть ±π/4 или ±3π/4 по квадранту аргумента.
    """
    w = acos(z)
    if math.isnan(w.im):
        return NAN_COMPLEX
    if has_sign_bit(w.im):
        # i·acos(z)
        return Complex(-w.im, w.re)
    # −i·acos(z)
    return Complex(w.im, -w.re)


def atanh(z: Complex) -> Complex:
    """
    Главное значение artanh, Im ∈ [−π/2, π/2].

    atanh(±1 ± 0i) = ±∞ ± 0i.
    """
    # iz = (−y, x); −i·(p + iq) = (q, −p)
    w = atan(Complex(-z.im, z.re))
    return Complex(w.im, -w.re)
