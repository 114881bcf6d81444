"""
Forward Circular — sin, cos, tan и обратные величины

C99: Annex G.6 (csin = −i·csinh(iz), ccos = ccosh(iz), ctan = −i·ctanh(iz))

Тригонометрические функции получаются поворотом аргумента и результата
гиперболических функций; специальные значения и симметрии переносятся
точно.
"""

from c99complex.core.domain.complex_value import Complex
from c99complex.core.math.arithmetic import reciprocal
from c99complex.core.math.forward_hyperbolic import cosh, sinh, tanh


def sin(z: Complex) -> Complex:
    # iz = (−y, x); −i·(p + iq) = (q, −p)
    w = sinh(Complex(-z.im, z.re))
    return Complex(w.im, -w.re)


def cos(z: Complex) -> Complex:
    return cosh(Complex(-z.im, z.re))


def tan(z: Complex) -> Complex:
    w = tanh(Complex(-z.im, z.re))
    return Complex(w.im, -w.re)


def sec(z: Complex) -> Complex:
    return reciprocal(cos(z))


def csc(z: Complex) -> Complex:
    return reciprocal(sin(z))


def cot(z: Complex) -> Complex:
    return reciprocal(tan(z))
