"""
Тесты для прямых тригонометрических и гиперболических функций

Проверяет:
1. sin/cos/tan/sinh/cosh/tanh против cmath на конечных значениях
2. sec/csc/cot/sech/csch/coth как обратные величины
3. Направленные бесконечности и отсутствие OverflowError при больших |Re z|
"""

import cmath
import math

import pytest

from c99complex.core.domain.complex_value import Complex
from c99complex.core.math.forward_circular import cos, cot, csc, sec, sin, tan
from c99complex.core.math.forward_hyperbolic import (
    cosh,
    coth,
    csch,
    sech,
    sinh,
    tanh,
)
from c99complex.core.math.numerical_safeguards import same_value

INF = math.inf
NAN = math.nan

FINITE_POINTS = [
    complex(0.3, 0.4),
    complex(-0.7, 1.2),
    complex(1.5, -0.2),
    complex(-2.5, -3.5),
    complex(10.0, 0.5),
    complex(1e-8, -1e-9),
]

DIRECT = [
    (sin, cmath.sin),
    (cos, cmath.cos),
    (tan, cmath.tan),
    (sinh, cmath.sinh),
    (cosh, cmath.cosh),
    (tanh, cmath.tanh),
]

RECIPROCAL = [
    (sec, cmath.cos),
    (csc, cmath.sin),
    (cot, cmath.tan),
    (sech, cmath.cosh),
    (csch, cmath.sinh),
    (coth, cmath.tanh),
]


def assert_close(result: Complex, expected: complex) -> None:
    assert result.re == pytest.approx(expected.real, rel=1e-12, abs=1e-15)
    assert result.im == pytest.approx(expected.imag, rel=1e-12, abs=1e-15)


# =============================================================================
# КОНЕЧНЫЕ ЗНАЧЕНИЯ
# =============================================================================


class TestFiniteValues:
    """Сверка с cmath"""

    @pytest.mark.parametrize("fn,reference", DIRECT)
    @pytest.mark.parametrize("z", FINITE_POINTS)
    def test_direct(self, fn, reference, z: complex) -> None:
        """Прямые функции совпадают с cmath"""
        assert_close(fn(Complex.from_builtin(z)), reference(z))

    @pytest.mark.parametrize("fn,reference", RECIPROCAL)
    @pytest.mark.parametrize("z", FINITE_POINTS)
    def test_reciprocal(self, fn, reference, z: complex) -> None:
        """sec/csc/cot/sech/csch/coth = 1 / f(z)"""
        assert_close(fn(Complex.from_builtin(z)), 1 / reference(z))

    def test_zero_signs(self) -> None:
        """sin(−0 + 0i) = −0 + 0i, cos(0 + 0i) = 1 − 0i"""
        assert same_value(sin(Complex(-0.0, 0.0)), Complex(-0.0, 0.0))
        assert same_value(cos(Complex(0.0, 0.0)), Complex(1.0, -0.0))

    def test_cosh_real_axis(self) -> None:
        """cosh(x + 0i) = cosh(x) + 0i"""
        z = cosh(Complex(2.0, 0.0))
        assert z.re == pytest.approx(math.cosh(2.0))
        assert same_value(Complex(0.0, z.im), Complex(0.0, 0.0))


# =============================================================================
# БОЛЬШИЕ И БЕСКОНЕЧНЫЕ АРГУМЕНТЫ
# =============================================================================


class TestLargeArguments:
    """Переполнение и направленные бесконечности"""

    def test_cosh_overflow(self) -> None:
        """cosh(1000) = ∞ + 0i без OverflowError"""
        assert same_value(cosh(Complex(1000.0, 0.0)), Complex(INF, 0.0))

    def test_sinh_overflow_negative(self) -> None:
        """sinh(−1000 + 0i) = −∞ + 0i"""
        assert same_value(sinh(Complex(-1000.0, 0.0)), Complex(-INF, 0.0))

    def test_cosh_negative_zero_imaginary(self) -> None:
        """cosh(−1000 − 0i) = ∞ + 0i (знак sin(−0)·sinh(−1000))"""
        assert same_value(cosh(Complex(-1000.0, -0.0)), Complex(INF, 0.0))

    def test_cosh_no_premature_overflow(self) -> None:
        """cosh(710 + 1.5i): e^710 переполняется, cos(1.5)·cosh(710) нет"""
        z = cosh(Complex(710.0, 1.5))
        assert math.isfinite(z.re)
        assert z.re > 0.0

    def test_tanh_large(self) -> None:
        """tanh(1000 + 0.5i) = 1 + 0i"""
        z = tanh(Complex(1000.0, 0.5))
        assert z.re == 1.0
        assert z.im == 0.0

    def test_cosh_directional_infinity(self) -> None:
        """cosh(+∞ + i) = ∞ + ∞i"""
        assert same_value(cosh(Complex(INF, 1.0)), Complex(INF, INF))

    def test_sinh_directional_infinity(self) -> None:
        """sinh(−∞ + 2i) = ∞ + ∞i (cos 2 < 0)"""
        assert same_value(sinh(Complex(-INF, 2.0)), Complex(INF, INF))

    def test_sinh_infinite_real_axis(self) -> None:
        """sinh(−∞ + 0i) = −∞ + 0i"""
        assert same_value(sinh(Complex(-INF, 0.0)), Complex(-INF, 0.0))

    def test_tanh_infinite_real(self) -> None:
        """tanh(+∞ + i) = 1 + 0i"""
        assert same_value(tanh(Complex(INF, 1.0)), Complex(1.0, 0.0))

    def test_sin_infinite_imaginary(self) -> None:
        """sin(0 + ∞i) = 0 + ∞i"""
        assert same_value(sin(Complex(0.0, INF)), Complex(0.0, INF))

    def test_cos_infinite_imaginary(self) -> None:
        """cos(0 + ∞i) = ∞"""
        assert cos(Complex(0.0, INF)).re == INF

    def test_tan_infinite_imaginary(self) -> None:
        """tan(0 + ∞i) = i"""
        assert same_value(tan(Complex(0.0, INF)), Complex(0.0, 1.0))

    def test_nan(self) -> None:
        """NaN + NaN·i остаётся NaN"""
        for fn, _ in DIRECT:
            z = fn(Complex(NAN, NAN))
            assert math.isnan(z.re) and math.isnan(z.im)
