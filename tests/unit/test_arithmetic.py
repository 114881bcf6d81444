"""
Тесты для арифметики (Annex G.5)

Проверяет:
1. Сложение/вычитание по правилам IEEE-754
2. Умножение и восстановление бесконечностей
3. Деление: таблица специальных случаев и алгоритм Смита
4. Модуль и аргумент
"""

import math

import pytest

from c99complex.core.domain.complex_value import Complex
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
from c99complex.core.math.numerical_safeguards import complex_is_close, same_value

INF = math.inf
NAN = math.nan


def assert_nan(z: Complex) -> None:
    assert math.isnan(z.re) and math.isnan(z.im), z


# =============================================================================
# АДДИТИВНЫЕ ОПЕРАЦИИ
# =============================================================================


class TestAdditive:
    """Тесты сложения, вычитания, neg, conj"""

    def test_add(self) -> None:
        """Покомпонентное сложение"""
        assert same_value(add(Complex(1.0, 2.0), Complex(3.0, -4.0)), Complex(4.0, -2.0))

    def test_sub(self) -> None:
        """Покомпонентное вычитание"""
        assert same_value(sub(Complex(1.0, 2.0), Complex(3.0, -4.0)), Complex(-2.0, 6.0))

    def test_inf_minus_inf_is_nan(self) -> None:
        """∞ − ∞ = NaN в соответствующей компоненте"""
        z = sub(Complex(INF, 1.0), Complex(INF, 0.0))
        assert math.isnan(z.re)
        assert z.im == 1.0

    def test_neg_flips_zero_signs(self) -> None:
        """neg меняет знаки нулей"""
        assert same_value(neg(Complex(0.0, -0.0)), Complex(-0.0, 0.0))

    def test_conj(self) -> None:
        """conj меняет знак только мнимой части"""
        assert same_value(conj(Complex(-3.0, 0.0)), Complex(-3.0, -0.0))

    def test_mult_i(self) -> None:
        """i·(1 + 2i) = −2 + i"""
        assert same_value(mult_i(Complex(1.0, 2.0)), Complex(-2.0, 1.0))

    def test_mult_minus_i(self) -> None:
        """−i·(1 + 2i) = 2 − i"""
        assert same_value(mult_minus_i(Complex(1.0, 2.0)), Complex(2.0, -1.0))

    def test_mult_i_is_exact_for_infinities(self) -> None:
        """Поворот на 90° не порождает NaN"""
        assert same_value(mult_i(Complex(INF, 0.0)), Complex(-0.0, INF))


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


class TestMul:
    """Тесты mul"""

    def test_regular(self) -> None:
        """(1 + 2i)(3 + 4i) = −5 + 10i"""
        assert same_value(mul(Complex(1.0, 2.0), Complex(3.0, 4.0)), Complex(-5.0, 10.0))

    def test_i_squared(self) -> None:
        """i·i = −1 + 0i"""
        assert same_value(mul(Complex(0.0, 1.0), Complex(0.0, 1.0)), Complex(-1.0, 0.0))

    def test_infinity_with_nan_stays_infinite(self) -> None:
        """(∞ + NaN·i)(1 + 0i): восстановление даёт бесконечность"""
        z = mul(Complex(INF, NAN), Complex(1.0, 0.0))
        assert z.re == INF

    def test_infinite_times_finite(self) -> None:
        """(∞ + ∞i)(1 + i) бесконечно"""
        assert mul(Complex(INF, INF), Complex(1.0, 1.0)).is_infinite()

    def test_infinite_times_imaginary_infinite(self) -> None:
        """(∞ + 0i)(0 + ∞i) бесконечно"""
        assert mul(Complex(INF, 0.0), Complex(0.0, INF)).is_infinite()

    def test_nan_times_finite(self) -> None:
        """NaN с конечным множителем → NaN"""
        assert_nan(mul(Complex(NAN, NAN), Complex(2.0, 3.0)))

    def test_commutative(self) -> None:
        """z1·z2 = z2·z1"""
        z1, z2 = Complex(1.5, -2.25), Complex(-0.5, 4.0)
        assert same_value(mul(z1, z2), mul(z2, z1))


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


class TestDivSpecialCases:
    """Тесты специальных случаев div"""

    def test_exact_quotient(self) -> None:
        """(3 + 4i) / (1 + 2i) = 2.2 − 0.4i"""
        assert same_value(div(Complex(3.0, 4.0), Complex(1.0, 2.0)), Complex(2.2, -0.4))

    def test_finite_over_zero(self) -> None:
        """(1 + i) / 0 = ∞ + ∞i"""
        assert same_value(div(Complex(1.0, 1.0), Complex(0.0, 0.0)), Complex(INF, INF))

    def test_finite_over_zero_signs(self) -> None:
        """Знаки бесконечностей по знакам числителя"""
        assert same_value(div(Complex(-1.0, 2.0), Complex(0.0, 0.0)), Complex(-INF, INF))

    def test_zero_over_zero(self) -> None:
        """0 / 0 = NaN + NaN·i"""
        assert_nan(div(Complex(0.0, 0.0), Complex(0.0, 0.0)))

    def test_infinite_over_infinite(self) -> None:
        """∞ / ∞ = NaN + NaN·i"""
        assert_nan(div(Complex(INF, 0.0), Complex(0.0, -INF)))

    def test_finite_over_infinite(self) -> None:
        """(1 + i) / ∞ = 0 + 0i"""
        assert same_value(div(Complex(1.0, 1.0), Complex(INF, 0.0)), Complex(0.0, 0.0))

    def test_finite_over_negative_infinite(self) -> None:
        """(1 + i) / −∞ = −0 − 0i"""
        assert same_value(div(Complex(1.0, 1.0), Complex(-INF, 0.0)), Complex(-0.0, -0.0))

    def test_nan_numerator_over_infinite(self) -> None:
        """(1 + NaN·i) / ∞ = 0 + 0i: бесконечность знаменателя доминирует"""
        assert same_value(div(Complex(1.0, NAN), Complex(INF, 0.0)), Complex(0.0, 0.0))

    def test_infinite_over_zero(self) -> None:
        """∞ / 0 = ∞ + ∞i"""
        assert same_value(div(Complex(INF, 0.0), Complex(0.0, 0.0)), Complex(INF, INF))

    def test_infinite_over_nan(self) -> None:
        """∞ / NaN = NaN + NaN·i"""
        assert_nan(div(Complex(INF, 1.0), Complex(NAN, 0.0)))

    def test_infinite_over_real(self) -> None:
        """(∞ + 0i) / 2 = ∞ + 0i"""
        assert same_value(div(Complex(INF, 0.0), Complex(2.0, 0.0)), Complex(INF, 0.0))

    def test_infinite_over_i(self) -> None:
        """∞ / i = 0 − ∞i"""
        assert same_value(div(Complex(INF, 0.0), Complex(0.0, 1.0)), Complex(0.0, -INF))

    def test_diagonal_infinity_over_one(self) -> None:
        """(∞ + ∞i) / 1 = ∞ + ∞i"""
        assert same_value(div(Complex(INF, INF), Complex(1.0, 0.0)), Complex(INF, INF))

    def test_infinite_with_nan_over_finite(self) -> None:
        """(∞ + NaN·i) / 1 сохраняет бесконечность"""
        assert div(Complex(INF, NAN), Complex(1.0, 0.0)).re == INF

    def test_opposing_infinite_terms(self) -> None:
        """(∞ + ∞i) / (1 − i): ∞ − ∞ в вещественной части → NaN"""
        assert_nan(div(Complex(INF, INF), Complex(1.0, -1.0)))

    def test_nan_operand(self) -> None:
        """NaN без бесконечностей → NaN + NaN·i"""
        assert_nan(div(Complex(NAN, 1.0), Complex(1.0, 0.0)))
        assert_nan(div(Complex(1.0, 1.0), Complex(0.0, NAN)))

    def test_zero_over_finite_keeps_signs(self) -> None:
        """(0 − 0i) / 2 = 0 − 0i"""
        assert same_value(div(Complex(0.0, -0.0), Complex(2.0, 0.0)), Complex(0.0, -0.0))

    def test_zero_over_negative(self) -> None:
        """(0 + 0i) / −2 = −0 − 0i"""
        assert same_value(div(Complex(0.0, 0.0), Complex(-2.0, 0.0)), Complex(-0.0, -0.0))

    @pytest.mark.parametrize(
        "z2,expected",
        [
            (Complex(-3.0, 0.0), Complex(-1.0 / 3.0, -0.0)),
            (Complex(-3.0, -0.0), Complex(-1.0 / 3.0, 0.0)),
            (Complex(4.0, 0.0), Complex(0.25, 0.0)),
            (Complex(0.0, -2.0), Complex(0.0, 0.5)),
        ],
    )
    def test_zero_component_sign_from_exact_numerator(
        self, z2: Complex, expected: Complex
    ) -> None:
        """Нулевая компонента частного получает знак (ac + bd) или (bc − ad)"""
        assert same_value(div(Complex(1.0, 0.0), z2), expected)


class TestDivSmith:
    """Тесты алгоритма Смита на конечных значениях"""

    @pytest.mark.parametrize(
        "z1,z2",
        [
            (complex(1.0, 2.0), complex(3.0, -4.0)),
            (complex(-7.5, 0.25), complex(0.001, 1000.0)),
            (complex(1e-200, 1e-200), complex(1e-200, -1e-200)),
            (complex(5.0, -6.0), complex(-1e150, 3e149)),
        ],
    )
    def test_matches_builtin(self, z1: complex, z2: complex) -> None:
        """Совпадение со встроенным делением complex"""
        result = div(Complex.from_builtin(z1), Complex.from_builtin(z2))
        expected = z1 / z2
        assert result.re == pytest.approx(expected.real, rel=1e-14, abs=1e-300)
        assert result.im == pytest.approx(expected.imag, rel=1e-14, abs=1e-300)

    def test_huge_denominator_no_overflow(self) -> None:
        """Компоненты около DBL_MAX не переполняют знаменатель"""
        z = div(Complex(1e308, 1e308), Complex(1e308, 1e308))
        assert complex_is_close(z, Complex(1.0, 0.0))

    def test_tiny_denominator_no_underflow(self) -> None:
        """Субнормальные компоненты не теряются"""
        z = div(Complex(1e-310, 0.0), Complex(1e-310, 0.0))
        assert z.re == pytest.approx(1.0)
        assert z.im == 0.0

    @pytest.mark.parametrize(
        "z1,z2",
        [
            (Complex(1.0, 2.0), Complex(3.0, 4.0)),
            (Complex(-1e-5, 3e3), Complex(0.5, -0.25)),
            (Complex(123.0, -456.0), Complex(-7.0, 8.0)),
        ],
    )
    def test_div_inverts_mul(self, z1: Complex, z2: Complex) -> None:
        """(z1·z2) / z2 ≈ z1 с погрешностью порядка eps·|z1|"""
        error = modulus(sub(div(mul(z1, z2), z2), z1))
        assert error <= 1e-13 * modulus(z1)


class TestReciprocal:
    """Тесты reciprocal"""

    def test_i(self) -> None:
        """1 / i = −i"""
        assert complex_is_close(reciprocal(Complex(0.0, 1.0)), Complex(0.0, -1.0))

    def test_zero(self) -> None:
        """1 / 0 = ∞ + ∞i"""
        assert same_value(reciprocal(Complex(0.0, 0.0)), Complex(INF, INF))

    def test_infinity(self) -> None:
        """1 / (∞ + 0i) = 0 − 0i"""
        assert same_value(reciprocal(Complex(INF, 0.0)), Complex(0.0, -0.0))

    @pytest.mark.parametrize(
        "z,expected",
        [
            (Complex(3.0, 0.0), Complex(1.0 / 3.0, -0.0)),
            (Complex(3.0, -0.0), Complex(1.0 / 3.0, 0.0)),
            (Complex(-3.0, 0.0), Complex(-1.0 / 3.0, -0.0)),
            (Complex(-3.0, -0.0), Complex(-1.0 / 3.0, 0.0)),
            (Complex(-0.0, 2.0), Complex(-0.0, -0.5)),
        ],
    )
    def test_zero_signs_follow_conjugate(self, z: Complex, expected: Complex) -> None:
        """Знаки нулей как у conj(z) / |z|²"""
        assert same_value(reciprocal(z), expected)

    @pytest.mark.parametrize(
        "z",
        [
            Complex(2.0, 0.0),
            Complex(-2.0, 0.0),
            Complex(0.0, 5.0),
            Complex(INF, -0.0),
            Complex(0.5, -1.5),
        ],
    )
    def test_conjugate_symmetry(self, z: Complex) -> None:
        """reciprocal(conj z) = conj(reciprocal z)"""
        assert same_value(reciprocal(conj(z)), conj(reciprocal(z)))


# =============================================================================
# МОДУЛЬ И АРГУМЕНТ
# =============================================================================


class TestModulusArg:
    """Тесты modulus и arg"""

    def test_modulus(self) -> None:
        """|3 + 4i| = 5"""
        assert modulus(Complex(3.0, 4.0)) == 5.0

    def test_modulus_no_overflow(self) -> None:
        """hypot не переполняется"""
        assert modulus(Complex(1e308, 1e308)) == pytest.approx(math.sqrt(2.0) * 1e308)

    def test_modulus_infinity_beats_nan(self) -> None:
        """|∞ + NaN·i| = ∞"""
        assert modulus(Complex(NAN, -INF)) == INF

    def test_modulus_nan(self) -> None:
        """|NaN + i| = NaN"""
        assert math.isnan(modulus(Complex(NAN, 1.0)))

    def test_arg_branch_cut_side(self) -> None:
        """Знак нуля выбирает сторону разреза"""
        assert arg(Complex(-1.0, 0.0)) == math.pi
        assert arg(Complex(-1.0, -0.0)) == -math.pi

    def test_arg_quadrants(self) -> None:
        """arg по квадрантам"""
        assert arg(Complex(1.0, 1.0)) == pytest.approx(math.pi / 4)
        assert arg(Complex(-1.0, -1.0)) == pytest.approx(-3 * math.pi / 4)
