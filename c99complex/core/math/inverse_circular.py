"""
Inverse Circular — asin, acos, atan

C99: Annex G.6.1.1 (cacos), G.6.1.2 (casin), G.6.1.3 (catan)

asin/acos: алгоритм Hull, Fairgrieve & Tang (ACM TOMS 23, 1997) в форме
Boost.Math. Вычисление ведётся на |x|, |y| через две вспомогательные
величины r = |z + 1|, s = |z − 1| и A = (r + s) / 2, B = |x| / A:
- B ≤ B_CROSSOVER: re = asin(B) / acos(B); иначе atan-формула без вычитания
  близких величин
- A ≤ A_CROSSOVER: im = log1p(Am1 + sqrt(Am1·(A + 1))), где Am1 = A − 1
  вычисляется без сокращения; иначе im = log(A + sqrt(A² − 1))
- вне [SAFE_MIN, SAFE_MAX] используются асимптотики (в том числе
  sqrt-поправка у точки ветвления z = ±1)
Знаки восстанавливаются в конце по знаковым битам x и y.

atan: atan(z) = −i·atanh(iz) с устойчивым ядром atanh (log1p и atan2
вместо разности логарифмов), отдельные ветви у полюса z = ±i и для
больших |z|.

Неконечные аргументы берутся из таблиц special_values (бесконечность
доминирует над NaN).
"""

import math
from typing import Final

from c99complex.core.domain.complex_value import Complex
from c99complex.core.math.numerical_safeguards import (
    DBL_EPSILON,
    DBL_MAX,
    DBL_MIN,
    HALF_PI,
    LN2,
    PI,
    SQRT_DBL_MIN,
    SQRT_LARGE_DOUBLE,
    has_sign_bit,
)
from c99complex.core.math.special_values import (
    ACOS_SPECIAL_VALUES,
    ASIN_SPECIAL_VALUES,
    ATAN_SPECIAL_VALUES,
    special_value,
)

# =============================================================================
# ПАРАМЕТРЫ HULL-FAIRGRIEVE-TANG
# =============================================================================

# Порог A, выше которого im = log(A + sqrt(A² − 1)) не теряет точность
A_CROSSOVER: Final[float] = 10.0

# Порог B, выше которого asin(B)/acos(B) заменяется atan-формулой
B_CROSSOVER: Final[float] = 0.6417

# Диапазон, в котором квадраты компонент не переполняются и не теряются
HFT_SAFE_MAX: Final[float] = math.sqrt(DBL_MAX) / 8.0
HFT_SAFE_MIN: Final[float] = math.sqrt(DBL_MIN) * 4.0


# =============================================================================
# ЯДРА HFT
# =============================================================================


def _imag_from_a(a: float, am1: float) -> float:
    if a <= A_CROSSOVER:
        return math.log1p(am1 + math.sqrt(am1 * (a + 1.0)))
    return math.log(a + math.sqrt(a * a - 1.0))


def _am1(x: float, yy: float, r: float, s: float, xp1: float, xm1: float) -> float:
    # A − 1 без вычитания близких величин
    if x < 1.0:
        return 0.5 * (yy / (r + xp1) + yy / (s - xm1))
    return 0.5 * (yy / (r + xp1) + (s + xm1))


def _asin_parts(x: float, y: float) -> tuple[float, float]:
    """asin для x = |re| ≥ 0, y = |im| ≥ 0, вне вещественного отрезка [−1, 1]."""
    xp1 = x + 1.0
    xm1 = x - 1.0

    if HFT_SAFE_MIN < x < HFT_SAFE_MAX and HFT_SAFE_MIN < y < HFT_SAFE_MAX:
        yy = y * y
        r = math.sqrt(xp1 * xp1 + yy)
        s = math.sqrt(xm1 * xm1 + yy)
        a = 0.5 * (r + s)
        b = x / a

        if b <= B_CROSSOVER:
            real = math.asin(b)
        else:
            apx = a + x
            if x <= 1.0:
                real = math.atan(x / math.sqrt(0.5 * apx * (yy / (r + xp1) + (s - xm1))))
            else:
                real = math.atan(x / (y * math.sqrt(0.5 * (apx / (r + xp1) + apx / (s + xm1)))))

        return real, _imag_from_a(a, _am1(x, yy, r, s, xp1, xm1))

    # Асимптотики вне безопасного диапазона
    if y <= DBL_EPSILON * abs(xm1):
        if x < 1.0:
            return math.asin(x), y / math.sqrt(-xp1 * xm1)
        if DBL_MAX / xp1 > xm1:
            return HALF_PI, math.log1p(xm1 + math.sqrt(xp1 * xm1))
        return HALF_PI, LN2 + math.log(x)
    if y <= HFT_SAFE_MIN:
        # x == 1: sqrt-поправка у точки ветвления
        return HALF_PI - math.sqrt(y), math.sqrt(y)
    if DBL_EPSILON * y - 1.0 >= x:
        return x / y, LN2 + math.log(y)
    if x > 1.0:
        xoy = x / y
        return math.atan(xoy), LN2 + math.log(y) + 0.5 * math.log1p(xoy * xoy)
    a = math.sqrt(1.0 + y * y)
    return x / a, 0.5 * math.log1p(2.0 * y * (y + a))


def _acos_parts(x: float, y: float) -> tuple[float, float]:
    """acos для x = |re| ≥ 0, y = |im| ≥ 0; мнимая часть возвращается ≥ 0."""
    xp1 = x + 1.0
    xm1 = x - 1.0

    if HFT_SAFE_MIN < x < HFT_SAFE_MAX and HFT_SAFE_MIN < y < HFT_SAFE_MAX:
        yy = y * y
        r = math.sqrt(xp1 * xp1 + yy)
        s = math.sqrt(xm1 * xm1 + yy)
        a = 0.5 * (r + s)
        b = x / a

        if b <= B_CROSSOVER:
            real = math.acos(b)
        else:
            apx = a + x
            if x <= 1.0:
                real = math.atan(math.sqrt(0.5 * apx * (yy / (r + xp1) + (s - xm1))) / x)
            else:
                real = math.atan((y * math.sqrt(0.5 * (apx / (r + xp1) + apx / (s + xm1)))) / x)

        return real, _imag_from_a(a, _am1(x, yy, r, s, xp1, xm1))

    if y <= DBL_EPSILON * abs(xm1):
        if x < 1.0:
            return math.acos(x), y / math.sqrt(xp1 * (1.0 - x))
        if DBL_MAX / xp1 > xm1:
            # Малая вещественная часть над разрезом: y / sqrt(x² − 1)
            return y / math.sqrt(xm1 * xp1), math.log1p(xm1 + math.sqrt(xp1 * xm1))
        return y / x, LN2 + math.log(x)
    if y <= HFT_SAFE_MIN:
        return math.sqrt(y), math.sqrt(y)
    if DBL_EPSILON * y - 1.0 >= x:
        return HALF_PI, LN2 + math.log(y)
    if x > 1.0:
        xoy = x / y
        return math.atan(y / x), LN2 + math.log(y) + 0.5 * math.log1p(xoy * xoy)
    a = math.sqrt(1.0 + y * y)
    return HALF_PI, 0.5 * math.log1p(2.0 * y * (y + a))


# =============================================================================
# ЯДРО ATANH
# =============================================================================


def _atanh_parts(x: float, y: float) -> tuple[float, float]:
    """Устойчивый atanh для конечного (x, y)."""
    if x < 0.0:
        re, im = _atanh_parts(-x, -y)
        return -re, -im

    ay = abs(y)
    if x > SQRT_LARGE_DOUBLE or ay > SQRT_LARGE_DOUBLE:
        h = math.hypot(x / 2.0, y / 2.0)
        return x / 4.0 / h / h, -math.copysign(HALF_PI, -y)

    if x == 1.0 and ay < SQRT_DBL_MIN:
        # Полюс atanh(1 ± 0i) = ∞ ± 0i и его окрестность
        if ay == 0.0:
            return math.inf, y
        return (
            -math.log(math.sqrt(ay) / math.sqrt(math.hypot(ay, 2.0))),
            math.copysign(math.atan2(2.0, -ay) / 2.0, y),
        )

    return (
        math.log1p(4.0 * x / ((1.0 - x) * (1.0 - x) + ay * ay)) / 4.0,
        -math.atan2(-2.0 * y, (1.0 - x) * (1.0 + x) - ay * ay) / 2.0,
    )


# =============================================================================
# ПУБЛИЧНЫЕ ФУНКЦИИ
# =============================================================================


def asin(z: Complex) -> Complex:
    """
    Главное значение arcsin, Re ∈ [−π/2, π/2].

    Разрезы: (−∞, −1] и [1, +∞) на вещественной оси; сторона выбирается
    знаком нуля мнимой части. asin(−z) = −asin(z), asin(conj z) = conj(asin z).

    Examples:
        >>> asin(Complex(1.0, 0.0))
        Complex(re=1.5707963267948966, im=0.0)
    """
    if not z.is_finite():
        return special_value(ASIN_SPECIAL_VALUES, z)
    if z.im == 0.0 and abs(z.re) <= 1.0:
        return Complex(math.asin(z.re), z.im)

    real, imag = _asin_parts(abs(z.re), abs(z.im))
    return Complex(math.copysign(real, z.re), math.copysign(imag, z.im))


def acos(z: Complex) -> Complex:
    """
    Главное значение arccos, Re ∈ [0, π].

    acos(−z) = π − acos(z); мнимая часть имеет знак, противоположный
    знаковому биту Im(z).
    """
    if not z.is_finite():
        return special_value(ACOS_SPECIAL_VALUES, z)
    if z.im == 0.0 and abs(z.re) <= 1.0:
        return Complex(HALF_PI if z.re == 0.0 else math.acos(z.re), -z.im)

    real, imag = _acos_parts(abs(z.re), abs(z.im))
    if has_sign_bit(z.re):
        real = PI - real
    if not has_sign_bit(z.im):
        imag = -imag
    return Complex(real, imag)


def atan(z: Complex) -> Complex:
    """
    Главное значение arctan, Re ∈ [−π/2, π/2].

    atan(z) = −i·atanh(iz). Полюса z = ±i дают 0 ± ∞i; при бесконечной
    вещественной части результат ±π/2 + 0i независимо от мнимой.
    """
    if not z.is_finite():
        return special_value(ATAN_SPECIAL_VALUES, z)
    re, im = _atanh_parts(-z.im, z.re)
    return Complex(im, -re)
