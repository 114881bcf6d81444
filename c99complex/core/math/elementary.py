"""
Elementary — exp, ln, log2, log10, sqrt, pow и полярная форма

C99: Annex G.6.3 (cexp, clog), G.6.4 (cpow, csqrt)

Неконечные аргументы (и нули там, где это важно для разреза) обрабатываются
таблицами special_values; общие формулы работают только с конечными
значениями и избегают переполнения масштабированием:
- exp: exp(a − 1)·e при a > log(DBL_MAX / 4)
- ln: log1p при |z| ≈ 1, масштабирование для огромных и субнормальных |z|
- sqrt: формула половинного угла через hypot, субнормальные масштабируются
  на 2**SCALE_UP
"""

import math
from typing import Final

from c99complex.core.domain.complex_value import (
    NAN_COMPLEX,
    ONE,
    ZERO,
    Complex,
)
from c99complex.core.math.arithmetic import arg, div, modulus, mul
from c99complex.core.math.numerical_safeguards import (
    DBL_MANT_DIG,
    DBL_MIN,
    LARGE_DOUBLE,
    LN10,
    LN2,
    LOG_LARGE_DOUBLE,
    SCALE_DOWN,
    SCALE_UP,
    axis_cos_sin,
    directional_infinity,
    safe_exp,
)
from c99complex.core.math.special_values import (
    EXP_SPECIAL_VALUES,
    LOG_SPECIAL_VALUES,
    SQRT_SPECIAL_VALUES,
    special_value,
)

# Диапазон |z|, в котором ln|z| считается через log1p
LOG1P_LOWER: Final[float] = 0.71
LOG1P_UPPER: Final[float] = 1.73


# =============================================================================
# ЭКСПОНЕНТА
# =============================================================================


def exp(z: Complex) -> Complex:
    """
    e^z = e^a (cos b + i sin b).

    C99: Annex G.6.3.1

    Специальные случаи:
    - a = +∞, b конечное ≠ 0 → направленная бесконечность по (cos b, sin b);
      только b = ±π/2 и ±π (double-константы) дают бесконечность на оси,
      сколь угодно малый ненулевой угол даёт ∞ + ∞i
    - a = −∞, b конечное ≠ 0 → нули со знаками cos b и sin b
    - a = +∞, b = ±∞ или NaN → NaN + NaN·i
    - a = −∞, b неконечное → 0 + 0i
    - a конечное, b неконечное → NaN + NaN·i
    - a = NaN, b = ±0 → NaN ± 0i

    Args:
        z: Показатель

    Returns:
        e^z
    """
    a, b = z.re, z.im
    if not z.is_finite():
        if math.isinf(a) and math.isfinite(b) and b != 0.0:
            c, s = axis_cos_sin(b)
            if a > 0.0:
                re, im = directional_infinity(c, s)
                return Complex(re, im)
            return Complex(math.copysign(0.0, c), math.copysign(0.0, s))
        return special_value(EXP_SPECIAL_VALUES, z)

    if a > LOG_LARGE_DOUBLE:
        scale = safe_exp(a - 1.0)
        re = scale * math.cos(b) * math.e
        im = scale * math.sin(b) * math.e
    else:
        scale = math.exp(a)
        re = scale * math.cos(b)
        im = scale * math.sin(b)
    if b == 0.0:
        # inf × 0 не должен давать NaN на вещественной оси
        im = b
    return Complex(re, im)


# =============================================================================
# ЛОГАРИФМЫ
# =============================================================================


def ln(z: Complex) -> Complex:
    """
    Натуральный логарифм: ln|z| + i·arg(z), arg в (−π, π].

    C99: Annex G.6.3.2

    Нули: ln(+0 ± 0i) = −∞ ± 0i, ln(−0 ± 0i) = −∞ ± πi.
    Бесконечная компонента: вещественная часть +∞, мнимая — предельный угол.
    """
    x, y = z.re, z.im
    if not z.is_finite() or z.is_zero():
        return special_value(LOG_SPECIAL_VALUES, z)

    ax = abs(x)
    ay = abs(y)
    if ax > LARGE_DOUBLE or ay > LARGE_DOUBLE:
        real = math.log(math.hypot(ax / 2.0, ay / 2.0)) + LN2
    elif ax < DBL_MIN and ay < DBL_MIN:
        real = (
            math.log(math.hypot(math.ldexp(ax, DBL_MANT_DIG), math.ldexp(ay, DBL_MANT_DIG)))
            - DBL_MANT_DIG * LN2
        )
    else:
        h = math.hypot(ax, ay)
        if LOG1P_LOWER <= h <= LOG1P_UPPER:
            am = max(ax, ay)
            an = min(ax, ay)
            real = math.log1p((am - 1.0) * (am + 1.0) + an * an) / 2.0
        else:
            real = math.log(h)
    return Complex(real, math.atan2(y, x))


def log2(z: Complex) -> Complex:
    w = ln(z)
    return Complex(w.re / LN2, w.im / LN2)


def log10(z: Complex) -> Complex:
    w = ln(z)
    return Complex(w.re / LN10, w.im / LN10)


def log(z: Complex, base: Complex | None = None) -> Complex:
    """
    Логарифм по произвольному комплексному основанию: ln(z) / ln(base).

    Без base эквивалентен ln(z).
    """
    if base is None:
        return ln(z)
    return div(ln(z), ln(base))


# =============================================================================
# КВАДРАТНЫЙ КОРЕНЬ
# =============================================================================


def sqrt(z: Complex) -> Complex:
    """
    Главное значение квадратного корня (Re ≥ 0).

    C99: Annex G.6.4.2

    Формула половинного угла: s = sqrt((|x| + |z|) / 2), d = |y| / (2s);
    x ≥ 0 → s + i·copysign(d, y), иначе d + i·copysign(s, y). Знак нуля
    мнимой части выбирает сторону разреза: sqrt(−4 + 0i) = 0 + 2i,
    sqrt(−4 − 0i) = 0 − 2i.

    Examples:
        >>> sqrt(Complex(-4.0, 0.0))
        Complex(re=0.0, im=2.0)
    """
    x, y = z.re, z.im
    if not z.is_finite() or z.is_zero():
        return special_value(SQRT_SPECIAL_VALUES, z)

    ax = abs(x)
    ay = abs(y)
    if ax < DBL_MIN and ay < DBL_MIN:
        # hypot(ax, ay) субнормален
        ax = math.ldexp(ax, SCALE_UP)
        s = math.ldexp(
            math.sqrt(ax + math.hypot(ax, math.ldexp(ay, SCALE_UP))),
            SCALE_DOWN,
        )
    else:
        ax /= 8.0
        s = 2.0 * math.sqrt(ax + math.hypot(ax, ay / 8.0))
    d = ay / (2.0 * s)

    if x >= 0.0:
        return Complex(s, math.copysign(d, y))
    return Complex(d, math.copysign(s, y))


# =============================================================================
# СТЕПЕНЬ
# =============================================================================


def _has_nan(z: Complex) -> bool:
    return math.isnan(z.re) or math.isnan(z.im)


def _power_integer(base: Complex, n: int) -> Complex:
    result = ONE
    square = base
    k = abs(n)
    while k > 0:
        if k & 1:
            result = mul(result, square)
        k >>= 1
        if k:
            square = mul(square, square)
    if n < 0:
        return div(ONE, result)
    return result


def _power_infinite_base(base: Complex, exponent: Complex) -> Complex:
    c, d = exponent.re, exponent.im
    if exponent.is_infinite():
        return NAN_COMPLEX

    if base.im == 0.0 and base.re > 0.0:
        # +∞ + 0i
        if c < 0.0:
            return ZERO
        if c > 0.0:
            return Complex(math.inf, 0.0)
        return NAN_COMPLEX

    if base.im == 0.0:
        # −∞ + 0i: определено только для вещественных целых показателей
        if d != 0.0 or not c.is_integer():
            return NAN_COMPLEX
        odd = int(c) % 2 == 1
        if c > 0.0:
            return Complex(-math.inf if odd else math.inf, 0.0)
        return Complex(-0.0 if odd else 0.0, 0.0)

    # Прочие направленные бесконечности: угол масштабируется показателем
    if d != 0.0:
        return NAN_COMPLEX
    if c < 0.0:
        return ZERO
    return Complex.from_polar(math.inf, c * arg(base))


def _power_infinite_exponent(base: Complex, exponent: Complex) -> Complex:
    # Определено только для положительного вещественного основания
    if exponent.im != 0.0 or base.im != 0.0 or base.re <= 0.0:
        return NAN_COMPLEX
    grows = (base.re > 1.0) == (exponent.re > 0.0)
    return Complex(math.inf, 0.0) if grows else ZERO


def power(base: Complex, exponent: Complex) -> Complex:
    """
    base ** exponent = exp(exponent · ln(base)).

    C99: Annex G.6.4.1

    Предварительный разбор (общая формула не воспроизводит эти пределы):
    1. exponent = 0 → 1 (в том числе 0^0 и NaN^0)
    2. base = 1 + 0i → 1 (в том числе 1^NaN)
    3. NaN в любой компоненте → NaN + NaN·i
    4. base = 0: Re(exponent) > 0 → 0; вещественный отрицательный → ∞ + 0i;
       иначе NaN + NaN·i
    5. Бесконечное основание: +∞ → 0 или ∞ по знаку Re(exponent);
       −∞ → ±∞ / ±0 для целых показателей, иначе NaN + NaN·i
    6. Бесконечный показатель: для положительного вещественного основания
       0 или ∞ в зависимости от |base| < 1
    7. Целый вещественный показатель → возведение повторным квадрированием,
       показатель 0.5 → sqrt

    Args:
        base: Основание
        exponent: Показатель

    Returns:
        Главное значение степени
    """
    if exponent.is_zero():
        return ONE
    if base.re == 1.0 and base.im == 0.0:
        return ONE
    if _has_nan(base) or _has_nan(exponent):
        return NAN_COMPLEX

    c, d = exponent.re, exponent.im
    if base.is_zero():
        if c > 0.0:
            return ZERO
        if c < 0.0 and d == 0.0:
            return Complex(math.inf, 0.0)
        return NAN_COMPLEX

    if base.is_infinite():
        return _power_infinite_base(base, exponent)
    if exponent.is_infinite():
        return _power_infinite_exponent(base, exponent)

    if d == 0.0 and c.is_integer():
        return _power_integer(base, int(c))
    if d == 0.0 and c == 0.5:
        return sqrt(base)
    return exp(mul(exponent, ln(base)))


# =============================================================================
# ПОЛЯРНАЯ ФОРМА
# =============================================================================


def polar(magnitude: float, phase: float) -> Complex:
    """Построение по модулю и фазе (см. Complex.from_polar)."""
    return Complex.from_polar(magnitude, phase)


def rect(magnitude: float, phase: float) -> Complex:
    return Complex.from_polar(magnitude, phase)


def to_polar(z: Complex) -> tuple[float, float]:
    """(|z|, arg z)."""
    return modulus(z), arg(z)
