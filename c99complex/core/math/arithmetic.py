"""
Arithmetic — сложение, умножение, деление, модуль и аргумент

C99: Annex G.5.1 (мультипликативные операторы), G.5.2 (аддитивные)

Правила распространения:
1. Бесконечная компонента любого операнда определяет результат даже при NaN
   в другой компоненте (infinity dominates NaN)
2. Иначе NaN в любой компоненте → NaN + NaN·i
3. Иначе общая формула

Деление использует алгоритм Смита: масштабирование по большей компоненте
знаменателя вместо (ac + bd) / (c² + d²), где квадраты переполняются для
больших |z2| и теряют точность для малых.
"""

import math

from c99complex.core.domain.complex_value import (
    NAN_COMPLEX,
    Complex,
    ValueClass,
    classify,
)
from c99complex.core.math.numerical_safeguards import (
    LARGE_DOUBLE,
    box_infinity,
    signed_zero,
)

# =============================================================================
# АДДИТИВНЫЕ ОПЕРАЦИИ
# =============================================================================


def add(z1: Complex, z2: Complex) -> Complex:
    """Покомпонентное сложение по правилам IEEE-754."""
    return Complex(z1.re + z2.re, z1.im + z2.im)


def sub(z1: Complex, z2: Complex) -> Complex:
    """Покомпонентное вычитание по правилам IEEE-754 (∞ − ∞ = NaN)."""
    return Complex(z1.re - z2.re, z1.im - z2.im)


def neg(z: Complex) -> Complex:
    return Complex(-z.re, -z.im)


def conj(z: Complex) -> Complex:
    return Complex(z.re, -z.im)


def mult_i(z: Complex) -> Complex:
    """i·z = (−y, x): точная перестановка компонент без умножений."""
    return Complex(-z.im, z.re)


def mult_minus_i(z: Complex) -> Complex:
    """−i·z = (y, −x)."""
    return Complex(z.im, -z.re)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def mul(z1: Complex, z2: Complex) -> Complex:
    """
    Умножение (a + bi)(c + di) = (ac − bd) + (ad + bc)i.

    C99: Annex G.5.1 (_Cmultd)

    Если обе компоненты результата получились NaN, выполняется восстановление:
    бесконечный операнд "упаковывается" в (±1 | ±0), NaN в другом операнде
    заменяется нулём, и результат пересчитывается как ∞ × (упакованное
    произведение). Так (∞ + NaN·i) × (1 + 0i) остаётся бесконечным.

    Args:
        z1: Первый множитель
        z2: Второй множитель

    Returns:
        Произведение
    """
    a, b = z1.re, z1.im
    c, d = z2.re, z2.im

    ac = a * c
    bd = b * d
    ad = a * d
    bc = b * c
    x = ac - bd
    y = ad + bc

    if not (math.isnan(x) and math.isnan(y)):
        return Complex(x, y)

    recalc = False
    if math.isinf(a) or math.isinf(b):
        a, b = box_infinity(a), box_infinity(b)
        c = 0.0 if math.isnan(c) else c
        d = 0.0 if math.isnan(d) else d
        recalc = True
    if math.isinf(c) or math.isinf(d):
        c, d = box_infinity(c), box_infinity(d)
        a = 0.0 if math.isnan(a) else a
        b = 0.0 if math.isnan(b) else b
        recalc = True
    if not recalc and any(math.isinf(t) for t in (ac, bd, ad, bc)):
        # Переполнение промежуточного произведения
        a, b, c, d = (0.0 if math.isnan(t) else t for t in (a, b, c, d))
        recalc = True

    if recalc:
        x = math.inf * (a * c - b * d)
        y = math.inf * (a * d + b * c)
    return Complex(x, y)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def _smith_quotient(a: float, b: float, c: float, d: float) -> tuple[float, float]:
    # Знаменатель у границы переполнения: масштабирование числителя и
    # знаменателя не меняет частное
    if abs(c) >= LARGE_DOUBLE or abs(d) >= LARGE_DOUBLE:
        a, b, c, d = a * 0.25, b * 0.25, c * 0.25, d * 0.25

    if abs(c) >= abs(d):
        r = d / c
        den = c + d * r
        return (a + b * r) / den, (b - a * r) / den
    r = c / d
    den = c * r + d
    return (a * r + b) / den, (b * r - a) / den


def _restore_zero_sign(q: float, t: float) -> float:
    # Нулевая компонента частного получает знак точного числителя t
    # (ac + bd или bc − ad): Смит теряет его при отрицательном знаменателе
    if q == 0.0 and not math.isnan(t):
        return math.copysign(0.0, t)
    return q


def _infinite_sum(pairs: tuple[tuple[float, float], ...]) -> float:
    """
    Сумма только бесконечных слагаемых x·y (x бесконечно, y конечно и ≠ 0).

    Возвращает 0.0, если бесконечных слагаемых нет, и NaN для ∞ − ∞.
    """
    total = 0.0
    for x, y in pairs:
        if math.isinf(x) and y != 0.0:
            total += x * y
    return total


def _infinity_sign(x: float) -> float:
    return -math.inf if x < 0.0 else math.inf


def div(z1: Complex, z2: Complex) -> Complex:
    """
    Деление z1 / z2.

    C99: Annex G.5.1 (_Cdivd)

    Порядок разбора:
    1. ∞ / ∞ → NaN + NaN·i
    2. конечное (или с NaN) / ∞ → пара нулей со знаками (ac + bd) и (bc − ad),
       где бесконечная компонента знаменателя заменена на ±1, конечная на ±0,
       а NaN числителя считается нулём
    3. ∞ / 0 → ±∞ ± ∞i по знакам компонент числителя
       ∞ / NaN → NaN + NaN·i
       ∞ / конечное ≠ 0 → повёрнутая бесконечность: знак каждой компоненты
       определяется суммой бесконечных слагаемых (ac + bd) и (bc − ad);
       ∞ − ∞ → NaN + NaN·i; компонента без бесконечных слагаемых
       вычисляется по конечной части числителя
    4. NaN в любом операнде → NaN + NaN·i
    5. 0 / 0 → NaN + NaN·i; конечное ≠ 0 / 0 → ±∞ ± ∞i по знакам числителя
    6. Иначе алгоритм Смита (в том числе 0 / конечное ≠ 0); нулевая
       компонента частного ненулевого числителя получает знак (ac + bd) или
       (bc − ad), как в _Cdivd: 1 / (−3 + 0i) = −⅓ − 0i, 1 / (−3 − 0i) = −⅓ + 0i

    Args:
        z1: Делимое
        z2: Делитель

    Returns:
        Частное

    Examples:
        >>> div(Complex(3.0, 4.0), Complex(1.0, 2.0))
        Complex(re=2.2, im=-0.4)
        >>> div(Complex(1.0, 1.0), Complex(0.0, 0.0))
        Complex(re=inf, im=inf)
    """
    a, b = z1.re, z1.im
    c, d = z2.re, z2.im
    num_class = classify(z1)
    den_class = classify(z2)

    if den_class is ValueClass.HAS_INFINITE:
        if num_class is ValueClass.HAS_INFINITE:
            return NAN_COMPLEX
        c1, d1 = box_infinity(c), box_infinity(d)
        a1 = 0.0 if math.isnan(a) else a
        b1 = 0.0 if math.isnan(b) else b
        return Complex(signed_zero(a1 * c1 + b1 * d1), signed_zero(b1 * c1 - a1 * d1))

    if num_class is ValueClass.HAS_INFINITE:
        if den_class is ValueClass.HAS_NAN:
            return NAN_COMPLEX
        if den_class is ValueClass.ZERO:
            return Complex(_infinity_sign(a), _infinity_sign(b))

        re = _infinite_sum(((a, c), (b, d)))
        im = _infinite_sum(((b, c), (-a, d)))
        if math.isnan(re) or math.isnan(im):
            return NAN_COMPLEX
        if re == 0.0 or im == 0.0:
            fin_re, fin_im = _smith_quotient(
                a if math.isfinite(a) else 0.0,
                b if math.isfinite(b) else 0.0,
                c,
                d,
            )
            re = re if re != 0.0 else fin_re
            im = im if im != 0.0 else fin_im
        return Complex(re, im)

    if num_class is ValueClass.HAS_NAN or den_class is ValueClass.HAS_NAN:
        return NAN_COMPLEX

    if den_class is ValueClass.ZERO:
        if num_class is ValueClass.ZERO:
            return NAN_COMPLEX
        return Complex(_infinity_sign(a), _infinity_sign(b))

    re, im = _smith_quotient(a, b, c, d)
    if num_class is ValueClass.ZERO:
        # 0 / конечное: знаки нулей по правилам вещественного деления
        return Complex(re, im)
    return Complex(
        _restore_zero_sign(re, a * c + b * d),
        _restore_zero_sign(im, b * c - a * d),
    )


def reciprocal(z: Complex) -> Complex:
    """
    1 / z через div (все специальные случаи деления сохраняются).

    Нулевые компоненты результата берут знаки conj(z) / |z|²: Re — знак x,
    Im — знак −y. Так reciprocal(conj z) = conj(reciprocal z) и на вещественной
    оси: 1 / (3 + 0i) = ⅓ − 0i, 1 / (3 − 0i) = ⅓ + 0i.

    Examples:
        >>> reciprocal(Complex(float("inf"), 0.0))
        Complex(re=0.0, im=-0.0)
    """
    w = div(Complex(1.0, 0.0), z)
    re, im = w.re, w.im
    if re == 0.0 and not math.isnan(z.re):
        re = math.copysign(0.0, z.re)
    if im == 0.0 and not math.isnan(z.im):
        im = math.copysign(0.0, -z.im)
    return Complex(re, im)


# =============================================================================
# МОДУЛЬ И АРГУМЕНТ
# =============================================================================


def modulus(z: Complex) -> float:
    """
    |z| через hypot (устойчив к переполнению и потере значимости).

    Бесконечная компонента даёт +inf даже при NaN в другой компоненте;
    NaN возвращается, только если бесконечных компонент нет.
    """
    if math.isinf(z.re) or math.isinf(z.im):
        return math.inf
    return math.hypot(z.re, z.im)


def arg(z: Complex) -> float:
    """
    Аргумент в (−π, π] через atan2.

    Знак нуля мнимой части выбирает сторону разреза: arg(−1 + 0i) = π,
    arg(−1 − 0i) = −π.
    """
    return math.atan2(z.im, z.re)
