"""
Numerical Safeguards — примитивы для IEEE-754 специальных значений

C99: Annex F (IEC 60559), Annex G.3 (соглашения о бесконечностях и NaN)

Модуль собирает константы и вспомогательные функции, на которых построены
все комплексные операции:
- Константы double (DBL_MAX, DBL_MIN, epsilon) и производные пороги
- Работа со знаком нуля и "упаковка" бесконечностей (recovery в умножении/делении)
- Направленная бесконечность по cos/sin угла (0 × ∞ = 0 точно на осях)
- Нормализация фазы в (−π, π]
- Сравнения: точное (с учётом знака нуля и NaN) и приближённое

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Знак нуля никогда не теряется без явного правила
2. same_value считает NaN равным NaN, а +0.0 и -0.0 различными
3. Все функции детерминированы и не имеют состояния
"""

import math
import sys
from dataclasses import dataclass
from typing import Final

from c99complex.core.domain.complex_value import Complex

# =============================================================================
# КОНСТАНТЫ DOUBLE
# =============================================================================

DBL_MAX: Final[float] = sys.float_info.max
DBL_MIN: Final[float] = sys.float_info.min
DBL_EPSILON: Final[float] = sys.float_info.epsilon
DBL_MANT_DIG: Final[int] = sys.float_info.mant_dig

# Пороги, при которых hypot/квадраты начинают переполняться
LARGE_DOUBLE: Final[float] = DBL_MAX / 4.0
SQRT_LARGE_DOUBLE: Final[float] = math.sqrt(LARGE_DOUBLE)
LOG_LARGE_DOUBLE: Final[float] = math.log(LARGE_DOUBLE)
SQRT_DBL_MIN: Final[float] = math.sqrt(DBL_MIN)

# Масштабирование субнормальных чисел в sqrt/ln:
# SCALE_UP нечётно и переводит субнормальное число в нормальное,
# SCALE_DOWN = -(SCALE_UP + 1) / 2
SCALE_UP: Final[int] = 2 * (DBL_MANT_DIG // 2) + 1
SCALE_DOWN: Final[int] = -(SCALE_UP + 1) // 2

LN2: Final[float] = math.log(2.0)
LN10: Final[float] = math.log(10.0)

PI: Final[float] = math.pi
HALF_PI: Final[float] = 0.5 * math.pi
QUARTER_PI: Final[float] = 0.25 * math.pi
THREE_QUARTER_PI: Final[float] = 0.75 * math.pi

# Толерантности приближённого сравнения конечных результатов
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-12
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-15


@dataclass(frozen=True)
class ToleranceConfig:
    """Параметры приближённого сравнения (is_close / complex_is_close)."""

    rel_tol: float = EPS_FLOAT_COMPARE_REL
    abs_tol: float = EPS_FLOAT_COMPARE_ABS


# =============================================================================
# ЗНАК НУЛЯ И БЕСКОНЕЧНОСТИ
# =============================================================================


def has_sign_bit(x: float) -> bool:
    """
    Установлен ли знаковый бит (включая -0.0 и -inf).

    Examples:
        >>> has_sign_bit(-0.0)
        True
        >>> has_sign_bit(0.0)
        False
    """
    return math.copysign(1.0, x) < 0.0


def signed_zero(x: float) -> float:
    """
    Ноль со знаком x.

    NaN и бесконечная разность (∞ − ∞ уже дала NaN) трактуются как +0.
    """
    if math.isnan(x):
        return 0.0
    return math.copysign(0.0, x)


def box_infinity(x: float) -> float:
    """
    "Упаковка" компоненты для восстановления бесконечностей (Annex G.5.1).

    ±inf → ±1.0, конечное → ±0.0 со знаком x, NaN → +0.0.
    """
    if math.isnan(x):
        return 0.0
    return math.copysign(1.0 if math.isinf(x) else 0.0, x)


def axis_cos_sin(theta: float) -> tuple[float, float]:
    """
    (cos θ, sin θ) с точными нулями на осях.

    Углы 0, ±π/2 и ±π (double-константы) дают точные 0 и ±1: в double
    cos(π/2) = 6.1e-17 и sin(π) = 1.2e-16, а не 0. Любой другой угол, сколь
    угодно близкий к оси, вычисляется через math.cos / math.sin.

    Examples:
        >>> axis_cos_sin(math.pi)
        (-1.0, 0.0)
        >>> axis_cos_sin(-math.pi / 2)
        (0.0, -1.0)
    """
    if theta == 0.0:
        return 1.0, theta
    if abs(theta) == HALF_PI:
        return 0.0, math.copysign(1.0, theta)
    if abs(theta) == PI:
        return -1.0, math.copysign(0.0, theta)
    return math.cos(theta), math.sin(theta)


def directional_infinity(c: float, s: float) -> tuple[float, float]:
    """
    Бесконечность в направлении (cos θ, sin θ).

    Только точный ноль косинуса/синуса даёт нулевую компоненту (со знаком
    нуля): 0 × ∞ здесь определено как 0, а не NaN. Ненулевая компонента,
    даже субнормальная, даёт бесконечность со своим знаком.

    Args:
        c: cos θ
        s: sin θ

    Returns:
        (re, im) направленной бесконечности

    Examples:
        >>> directional_infinity(1.0, 0.0)
        (inf, 0.0)
        >>> directional_infinity(1.0, 1e-300)
        (inf, inf)
    """
    re = c if c == 0.0 else math.copysign(math.inf, c)
    im = s if s == 0.0 else math.copysign(math.inf, s)
    return re, im


def safe_exp(x: float) -> float:
    """
    e^x без OverflowError: переполнение даёт +inf, как в IEEE-754.

    Examples:
        >>> safe_exp(1000.0)
        inf
        >>> safe_exp(0.0)
        1.0
    """
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def normalize_phase(phase: float) -> float:
    """
    Приведение конечной фазы в (−π, π].

    Examples:
        >>> normalize_phase(-math.pi)
        3.141592653589793
        >>> normalize_phase(2 * math.pi)
        0.0
    """
    reduced = math.remainder(phase, 2.0 * math.pi)
    if reduced <= -math.pi:
        return reduced + 2.0 * math.pi
    return reduced


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def same_float(a: float, b: float) -> bool:
    """
    Точное равенство с учётом NaN и знака нуля.

    Examples:
        >>> same_float(float("nan"), float("nan"))
        True
        >>> same_float(0.0, -0.0)
        False
    """
    if math.isnan(a) or math.isnan(b):
        return math.isnan(a) and math.isnan(b)
    if a == 0.0 and b == 0.0:
        return has_sign_bit(a) == has_sign_bit(b)
    return a == b


def same_value(z1: Complex, z2: Complex) -> bool:
    """Покомпонентное same_float; используется для проверки специальных значений."""
    return same_float(z1.re, z2.re) and same_float(z1.im, z2.im)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Приближённое сравнение float.

    Неконечные значения сравниваются точно (same_float), конечные через
    math.isclose.

    Raises:
        ValueError: Если rel_tol или abs_tol отрицательны
    """
    if rel_tol < 0 or abs_tol < 0:
        raise ValueError(f"tolerances must be non-negative, got rel={rel_tol}, abs={abs_tol}")
    if not (math.isfinite(a) and math.isfinite(b)):
        return same_float(a, b)
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def complex_is_close(
    z1: Complex,
    z2: Complex,
    config: ToleranceConfig | None = None,
) -> bool:
    """Покомпонентный is_close с параметрами из ToleranceConfig."""
    config = config or ToleranceConfig()
    return is_close(z1.re, z2.re, config.rel_tol, config.abs_tol) and is_close(
        z1.im, z2.im, config.rel_tol, config.abs_tol
    )
