"""
Complex — неизменяемое комплексное значение (re, im)

C99: Annex G.2 (типы), G.3 (классификация компонент)

Пара IEEE-754 double (re, im). Знак нуля в каждой компоненте значим и
сохраняется всеми операциями. Значение никогда не мутирует: каждая операция
возвращает новый экземпляр.

Классификация (вычисляется по требованию, не хранится):
- ComponentKind — вид одной компоненты (индекс строки/столбца в таблицах
  специальных значений)
- ValueClass — вид значения целиком; бесконечность проверяется ДО NaN
  (Annex G: бесконечная компонента определяет результат даже при NaN в паре)
"""

import math
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Final


# =============================================================================
# ENUMS
# =============================================================================


class ComponentKind(IntEnum):
    """Вид компоненты. Порядок совпадает с порядком строк/столбцов таблиц."""

    NINF = 0  # -inf
    NEG = 1  # конечное < 0
    NZERO = 2  # -0.0
    PZERO = 3  # +0.0
    POS = 4  # конечное > 0
    PINF = 5  # +inf
    NAN = 6


class ValueClass(str, Enum):
    """Класс комплексного значения."""

    ZERO = "ZERO"
    FINITE_NONZERO = "FINITE_NONZERO"
    HAS_INFINITE = "HAS_INFINITE"
    HAS_NAN = "HAS_NAN"


def component_kind(x: float) -> ComponentKind:
    """
    Вид одной компоненты.

    Args:
        x: Вещественная компонента

    Returns:
        ComponentKind для x (знак нуля различается)

    Examples:
        >>> component_kind(-0.0)
        <ComponentKind.NZERO: 2>
        >>> component_kind(float("inf"))
        <ComponentKind.PINF: 5>
    """
    if math.isnan(x):
        return ComponentKind.NAN
    if math.isinf(x):
        return ComponentKind.PINF if x > 0.0 else ComponentKind.NINF
    if x != 0.0:
        return ComponentKind.POS if x > 0.0 else ComponentKind.NEG
    if math.copysign(1.0, x) > 0.0:
        return ComponentKind.PZERO
    return ComponentKind.NZERO


# =============================================================================
# COMPLEX VALUE
# =============================================================================


def _coerce_component(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
    return float(value)


def _real_operand(value) -> float | None:
    """Вещественный операнд оператора или None, если value не int/float."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _arithmetic():
    # Локальный импорт: math-слой зависит от domain, а не наоборот
    from c99complex.core.math import arithmetic

    return arithmetic


@dataclass(frozen=True, eq=False)
class Complex:
    """
    Комплексное число с компонентами IEEE-754 double.

    Сравнение через == следует IEEE-754: значение с NaN не равно самому себе,
    а +0.0 == -0.0. Для проверки специальных значений используется
    same_value (numerical_safeguards), различающий знак нуля.

    Операторы +, −, *, /, ** и abs() делегируют в core.math. Операнд int/float
    трактуется как вещественное число (C99 G.5): мнимая часть комплексного
    операнда не смешивается с нулём и сохраняет знак.
    """

    re: float
    im: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "re", _coerce_component("re", self.re))
        object.__setattr__(self, "im", _coerce_component("im", self.im))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.re == other.re and self.im == other.im

    def __hash__(self) -> int:
        # hash(0.0) == hash(-0.0), равные значения хешируются одинаково
        return hash((self.re, self.im))

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_real(cls, x: float) -> "Complex":
        """Вещественное число как x + 0i."""
        return cls(x, 0.0)

    @classmethod
    def from_builtin(cls, z: complex) -> "Complex":
        """Конвертация из встроенного complex (знаки нулей сохраняются)."""
        return cls(z.real, z.imag)

    @classmethod
    def from_polar(cls, magnitude: float, phase: float) -> "Complex":
        """
        Построение по модулю и фазе.

        C99: Annex G.6 (cpolar не определён стандартом, правила по аналогии с cexp)

        Правила:
        1. NaN в модуле или фазе → NaN + NaN·i
        2. Конечный модуль и бесконечная фаза → NaN + NaN·i
        3. Фаза нормализуется в (−π, π]
        4. Отрицательный модуль: фаза поворачивается на π, модуль берётся по abs
        5. Нулевой модуль → пара нулей со знаками cos/sin фазы
        6. Бесконечный модуль и конечная фаза → направленная бесконечность;
           на осях (фаза 0, ±π/2, π) нулевая компонента остаётся нулём
           (0 × ∞ = 0, не NaN), любой другой угол даёт бесконечность

        Args:
            magnitude: Модуль (может быть отрицательным или бесконечным)
            phase: Фаза в радианах

        Returns:
            Complex в прямоугольной форме
        """
        # Локальный импорт: math-слой зависит от domain, а не наоборот
        from c99complex.core.math.numerical_safeguards import (
            axis_cos_sin,
            directional_infinity,
            normalize_phase,
        )

        if math.isnan(magnitude) or math.isnan(phase):
            return cls(math.nan, math.nan)
        if math.isinf(phase):
            return cls(math.nan, math.nan)

        if math.copysign(1.0, magnitude) < 0.0 and magnitude != 0.0:
            magnitude = -magnitude
            phase = phase + math.pi
        phase = normalize_phase(phase)

        c, s = axis_cos_sin(phase)
        if math.isinf(magnitude):
            re, im = directional_infinity(c, s)
            return cls(re, im)
        if magnitude == 0.0:
            return cls(math.copysign(0.0, c), math.copysign(0.0, s))
        return cls(magnitude * c, magnitude * s)

    # -------------------------------------------------------------------------
    # Классификация
    # -------------------------------------------------------------------------

    @property
    def re_kind(self) -> ComponentKind:
        return component_kind(self.re)

    @property
    def im_kind(self) -> ComponentKind:
        return component_kind(self.im)

    def is_zero(self) -> bool:
        return self.re == 0.0 and self.im == 0.0

    def is_finite(self) -> bool:
        return math.isfinite(self.re) and math.isfinite(self.im)

    def is_infinite(self) -> bool:
        return math.isinf(self.re) or math.isinf(self.im)

    def is_nan(self) -> bool:
        """NaN без бесконечной компоненты (бесконечность доминирует)."""
        return not self.is_infinite() and (math.isnan(self.re) or math.isnan(self.im))

    def is_real(self) -> bool:
        return self.im == 0.0

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __neg__(self) -> "Complex":
        return Complex(-self.re, -self.im)

    def __pos__(self) -> "Complex":
        return self

    def __abs__(self) -> float:
        return _arithmetic().modulus(self)

    def __add__(self, other) -> "Complex":
        if isinstance(other, Complex):
            return _arithmetic().add(self, other)
        x = _real_operand(other)
        if x is None:
            return NotImplemented
        # −0.0 — нейтральный элемент сложения: знак im сохраняется
        return _arithmetic().add(self, Complex(x, -0.0))

    def __radd__(self, other) -> "Complex":
        return self.__add__(other)

    def __sub__(self, other) -> "Complex":
        if isinstance(other, Complex):
            return _arithmetic().sub(self, other)
        x = _real_operand(other)
        if x is None:
            return NotImplemented
        return _arithmetic().sub(self, Complex(x, 0.0))

    def __rsub__(self, other) -> "Complex":
        x = _real_operand(other)
        if x is None:
            return NotImplemented
        # x − (u + iv) = (x − u) − iv
        return _arithmetic().sub(Complex(x, -0.0), self)

    def __mul__(self, other) -> "Complex":
        if isinstance(other, Complex):
            return _arithmetic().mul(self, other)
        x = _real_operand(other)
        if x is None:
            return NotImplemented
        # Покомпонентно: ∞ · (x + 0i) не порождает NaN из 0 · ∞
        return Complex(self.re * x, self.im * x)

    def __rmul__(self, other) -> "Complex":
        return self.__mul__(other)

    def __truediv__(self, other) -> "Complex":
        if isinstance(other, Complex):
            return _arithmetic().div(self, other)
        x = _real_operand(other)
        if x is None:
            return NotImplemented
        if x == 0.0:
            return _arithmetic().div(self, Complex(x, 0.0))
        return Complex(self.re / x, self.im / x)

    def __rtruediv__(self, other) -> "Complex":
        x = _real_operand(other)
        if x is None:
            return NotImplemented
        return _arithmetic().div(Complex(x, 0.0), self)

    def __pow__(self, other) -> "Complex":
        from c99complex.core.math.elementary import power

        if not isinstance(other, Complex):
            x = _real_operand(other)
            if x is None:
                return NotImplemented
            other = Complex(x, 0.0)
        return power(self, other)

    def __rpow__(self, other) -> "Complex":
        from c99complex.core.math.elementary import power

        x = _real_operand(other)
        if x is None:
            return NotImplemented
        return power(Complex(x, 0.0), self)


def classify(z: Complex) -> ValueClass:
    """
    Класс значения с приоритетом бесконечности над NaN.

    Args:
        z: Комплексное значение

    Returns:
        ValueClass

    Examples:
        >>> classify(Complex(float("inf"), float("nan")))
        <ValueClass.HAS_INFINITE: 'HAS_INFINITE'>
        >>> classify(Complex(float("nan"), 1.0))
        <ValueClass.HAS_NAN: 'HAS_NAN'>
    """
    if math.isinf(z.re) or math.isinf(z.im):
        return ValueClass.HAS_INFINITE
    if math.isnan(z.re) or math.isnan(z.im):
        return ValueClass.HAS_NAN
    if z.re == 0.0 and z.im == 0.0:
        return ValueClass.ZERO
    return ValueClass.FINITE_NONZERO


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Final[Complex] = Complex(0.0, 0.0)
ONE: Final[Complex] = Complex(1.0, 0.0)
I: Final[Complex] = Complex(0.0, 1.0)
NAN_COMPLEX: Final[Complex] = Complex(math.nan, math.nan)
INF_COMPLEX: Final[Complex] = Complex(math.inf, math.inf)
