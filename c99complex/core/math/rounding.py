"""
Rounding — sign, round, ceil, floor для комплексных значений

Покомпонентные операции; неконечные компоненты проходят без изменений,
знак нулевого результата совпадает со знаком исходной компоненты
(ceil(−0.5) = −0.0, как в IEEE-754 ceil).
"""

import math
from typing import Callable

from c99complex.core.domain.complex_value import NAN_COMPLEX, Complex
from c99complex.core.math.numerical_safeguards import signed_zero

_SQRT1_2 = math.sqrt(0.5)


def _componentwise(z: Complex, op: Callable[[float], float]) -> Complex:
    def apply(x: float) -> float:
        if not math.isfinite(x):
            return x
        result = float(op(x))
        if result == 0.0:
            return math.copysign(0.0, x)
        return result

    return Complex(apply(z.re), apply(z.im))


def sign(z: Complex) -> Complex:
    """
    Единичный вектор в направлении z: z / |z|.

    Правила:
    - ±0 ± 0i → z без изменений (знаки нулей сохраняются)
    - две бесконечные компоненты → (±√½, ±√½)
    - одна бесконечная компонента → ±1 на её оси, даже если другая NaN
      (бесконечность доминирует): sign(NaN + ∞i) = 0 + i
    - NaN без бесконечностей → NaN + NaN·i
    """
    x, y = z.re, z.im
    if math.isinf(x) and math.isinf(y):
        return Complex(math.copysign(_SQRT1_2, x), math.copysign(_SQRT1_2, y))
    if math.isinf(x):
        return Complex(math.copysign(1.0, x), signed_zero(y))
    if math.isinf(y):
        return Complex(signed_zero(x), math.copysign(1.0, y))
    if math.isnan(x) or math.isnan(y):
        return NAN_COMPLEX
    if z.is_zero():
        return z

    # Масштабирование по большей компоненте: hypot не переполняется
    scale = max(abs(x), abs(y))
    xs, ys = x / scale, y / scale
    h = math.hypot(xs, ys)
    return Complex(xs / h, ys / h)


def round_parts(z: Complex, ndigits: int = 0) -> Complex:
    """Округление обеих компонент до ndigits знаков после запятой."""
    return _componentwise(z, lambda x: round(x, ndigits))


def ceil(z: Complex) -> Complex:
    return _componentwise(z, math.ceil)


def floor(z: Complex) -> Complex:
    return _componentwise(z, math.floor)
