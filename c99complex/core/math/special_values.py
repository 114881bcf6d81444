"""
Special Values — таблицы специальных значений C99 Annex G

C99: Annex G.6 (cacos, casin, catan, cexp, clog, csqrt, ...)

Каждая таблица 7×7 индексируется как table[kind(re)][kind(im)], где kind —
ComponentKind (NINF, NEG, NZERO, PZERO, POS, PINF, NAN). Ячейка U означает
"достижимо только для конечных аргументов": такие входы вычисляются общей
формулой, и таблица для них не используется.

Таблицы являются авторитетным описанием поведения на нулях, бесконечностях и
NaN и имеют приоритет над общей формулой.
"""

import math
from typing import Final, Optional

from c99complex.core.domain.complex_value import Complex, component_kind

P: Final[float] = math.pi
P14: Final[float] = 0.25 * math.pi
P12: Final[float] = 0.5 * math.pi
P34: Final[float] = 0.75 * math.pi
INF: Final[float] = math.inf
N: Final[float] = math.nan

# Ячейка таблицы, не достижимая для неконечных аргументов
U: Final[None] = None

Cell = Optional[tuple[float, float]]
Table = tuple[tuple[Cell, ...], ...]


def build_table(cells: list[Cell]) -> Table:
    """Сборка таблицы 7×7 из плоского списка (построчно)."""
    if len(cells) != 49:
        raise ValueError(f"special value table must have 49 cells, got {len(cells)}")
    return tuple(tuple(cells[row * 7:(row + 1) * 7]) for row in range(7))


def special_value(table: Table, z: Complex) -> Complex:
    """
    Значение из таблицы для аргумента z.

    Raises:
        LookupError: Если ячейка U (аргумент должен обрабатываться общей формулой)
    """
    cell = table[component_kind(z.re)][component_kind(z.im)]
    if cell is None:
        raise LookupError(f"no special value for finite argument ({z.re!r}, {z.im!r})")
    return Complex(cell[0], cell[1])


# =============================================================================
# ОБРАТНЫЕ ТРИГОНОМЕТРИЧЕСКИЕ
# =============================================================================

# asin(z) = -i·asinh(iz)
ASIN_SPECIAL_VALUES: Final[Table] = build_table([
    (-P14, -INF), (-P12, -INF), (-P12, -INF), (-P12, INF), (-P12, INF), (-P14, INF), (N, -INF),
    (-0., -INF),  U,            U,            U,           U,           (-0., INF),  (N, N),
    (-0., -INF),  U,            (-0., -0.),   (-0., 0.),   U,           (-0., INF),  (-0., N),
    (0., -INF),   U,            (0., -0.),    (0., 0.),    U,           (0., INF),   (0., N),
    (0., -INF),   U,            U,            U,           U,           (0., INF),   (N, N),
    (P14, -INF),  (P12, -INF),  (P12, -INF),  (P12, INF),  (P12, INF),  (P14, INF),  (N, -INF),
    (N, -INF),    (N, N),       (N, N),       (N, N),      (N, N),      (N, INF),    (N, N),
])

ACOS_SPECIAL_VALUES: Final[Table] = build_table([
    (P34, INF), (P, INF),  (P, INF),  (P, -INF),  (P, -INF),  (P34, -INF), (N, INF),
    (P12, INF), U,         U,         U,          U,          (P12, -INF), (N, N),
    (P12, INF), U,         (P12, 0.), (P12, -0.), U,          (P12, -INF), (P12, N),
    (P12, INF), U,         (P12, 0.), (P12, -0.), U,          (P12, -INF), (P12, N),
    (P12, INF), U,         U,         U,          U,          (P12, -INF), (N, N),
    (P14, INF), (0., INF), (0., INF), (0., -INF), (0., -INF), (P14, -INF), (N, INF),
    (N, INF),   (N, N),    (N, N),    (N, N),     (N, N),     (N, -INF),   (N, N),
])

# atan(z) = -i·atanh(iz); вещественная часть ±π/2 при любой бесконечной re
ATAN_SPECIAL_VALUES: Final[Table] = build_table([
    (-P12, -0.), (-P12, -0.), (-P12, -0.), (-P12, 0.), (-P12, 0.), (-P12, 0.), (-P12, -0.),
    (-P12, -0.), U,           U,           U,          U,          (-P12, 0.), (N, N),
    (-P12, -0.), U,           (-0., -0.),  (-0., 0.),  U,          (-P12, 0.), (N, N),
    (P12, -0.),  U,           (0., -0.),   (0., 0.),   U,          (P12, 0.),  (N, N),
    (P12, -0.),  U,           U,           U,          U,          (P12, 0.),  (N, N),
    (P12, -0.),  (P12, -0.),  (P12, -0.),  (P12, 0.),  (P12, 0.),  (P12, 0.),  (P12, -0.),
    (N, -0.),    (N, N),      (N, -0.),    (N, 0.),    (N, N),     (N, 0.),    (N, N),
])


# =============================================================================
# ЭЛЕМЕНТАРНЫЕ ФУНКЦИИ
# =============================================================================

LOG_SPECIAL_VALUES: Final[Table] = build_table([
    (INF, -P34), (INF, -P),  (INF, -P),   (INF, P),   (INF, P),  (INF, P34), (INF, N),
    (INF, -P12), U,          U,           U,          U,         (INF, P12), (N, N),
    (INF, -P12), U,          (-INF, -P),  (-INF, P),  U,         (INF, P12), (N, N),
    (INF, -P12), U,          (-INF, -0.), (-INF, 0.), U,         (INF, P12), (N, N),
    (INF, -P12), U,          U,           U,          U,         (INF, P12), (N, N),
    (INF, -P14), (INF, -0.), (INF, -0.),  (INF, 0.),  (INF, 0.), (INF, P14), (INF, N),
    (INF, N),    (N, N),     (N, N),      (N, N),     (N, N),    (INF, N),   (N, N),
])

SQRT_SPECIAL_VALUES: Final[Table] = build_table([
    (INF, -INF), (0., -INF), (0., -INF), (0., INF), (0., INF), (INF, INF), (N, INF),
    (INF, -INF), U,          U,          U,         U,         (INF, INF), (N, N),
    (INF, -INF), U,          (0., -0.),  (0., 0.),  U,         (INF, INF), (N, N),
    (INF, -INF), U,          (0., -0.),  (0., 0.),  U,         (INF, INF), (N, N),
    (INF, -INF), U,          U,          U,         U,         (INF, INF), (N, N),
    (INF, -INF), (INF, -0.), (INF, -0.), (INF, 0.), (INF, 0.), (INF, INF), (INF, N),
    (INF, -INF), (N, N),     (N, N),     (N, N),    (N, N),    (INF, INF), (N, N),
])

# exp(+∞ + i·(±∞ | NaN)): угловая часть не определена → NaN + NaN·i
EXP_SPECIAL_VALUES: Final[Table] = build_table([
    (0., 0.), U,      (0., -0.),  (0., 0.),  U,      (0., 0.), (0., 0.),
    (N, N),   U,      U,          U,         U,      (N, N),   (N, N),
    (N, N),   U,      (1., -0.),  (1., 0.),  U,      (N, N),   (N, N),
    (N, N),   U,      (1., -0.),  (1., 0.),  U,      (N, N),   (N, N),
    (N, N),   U,      U,          U,         U,      (N, N),   (N, N),
    (N, N),   U,      (INF, -0.), (INF, 0.), U,      (N, N),   (N, N),
    (N, N),   (N, N), (N, -0.),   (N, 0.),   (N, N), (N, N),   (N, N),
])


# =============================================================================
# ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ (прямые)
# =============================================================================

COSH_SPECIAL_VALUES: Final[Table] = build_table([
    (INF, N), U,      (INF, 0.),  (INF, -0.), U,      (INF, N), (INF, N),
    (N, N),   U,      U,          U,          U,      (N, N),   (N, N),
    (N, 0.),  U,      (1., 0.),   (1., -0.),  U,      (N, 0.),  (N, 0.),
    (N, 0.),  U,      (1., -0.),  (1., 0.),   U,      (N, 0.),  (N, 0.),
    (N, N),   U,      U,          U,          U,      (N, N),   (N, N),
    (INF, N), U,      (INF, -0.), (INF, 0.),  U,      (INF, N), (INF, N),
    (N, N),   (N, N), (N, 0.),    (N, 0.),    (N, N), (N, N),   (N, N),
])

SINH_SPECIAL_VALUES: Final[Table] = build_table([
    (INF, N), U,      (-INF, -0.), (-INF, 0.), U,      (INF, N), (INF, N),
    (N, N),   U,      U,           U,          U,      (N, N),   (N, N),
    (0., N),  U,      (-0., -0.),  (-0., 0.),  U,      (0., N),  (0., N),
    (0., N),  U,      (0., -0.),   (0., 0.),   U,      (0., N),  (0., N),
    (N, N),   U,      U,           U,          U,      (N, N),   (N, N),
    (INF, N), U,      (INF, -0.),  (INF, 0.),  U,      (INF, N), (INF, N),
    (N, N),   (N, N), (N, -0.),    (N, 0.),    (N, N), (N, N),   (N, N),
])

TANH_SPECIAL_VALUES: Final[Table] = build_table([
    (-1., 0.), U,      (-1., -0.), (-1., 0.), U,      (-1., 0.), (-1., 0.),
    (N, N),    U,      U,          U,         U,      (N, N),    (N, N),
    (N, N),    U,      (-0., -0.), (-0., 0.), U,      (N, N),    (N, N),
    (N, N),    U,      (0., -0.),  (0., 0.),  U,      (N, N),    (N, N),
    (N, N),    U,      U,          U,         U,      (N, N),    (N, N),
    (1., 0.),  U,      (1., -0.),  (1., 0.),  U,      (1., 0.),  (1., 0.),
    (N, N),    (N, N), (N, -0.),   (N, 0.),   (N, N), (N, N),    (N, N),
])
