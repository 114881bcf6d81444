"""
Text Format — строковое представление и разбор комплексных чисел

Формат: "a + bi" / "a - bi" (en-US, без разделителей тысяч).

Рендеринг настраивается через FormatConfig (Pydantic, frozen):
- explicit=True: обе части всегда выводятся, знак нуля сохраняется
  ("-0.0 + 0.0i")
- explicit=False: нулевые части опускаются, единичная мнимая часть
  пишется как "i" ("2.0", "-i", "1.5 + i")
- precision: число значащих цифр (None → кратчайшее точное представление)
- imaginary_unit: "i" или "j"

Разбор принимает научную нотацию, inf/nan, любую из единиц i/j и
произвольные пробелы. Некорректный текст → ComplexFormatError.
"""

import logging
import math
import re

from pydantic import BaseModel, Field, field_validator

from c99complex.core.domain.complex_value import Complex

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ComplexFormatError(ValueError):
    """Строка не является корректной записью комплексного числа."""

    pass


# =============================================================================
# CONFIG
# =============================================================================


class FormatConfig(BaseModel):
    """Параметры рендеринга комплексного числа."""

    explicit: bool = Field(True, description="Выводить обе части и знак нуля")
    precision: int | None = Field(
        None, ge=1, le=17, description="Значащие цифры (None → repr)"
    )
    imaginary_unit: str = Field("i", description="Символ мнимой единицы")

    model_config = {"frozen": True}

    @field_validator("imaginary_unit")
    @classmethod
    def validate_imaginary_unit(cls, v: str) -> str:
        """Допустимы только 'i' и 'j'"""
        if v not in ("i", "j"):
            raise ValueError(f"imaginary_unit must be 'i' or 'j', got {v!r}")
        return v


# =============================================================================
# FORMAT
# =============================================================================


def _format_float(x: float, precision: int | None) -> str:
    if math.isnan(x):
        return "nan"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    if precision is None:
        return repr(x)
    return f"{x:.{precision}g}"


def _imag_is_negative(y: float) -> bool:
    return not math.isnan(y) and math.copysign(1.0, y) < 0.0


def format_complex(z: Complex, config: FormatConfig | None = None) -> str:
    """
    Строковое представление z.

    Args:
        z: Комплексное значение
        config: Параметры рендеринга (default: FormatConfig())

    Returns:
        Строка вида "a + bi"

    Examples:
        >>> format_complex(Complex(2.2, -0.4))
        '2.2 - 0.4i'
        >>> format_complex(Complex(0.0, -1.0), FormatConfig(explicit=False))
        '-i'
    """
    config = config or FormatConfig()
    unit = config.imaginary_unit
    x, y = z.re, z.im
    op = "-" if _imag_is_negative(y) else "+"
    imag_abs = _format_float(abs(y), config.precision)

    if config.explicit:
        return f"{_format_float(x, config.precision)} {op} {imag_abs}{unit}"

    if x == 0.0 and y == 0.0:
        return "0"
    imag_text = unit if abs(y) == 1.0 else f"{imag_abs}{unit}"
    if y == 0.0:
        return _format_float(x, config.precision)
    if x == 0.0:
        return f"-{imag_text}" if op == "-" else imag_text
    return f"{_format_float(x, config.precision)} {op} {imag_text}"


# =============================================================================
# PARSE
# =============================================================================

_UNSIGNED_NUMBER = r"(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)"
_SIGNED_NUMBER = rf"[+-]?{_UNSIGNED_NUMBER}"

_COMPLEX_PATTERN = re.compile(
    rf"""
    ^\s*(?:
        (?P<re>{_SIGNED_NUMBER})\s*(?P<op>[+-])\s*(?P<im>{_UNSIGNED_NUMBER})?\s*\*?\s*[ij]
      | (?P<im_sign>[+-]?)\s*(?P<im_only>{_UNSIGNED_NUMBER})?\s*\*?\s*[ij]
      | (?P<re_only>{_SIGNED_NUMBER})
    )\s*$
    """,
    re.VERBOSE | re.IGNORECASE,
)


def parse_complex(text: str) -> Complex:
    """
    Разбор строки в Complex.

    Поддерживаются: "1234.56 + 789.01i", "-4.2i", "i", "-i", "45",
    "1.5e2 - 2E-3j", "inf - nani", "-0.0 - 0.0i".

    Args:
        text: Строковая запись

    Returns:
        Complex

    Raises:
        TypeError: Если text не строка
        ComplexFormatError: Если запись некорректна
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")

    match = _COMPLEX_PATTERN.match(text)
    if match is None:
        logger.debug("Rejected complex literal %r", text)
        raise ComplexFormatError(f"Invalid complex number format: {text!r}")

    if match.group("re_only") is not None:
        return Complex(float(match.group("re_only")), 0.0)

    if match.group("re") is not None:
        magnitude = float(match.group("im")) if match.group("im") else 1.0
        imag = -magnitude if match.group("op") == "-" else magnitude
        return Complex(float(match.group("re")), imag)

    magnitude = float(match.group("im_only")) if match.group("im_only") else 1.0
    imag = -magnitude if match.group("im_sign") == "-" else magnitude
    return Complex(0.0, imag)
