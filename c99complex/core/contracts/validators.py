"""
JSON Schema Contract Validators

Модуль для валидации JSON-представления комплексных значений согласно
формальному JSON Schema контракту. Использует библиотеку jsonschema.

Схемы:
- complex_value.json — пара (re, im); inf, -inf, nan и -0.0 передаются
  строками, чтобы double восстанавливался без потерь (знак нуля, NaN)
"""

import json
import logging
import math
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from c99complex.core.domain.complex_value import Complex

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'complex_value')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации (ValidationError)."""
        return self.validator.iter_errors(data)


class ComplexValueValidator(ContractValidator):
    """Валидатор для complex_value контракта."""

    def __init__(self):
        super().__init__("complex_value")


# =============================================================================
# WIRE FORMAT
# =============================================================================


def _encode_component(x: float) -> float | str:
    if math.isnan(x):
        return "nan"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    if x == 0.0 and math.copysign(1.0, x) < 0.0:
        return "-0.0"
    return x


def _decode_component(value: float | int | str) -> float:
    # float() понимает все строковые значения enum схемы
    return float(value)


def validate_complex_value(data: Dict[str, Any]) -> None:
    """
    Валидация complex_value данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ComplexValueValidator().validate(data)


def complex_to_json(z: Complex) -> Dict[str, Any]:
    """
    JSON-совместимый dict для z.

    Examples:
        >>> complex_to_json(Complex(1.5, -0.0))
        {'re': 1.5, 'im': '-0.0'}
    """
    return {"re": _encode_component(z.re), "im": _encode_component(z.im)}


def complex_from_json(data: Dict[str, Any]) -> Complex:
    """
    Восстановление Complex из JSON-представления.

    Raises:
        ValidationError: Если данные не соответствуют схеме complex_value
    """
    validator = ComplexValueValidator()
    try:
        validator.validate(data)
    except jsonschema.ValidationError:
        logger.debug("Rejected complex_value document %r", data)
        raise
    return Complex(_decode_component(data["re"]), _decode_component(data["im"]))
