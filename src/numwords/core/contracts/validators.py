"""
JSON Schema Contract Validators

Валидация JSON запросов конвертации по контракту conversion_request
(value, lang, to, currency, preferences). Использует библиотеку jsonschema.

Два уровня:
- validate / validate_conversion_request: нарушение схемы как
  jsonschema.ValidationError (для инструментов и отладки контракта)
- check / check_conversion_request: нарушение переводится в ошибку входа
  numwords (InvalidNumber / InvalidLanguage / InvalidOutput), как у
  to_words со свободными аргументами
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match

from numwords.core.domain.errors import InvalidLanguage, InvalidNumber, InvalidOutput

CONVERSION_REQUEST: Final[str] = "conversion_request"

# Поле запроса → ошибка входа; остальные поля и лишние ключи → InvalidOutput
FIELD_ERRORS: Final[dict[str, type[ValueError]]] = {
    "value": InvalidNumber,
    "lang": InvalidLanguage,
}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в пакете (numwords/core/contracts/schema/), поэтому
    доступны и из установленного wheel.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка и meta-валидация схемы (с кэшем).

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор данных против одной схемы."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or SchemaLoader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def first_error(self, data: Dict[str, Any]) -> Optional[ValidationError]:
        """Самое релевантное нарушение (jsonschema best_match) или None."""
        return best_match(self.iter_errors(data))


class ConversionRequestValidator(ContractValidator):
    """Валидатор для conversion_request контракта."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__(CONVERSION_REQUEST, loader)

    @staticmethod
    def error_field(error: ValidationError) -> Optional[str]:
        """
        Поле запроса, к которому относится нарушение.

        Отсутствующий value (required) относится к value; лишний ключ
        (additionalProperties) ни к какому полю не относится.
        """
        if error.absolute_path:
            return str(error.absolute_path[0])
        if error.validator == "required":
            return "value"
        return None

    def check(self, data: Dict[str, Any]) -> None:
        """
        Валидация с переводом нарушения в ошибку входа.

        Raises:
            InvalidNumber: value отсутствует, пустой или не число/строка
            InvalidLanguage: lang вне списка языков
            InvalidOutput: to, currency, preferences или лишние ключи
        """
        error = self.first_error(data)
        if error is None:
            return

        field = self.error_field(error)
        exc_type = FIELD_ERRORS.get(field or "", InvalidOutput)
        raise exc_type(f"Invalid conversion request ({field or 'request'}): {error.message}") from error


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


@lru_cache(maxsize=1)
def conversion_request_validator() -> ConversionRequestValidator:
    """Общий валидатор (схема загружается один раз)."""
    return ConversionRequestValidator()


def validate_conversion_request(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    conversion_request_validator().validate(data)


def check_conversion_request(data: Dict[str, Any]) -> None:
    """
    Raises:
        InvalidNumber, InvalidLanguage, InvalidOutput: см. ConversionRequestValidator.check
    """
    conversion_request_validator().check(data)
