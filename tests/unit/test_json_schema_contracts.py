"""
Tests for JSON Schema Contract Validators

Тестирование контракта conversion_request:
- Валидность самой схемы
- Валидация правильных запросов
- Детекция нарушений required полей
- Детекция нарушений типов
- Детекция нарушений constraints (enum/pattern/additionalProperties)
- Интеграция с ConversionRequest
"""

import pytest
from jsonschema import ValidationError

from numwords import ConversionRequest, OutputKind, convert
from numwords import InvalidLanguage, InvalidNumber, InvalidOutput
from numwords.core.contracts import (
    ConversionRequestValidator,
    SchemaLoader,
    check_conversion_request,
    conversion_request_validator,
    validate_conversion_request,
)


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_request():
    """Валидный conversion_request для тестирования."""
    return {
        "value": "1234.5",
        "lang": "uk",
        "to": "currency",
        "currency": "UAH",
        "preferences": ["родовий"],
    }


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_schema():
    """Проверка загрузки схемы."""
    loader = SchemaLoader()
    schema = loader.load_schema("conversion_request")

    assert schema["required"] == ["value"]
    assert schema["additionalProperties"] is False


def test_schema_loader_caches_schemas():
    """Проверка кэширования схем."""
    loader = SchemaLoader()

    schema1 = loader.load_schema("conversion_request")
    schema2 = loader.load_schema("conversion_request")

    # Должен вернуть тот же объект (кэш)
    assert schema1 is schema2


def test_schema_loader_raises_on_missing_schema():
    """Проверка ошибки при отсутствующей схеме."""
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("non_existent_schema")


def test_schema_loader_raises_on_missing_directory(tmp_path):
    """Проверка ошибки при отсутствующей директории схем."""
    with pytest.raises(RuntimeError):
        SchemaLoader(tmp_path / "missing")


# =============================================================================
# TESTS - CONVERSION REQUEST VALIDATION
# =============================================================================


def test_validator_accepts_valid_data(valid_request):
    """Валидация правильного запроса."""
    validator = ConversionRequestValidator()
    validator.validate(valid_request)
    assert validator.is_valid(valid_request)


def test_validate_function(valid_request):
    """Проверка convenience функции."""
    validate_conversion_request(valid_request)


def test_accepts_minimal_request():
    """Достаточно одного value."""
    validate_conversion_request({"value": 42})
    validate_conversion_request({"value": -0.5})


def test_rejects_missing_value(valid_request):
    """Детекция отсутствия value."""
    del valid_request["value"]

    with pytest.raises(ValidationError) as exc_info:
        validate_conversion_request(valid_request)

    assert "value" in str(exc_info.value)


def test_rejects_boolean_value():
    """bool не является числом."""
    with pytest.raises(ValidationError):
        validate_conversion_request({"value": True})


def test_rejects_empty_string_value():
    """Пустая строка вместо числа."""
    with pytest.raises(ValidationError):
        validate_conversion_request({"value": ""})


def test_rejects_unknown_language(valid_request):
    """Детекция неизвестного языка."""
    valid_request["lang"] = "de"

    with pytest.raises(ValidationError):
        validate_conversion_request(valid_request)


def test_rejects_malformed_currency(valid_request):
    """Код валюты — только буквы."""
    valid_request["currency"] = "US$"

    with pytest.raises(ValidationError):
        validate_conversion_request(valid_request)


def test_rejects_non_string_preferences(valid_request):
    """Предпочтения — массив непустых строк."""
    valid_request["preferences"] = ["f", 3]

    with pytest.raises(ValidationError):
        validate_conversion_request(valid_request)

    valid_request["preferences"] = "f"

    with pytest.raises(ValidationError):
        validate_conversion_request(valid_request)


def test_rejects_additional_properties(valid_request):
    """Неизвестные ключи запрещены."""
    valid_request["gender"] = "f"

    with pytest.raises(ValidationError):
        validate_conversion_request(valid_request)


def test_iter_errors_returns_all_errors():
    """Проверка получения всех ошибок сразу."""
    validator = ConversionRequestValidator()
    invalid = {"lang": "de", "to": "", "extra": 1}

    errors = list(validator.iter_errors(invalid))

    # required value, enum lang, minLength to, additionalProperties
    assert len(errors) == 4


# =============================================================================
# TESTS - INPUT ERROR MAPPING
# =============================================================================


def test_check_accepts_valid_data(valid_request):
    """Валидный запрос проходит без исключений."""
    check_conversion_request(valid_request)


def test_shared_validator_is_cached():
    """Схема загружается один раз."""
    assert conversion_request_validator() is conversion_request_validator()


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"lang": "en"}, InvalidNumber),
        ({"value": True}, InvalidNumber),
        ({"value": ""}, InvalidNumber),
        ({"value": 1, "lang": "de"}, InvalidLanguage),
        ({"value": 1, "to": ""}, InvalidOutput),
        ({"value": 1, "currency": "US$"}, InvalidOutput),
        ({"value": 1, "preferences": ["f", 3]}, InvalidOutput),
        ({"value": 1, "gender": "f"}, InvalidOutput),
    ],
)
def test_check_maps_violation_to_input_error(payload, expected):
    """Нарушение схемы → ошибка входа по полю запроса."""
    with pytest.raises(expected) as exc_info:
        check_conversion_request(payload)

    assert isinstance(exc_info.value.__cause__, ValidationError)


def test_error_field():
    """Поле нарушения: путь, required → value, лишний ключ → None."""
    validator = ConversionRequestValidator()

    assert validator.error_field(validator.first_error({"value": 1, "lang": "de"})) == "lang"
    assert validator.error_field(validator.first_error({})) == "value"
    assert validator.error_field(validator.first_error({"value": 1, "x": 1})) is None
    assert validator.first_error({"value": 1}) is None


# =============================================================================
# TESTS - CONVERSION REQUEST INTEGRATION
# =============================================================================


def test_payload_builds_request(valid_request):
    """Валидный словарь → ConversionRequest."""
    request = ConversionRequest.from_payload(valid_request)

    assert request.output is OutputKind.CURRENCY
    assert request.preferences == ("родовий",)
    assert convert(request) == (
        "одної тисячі двохсот тридцяти чотирьох гривень пʼятдесяти копійок"
    )


def test_payload_with_currency_code_in_to():
    """Код валюты в поле to."""
    request = ConversionRequest.from_payload({"value": 2, "lang": "fr", "to": "EUR"})

    assert convert(request) == "deux euros"
