"""
Contract Validation Module

Модуль для валидации JSON запросов конвертации numwords.
"""

from .validators import (
    CONVERSION_REQUEST,
    FIELD_ERRORS,
    ContractValidator,
    ConversionRequestValidator,
    SchemaLoader,
    check_conversion_request,
    conversion_request_validator,
    validate_conversion_request,
)

__all__ = [
    # Constants
    "CONVERSION_REQUEST",
    "FIELD_ERRORS",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConversionRequestValidator",
    # Functions
    "conversion_request_validator",
    "validate_conversion_request",
    "check_conversion_request",
]
