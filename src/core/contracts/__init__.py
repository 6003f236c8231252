"""
Contract Validation Module

Модуль для валидации JSON-форм бесконечных целых по JSON Schema контрактам.
"""

from .validators import (
    ContractValidator,
    InfiniteIntegerValidator,
    IntegerQuotientValidator,
    SchemaLoader,
    load_infinite_integer,
    load_integer_quotient,
    validate_infinite_integer,
    validate_integer_quotient,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "InfiniteIntegerValidator",
    "IntegerQuotientValidator",
    # Functions
    "validate_infinite_integer",
    "validate_integer_quotient",
    "load_infinite_integer",
    "load_integer_quotient",
]
