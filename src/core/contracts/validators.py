"""
JSON Schema Contract Validators

Модуль для валидации JSON-форм бесконечных целых согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema (Draft 2020-12)
для проверки соответствия данных схемам.

Схемы:
- infinite_integer.json (значение или sentinel)
- integer_quotient.json (результат деления)

Схема проверяет структуру; нормализацию величины (отсутствие ведущих
нулевых слов, отрицательного нуля) дополнительно проверяют Pydantic модели
при загрузке через load_infinite_integer / load_integer_quotient.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.core.domain.integer_payload import InfiniteIntegerPayload, IntegerQuotientPayload
from src.core.domain.integer_quotient import IntegerQuotient
from src.core.domain.mutable_infinite_integer import MutableInfiniteInteger


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self, schema_dir: Path | None = None):
        # Корень проекта на 4 уровня выше этого файла
        if schema_dir is None:
            schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        self._schema_dir = schema_dir
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'infinite_integer')

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
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class InfiniteIntegerValidator(ContractValidator):
    """Валидатор для infinite_integer контракта."""

    def __init__(self):
        super().__init__("infinite_integer")


class IntegerQuotientValidator(ContractValidator):
    """Валидатор для integer_quotient контракта."""

    def __init__(self):
        super().__init__("integer_quotient")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_infinite_integer(data: Dict[str, Any]) -> None:
    """
    Валидация infinite_integer данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    InfiniteIntegerValidator().validate(data)


def validate_integer_quotient(data: Dict[str, Any]) -> None:
    """
    Валидация integer_quotient данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    IntegerQuotientValidator().validate(data)


def load_infinite_integer(data: Dict[str, Any]) -> MutableInfiniteInteger:
    """
    Валидирует JSON-форму и восстанавливает значение.

    Args:
        data: Данные JSON-формы (dict)

    Returns:
        MutableInfiniteInteger или sentinel singleton

    Raises:
        ValidationError: Данные не соответствуют схеме
        pydantic.ValidationError: Величина не нормализована
    """
    validate_infinite_integer(data)
    return MutableInfiniteInteger.from_payload(InfiniteIntegerPayload.model_validate(data))


def load_integer_quotient(data: Dict[str, Any]) -> IntegerQuotient[MutableInfiniteInteger]:
    """
    Валидирует JSON-форму частного и восстанавливает его.

    Raises:
        ValidationError: Данные не соответствуют схеме
        pydantic.ValidationError: Величина не нормализована
    """
    validate_integer_quotient(data)
    payload = IntegerQuotientPayload.model_validate(data)
    return IntegerQuotient(
        MutableInfiniteInteger.from_payload(payload.whole_result),
        MutableInfiniteInteger.from_payload(payload.remainder),
    )

