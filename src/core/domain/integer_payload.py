"""
InfiniteIntegerPayload — JSON-форма бесконечного целого

Immutable Pydantic модели для обмена значениями в JSON.
Полная совместимость с JSON Schema (contracts/schema/infinite_integer.json,
contracts/schema/integer_quotient.json).

Форма значения:
- kind: "finite" | "NaN" | "+Infinity" | "-Infinity"
- negative: знак (только для конечных ненулевых)
- words: беззнаковые 32-bit слова величины, младшее первым
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from src.core.math.special_cases import NumberKind
from src.core.math.words import WORD_MASK


# =============================================================================
# MODELS
# =============================================================================


class InfiniteIntegerPayload(BaseModel):
    """
    JSON-представление значения InfiniteInteger / MutableInfiniteInteger.

    Конечное значение несёт нормализованную величину (без ведущих нулевых
    слов, без отрицательного нуля). Sentinel-значения не несут слов.
    """

    schema_version: Literal["1"] = Field("1", description="Версия формы")
    kind: NumberKind = Field(..., description="Вид значения")
    negative: bool = Field(False, description="Знак конечного значения")
    words: list[Annotated[int, Field(ge=0, le=WORD_MASK)]] = Field(
        default_factory=list,
        validate_default=True,
        description="32-bit слова величины, младшее первым",
    )

    model_config = {"frozen": True}

    @field_validator("words")
    @classmethod
    def validate_words_for_kind(cls, v: list[int], info: ValidationInfo) -> list[int]:
        """
        Проверка согласованности слов с видом значения.

        Конечное: минимум одно слово, старшее ненулевое (кроме нуля),
        ноль не может быть отрицательным. Sentinel: слов нет, negative=False.
        """
        kind = info.data.get("kind")
        negative = info.data.get("negative", False)

        if kind is None:
            return v
        if kind is not NumberKind.FINITE:
            if v:
                raise ValueError(f"{kind.value} payload must not carry words, got {len(v)}")
            if negative:
                raise ValueError(f"{kind.value} payload must not be negative")
            return v

        if not v:
            raise ValueError("finite payload requires at least one word")
        if len(v) > 1 and v[-1] == 0:
            raise ValueError("finite payload must not have leading zero words")
        if negative and v == [0]:
            raise ValueError("zero cannot be negative")
        return v


class IntegerQuotientPayload(BaseModel):
    """JSON-представление IntegerQuotient: целая часть и остаток."""

    schema_version: Literal["1"] = Field("1", description="Версия формы")
    whole_result: InfiniteIntegerPayload = Field(..., description="Целая часть частного")
    remainder: InfiniteIntegerPayload = Field(..., description="Остаток")

    model_config = {"frozen": True}
