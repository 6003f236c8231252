"""
IntegerQuotient — результат целочисленного деления

Неизменяемая пара (whole_result, remainder):
numerator = denominator * whole_result ± remainder, 0 <= remainder < |denominator|.
Вырожденные деления (на ноль, с участием sentinel) дают sentinel-поля.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from src.core.domain.integer_payload import IntegerQuotientPayload

T = TypeVar("T")


@dataclass(frozen=True)
class IntegerQuotient(Generic[T]):
    """
    Результат деления: целая часть и остаток.

    Attributes:
        whole_result: Целая часть (усечённая к нулю)
        remainder: Неотрицательный остаток
    """

    whole_result: T
    remainder: T

    def __post_init__(self) -> None:
        if self.whole_result is None or self.remainder is None:
            raise ValueError("whole_result and remainder must not be None")

    def __str__(self) -> str:
        return f"whole={self.whole_result}; remainder={self.remainder}"

    def to_payload(self) -> IntegerQuotientPayload:
        """JSON-форма частного (поля должны поддерживать to_payload())."""
        return IntegerQuotientPayload(
            whole_result=self.whole_result.to_payload(),
            remainder=self.remainder.to_payload(),
        )
