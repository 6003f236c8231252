"""
InfiniteInteger — неизменяемое целое неограниченной величины

Фасад над приватным MutableInfiniteInteger: каждая операция копирует
внутреннее значение, мутирует копию и оборачивает результат. Кэшированные
константы (ZERO, ONE, TWO) и sentinel возвращаются напрямую, без
выделения новых объектов.

Поддерживает операторы + - * ** унарный минус, abs(), сравнения и hash(),
поэтому значения можно использовать как ключи словарей.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Внутреннее значение никогда не покидает объект без копирования
2. Sentinel представлены ровно тремя экземплярами
3. Равные значения имеют равный hash
"""

from collections.abc import Iterable, Iterator, Sequence
from random import Random
from typing import ClassVar, Union

from src.core.domain.integer_payload import InfiniteIntegerPayload
from src.core.domain.integer_quotient import IntegerQuotient
from src.core.domain.mutable_infinite_integer import MutableInfiniteInteger
from src.core.math.division import DivisionConfig
from src.core.math.radix import RadixConfig
from src.core.math.special_cases import NumberKind

Operand = Union["InfiniteInteger", MutableInfiniteInteger, int]


class InfiniteInteger:
    """
    Неизменяемое бесконечное целое.

    Attributes:
        ZERO, ONE, TWO: Кэшированные константы
        NaN, POSITIVE_INFINITY, NEGATIVE_INFINITY: Sentinel singletons
    """

    __slots__ = ("_value",)

    ZERO: ClassVar["InfiniteInteger"]
    ONE: ClassVar["InfiniteInteger"]
    TWO: ClassVar["InfiniteInteger"]
    NaN: ClassVar["InfiniteInteger"]
    POSITIVE_INFINITY: ClassVar["InfiniteInteger"]
    NEGATIVE_INFINITY: ClassVar["InfiniteInteger"]

    def __init__(self, value: int = 0) -> None:
        self._value = MutableInfiniteInteger(value)

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def _wrap(cls, value: MutableInfiniteInteger) -> "InfiniteInteger":
        """Оборачивает значение, которым больше никто не владеет."""
        if value is MutableInfiniteInteger.NaN:
            return cls.NaN
        if value is MutableInfiniteInteger.POSITIVE_INFINITY:
            return cls.POSITIVE_INFINITY
        if value is MutableInfiniteInteger.NEGATIVE_INFINITY:
            return cls.NEGATIVE_INFINITY
        for constant in (cls.ZERO, cls.ONE, cls.TWO):
            if constant._value == value:
                return constant
        instance = cls.__new__(cls)
        instance._value = value
        return instance

    @classmethod
    def value_of(cls, value: object) -> "InfiniteInteger":
        """
        Конвертирует int, str, MutableInfiniteInteger или InfiniteInteger.

        Examples:
            >>> InfiniteInteger.value_of(0) is InfiniteInteger.ZERO
            True
        """
        if isinstance(value, InfiniteInteger):
            return value
        return cls._wrap(MutableInfiniteInteger.value_of(value))

    @classmethod
    def parse_string(cls, text: str, radix: int = 10) -> "InfiniteInteger":
        return cls._wrap(MutableInfiniteInteger.parse_string(text, radix))

    @classmethod
    def little_endian(cls, values: Iterable[int], negative: bool = False) -> "InfiniteInteger":
        return cls._wrap(MutableInfiniteInteger.little_endian(values, negative))

    @classmethod
    def big_endian(cls, values: Sequence[int], negative: bool = False) -> "InfiniteInteger":
        return cls._wrap(MutableInfiniteInteger.big_endian(values, negative))

    @classmethod
    def random(cls, word_count: Operand, rng: Random | None = None) -> "InfiniteInteger":
        if isinstance(word_count, InfiniteInteger):
            word_count = word_count._value
        return cls._wrap(MutableInfiniteInteger.random(word_count, rng))

    @classmethod
    def iterate_all_integers(cls) -> Iterator["InfiniteInteger"]:
        """Бесконечный генератор всех целых: 0, 1, -1, 2, -2, ..."""
        for value in MutableInfiniteInteger.iterate_all_integers():
            yield cls._wrap(value)

    @classmethod
    def stream_fibonacci_sequence(cls) -> Iterator["InfiniteInteger"]:
        """Бесконечный генератор чисел Фибоначчи."""
        for value in MutableInfiniteInteger.stream_fibonacci_sequence():
            yield cls._wrap(value)

    @classmethod
    def from_payload(cls, payload: InfiniteIntegerPayload) -> "InfiniteInteger":
        return cls._wrap(MutableInfiniteInteger.from_payload(payload))

    def to_mutable_infinite_integer(self) -> MutableInfiniteInteger:
        """Изменяемая копия значения."""
        return self._value.copy()

    def _apply(self, operation: str, *args: object) -> "InfiniteInteger":
        unwrapped = [arg._value if isinstance(arg, InfiniteInteger) else arg for arg in args]
        result = getattr(self._value.copy(), operation)(*unwrapped)
        return InfiniteInteger._wrap(result)

    # =========================================================================
    # STATE
    # =========================================================================

    @property
    def kind(self) -> NumberKind:
        return self._value.kind

    def is_nan(self) -> bool:
        return self._value.is_nan()

    def is_infinite(self) -> bool:
        return self._value.is_infinite()

    def is_finite(self) -> bool:
        return self._value.is_finite()

    def signal_nan(self) -> None:
        self._value.signal_nan()

    def signum(self) -> int:
        return self._value.signum()

    def is_power_of_two(self) -> bool:
        return self._value.is_power_of_two()

    def iter_magnitude(self) -> Iterator[int]:
        return self._value.iter_magnitude()

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def add(self, value: Operand) -> "InfiniteInteger":
        return self._apply("add", value)

    def subtract(self, value: Operand) -> "InfiniteInteger":
        return self._apply("subtract", value)

    def multiply(self, value: Operand) -> "InfiniteInteger":
        return self._apply("multiply", value)

    def multiply_by_power_of_two(self, exponent: Operand) -> "InfiniteInteger":
        return self._apply("multiply_by_power_of_two", exponent)

    def divide_by_power_of_two_drop_remainder(self, exponent: Operand) -> "InfiniteInteger":
        return self._apply("divide_by_power_of_two_drop_remainder", exponent)

    def divide(
        self, value: Operand, config: DivisionConfig | None = None
    ) -> IntegerQuotient["InfiniteInteger"]:
        """
        Целочисленное деление с остатком.

        Examples:
            >>> str(InfiniteInteger(10).divide(5))
            'whole=2; remainder=0'
        """
        if isinstance(value, InfiniteInteger):
            value = value._value
        quotient = self._value.divide(value, config)
        return IntegerQuotient(
            InfiniteInteger._wrap(quotient.whole_result.copy()),
            InfiniteInteger._wrap(quotient.remainder.copy()),
        )

    def divide_drop_remainder(
        self, value: Operand, config: DivisionConfig | None = None
    ) -> "InfiniteInteger":
        return self.divide(value, config).whole_result

    def divide_return_remainder(
        self, value: Operand, config: DivisionConfig | None = None
    ) -> "InfiniteInteger":
        return self.divide(value, config).remainder

    def power(self, exponent: Operand) -> "InfiniteInteger":
        return self._apply("power", exponent)

    def self_power(self) -> "InfiniteInteger":
        return self._apply("self_power")

    def factorial(self) -> "InfiniteInteger":
        return self._apply("factorial")

    def abs(self) -> "InfiniteInteger":
        return self._apply("abs")

    def negate(self) -> "InfiniteInteger":
        return self._apply("negate")

    def is_prime(self) -> bool:
        return self._value.is_prime()

    def greatest_common_divisor(
        self, value: Operand, config: DivisionConfig | None = None
    ) -> "InfiniteInteger":
        return self._apply("greatest_common_divisor", value, config)

    def least_common_multiple(self, value: Operand) -> "InfiniteInteger":
        return self._apply("least_common_multiple", value)

    def sqrt_ceil(self) -> "InfiniteInteger":
        return self._apply("sqrt_ceil")

    def __add__(self, other: object) -> "InfiniteInteger":
        if not isinstance(other, (InfiniteInteger, MutableInfiniteInteger, int)):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> "InfiniteInteger":
        if not isinstance(other, (InfiniteInteger, MutableInfiniteInteger, int)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: object) -> "InfiniteInteger":
        if not isinstance(other, int):
            return NotImplemented
        return InfiniteInteger.value_of(other).subtract(self)

    def __mul__(self, other: object) -> "InfiniteInteger":
        if not isinstance(other, (InfiniteInteger, MutableInfiniteInteger, int)):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __pow__(self, other: object) -> "InfiniteInteger":
        if not isinstance(other, (InfiniteInteger, MutableInfiniteInteger, int)):
            return NotImplemented
        return self.power(other)

    def __neg__(self) -> "InfiniteInteger":
        return self.negate()

    def __abs__(self) -> "InfiniteInteger":
        return self.abs()

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def compare_to(self, value: Operand) -> int:
        if isinstance(value, InfiniteInteger):
            value = value._value
        return self._value.compare_to(value)

    def equal_value(self, value: object) -> bool:
        return self.compare_to(value) == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InfiniteInteger):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        if not self.is_finite():
            return hash(self.kind)
        return hash((self._value.signum(), tuple(self._value.iter_magnitude())))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (InfiniteInteger, MutableInfiniteInteger, int)):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, (InfiniteInteger, MutableInfiniteInteger, int)):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, (InfiniteInteger, MutableInfiniteInteger, int)):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, (InfiniteInteger, MutableInfiniteInteger, int)):
            return NotImplemented
        return self.compare_to(other) >= 0

    # =========================================================================
    # PROJECTIONS, TEXT AND PAYLOAD
    # =========================================================================

    def int_value(self) -> int:
        return self._value.int_value()

    def long_value(self) -> int:
        return self._value.long_value()

    def long_value_exact(self) -> int:
        return self._value.long_value_exact()

    def __int__(self) -> int:
        return int(self._value)

    def __float__(self) -> float:
        return float(self._value)

    def to_string(self, radix: int = 10, config: RadixConfig | None = None) -> str:
        return self._value.to_string(radix, config)

    def to_debugging_string(self) -> str:
        return self._value.to_debugging_string()

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def to_payload(self) -> InfiniteIntegerPayload:
        return self._value.to_payload()


def _constant(value: MutableInfiniteInteger) -> InfiniteInteger:
    instance = InfiniteInteger.__new__(InfiniteInteger)
    instance._value = value
    return instance


InfiniteInteger.ZERO = _constant(MutableInfiniteInteger(0))
InfiniteInteger.ONE = _constant(MutableInfiniteInteger(1))
InfiniteInteger.TWO = _constant(MutableInfiniteInteger(2))
InfiniteInteger.NaN = _constant(MutableInfiniteInteger.NaN)
InfiniteInteger.POSITIVE_INFINITY = _constant(MutableInfiniteInteger.POSITIVE_INFINITY)
InfiniteInteger.NEGATIVE_INFINITY = _constant(MutableInfiniteInteger.NEGATIVE_INFINITY)
