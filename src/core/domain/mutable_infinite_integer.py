"""
MutableInfiniteInteger — изменяемое целое неограниченной величины

Значение = знак + величина (list[int] 32-bit слов, младшее первым) либо один
из трёх sentinel: NaN, +∞, -∞. Операции мутируют получателя и возвращают его
для цепочек вызовов. Если получатель или операнд — sentinel, возвращается
singleton, а получатель не меняется, поэтому вызывающий код всегда
переприсваивает результат:

    x = x.add(y)

Каждая бинарная операция сначала ищет исход в таблице правил
(src.core.math.special_cases) и только для исхода COMPUTE выполняет конечную
арифметику над словами.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Sentinel-значения — process-wide singletons, никогда не мутируются
2. Старшее слово ненулевое, кроме нуля ([0])
3. Отрицательного нуля не существует
4. Операнды никогда не мутируются (x.add(x) безопасно)
5. Полный порядок: -∞ < конечные < +∞ < NaN
"""

import math
from collections.abc import Iterable, Iterator, Sequence
from random import Random
from typing import TYPE_CHECKING, ClassVar, Union

from src.core.domain.integer_payload import InfiniteIntegerPayload
from src.core.domain.integer_quotient import IntegerQuotient
from src.core.math.division import DivisionConfig, divide_magnitudes
from src.core.math.errors import ArithmeticUndefinedError
from src.core.math.number_theory import (
    gcd_magnitudes,
    is_prime_magnitude,
    lcm_magnitudes,
    sqrt_ceil_magnitude,
)
from src.core.math.radix import (
    NAN_GLYPH,
    NAN_NAME,
    NEGATIVE_INFINITY_GLYPH,
    NEGATIVE_INFINITY_NAME,
    POSITIVE_INFINITY_GLYPH,
    POSITIVE_INFINITY_NAME,
    RadixConfig,
    enforce_standard_radix,
    parse_magnitude,
    render_debug,
    render_magnitude,
    render_word_dump,
)
from src.core.math.special_cases import (
    ADD_TABLE,
    DIVIDE_TABLE,
    MULTIPLY_TABLE,
    POWER_TABLE,
    SUBTRACT_TABLE,
    NumberKind,
    OperandClass,
    Outcome,
    classify,
    compare_kinds,
)
from src.core.math.words import (
    SIGNED_LONG_MAX,
    WORD_BITS,
    WORD_MASK,
    add_above,
    bit_length,
    compare_magnitudes,
    fits_signed_long,
    from_native,
    is_even,
    is_one,
    is_power_of_two,
    is_zero,
    multiply_magnitudes,
    shift_left,
    shift_right,
    subtract_smaller,
    to_native,
    trim,
)

if TYPE_CHECKING:
    from src.core.domain.infinite_integer import InfiniteInteger

# Максимальное беззнаковое 64-bit значение для little_endian/big_endian
_UNSIGNED_LONG_MAX = (1 << 64) - 1

Operand = Union["MutableInfiniteInteger", int]


class MutableInfiniteInteger:
    """
    Изменяемое бесконечное целое.

    Конструктор принимает native int любой величины; для строк, копий и
    InfiniteInteger используется value_of().

    Attributes:
        NaN: Не-число (результат неопределённых операций)
        POSITIVE_INFINITY: +∞
        NEGATIVE_INFINITY: -∞
    """

    __slots__ = ("_kind", "_negative", "_words")

    NaN: ClassVar["MutableInfiniteInteger"]
    POSITIVE_INFINITY: ClassVar["MutableInfiniteInteger"]
    NEGATIVE_INFINITY: ClassVar["MutableInfiniteInteger"]

    def __init__(self, value: int = 0) -> None:
        self._kind = NumberKind.FINITE
        self._negative = value < 0
        self._words: list[int] | None = from_native(value)

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def _sentinel(cls, kind: NumberKind) -> "MutableInfiniteInteger":
        instance = cls.__new__(cls)
        instance._kind = kind
        instance._negative = kind is NumberKind.NEGATIVE_INFINITY
        instance._words = None
        return instance

    @classmethod
    def _from_magnitude(cls, negative: bool, words: list[int]) -> "MutableInfiniteInteger":
        instance = cls.__new__(cls)
        instance._kind = NumberKind.FINITE
        instance._words = trim(words)
        instance._negative = negative and not is_zero(instance._words)
        return instance

    @classmethod
    def value_of(cls, value: object) -> "MutableInfiniteInteger":
        """
        Конвертирует значение в новый MutableInfiniteInteger.

        Args:
            value: int, str (основание 10), MutableInfiniteInteger (копия)
                или InfiniteInteger

        Returns:
            Новое значение или sentinel singleton

        Raises:
            TypeError: Неподдерживаемый тип
            IntegerFormatError: Строка не разбирается
        """
        if isinstance(value, MutableInfiniteInteger):
            return value.copy()
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            return cls.parse_string(value)

        from src.core.domain.infinite_integer import InfiniteInteger

        if isinstance(value, InfiniteInteger):
            return value.to_mutable_infinite_integer()
        raise TypeError(f"cannot convert {type(value).__name__} to MutableInfiniteInteger")

    @classmethod
    def parse_string(cls, text: str, radix: int = 10) -> "MutableInfiniteInteger":
        """
        Разбор текстовой записи в основании radix.

        Пробелы по краям отбрасываются. Принимаются глифы "∞", "+∞", "-∞", "∉ℤ".

        Raises:
            InvalidRadixError: Основание вне [1, 62]
            IntegerFormatError: Текст не является целым в этом основании

        Examples:
            >>> MutableInfiniteInteger.parse_string("0a0", 16).int_value()
            160
            >>> MutableInfiniteInteger.parse_string("  111\\n", 1).int_value()
            3
        """
        enforce_standard_radix(radix)
        trimmed = text.strip()
        if trimmed in (POSITIVE_INFINITY_GLYPH, "+" + POSITIVE_INFINITY_GLYPH):
            return cls.POSITIVE_INFINITY
        if trimmed == NEGATIVE_INFINITY_GLYPH:
            return cls.NEGATIVE_INFINITY
        if trimmed == NAN_GLYPH:
            return cls.NaN

        negative, words = parse_magnitude(trimmed, radix)
        return cls._from_magnitude(negative, words)

    @classmethod
    def little_endian(
        cls, values: Iterable[int], negative: bool = False
    ) -> "MutableInfiniteInteger":
        """
        Строит значение из беззнаковых 64-bit чисел, младшее первым.

        Пустая последовательность даёт 0.

        Raises:
            ValueError: Если элемент вне [0, 2^64 - 1]
        """
        words: list[int] = []
        for value in values:
            if value < 0 or value > _UNSIGNED_LONG_MAX:
                raise ValueError(f"values must be unsigned 64-bit, got {value}")
            words.append(value & WORD_MASK)
            words.append(value >> WORD_BITS)
        return cls._from_magnitude(negative, words or [0])

    @classmethod
    def from_words(
        cls, words: Iterable[int], negative: bool = False
    ) -> "MutableInfiniteInteger":
        """
        Строит значение из 32-bit слов величины, младшее первым.

        Ведущие нулевые слова отбрасываются, пустая последовательность даёт 0.

        Raises:
            ValueError: Если слово вне [0, 2^32 - 1]
        """
        magnitude = list(words)
        for word in magnitude:
            if word < 0 or word > WORD_MASK:
                raise ValueError(f"words must be unsigned 32-bit, got {word}")
        return cls._from_magnitude(negative, magnitude or [0])

    @classmethod
    def big_endian(
        cls, values: Sequence[int], negative: bool = False
    ) -> "MutableInfiniteInteger":
        """Строит значение из беззнаковых 64-bit чисел, старшее первым."""
        return cls.little_endian(reversed(values), negative)

    @classmethod
    def random(
        cls, word_count: Operand, rng: Random | None = None
    ) -> "MutableInfiniteInteger":
        """
        Случайное значение из word_count равномерно распределённых слов.

        Знак выбирается случайно для ненулевого результата.

        Returns:
            NaN если word_count < 1 или не конечен
        """
        if isinstance(word_count, MutableInfiniteInteger):
            if not word_count.is_finite():
                return cls.NaN
            word_count = int(word_count)
        if word_count < 1:
            return cls.NaN

        if rng is None:
            rng = Random()
        words = [rng.getrandbits(WORD_BITS) for _ in range(word_count)]
        return cls._from_magnitude(bool(rng.getrandbits(1)), words)

    @classmethod
    def iterate_all_integers(cls) -> Iterator["MutableInfiniteInteger"]:
        """Бесконечный генератор всех целых: 0, 1, -1, 2, -2, ..."""
        current = cls(0)
        yield current.copy()
        while True:
            current = current.add(1)
            yield current.copy()
            yield current.copy().negate()

    @classmethod
    def stream_fibonacci_sequence(cls) -> Iterator["MutableInfiniteInteger"]:
        """Бесконечный генератор чисел Фибоначчи: 0, 1, 1, 2, 3, 5, ..."""
        previous = cls(0)
        current = cls(1)
        yield previous.copy()
        while True:
            yield current.copy()
            previous, current = current, previous.add(current)

    @classmethod
    def from_payload(cls, payload: InfiniteIntegerPayload) -> "MutableInfiniteInteger":
        """Восстанавливает значение из JSON-формы."""
        if payload.kind is NumberKind.NAN:
            return cls.NaN
        if payload.kind is NumberKind.POSITIVE_INFINITY:
            return cls.POSITIVE_INFINITY
        if payload.kind is NumberKind.NEGATIVE_INFINITY:
            return cls.NEGATIVE_INFINITY
        return cls.from_words(payload.words, payload.negative)

    def _coerce(self, value: object) -> "MutableInfiniteInteger":
        if value is self:
            return self.copy()
        if isinstance(value, MutableInfiniteInteger):
            return value
        return MutableInfiniteInteger.value_of(value)

    def _assign(self, negative: bool, words: list[int]) -> "MutableInfiniteInteger":
        if not self.is_finite():
            return MutableInfiniteInteger._from_magnitude(negative, words)
        self._words = trim(words)
        self._negative = negative and not is_zero(self._words)
        return self

    def _resolve(self, outcome: Outcome) -> "MutableInfiniteInteger":
        if outcome is Outcome.NAN:
            return MutableInfiniteInteger.NaN
        if outcome is Outcome.POSITIVE_INFINITY:
            return MutableInfiniteInteger.POSITIVE_INFINITY
        if outcome is Outcome.NEGATIVE_INFINITY:
            return MutableInfiniteInteger.NEGATIVE_INFINITY
        if outcome is Outcome.ZERO:
            return self._assign(False, [0])
        if outcome is Outcome.ONE:
            return self._assign(False, [1])
        if outcome is Outcome.LEFT:
            return self
        raise ValueError(f"outcome {outcome.value} cannot be resolved to a value")

    def _operand_class(self) -> OperandClass:
        return classify(self._kind, self._negative, self._words)

    # =========================================================================
    # STATE
    # =========================================================================

    @property
    def kind(self) -> NumberKind:
        return self._kind

    def is_nan(self) -> bool:
        return self._kind is NumberKind.NAN

    def is_infinite(self) -> bool:
        return self._kind in (NumberKind.POSITIVE_INFINITY, NumberKind.NEGATIVE_INFINITY)

    def is_finite(self) -> bool:
        return self._kind is NumberKind.FINITE

    def signal_nan(self) -> None:
        """Бросает ArithmeticUndefinedError, если значение — NaN."""
        if self.is_nan():
            raise ArithmeticUndefinedError("Not a number.")

    def signum(self) -> int:
        """Знак: -1, 0 или 1 (0 для NaN)."""
        if self.is_nan():
            return 0
        if self._kind is NumberKind.POSITIVE_INFINITY:
            return 1
        if self._negative:
            return -1
        return 0 if is_zero(self._words) else 1

    def is_power_of_two(self) -> bool:
        """True если |self| = 2^n (включая 0 и 1); False для sentinel."""
        if not self.is_finite():
            return False
        return is_power_of_two(self._words)

    def copy(self) -> "MutableInfiniteInteger":
        """Независимая копия; sentinel возвращает себя."""
        if not self.is_finite():
            return self
        return MutableInfiniteInteger._from_magnitude(self._negative, self._words[:])

    def set(self, value: object) -> "MutableInfiniteInteger":
        """
        Присваивает получателю значение value (копию, не ссылку).

        Returns:
            value, если это sentinel; self без изменений, если self — sentinel;
            иначе мутированный self
        """
        value = self._coerce(value)
        if not value.is_finite():
            return value
        if not self.is_finite():
            return self
        self._negative = value._negative
        self._words = value._words[:]
        return self

    def iter_magnitude(self) -> Iterator[int]:
        """
        Итератор слов величины, младшее первым.

        Raises:
            ArithmeticUndefinedError: Для sentinel (слов нет)
        """
        if not self.is_finite():
            raise ArithmeticUndefinedError(f"{self} does not have a magnitude.")
        return iter(tuple(self._words))

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def _add_signed(self, negative: bool, words: list[int]) -> None:
        if self._negative == negative:
            add_above(self._words, words)
        elif compare_magnitudes(self._words, words) >= 0:
            subtract_smaller(self._words, words)
        else:
            self._words = subtract_smaller(words[:], self._words)
            self._negative = negative
        if is_zero(self._words):
            self._negative = False

    def add(self, value: Operand) -> "MutableInfiniteInteger":
        """
        self + value (мутирует self).

        Examples:
            >>> MutableInfiniteInteger(8589934592).add(5).to_debugging_string()
            '+ 5, 2, '
        """
        value = self._coerce(value)
        outcome = ADD_TABLE[(self._operand_class(), value._operand_class())]
        if outcome is not Outcome.COMPUTE:
            return self._resolve(outcome)
        self._add_signed(value._negative, value._words)
        return self

    def subtract(self, value: Operand) -> "MutableInfiniteInteger":
        """self - value (мутирует self)."""
        value = self._coerce(value)
        outcome = SUBTRACT_TABLE[(self._operand_class(), value._operand_class())]
        if outcome is not Outcome.COMPUTE:
            return self._resolve(outcome)
        self._add_signed(not value._negative, value._words)
        return self

    def multiply(self, value: Operand) -> "MutableInfiniteInteger":
        """self * value (мутирует self)."""
        value = self._coerce(value)
        outcome = MULTIPLY_TABLE[(self._operand_class(), value._operand_class())]
        if outcome is not Outcome.COMPUTE:
            return self._resolve(outcome)
        negative = self._negative != value._negative
        return self._assign(negative, multiply_magnitudes(self._words, value._words))

    def multiply_by_power_of_two(self, exponent: Operand) -> "MutableInfiniteInteger":
        """
        self * 2^exponent (мутирует self).

        Отрицательный показатель делит с отбрасыванием остатка. Показатель
        +∞ следует таблице умножения на +∞, показатель -∞ даёт 0.

        Examples:
            >>> MutableInfiniteInteger(1).multiply_by_power_of_two(64).to_debugging_string()
            '+ 0, 0, 1, '
        """
        exponent = self._coerce(exponent)
        if not self.is_finite():
            return self
        if exponent.is_nan():
            return MutableInfiniteInteger.NaN
        if exponent._kind is NumberKind.POSITIVE_INFINITY:
            outcome = MULTIPLY_TABLE[(self._operand_class(), OperandClass.POSITIVE_INFINITY)]
            return self._resolve(outcome)
        if exponent._kind is NumberKind.NEGATIVE_INFINITY:
            return self._assign(False, [0])

        shift = int(exponent)
        if shift >= 0:
            shift_left(self._words, shift)
        else:
            shift_right(self._words, -shift)
        if is_zero(self._words):
            self._negative = False
        return self

    def divide_by_power_of_two_drop_remainder(self, exponent: Operand) -> "MutableInfiniteInteger":
        """self / 2^exponent с усечением к нулю (мутирует self)."""
        exponent = self._coerce(exponent)
        return self.multiply_by_power_of_two(exponent.copy().negate())

    def divide(
        self, value: Operand, config: DivisionConfig | None = None
    ) -> IntegerQuotient["MutableInfiniteInteger"]:
        """
        Целочисленное деление с остатком (self не мутируется).

        Целая часть усекается к нулю и отрицательна, если знаки операндов
        различны; остаток никогда не отрицателен.

        Returns:
            IntegerQuotient новых значений или sentinel

        Examples:
            >>> str(MutableInfiniteInteger(-11).divide(5))
            'whole=-2; remainder=1'
        """
        value = self._coerce(value)
        whole_outcome, remainder_outcome = DIVIDE_TABLE[
            (self._operand_class(), value._operand_class())
        ]
        if whole_outcome is not Outcome.COMPUTE:
            whole = self if whole_outcome is Outcome.LEFT else self._constant(whole_outcome)
            return IntegerQuotient(whole, self._constant(remainder_outcome))

        whole_words, remainder_words = divide_magnitudes(self._words, value._words, config)
        return IntegerQuotient(
            MutableInfiniteInteger._from_magnitude(self._negative != value._negative, whole_words),
            MutableInfiniteInteger._from_magnitude(False, remainder_words),
        )

    @staticmethod
    def _constant(outcome: Outcome) -> "MutableInfiniteInteger":
        if outcome is Outcome.ZERO:
            return MutableInfiniteInteger(0)
        if outcome is Outcome.ONE:
            return MutableInfiniteInteger(1)
        return MutableInfiniteInteger(0)._resolve(outcome)

    def divide_drop_remainder(
        self, value: Operand, config: DivisionConfig | None = None
    ) -> "MutableInfiniteInteger":
        """self = целая часть self / value."""
        return self.set(self.divide(value, config).whole_result)

    def divide_return_remainder(
        self, value: Operand, config: DivisionConfig | None = None
    ) -> "MutableInfiniteInteger":
        """self = остаток self / value."""
        return self.set(self.divide(value, config).remainder)

    def power(self, exponent: Operand) -> "MutableInfiniteInteger":
        """
        self^exponent (мутирует self).

        Raises:
            ArithmeticUndefinedError: Отрицательный показатель конечного
                основания (результат не целый)
        """
        exponent = self._coerce(exponent)
        outcome = POWER_TABLE[(self._operand_class(), exponent._operand_class())]
        if outcome is Outcome.FRACTION:
            raise ArithmeticUndefinedError(
                f"A negative exponent would result in a non-integer answer. The exponent was: {exponent}"
            )
        if outcome is Outcome.INFINITY_BY_PARITY:
            if is_even(exponent._words):
                return MutableInfiniteInteger.POSITIVE_INFINITY
            return MutableInfiniteInteger.NEGATIVE_INFINITY
        if outcome is not Outcome.COMPUTE:
            return self._resolve(outcome)

        negative = self._negative and not is_even(exponent._words)
        if self._words == [2]:
            return self._assign(negative, shift_left([1], int(exponent)))

        base = self._words[:]
        result = [1]
        for bit_index in range(bit_length(exponent._words) - 1, -1, -1):
            result = multiply_magnitudes(result, result)
            word = exponent._words[bit_index // WORD_BITS]
            if (word >> (bit_index % WORD_BITS)) & 1:
                result = multiply_magnitudes(result, base)
        return self._assign(negative, result)

    def self_power(self) -> "MutableInfiniteInteger":
        """self^self (мутирует self)."""
        return self.power(self)

    def factorial(self) -> "MutableInfiniteInteger":
        """
        self! (мутирует self).

        Returns:
            NaN для отрицательных и NaN, +∞ для +∞
        """
        if self.is_nan() or self._negative:
            return MutableInfiniteInteger.NaN
        if self._kind is NumberKind.POSITIVE_INFINITY:
            return self
        if compare_magnitudes(self._words, [1]) <= 0:
            return self._assign(False, [1])

        result = [1]
        counter = [2]
        while compare_magnitudes(counter, self._words) <= 0:
            result = multiply_magnitudes(result, counter)
            add_above(counter, [1])
        return self._assign(False, result)

    def abs(self) -> "MutableInfiniteInteger":
        """|self| (мутирует self); -∞ становится +∞."""
        if self._kind is NumberKind.NEGATIVE_INFINITY:
            return MutableInfiniteInteger.POSITIVE_INFINITY
        if self.is_finite():
            self._negative = False
        return self

    def negate(self) -> "MutableInfiniteInteger":
        """-self (мутирует self); ±∞ меняются местами, NaN и 0 неизменны."""
        if self._kind is NumberKind.NEGATIVE_INFINITY:
            return MutableInfiniteInteger.POSITIVE_INFINITY
        if self._kind is NumberKind.POSITIVE_INFINITY:
            return MutableInfiniteInteger.NEGATIVE_INFINITY
        if self.is_finite() and not is_zero(self._words):
            self._negative = not self._negative
        return self

    # =========================================================================
    # NUMBER THEORY
    # =========================================================================

    def is_prime(self) -> bool:
        """
        Проверка простоты.

        Raises:
            ArithmeticUndefinedError: Для отрицательных, sentinel и 1

        Examples:
            >>> MutableInfiniteInteger(199).is_prime()
            True
        """
        if self._negative or not self.is_finite():
            raise ArithmeticUndefinedError("Prime is only defined for integers > 1 and 0")
        if is_one(self._words):
            raise ArithmeticUndefinedError(
                "1 is neither prime nor composite (primality is not defined for 1)"
            )
        return is_prime_magnitude(self._words)

    def greatest_common_divisor(
        self, value: Operand, config: DivisionConfig | None = None
    ) -> "MutableInfiniteInteger":
        """
        НОД(|self|, |value|) (мутирует self).

        Returns:
            NaN для sentinel-операндов, +∞ для НОД(0, 0)

        Examples:
            >>> MutableInfiniteInteger(12).greatest_common_divisor(10).int_value()
            2
        """
        value = self._coerce(value)
        if not self.is_finite() or not value.is_finite():
            return MutableInfiniteInteger.NaN
        if is_zero(self._words) and is_zero(value._words):
            return MutableInfiniteInteger.POSITIVE_INFINITY
        return self._assign(False, gcd_magnitudes(self._words, value._words, config))

    def least_common_multiple(self, value: Operand) -> "MutableInfiniteInteger":
        """
        НОК(|self|, |value|) (мутирует self).

        Returns:
            NaN для sentinel-операндов и нуля
        """
        value = self._coerce(value)
        if not self.is_finite() or not value.is_finite():
            return MutableInfiniteInteger.NaN
        if is_zero(self._words) or is_zero(value._words):
            return MutableInfiniteInteger.NaN
        return self._assign(False, lcm_magnitudes(self._words, value._words))

    def sqrt_ceil(self) -> "MutableInfiniteInteger":
        """
        Потолок квадратного корня (мутирует self).

        Returns:
            NaN для NaN и отрицательных, +∞ для +∞
        """
        if self.is_nan() or self._negative:
            return MutableInfiniteInteger.NaN
        if self._kind is NumberKind.POSITIVE_INFINITY:
            return self
        return self._assign(False, sqrt_ceil_magnitude(self._words))

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def compare_to(self, value: Operand) -> int:
        """
        Полный порядок: -∞ < конечные < +∞ < NaN.

        Returns:
            -1, 0 или 1
        """
        if value is self:
            return 0
        value = self._coerce(value)
        by_kind = compare_kinds(self._kind, value._kind)
        if by_kind != 0 or not self.is_finite():
            return by_kind
        if self._negative != value._negative:
            return -1 if self._negative else 1
        comparison = compare_magnitudes(self._words, value._words)
        return -comparison if self._negative else comparison

    def equal_value(self, value: object) -> bool:
        """Численное равенство с int, MutableInfiniteInteger или InfiniteInteger."""
        return self.compare_to(value) == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MutableInfiniteInteger):
            return NotImplemented
        if not self.is_finite() or not other.is_finite():
            return self is other
        return self._negative == other._negative and self._words == other._words

    __hash__ = None

    def _comparable(self, other: object) -> bool:
        return isinstance(other, (MutableInfiniteInteger, int)) or hasattr(
            other, "to_mutable_infinite_integer"
        )

    def __lt__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.compare_to(other) >= 0

    # =========================================================================
    # NATIVE PROJECTIONS
    # =========================================================================

    def int_value(self) -> int:
        """
        Младшие 31 бит величины со знаком.

        Raises:
            ArithmeticUndefinedError: Для sentinel
        """
        if not self.is_finite():
            raise ArithmeticUndefinedError(f"{self} can't be even partially represented as an int.")
        value = self._words[0] & 0x7FFFFFFF
        return -value if self._negative else value

    def long_value(self) -> int:
        """
        Младшие 63 бит величины со знаком.

        Raises:
            ArithmeticUndefinedError: Для sentinel
        """
        if not self.is_finite():
            raise ArithmeticUndefinedError(f"{self} can't be even partially represented as a long.")
        value = to_native(self._words[:2]) & SIGNED_LONG_MAX
        return -value if self._negative else value

    def long_value_exact(self) -> int:
        """
        Значение как signed 64-bit (|self| <= 2^63 - 1).

        Raises:
            ArithmeticUndefinedError: Для sentinel и значений вне диапазона
        """
        if not self.is_finite():
            raise ArithmeticUndefinedError(f"{self} can't be represented as a long.")
        if len(self._words) > 2:
            raise ArithmeticUndefinedError(f"{self} is too large to be represented as a long.")
        if not fits_signed_long(self._words):
            raise ArithmeticUndefinedError(
                f"{self} is too large to be represented as a signed long."
            )
        return self.long_value()

    def __int__(self) -> int:
        if not self.is_finite():
            raise ArithmeticUndefinedError(f"{self} can't be represented as an int.")
        value = to_native(self._words)
        return -value if self._negative else value

    def __float__(self) -> float:
        if self.is_nan():
            return math.nan
        if self.is_infinite():
            return math.inf if self._kind is NumberKind.POSITIVE_INFINITY else -math.inf
        try:
            return float(int(self))
        except OverflowError:
            return -math.inf if self._negative else math.inf

    # =========================================================================
    # TEXT AND PAYLOAD
    # =========================================================================

    def to_string(self, radix: int = 10, config: RadixConfig | None = None) -> str:
        """
        Текстовая запись в основании radix.

        Sentinel-значения выводятся как "∞", "-∞", "∉ℤ" в любом основании.

        Raises:
            InvalidRadixError: Основание вне [1, 62]
            WillNotFitError: Запись длиннее max_string_length

        Examples:
            >>> MutableInfiniteInteger(255).to_string(16)
            'ff'
        """
        enforce_standard_radix(radix)
        if self._kind is NumberKind.POSITIVE_INFINITY:
            return POSITIVE_INFINITY_GLYPH
        if self._kind is NumberKind.NEGATIVE_INFINITY:
            return NEGATIVE_INFINITY_GLYPH
        if self.is_nan():
            return NAN_GLYPH
        return render_magnitude(self._words, self._negative, radix, self.__str__, config)

    def __str__(self) -> str:
        if self._kind is NumberKind.POSITIVE_INFINITY:
            return POSITIVE_INFINITY_NAME
        if self._kind is NumberKind.NEGATIVE_INFINITY:
            return NEGATIVE_INFINITY_NAME
        if self.is_nan():
            return NAN_NAME
        return render_debug(self._words, self._negative)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"

    def to_debugging_string(self) -> str:
        """Знак и шестнадцатеричные слова: "+ 5, 2, " для 2^33 + 5."""
        if self._kind is NumberKind.POSITIVE_INFINITY:
            return "+Infinity"
        if self._kind is NumberKind.NEGATIVE_INFINITY:
            return NEGATIVE_INFINITY_NAME
        if self.is_nan():
            return NAN_NAME
        return render_word_dump(self._words, self._negative)

    def to_payload(self) -> InfiniteIntegerPayload:
        """JSON-форма значения."""
        if not self.is_finite():
            return InfiniteIntegerPayload(kind=self._kind)
        return InfiniteIntegerPayload(
            kind=self._kind, negative=self._negative, words=list(self._words)
        )

    def to_infinite_integer(self) -> "InfiniteInteger":
        """Неизменяемая копия значения."""
        from src.core.domain.infinite_integer import InfiniteInteger

        return InfiniteInteger.value_of(self)


MutableInfiniteInteger.NaN = MutableInfiniteInteger._sentinel(NumberKind.NAN)
MutableInfiniteInteger.POSITIVE_INFINITY = MutableInfiniteInteger._sentinel(
    NumberKind.POSITIVE_INFINITY
)
MutableInfiniteInteger.NEGATIVE_INFINITY = MutableInfiniteInteger._sentinel(
    NumberKind.NEGATIVE_INFINITY
)
