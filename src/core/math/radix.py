"""
Radix Codec — текстовая форма величин в основаниях 1..62

Рендеринг и разбор величин (word chains) со знаком. Sentinel-глифы
распознаются и выводятся уровнем MutableInfiniteInteger; модуль
предоставляет глифы как константы.

Модуль обеспечивает:
- Проверку основания (enforce_standard_radix)
- Native-рендеринг значений в пределах signed 64-bit, включая unary (radix 1)
- Быстрый путь для оснований-степеней двойки (пословный рендеринг, если
  ширина цифры делит WORD_BITS, иначе группы бит через границы слов)
- Общий путь повторным делением на основание
- Отладочный рендеринг с усечением после DEBUG_DIGIT_LIMIT цифр
- Разбор строки с проверкой грамматики и цифр основания

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждое добавление в строку проверяет оставшуюся ёмкость
2. Ошибка ёмкости — WillNotFitError, ошибка формата — IntegerFormatError
3. parse(render(x, r), r) == x для всех r в [2, 62]
"""

import logging
import re
from dataclasses import dataclass
from collections.abc import Callable, Iterator
from typing import Final, Union

from src.core.math.division import DivisionConfig, divide_magnitudes
from src.core.math.errors import IntegerFormatError, InvalidRadixError, WillNotFitError
from src.core.math.words import (
    WORD_BITS,
    WORD_MASK,
    add_above,
    bit_length,
    fits_signed_long,
    from_native,
    is_zero,
    multiply_by_word,
    shift_left,
    to_native,
    trim,
)

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Допустимый диапазон оснований
MIN_RADIX: Final[int] = 1
MAX_RADIX: Final[int] = 62

# Алфавит цифр: 0-9, затем строчные, затем прописные буквы
DIGITS: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

# До этого основания включительно буквы разбираются без учёта регистра
CASE_INSENSITIVE_MAX_RADIX: Final[int] = 36

# Максимальная длина строки результата по умолчанию
MAX_STRING_LENGTH: Final[int] = 2**31 - 1

# Число младших десятичных цифр в отладочном рендеринге
DEBUG_DIGIT_LIMIT: Final[int] = 20

# Маркер усечения отладочного рендеринга
ELLIPSIS: Final[str] = "…"

# Глифы sentinel-значений для to_string(radix)
POSITIVE_INFINITY_GLYPH: Final[str] = "∞"
NEGATIVE_INFINITY_GLYPH: Final[str] = "-∞"
NAN_GLYPH: Final[str] = "∉ℤ"

# Имена sentinel-значений для str()
POSITIVE_INFINITY_NAME: Final[str] = "Infinity"
NEGATIVE_INFINITY_NAME: Final[str] = "-Infinity"
NAN_NAME: Final[str] = "NaN"

# Грамматика записи целого (radix > 1)
_INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[+-]?[a-zA-Z0-9]+$")

# Описание значения для сообщений об ошибке ёмкости: строка или отложенный вызов
Subject = Union[str, Callable[[], str]]


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class RadixConfig:
    """
    Конфигурация текстового кодека.

    Attributes:
        max_string_length: Предел длины строки результата
        debug_digit_limit: Число цифр до усечения в str()
    """

    max_string_length: int = MAX_STRING_LENGTH
    debug_digit_limit: int = DEBUG_DIGIT_LIMIT

    def __post_init__(self) -> None:
        if self.max_string_length <= 0:
            raise ValueError(
                f"max_string_length must be positive, got {self.max_string_length}"
            )
        if self.debug_digit_limit <= 0:
            raise ValueError(
                f"debug_digit_limit must be positive, got {self.debug_digit_limit}"
            )


DEFAULT_RADIX_CONFIG: Final[RadixConfig] = RadixConfig()


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def enforce_standard_radix(radix: int) -> None:
    """
    Проверяет основание.

    Raises:
        InvalidRadixError: Если radix вне [MIN_RADIX, MAX_RADIX]
    """
    if radix < MIN_RADIX or radix > MAX_RADIX:
        raise InvalidRadixError(
            f"radix must be in [{MIN_RADIX}, {MAX_RADIX}], got {radix}"
        )


def digit_value(character: str, radix: int) -> int | None:
    """
    Значение цифры в основании radix или None, если символ не цифра.

    Examples:
        >>> digit_value("f", 16)
        15
        >>> digit_value("F", 16)
        15
        >>> digit_value("F", 62)
        41
        >>> digit_value("g", 16) is None
        True
    """
    if radix <= CASE_INSENSITIVE_MAX_RADIX:
        character = character.lower()
    value = DIGITS.find(character)
    if value < 0 or value >= radix:
        return None
    return value


def power_of_two_exponent(radix: int) -> int | None:
    """Показатель k для radix = 2^k (k >= 1), иначе None."""
    if radix < 2 or radix & (radix - 1):
        return None
    return radix.bit_length() - 1


def word_digit_width(radix: int) -> int:
    """Число цифр максимального слова (0xFFFFFFFF) в основании radix."""
    width = 0
    remaining = WORD_MASK
    while remaining:
        remaining //= radix
        width += 1
    return width


def describe_subject(subject: Subject) -> str:
    """Текст описания значения; отложенное описание вычисляется здесь."""
    return subject() if callable(subject) else subject


def power_of_two_digits(words: list[int], exponent: int) -> Iterator[int]:
    """
    Цифры основания 2^exponent от младшей к старшей.

    Группа из exponent бит может пересекать границу слов (radix 8, 32),
    тогда старшие биты группы берутся из следующего слова.

    Examples:
        >>> list(power_of_two_digits([0, 0, 1], 3))[-2:]
        [0, 2]
    """
    mask = (1 << exponent) - 1
    for offset in range(0, bit_length(words), exponent):
        index, shift = divmod(offset, WORD_BITS)
        group = words[index] >> shift
        if shift + exponent > WORD_BITS and index + 1 < len(words):
            group |= words[index + 1] << (WORD_BITS - shift)
        yield group & mask


class BoundedStringBuilder:
    """
    Построитель строки с проверкой ёмкости на каждом добавлении.

    Args:
        max_length: Предел длины результата
        overflow_subject: Описание рендеринга для сообщения об ошибке;
            вызываемый объект вычисляется только при переполнении
    """

    def __init__(self, max_length: int, overflow_subject: Subject) -> None:
        self._parts: list[str] = []
        self._length = 0
        self._max_length = max_length
        self._overflow_subject = overflow_subject

    def __len__(self) -> int:
        return self._length

    def append(self, text: str) -> "BoundedStringBuilder":
        if len(text) > self._max_length - self._length:
            logger.debug(
                "Render capacity exceeded: %d + %d > %d",
                self._length,
                len(text),
                self._max_length,
            )
            raise WillNotFitError(
                f"{describe_subject(self._overflow_subject)} would exceed max string length."
            )
        self._parts.append(text)
        self._length += len(text)
        return self

    def build(self, reverse: bool = False) -> str:
        text = "".join(self._parts)
        return text[::-1] if reverse else text


# =============================================================================
# РЕНДЕРИНГ
# =============================================================================


def native_to_string(value: int, radix: int, config: RadixConfig | None = None) -> str:
    """
    Рендеринг native-значения (в пределах signed 64-bit).

    Radix 1 — unary: символ "1" повторяется |value| раз, ноль — пустая строка.

    Raises:
        WillNotFitError: Если unary-запись длиннее max_string_length
    """
    if config is None:
        config = DEFAULT_RADIX_CONFIG
    sign = "-" if value < 0 else ""
    magnitude = abs(value)

    if radix == 1:
        if magnitude + len(sign) > config.max_string_length:
            raise WillNotFitError(f"{value} in base 1 would exceed max string length.")
        return sign + "1" * magnitude

    if magnitude == 0:
        return "0"
    digits = []
    while magnitude:
        magnitude, digit = divmod(magnitude, radix)
        digits.append(DIGITS[digit])
    return sign + "".join(reversed(digits))


def render_magnitude(
    words: list[int],
    negative: bool,
    radix: int,
    subject: Subject,
    config: RadixConfig | None = None,
    division_config: DivisionConfig | None = None,
) -> str:
    """
    Рендеринг величины со знаком в основании radix.

    Args:
        words: Величина
        negative: Знак (игнорируется для нуля)
        radix: Основание [1, 62]
        subject: Описание значения для сообщений об ошибке ёмкости (строка
            или вызываемый объект, вычисляемый только при ошибке)
        config: Конфигурация кодека
        division_config: Конфигурация деления для общего пути

    Raises:
        InvalidRadixError: Основание вне диапазона
        WillNotFitError: Превышена ёмкость строки
    """
    enforce_standard_radix(radix)
    if config is None:
        config = DEFAULT_RADIX_CONFIG

    def overflow_subject() -> str:
        return f"{describe_subject(subject)} in base {radix}"

    if fits_signed_long(words):
        native = to_native(words)
        text = native_to_string(-native if negative else native, radix, config)
        return BoundedStringBuilder(config.max_string_length, overflow_subject).append(text).build()
    if radix == 1:
        raise WillNotFitError(f"{overflow_subject()} would exceed max string length.")

    builder = BoundedStringBuilder(config.max_string_length, overflow_subject)
    exponent = power_of_two_exponent(radix)

    if exponent is not None and WORD_BITS % exponent == 0:
        width = word_digit_width(radix)
        if negative:
            builder.append("-")
        builder.append(native_to_string(words[-1], radix, config))
        for word in reversed(words[:-1]):
            builder.append(native_to_string(word, radix, config).rjust(width, "0"))
        return builder.build()

    if exponent is not None:
        for digit in power_of_two_digits(words, exponent):
            builder.append(DIGITS[digit])
        if negative:
            builder.append("-")
        return builder.build(reverse=True)

    remaining = words[:]
    radix_words = [radix]
    while not is_zero(remaining):
        remaining, digit = divide_magnitudes(remaining, radix_words, division_config)
        builder.append(DIGITS[digit[0]])
    if negative:
        builder.append("-")
    return builder.build(reverse=True)


def render_debug(
    words: list[int],
    negative: bool,
    config: RadixConfig | None = None,
    division_config: DivisionConfig | None = None,
) -> str:
    """
    Десятичный рендеринг, который никогда не падает.

    Значения шире signed 64-bit показываются последними debug_digit_limit
    цифрами с ведущим ELLIPSIS (после знака минус).

    Examples:
        >>> render_debug([0xFFFFFFFF, 0xFFFFFFFF, 0xFF], False)
        '…22366482869645213695'
    """
    if config is None:
        config = DEFAULT_RADIX_CONFIG
    if fits_signed_long(words):
        native = to_native(words)
        return str(-native if negative else native)

    digits = []
    remaining = words[:]
    radix_words = [10]
    while not is_zero(remaining) and len(digits) < config.debug_digit_limit:
        remaining, digit = divide_magnitudes(remaining, radix_words, division_config)
        digits.append(DIGITS[digit[0]])

    prefix = "-" if negative else ""
    if not is_zero(remaining):
        prefix += ELLIPSIS
    return prefix + "".join(reversed(digits))


def render_word_dump(words: list[int], negative: bool) -> str:
    """
    Отладочный дамп слов: знак и шестнадцатеричные слова от младшего.

    Examples:
        >>> render_word_dump([5, 2], False)
        '+ 5, 2, '
    """
    parts = ["- " if negative else "+ "]
    for word in words:
        parts.append(f"{word:X}, ")
    return "".join(parts)


# =============================================================================
# РАЗБОР
# =============================================================================


def _parse_unary(text: str) -> tuple[bool, list[int]]:
    negative = text.startswith("-")
    body = text[1:] if text[:1] in ("+", "-") else text
    if body.strip("1"):
        raise IntegerFormatError(f"{text!r} is not a valid base 1 integer")
    magnitude = from_native(len(body))
    return negative and not is_zero(magnitude), magnitude


def parse_magnitude(text: str, radix: int) -> tuple[bool, list[int]]:
    """
    Разбор записи целого в основании radix: (negative, words).

    Текст должен быть уже очищен от пробелов; sentinel-глифы разбираются
    вызывающим уровнем. Radix 1 принимает только символы "1" (ноль — пустая
    строка). Для остальных оснований текст должен соответствовать
    ^[+-]?[a-zA-Z0-9]+$ и содержать только цифры основания.

    Raises:
        InvalidRadixError: Основание вне диапазона
        IntegerFormatError: Текст не является целым в этом основании

    Examples:
        >>> parse_magnitude("0a0", 16)
        (False, [160])
        >>> parse_magnitude("-0", 10)
        (False, [0])
    """
    enforce_standard_radix(radix)
    if radix == 1:
        return _parse_unary(text)
    if not _INTEGER_PATTERN.match(text):
        raise IntegerFormatError(f"{text!r} is not a valid base {radix} integer")

    negative = text[0] == "-"
    body = text[1:] if text[0] in "+-" else text
    exponent = power_of_two_exponent(radix)

    words = [0]
    for character in body:
        digit = digit_value(character, radix)
        if digit is None:
            raise IntegerFormatError(f"{text!r} is not a valid base {radix} integer")
        if exponent is not None:
            shift_left(words, exponent)
            words[0] |= digit
        else:
            words = multiply_by_word(words, radix)
            add_above(words, [digit])

    trim(words)
    return negative and not is_zero(words), words

