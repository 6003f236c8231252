"""
Stream Form — персистентная байтовая форма бесконечного целого

Формат:
- Байт тега: 1 = NaN, 2 = +∞, 3 = -∞, 4 = конечное отрицательное,
  5 = конечное неотрицательное
- Для конечных: блоки слов. Каждый блок — байт-счётчик (1..255) и столько же
  32-bit слов (big-endian байты в слове, младшее слово первым).
  Нулевой счётчик завершает величину.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. read(write(x)) == x для всех значений, включая sentinel
2. Обрезанный поток или неизвестный тег — IntegerFormatError
3. Sentinel восстанавливаются как те же singletons
"""

import io
import struct
from typing import BinaryIO, Final

from src.core.domain.mutable_infinite_integer import MutableInfiniteInteger
from src.core.math.errors import IntegerFormatError
from src.core.math.special_cases import NumberKind

# =============================================================================
# КОНСТАНТЫ ФОРМАТА
# =============================================================================

TAG_NAN: Final[int] = 1
TAG_POSITIVE_INFINITY: Final[int] = 2
TAG_NEGATIVE_INFINITY: Final[int] = 3
TAG_FINITE_NEGATIVE: Final[int] = 4
TAG_FINITE_POSITIVE: Final[int] = 5

# Максимум слов в одном блоке (счётчик занимает один байт)
MAX_CHUNK_WORDS: Final[int] = 255

_WORD: Final[struct.Struct] = struct.Struct(">I")

_SENTINEL_TAGS: Final[dict[NumberKind, int]] = {
    NumberKind.NAN: TAG_NAN,
    NumberKind.POSITIVE_INFINITY: TAG_POSITIVE_INFINITY,
    NumberKind.NEGATIVE_INFINITY: TAG_NEGATIVE_INFINITY,
}


# =============================================================================
# ЗАПИСЬ
# =============================================================================


def write_infinite_integer(value: MutableInfiniteInteger, stream: BinaryIO) -> None:
    """
    Записывает значение в бинарный поток.

    Args:
        value: Значение (MutableInfiniteInteger или InfiniteInteger)
        stream: Поток с методом write(bytes)
    """
    tag = _SENTINEL_TAGS.get(value.kind)
    if tag is not None:
        stream.write(bytes([tag]))
        return

    stream.write(bytes([TAG_FINITE_NEGATIVE if value.signum() < 0 else TAG_FINITE_POSITIVE]))
    words = list(value.iter_magnitude())
    for start in range(0, len(words), MAX_CHUNK_WORDS):
        chunk = words[start : start + MAX_CHUNK_WORDS]
        stream.write(bytes([len(chunk)]))
        for word in chunk:
            stream.write(_WORD.pack(word))
    stream.write(bytes([0]))


def to_bytes(value: MutableInfiniteInteger) -> bytes:
    """Байтовая форма значения."""
    buffer = io.BytesIO()
    write_infinite_integer(value, buffer)
    return buffer.getvalue()


# =============================================================================
# ЧТЕНИЕ
# =============================================================================


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise IntegerFormatError(
            f"unexpected end of stream: expected {size} bytes, got {len(data)}"
        )
    return data


def read_infinite_integer(stream: BinaryIO) -> MutableInfiniteInteger:
    """
    Читает одно значение из бинарного потока.

    Returns:
        Новое MutableInfiniteInteger или sentinel singleton

    Raises:
        IntegerFormatError: Неизвестный тег, пустая величина или обрезанный поток
    """
    tag = _read_exact(stream, 1)[0]
    if tag == TAG_NAN:
        return MutableInfiniteInteger.NaN
    if tag == TAG_POSITIVE_INFINITY:
        return MutableInfiniteInteger.POSITIVE_INFINITY
    if tag == TAG_NEGATIVE_INFINITY:
        return MutableInfiniteInteger.NEGATIVE_INFINITY
    if tag not in (TAG_FINITE_NEGATIVE, TAG_FINITE_POSITIVE):
        raise IntegerFormatError(f"unknown infinite integer tag {tag}")

    words = []
    count = _read_exact(stream, 1)[0]
    while count:
        for _ in range(count):
            words.append(_WORD.unpack(_read_exact(stream, _WORD.size))[0])
        count = _read_exact(stream, 1)[0]
    if not words:
        raise IntegerFormatError("finite infinite integer must carry at least one word")

    return MutableInfiniteInteger.from_words(words, tag == TAG_FINITE_NEGATIVE)


def from_bytes(data: bytes) -> MutableInfiniteInteger:
    """
    Значение из байтовой формы; лишние байты после значения — ошибка.

    Raises:
        IntegerFormatError: Некорректная или обрезанная форма
    """
    buffer = io.BytesIO(data)
    value = read_infinite_integer(buffer)
    trailing = len(data) - buffer.tell()
    if trailing:
        raise IntegerFormatError(f"{trailing} trailing bytes after infinite integer")
    return value
