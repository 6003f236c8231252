"""
Word Chain — примитивы величины (magnitude) бесконечного целого

Величина хранится как list[int] беззнаковых 32-bit слов, младшее слово первым
(little-endian). Все функции модуля работают только с величинами: знак и
sentinel-значения (NaN/±∞) обрабатываются на уровне MutableInfiniteInteger.

Модуль обеспечивает:
- Сложение с переносом (add_above) и вычитание с заёмом (subtract_smaller)
- Школьное умножение (multiply_by_word, multiply_magnitudes)
- Сдвиги на степень двойки (shift_left, shift_right)
- Сравнение, длину в битах, проверки чётности и степени двойки

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждое слово в диапазоне [0, 2^32 - 1]
2. Старшее слово ненулевое, кроме самого нуля, который равен [0]
3. Пустой список никогда не возвращается
4. Функции, помеченные (in place), мутируют первый аргумент и возвращают его
"""

from typing import Final

# =============================================================================
# ПАРАМЕТРЫ СЛОВА
# =============================================================================

# Ширина одного слова величины в битах
WORD_BITS: Final[int] = 32

# Маска слова (максимальное значение беззнакового слова)
WORD_MASK: Final[int] = 0xFFFFFFFF

# Основание позиционной системы слов (2^32)
WORD_BASE: Final[int] = 1 << WORD_BITS

# Максимальное значение signed 64-bit (граница native-делегирования)
SIGNED_LONG_MAX: Final[int] = (1 << 63) - 1


# =============================================================================
# НОРМАЛИЗАЦИЯ И КОНВЕРСИЯ
# =============================================================================


def trim(words: list[int]) -> list[int]:
    """
    Удаляет ведущие нулевые слова (in place).

    Args:
        words: Величина, возможно с ведущими нулями

    Returns:
        Тот же список без ведущих нулей ([0] для нуля)
    """
    while len(words) > 1 and words[-1] == 0:
        words.pop()
    if not words:
        words.append(0)
    return words


def is_zero(words: list[int]) -> bool:
    return len(words) == 1 and words[0] == 0


def is_one(words: list[int]) -> bool:
    return len(words) == 1 and words[0] == 1


def is_even(words: list[int]) -> bool:
    return words[0] & 1 == 0


def from_native(value: int) -> list[int]:
    """
    Разбивает абсолютное значение native int на 32-bit слова.

    Знак value игнорируется: возвращается величина |value|.

    Examples:
        >>> from_native(8589934597)
        [5, 2]
        >>> from_native(-1)
        [1]
    """
    remaining = abs(value)
    words = [remaining & WORD_MASK]
    remaining >>= WORD_BITS
    while remaining:
        words.append(remaining & WORD_MASK)
        remaining >>= WORD_BITS
    return words


def to_native(words: list[int]) -> int:
    """Собирает величину обратно в неотрицательный native int."""
    value = 0
    for word in reversed(words):
        value = (value << WORD_BITS) | word
    return value


def fits_signed_long(words: list[int]) -> bool:
    """
    Проверяет, что величина представима в signed 64-bit (|v| <= 2^63 - 1).

    Используется для выбора native-делегирования в делении, sqrt и рендеринге.
    """
    return len(words) <= 2 and to_native(words) <= SIGNED_LONG_MAX


# =============================================================================
# СРАВНЕНИЕ И БИТОВЫЕ СВОЙСТВА
# =============================================================================


def compare_magnitudes(left: list[int], right: list[int]) -> int:
    """
    Сравнивает две нормализованные величины.

    Сначала по числу слов, затем пословно от старшего к младшему.

    Returns:
        -1 если left < right, 0 если равны, 1 если left > right
    """
    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1
    for index in range(len(left) - 1, -1, -1):
        if left[index] != right[index]:
            return -1 if left[index] < right[index] else 1
    return 0


def bit_length(words: list[int]) -> int:
    """Число значащих бит величины (0 для нуля)."""
    return (len(words) - 1) * WORD_BITS + words[-1].bit_length()


def trailing_zero_bits(word: int) -> int:
    """Число младших нулевых бит одного слова (WORD_BITS для нулевого слова)."""
    if word == 0:
        return WORD_BITS
    return (word & -word).bit_length() - 1


def trailing_zero_count(words: list[int]) -> int:
    """Число младших нулевых бит всей величины (0 для нуля)."""
    if is_zero(words):
        return 0
    count = 0
    for word in words:
        if word != 0:
            return count + trailing_zero_bits(word)
        count += WORD_BITS
    return count


def is_power_of_two(words: list[int]) -> bool:
    """
    Проверяет, является ли величина степенью двойки.

    Все слова кроме старшего должны быть нулевыми, а старшее иметь один бит.
    Ноль считается степенью двойки (как и в битовой проверке x & (x - 1)).
    """
    for word in words[:-1]:
        if word != 0:
            return False
    top = words[-1]
    return top & (top - 1) == 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add_above(target: list[int], addend: list[int], start: int = 0) -> list[int]:
    """
    Прибавляет addend к target начиная со слова start (in place).

    Перенос распространяется вверх; при исчерпании цепочки добавляются новые
    слова. Сумма двух слов и переноса не превышает 2^33, поэтому перенос
    всегда равен 0 или 1.

    Args:
        target: Мутируемая величина
        addend: Прибавляемая величина (не мутируется)
        start: Смещение в словах (addend * 2^(32 * start))

    Returns:
        target после нормализации
    """
    if start < 0:
        raise ValueError(f"start must be non-negative, got {start}")

    while len(target) < start:
        target.append(0)

    carry = 0
    index = start
    addend_index = 0
    while addend_index < len(addend) or carry:
        if index == len(target):
            target.append(0)
        total = target[index] + carry
        if addend_index < len(addend):
            total += addend[addend_index]
            addend_index += 1
        target[index] = total & WORD_MASK
        carry = total >> WORD_BITS
        index += 1

    return trim(target)


def subtract_smaller(minuend: list[int], subtrahend: list[int]) -> list[int]:
    """
    Вычитает меньшую величину из большей (in place).

    Заём распространяется вверх: при отрицательной разности слова к ней
    прибавляется 2^32 и из следующего слова вычитается 1.

    Args:
        minuend: Уменьшаемое (мутируется), должно быть >= subtrahend
        subtrahend: Вычитаемое

    Returns:
        minuend после нормализации

    Raises:
        ValueError: Если minuend < subtrahend
    """
    if compare_magnitudes(minuend, subtrahend) < 0:
        raise ValueError("minuend must be greater than or equal to subtrahend")

    borrow = 0
    for index in range(len(minuend)):
        if index >= len(subtrahend) and not borrow:
            break
        difference = minuend[index] - borrow
        if index < len(subtrahend):
            difference -= subtrahend[index]
        if difference < 0:
            difference += WORD_BASE
            borrow = 1
        else:
            borrow = 0
        minuend[index] = difference

    return trim(minuend)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_by_word(words: list[int], word: int) -> list[int]:
    """Умножает величину на одно слово; возвращает новую величину."""
    if word == 0 or is_zero(words):
        return [0]

    product = []
    carry = 0
    for current in words:
        total = current * word + carry
        product.append(total & WORD_MASK)
        carry = total >> WORD_BITS
    if carry:
        product.append(carry)
    return product


def multiply_magnitudes(left: list[int], right: list[int]) -> list[int]:
    """
    Школьное умножение величин; возвращает новую величину.

    Каждое слово right масштабирует left, частичное произведение
    прибавляется к накопителю со смещением на позицию слова.
    """
    if is_zero(left) or is_zero(right):
        return [0]

    result = [0]
    for offset, word in enumerate(right):
        if word == 0:
            continue
        add_above(result, multiply_by_word(left, word), offset)
    return result


# =============================================================================
# СДВИГИ НА СТЕПЕНЬ ДВОЙКИ
# =============================================================================


def shift_left(words: list[int], bit_count: int) -> list[int]:
    """
    Умножает величину на 2^bit_count (in place).

    Сначала сдвиг на целые слова, затем побитовый сдвиг внутри слов с
    переносом вытесненных бит в соседнее старшее слово.
    """
    if bit_count < 0:
        raise ValueError(f"bit_count must be non-negative, got {bit_count}")
    if bit_count == 0 or is_zero(words):
        return words

    word_shift, bit_shift = divmod(bit_count, WORD_BITS)
    if word_shift:
        words[:0] = [0] * word_shift

    if bit_shift:
        overflow = 0
        for index in range(word_shift, len(words)):
            shifted = (words[index] << bit_shift) | overflow
            words[index] = shifted & WORD_MASK
            overflow = shifted >> WORD_BITS
        if overflow:
            words.append(overflow)

    return words


def shift_right(words: list[int], bit_count: int) -> list[int]:
    """
    Делит величину на 2^bit_count с отбрасыванием остатка (in place).

    Вытесненные младшие биты теряются; при сдвиге за пределы цепочки
    результат равен нулю.
    """
    if bit_count < 0:
        raise ValueError(f"bit_count must be non-negative, got {bit_count}")
    if bit_count == 0:
        return words

    word_shift, bit_shift = divmod(bit_count, WORD_BITS)
    if word_shift >= len(words):
        words[:] = [0]
        return words
    if word_shift:
        del words[:word_shift]

    if bit_shift:
        low_mask = (1 << bit_shift) - 1
        for index in range(len(words)):
            words[index] >>= bit_shift
            if index + 1 < len(words):
                words[index] |= (words[index + 1] & low_mask) << (WORD_BITS - bit_shift)

    return trim(words)


def strip_common_trailing_zeros(left: list[int], right: list[int]) -> int:
    """
    Убирает общие младшие нули двух ненулевых величин (in place).

    Сначала целые нулевые слова, затем общие нулевые биты младшего слова.

    Returns:
        Количество снятых бит (оба значения поделены на 2^result)
    """
    shift = 0
    while left[0] == 0 and right[0] == 0 and len(left) > 1 and len(right) > 1:
        del left[0]
        del right[0]
        shift += WORD_BITS

    common_bits = min(trailing_zero_bits(left[0]), trailing_zero_bits(right[0]))
    if 0 < common_bits < WORD_BITS:
        shift_right(left, common_bits)
        shift_right(right, common_bits)
        shift += common_bits

    return shift
