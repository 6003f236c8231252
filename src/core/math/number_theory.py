"""
Number Theory — GCD, LCM, простота и целочисленный корень над величинами

Все функции принимают неотрицательные величины (word chains) и не мутируют
аргументы. Соглашения для sentinel-значений и нуля (gcd(0, 0) = +∞,
lcm с нулём = NaN, простота 1) реализуются в MutableInfiniteInteger.

Алгоритмы:
- gcd_magnitudes: снятие общих степеней двойки, затем пробное деление
  нечётными кандидатами, ограниченное сжимающимся корнем факторизуемого
  операнда
- lcm_magnitudes: "гонка решёт" — два кратных шагают своим шагом до совпадения
- is_prime_magnitude: курсоры решета, по одному на найденное простое,
  шагают через 2p
- sqrt_ceil_magnitude: оценка по длине в битах и уточнение бисекцией

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gcd делит оба операнда и является наибольшим таким делителем
2. lcm кратно обоим операндам и является наименьшим таким кратным
3. sqrt_ceil(n)^2 >= n и (sqrt_ceil(n) - 1)^2 < n
"""

import logging
import math
from typing import Final

from src.core.math.division import DivisionConfig, divide_magnitudes
from src.core.math.words import (
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
    strip_common_trailing_zeros,
    subtract_smaller,
    to_native,
    trailing_zero_count,
)

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Разрыв бисекции корня, ниже которого уточнение идёт линейно
SQRT_LINEAR_PROBE_GAP: Final[int] = 4


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЙ КОРЕНЬ
# =============================================================================


def estimate_sqrt(words: list[int]) -> list[int]:
    """
    Грубая оценка корня сверху по длине в битах.

    Число бит округляется вверх до чётного и делится пополам: оценка равна
    2^(bits / 2). Для степени двойки с нечётным числом бит (2^(2k)) оценка
    делится на 2 и становится точной.

    Examples:
        >>> estimate_sqrt([4])
        [2]
        >>> estimate_sqrt([100])
        [16]
    """
    if compare_magnitudes(words, [1]) <= 0:
        return words[:]
    if compare_magnitudes(words, [4]) <= 0:
        return [2]

    binary_digits = bit_length(words)
    is_odd = binary_digits % 2 == 1
    if is_odd:
        binary_digits += 1

    estimation = shift_left([1], binary_digits // 2)
    if is_odd and is_power_of_two(words):
        shift_right(estimation, 1)
    return estimation


def sqrt_ceil_magnitude(words: list[int]) -> list[int]:
    """
    Потолок квадратного корня: наименьшее r, для которого r^2 >= words.

    Значения в пределах signed 64-bit делегируются math.isqrt; остальные
    уточняются бисекцией между оценкой и её половиной.
    """
    if fits_signed_long(words):
        value = to_native(words)
        root = math.isqrt(value)
        if root * root < value:
            root += 1
        return from_native(root)

    higher = estimate_sqrt(words)
    if compare_magnitudes(multiply_magnitudes(higher, higher), words) == 0:
        return higher

    lower = shift_right(higher[:], 1)
    while True:
        gap = subtract_smaller(higher[:], lower)
        if compare_magnitudes(gap, [SQRT_LINEAR_PROBE_GAP]) < 0:
            break
        midpoint = add_above(lower[:], shift_right(gap, 1))
        comparison = compare_magnitudes(multiply_magnitudes(midpoint, midpoint), words)
        if comparison == 0:
            return midpoint
        if comparison > 0:
            higher = midpoint
        else:
            lower = midpoint

    while compare_magnitudes(multiply_magnitudes(lower, lower), words) < 0:
        add_above(lower, [1])
    return lower


# =============================================================================
# GCD / LCM
# =============================================================================


def gcd_magnitudes(
    left: list[int],
    right: list[int],
    config: DivisionConfig | None = None,
) -> list[int]:
    """
    Наибольший общий делитель двух величин, не равных нулю одновременно.

    Args:
        left: Первая величина
        right: Вторая величина
        config: Конфигурация деления

    Returns:
        Новая величина gcd

    Raises:
        ValueError: Если обе величины равны нулю

    Examples:
        >>> gcd_magnitudes([12], [10])
        [2]
        >>> gcd_magnitudes([26], [39])
        [13]
    """
    if is_zero(left) and is_zero(right):
        raise ValueError("gcd of two zero magnitudes is not a finite value")
    if is_zero(left):
        return right[:]
    if is_zero(right):
        return left[:]
    if is_one(left) or is_one(right):
        return [1]

    comparison = compare_magnitudes(left, right)
    if comparison == 0:
        return left[:]
    bigger, smaller = (left, right) if comparison > 0 else (right, left)

    _, remainder = divide_magnitudes(bigger, smaller, config)
    if is_zero(remainder):
        return smaller[:]

    logger.debug("gcd trial division: %d-word and %d-word operands", len(bigger), len(smaller))

    other = bigger[:]
    factored = smaller[:]
    common_shift = strip_common_trailing_zeros(other, factored)
    # после снятия общих двоек хотя бы один операнд нечётный
    shift_right(other, trailing_zero_count(other))
    shift_right(factored, trailing_zero_count(factored))

    divisor = [1]
    root = sqrt_ceil_magnitude(factored)
    candidate = [3]
    while (
        not is_one(factored)
        and compare_magnitudes(candidate, root) <= 0
        and compare_magnitudes(candidate, other) <= 0
    ):
        whole, remainder = divide_magnitudes(factored, candidate, config)
        if not is_zero(remainder):
            add_above(candidate, [2])
            continue

        factored = whole
        root = sqrt_ceil_magnitude(factored)
        whole, remainder = divide_magnitudes(other, candidate, config)
        if is_zero(remainder):
            other = whole
            divisor = multiply_magnitudes(divisor, candidate)

    # остаток factored равен 1 или простому больше всех проверенных кандидатов
    if not is_one(factored):
        _, remainder = divide_magnitudes(other, factored, config)
        if is_zero(remainder):
            divisor = multiply_magnitudes(divisor, factored)

    return shift_left(divisor, common_shift)


def lcm_magnitudes(left: list[int], right: list[int]) -> list[int]:
    """
    Наименьшее общее кратное двух ненулевых величин ("гонка решёт").

    Меньшее из двух текущих кратных увеличивается на свой шаг, пока кратные
    не совпадут. Время работы растёт с отношением операндов.

    Raises:
        ValueError: Если одна из величин равна нулю
    """
    if is_zero(left) or is_zero(right):
        raise ValueError("lcm operands must be non-zero")
    if is_one(left):
        return right[:]
    if is_one(right):
        return left[:]
    if compare_magnitudes(left, right) == 0:
        return left[:]

    logger.debug("lcm racing sieve: %d-word and %d-word operands", len(left), len(right))

    left_multiple = left[:]
    right_multiple = right[:]
    while True:
        comparison = compare_magnitudes(left_multiple, right_multiple)
        if comparison == 0:
            return left_multiple
        if comparison < 0:
            add_above(left_multiple, left)
        else:
            add_above(right_multiple, right)


# =============================================================================
# ПРОСТОТА
# =============================================================================


class _SieveCursor:
    """Курсор решета: нечётные кратные простого p, шаг 2p."""

    __slots__ = ("current", "step")

    def __init__(self, prime: list[int]) -> None:
        self.current = prime[:]
        self.step = shift_left(prime[:], 1)

    def advance(self) -> None:
        add_above(self.current, self.step)


def is_prime_magnitude(words: list[int]) -> bool:
    """
    Проверка простоты курсорами решета.

    Нечётные индексы от 3 до words перебираются по порядку; каждый курсор,
    отставший от индекса, продвигается на свой шаг. Индекс, не совпавший ни
    с одним курсором, простой и порождает новый курсор. Курсор, достигший
    words, доказывает составность.

    Args:
        words: Величина, не равная 1

    Returns:
        True если words простое

    Raises:
        ValueError: Если words равно 1 (ни простое, ни составное)
    """
    if is_one(words):
        raise ValueError("1 is neither prime nor composite")
    if is_zero(words):
        return False
    if compare_magnitudes(words, [2]) == 0:
        return True
    if is_even(words):
        return False

    logger.debug("Sieve primality check for %d-word magnitude", len(words))

    cursors: list[_SieveCursor] = []
    index = [3]
    while compare_magnitudes(index, words) < 0:
        is_composite = False
        for cursor in cursors:
            if compare_magnitudes(cursor.current, words) == 0:
                return False
            if compare_magnitudes(cursor.current, index) < 0:
                cursor.advance()
            if compare_magnitudes(cursor.current, index) == 0:
                is_composite = True
        if not is_composite:
            cursors.append(_SieveCursor(index))
        add_above(index, [2])
    return True
