"""
Division Engine — деление величин с выбором стратегии

Делит неотрицательные величины (word chains), возвращая пару
(целая часть, остаток). Знаки и sentinel-значения обрабатываются
вызывающим уровнем (MutableInfiniteInteger.divide).

Порядок работы divide_magnitudes:
1. Быстрые пути: делитель 1, делимое меньше делителя, равенство
2. Снятие общих младших нулевых слов, затем общих нулевых бит
3. Выбор стратегии:
   - NATIVE: оба операнда помещаются в signed 64-bit
   - BINARY_LONG_DIVISION: побитовое деление от старшего бита
   - BINARY_SEARCH: бисекция целой части с линейным доводом
4. Остаток сдвигается обратно на число снятых бит

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. dividend = divisor * whole + remainder
2. 0 <= remainder < divisor
3. Аргументы никогда не мутируются
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final

from src.core.math.words import (
    WORD_BITS,
    add_above,
    compare_magnitudes,
    fits_signed_long,
    from_native,
    is_one,
    is_zero,
    multiply_magnitudes,
    shift_left,
    shift_right,
    strip_common_trailing_zeros,
    subtract_smaller,
    to_native,
)

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Разрыв бисекции, ниже которого поиск переходит к линейному перебору
LINEAR_PROBE_GAP: Final[int] = 4


# =============================================================================
# TYPES
# =============================================================================


class DivisionStrategy(str, Enum):
    """Алгоритм деления величин."""

    NATIVE = "native"
    BINARY_LONG_DIVISION = "binary_long_division"
    BINARY_SEARCH = "binary_search"


@dataclass(frozen=True)
class DivisionConfig:
    """
    Конфигурация движка деления.

    Attributes:
        multi_word_strategy: Стратегия для операндов шире signed 64-bit
        native_delegation: Делегировать ли native-делению, когда оба операнда
            помещаются в signed 64-bit
    """

    multi_word_strategy: DivisionStrategy = DivisionStrategy.BINARY_LONG_DIVISION
    native_delegation: bool = True

    def __post_init__(self) -> None:
        if self.multi_word_strategy is DivisionStrategy.NATIVE:
            raise ValueError(
                "multi_word_strategy must be a multi-word strategy, got native"
            )


DEFAULT_DIVISION_CONFIG: Final[DivisionConfig] = DivisionConfig()


# =============================================================================
# СТРАТЕГИИ
# =============================================================================


def divide_native(dividend: list[int], divisor: list[int]) -> tuple[list[int], list[int]]:
    """Делегирует деление native-арифметике (оба операнда в signed 64-bit)."""
    whole, remainder = divmod(to_native(dividend), to_native(divisor))
    return from_native(whole), from_native(remainder)


def binary_long_divide(
    dividend: list[int], divisor: list[int]
) -> tuple[list[int], list[int]]:
    """
    Побитовое длинное деление.

    Биты делимого обходятся от старшего к младшему; текущий остаток
    сдвигается влево с подстановкой очередного бита и, если он не меньше
    делителя, из него вычитается делитель, а в целую часть записывается 1.
    """
    whole = [0]
    remainder = [0]
    for word_index in range(len(dividend) - 1, -1, -1):
        word = dividend[word_index]
        for bit_index in range(WORD_BITS - 1, -1, -1):
            shift_left(remainder, 1)
            remainder[0] |= (word >> bit_index) & 1
            shift_left(whole, 1)
            if compare_magnitudes(remainder, divisor) >= 0:
                whole[0] |= 1
                subtract_smaller(remainder, divisor)
    return whole, remainder


def binary_search_divide(
    dividend: list[int], divisor: list[int]
) -> tuple[list[int], list[int]]:
    """
    Деление бисекцией целой части.

    Требует dividend >= divisor. Целая часть ищется в [1, dividend / 2]:
    середина умножается на делитель и сравнивается с делимым; когда разрыв
    границ меньше LINEAR_PROBE_GAP, нижняя граница доводится линейно.
    """
    if is_one(divisor):
        return dividend[:], [0]

    lower = [1]
    higher = shift_right(dividend[:], 1)
    while True:
        gap = subtract_smaller(higher[:], lower)
        if compare_magnitudes(gap, [LINEAR_PROBE_GAP]) < 0:
            break
        midpoint = add_above(lower[:], shift_right(gap, 1))
        comparison = compare_magnitudes(multiply_magnitudes(midpoint, divisor), dividend)
        if comparison == 0:
            return midpoint, [0]
        if comparison > 0:
            higher = midpoint
        else:
            lower = midpoint

    while True:
        candidate = add_above(lower[:], [1])
        if compare_magnitudes(multiply_magnitudes(candidate, divisor), dividend) > 0:
            break
        lower = candidate

    remainder = subtract_smaller(dividend[:], multiply_magnitudes(lower, divisor))
    return lower, remainder


_STRATEGIES: Final[
    dict[DivisionStrategy, Callable[[list[int], list[int]], tuple[list[int], list[int]]]]
] = {
    DivisionStrategy.NATIVE: divide_native,
    DivisionStrategy.BINARY_LONG_DIVISION: binary_long_divide,
    DivisionStrategy.BINARY_SEARCH: binary_search_divide,
}


# =============================================================================
# ДВИЖОК
# =============================================================================


def select_division_strategy(
    dividend: list[int],
    divisor: list[int],
    config: DivisionConfig = DEFAULT_DIVISION_CONFIG,
) -> DivisionStrategy:
    """
    Выбирает стратегию для уже редуцированных операндов.

    Returns:
        NATIVE если разрешено и оба операнда в signed 64-bit,
        иначе config.multi_word_strategy
    """
    if config.native_delegation and fits_signed_long(dividend) and fits_signed_long(divisor):
        return DivisionStrategy.NATIVE
    return config.multi_word_strategy


def divide_magnitudes(
    dividend: list[int],
    divisor: list[int],
    config: DivisionConfig | None = None,
) -> tuple[list[int], list[int]]:
    """
    Делит величины: (whole, remainder).

    Args:
        dividend: Делимое (не мутируется)
        divisor: Делитель (не мутируется), ненулевой
        config: Конфигурация (default: DEFAULT_DIVISION_CONFIG)

    Returns:
        (whole, remainder) — новые величины

    Raises:
        ValueError: Если divisor равен нулю

    Examples:
        >>> divide_magnitudes([10], [5])
        ([2], [0])
        >>> divide_magnitudes([0x7FFFFFFF], [10])
        ([214748364], [7])
    """
    if is_zero(divisor):
        raise ValueError("divisor must be non-zero")
    if config is None:
        config = DEFAULT_DIVISION_CONFIG

    if is_one(divisor):
        return dividend[:], [0]
    comparison = compare_magnitudes(dividend, divisor)
    if comparison < 0:
        return [0], dividend[:]
    if comparison == 0:
        return [1], [0]

    reduced_dividend = dividend[:]
    reduced_divisor = divisor[:]
    shift = strip_common_trailing_zeros(reduced_dividend, reduced_divisor)

    strategy = select_division_strategy(reduced_dividend, reduced_divisor, config)
    logger.debug(
        "Dividing %d-word by %d-word magnitude with %s (common shift %d bits)",
        len(reduced_dividend),
        len(reduced_divisor),
        strategy.value,
        shift,
    )

    whole, remainder = _STRATEGIES[strategy](reduced_dividend, reduced_divisor)
    shift_left(remainder, shift)
    return whole, remainder
