"""
Special Cases — таблицы правил для sentinel-значений

Каждая бинарная операция сначала классифицирует операнды (OperandClass) и
ищет исход в таблице. Исход COMPUTE означает, что результат вычисляется
конечной арифметикой; любой другой исход возвращается без вычислений.

Таблицы строятся правилами по всем парам классов, поэтому исчерпывающие
по построению: для каждой пары (left, right) есть ровно один исход.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN в любом операнде даёт NaN (кроме compare, где NaN наибольший)
2. -∞ < любое конечное < +∞ < NaN
3. Sentinel-значения никогда не мутируются
"""

from enum import Enum
from typing import Final


# =============================================================================
# TYPES
# =============================================================================


class NumberKind(str, Enum):
    """Тег значения: конечное или один из трёх sentinel."""

    FINITE = "finite"
    NAN = "NaN"
    POSITIVE_INFINITY = "+Infinity"
    NEGATIVE_INFINITY = "-Infinity"


class OperandClass(str, Enum):
    """Класс операнда для поиска в таблицах правил."""

    NAN = "NaN"
    POSITIVE_INFINITY = "+Infinity"
    NEGATIVE_INFINITY = "-Infinity"
    NEGATIVE = "-X"
    ZERO = "0"
    ONE = "1"
    POSITIVE = "X"


class Outcome(str, Enum):
    """Исход поиска в таблице правил."""

    COMPUTE = "compute"
    NAN = "NaN"
    POSITIVE_INFINITY = "+Infinity"
    NEGATIVE_INFINITY = "-Infinity"
    ZERO = "0"
    ONE = "1"
    # результат равен левому операнду (основанию степени)
    LEFT = "left"
    # ±∞ по чётности показателя (-∞ в степени X)
    INFINITY_BY_PARITY = "infinity_by_parity"
    # дробный результат (отрицательный показатель конечного основания)
    FRACTION = "fraction"


INFINITIES: Final[frozenset[OperandClass]] = frozenset(
    {OperandClass.POSITIVE_INFINITY, OperandClass.NEGATIVE_INFINITY}
)

# Порядковый ранг вида значения в полном порядке
ORDER_RANK: Final[dict[NumberKind, int]] = {
    NumberKind.NEGATIVE_INFINITY: 0,
    NumberKind.FINITE: 1,
    NumberKind.POSITIVE_INFINITY: 2,
    NumberKind.NAN: 3,
}


def classify(kind: NumberKind, negative: bool, words: list[int] | None) -> OperandClass:
    """
    Классифицирует значение для таблиц правил.

    Args:
        kind: Вид значения
        negative: Знак (для конечных)
        words: Величина (для конечных)
    """
    if kind is NumberKind.NAN:
        return OperandClass.NAN
    if kind is NumberKind.POSITIVE_INFINITY:
        return OperandClass.POSITIVE_INFINITY
    if kind is NumberKind.NEGATIVE_INFINITY:
        return OperandClass.NEGATIVE_INFINITY
    if negative:
        return OperandClass.NEGATIVE
    if words == [0]:
        return OperandClass.ZERO
    if words == [1]:
        return OperandClass.ONE
    return OperandClass.POSITIVE


def _sign(operand: OperandClass) -> int:
    if operand in (OperandClass.NEGATIVE, OperandClass.NEGATIVE_INFINITY):
        return -1
    if operand is OperandClass.ZERO:
        return 0
    return 1


def _infinity(sign: int) -> Outcome:
    return Outcome.POSITIVE_INFINITY if sign > 0 else Outcome.NEGATIVE_INFINITY


# =============================================================================
# ПРАВИЛА
# =============================================================================


def _resolve_add(left: OperandClass, right: OperandClass) -> Outcome:
    if OperandClass.NAN in (left, right):
        return Outcome.NAN
    if left in INFINITIES and right in INFINITIES and left is not right:
        return Outcome.NAN
    if left in INFINITIES:
        return _infinity(_sign(left))
    if right in INFINITIES:
        return _infinity(_sign(right))
    return Outcome.COMPUTE


def _resolve_subtract(left: OperandClass, right: OperandClass) -> Outcome:
    if OperandClass.NAN in (left, right):
        return Outcome.NAN
    if left in INFINITIES and left is right:
        return Outcome.NAN
    if left in INFINITIES:
        return _infinity(_sign(left))
    if right in INFINITIES:
        return _infinity(-_sign(right))
    return Outcome.COMPUTE


def _resolve_multiply(left: OperandClass, right: OperandClass) -> Outcome:
    if OperandClass.NAN in (left, right):
        return Outcome.NAN
    if left in INFINITIES or right in INFINITIES:
        sign = _sign(left) * _sign(right)
        if sign == 0:
            return Outcome.NAN
        return _infinity(sign)
    return Outcome.COMPUTE


def _resolve_divide(left: OperandClass, right: OperandClass) -> tuple[Outcome, Outcome]:
    if OperandClass.NAN in (left, right) or right is OperandClass.ZERO:
        return Outcome.NAN, Outcome.NAN
    if left in INFINITIES and right in INFINITIES:
        return Outcome.NAN, Outcome.NAN
    if left in INFINITIES:
        return Outcome.LEFT, Outcome.NAN
    if right in INFINITIES:
        return Outcome.ZERO, Outcome.NAN
    return Outcome.COMPUTE, Outcome.COMPUTE


# Таблица степени: строки по классу основания, столбцы по классу показателя.
# Показатель 1 и NaN обрабатываются до таблицы.
_POWER_ROWS: Final[dict[OperandClass, dict[OperandClass, Outcome]]] = {
    OperandClass.ZERO: {
        OperandClass.ZERO: Outcome.NAN,
        OperandClass.POSITIVE_INFINITY: Outcome.ZERO,
        OperandClass.NEGATIVE_INFINITY: Outcome.NAN,
        OperandClass.NEGATIVE: Outcome.NAN,
        OperandClass.POSITIVE: Outcome.ZERO,
    },
    OperandClass.ONE: {
        OperandClass.ZERO: Outcome.ONE,
        OperandClass.POSITIVE_INFINITY: Outcome.NAN,
        OperandClass.NEGATIVE_INFINITY: Outcome.NAN,
        OperandClass.NEGATIVE: Outcome.ONE,
        OperandClass.POSITIVE: Outcome.ONE,
    },
    OperandClass.POSITIVE_INFINITY: {
        OperandClass.ZERO: Outcome.NAN,
        OperandClass.POSITIVE_INFINITY: Outcome.POSITIVE_INFINITY,
        OperandClass.NEGATIVE_INFINITY: Outcome.ZERO,
        OperandClass.NEGATIVE: Outcome.ZERO,
        OperandClass.POSITIVE: Outcome.POSITIVE_INFINITY,
    },
    OperandClass.NEGATIVE_INFINITY: {
        OperandClass.ZERO: Outcome.NAN,
        OperandClass.POSITIVE_INFINITY: Outcome.NAN,
        OperandClass.NEGATIVE_INFINITY: Outcome.NAN,
        OperandClass.NEGATIVE: Outcome.ZERO,
        OperandClass.POSITIVE: Outcome.INFINITY_BY_PARITY,
    },
    OperandClass.NEGATIVE: {
        OperandClass.ZERO: Outcome.ONE,
        OperandClass.POSITIVE_INFINITY: Outcome.NAN,
        OperandClass.NEGATIVE_INFINITY: Outcome.ZERO,
        OperandClass.NEGATIVE: Outcome.FRACTION,
        OperandClass.POSITIVE: Outcome.COMPUTE,
    },
    OperandClass.POSITIVE: {
        OperandClass.ZERO: Outcome.ONE,
        OperandClass.POSITIVE_INFINITY: Outcome.POSITIVE_INFINITY,
        OperandClass.NEGATIVE_INFINITY: Outcome.ZERO,
        OperandClass.NEGATIVE: Outcome.FRACTION,
        OperandClass.POSITIVE: Outcome.COMPUTE,
    },
}


def _resolve_power(base: OperandClass, exponent: OperandClass) -> Outcome:
    if OperandClass.NAN in (base, exponent):
        return Outcome.NAN
    if exponent is OperandClass.ONE:
        return Outcome.LEFT
    return _POWER_ROWS[base][exponent]


def _build_table(rule):
    return {(left, right): rule(left, right) for left in OperandClass for right in OperandClass}


ADD_TABLE: Final[dict[tuple[OperandClass, OperandClass], Outcome]] = _build_table(_resolve_add)
SUBTRACT_TABLE: Final[dict[tuple[OperandClass, OperandClass], Outcome]] = _build_table(
    _resolve_subtract
)
MULTIPLY_TABLE: Final[dict[tuple[OperandClass, OperandClass], Outcome]] = _build_table(
    _resolve_multiply
)
DIVIDE_TABLE: Final[dict[tuple[OperandClass, OperandClass], tuple[Outcome, Outcome]]] = (
    _build_table(_resolve_divide)
)
POWER_TABLE: Final[dict[tuple[OperandClass, OperandClass], Outcome]] = _build_table(
    _resolve_power
)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_kinds(left: NumberKind, right: NumberKind) -> int:
    """
    Сравнивает виды значений по рангу порядка.

    Returns:
        -1, 0 или 1; 0 для двух конечных означает, что нужно сравнение величин
    """
    left_rank = ORDER_RANK[left]
    right_rank = ORDER_RANK[right]
    if left_rank == right_rank:
        return 0
    return -1 if left_rank < right_rank else 1
