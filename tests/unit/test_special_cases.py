"""
Тесты для таблиц правил sentinel-значений

Проверяет:
1. Исчерпываемость таблиц (ровно один исход на каждую пару классов)
2. Правила сложения, вычитания, умножения, деления и степени
3. Классификацию операндов
4. Полный порядок -∞ < конечные < +∞ < NaN
"""

import pytest

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

NAN = OperandClass.NAN
POS_INF = OperandClass.POSITIVE_INFINITY
NEG_INF = OperandClass.NEGATIVE_INFINITY
NEGATIVE = OperandClass.NEGATIVE
ZERO = OperandClass.ZERO
ONE = OperandClass.ONE
POSITIVE = OperandClass.POSITIVE

FINITE_CLASSES = (NEGATIVE, ZERO, ONE, POSITIVE)


@pytest.mark.parametrize(
    "table", [ADD_TABLE, SUBTRACT_TABLE, MULTIPLY_TABLE, DIVIDE_TABLE, POWER_TABLE]
)
def test_tables_are_exhaustive(table):
    """Каждая таблица покрывает все 7 x 7 пар классов"""
    assert len(table) == len(OperandClass) ** 2
    for left in OperandClass:
        for right in OperandClass:
            assert (left, right) in table


@pytest.mark.parametrize("table", [ADD_TABLE, SUBTRACT_TABLE, MULTIPLY_TABLE, POWER_TABLE])
def test_nan_poisons_everything(table):
    for other in OperandClass:
        assert table[(NAN, other)] is Outcome.NAN
        assert table[(other, NAN)] is Outcome.NAN


def test_finite_pairs_compute():
    """Пары конечных операндов вычисляются арифметикой (кроме деления на ноль)"""
    for left in FINITE_CLASSES:
        for right in FINITE_CLASSES:
            assert ADD_TABLE[(left, right)] is Outcome.COMPUTE
            assert SUBTRACT_TABLE[(left, right)] is Outcome.COMPUTE
            assert MULTIPLY_TABLE[(left, right)] is Outcome.COMPUTE
            if right is not ZERO:
                assert DIVIDE_TABLE[(left, right)] == (Outcome.COMPUTE, Outcome.COMPUTE)


# =============================================================================
# ПРАВИЛА
# =============================================================================


class TestAddRules:
    """Правила сложения"""

    def test_opposite_infinities(self) -> None:
        assert ADD_TABLE[(POS_INF, NEG_INF)] is Outcome.NAN
        assert ADD_TABLE[(NEG_INF, POS_INF)] is Outcome.NAN

    def test_same_infinities(self) -> None:
        assert ADD_TABLE[(POS_INF, POS_INF)] is Outcome.POSITIVE_INFINITY
        assert ADD_TABLE[(NEG_INF, NEG_INF)] is Outcome.NEGATIVE_INFINITY

    def test_infinity_absorbs_finite(self) -> None:
        assert ADD_TABLE[(POS_INF, POSITIVE)] is Outcome.POSITIVE_INFINITY
        assert ADD_TABLE[(NEGATIVE, NEG_INF)] is Outcome.NEGATIVE_INFINITY
        assert ADD_TABLE[(ZERO, POS_INF)] is Outcome.POSITIVE_INFINITY


class TestSubtractRules:
    """Правила вычитания"""

    def test_same_infinities(self) -> None:
        assert SUBTRACT_TABLE[(POS_INF, POS_INF)] is Outcome.NAN
        assert SUBTRACT_TABLE[(NEG_INF, NEG_INF)] is Outcome.NAN

    def test_opposite_infinities(self) -> None:
        assert SUBTRACT_TABLE[(POS_INF, NEG_INF)] is Outcome.POSITIVE_INFINITY
        assert SUBTRACT_TABLE[(NEG_INF, POS_INF)] is Outcome.NEGATIVE_INFINITY

    def test_finite_minus_infinity(self) -> None:
        assert SUBTRACT_TABLE[(POSITIVE, POS_INF)] is Outcome.NEGATIVE_INFINITY
        assert SUBTRACT_TABLE[(ZERO, NEG_INF)] is Outcome.POSITIVE_INFINITY


class TestMultiplyRules:
    """Правила умножения"""

    def test_infinity_times_zero(self) -> None:
        assert MULTIPLY_TABLE[(POS_INF, ZERO)] is Outcome.NAN
        assert MULTIPLY_TABLE[(ZERO, NEG_INF)] is Outcome.NAN

    def test_sign_rule(self) -> None:
        assert MULTIPLY_TABLE[(NEG_INF, NEG_INF)] is Outcome.POSITIVE_INFINITY
        assert MULTIPLY_TABLE[(POS_INF, NEG_INF)] is Outcome.NEGATIVE_INFINITY
        assert MULTIPLY_TABLE[(NEG_INF, NEGATIVE)] is Outcome.POSITIVE_INFINITY
        assert MULTIPLY_TABLE[(ONE, POS_INF)] is Outcome.POSITIVE_INFINITY
        assert MULTIPLY_TABLE[(NEGATIVE, POS_INF)] is Outcome.NEGATIVE_INFINITY


class TestDivideRules:
    """Правила деления (целая часть, остаток)"""

    def test_division_by_zero(self) -> None:
        for left in OperandClass:
            assert DIVIDE_TABLE[(left, ZERO)] == (Outcome.NAN, Outcome.NAN)

    def test_infinity_by_infinity(self) -> None:
        assert DIVIDE_TABLE[(POS_INF, NEG_INF)] == (Outcome.NAN, Outcome.NAN)
        assert DIVIDE_TABLE[(POS_INF, POS_INF)] == (Outcome.NAN, Outcome.NAN)

    def test_infinity_by_finite_keeps_left(self) -> None:
        """∞ / X = (тот же ∞, NaN) независимо от знака делителя"""
        assert DIVIDE_TABLE[(NEG_INF, POSITIVE)] == (Outcome.LEFT, Outcome.NAN)
        assert DIVIDE_TABLE[(POS_INF, NEGATIVE)] == (Outcome.LEFT, Outcome.NAN)

    def test_finite_by_infinity(self) -> None:
        assert DIVIDE_TABLE[(POSITIVE, POS_INF)] == (Outcome.ZERO, Outcome.NAN)
        assert DIVIDE_TABLE[(NEGATIVE, NEG_INF)] == (Outcome.ZERO, Outcome.NAN)

    def test_zero_dividend_computes(self) -> None:
        assert DIVIDE_TABLE[(ZERO, POSITIVE)] == (Outcome.COMPUTE, Outcome.COMPUTE)


class TestPowerRules:
    """Правила степени (основание, показатель)"""

    def test_zero_to_zero(self) -> None:
        assert POWER_TABLE[(ZERO, ZERO)] is Outcome.NAN

    def test_exponent_one_keeps_base(self) -> None:
        for base in OperandClass:
            if base is not NAN:
                assert POWER_TABLE[(base, ONE)] is Outcome.LEFT

    def test_negative_infinity_base(self) -> None:
        assert POWER_TABLE[(NEG_INF, POSITIVE)] is Outcome.INFINITY_BY_PARITY
        assert POWER_TABLE[(NEG_INF, NEGATIVE)] is Outcome.ZERO

    def test_negative_exponent(self) -> None:
        assert POWER_TABLE[(POSITIVE, NEGATIVE)] is Outcome.FRACTION
        assert POWER_TABLE[(NEGATIVE, NEGATIVE)] is Outcome.FRACTION
        assert POWER_TABLE[(ONE, NEGATIVE)] is Outcome.ONE

    def test_infinite_exponents(self) -> None:
        assert POWER_TABLE[(POS_INF, NEG_INF)] is Outcome.ZERO
        assert POWER_TABLE[(POSITIVE, POS_INF)] is Outcome.POSITIVE_INFINITY
        assert POWER_TABLE[(ONE, POS_INF)] is Outcome.NAN
        assert POWER_TABLE[(ZERO, POS_INF)] is Outcome.ZERO

    def test_finite_power_computes(self) -> None:
        assert POWER_TABLE[(POSITIVE, POSITIVE)] is Outcome.COMPUTE
        assert POWER_TABLE[(NEGATIVE, POSITIVE)] is Outcome.COMPUTE
        assert POWER_TABLE[(POSITIVE, ZERO)] is Outcome.ONE


# =============================================================================
# КЛАССИФИКАЦИЯ И ПОРЯДОК
# =============================================================================


class TestClassify:
    """Тесты для classify"""

    def test_finite(self) -> None:
        assert classify(NumberKind.FINITE, False, [0]) is ZERO
        assert classify(NumberKind.FINITE, False, [1]) is ONE
        assert classify(NumberKind.FINITE, True, [1]) is NEGATIVE
        assert classify(NumberKind.FINITE, False, [5, 1]) is POSITIVE

    def test_sentinels(self) -> None:
        assert classify(NumberKind.NAN, False, None) is NAN
        assert classify(NumberKind.POSITIVE_INFINITY, False, None) is POS_INF
        assert classify(NumberKind.NEGATIVE_INFINITY, True, None) is NEG_INF


class TestCompareKinds:
    """Тесты для compare_kinds"""

    def test_total_order(self) -> None:
        order = [
            NumberKind.NEGATIVE_INFINITY,
            NumberKind.FINITE,
            NumberKind.POSITIVE_INFINITY,
            NumberKind.NAN,
        ]
        for index, left in enumerate(order):
            for right in order[index + 1 :]:
                assert compare_kinds(left, right) == -1
                assert compare_kinds(right, left) == 1

    def test_same_kind(self) -> None:
        assert compare_kinds(NumberKind.FINITE, NumberKind.FINITE) == 0
        assert compare_kinds(NumberKind.NAN, NumberKind.NAN) == 0
