"""
Тесты для IntegerQuotient
"""

import dataclasses

import pytest

from src.core.domain.integer_quotient import IntegerQuotient
from src.core.domain.mutable_infinite_integer import MutableInfiniteInteger
from src.core.math.special_cases import NumberKind


def test_fields_and_str():
    """Поля и текстовая форма"""
    quotient = IntegerQuotient(MutableInfiniteInteger(-2), MutableInfiniteInteger(1))
    assert quotient.whole_result.int_value() == -2
    assert quotient.remainder.int_value() == 1
    assert str(quotient) == "whole=-2; remainder=1"


def test_sentinel_fields_str():
    quotient = MutableInfiniteInteger(5).divide(0)
    assert str(quotient) == "whole=NaN; remainder=NaN"


def test_frozen():
    """IntegerQuotient неизменяем"""
    quotient = IntegerQuotient(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        quotient.whole_result = 3


def test_none_rejected():
    with pytest.raises(ValueError, match="must not be None"):
        IntegerQuotient(None, MutableInfiniteInteger(1))


def test_to_payload():
    payload = MutableInfiniteInteger(-11).divide(5).to_payload()
    assert payload.whole_result.kind is NumberKind.FINITE
    assert payload.whole_result.negative is True
    assert payload.whole_result.words == [2]
    assert payload.remainder.words == [1]


def test_to_payload_with_sentinels():
    payload = MutableInfiniteInteger.NEGATIVE_INFINITY.divide(3).to_payload()
    assert payload.whole_result.kind is NumberKind.NEGATIVE_INFINITY
    assert payload.remainder.kind is NumberKind.NAN
