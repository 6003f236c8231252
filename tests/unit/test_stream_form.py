"""
Тесты для Stream Form (персистентная байтовая форма)

Проверяет:
1. Байтовую раскладку тегов, блоков и слов
2. Восстановление sentinel как singletons
3. Разбиение длинных величин на блоки по 255 слов
4. Ошибки формата: пустой поток, неизвестный тег, обрезка, лишние байты
"""

import io

import pytest

from src.core.domain.infinite_integer import InfiniteInteger
from src.core.domain.mutable_infinite_integer import MutableInfiniteInteger
from src.core.domain.stream_form import (
    MAX_CHUNK_WORDS,
    from_bytes,
    read_infinite_integer,
    to_bytes,
    write_infinite_integer,
)
from src.core.math.errors import IntegerFormatError

M = MutableInfiniteInteger


class TestLayout:
    """Тесты байтовой раскладки"""

    def test_sentinel_tags(self) -> None:
        assert to_bytes(M.NaN) == b"\x01"
        assert to_bytes(M.POSITIVE_INFINITY) == b"\x02"
        assert to_bytes(M.NEGATIVE_INFINITY) == b"\x03"

    def test_small_positive(self) -> None:
        assert to_bytes(M(5)) == b"\x05\x01\x00\x00\x00\x05\x00"

    def test_zero(self) -> None:
        assert to_bytes(M(0)) == b"\x05\x01\x00\x00\x00\x00\x00"

    def test_negative_two_words(self) -> None:
        """Слова big-endian, младшее слово первым"""
        expected = b"\x04\x02" + b"\x00\x00\x00\x05" + b"\x00\x00\x00\x01" + b"\x00"
        assert to_bytes(M(-(2**32 + 5))) == expected

    def test_immutable_value(self) -> None:
        assert to_bytes(InfiniteInteger(5)) == to_bytes(M(5))


class TestRoundTrip:
    """Тесты восстановления"""

    def test_sentinels_are_singletons(self) -> None:
        assert from_bytes(b"\x01") is M.NaN
        assert from_bytes(b"\x02") is M.POSITIVE_INFINITY
        assert from_bytes(b"\x03") is M.NEGATIVE_INFINITY

    @pytest.mark.parametrize("value", [0, 1, -1, 2**63, -(2**64 + 150), 3**200])
    def test_values(self, value) -> None:
        assert from_bytes(to_bytes(M(value))) == M(value)

    def test_long_magnitude_is_chunked(self) -> None:
        value = M.from_words([index + 1 for index in range(300)])
        data = to_bytes(value)
        assert data[1] == MAX_CHUNK_WORDS
        assert data[2 + MAX_CHUNK_WORDS * 4] == 45
        assert data[-1] == 0
        assert from_bytes(data) == value

    def test_stream_of_several_values(self) -> None:
        buffer = io.BytesIO()
        write_infinite_integer(M(7), buffer)
        write_infinite_integer(M.NaN, buffer)
        write_infinite_integer(M(-(2**40)), buffer)
        buffer.seek(0)
        assert read_infinite_integer(buffer) == M(7)
        assert read_infinite_integer(buffer) is M.NaN
        assert read_infinite_integer(buffer) == M(-(2**40))


class TestMalformed:
    """Тесты некорректных форм"""

    def test_empty(self) -> None:
        with pytest.raises(IntegerFormatError, match="unexpected end of stream"):
            from_bytes(b"")

    def test_unknown_tag(self) -> None:
        with pytest.raises(IntegerFormatError, match="unknown infinite integer tag 7"):
            from_bytes(b"\x07")

    def test_truncated_word(self) -> None:
        with pytest.raises(IntegerFormatError, match="expected 4 bytes, got 2"):
            from_bytes(b"\x05\x01\x00\x00")

    def test_missing_terminator(self) -> None:
        with pytest.raises(IntegerFormatError, match="unexpected end of stream"):
            from_bytes(b"\x05\x01\x00\x00\x00\x05")

    def test_no_words(self) -> None:
        with pytest.raises(IntegerFormatError, match="must carry at least one word"):
            from_bytes(b"\x05\x00")

    def test_trailing_bytes(self) -> None:
        with pytest.raises(IntegerFormatError, match="1 trailing bytes"):
            from_bytes(b"\x01\x00")
