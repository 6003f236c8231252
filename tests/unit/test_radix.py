"""
Тесты для Radix Codec

Проверяет:
1. Проверку основания и значения цифр
2. Native-рендеринг, включая unary
3. Пословный рендеринг для оснований-степеней двойки
4. Общий путь повторным делением
5. Ошибки ёмкости (WillNotFitError) с описанием значения
6. Отладочный рендеринг с ELLIPSIS
7. Разбор строк и отказ на некорректной грамматике
"""

import pytest

from src.core.math.errors import IntegerFormatError, InvalidRadixError, WillNotFitError
from src.core.math.radix import (
    ELLIPSIS,
    MAX_RADIX,
    BoundedStringBuilder,
    RadixConfig,
    describe_subject,
    digit_value,
    enforce_standard_radix,
    native_to_string,
    parse_magnitude,
    power_of_two_digits,
    power_of_two_exponent,
    render_debug,
    render_magnitude,
    render_word_dump,
    word_digit_width,
)
from src.core.math.words import WORD_MASK, from_native

# 2^64 + 150
WIDE_VALUE = [150, 0, 1]


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


class TestEnforceStandardRadix:
    """Тесты для enforce_standard_radix"""

    def test_bounds_accepted(self) -> None:
        enforce_standard_radix(1)
        enforce_standard_radix(62)

    @pytest.mark.parametrize("radix", [0, -1, 63, 100])
    def test_out_of_range_rejected(self, radix) -> None:
        with pytest.raises(InvalidRadixError, match=rf"radix must be in \[1, 62\], got {radix}"):
            enforce_standard_radix(radix)

    def test_invalid_radix_is_format_error(self) -> None:
        """InvalidRadixError — подкласс IntegerFormatError"""
        with pytest.raises(IntegerFormatError):
            enforce_standard_radix(0)


class TestDigits:
    """Тесты для digit_value / power_of_two_exponent / word_digit_width"""

    def test_case_insensitive_up_to_36(self) -> None:
        assert digit_value("f", 16) == 15
        assert digit_value("F", 16) == 15
        assert digit_value("Z", 36) == 35

    def test_case_sensitive_above_36(self) -> None:
        assert digit_value("z", 62) == 35
        assert digit_value("Z", 62) == 61
        assert digit_value("F", 62) == 41

    def test_out_of_radix(self) -> None:
        assert digit_value("g", 16) is None
        assert digit_value("2", 2) is None
        assert digit_value("_", 62) is None

    def test_power_of_two_exponent(self) -> None:
        assert power_of_two_exponent(2) == 1
        assert power_of_two_exponent(32) == 5
        assert power_of_two_exponent(10) is None
        assert power_of_two_exponent(1) is None

    def test_word_digit_width(self) -> None:
        """Ширина максимального слова в цифрах основания"""
        assert word_digit_width(2) == 32
        assert word_digit_width(4) == 16
        assert word_digit_width(8) == 11
        assert word_digit_width(16) == 8
        assert word_digit_width(32) == 7

    def test_power_of_two_digits_within_word(self) -> None:
        """Цифры от младшей к старшей"""
        assert list(power_of_two_digits([0o17], 3)) == [7, 1]
        assert list(power_of_two_digits([WORD_MASK], 3)) == [7] * 10 + [3]

    def test_power_of_two_digits_cross_word_boundary(self) -> None:
        """Бит 64 попадает в 22-ю восьмеричную цифру (биты 63..65)"""
        digits = list(power_of_two_digits([0, 0, 1], 3))
        assert len(digits) == 22
        assert digits[-1] == 2
        assert set(digits[:-1]) == {0}

    def test_power_of_two_digits_base_32(self) -> None:
        """3 * 2^63: биты 63 и 64 образуют одну цифру из двух слов"""
        digits = list(power_of_two_digits([0, 0x80000000, 0x1], 5))
        assert len(digits) == 13
        assert digits[-1] == 0b11000
        assert set(digits[:-1]) == {0}


class TestBoundedStringBuilder:
    """Тесты для BoundedStringBuilder"""

    def test_builds_within_limit(self) -> None:
        builder = BoundedStringBuilder(4, "x")
        builder.append("ab").append("cd")
        assert len(builder) == 4
        assert builder.build() == "abcd"
        assert builder.build(reverse=True) == "dcba"

    def test_overflow_raises_with_subject(self) -> None:
        builder = BoundedStringBuilder(3, "42 in base 7")
        builder.append("ab")
        with pytest.raises(WillNotFitError, match="42 in base 7 would exceed max string length."):
            builder.append("cd")

    def test_callable_subject_evaluated_only_on_overflow(self) -> None:
        calls = []

        def subject() -> str:
            calls.append(1)
            return "lazy"

        builder = BoundedStringBuilder(2, subject)
        builder.append("ab")
        assert calls == []
        with pytest.raises(WillNotFitError, match="lazy would exceed max string length."):
            builder.append("c")
        assert calls == [1]

    def test_describe_subject(self) -> None:
        assert describe_subject("x") == "x"
        assert describe_subject(lambda: "y") == "y"


# =============================================================================
# РЕНДЕРИНГ
# =============================================================================


class TestNativeToString:
    """Тесты для native_to_string"""

    def test_common_radixes(self) -> None:
        assert native_to_string(255, 16) == "ff"
        assert native_to_string(-10, 2) == "-1010"
        assert native_to_string(0, 10) == "0"
        assert native_to_string(61, 62) == "Z"

    def test_unary(self) -> None:
        """Radix 1: повторение "1", ноль — пустая строка"""
        assert native_to_string(3, 1) == "111"
        assert native_to_string(-3, 1) == "-111"
        assert native_to_string(0, 1) == ""

    def test_unary_capacity(self) -> None:
        with pytest.raises(WillNotFitError, match="5 in base 1 would exceed max string length."):
            native_to_string(5, 1, RadixConfig(max_string_length=3))


class TestRenderMagnitude:
    """Тесты для render_magnitude"""

    def test_power_of_two_radix_pads_lower_words(self) -> None:
        """2^63 в шестнадцатеричной записи"""
        assert render_magnitude([0, 0x80000000], False, 16, "2^63") == "8000000000000000"

    def test_wide_hex(self) -> None:
        assert render_magnitude(WIDE_VALUE, False, 16, "x") == "10000000000000096"

    def test_wide_decimal(self) -> None:
        assert render_magnitude(WIDE_VALUE, False, 10, "x") == "18446744073709551766"

    def test_wide_negative_binary(self) -> None:
        """-(2^63 + 1) в двоичной записи"""
        expected = "-1" + "0" * 62 + "1"
        assert render_magnitude([1, 0x80000000], True, 2, "x") == expected

    def test_octal_crosses_word_boundary(self) -> None:
        """2^64 в основании 8: группа из 3 бит захватывает соседние слова"""
        assert render_magnitude([0, 0, 1], False, 8, "x") == "2" + "0" * 21
        assert render_magnitude([0, 0, 1], True, 8, "x") == "-2" + "0" * 21

    def test_base_32_crosses_word_boundary(self) -> None:
        assert render_magnitude([0, 0, 1], False, 32, "x") == "g" + "0" * 12

    def test_lazy_subject_in_error(self) -> None:
        with pytest.raises(WillNotFitError, match=r"2\^64 in base 8 would exceed"):
            render_magnitude([0, 0, 1], False, 8, lambda: "2^64", RadixConfig(max_string_length=5))

    def test_native_path(self) -> None:
        assert render_magnitude([255], True, 16, "-255") == "-ff"

    def test_wide_unary_does_not_fit(self) -> None:
        with pytest.raises(
            WillNotFitError,
            match="9223372036854775808 in base 1 would exceed max string length.",
        ):
            render_magnitude([0, 0x80000000], False, 1, "9223372036854775808")

    def test_capacity_on_wide_value(self) -> None:
        """Запись из 17 цифр не помещается в 10 символов"""
        with pytest.raises(WillNotFitError, match="x in base 16 would exceed max string length."):
            render_magnitude(WIDE_VALUE, False, 16, "x", RadixConfig(max_string_length=10))

    def test_capacity_on_native_value(self) -> None:
        with pytest.raises(WillNotFitError, match="255 in base 2"):
            render_magnitude([255], False, 2, "255", RadixConfig(max_string_length=4))

    def test_invalid_radix(self) -> None:
        with pytest.raises(InvalidRadixError):
            render_magnitude([1], False, 63, "1")

    @pytest.mark.parametrize("radix", range(2, MAX_RADIX + 1))
    def test_matches_native_rendering(self, radix) -> None:
        """Многословный рендеринг совпадает с native-рендерингом цифр"""
        value = 0x1_9ABCDEF0_12345678
        expected = []
        remaining = value
        while remaining:
            remaining, digit = divmod(remaining, radix)
            expected.append("0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"[digit])
        assert render_magnitude(from_native(value), False, radix, "x") == "".join(reversed(expected))


class TestRenderDebug:
    """Тесты для render_debug"""

    def test_native_value_in_full(self) -> None:
        assert render_debug([5], True) == "-5"

    def test_twenty_digits_without_ellipsis(self) -> None:
        assert render_debug(WIDE_VALUE, False) == "18446744073709551766"

    def test_truncated_with_ellipsis(self) -> None:
        """2^72 - 1 показывается последними 20 цифрами"""
        words = [0xFFFFFFFF, 0xFFFFFFFF, 0xFF]
        assert render_debug(words, False) == ELLIPSIS + "22366482869645213695"

    def test_minus_before_ellipsis(self) -> None:
        words = [0xFFFFFFFF, 0xFFFFFFFF, 0xFF]
        assert render_debug(words, True) == "-" + ELLIPSIS + "22366482869645213695"

    def test_custom_digit_limit(self) -> None:
        rendered = render_debug(WIDE_VALUE, False, RadixConfig(debug_digit_limit=4))
        assert rendered == ELLIPSIS + "1766"


class TestRenderWordDump:
    """Тесты для render_word_dump"""

    def test_positive(self) -> None:
        assert render_word_dump([5, 2], False) == "+ 5, 2, "

    def test_negative_uppercase_hex(self) -> None:
        assert render_word_dump([0xFF], True) == "- FF, "


# =============================================================================
# РАЗБОР
# =============================================================================


class TestParseMagnitude:
    """Тесты для parse_magnitude"""

    def test_leading_zero_hex(self) -> None:
        assert parse_magnitude("0a0", 16) == (False, [160])

    def test_negative_zero_is_zero(self) -> None:
        assert parse_magnitude("-0", 10) == (False, [0])

    def test_signs_and_case(self) -> None:
        assert parse_magnitude("+ff", 16) == (False, [255])
        assert parse_magnitude("FF", 16) == (False, [255])
        assert parse_magnitude("-12", 10) == (True, [12])

    def test_case_sensitive_radix(self) -> None:
        assert parse_magnitude("Z", 62) == (False, [61])
        assert parse_magnitude("z", 62) == (False, [35])

    def test_wide_values(self) -> None:
        assert parse_magnitude("18446744073709551766", 10) == (False, WIDE_VALUE)
        assert parse_magnitude("10000000000000096", 16) == (False, WIDE_VALUE)

    def test_unary(self) -> None:
        assert parse_magnitude("111", 1) == (False, [3])
        assert parse_magnitude("", 1) == (False, [0])
        assert parse_magnitude("-11", 1) == (True, [2])

    def test_unary_rejects_other_digits(self) -> None:
        with pytest.raises(IntegerFormatError, match="is not a valid base 1 integer"):
            parse_magnitude("121", 1)

    @pytest.mark.parametrize("text", ["+", "++2", "+_", "", "12a", " 12", "1-2"])
    def test_invalid_grammar(self, text) -> None:
        with pytest.raises(IntegerFormatError, match="is not a valid base 10 integer"):
            parse_magnitude(text, 10)

    def test_digit_outside_radix(self) -> None:
        with pytest.raises(IntegerFormatError, match="is not a valid base 2 integer"):
            parse_magnitude("102", 2)

    def test_invalid_radix(self) -> None:
        with pytest.raises(InvalidRadixError):
            parse_magnitude("1", 0)

    @pytest.mark.parametrize("radix", range(2, MAX_RADIX + 1))
    def test_render_then_parse(self, radix) -> None:
        words = [0x12345678, 0x9ABCDEF0, 0x1]
        for negative in (False, True):
            text = render_magnitude(words, negative, radix, "x")
            assert parse_magnitude(text, radix) == (negative, words)
