"""Tests for the driver module."""

from __future__ import annotations

import pytest

from driver import FALLBACK_SUFFIX, UNDEFINED, Evaluation, evaluate, format_line, parse_u64
from power import U64_MAX, InvalidArgument


class TestParseU64:
    @pytest.mark.parametrize(
        "text,value",
        [
            ("0", 0),
            ("000", 0),
            ("42", 42),
            (" 42\n", 42),
            ("007", 7),
            ("0" * 30 + "42", 42),
            (str(U64_MAX), U64_MAX),
        ],
    )
    def test_valid(self, text, value):
        assert parse_u64(text, "base") == value

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "-1", "+1", "1.5", "abc", "1 2", str(2**64), "9" * 5000, "١٢"],
    )
    def test_invalid(self, text):
        with pytest.raises(InvalidArgument):
            parse_u64(text, "base")

    def test_too_many_digits_names_field(self):
        with pytest.raises(InvalidArgument, match="base does not fit in 64 bits"):
            parse_u64("9" * 5000, "base")

    def test_error_names_field(self):
        with pytest.raises(InvalidArgument, match="exponent"):
            parse_u64("x", "exponent")


class TestEvaluate:
    def test_zero_to_the_zero_is_undefined(self):
        evaluation = evaluate(0, 0)
        assert evaluation.text == UNDEFINED
        assert evaluation.value is None
        assert not evaluation.reduced

    def test_zero_to_the_zero_undefined_with_modulus(self):
        assert evaluate(0, 0, 7).text == UNDEFINED

    def test_exact_result(self):
        assert evaluate(2, 10) == Evaluation(2, 10, None, 1024, False, "1024")

    def test_zero_base(self):
        evaluation = evaluate(0, 5)
        assert evaluation.value == 0
        assert evaluation.text == "0"

    def test_fallback_result_is_annotated(self):
        evaluation = evaluate(2, 100)
        assert evaluation.reduced
        assert evaluation.value == 976371285
        assert evaluation.text == "976371285" + FALLBACK_SUFFIX

    def test_explicit_modulus_not_annotated(self):
        evaluation = evaluate(2, 100, 1000)
        assert not evaluation.reduced
        assert evaluation.value == pow(2, 100, 1000)
        assert evaluation.text == str(pow(2, 100, 1000))

    def test_invalid_exponent(self):
        with pytest.raises(InvalidArgument):
            evaluate(2, -1)

    @pytest.mark.parametrize("modulus", [0, -5, "x", 2**64])
    def test_zero_to_the_zero_still_checks_modulus(self, modulus):
        with pytest.raises(InvalidArgument):
            evaluate(0, 0, modulus)

    @pytest.mark.parametrize("base,exponent", [(0, -1), (-1, 0), (0.0, 0)])
    def test_zero_to_the_zero_still_checks_arguments(self, base, exponent):
        with pytest.raises(InvalidArgument):
            evaluate(base, exponent)


class TestFormatLine:
    def test_plain(self):
        assert format_line(evaluate(3, 5)) == "3^5 = 243"

    def test_undefined(self):
        assert format_line(evaluate(0, 0)) == "0^0 = undefined"

    def test_fallback(self):
        assert format_line(evaluate(2, 100)) == "2^100 = 976371285 (modulo 10^9+7)"

    def test_explicit_modulus(self):
        assert format_line(evaluate(2, 10, 1000)) == "2^10 mod 1000 = 24"
