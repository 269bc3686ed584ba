"""Tests for the RFC 5234 core rules."""

import pytest

from imfparse.grammar.abnf import (
    alpha,
    bit,
    crlf,
    ctl,
    digit,
    digits,
    hexdig,
    is_ctl,
    is_vchar,
    is_wsp,
    lwsp,
    number,
    octet,
    vchar,
    wsp,
)


class TestPredicates:
    @pytest.mark.parametrize("code", [0x21, 0x41, 0x7E])
    def test_vchar_range(self, code):
        assert is_vchar(code)

    @pytest.mark.parametrize("code", [0x20, 0x7F, 0xE9])
    def test_outside_vchar(self, code):
        assert not is_vchar(code)

    def test_ctl(self):
        assert is_ctl(0x00)
        assert is_ctl(0x1F)
        assert is_ctl(0x7F)
        assert not is_ctl(0x20)

    def test_wsp_is_space_or_tab(self):
        assert is_wsp(0x20)
        assert is_wsp(0x09)
        assert not is_wsp(0x0A)


class TestProductions:
    def test_alpha_is_ascii_only(self):
        assert alpha("Z", 0) == ("Z", 1)
        assert alpha("é", 0) is None
        assert vchar("é", 0) is None

    def test_weights(self):
        assert bit("1", 0) == (1, 1)
        assert digit("7", 0) == (7, 1)
        assert hexdig("F", 0) == (15, 1)

    def test_hexdig_is_uppercase_only(self):
        assert hexdig("f", 0) is None

    def test_ctl_and_octet(self):
        assert ctl("\x7f", 0) == ("\x7f", 1)
        assert octet("\xff", 0) == ("\xff", 1)

    def test_wsp(self):
        assert wsp("\tx", 0) == ("\t", 1)

    def test_crlf_needs_both(self):
        assert crlf("\r\nx", 0) == ("\r\n", 2)
        assert crlf("\n", 0) is None
        assert crlf("\r", 0) is None

    def test_lwsp(self):
        assert lwsp(" \r\n\tx", 0) == (" \r\n\t", 4)

    def test_lwsp_leaves_bare_crlf(self):
        assert lwsp("\r\nx", 0) == ("", 0)


class TestDigits:
    def test_number(self):
        assert number([1, 9, 9, 7]) == 1997

    def test_fixed_width(self):
        assert digits(2, 2)("123", 0) == (12, 2)

    def test_minimum(self):
        assert digits(4)("97", 0) is None

    def test_unbounded(self):
        assert digits(1)("20240x", 0) == (20240, 5)
