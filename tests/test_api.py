"""Tests for the public parsing API and its error reporting."""

from unittest.mock import patch

import pytest

from imfparse import (
    GrammarSyntaxError,
    InputTooLongError,
    address_from_string,
    address_list_from_string,
    date_time_from_string,
    mailbox_from_string,
    parse_addr_spec,
    parse_address,
    parse_address_list,
    parse_date_time,
    parse_mailbox,
)
from imfparse.models import Group, Mailbox


@pytest.fixture(autouse=True)
def empty_config():
    """Keep the user's config file out of the tests."""
    with patch("imfparse.api.load_config", return_value={}):
        yield


class TestParseFunctions:
    def test_parse_mailbox(self):
        assert parse_mailbox("jdoe@example.com") == (
            Mailbox(local_part="jdoe", domain="example.com"),
            16,
        )

    def test_parse_mailbox_failure(self):
        assert parse_mailbox("jdoe@") is None

    def test_start_position(self):
        text = "To: jdoe@example.com"
        parsed, end = parse_mailbox(text, 4)

        assert parsed.local_part == "jdoe"
        assert end == len(text)

    def test_stops_where_the_production_does(self):
        parsed, end = parse_mailbox("jdoe@example.com; rest")

        assert parsed.domain == "example.com"
        assert end == 16

    def test_bytes_input(self):
        parsed, _ = parse_mailbox(b"jdoe@example.com")

        assert parsed.addr_spec == "jdoe@example.com"

    def test_non_ascii_bytes_never_match(self):
        assert parse_mailbox(b"caf\xe9@example.com") is None

    def test_parse_address(self):
        parsed, _ = parse_address("Group: a@b.com, c@d.com;")

        assert isinstance(parsed, Group)

    def test_parse_address_list(self):
        values, _ = parse_address_list("a@b.test, c@d.test")

        assert len(values) == 2

    def test_parse_addr_spec(self):
        assert parse_addr_spec("jdoe@example.com") == (("jdoe", "example.com"), 16)

    def test_parse_date_time(self):
        parsed, end = parse_date_time("Fri, 21 Nov 1997 09:55:06 -0600")

        assert (parsed.year, parsed.month, parsed.day) == (1997, 11, 21)
        assert end == 31

    def test_deep_nesting_is_a_failure(self):
        text = "(" * 5000 + ")" * 5000 + "jdoe@example.com"

        assert parse_mailbox(text) is None


class TestWholeInput:
    def test_mailbox(self):
        mailbox = mailbox_from_string("John Doe <jdoe@machine.example>")

        assert mailbox.display_name == ("John", "Doe")

    def test_address(self):
        group = address_from_string("Undisclosed recipients:;")

        assert group == Group(display_name=("Undisclosed", "recipients"))

    def test_address_list(self):
        values = address_list_from_string(", a@b.test,, c@d.test,")

        assert [value.addr_spec for value in values] == ["a@b.test", "c@d.test"]

    def test_date_time(self):
        parsed = date_time_from_string("Fri, 21 Nov 1997 09:55:06 -0600")

        assert parsed.offset == -600

    def test_error_message(self):
        with pytest.raises(GrammarSyntaxError) as exc_info:
            mailbox_from_string("jdoe@")

        error = exc_info.value
        assert error.language == "RFC 5322"
        assert error.production == "mailbox"
        assert error.source == "jdoe@"
        assert str(error) == (
            "Could not parse the following as a mailbox expression "
            "in the RFC 5322 grammar: “jdoe@”"
        )

    def test_trailing_input_is_an_error(self):
        with pytest.raises(GrammarSyntaxError):
            mailbox_from_string("jdoe@example.com; rest")

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            date_time_from_string("yesterday")

    def test_deep_nesting_is_a_syntax_error(self):
        text = "(" * 5000 + ")" * 5000 + "jdoe@example.com"

        with pytest.raises(GrammarSyntaxError) as exc_info:
            mailbox_from_string(text, max_length=0)

        assert isinstance(exc_info.value.__cause__, RecursionError)


class TestInputLimit:
    def test_explicit_limit(self):
        with pytest.raises(InputTooLongError) as exc_info:
            mailbox_from_string("jdoe@example.com", max_length=5)

        assert exc_info.value.limit == 5
        assert exc_info.value.production == "mailbox"

    def test_limit_from_config(self):
        config = {"limits": {"max_input_length": 3}}
        with patch("imfparse.api.load_config", return_value=config):
            with pytest.raises(InputTooLongError):
                mailbox_from_string("jdoe@example.com")

    def test_default_limit_allows_normal_input(self):
        assert mailbox_from_string("jdoe@example.com").domain == "example.com"

    def test_zero_disables_limit(self):
        text = "a" * 20000 + "@example.com"

        assert mailbox_from_string(text, max_length=0).local_part == "a" * 20000

    def test_too_long_is_a_syntax_error(self):
        with pytest.raises(GrammarSyntaxError):
            address_list_from_string("a@b.test", max_length=1)
