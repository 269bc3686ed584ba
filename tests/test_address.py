"""Tests for the address grammar: mailboxes, groups, lists and obsolete forms."""

import pytest

from imfparse.grammar.address import (
    addr_spec,
    address,
    address_list,
    angle_addr,
    domain,
    domain_literal,
    group,
    local_part,
    mailbox,
    mailbox_list,
    obs_route,
)
from imfparse.models import Group, Mailbox


class TestAddrSpec:
    def test_simple(self):
        assert addr_spec("jdoe@example.com", 0) == (("jdoe", "example.com"), 16)

    def test_quoted_local_part(self):
        text = '"john doe"@example.com'
        assert addr_spec(text, 0) == (("john doe", "example.com"), len(text))

    def test_domain_literal(self):
        text = "jdoe@[192.168.0.1]"
        assert addr_spec(text, 0) == (("jdoe", "192.168.0.1"), len(text))

    def test_missing_domain(self):
        assert addr_spec("jdoe@", 0) is None

    def test_missing_at(self):
        assert addr_spec("jdoe", 0) is None


class TestLocalPartAndDomain:
    def test_unterminated_quote_fails_without_consuming(self):
        """A failed attempt leaves nothing behind for the next alternative."""
        text = '"unterminated'
        assert local_part(text, 0) is None
        assert mailbox(text, 0) is None

    def test_obsolete_local_part_joins_words(self):
        assert local_part("john . q@", 0) == ("john.q", 8)

    def test_obsolete_local_part_mixes_quoted_words(self):
        assert local_part('"a".b@', 0) == ("a.b", 5)

    def test_domain_prefers_dot_atom(self):
        assert domain("example.com", 0) == ("example.com", 11)

    def test_obsolete_domain_with_spaces(self):
        assert domain("a . b", 0) == ("a.b", 5)

    def test_domain_literal_drops_folding_white_space(self):
        assert domain_literal("[ 1.2.3.4 ]", 0) == ("1.2.3.4", 11)

    def test_domain_literal_unterminated(self):
        assert domain_literal("[1.2.3.4", 0) is None


class TestMailbox:
    def test_bare_addr_spec(self):
        result = mailbox("jdoe@example.com", 0)

        assert result == (
            Mailbox(display_name=(), route=(), local_part="jdoe", domain="example.com"),
            16,
        )

    def test_display_name_words(self):
        parsed, end = mailbox("John Doe <jdoe@example.com>", 0)

        assert parsed.display_name == ("John", "Doe")
        assert parsed.route == ()
        assert parsed.local_part == "jdoe"
        assert parsed.domain == "example.com"
        assert end == 27

    def test_quoted_display_name_is_one_word(self):
        """A quoted phrase is one word, keeping its interior space.

        The scenario listing ["John", "Doe"] for this input describes the
        unquoted form, covered by test_display_name_words.
        """
        parsed, _ = mailbox('"John Doe" <jdoe@example.com>', 0)

        assert parsed.display_name == ("John Doe",)
        assert parsed.addr_spec == "jdoe@example.com"

    def test_angle_addr_without_display_name(self):
        parsed, end = mailbox("<jdoe@example.com>", 0)

        assert parsed == Mailbox(local_part="jdoe", domain="example.com")
        assert end == 18

    def test_obsolete_phrase(self):
        parsed, _ = mailbox("Joe Q. Public <john.q.public@example.com>", 0)

        assert parsed.display_name == ("Joe", "Q", "Public")
        assert parsed.local_part == "john.q.public"

    def test_comments_around_parts(self):
        text = "Pete(A nice \\) chap) <pete(his account)@silly.test(his host)>"
        parsed, end = mailbox(text, 0)

        assert parsed.display_name == ("Pete",)
        assert parsed.local_part == "pete"
        assert parsed.domain == "silly.test"
        assert end == len(text)

    def test_missing_domain_fails(self):
        assert mailbox("jdoe@", 0) is None

    def test_unclosed_angle_fails(self):
        assert mailbox("John <jdoe@example.com", 0) is None


class TestObsoleteRoute:
    def test_route(self):
        assert obs_route("@a.test,@b.test:", 0) == (["a.test", "b.test"], 16)

    def test_route_tolerates_empty_entries(self):
        assert obs_route(",@a.test,,@b.test:", 0) == (["a.test", "b.test"], 18)

    def test_route_needs_colon(self):
        assert obs_route("@a.test", 0) is None

    def test_angle_addr_with_route(self):
        text = "<@route1.example,@route2.example:jdoe@example.com>"
        assert angle_addr(text, 0) == (
            (("route1.example", "route2.example"), "jdoe", "example.com"),
            len(text),
        )

    def test_mailbox_with_route(self):
        parsed, _ = mailbox("Joe <@relay.test:joe@where.test>", 0)

        assert parsed.display_name == ("Joe",)
        assert parsed.route == ("relay.test",)
        assert parsed.addr_spec == "joe@where.test"


class TestMailboxList:
    def test_comma_separated(self):
        text = "a@b.test, C <c@d.test>"
        values, end = mailbox_list(text, 0)

        assert [m.addr_spec for m in values] == ["a@b.test", "c@d.test"]
        assert end == len(text)

    def test_stray_commas_are_skipped(self):
        """obs-mbox-list empty entries contribute nothing and are not errors."""
        text = ", a@b.test,, c@d.test,"
        values, end = mailbox_list(text, 0)

        assert [m.addr_spec for m in values] == ["a@b.test", "c@d.test"]
        assert end == len(text)

    def test_empty_entry_with_comment(self):
        text = "a@b.test, (nobody), c@d.test"
        values, end = mailbox_list(text, 0)

        assert len(values) == 2
        assert end == len(text)


class TestGroup:
    def test_group_with_members(self):
        result = address("Group: a@b.com, c@d.com;", 0)

        assert result is not None
        parsed, end = result
        assert isinstance(parsed, Group)
        assert parsed.display_name == ("Group",)
        assert [m.addr_spec for m in parsed.mailboxes] == ["a@b.com", "c@d.com"]
        assert end == 24

    def test_empty_group(self):
        parsed, end = group("Undisclosed recipients:;", 0)

        assert parsed == Group(display_name=("Undisclosed", "recipients"))
        assert end == 24

    def test_empty_group_with_comment(self):
        parsed, _ = group("Nobody: (none);", 0)

        assert parsed.mailboxes == ()

    def test_obsolete_group_list_of_commas(self):
        parsed, end = group("A Group:,,;", 0)

        assert parsed.mailboxes == ()
        assert end == 11

    def test_missing_semicolon(self):
        assert group("Group: a@b.com", 0) is None

    def test_address_prefers_mailbox(self):
        parsed, _ = address("Joe <joe@where.test>", 0)

        assert isinstance(parsed, Mailbox)


class TestAddressList:
    def test_mixed_mailboxes_and_groups(self):
        text = (
            "Mary Smith <mary@x.test>, jdoe@example.org, "
            "A Group:Ed Jones <c@a.test>,joe@where.test,John <jdoe@one.test>;"
        )
        values, end = address_list(text, 0)

        assert end == len(text)
        assert len(values) == 3
        assert isinstance(values[2], Group)
        assert len(values[2].mailboxes) == 3

    def test_obsolete_empty_entries(self):
        text = "a@b.test,,c@d.test, ,"
        values, end = address_list(text, 0)

        assert len(values) == 2
        assert end == len(text)

    @pytest.mark.parametrize("text", ["", ",", "@", "<>"])
    def test_no_address(self, text):
        assert address_list(text, 0) is None


class TestRoundTrip:
    """The re-escaped addr-spec of a parsed mailbox parses back to the same parts."""

    @pytest.mark.parametrize(
        "text",
        [
            "jdoe@example.com",
            '"john doe"@example.com',
            r'"a\"b"@example.com',
            r'"back\\slash"@example.com',
            "john . q@example.com",
            "jdoe@[1.2.3.4]",
            r"jdoe@[a\]b]",
            "Joe <@relay.test:joe@where.test>",
        ],
    )
    def test_addr_spec_reparses(self, text):
        parsed, _ = mailbox(text, 0)

        reparsed = addr_spec(parsed.addr_spec, 0)

        assert reparsed == ((parsed.local_part, parsed.domain), len(parsed.addr_spec))
