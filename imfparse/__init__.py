"""imfparse: RFC 5322 address and date-time parsing, obsolete syntax included.

Usage:
    from imfparse import mailbox_from_string

    mailbox = mailbox_from_string("John Doe <jdoe@machine.example>")
    mailbox.display_name  # ("John", "Doe")
"""

__version__ = "0.1.0"

from imfparse.api import (  # noqa: E402
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
from imfparse.models import Address, DateTime, Group, Mailbox  # noqa: E402

__all__ = [
    "parse_mailbox",
    "parse_address",
    "parse_address_list",
    "parse_addr_spec",
    "parse_date_time",
    "mailbox_from_string",
    "address_from_string",
    "address_list_from_string",
    "date_time_from_string",
    "GrammarSyntaxError",
    "InputTooLongError",
    "Address",
    "DateTime",
    "Group",
    "Mailbox",
    "__version__",
]
