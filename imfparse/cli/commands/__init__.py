"""CLI commands module."""

from . import address, addresses, config, date, mailbox

__all__ = ["mailbox", "address", "addresses", "date", "config"]
