"""RFC 5322 grammar productions.

Submodules, lowest layer first:

- ``base``: parser plumbing shared by all productions
- ``abnf``: RFC 5234 core rules
- ``lexical``: folding white space, comments, atoms, quoted strings, phrases
- ``address``: mailboxes, groups and address lists
- ``date_time``: dates, times and zones

Import the submodules directly; this package deliberately re-exports
nothing, since ``imfparse.models`` builds on ``lexical`` while ``address``
and ``date_time`` build on ``imfparse.models``.
"""
