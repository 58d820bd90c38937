"""orgscribe - Write Org mode headings back to canonical text.

This package renders structured Org headings (title, todo state, priority,
tags, planning times, property drawer, logbook and body) to the plain-text
markup Emacs Org mode reads and writes.

Key features:
- Byte-exact heading layout with tag column alignment
- Property drawers that keep duplicate and appending (name+) entries in order
- Configurable blank-line separation between headings and bodies

Example:
    >>> from orgscribe import OrgHeading, OrgWriter
    >>> heading = OrgHeading(title="Foo", state="TODO", tags=["work"])
    >>> heading.properties.put("ID", "1")
    >>> text = OrgWriter().white_spaced_head(heading)
"""

from orgscribe.models.config import Config, SeparateNotesWithNewLine, WriterSettings
from orgscribe.org import OrgHeading, OrgProperties, OrgProperty, OrgWriter

__version__ = "0.1.0"

__all__ = [
    "Config",
    "OrgHeading",
    "OrgProperties",
    "OrgProperty",
    "OrgWriter",
    "SeparateNotesWithNewLine",
    "WriterSettings",
]
