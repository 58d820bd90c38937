"""Org writer: render a heading back to canonical Org markup.

The output of white_spaced_head() for one heading can be concatenated
directly after another heading's output (or a preface prepared with
white_spaced_file_preface()) to build a complete document.

Layout of a fully populated heading (indented mode, level 1):

    * TODO [#A] Title                                     :tag1:tag2:
      CLOSED: [...] DEADLINE: <...> SCHEDULED: <...>
      CLOCK: [...]
      :PROPERTIES:
      :NAME:     value
      :END:
      :LOGBOOK:
      ...
      :END:

    Body text
"""

import re
from typing import Iterable, Optional

from orgscribe.models.config import SeparateNotesWithNewLine, WriterSettings
from orgscribe.org.heading import OrgHeading
from orgscribe.org.text import string_width, trim_lines

# org-log-note-headings
ORG_LOG_NOTE_HEADINGS = (
    "CLOSING NOTE ",
    "State ",
    "Note taken on ",
    "Rescheduled from ",
    "Not scheduled, was ",
    "New deadline from ",
    "Removed deadline, was ",
    "Refiled on ",
)

# Body lines that would otherwise be read back as headings
_HEADING_LIKE_LINE = re.compile(r"^(\*+\s+)", re.MULTILINE | re.ASCII)

# Control characters and space; wider Unicode spaces are content
_BLANK_CHARS = "".join(map(chr, range(33)))


class OrgWriter:
    """Renders OrgHeading instances using fixed writer settings.

    Example:
        >>> writer = OrgWriter()
        >>> writer.white_spaced_head(OrgHeading(title="Foo"))
        '* Foo\\n'
    """

    def __init__(self, settings: Optional[WriterSettings] = None):
        self.settings = settings if settings is not None else WriterSettings.basic()

    def white_spaced_file_preface(self, content: Optional[str]) -> str:
        """Prepare file preface so that headings can be appended to it.

        Args:
            content: Text before the first heading

        Returns:
            Empty string for empty content, otherwise the content without
            trailing blank lines, followed by exactly two newlines
        """
        if not content:
            return ""
        return trim_lines(content) + "\n\n"

    def white_spaced_head(self, heading: OrgHeading, is_indented: bool = True) -> str:
        """Render a heading, ready to be appended to a document.

        Args:
            heading: Heading to render
            is_indented: Indent planning, drawer and logbook lines by
                level + 1 spaces (False writes them flush left)

        Returns:
            Heading text, always ending with a newline
        """
        settings = self.settings
        level = heading.level
        s: list[str] = []

        s.append("*" * level)
        s.append(" ")

        if heading.state is not None:
            s.append(heading.state + " ")

        if heading.priority is not None:
            s.append(f"[#{heading.priority}] ")

        s.append(heading.title)

        if heading.has_tags():
            # Always at least one space between title and tags
            s.append(" ")
            s.append(self._aligned_tags(heading.tags, "".join(s), level))

        indent = self._indent(level, is_indented)

        # Planning and drawers go right under the title line
        has_under_head = False

        for keyword, value in (
            ("CLOSED", heading.closed),
            ("DEADLINE", heading.deadline),
            ("SCHEDULED", heading.scheduled),
        ):
            if not value:
                continue
            if has_under_head:
                s.append(" ")
            else:
                s.append("\n" + indent)
            s.append(f"{keyword}: {value}")
            has_under_head = True

        if heading.has_clock():
            s.append(f"\n{indent}CLOCK: {heading.clock}")
            has_under_head = True

        if heading.has_properties():
            s.append(f"\n{indent}:PROPERTIES:")
            for prop in heading.properties.get_all():
                line = settings.property_format % (f":{prop.name}:", prop.value)
                s.append(f"\n{indent}{line}")
            s.append(f"\n{indent}:END:")
            has_under_head = True

        if heading.has_logbook():
            s.append(f"\n{indent}:LOGBOOK:")
            for log in heading.logbook:
                s.append(f"\n{indent}{log}")
            s.append(f"\n{indent}:END:")
            has_under_head = True

        s.append("\n")

        separate_notes = settings.separate_notes_with_new_line

        if heading.has_content():
            if settings.separate_header_and_content_with_new_line and not _starts_with_log(heading.content):
                s.append("\n")

            s.append(_HEADING_LIKE_LINE.sub(r" \1", heading.content))
            s.append("\n")

            if separate_notes == SeparateNotesWithNewLine.MULTI_LINE_NOTES_ONLY:
                s.append("\n")

        elif has_under_head and separate_notes == SeparateNotesWithNewLine.MULTI_LINE_NOTES_ONLY:
            s.append("\n")

        if separate_notes == SeparateNotesWithNewLine.ALWAYS:
            s.append("\n")

        return "".join(s)

    def white_spaced_document(
        self,
        headings: Iterable[OrgHeading],
        preface: Optional[str] = None,
        is_indented: bool = True,
    ) -> str:
        """Render a preface followed by headings, in order.

        Args:
            headings: Headings to render
            preface: Text before the first heading
            is_indented: Passed through to white_spaced_head()

        Returns:
            Concatenated document text
        """
        parts = [self.white_spaced_file_preface(preface)]
        parts.extend(self.white_spaced_head(heading, is_indented) for heading in headings)
        return "".join(parts)

    def _aligned_tags(self, tags: list[str], line: str, level: int) -> str:
        """Return the tag string preceded by the padding that aligns it.

        Args:
            tags: Heading tags
            line: Heading line so far, including the separating space
            level: Heading level
        """
        settings = self.settings
        tags_string = tags_to_string(tags)

        padding = abs(settings.tags_column) - string_width(line)

        # With org-indent-mode every level past the first is shifted right
        # by (indentation per level - 1) columns on display
        if settings.org_indent_mode and settings.org_indent_indentation_per_level > 0:
            padding -= (settings.org_indent_indentation_per_level - 1) * (level - 1)

        # Negative column aligns the end of the tags
        if settings.tags_column < 0:
            padding -= string_width(tags_string)

        return " " * max(padding, 0) + tags_string

    @staticmethod
    def _indent(level: int, is_indented: bool) -> str:
        return " " * (level + 1) if is_indented else ""


def tags_to_string(tags: list[str]) -> str:
    """Join tags into Org's colon-delimited form.

    Examples:
        >>> tags_to_string(["a", "b"])
        ':a:b:'
    """
    return ":" + "".join(f"{tag}:" for tag in tags)


def is_log_note_heading(content: str) -> bool:
    """Check whether content starts with a log note list item."""
    return any(content.startswith("- " + heading) for heading in ORG_LOG_NOTE_HEADINGS)


def is_drawer_line(line: str) -> bool:
    """Check whether a line looks like a drawer boundary, e.g. ':NOTES:'."""
    return line.startswith(":") and line.endswith(":")


def _starts_with_log(content: str) -> bool:
    """Check whether content opens with a drawer, clock line or log note.

    Such content is kept directly under the header.
    """
    content = content.strip(_BLANK_CHARS)
    first_line = content.split("\n")[0].strip(_BLANK_CHARS)
    return (
        content.startswith(":LOGBOOK:")
        or content.startswith("CLOCK: ")
        or is_log_note_heading(content)
        or is_drawer_line(first_line)
    )
