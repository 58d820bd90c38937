"""String helpers for laying out Org text."""

from rich.cells import cell_len


def string_width(text: str) -> int:
    """Return the display width of text in terminal cells.

    Wide characters (CJK, most emoji) occupy two cells, combining marks
    occupy none.

    Examples:
        >>> string_width("abc")
        3
        >>> string_width("日本")
        4
    """
    return cell_len(text)


def trim_lines(text: str) -> str:
    """Strip trailing blank lines and trailing whitespace from text.

    Leading content is left untouched.

    Examples:
        >>> trim_lines("Preface\\n\\n  \\n")
        'Preface'
    """
    return text.rstrip()
