"""Find documentation blocks adjoining a function header."""

import re
from collections.abc import Sequence

from docspot.buffer import is_blank

COMMENT_OPENER = "/*"
COMMENT_CLOSER = "*/"

# Optional string prefix, then the triple-quote delimiter
DOCSTRING_START = re.compile(r'^[rRuU]?("""|\'\'\')')


def find_comment_block(lines: Sequence[str], start_line: int) -> str | None:
    """Find a block comment (JSDoc, JavaDoc, ...) right above a function.

    Blank lines between the comment and the function are skipped.

    Args:
        lines: Buffer lines
        start_line: 0-indexed first line of the function

    Returns:
        The comment lines as they appear in the buffer, joined with newlines,
        or None if the function has no block comment above it.
    """
    index = start_line - 1
    while index >= 0 and is_blank(lines[index]):
        index -= 1

    if index < 0 or not lines[index].strip().endswith(COMMENT_CLOSER):
        return None

    end = index
    while index >= 0:
        if lines[index].strip().startswith(COMMENT_OPENER):
            return "\n".join(lines[index:end + 1])
        index -= 1

    return None


def find_docstring(lines: Sequence[str], header_line: int) -> str | None:
    """Find the docstring on the line directly under a ``def`` line.

    Unlike block comments, blank lines between the header and the docstring
    are not skipped.

    Args:
        lines: Buffer lines
        header_line: 0-indexed line holding the ``def``

    Returns:
        The docstring lines joined with newlines, or None if absent.
        An unterminated docstring is returned up to the end of the buffer.
    """
    first = header_line + 1
    if first >= len(lines):
        return None

    opening = lines[first].strip()
    match = DOCSTRING_START.match(opening)
    if not match:
        return None

    delimiter = match.group(1)
    if len(opening) > match.end() and opening.endswith(delimiter):
        return lines[first]

    for index in range(first + 1, len(lines)):
        if lines[index].strip().endswith(delimiter):
            return "\n".join(lines[first:index + 1])

    return "\n".join(lines[first:])
