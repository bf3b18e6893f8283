"""Body collectors that expand a matched header line into a function span.

Both collectors work on raw text. The brace collector counts nesting
delimiters, the indentation collector compares leading whitespace widths.
Neither understands the language beyond that, so braces inside strings or
mixed tab/space indentation can yield a wrong (but well-formed) span.
"""

from collections.abc import Iterable, Sequence

from docspot.buffer import indent_width, is_blank, join_body
from docspot.models import BodySpan


def strip_literals(lines: Iterable[str]) -> list[str]:
    """Blank out string literals, character literals and comments.

    Handles C-style quoting: single and double quoted strings end at the
    line end, backtick template literals and /* */ comments may span lines.
    Only the characters outside of those are kept, so the result is meant
    for delimiter counting, not for display.

    Args:
        lines: Lines of C-family or JS/TS source

    Returns:
        One cleaned line per input line
    """
    cleaned = []
    in_block_comment = False
    in_template = False

    for line in lines:
        kept = []
        quote = None
        i = 0
        while i < len(line):
            char = line[i]

            if in_block_comment:
                if line.startswith("*/", i):
                    in_block_comment = False
                    i += 2
                else:
                    i += 1
                continue

            if quote or in_template:
                if char == "\\":
                    i += 2
                    continue
                if char == (quote or "`"):
                    quote = None
                    in_template = False
                i += 1
                continue

            if line.startswith("//", i):
                break
            if line.startswith("/*", i):
                in_block_comment = True
                i += 2
                continue

            if char == "`":
                in_template = True
            elif char in ("'", '"'):
                quote = char
            else:
                kept.append(char)
            i += 1

        cleaned.append("".join(kept))

    return cleaned


def collect_brace_body(
    lines: Sequence[str],
    header_line: int,
    skip_literals: bool = False,
) -> BodySpan:
    """Collect a brace-delimited function body starting at its header.

    Lines are appended from the header until the first one holding an
    opening brace. From that brace on a depth counter goes up on every
    ``{`` and down on every ``}``; the line where it returns to zero is the
    last line of the function. If the buffer ends first, the span runs to
    the last line.

    Args:
        lines: Buffer lines
        header_line: 0-indexed line the signature was matched on
        skip_literals: Ignore braces inside strings and comments

    Returns:
        BodySpan covering the header through the closing line
    """
    counted = strip_literals(lines[header_line:]) if skip_literals else lines[header_line:]
    depth = 0
    opened = False

    for offset, text in enumerate(counted):
        if not opened:
            brace = text.find("{")
            if brace == -1:
                continue
            opened = True
            text = text[brace:]

        for char in text:
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    return _span(lines, header_line, header_line + offset)

    return _span(lines, header_line, len(lines) - 1)


def collect_indent_body(lines: Sequence[str], header_line: int) -> BodySpan:
    """Collect an indentation-delimited (Python) function body.

    Blank lines never end the body. The first non-blank line indented no
    deeper than the header ends it and is excluded.

    Args:
        lines: Buffer lines
        header_line: 0-indexed line holding the ``def``

    Returns:
        BodySpan covering the header through the last body line
    """
    def_indent = indent_width(lines[header_line])
    end_line = header_line

    for index in range(header_line + 1, len(lines)):
        line = lines[index]
        if not is_blank(line) and indent_width(line) <= def_indent:
            break
        end_line = index

    return _span(lines, header_line, end_line)


def _span(lines: Sequence[str], start_line: int, end_line: int) -> BodySpan:
    end_line = max(start_line, end_line)
    return BodySpan(
        body=join_body(lines[start_line:end_line + 1]),
        start_line=start_line,
        end_line=end_line,
    )
