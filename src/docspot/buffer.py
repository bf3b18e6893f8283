"""Adapters between caller-supplied buffers and the line lists scanners use.

Lines are split on ``\\n`` only, the way editors number them. Form feeds and
other characters ``str.splitlines`` treats as breaks stay inside their line.
"""

from collections.abc import Sequence

TextBuffer = str | Sequence[str]


def split_lines(text: str) -> list[str]:
    """Split text after every ``\\n``, keeping the terminators.

    A text ending in a newline has no trailing empty line.
    """
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def as_lines(buffer: TextBuffer) -> list[str]:
    """Return the buffer as a list of lines without line terminators.

    Args:
        buffer: Either the whole text or an already split sequence of lines

    Returns:
        List of lines. A text ending in a newline has no trailing empty line.
    """
    if isinstance(buffer, str):
        buffer = split_lines(buffer)
    return [line.rstrip("\r\n") for line in buffer]


def is_blank(line: str) -> bool:
    return line.strip() == ""


def indent_width(line: str) -> int:
    """Column of the first non-whitespace character (tabs count as one)."""
    return len(line) - len(line.lstrip())


def join_body(lines: Sequence[str]) -> str:
    return "".join(line + "\n" for line in lines)
