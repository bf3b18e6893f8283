"""Splice a documentation block into source code at a located function."""

import textwrap

from docspot.buffer import as_lines, indent_width, is_blank, split_lines
from docspot.docblocks import find_comment_block, find_docstring
from docspot.languages import INDENT_FAMILY
from docspot.models import FunctionRecord

DEFAULT_INDENT = "    "


def _leading_whitespace(line: str) -> str:
    return line[:indent_width(line)]


def _line_ending(line: str) -> str:
    stripped = line.rstrip("\r\n")
    return line[len(stripped):] or "\n"


def _indent_block(doc_text: str, indent: str, newline: str) -> list[str]:
    """Re-indent doc text to the given prefix, one entry per line."""
    dedented = textwrap.dedent(doc_text.strip("\n"))
    return [
        (indent + line if line.strip() else "") + newline
        for line in as_lines(dedented)
    ]


def _python_body_indent(plain_lines: list[str], record: FunctionRecord) -> str:
    header_indent = _leading_whitespace(plain_lines[record.start_line])
    for line in plain_lines[record.start_line + 1:record.end_line + 1]:
        if not is_blank(line) and indent_width(line) > len(header_indent):
            return _leading_whitespace(line)
    return header_indent + DEFAULT_INDENT


def splice_documentation(source_code: str, record: FunctionRecord, doc_text: str) -> str:
    """Insert or replace the documentation block of a located function.

    Python docstrings go on the line after the ``def``, one level deeper than
    the header. Other languages get the block directly above the header at
    the header's indentation. An existing doc block is replaced. The doc
    text is placed as given apart from indentation.

    Args:
        source_code: Source the record was located in
        record: Function located in source_code
        doc_text: Ready-made documentation block, including its delimiters

    Returns:
        Updated source code

    Raises:
        ValueError: If the record does not fit the source code
    """
    lines = split_lines(source_code)
    plain_lines = [line.rstrip("\r\n") for line in lines]

    extent = record.extent
    if not 0 <= extent.start <= extent.end < len(lines):
        raise ValueError(
            f"Function lines {extent.start}-{extent.end} are outside "
            f"the source ({len(lines)} lines)"
        )

    header = lines[record.start_line]
    newline = _line_ending(header)

    if record.language in INDENT_FAMILY:
        if not header.endswith(("\n", "\r")):
            # Header is the last line and has no terminator
            lines[record.start_line] = header + newline
        existing = find_docstring(plain_lines, record.start_line)
        replace_start = record.start_line + 1
        indent = _python_body_indent(plain_lines, record)
    else:
        existing = find_comment_block(plain_lines, record.start_line)
        indent = _leading_whitespace(plain_lines[record.start_line])
        if existing is None:
            replace_start = record.start_line
        else:
            block_end = record.start_line - 1
            while is_blank(plain_lines[block_end]):
                block_end -= 1
            replace_start = block_end - existing.count("\n")

    if record.documentation is not None and existing is None:
        raise ValueError(
            f"Documentation of '{record.name}' no longer found next to line {record.start_line}"
        )

    replace_end = replace_start
    if existing is not None:
        replace_end += existing.count("\n") + 1

    lines[replace_start:replace_end] = _indent_block(doc_text, indent, newline)

    return "".join(lines)
