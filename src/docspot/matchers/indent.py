import re
from collections.abc import Sequence

from docspot.collectors import collect_indent_body
from docspot.docblocks import find_docstring
from docspot.matchers.base import BaseMatcher
from docspot.models import BodySpan

# def name(params) -> annotation:
PYTHON_DEF = re.compile(
    r"^\s*(?:async\s+)?def\s+(?P<name>[A-Za-z0-9_]+)\s*\((?P<params>[^)]*)\)\s*(?:->.*?)?:"
)


class IndentFamilyMatcher(BaseMatcher):
    """Matcher for Python, where indentation delimits the function body."""

    family = "Python"

    def match_signature(self, line: str) -> str | None:
        match = PYTHON_DEF.match(line)
        return match.group("name") if match else None

    def collect_body(self, lines: Sequence[str], header_line: int) -> BodySpan:
        return collect_indent_body(lines, header_line)

    def find_documentation(self, lines: Sequence[str], header_line: int) -> str | None:
        return find_docstring(lines, header_line)
