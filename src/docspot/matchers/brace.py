"""Signature matching for brace-delimited languages (JS/TS and the C family)."""

import logging
import re
from collections.abc import Sequence

from docspot.collectors import collect_brace_body
from docspot.docblocks import find_comment_block
from docspot.matchers.base import BaseMatcher
from docspot.models import BodySpan

# Control-flow words that look like calls followed by a block
KEYWORDS = (
    "if|else|for|foreach|while|do|switch|catch|with|function|return"
    "|typeof|await|new|sizeof|using|lock|fixed"
)
NOT_KEYWORD = rf"(?!(?:{KEYWORDS})\b)"
# No identifier character directly before the name
NAME_START = r"(?<![A-Za-z0-9_$])"
JS_NAME = r"[A-Za-z0-9_$]+"

JS_PATTERNS = [
    # Function declaration: function name(params) { ... }
    re.compile(
        rf"\bfunction\s*\*?\s+(?P<name>{JS_NAME})\s*\((?P<params>[^)]*)\)"
        r"\s*(?::\s*[^{]+)?\{"
    ),
    # Arrow function: const name = (params) => { ... }
    re.compile(
        rf"\b(?:const|let|var)\s+(?P<name>{JS_NAME})\s*(?::[^=]+)?=\s*(?:async\s*)?"
        r"\((?P<params>[^)]*)\)\s*(?::\s*[^=]+)?=>\s*\{"
    ),
    # Method in class or object: name(params) { ... }
    re.compile(rf"{NAME_START}{NOT_KEYWORD}(?P<name>{JS_NAME})\s*\((?P<params>[^)]*)\)\s*\{{"),
    # Class method: public static async name(params): Type { ... }
    re.compile(
        r"(?:(?:public|private|protected)\s+)?(?:static\s+)?(?:async\s+)?"
        rf"{NAME_START}{NOT_KEYWORD}(?P<name>{JS_NAME})\s*\((?P<params>[^)]*)\)"
        r"\s*(?::\s*[^{]+)?\{"
    ),
]

C_MODIFIERS = (
    "public|private|protected|internal|static|final|abstract|virtual|override"
    "|async|synchronized|native|inline|extern|const|constexpr|unsafe|sealed"
    "|partial|explicit"
)

C_FAMILY_PATTERNS = [
    # public static int add(int a, int b) throws IOException {
    # Anything may follow the brace; a header ending in ";" is a prototype
    re.compile(
        rf"^\s*(?:(?:{C_MODIFIERS})\s+)*"
        r"(?:<[^>]*>\s+)?"
        r"(?!(?:return|new|else|throw|case|goto|delete|await)\b)"
        r"(?P<return_type>[A-Za-z0-9_<>\[\]:.?,]+)[\s*&]+"
        rf"{NOT_KEYWORD}(?P<name>(?:[A-Za-z_][A-Za-z0-9_]*::)*~?[A-Za-z_][A-Za-z0-9_]*)"
        r"\s*\((?P<params>[^)]*)\)"
        r"\s*(?:const\s*)?(?:noexcept\s*)?(?:override\s*)?"
        r"(?:throws\s+[A-Za-z0-9_.,\s]+?)?\s*(?:\{.*|[^;]*)$"
    ),
]


class BraceFamilyMatcher(BaseMatcher):
    """Matcher for languages whose function bodies are delimited by braces.

    Patterns are tried in order on each line and the first match wins, so
    narrower shapes must come before broader ones.
    """

    def __init__(
        self,
        patterns: Sequence[re.Pattern],
        family: str,
        lookback: int,
        skip_literals: bool = False,
        logger: logging.Logger | None = None,
    ):
        super().__init__(lookback, logger)
        self.patterns = list(patterns)
        self.family = family
        self.skip_literals = skip_literals

    def match_signature(self, line: str) -> str | None:
        for pattern in self.patterns:
            match = pattern.search(line)
            if match:
                return match.group("name")
        return None

    def collect_body(self, lines: Sequence[str], header_line: int) -> BodySpan:
        return collect_brace_body(lines, header_line, skip_literals=self.skip_literals)

    def find_documentation(self, lines: Sequence[str], header_line: int) -> str | None:
        return find_comment_block(lines, header_line)
