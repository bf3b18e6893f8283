import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from docspot.models import BodySpan, FunctionRecord


class BaseMatcher(ABC):
    """Abstract base class for language-family function matchers.

    A matcher recognizes signature lines, expands a matched line into a body
    span and finds the documentation adjoining it. ``locate`` ties the three
    together and scans upward from the cursor within the lookback window.
    """

    family = "generic"

    def __init__(self, lookback: int, logger: logging.Logger | None = None):
        self.lookback = lookback
        self.logger = logger or logging.getLogger(__name__)

    @abstractmethod
    def match_signature(self, line: str) -> str | None:
        """Return the function name if the line is a signature, else None."""
        pass

    @abstractmethod
    def collect_body(self, lines: Sequence[str], header_line: int) -> BodySpan:
        """Expand a signature line into the function's body span."""
        pass

    @abstractmethod
    def find_documentation(self, lines: Sequence[str], header_line: int) -> str | None:
        """Return the doc block adjoining the function, or None."""
        pass

    def locate(
        self,
        lines: Sequence[str],
        cursor_line: int,
        language: str,
    ) -> FunctionRecord | None:
        """Find the function whose signature is at or above the cursor.

        Args:
            lines: Buffer lines
            cursor_line: 0-indexed cursor line, within the buffer
            language: Language tag copied into the record

        Returns:
            FunctionRecord for the nearest signature inside the lookback
            window, or None if no line in the window matches.
        """
        stop = max(0, cursor_line - self.lookback)

        for index in range(cursor_line, stop - 1, -1):
            name = self.match_signature(lines[index])
            if not name:
                continue

            span = self.collect_body(lines, index)
            documentation = self.find_documentation(lines, span.start_line)

            self.logger.info(f"Found {self.family} function: {name} at line {span.start_line}")

            return FunctionRecord(
                name=name,
                signature=lines[index].strip(),
                body=span.body,
                start_line=span.start_line,
                end_line=span.end_line,
                language=language,
                documentation=documentation,
            )

        self.logger.debug(
            f"No {self.family} signature between lines {stop} and {cursor_line}"
        )
        return None
