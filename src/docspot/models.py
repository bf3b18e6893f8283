from dataclasses import asdict, dataclass


@dataclass
class Location:
    """Represents a line range in a source buffer (0-indexed, inclusive)."""
    start: int
    end: int


@dataclass(frozen=True)
class BodySpan:
    """Text and line range collected for a function body."""
    body: str
    start_line: int
    end_line: int


@dataclass(frozen=True)
class FunctionRecord:
    """The function found around a cursor position.

    Attributes:
        name: Identifier taken from the matched signature.
        signature: Trimmed text of the line the header was matched on.
        body: Header line through the last line of the function, one
            newline-terminated line per source line.
        start_line: First line of the function (0-indexed, header included).
        end_line: Last line of the function (0-indexed, inclusive).
        language: Language tag supplied by the caller, unchanged.
        documentation: Doc block adjoining the function, None if absent.
    """
    name: str
    signature: str
    body: str
    start_line: int
    end_line: int
    language: str
    documentation: str | None = None  # None if no doc block

    @property
    def extent(self) -> Location:
        return Location(start=self.start_line, end=self.end_line)

    def to_dict(self) -> dict:
        """Serialize for JSON output, omitting documentation when absent."""
        data = asdict(self)
        if data["documentation"] is None:
            del data["documentation"]
        return data
