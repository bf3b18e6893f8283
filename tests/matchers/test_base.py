import pytest

from docspot.matchers.base import BaseMatcher
from docspot.models import BodySpan


def test_cannot_instantiate_base_matcher():
    with pytest.raises(TypeError) as exc_info:
        BaseMatcher(10)

    assert "abstract" in str(exc_info.value).lower()


def test_subclass_must_implement_match_signature():
    class IncompleteMatcher(BaseMatcher):
        def collect_body(self, lines, header_line):
            return BodySpan(body="", start_line=header_line, end_line=header_line)

        def find_documentation(self, lines, header_line):
            return None

    with pytest.raises(TypeError) as exc_info:
        IncompleteMatcher(10)

    assert "match_signature" in str(exc_info.value)


class SingleLineMatcher(BaseMatcher):
    """Treats every line starting with 'fn ' as a one-line function."""

    family = "test"

    def match_signature(self, line):
        return line[3:].strip() if line.startswith("fn ") else None

    def collect_body(self, lines, header_line):
        return BodySpan(body=lines[header_line] + "\n", start_line=header_line, end_line=header_line)

    def find_documentation(self, lines, header_line):
        return "doc" if header_line > 0 and lines[header_line - 1] == "#doc" else None


def test_locate_scans_upward_to_nearest_signature():
    lines = ["fn first", "#doc", "fn second", "body", "body"]

    record = SingleLineMatcher(10).locate(lines, 4, "toy")

    assert record.name == "second"
    assert record.start_line == 2
    assert record.documentation == "doc"
    assert record.language == "toy"


def test_locate_never_looks_below_cursor():
    lines = ["body", "fn below"]

    assert SingleLineMatcher(10).locate(lines, 0, "toy") is None


def test_locate_window_includes_lookback_line():
    lines = ["fn top", "a", "b", "c"]

    assert SingleLineMatcher(3).locate(lines, 3, "toy").name == "top"
    assert SingleLineMatcher(2).locate(lines, 3, "toy") is None


def test_locate_trims_signature():
    record = SingleLineMatcher(0).locate(["fn spaced   "], 0, "toy")

    assert record.signature == "fn spaced"
