from pathlib import Path

from docspot.languages import FALLBACK_LANGUAGE, language_for_path


def test_known_extensions():
    assert language_for_path(Path("app.js")) == "javascript"
    assert language_for_path(Path("App.jsx")) == "javascriptreact"
    assert language_for_path(Path("index.ts")) == "typescript"
    assert language_for_path(Path("View.tsx")) == "typescriptreact"
    assert language_for_path(Path("tool.py")) == "python"
    assert language_for_path(Path("Main.java")) == "java"
    assert language_for_path(Path("Program.cs")) == "csharp"
    assert language_for_path(Path("widget.cpp")) == "cpp"
    assert language_for_path(Path("util.h")) == "c"


def test_uppercase_extension():
    assert language_for_path(Path("TOOL.PY")) == "python"


def test_unknown_extension():
    assert language_for_path(Path("notes.txt")) == FALLBACK_LANGUAGE
    assert language_for_path(Path("Makefile")) == FALLBACK_LANGUAGE


def test_overrides_take_precedence():
    assert language_for_path(Path("a.h"), {".h": "cpp"}) == "cpp"
    assert language_for_path(Path("a.vue"), {".vue": "javascript"}) == "javascript"
