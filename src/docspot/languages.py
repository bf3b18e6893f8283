"""Language tags understood by the locator and their file extensions."""

from collections.abc import Mapping
from pathlib import Path

JS_FAMILY = frozenset({"javascript", "typescript", "javascriptreact", "typescriptreact"})
C_FAMILY = frozenset({"java", "csharp", "cpp", "c"})
INDENT_FAMILY = frozenset({"python"})

# Tag used for files whose extension is not recognized; routed to the fallback
FALLBACK_LANGUAGE = "plaintext"

EXTENSION_LANGUAGES = {
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascriptreact",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "typescriptreact",
    ".py": "python",
    ".pyi": "python",
    ".java": "java",
    ".cs": "csharp",
    ".cpp": "cpp",
    ".cc": "cpp",
    ".cxx": "cpp",
    ".hpp": "cpp",
    ".hh": "cpp",
    ".hxx": "cpp",
    ".c": "c",
    ".h": "c",
}


def language_for_path(path: Path, overrides: Mapping[str, str] | None = None) -> str:
    """Infer the language tag of a file from its extension.

    Args:
        path: File path
        overrides: Extra extension-to-language entries, checked first

    Returns:
        Language tag, or FALLBACK_LANGUAGE for unknown extensions
    """
    suffix = path.suffix.lower()
    if overrides and suffix in overrides:
        return overrides[suffix]
    return EXTENSION_LANGUAGES.get(suffix, FALLBACK_LANGUAGE)
