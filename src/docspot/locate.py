"""Locate the function enclosing a cursor position in a source buffer."""

import logging
from pathlib import Path

from docspot.buffer import TextBuffer, as_lines
from docspot.config import LocatorConfig
from docspot.languages import language_for_path
from docspot.matchers import get_matcher_for_language
from docspot.models import FunctionRecord


def locate_function(
    buffer: TextBuffer,
    cursor_line: int,
    language: str,
    config: LocatorConfig | None = None,
    logger: logging.Logger | None = None,
) -> FunctionRecord | None:
    """Find the function whose header is at or above the cursor line.

    The signature is searched upward from the cursor line only, within the
    matcher's lookback window. The buffer is read fresh on every call.

    Args:
        buffer: Source text, or a sequence of lines
        cursor_line: 0-indexed cursor line; clamped into the buffer
        language: Language tag selecting the matcher
        config: Locator settings (defaults if None)
        logger: Logger for diagnostics (module logger if None)

    Returns:
        FunctionRecord, or None if no signature is found in the window
    """
    log = logger or logging.getLogger(__name__)
    lines = as_lines(buffer)

    if not lines:
        log.debug("Empty buffer, nothing to locate")
        return None

    clamped = min(max(cursor_line, 0), len(lines) - 1)
    if clamped != cursor_line:
        log.debug(f"Cursor line {cursor_line} clamped to {clamped}")

    log.info(f"Attempting to find function at line {clamped}, language: {language}")

    matcher = get_matcher_for_language(language, config, logger=logger)
    return matcher.locate(lines, clamped, language)


def locate_function_in_file(
    path: Path,
    cursor_line: int,
    language: str | None = None,
    config: LocatorConfig | None = None,
) -> FunctionRecord | None:
    """Locate the function around a line of a file on disk.

    Args:
        path: Source file path
        cursor_line: 0-indexed cursor line
        language: Language tag; inferred from the file extension if None
        config: Locator settings (defaults if None)

    Returns:
        FunctionRecord, or None if no function is found

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")

    if config is None:
        config = LocatorConfig()

    if language is None:
        language = language_for_path(path, config.extensions)

    with open(path, newline="") as f:
        source_code = f.read()
    return locate_function(source_code, cursor_line, language, config)
