import logging

from docspot.config import LocatorConfig
from docspot.languages import C_FAMILY, INDENT_FAMILY, JS_FAMILY
from docspot.matchers.base import BaseMatcher
from docspot.matchers.brace import C_FAMILY_PATTERNS, JS_PATTERNS, BraceFamilyMatcher
from docspot.matchers.fallback import FallbackMatcher
from docspot.matchers.indent import IndentFamilyMatcher


def get_matcher_for_language(
    language: str,
    config: LocatorConfig | None = None,
    logger: logging.Logger | None = None,
) -> BaseMatcher:
    """Get the matcher for a language tag.

    Args:
        language: Language tag such as "typescript" or "python"
        config: Locator settings (defaults if None)
        logger: Logger for diagnostics (module logger if None)

    Returns:
        Matcher for the tag's language family, or the fallback matcher
        for unrecognized tags
    """
    if config is None:
        config = LocatorConfig()

    if language in JS_FAMILY:
        return BraceFamilyMatcher(
            JS_PATTERNS,
            family="JavaScript/TypeScript",
            lookback=config.lookback,
            skip_literals=config.skip_literals,
            logger=logger,
        )

    if language in INDENT_FAMILY:
        return IndentFamilyMatcher(config.lookback, logger=logger)

    if language in C_FAMILY:
        return BraceFamilyMatcher(
            C_FAMILY_PATTERNS,
            family="C-style",
            lookback=config.lookback,
            skip_literals=config.skip_literals,
            logger=logger,
        )

    return FallbackMatcher(
        config.fallback_lookback,
        skip_literals=config.skip_literals,
        logger=logger,
    )


__all__ = [
    "BaseMatcher",
    "BraceFamilyMatcher",
    "FallbackMatcher",
    "IndentFamilyMatcher",
    "get_matcher_for_language",
]
