import logging
import re

from docspot.matchers.brace import BraceFamilyMatcher

# Anything shaped like name(...)
GENERIC_PATTERN = re.compile(r"(?P<name>[A-Za-z0-9_]+)\s*\((?P<params>[^)]*)\)")


class FallbackMatcher(BraceFamilyMatcher):
    """Best-effort matcher for unrecognized languages.

    Any ``identifier(...)`` on a line counts as a signature, so false
    positives are expected. Bodies and doc blocks are found the brace way.
    """

    def __init__(
        self,
        lookback: int,
        skip_literals: bool = False,
        logger: logging.Logger | None = None,
    ):
        super().__init__(
            [GENERIC_PATTERN],
            family="generic",
            lookback=lookback,
            skip_literals=skip_literals,
            logger=logger,
        )
