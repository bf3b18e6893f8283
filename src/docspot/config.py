"""Configuration management for the function locator."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

CONFIG_FILENAME = ".docspot"


@dataclass
class LocatorConfig:
    """Configuration for function boundary location.

    Attributes:
        lookback: Lines above the cursor scanned for a signature by the
            brace and indentation matchers.
        fallback_lookback: Lines above the cursor scanned by the fallback
            matcher for unrecognized languages.
        skip_literals: Ignore braces inside strings and comments when
            collecting brace-delimited bodies.
        extensions: Extra file extension to language tag mappings.
    """
    lookback: int = 10
    fallback_lookback: int = 5
    skip_literals: bool = False
    extensions: dict[str, str] = field(default_factory=dict)


def _lookback_value(value, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return default
    return value


def _extension_map(value) -> dict[str, str]:
    if not isinstance(value, dict):
        return {}
    extensions = {}
    for suffix, language in value.items():
        if not isinstance(suffix, str) or not isinstance(language, str):
            continue
        suffix = suffix.lower()
        if not suffix.startswith("."):
            suffix = f".{suffix}"
        extensions[suffix] = language
    return extensions


def load_locator_config(root: Path | None = None) -> LocatorConfig:
    """Load locator configuration from the .docspot file in root.

    Args:
        root: Directory holding the config file. If None, uses current directory.

    Returns:
        LocatorConfig with loaded or default values.

    Notes:
        If the file doesn't exist or can't be parsed, returns default config.
        Invalid individual values fall back to their defaults.
        Expected YAML structure:

        ```yaml
        locator:
          lookback: 10
          fallback_lookback: 5
          skip_literals: false
        languages:
          ".vue": javascript
        ```
    """
    if root is None:
        root = Path.cwd()

    config_path = root / CONFIG_FILENAME

    if not config_path.exists():
        return LocatorConfig()

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, OSError, UnicodeDecodeError):
        return LocatorConfig()

    if not isinstance(data, dict):
        return LocatorConfig()

    locator = data.get("locator", {})
    if not isinstance(locator, dict):
        locator = {}

    skip_literals = locator.get("skip_literals", LocatorConfig.skip_literals)
    if not isinstance(skip_literals, bool):
        skip_literals = LocatorConfig.skip_literals

    return LocatorConfig(
        lookback=_lookback_value(locator.get("lookback"), LocatorConfig.lookback),
        fallback_lookback=_lookback_value(
            locator.get("fallback_lookback"),
            LocatorConfig.fallback_lookback
        ),
        skip_literals=skip_literals,
        extensions=_extension_map(data.get("languages")),
    )
