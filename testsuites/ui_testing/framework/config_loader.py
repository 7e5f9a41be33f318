"""
================================================================================
Configuration Loader
================================================================================

Typed loader for the UI test settings document (``Config/application.config``).

Features:
    - JSON or YAML key-value document (parsed with ``yaml.safe_load``)
    - One-pass validation reporting every missing/invalid field
    - Environment variable override (UI_URL overrides URL, ...)
    - Immutable ``Configuration`` value

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urlparse

import yaml
from loguru import logger


# Resolved against the process working directory, not this file
DEFAULT_CONFIG_PATH = Path("Config") / "application.config"

# Document key -> environment variable that overrides it
ENV_OVERRIDES: Dict[str, str] = {
    "URL": "UI_URL",
    "BrowserType": "UI_BROWSER_TYPE",
    "Headless": "UI_HEADLESS",
}

_TRUE_STRINGS = ("true", "1", "yes", "on")
_FALSE_STRINGS = ("false", "0", "no", "off")


class ConfigError(Exception):
    """Raised when the configuration document is missing, malformed or incomplete."""

    def __init__(self, message: str, problems: Optional[List[str]] = None):
        self.problems: List[str] = list(problems or [])
        if self.problems:
            message = message + ":\n" + "\n".join(f"  - {p}" for p in self.problems)
        super().__init__(message)


@dataclass(frozen=True)
class Configuration:
    """
    Validated UI test settings.

    Attributes:
        target_url: Absolute URL opened right after the browser starts
        browser_type: Requested browser kind, as written in the document
        headless: Launch the browser without a visible window
        source: File the settings were read from
    """
    target_url: str
    browser_type: str
    headless: bool = False
    source: Optional[Path] = None


def load(path: Union[str, Path, None] = None) -> Configuration:
    """
    Load and validate the settings document.

    Args:
        path: Document location. Uses DEFAULT_CONFIG_PATH if not specified.

    Returns:
        Immutable Configuration

    Raises:
        ConfigError: File missing/unreadable, not a mapping, or fields
            missing/invalid. Nothing partial is ever returned.
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH

    if not config_path.is_file():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        # Read as bytes; undecodable input surfaces as yaml.ReaderError
        with open(config_path, "rb") as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed configuration file {config_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(
            f"Malformed configuration file {config_path}: "
            f"expected a key-value document, got {type(raw).__name__}"
        )

    values = _apply_env_overrides(raw)
    config = _validate(values, config_path)

    logger.debug(
        f"Loaded configuration from {config_path}: url={config.target_url} "
        f"browser={config.browser_type} headless={config.headless}"
    )
    return config


def _apply_env_overrides(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of the document with environment overrides applied."""
    values = dict(raw)
    for key, env_key in ENV_OVERRIDES.items():
        env_value = os.environ.get(env_key)
        if env_value is not None:
            logger.debug(f"Configuration key {key} overridden by ${env_key}")
            values[key] = env_value
    return values


def _validate(values: Dict[str, Any], config_path: Path) -> Configuration:
    """Check every field and report all problems in one ConfigError."""
    problems: List[str] = []

    url = values.get("URL")
    if url is None or (isinstance(url, str) and not url.strip()):
        problems.append("URL: required field is missing")
    elif not isinstance(url, str):
        problems.append(f"URL: expected a string, got {type(url).__name__}")
    else:
        url = url.strip()
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            problems.append(f"URL: expected an absolute http(s) URL, got {url!r}")

    browser_type = values.get("BrowserType")
    if browser_type is None or (isinstance(browser_type, str) and not browser_type.strip()):
        problems.append("BrowserType: required field is missing")
    elif not isinstance(browser_type, str):
        problems.append(
            f"BrowserType: expected a string, got {type(browser_type).__name__}"
        )
    else:
        browser_type = browser_type.strip()

    headless = values.get("Headless", False)
    if headless is None:
        headless = False
    try:
        headless = _to_bool(headless)
    except ValueError as e:
        problems.append(f"Headless: {e}")

    if problems:
        raise ConfigError(f"Invalid configuration in {config_path}", problems)

    return Configuration(
        target_url=url,
        browser_type=browser_type,
        headless=headless,
        source=config_path,
    )


def _to_bool(value: Any) -> bool:
    """Accept real booleans, 0/1 and their usual string spellings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ValueError(f"expected a boolean, got {value!r}")


__all__ = [
    "Configuration",
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "load",
]
