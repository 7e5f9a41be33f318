"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework.

Components:
    - config_loader: Typed loading of Config/application.config
    - browser_manager: Browser session lifecycle (open, navigate, close)
    - locators: Element locators resolved fresh on every action
    - page_base: Base page object

Author: Automation Team
License: MIT
================================================================================
"""

from .config_loader import Configuration, ConfigError, load
from .browser_manager import (
    BrowserManager,
    DriverSession,
    NavigationError,
    SessionClosedError,
    UnsupportedBrowserError,
)
from .locators import By, ElementLocator, ElementNotFoundError
from .page_base import BasePage

__all__ = [
    "BasePage",
    "BrowserManager",
    "By",
    "ConfigError",
    "Configuration",
    "DriverSession",
    "ElementLocator",
    "ElementNotFoundError",
    "NavigationError",
    "SessionClosedError",
    "UnsupportedBrowserError",
    "load",
]
