"""
================================================================================
Element Locators
================================================================================

Declarative element locators resolved fresh on every access.

A locator is never turned into a cached handle: each action looks the
element up again, so a re-rendered DOM between actions is tolerated at
the cost of one lookup per call.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from loguru import logger
from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError


class ElementNotFoundError(Exception):
    """Raised when a locator matches no element within the implicit wait."""
    pass


class By(Enum):
    """Locator strategies, mapped to Playwright selector engines."""
    ID = "id"
    CSS = "css"


@dataclass(frozen=True)
class ElementLocator:
    """
    Element locator.

    Attributes:
        by: Locator strategy
        value: Identifier or selector for the strategy
        name: Human-readable element name for logs and reports
    """
    by: By
    value: str
    name: str = ""

    @property
    def selector(self) -> str:
        """Playwright selector string, e.g. ``id=username``."""
        return f"{self.by.value}={self.value}"

    @property
    def display_name(self) -> str:
        return self.name or self.selector

    async def resolve(self, page: Page) -> Locator:
        """
        Look the element up on the current DOM.

        Waits up to the page default timeout for at least one match.

        Raises:
            ElementNotFoundError: Nothing matched in time
        """
        locator = page.locator(self.selector).first
        try:
            await locator.wait_for(state="attached")
        except PlaywrightTimeoutError as e:
            message = f"Element '{self.display_name}' not found by {self.selector}"
            logger.error(message)
            raise ElementNotFoundError(message) from e
        logger.debug(f"Element '{self.display_name}' found: {self.selector}")
        return locator


__all__ = [
    "By",
    "ElementLocator",
    "ElementNotFoundError",
]
