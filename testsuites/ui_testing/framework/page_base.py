"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Element interaction through freshly resolved locators
    - Page title access and title assertion with diagnostics

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger
from playwright.async_api import Page

from autotest_tools.report_tools.allure_utils import attach_text
from .browser_manager import DriverSession
from .locators import ElementLocator


class BasePage:
    """
    Base class for all page objects.

    A page object borrows a DriverSession; it never opens or closes one.

    Usage:
        class LoginPage(BasePage):
            SUBMIT = ElementLocator(By.CSS, "button[type='submit']", "submit")

            async def submit(self):
                await self.click(self.SUBMIT)
    """

    def __init__(self, session: DriverSession):
        """
        Initialize page object.

        Args:
            session: Live session, already navigated
        """
        self.session = session

    @property
    def page(self) -> Page:
        """Playwright page of the borrowed session."""
        return self.session.page

    async def click(self, element: ElementLocator) -> None:
        """Resolve an element and click it."""
        with allure.step(f"Click: {element.display_name}"):
            locator = await element.resolve(self.page)
            await locator.click()

    async def fill(self, element: ElementLocator, value: str, secret: bool = False) -> None:
        """
        Resolve an input and replace its content.

        Args:
            element: Input locator
            value: Text to type
            secret: Mask the value in step names and logs
        """
        shown = "*" * len(value) if secret else value
        with allure.step(f"Fill {element.display_name}: {shown}"):
            locator = await element.resolve(self.page)
            await locator.fill(value)
            logger.debug(f"Filled '{element.display_name}' with {shown!r}")

    async def input_value(self, element: ElementLocator) -> str:
        """Current value of an input element."""
        locator = await element.resolve(self.page)
        return await locator.input_value()

    async def title(self) -> str:
        """Current page title."""
        return await self.page.title()

    async def assert_title_contains(self, expected: str) -> None:
        """
        Hard assertion on the page title.

        Raises:
            AssertionError: Message names the expected substring and the actual title
        """
        actual = await self.title()
        with allure.step(f"Verify title contains {expected!r}"):
            if expected not in actual:
                message = (
                    f"Expected page title to contain {expected!r}, "
                    f"actual title: {actual!r}"
                )
                attach_text(message, name="Title assertion")
                raise AssertionError(message)


__all__ = [
    "BasePage",
]
