"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Semantic actions for the practice login form.

Every action looks its element up again before acting, so the page
object holds nothing besides the borrowed session.

================================================================================
"""

from __future__ import annotations

import allure

from testsuites.ui_testing.framework.locators import By, ElementLocator
from testsuites.ui_testing.framework.page_base import BasePage


class LoginPage(BasePage):
    """Login page object (async)."""

    USERNAME = ElementLocator(By.ID, "username", "username input")
    PASSWORD = ElementLocator(By.ID, "password", "password input")
    SUBMIT = ElementLocator(By.CSS, "button[type='submit']", "submit button")

    async def enter_username(self, text: str) -> None:
        """Type into the username field, replacing its content."""
        await self.fill(self.USERNAME, text)

    async def enter_password(self, text: str) -> None:
        """Type into the password field, replacing its content."""
        await self.fill(self.PASSWORD, text, secret=True)

    async def submit(self) -> None:
        """Click the form's submit button."""
        await self.click(self.SUBMIT)

    @allure.step("Login (username={username})")
    async def login(self, username: str, password: str) -> None:
        await self.enter_username(username)
        await self.enter_password(password)
        await self.submit()
