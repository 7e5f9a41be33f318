"""
In-memory stand-ins for the Playwright driver used by unit tests.

They record every lifecycle call (launch, close, stop) and element
lookup so tests can check ownership and resolution rules without a
real browser.
"""

from typing import Any, Dict, List, Optional

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.config_loader import Configuration


LOGIN_FORM = ("id=username", "id=password", "css=button[type='submit']")


class FakeLocator:
    def __init__(self, page: "FakePage", selector: str):
        self.page = page
        self.selector = selector

    @property
    def first(self) -> "FakeLocator":
        return self

    async def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        self.page.lookups.append(self.selector)
        if self.selector not in self.page.elements:
            raise PlaywrightTimeoutError(
                f"Timeout {self.page.default_timeout}ms exceeded "
                f"waiting for locator('{self.selector}')"
            )

    async def fill(self, value: str) -> None:
        self.page.elements[self.selector] = value

    async def input_value(self) -> str:
        return self.page.elements[self.selector]

    async def click(self) -> None:
        self.page.clicks.append(self.selector)
        if self.page.title_after_click is not None:
            self.page.title_text = self.page.title_after_click


class FakePage:
    def __init__(self, elements=LOGIN_FORM):
        self.elements: Dict[str, str] = {selector: "" for selector in elements}
        self.lookups: List[str] = []
        self.clicks: List[str] = []
        self.visited: List[str] = []
        self.default_timeout: Optional[float] = None
        self.navigation_timeout: Optional[float] = None
        self.title_text = "Test Login | Practice Test Automation"
        self.title_after_click: Optional[str] = None
        self.goto_error: Optional[Exception] = None
        self.url = "about:blank"

    def set_default_timeout(self, timeout: float) -> None:
        self.default_timeout = timeout

    def set_default_navigation_timeout(self, timeout: float) -> None:
        self.navigation_timeout = timeout

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, selector)

    async def goto(self, url: str, **kwargs: Any):
        if self.goto_error is not None:
            raise self.goto_error
        self.visited.append(url)
        self.url = url

    async def title(self) -> str:
        return self.title_text

    async def screenshot(self, **kwargs: Any) -> bytes:
        return b"\x89PNG fake"


class FakeContext:
    def __init__(self, page: FakePage):
        self.page = page
        self.options: Dict[str, Any] = {}
        self.close_calls = 0

    async def new_page(self) -> FakePage:
        return self.page

    async def close(self) -> None:
        self.close_calls += 1


class FakeBrowser:
    def __init__(self, page: FakePage):
        self.context = FakeContext(page)
        self.close_calls = 0

    async def new_context(self, **options: Any) -> FakeContext:
        self.context.options = options
        return self.context

    async def close(self) -> None:
        self.close_calls += 1


class FakeLauncher:
    def __init__(self, engine: str, driver: "FakePlaywright"):
        self.engine = engine
        self.driver = driver

    async def launch(self, **options: Any) -> FakeBrowser:
        if self.driver.launch_error is not None:
            raise self.driver.launch_error
        self.driver.launches.append((self.engine, options))
        return self.driver.browser


class FakePlaywright:
    def __init__(self):
        self.page = FakePage()
        self.browser = FakeBrowser(self.page)
        self.launches: List[tuple] = []
        self.launch_error: Optional[Exception] = None
        self.start_calls = 0
        self.stop_calls = 0
        self.chromium = FakeLauncher("chromium", self)
        self.firefox = FakeLauncher("firefox", self)
        self.webkit = FakeLauncher("webkit", self)

    def factory(self):
        """Drop-in for async_playwright."""
        driver = self

        class _Starter:
            async def start(self):
                driver.start_calls += 1
                return driver

        return _Starter()

    async def stop(self) -> None:
        self.stop_calls += 1


@pytest.fixture
def fake_playwright() -> FakePlaywright:
    return FakePlaywright()


@pytest.fixture
def fake_page(fake_playwright: FakePlaywright) -> FakePage:
    return fake_playwright.page


@pytest.fixture
def manager(fake_playwright: FakePlaywright) -> BrowserManager:
    return BrowserManager(playwright_factory=fake_playwright.factory)


@pytest.fixture
def chrome_config() -> Configuration:
    return Configuration(
        target_url="https://practicetestautomation.com/practice-test-login/",
        browser_type="Chrome",
        headless=False,
    )
