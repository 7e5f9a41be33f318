"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - Backend registry keyed by browser kind (Chrome, Firefox, ...)
    - Headless launch option from configuration
    - Implicit wait (page default timeout) applied before hand-off
    - Navigation to the configured target URL
    - Guaranteed, single shutdown of every opened session

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, AsyncIterator, Callable, Dict, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Page,
    Playwright,
)

from .config_loader import Configuration


class UnsupportedBrowserError(Exception):
    """Raised when the configured browser kind has no registered backend."""

    def __init__(self, browser_type: str):
        self.browser_type = browser_type
        supported = ", ".join(b.name for b in BROWSER_BACKENDS.values())
        super().__init__(
            f"Unsupported browser type: {browser_type!r} (supported: {supported})"
        )


class NavigationError(Exception):
    """Raised when the target URL cannot be reached within the timeout."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to navigate to {url}: {reason}")


class SessionClosedError(RuntimeError):
    """Raised when a closed DriverSession is used or closed again."""
    pass


@dataclass(frozen=True)
class BrowserBackend:
    """
    One supported browser kind.

    Attributes:
        name: Display name, matched case-insensitively against BrowserType
        engine: Playwright browser type attribute - 'chromium', 'firefox', 'webkit'
        channel: Optional branded build (e.g. 'msedge') for chromium
    """
    name: str
    engine: str
    channel: Optional[str] = None

    def launch_options(self, headless: bool) -> Dict[str, Any]:
        """Build Playwright launch() keyword arguments."""
        options: Dict[str, Any] = {"headless": headless}
        if self.channel:
            options["channel"] = self.channel
        return options

    async def launch(self, playwright: Playwright, headless: bool) -> Browser:
        """Launch this backend on a started Playwright driver."""
        launcher = getattr(playwright, self.engine)
        return await launcher.launch(**self.launch_options(headless))


def _registry(*backends: BrowserBackend) -> Dict[str, BrowserBackend]:
    return {backend.name.lower(): backend for backend in backends}


# Adding a browser means adding an entry here
BROWSER_BACKENDS: Dict[str, BrowserBackend] = _registry(
    BrowserBackend("Chrome", "chromium"),
    BrowserBackend("Chromium", "chromium"),
    BrowserBackend("Edge", "chromium", channel="msedge"),
    BrowserBackend("Firefox", "firefox"),
    BrowserBackend("WebKit", "webkit"),
)


def resolve_backend(browser_type: str) -> BrowserBackend:
    """
    Look up the backend for a browser kind.

    Raises:
        UnsupportedBrowserError: No backend registered for the kind
    """
    backend = BROWSER_BACKENDS.get((browser_type or "").strip().lower())
    if backend is None:
        raise UnsupportedBrowserError(browser_type)
    return backend


class SessionState(Enum):
    OPENED = "opened"
    NAVIGATED = "navigated"
    CLOSED = "closed"


class DriverSession:
    """
    Handle to one live browser.

    Owned by BrowserManager, borrowed by page objects. Accessing
    ``page`` after the session is closed raises SessionClosedError.
    """

    def __init__(
        self,
        backend: BrowserBackend,
        playwright: Playwright,
        browser: Browser,
        context: BrowserContext,
        page: Page,
    ):
        self.backend = backend
        self._playwright = playwright
        self._browser = browser
        self._context = context
        self._page = page
        self.state = SessionState.OPENED

    @property
    def closed(self) -> bool:
        return self.state is SessionState.CLOSED

    @property
    def page(self) -> Page:
        """Playwright page driven by this session."""
        if self.closed:
            raise SessionClosedError(
                f"{self.backend.name} session is closed and can no longer be used"
            )
        return self._page

    async def title(self) -> str:
        return await self.page.title()

    def __repr__(self) -> str:
        return f"<DriverSession {self.backend.name} state={self.state.value}>"


class BrowserManager:
    """
    Opens and closes browser sessions for UI testing.

    Every session returned by ``open`` is configured with the implicit
    wait and already navigated to ``config.target_url``. Each one must be
    passed to ``close`` exactly once.

    Usage:
        manager = BrowserManager()
        session = await manager.open(config)
        try:
            ...
        finally:
            await manager.close(session)

        # Or scoped
        async with manager.session(config) as session:
            await session.title()
    """

    # Element lookup/action timeout applied to every page
    IMPLICIT_WAIT_SECONDS: float = 10

    # Navigation (goto) timeout
    PAGE_LOAD_TIMEOUT_SECONDS: float = 30

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        implicit_wait_seconds: Optional[float] = None,
        playwright_factory: Callable[[], Any] = async_playwright,
    ):
        """
        Initialize browser manager.

        Args:
            implicit_wait_seconds: Override IMPLICIT_WAIT_SECONDS
            playwright_factory: Callable returning an object with an async
                ``start()`` that yields a Playwright driver
        """
        if implicit_wait_seconds is not None:
            self.implicit_wait_seconds = implicit_wait_seconds
        else:
            self.implicit_wait_seconds = self.IMPLICIT_WAIT_SECONDS
        self._playwright_factory = playwright_factory

    async def open(self, config: Configuration) -> DriverSession:
        """
        Launch the configured browser and navigate to the target URL.

        Args:
            config: Loaded configuration

        Returns:
            Navigated DriverSession

        Raises:
            UnsupportedBrowserError: Unknown browser kind (nothing is launched)
            NavigationError: Target URL unreachable; the session is closed first
        """
        backend = resolve_backend(config.browser_type)

        playwright = await self._playwright_factory().start()
        try:
            browser = await backend.launch(playwright, config.headless)
        except BaseException:
            await playwright.stop()
            raise
        logger.debug(f"Browser started: {backend.name} (headless={config.headless})")

        try:
            context = await browser.new_context(**self.DEFAULT_CONTEXT_OPTIONS)
            page = await context.new_page()
        except BaseException:
            await browser.close()
            await playwright.stop()
            raise

        session = DriverSession(backend, playwright, browser, context, page)
        page.set_default_timeout(self.implicit_wait_seconds * 1000)
        page.set_default_navigation_timeout(self.PAGE_LOAD_TIMEOUT_SECONDS * 1000)

        try:
            await page.goto(config.target_url)
        except PlaywrightError as e:
            logger.error(f"Navigation to {config.target_url} failed: {e.message}")
            await self.close(session)
            raise NavigationError(config.target_url, e.message) from e
        except BaseException:
            await self.close(session)
            raise

        session.state = SessionState.NAVIGATED
        logger.info(f"{backend.name} session opened at {config.target_url}")
        return session

    async def close(self, session: DriverSession) -> None:
        """
        Terminate the browser behind a session.

        Raises:
            SessionClosedError: Session was already closed
        """
        if session.closed:
            raise SessionClosedError(f"{session.backend.name} session already closed")
        session.state = SessionState.CLOSED

        try:
            await session._context.close()
        except PlaywrightError as e:
            logger.warning(f"Context close failed, closing browser anyway: {e.message}")
        try:
            await session._browser.close()
        finally:
            await session._playwright.stop()

        logger.debug(f"{session.backend.name} session closed")

    @asynccontextmanager
    async def session(self, config: Configuration) -> AsyncIterator[DriverSession]:
        """Open a session and close it on every exit path."""
        driver_session = await self.open(config)
        try:
            yield driver_session
        finally:
            await self.close(driver_session)


__all__ = [
    "BROWSER_BACKENDS",
    "BrowserBackend",
    "BrowserManager",
    "DriverSession",
    "NavigationError",
    "SessionClosedError",
    "SessionState",
    "UnsupportedBrowserError",
    "resolve_backend",
]
