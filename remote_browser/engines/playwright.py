"""Playwright engine: attach through ``chromium.connect_over_cdp``."""

import logging
from typing import Any, Optional, Tuple

from ..exceptions import NoContextError
from .base import EngineStrategy

logger = logging.getLogger(__name__)


class PlaywrightEngine(EngineStrategy):
    """Connects with Playwright's CDP attach and its built-in timeout.

    The client is ``playwright.async_api.async_playwright``; a driver is
    started per connection and stopped again on close. Teardown closes the
    browser, which may terminate the remote process depending on how it was
    launched.
    """

    name = "playwright"

    def __init__(self, client: Any = None):
        super().__init__(client)
        self._playwright: Optional[Any] = None

    def load_client(self) -> Any:
        try:
            from playwright.async_api import async_playwright
        except ImportError:
            raise ImportError(
                "playwright library not found. Install with: pip3 install playwright"
            )
        return async_playwright

    async def connect(self, endpoint: str, timeout_ms: int) -> Tuple[Any, Any]:
        # A driver left over from an earlier attempt is never reused
        await self._stop_driver()
        self._playwright = await self.client().start()

        try:
            logger.debug(f"playwright connecting to {endpoint} (timeout {timeout_ms}ms)")
            browser = await self._playwright.chromium.connect_over_cdp(
                endpoint, timeout=timeout_ms
            )
        except BaseException:
            await self._stop_driver()
            raise

        try:
            contexts = browser.contexts
            if not contexts:
                raise NoContextError()

            context = contexts[0]
            pages = context.pages
            if not pages:
                logger.debug("No open pages in first context, creating one")
                page = await context.new_page()
            else:
                page = pages[0]
        except BaseException:
            await self._discard(browser)
            raise

        return browser, page

    async def close(self, browser: Any) -> None:
        try:
            await browser.close()
        finally:
            await self._stop_driver()

    async def _stop_driver(self) -> None:
        if self._playwright is None:
            return
        playwright, self._playwright = self._playwright, None
        try:
            await playwright.stop()
        except Exception as e:
            logger.warning(f"Error stopping playwright driver: {e}")
