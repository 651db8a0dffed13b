"""Puppeteer engine: attach through pyppeteer's browserWSEndpoint connect."""

import logging
from typing import Any, Tuple

from .base import EngineStrategy, race_with_deadline

logger = logging.getLogger(__name__)


class PuppeteerEngine(EngineStrategy):
    """Connects with ``pyppeteer.connect`` and a manual deadline.

    pyppeteer's connect has no timeout of its own, so the call is raced
    against ``timeout_ms``. Teardown only disconnects; the remote browser
    process keeps running.
    """

    name = "puppeteer"

    def load_client(self) -> Any:
        try:
            import pyppeteer
        except ImportError:
            raise ImportError(
                "pyppeteer library not found. Install with: pip3 install 'cdp-remote-browser[puppeteer]'"
            )
        return pyppeteer

    async def connect(self, endpoint: str, timeout_ms: int) -> Tuple[Any, Any]:
        logger.debug(f"pyppeteer connecting to {endpoint} (timeout {timeout_ms}ms)")
        browser = await race_with_deadline(
            self.client.connect(browserWSEndpoint=endpoint),
            timeout_ms,
            self.close,
        )

        try:
            pages = await browser.pages()
            if not pages:
                logger.debug("No open pages, creating one")
                page = await browser.newPage()
            else:
                page = pages[0]
        except BaseException:
            await self._discard(browser)
            raise

        return browser, page

    async def close(self, browser: Any) -> None:
        await browser.disconnect()
