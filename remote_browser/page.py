"""Remote browser page wrapper.

Provides RemoteBrowserPage, which owns one CDP connection to an
already-running browser and exposes the browser and page handles of the
selected automation library.
"""

import logging
from typing import Any, Optional, Union

from .engines import DEFAULT_ENGINE, BrowserEngine, EngineStrategy, get_engine
from .exceptions import CDP_CONNECTION_FAILED, CdpConnectionError, NotConnectedError
from .logging_setup import ConnectionLogger

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30000


class RemoteBrowserPage:
    """Connection to one remote browser and its first page.

    Handles:
    - Engine dispatch (puppeteer or playwright) through an EngineStrategy
    - Connection timeout and error wrapping
    - Idempotent teardown

    Usage:
        async with RemoteBrowserPage("ws://localhost:9222/devtools/browser/abc") as remote:
            page = remote.get_page()

    Attributes:
        cdp_ws_url: CDP WebSocket URL of the remote browser
        engine: Engine used for the connection
    """

    def __init__(
        self,
        cdp_ws_url: str,
        engine: Union[BrowserEngine, str] = DEFAULT_ENGINE,
        *,
        strategy: Optional[EngineStrategy] = None,
    ):
        """Initialize wrapper without connecting.

        Args:
            cdp_ws_url: Endpoint, e.g. ws://localhost:9222/devtools/browser/<id>
            engine: Engine tag
            strategy: Pre-built strategy (e.g. with an injected client); must
                      match ``engine``

        Raises:
            ValueError: If the endpoint is empty or engine/strategy disagree
        """
        if not isinstance(cdp_ws_url, str) or not cdp_ws_url:
            raise ValueError(f"Invalid CDP endpoint: {cdp_ws_url!r}")

        self._cdp_ws_url = cdp_ws_url
        self._engine = BrowserEngine.coerce(engine)

        if strategy is None:
            strategy = get_engine(self._engine)
        elif strategy.name != self._engine.value:
            raise ValueError(
                f"Strategy {strategy!r} does not implement engine {self._engine.value!r}"
            )
        self._strategy = strategy
        self._log = ConnectionLogger(
            logger, engine=self._engine.value, cdp_ws_url=self._cdp_ws_url
        )

        self._browser: Optional[Any] = None
        self._page: Optional[Any] = None
        self._connected: bool = False

    @property
    def cdp_ws_url(self) -> str:
        return self._cdp_ws_url

    @property
    def engine(self) -> BrowserEngine:
        return self._engine

    async def connect(self, connection_timeout: Optional[int] = None) -> None:
        """Attach to the remote browser and select its first page.

        No-op when already connected.

        Args:
            connection_timeout: Timeout in milliseconds (default: 30000)

        Raises:
            CdpConnectionError: code "CDP_CONNECTION_FAILED" on timeout or any
                library failure, "NO_CONTEXT" when playwright finds no context
        """
        if self._connected:
            return

        timeout_ms = DEFAULT_TIMEOUT if connection_timeout is None else connection_timeout

        try:
            self._log.debug(f"Connecting (timeout {timeout_ms}ms)")
            browser, page = await self._strategy.connect(self._cdp_ws_url, timeout_ms)
        except CdpConnectionError:
            raise
        except Exception as e:
            raise CdpConnectionError(
                f"Failed to connect to remote browser: {e}",
                code=CDP_CONNECTION_FAILED,
                details=e,
            ) from e

        self._browser = browser
        self._page = page
        self._connected = True
        self._log.debug("Connected to remote browser")

    def get_browser(self) -> Any:
        """Return the library's browser handle.

        Raises:
            NotConnectedError: If connect() has not succeeded
        """
        if self._browser is None:
            raise NotConnectedError()
        return self._browser

    def get_page(self) -> Any:
        """Return the library's page handle.

        Raises:
            NotConnectedError: If connect() has not succeeded
        """
        if self._page is None:
            raise NotConnectedError()
        return self._page

    def get_cdp_ws_url(self) -> str:
        return self._cdp_ws_url

    def is_connected(self) -> bool:
        return self._connected

    async def destroy(self) -> None:
        """Release the connection. Safe to call repeatedly or before connect().

        Teardown errors are logged and swallowed; state is always cleared.
        """
        if self._browser is not None:
            try:
                await self._strategy.close(self._browser)
            except Exception as e:
                self._log.warning(f"Error closing browser connection: {e}")
            self._browser = None

        self._page = None
        self._connected = False

    async def __aenter__(self) -> "RemoteBrowserPage":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.destroy()

    def __repr__(self) -> str:
        return (
            f"RemoteBrowserPage(cdp_ws_url={self._cdp_ws_url!r}, "
            f"engine={self._engine.value!r}, connected={self._connected})"
        )
