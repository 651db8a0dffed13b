"""One-call helper: connect to a CDP endpoint and build an agent around its page."""

import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar, Union

from .config import Configuration
from .engines import BrowserEngine, EngineStrategy
from .page import RemoteBrowserPage

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def connect_to_cdp(
    cdp_ws_url: str,
    create_agent: Callable[[Any], Union[T, Awaitable[T]]],
    *,
    engine: Optional[Union[BrowserEngine, str]] = None,
    connection_timeout: Optional[int] = None,
    config: Optional[Configuration] = None,
    strategy: Optional[EngineStrategy] = None,
) -> T:
    """Connect to a remote browser and return ``create_agent(page)``.

    Args:
        cdp_ws_url: CDP WebSocket URL (e.g. ws://localhost:9222/devtools/browser/xxx)
        create_agent: Factory called with the puppeteer or playwright page.
            May be a coroutine function; its result is awaited.
        engine: Engine tag (default: config.engine, i.e. "puppeteer")
        connection_timeout: Timeout in milliseconds (default: config.connection_timeout)
        config: Defaults for engine and timeout (default: Configuration())
        strategy: Pre-built engine strategy, e.g. with an injected client

    Returns:
        Whatever create_agent returns.

    Raises:
        CdpConnectionError: If the connection fails
        Exception: Anything raised by create_agent, unchanged

    The connection is not closed here. By convention the returned agent
    exposes ``destroy()`` and releases the connection itself, for example by
    keeping the RemoteBrowserPage around; nothing enforces that.

    Example:
        >>> agent = await connect_to_cdp(
        ...     "ws://localhost:9222/devtools/browser/xxx",
        ...     lambda page: PageAgent(page),
        ...     engine="playwright",
        ... )
    """
    if config is None:
        config = Configuration()

    remote = RemoteBrowserPage(
        cdp_ws_url,
        engine if engine is not None else config.engine,
        strategy=strategy,
    )
    await remote.connect(
        connection_timeout if connection_timeout is not None else config.connection_timeout
    )

    page = remote.get_page()

    agent = create_agent(page)
    if inspect.isawaitable(agent):
        agent = await agent

    logger.debug(f"Created agent {type(agent).__name__} for {cdp_ws_url}")
    return agent
