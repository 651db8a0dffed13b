"""Attach to an already-running browser over CDP.

This package provides:
- connect_to_cdp: Connect to a WebSocket endpoint and wrap its page in an agent
- RemoteBrowserPage: Connection lifecycle for one remote browser
- BrowserEngine: Engine selector (puppeteer or playwright)
- CdpConnectionError: Error raised for every connection failure
"""

from .config import Configuration
from .connector import connect_to_cdp
from .engines import BrowserEngine, EngineStrategy, get_engine
from .exceptions import (
    CDP_CONNECTION_FAILED,
    NO_CONTEXT,
    CdpConnectionError,
    NoContextError,
    NotConnectedError,
)
from .page import RemoteBrowserPage

__version__ = "0.1.0"

__all__ = [
    "CDP_CONNECTION_FAILED",
    "NO_CONTEXT",
    "BrowserEngine",
    "CdpConnectionError",
    "Configuration",
    "EngineStrategy",
    "NoContextError",
    "NotConnectedError",
    "RemoteBrowserPage",
    "connect_to_cdp",
    "get_engine",
]
