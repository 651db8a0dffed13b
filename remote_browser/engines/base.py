"""Shared interface for engine strategies.

An engine strategy knows how to attach to an already-running browser through
one automation library and how to let go of it again. The library client is
injected so tests (and callers with their own setup) never need the real
package importable.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Set, Tuple

logger = logging.getLogger(__name__)


class EngineStrategy(ABC):
    """Connect/teardown pair for one automation library.

    Attributes:
        name: Engine tag this strategy implements
    """

    name: str = ""

    def __init__(self, client: Any = None):
        """Initialize strategy.

        Args:
            client: Library entry object. When None, load_client() is called
                    lazily on first connect.
        """
        self._client = client

    @property
    def client(self) -> Any:
        """Library client, loaded on first access if not injected."""
        if self._client is None:
            self._client = self.load_client()
        return self._client

    @abstractmethod
    def load_client(self) -> Any:
        """Import and return the default library client.

        Raises:
            ImportError: If the library is not installed
        """

    @abstractmethod
    async def connect(self, endpoint: str, timeout_ms: int) -> Tuple[Any, Any]:
        """Attach to the browser at ``endpoint``.

        Returns:
            (browser, page) handles
        """

    @abstractmethod
    async def close(self, browser: Any) -> None:
        """Release the browser handle obtained from connect()."""

    async def _discard(self, browser: Any) -> None:
        """Close a browser from a failed attempt, keeping the original error."""
        try:
            await self.close(browser)
        except Exception as e:
            logger.warning(f"Error releasing {self.name} browser after failed connect: {e}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


async def race_with_deadline(
    connect_coro: Awaitable[Any],
    timeout_ms: int,
    cleanup: Callable[[Any], Awaitable[None]],
) -> Any:
    """Run ``connect_coro`` against a deadline of ``timeout_ms``.

    If the deadline fires, or the caller is cancelled while waiting, the
    connect task is cancelled and left behind without waiting for it. A
    result that still arrives later (the library finished before honouring
    the cancel) is handed to ``cleanup`` so the socket it opened gets closed.

    Raises:
        asyncio.TimeoutError: If the deadline fires first
    """
    task = asyncio.ensure_future(connect_coro)
    try:
        done, _ = await asyncio.wait({task}, timeout=timeout_ms / 1000)
    except asyncio.CancelledError:
        _abandon(task, cleanup)
        raise

    if task in done:
        return task.result()

    _abandon(task, cleanup)
    raise asyncio.TimeoutError(f"Connection timeout after {timeout_ms}ms")


# Cleanup tasks for late connections, referenced until they finish
_late_cleanups: Set[asyncio.Task] = set()


def _abandon(task: asyncio.Future, cleanup: Callable[[Any], Awaitable[None]]) -> None:
    task.cancel()

    def _on_done(finished: asyncio.Future) -> None:
        if finished.cancelled() or finished.exception() is not None:
            return
        late = finished.result()
        if late is None:
            return
        closer = asyncio.ensure_future(_close_late(late, cleanup))
        _late_cleanups.add(closer)
        closer.add_done_callback(_late_cleanups.discard)

    task.add_done_callback(_on_done)


async def _close_late(late: Any, cleanup: Callable[[Any], Awaitable[None]]) -> None:
    logger.debug("Closing connection that completed after it was abandoned")
    try:
        await cleanup(late)
    except Exception as e:
        logger.warning(f"Error closing late connection: {e}")
