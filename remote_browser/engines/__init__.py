"""Engine selection for remote browser connections."""

from enum import Enum
from typing import Any, Union

from .base import EngineStrategy
from .playwright import PlaywrightEngine
from .puppeteer import PuppeteerEngine


class BrowserEngine(str, Enum):
    """Automation library used to attach to the remote browser."""

    PUPPETEER = "puppeteer"
    PLAYWRIGHT = "playwright"

    @classmethod
    def coerce(cls, value: Union["BrowserEngine", str]) -> "BrowserEngine":
        """Accept an enum member or its tag string.

        Raises:
            ValueError: If the tag is unknown
        """
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(e.value for e in cls)
            raise ValueError(f"Unknown browser engine: {value!r} (expected one of: {choices})")


DEFAULT_ENGINE = BrowserEngine.PUPPETEER

_STRATEGIES = {
    BrowserEngine.PUPPETEER: PuppeteerEngine,
    BrowserEngine.PLAYWRIGHT: PlaywrightEngine,
}


def get_engine(engine: Union[BrowserEngine, str], client: Any = None) -> EngineStrategy:
    """Build the strategy for ``engine``.

    Args:
        engine: Engine tag
        client: Optional library client to inject instead of the default import
    """
    return _STRATEGIES[BrowserEngine.coerce(engine)](client)


__all__ = [
    "BrowserEngine",
    "DEFAULT_ENGINE",
    "EngineStrategy",
    "PlaywrightEngine",
    "PuppeteerEngine",
    "get_engine",
]
