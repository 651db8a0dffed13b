"""Configuration management for remote browser connections.

Supports multiple configuration sources with precedence:
Explicit arguments > Environment variables > Config file > Defaults

Usage:
    >>> config = Configuration()
    >>> config.load_from_file("~/.cdprc")
    >>> config.load_from_env()
    >>> config.merge(engine="playwright")  # explicit overrides
    >>> print(config.engine)
    playwright
"""

import os
import json
import logging
from pathlib import Path
from typing import Optional

from .engines import BrowserEngine
from .logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _positive_int(value) -> int:
    number = int(value)
    if number <= 0:
        raise ValueError(f"must be a positive integer, got {number}")
    return number


def _engine_tag(value) -> str:
    return BrowserEngine.coerce(value).value


class Configuration:
    """Configuration manager with layered precedence.

    Precedence order (highest to lowest):
    1. Explicit arguments (via merge method)
    2. Environment variables (CDP_* prefix)
    3. Config file (~/.cdprc JSON)
    4. Default values

    Attributes:
        engine: Engine tag, "puppeteer" or "playwright" (default: "puppeteer")
        connection_timeout: Connection timeout in milliseconds (default: 30000)
        log_level: Logging level (default: "INFO")
        log_format: Log output format "text" or "json" (default: "text")
    """

    DEFAULTS = {
        "engine": BrowserEngine.PUPPETEER.value,
        "connection_timeout": 30000,
        "log_level": "INFO",
        "log_format": "text",
    }

    # Validators applied to every incoming value, whatever its source
    CONVERTERS = {
        "engine": _engine_tag,
        "connection_timeout": _positive_int,
        "log_level": str,
        "log_format": str,
    }

    def __init__(self):
        """Initialize configuration with default values."""
        self.engine: str = self.DEFAULTS["engine"]
        self.connection_timeout: int = self.DEFAULTS["connection_timeout"]
        self.log_level: str = self.DEFAULTS["log_level"]
        self.log_format: str = self.DEFAULTS["log_format"]

    @classmethod
    def from_sources(cls, file_path: Optional[str] = "~/.cdprc") -> "Configuration":
        """Build configuration from config file then environment.

        Args:
            file_path: Config file to read, or None to skip the file layer
        """
        config = cls()
        if file_path:
            config.load_from_file(file_path)
        config.load_from_env()
        return config

    def load_from_file(self, file_path: str) -> None:
        """Load configuration from JSON file.

        Args:
            file_path: Path to config file (typically ~/.cdprc)

        Note:
            Invalid JSON or missing file is ignored with a log message.
            Partial configs are merged with existing values.
        """
        path = Path(file_path).expanduser()

        if not path.exists():
            logger.debug(f"Config file not found: {path}")
            return

        try:
            with open(path, "r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning(f"Invalid JSON in config file {path}: {e}")
            return
        except OSError as e:
            logger.warning(f"Error loading config file {path}: {e}")
            return

        if not isinstance(data, dict):
            logger.warning(f"Config file {path} must contain a JSON object")
            return

        self._merge_dict(data, source=str(path))
        logger.info(f"Loaded configuration from {path}")

    def load_from_env(self) -> None:
        """Load configuration from environment variables.

        Environment variables use CDP_ prefix:
        - CDP_ENGINE
        - CDP_CONNECTION_TIMEOUT
        - CDP_LOG_LEVEL
        - CDP_LOG_FORMAT

        Invalid values are ignored with a warning log.
        """
        env_mappings = {
            "CDP_ENGINE": "engine",
            "CDP_CONNECTION_TIMEOUT": "connection_timeout",
            "CDP_LOG_LEVEL": "log_level",
            "CDP_LOG_FORMAT": "log_format",
        }

        for env_var, attr_name in env_mappings.items():
            value = os.getenv(env_var)
            if value is not None:
                self._set(attr_name, value, source=env_var)

    def merge(self, **kwargs) -> None:
        """Merge explicit arguments into configuration (highest precedence).

        Args:
            **kwargs: Configuration key-value pairs to override

        Raises:
            ValueError: If a value is invalid (e.g. unknown engine,
                non-positive connection_timeout)

        Example:
            >>> config.merge(engine="playwright", connection_timeout=5000)
        """
        self._merge_dict(kwargs, source="arguments", strict=True)

    def configure_logging(self) -> None:
        """Install root log handlers from log_format and log_level."""
        setup_logging(format_type=self.log_format, level=self.log_level)

    def _merge_dict(self, data: dict, source: str, strict: bool = False) -> None:
        for key, value in data.items():
            if key in self.DEFAULTS and value is not None:
                self._set(key, value, source=source, strict=strict)

    def _set(self, attr_name: str, value, source: str, strict: bool = False) -> None:
        try:
            converted_value = self.CONVERTERS[attr_name](value)
        except (ValueError, TypeError) as e:
            if strict:
                raise ValueError(f"Invalid value for {attr_name}: {value!r} ({e})") from e
            logger.warning(f"Invalid value for {attr_name} from {source}: {value!r} ({e})")
            return
        setattr(self, attr_name, converted_value)
        logger.debug(f"Set {attr_name}={converted_value} from {source}")

    def to_dict(self) -> dict:
        """Export configuration as dictionary."""
        return {
            "engine": self.engine,
            "connection_timeout": self.connection_timeout,
            "log_level": self.log_level,
            "log_format": self.log_format,
        }

    def __repr__(self) -> str:
        return f"Configuration({self.to_dict()})"
