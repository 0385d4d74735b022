"""Configuration management for ETHPH Academy.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

CONFIG_FILENAME = "academy.toml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class SiteConfig:
    """Site branding configuration."""

    name: str = "ETHPH Academy"
    repository_url: str = "https://github.com/0xdanki/ethph-academy"


@dataclass
class PlaygroundConfig:
    """Playground configuration."""

    compile_delay: float = 1.5
    failure_rate: float = 0.1
    session_ttl: float = 1800.0


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig = field(default_factory=ServerConfig)
    site: SiteConfig = field(default_factory=SiteConfig)
    playground: PlaygroundConfig = field(default_factory=PlaygroundConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for academy.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        return cls(
            server=cls._parse_server(data.get("server")),
            site=cls._parse_site(data.get("site")),
            playground=cls._parse_playground(data.get("playground")),
            logging=cls._parse_logging(data.get("logging")),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_site(cls, data: object) -> SiteConfig:
        if data is None:
            return SiteConfig()

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        defaults = SiteConfig()
        name = data.get("name", defaults.name)
        if not isinstance(name, str):
            raise ValueError("site.name must be a string")

        repository_url = data.get("repository_url", defaults.repository_url)
        if not isinstance(repository_url, str):
            raise ValueError("site.repository_url must be a string")

        return SiteConfig(name=name, repository_url=repository_url)

    @classmethod
    def _parse_playground(cls, data: object) -> PlaygroundConfig:
        """Parse playground configuration section.

        Integers are accepted wherever a number of seconds is expected.
        """
        if data is None:
            return PlaygroundConfig()

        if not isinstance(data, dict):
            raise ValueError("playground section must be a dictionary")

        defaults = PlaygroundConfig()
        compile_delay = _number(data, "compile_delay", defaults.compile_delay)
        if compile_delay < 0:
            raise ValueError("playground.compile_delay must not be negative")

        failure_rate = _number(data, "failure_rate", defaults.failure_rate)
        if not 0.0 <= failure_rate <= 1.0:
            raise ValueError("playground.failure_rate must be between 0 and 1")

        session_ttl = _number(data, "session_ttl", defaults.session_ttl)
        if session_ttl <= 0:
            raise ValueError("playground.session_ttl must be positive")

        return PlaygroundConfig(
            compile_delay=compile_delay,
            failure_rate=failure_rate,
            session_ttl=session_ttl,
        )

    @classmethod
    def _parse_logging(cls, data: object) -> LoggingConfig:
        if data is None:
            return LoggingConfig()

        if not isinstance(data, dict):
            raise ValueError("logging section must be a dictionary")

        level = data.get("level", "INFO")
        if not isinstance(level, str):
            raise ValueError("logging.level must be a string")
        level = level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"logging.level must be one of {', '.join(LOG_LEVELS)}")

        return LoggingConfig(level=level)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        compile_delay: float | None = None,
        log_level: str | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        playground = self.playground
        if compile_delay is not None:
            playground = replace(self.playground, compile_delay=compile_delay)

        logging_config = self.logging
        if log_level is not None:
            logging_config = replace(self.logging, level=log_level.upper())

        return replace(
            self,
            server=server,
            playground=playground,
            logging=logging_config,
        )


def _number(data: dict[str, object], key: str, default: float) -> float:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValueError(f"playground.{key} must be a number")
    return float(value)
