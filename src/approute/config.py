"""Configuration management for Approute.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from approute.core.segments import PageType

CONFIG_FILENAME = "approute.toml"

# Accepted values for routes.default_page_type; "none" appends no marker
PAGE_TYPE_CHOICES = ("page", "route", "none")


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class RoutesConfig:
    """Route parsing configuration."""

    default_page_type: PageType | None = PageType.PAGE


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig = field(default_factory=ServerConfig)
    routes: RoutesConfig = field(default_factory=RoutesConfig)
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for approute.toml in current directory and parents.

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
            data = tomllib.load(f)

        if not isinstance(data, dict):
            raise ValueError("Configuration must be a dictionary")

        return cls(
            server=cls._parse_server(data.get("server")),
            routes=cls._parse_routes(data.get("routes")),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section."""
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
    def _parse_routes(cls, data: object) -> RoutesConfig:
        """Parse routes configuration section."""
        if data is None:
            return RoutesConfig()

        if not isinstance(data, dict):
            raise ValueError("routes section must be a dictionary")

        default_page_type = data.get("default_page_type", "page")
        if not isinstance(default_page_type, str):
            raise ValueError("routes.default_page_type must be a string")

        return RoutesConfig(default_page_type=parse_page_type(default_page_type))

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        default_page_type: str | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            default_page_type: Override routes.default_page_type
                ("page", "route" or "none")

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        routes = self.routes
        if default_page_type is not None:
            routes = replace(
                self.routes,
                default_page_type=parse_page_type(default_page_type),
            )

        return replace(self, server=server, routes=routes)


def parse_page_type(value: str) -> PageType | None:
    """Parse a page type setting.

    Raises:
        ValueError: If value is not one of PAGE_TYPE_CHOICES
    """
    if value not in PAGE_TYPE_CHOICES:
        choices = ", ".join(PAGE_TYPE_CHOICES)
        raise ValueError(f"routes.default_page_type must be one of: {choices}")
    if value == "none":
        return None
    return PageType(value)
