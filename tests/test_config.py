"""Tests for configuration loading."""

from pathlib import Path
from unittest.mock import patch

import pytest
from approute.config import Config, RoutesConfig, ServerConfig, parse_page_type
from approute.core.segments import PageType


class TestConfigLoad:
    """Tests for Config.load()."""

    def test__explicit_path__loads_config(self, tmp_path: Path) -> None:
        """Load config from explicit path."""
        config_file = tmp_path / "approute.toml"
        config_file.write_text("""
[server]
host = "0.0.0.0"
port = 3000

[routes]
default_page_type = "route"
""")

        config = Config.load(config_file)

        assert config.server.host == "0.0.0.0"
        assert config.server.port == 3000
        assert config.routes.default_page_type is PageType.ROUTE
        assert config.config_path == config_file

    def test__minimal_config__uses_defaults(self, tmp_path: Path) -> None:
        """Load empty config with defaults."""
        config_file = tmp_path / "approute.toml"
        config_file.write_text("")

        config = Config.load(config_file)

        assert config.server.host == "127.0.0.1"
        assert config.server.port == 8080
        assert config.routes.default_page_type is PageType.PAGE

    def test__page_type_none__disables_marker(self, tmp_path: Path) -> None:
        """Accept "none" to skip the terminal marker."""
        config_file = tmp_path / "approute.toml"
        config_file.write_text('[routes]\ndefault_page_type = "none"\n')

        config = Config.load(config_file)

        assert config.routes.default_page_type is None

    def test__missing_explicit_path__raises_error(self, tmp_path: Path) -> None:
        """Raise FileNotFoundError for missing explicit config file."""
        config_file = tmp_path / "nonexistent.toml"

        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            Config.load(config_file)

    def test__discovers_config_in_parent(self, tmp_path: Path) -> None:
        """Find approute.toml in a parent directory."""
        (tmp_path / "approute.toml").write_text("[server]\nport = 9000\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        with patch("approute.config.Path.cwd", return_value=nested):
            config = Config.load()

        assert config.server.port == 9000
        assert config.config_path == tmp_path / "approute.toml"

    def test__no_config_found__returns_defaults(self, tmp_path: Path) -> None:
        """Return defaults when no config file exists."""
        with patch("approute.config.Path.cwd", return_value=tmp_path):
            config = Config.load()

        assert config.server == ServerConfig()
        assert config.routes == RoutesConfig()
        assert config.config_path is None


class TestConfigValidation:
    """Tests for invalid configuration values."""

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ('server = "x"', "server section must be a dictionary"),
            ("[server]\nhost = 1", "server.host must be a string"),
            ('[server]\nport = "80"', "server.port must be an integer"),
            ("[server]\nport = true", "server.port must be an integer"),
            ("routes = 1", "routes section must be a dictionary"),
            ("[routes]\ndefault_page_type = 1", "routes.default_page_type must be a string"),
            ('[routes]\ndefault_page_type = "layout"', "must be one of"),
        ],
    )
    def test__invalid_value__raises_error(
        self,
        tmp_path: Path,
        content: str,
        message: str,
    ) -> None:
        config_file = tmp_path / "approute.toml"
        config_file.write_text(content)

        with pytest.raises(ValueError, match=message):
            Config.load(config_file)


class TestConfigOverrides:
    """Tests for Config.with_overrides()."""

    def test__overrides__apply_non_none_values(self, test_config: Config) -> None:
        config = test_config.with_overrides(port=9999, default_page_type="route")

        assert config.server.host == "127.0.0.1"
        assert config.server.port == 9999
        assert config.routes.default_page_type is PageType.ROUTE

    def test__overrides__leave_original_untouched(self, test_config: Config) -> None:
        test_config.with_overrides(host="0.0.0.0", default_page_type="none")

        assert test_config.server.host == "127.0.0.1"
        assert test_config.routes.default_page_type is PageType.PAGE

    def test__no_overrides__returns_equal_config(self, test_config: Config) -> None:
        assert test_config.with_overrides() == test_config


class TestParsePageType:
    """Tests for parse_page_type()."""

    def test__choices(self) -> None:
        assert parse_page_type("page") is PageType.PAGE
        assert parse_page_type("route") is PageType.ROUTE
        assert parse_page_type("none") is None

    def test__unknown__raises_error(self) -> None:
        with pytest.raises(ValueError, match="must be one of: page, route, none"):
            parse_page_type("PAGE")
