"""Shared test fixtures."""

import pytest
from approute.config import Config, RoutesConfig, ServerConfig
from approute.core.segments import PageType


@pytest.fixture
def test_config() -> Config:
    """Create a test configuration appending page markers."""
    return Config(
        server=ServerConfig(),
        routes=RoutesConfig(default_page_type=PageType.PAGE),
    )
