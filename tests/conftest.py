"""
Pytest configuration and shared fixtures for Headless Admin SDK tests.
"""

import logging
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from headless_admin.cache.memory import MemoryCache
from headless_admin.client import Client
from headless_admin.transport.mock import MockTransport

SERVER_URL = "http://api.test"


@pytest.fixture(autouse=True)
def reset_logging_handlers() -> Generator[None, None, None]:
    """Remove root handlers installed by setup_logging during a test."""
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root_logger.removeHandler(handler)
            handler.close()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.
    
    Yields:
        Path to temporary directory that is cleaned up after test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_transport() -> MockTransport:
    """Transport recording every request and answering from fixtures."""
    return MockTransport()


@pytest.fixture
def client(mock_transport: MockTransport) -> Client:
    """Client without cache talking to the mock transport."""
    return Client(SERVER_URL, transport=mock_transport)


@pytest.fixture
def cached_client(mock_transport: MockTransport) -> Client:
    """Client with an in-memory cache talking to the mock transport."""
    return Client(SERVER_URL, transport=mock_transport, cache=MemoryCache())


@pytest.fixture
def make_config_yaml(temp_dir: Path):
    """
    Factory fixture writing a YAML config file and returning its path.
    
    Example:
        def test_something(make_config_yaml):
            path = make_config_yaml("client:\\n  server_url: http://x\\n")
    """
    def _make_config(content: str) -> Path:
        path = temp_dir / "config.yaml"
        path.write_text(content)
        return path
    
    return _make_config
