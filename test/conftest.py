"""Pytest configuration and fixtures

Provides shared fixtures for all tests: a temporary home page, an in-memory
JSON logger, and a web server/test client wired to both.
"""

import io
import json
import logging
import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from starlette.testclient import TestClient

from pn_main.config import ServerConfig
from pn_main.logger import StructuredLogger
from pn_main.web_server import PnMainWebServer

HOME_HTML = "<!DOCTYPE html><html><body><h1>Test Home</h1></body></html>\n"


def read_json_lines(text: str) -> list:
    """Parse every non-empty line of *text* as JSON."""
    return [json.loads(line) for line in text.splitlines() if line.strip()]


@pytest.fixture
def home_html(tmp_path):
    """A home page file in a temporary directory."""
    path = tmp_path / "home.html"
    path.write_text(HOME_HTML, encoding="utf-8")
    return path


@pytest.fixture
def server_config(tmp_path, home_html):
    """Configuration pointing logs and the home page at tmp_path."""
    return ServerConfig(
        host="127.0.0.1",
        port=3000,
        log_dir=tmp_path / "logs",
        log_stamp="test-run",
        debug=True,
        home_html_path=home_html,
    )


@pytest.fixture
def log_stream():
    return io.StringIO()


@pytest.fixture
def memory_logger(log_stream):
    """JSON logger writing to an in-memory stream at DEBUG level."""
    logger = StructuredLogger(name="test-web", level=logging.DEBUG, stream=log_stream)
    yield logger
    logger.close()


@pytest.fixture
def web_server(server_config, memory_logger):
    return PnMainWebServer(config=server_config, logger=memory_logger)


@pytest.fixture
def client(web_server):
    return TestClient(web_server.get_app())
