"""
Pytest configuration and fixtures for Showcase tests.
"""

import sys
from pathlib import Path

# Ensure 'src' directory is on sys.path so 'showcase' package is importable everywhere
_repo_root = Path(__file__).resolve().parents[1]
_src_path = _repo_root / "src"
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

import os
from io import StringIO

import pytest
from loguru import logger


# Test stabilization: settings must not pick up the developer's environment
@pytest.fixture(autouse=True)
def _clear_showcase_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("SHOWCASE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _restore_logger():
    """Put loguru back to a plain stderr sink after every test."""
    yield
    logger.remove()
    logger.add(sys.stderr)
    logger.configure(patcher=None)


@pytest.fixture
def log_output():
    """Capture loguru messages emitted during the test."""
    buffer = StringIO()
    sink_id = logger.add(buffer, format="{level} {message}", level="DEBUG")
    yield buffer
    logger.remove(sink_id)


@pytest.fixture
def sample_posts():
    """Five posts shaped like the default API's response."""
    return [{"userId": 1, "id": i, "title": f"post {i}", "body": f"body {i}"} for i in range(1, 6)]
