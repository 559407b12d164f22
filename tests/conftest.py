"""
Pytest configuration and shared fixtures for curlish tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Keeps the process environment from leaking into client defaults
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from curlish.config import ClientConfig, set_default_config  # noqa: E402
from fixtures import FakeTransport, make_raw_response  # noqa: E402


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Provide a ClientConfig free of CURLISH_* environment overrides."""
    for name in ("CURLISH_TIMEOUT", "CURLISH_USER_AGENT", "CURLISH_HTTP_PROXY"):
        monkeypatch.delenv(name, raising=False)
    config = ClientConfig()
    set_default_config(config)
    yield config
    set_default_config(None)


@pytest.fixture
def fake_transport():
    """Provide a FakeTransport returning a small 200 response."""
    raw, header_size = make_raw_response(
        headers=[("Content-Type", "text/plain")],
        body=b"Hello",
    )
    return FakeTransport(raw=raw, header_size=header_size, status_code=200)


@pytest.fixture
def failing_transport():
    """Provide a FakeTransport that cannot connect."""
    return FakeTransport(raw=None, error_message="Couldn't connect", error_code=7)
