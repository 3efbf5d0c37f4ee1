"""
Root pytest configuration and fixtures for the novu_changes test suite.
"""

import os
from pathlib import Path
import sys

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

BASE = "https://api.test.novu.co/v1"


@pytest.fixture(autouse=True)
def clean_environment():
    """Clean environment variables before each test."""
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("NOVU_"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def no_sleep(monkeypatch):
    """Skip retry backoff delays."""
    monkeypatch.setattr("novu_changes._http.time.sleep", lambda _s: None)


@pytest.fixture
def api_key():
    """Test API key."""
    return "test-api-key-12345"


@pytest.fixture
def base_url():
    """Test base URL."""
    return BASE


@pytest.fixture
def http(api_key, base_url):
    from novu_changes._http import HTTPClient

    return HTTPClient(api_key=api_key, base_url=base_url, timeout=5)
