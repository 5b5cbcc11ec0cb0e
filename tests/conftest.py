"""Pytest configuration and fixtures."""

import shutil
import tempfile

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    temp_path = tempfile.mkdtemp()
    yield temp_path
    shutil.rmtree(temp_path)


@pytest.fixture
def sample_heartbeat_response():
    """Successful heartbeats endpoint response body."""
    return {
        "error": None,
        "data": {
            "id": "a1b2c3",
            "entity": "/proj/Assets/Scenes/Main.unity",
            "type": "file",
            "time": 1000.0,
        },
    }


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
