"""
Pytest fixtures shared by the unit and e2e suites
"""
import os
import sys
from pathlib import Path

import pytest
import yaml

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from e2e_kit.settings import reset_config

BASE_SITES = {
    "sites": {
        "the_internet": {"base_url": "https://the-internet.example/"},
        "docs": {"base_url": "https://docs.example", "title_pattern": "Docs"},
        "api": {"base_url": "https://api.example", "user_path": "/api/users/{user_id}"},
    },
    "credentials": {"username": "alice", "password": "s3cret"},
    "browser": {"headless": True, "slow_mo": 0, "viewport": {"width": 800, "height": 600}},
    "timeouts": {"default": 1000, "navigation": 2000, "action": 500, "reachability": 1},
}


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: browser-free tests")


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """A config directory holding a minimal sites.yaml and a ci overlay."""
    (tmp_path / "base").mkdir()
    (tmp_path / "environments").mkdir()
    with open(tmp_path / "base" / "sites.yaml", "w") as f:
        yaml.safe_dump(BASE_SITES, f)
    with open(tmp_path / "environments" / "ci.yaml", "w") as f:
        yaml.safe_dump(
            {"sites": {"timeouts": {"default": 5000}, "browser": {"slow_mo": 25}}}, f
        )
    return tmp_path


@pytest.fixture(autouse=True)
def _fresh_config():
    """Drop the cached process-wide configuration around every test."""
    reset_config()
    yield
    reset_config()
