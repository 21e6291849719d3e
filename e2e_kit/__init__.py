"""
Browser end-to-end suite helpers.

Structure:
    settings.py      - Suite configuration (E2EConfig)
    config_loader.py - YAML configuration with environment overrides
    pages/           - Page Object Models
    mocking.py       - Route interception helpers
    artifacts.py     - Failure screenshots, console capture
    runner.py        - e2e-kit command line

Running Tests:
    pip install -e ".[test]"
    playwright install

    # Run all tests
    pytest tests/e2e/

    # Run with visible browser
    pytest tests/e2e/ --headed

    # Run specific browser
    pytest tests/e2e/ --browser firefox

    # Browser-free unit tests only
    pytest tests/unit/

    # Or use the CLI
    e2e-kit run --help
"""

from .config_loader import ConfigLoader
from .settings import E2EConfig, get_config

__version__ = "0.1.0"

__all__ = ["ConfigLoader", "E2EConfig", "get_config"]
