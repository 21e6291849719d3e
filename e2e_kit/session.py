"""
Session helpers used by the e2e fixtures: live target reachability checks, network
marking and per-context timeouts.
"""
import logging
from typing import Iterable

import pytest
import requests
from playwright.sync_api import BrowserContext, expect

from .settings import E2EConfig

logger = logging.getLogger(__name__)

# Fixtures that hand out a live, reachability-checked target URL
NETWORK_FIXTURES = ("the_internet", "docs_site")


def check_reachable(url: str, timeout: float) -> str:
    """
    Check a live target answers before any browser test uses it.

    Raises:
        RuntimeError: target unreachable or answering 5xx
    """
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise RuntimeError(f"Target {url} is unreachable: {e}") from e
    if resp.status_code >= 500:
        raise RuntimeError(f"Target {url} answered {resp.status_code}")

    logger.debug(f"Target {url} answered {resp.status_code}")
    return url


def mark_network_items(items: Iterable) -> None:
    """Add the network marker to every test that requests a live target."""
    for item in items:
        if any(name in item.fixturenames for name in NETWORK_FIXTURES):
            item.add_marker(pytest.mark.network)


def configure_context(context: BrowserContext, config: E2EConfig) -> BrowserContext:
    """
    Apply configured timeouts.

    ACTION_TIMEOUT bounds clicks, fills and waits, NAVIGATION_TIMEOUT bounds
    goto/reload, DEFAULT_TIMEOUT bounds expect() polling.
    """
    context.set_default_timeout(config.ACTION_TIMEOUT)
    context.set_default_navigation_timeout(config.NAVIGATION_TIMEOUT)
    expect.set_options(timeout=config.DEFAULT_TIMEOUT)
    return context
