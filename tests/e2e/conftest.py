"""
Playwright E2E Test Configuration and Fixtures

This module provides shared fixtures, configuration, and utilities
for end-to-end browser testing with Playwright.
"""
from pathlib import Path
from typing import Any, Dict, Generator

import pytest

# Skip entire module if playwright not installed
pytest.importorskip("playwright")

from playwright.sync_api import Browser, BrowserContext, Page

from e2e_kit.artifacts import ConsoleLog, save_failure_screenshot
from e2e_kit.session import configure_context, mark_network_items, check_reachable
from e2e_kit.settings import E2EConfig, get_config

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# =============================================================================
# Configuration
# =============================================================================


@pytest.fixture(scope="session")
def e2e_config() -> E2EConfig:
    return get_config()


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    """Static input files checked into the repository."""
    return FIXTURES_DIR


# =============================================================================
# Target Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def the_internet(e2e_config: E2EConfig) -> str:
    """
    Base URL of the demo application, checked for reachability once.

    Tests that talk to the live site request this fixture so an outage
    fails fast instead of timing out in every test.
    """
    check_reachable(e2e_config.BASE_URL, e2e_config.REACHABILITY_TIMEOUT)
    print(f"\n[E2E] Target reachable: {e2e_config.BASE_URL}")
    return e2e_config.BASE_URL


@pytest.fixture(scope="session")
def docs_site(e2e_config: E2EConfig) -> str:
    """Base URL of the docs site, checked for reachability once."""
    check_reachable(e2e_config.DOCS_URL, e2e_config.REACHABILITY_TIMEOUT)
    print(f"\n[E2E] Target reachable: {e2e_config.DOCS_URL}")
    return e2e_config.DOCS_URL


# =============================================================================
# Browser Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def browser_type_launch_args(
    browser_type_launch_args: Dict[str, Any], e2e_config: E2EConfig
) -> Dict[str, Any]:
    """Browser launch arguments."""
    args = dict(browser_type_launch_args)
    if not e2e_config.HEADLESS:
        args["headless"] = False
    if e2e_config.SLOW_MO and "slow_mo" not in args:
        args["slow_mo"] = e2e_config.SLOW_MO
    return args


@pytest.fixture(scope="session")
def browser_context_args(
    browser_context_args: Dict[str, Any], e2e_config: E2EConfig
) -> Dict[str, Any]:
    """Browser context arguments."""
    args = {
        **browser_context_args,
        "viewport": e2e_config.VIEWPORT,
        "accept_downloads": True,
    }

    if e2e_config.RECORD_VIDEO:
        e2e_config.ARTIFACTS_DIR.mkdir(parents=True, exist_ok=True)
        args["record_video_dir"] = str(e2e_config.ARTIFACTS_DIR / "videos")

    return args


@pytest.fixture
def context(
    browser: Browser, browser_context_args: Dict, e2e_config: E2EConfig
) -> Generator[BrowserContext, None, None]:
    """Create a new browser context for each test."""
    context = configure_context(browser.new_context(**browser_context_args), e2e_config)

    yield context

    context.close()


@pytest.fixture
def page(request, context: BrowserContext, e2e_config: E2EConfig) -> Generator[Page, None, None]:
    """Create a new page for each test, keeping a screenshot and console log if it fails."""
    page = context.new_page()
    console_log = ConsoleLog(page)

    yield page

    rep_call = getattr(request.node, "rep_call", None)
    if rep_call is not None and rep_call.failed and e2e_config.SCREENSHOT_ON_FAILURE:
        path = save_failure_screenshot(page, e2e_config.ARTIFACTS_DIR, request.node.name)
        print(f"\n[E2E] Screenshot saved: {path}")
        log_path = console_log.save(e2e_config.ARTIFACTS_DIR, request.node.name)
        if log_path:
            print(f"\n[E2E] Console log saved: {log_path}")
        for error in console_log.errors():
            print(f"[E2E] Console error: {error}")

    page.close()


# =============================================================================
# Hooks
# =============================================================================


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Store test results for use in fixtures."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)


def pytest_collection_modifyitems(config, items):
    """Mark tests that hit a live site."""
    mark_network_items(items)
