"""
E2E Suite Settings

Resolves suite settings from environment variables, falling back to the
YAML site configuration.
"""
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .config_loader import ConfigLoader

TRUTHY = ("1", "true", "yes", "on")


def _flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUTHY


class E2EConfig:
    """E2E test configuration."""

    def __init__(self, environ: Mapping[str, str] = None, loader: ConfigLoader = None):
        env = os.environ if environ is None else environ
        self.environment = env.get("E2E_ENV", "local")
        loader = loader or ConfigLoader(environment=self.environment)
        config = loader.load("sites")

        sites = config["sites"]
        app = sites["the_internet"]

        # Targets
        self.BASE_URL = env.get("E2E_BASE_URL", app["base_url"]).rstrip("/")
        self.DOCS_URL = env.get("E2E_DOCS_URL", sites["docs"]["base_url"]).rstrip("/")
        self.DOCS_TITLE_PATTERN = sites["docs"].get("title_pattern", "Playwright")
        self.API_URL = env.get("E2E_API_URL", sites["api"]["base_url"]).rstrip("/")
        self.USER_PATH = sites["api"]["user_path"]

        # Authentication
        self.USERNAME = env.get("E2E_USER", config["credentials"]["username"])
        self.PASSWORD = env.get("E2E_PASSWORD", config["credentials"]["password"])

        # Timeouts (milliseconds, reachability in seconds)
        timeouts = config["timeouts"]
        self.DEFAULT_TIMEOUT = int(timeouts["default"])
        self.NAVIGATION_TIMEOUT = int(timeouts["navigation"])
        self.ACTION_TIMEOUT = int(timeouts["action"])
        self.REACHABILITY_TIMEOUT = float(timeouts.get("reachability", 10))

        # Browser settings
        browser = config["browser"]
        self.HEADLESS = _flag(env.get("E2E_HEADLESS", browser["headless"]))
        self.SLOW_MO = int(env.get("E2E_SLOW_MO", browser.get("slow_mo", 0)))
        self.VIEWPORT = dict(browser["viewport"])

        # Screenshots and video
        self.SCREENSHOT_ON_FAILURE = _flag(env.get("E2E_SCREENSHOT_ON_FAILURE", "true"))
        self.ARTIFACTS_DIR = Path(env.get("E2E_ARTIFACTS_DIR", "test-results"))
        self.RECORD_VIDEO = _flag(env.get("E2E_RECORD_VIDEO", "false"))

    def user_url(self, user_id: int) -> str:
        return f"{self.API_URL}{self.USER_PATH.format(user_id=user_id)}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "environment": self.environment,
            "base_url": self.BASE_URL,
            "docs_url": self.DOCS_URL,
            "api_url": self.API_URL,
            "headless": self.HEADLESS,
            "slow_mo": self.SLOW_MO,
            "default_timeout": self.DEFAULT_TIMEOUT,
            "navigation_timeout": self.NAVIGATION_TIMEOUT,
            "artifacts_dir": str(self.ARTIFACTS_DIR),
        }


_config: Optional[E2EConfig] = None


def get_config() -> E2EConfig:
    """Return the process-wide configuration, resolving it on first use."""
    global _config
    if _config is None:
        _config = E2EConfig()
    return _config


def reset_config() -> None:
    global _config
    _config = None
