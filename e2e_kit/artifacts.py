"""
Test artifacts: failure screenshots and browser console capture.
"""
import json
import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from playwright.sync_api import Page

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]+")


def artifact_name(test_name: str, suffix: str = ".png", when: datetime = None) -> str:
    """File name for an artifact belonging to a test node."""
    timestamp = (when or datetime.now()).strftime("%Y%m%d_%H%M%S")
    safe = _UNSAFE_CHARS.sub("_", test_name).strip("_")
    return f"failure_{safe}_{timestamp}{suffix}"


def save_failure_screenshot(page: Page, artifacts_dir: Path, test_name: str) -> Path:
    artifacts_dir = Path(artifacts_dir)
    artifacts_dir.mkdir(parents=True, exist_ok=True)
    path = artifacts_dir / artifact_name(test_name)
    page.screenshot(path=str(path), full_page=True)
    logger.info(f"Screenshot saved: {path}")
    return path


class ConsoleLog:
    """Collects browser console messages emitted by a page."""

    def __init__(self, page: Page):
        self.messages: List[Dict[str, str]] = []
        page.on("console", self._record)

    def _record(self, msg) -> None:
        self.messages.append({"type": msg.type, "text": msg.text})

    def errors(self) -> List[str]:
        return [m["text"] for m in self.messages if m["type"] == "error"]

    def save(self, artifacts_dir: Path, test_name: str) -> Optional[Path]:
        """Write captured messages next to the failure screenshot; None if empty."""
        if not self.messages:
            return None
        artifacts_dir = Path(artifacts_dir)
        artifacts_dir.mkdir(parents=True, exist_ok=True)
        path = artifacts_dir / artifact_name(test_name, suffix=".console.json")
        with open(path, "w") as f:
            json.dump(self.messages, f, indent=2)
        logger.info(f"Console log saved: {path}")
        return path
