"""
Upload Page Object
"""
import logging
from pathlib import Path
from typing import Union

from playwright.sync_api import Locator

from .base_page import BasePage

logger = logging.getLogger(__name__)


class UploadPage(BasePage):
    """Page object for the file upload form."""

    PATH = "/upload"

    FILE_INPUT = "#file-upload"
    SUBMIT_BUTTON = "#file-submit"
    HEADING = "h3"
    UPLOADED_FILES = "#uploaded-files"

    def upload(self, path: Union[str, Path]) -> None:
        """Attach a local file and submit the form."""
        logger.info(f"Uploading {path}")
        self.page.set_input_files(self.FILE_INPUT, str(path))
        self.page.click(self.SUBMIT_BUTTON)

    @property
    def heading(self) -> Locator:
        return self.locator(self.HEADING)

    @property
    def uploaded_files(self) -> Locator:
        return self.locator(self.UPLOADED_FILES)
