"""
Download Page Object

Lists downloadable files; clicking a link starts a browser download.
"""
import logging
from pathlib import Path
from typing import List, Union

from playwright.sync_api import Locator

from .base_page import BasePage

logger = logging.getLogger(__name__)


class DownloadPage(BasePage):
    """Page object for the file download list."""

    PATH = "/download"

    DOWNLOAD_LINKS = '#content a[href*="download/"]'

    @property
    def links(self) -> Locator:
        return self.locator(self.DOWNLOAD_LINKS)

    def file_names(self) -> List[str]:
        return [name.strip() for name in self.links.all_inner_texts()]

    def download(self, target_dir: Union[str, Path], link_text: str = None) -> Path:
        """
        Click a download link and save the file under target_dir.

        Args:
            target_dir: Directory the file is written to
            link_text: Exact link text to click; first link when omitted

        Returns:
            Path of the saved file
        """
        link = self.links.first if link_text is None else self.page.get_by_role(
            "link", name=link_text, exact=True
        )

        with self.page.expect_download() as download_info:
            link.click()
        download = download_info.value

        target = Path(target_dir) / download.suggested_filename
        download.save_as(target)
        logger.info(f"Saved download {download.url} to {target}")
        return target
