"""
Dynamic Content Page Object

The page renders a fresh random set of avatar images on every load.
"""
from typing import Set

from playwright.sync_api import Locator, expect

from .base_page import BasePage


class DynamicContentPage(BasePage):
    """Page object for the rotating images page."""

    PATH = "/dynamic_content"

    IMAGES = "#content .large-2 img"
    EXPECTED_IMAGE_COUNT = 3

    @property
    def images(self) -> Locator:
        return self.locator(self.IMAGES)

    def expect_image_count(self, count: int = EXPECTED_IMAGE_COUNT) -> None:
        expect(self.images).to_have_count(count)

    def image_sources(self) -> Set[str]:
        """Capture the src attribute of every image in the content rows."""
        self.expect_image_count()
        return {src for src in self.attribute_values(self.IMAGES, "src") if src}

    def reload_and_capture(self) -> Set[str]:
        self.reload()
        return self.image_sources()
