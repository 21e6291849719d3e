"""
Base Page Object

Binds a live Playwright page to a fixed URL and provides the shared
navigation and assertion helpers.
"""
from typing import List, Optional, Pattern, Union

from playwright.sync_api import Locator, Page, expect


class BasePage:
    """Base class for all page objects."""

    PATH = "/"

    def __init__(self, page: Page, base_url: str):
        self.page = page
        self.base_url = base_url.rstrip("/")
        self._url = f"{self.base_url}{self.PATH}"

    @property
    def url(self) -> str:
        """Target URL, fixed at construction."""
        return self._url

    # =========================================================================
    # Navigation
    # =========================================================================

    def navigate(self) -> "BasePage":
        """Open the page's target URL."""
        self.page.goto(self.url)
        return self

    def reload(self) -> None:
        self.page.reload()

    def current_url(self) -> str:
        return self.page.url

    # =========================================================================
    # Locators
    # =========================================================================

    def locator(self, selector: str) -> Locator:
        return self.page.locator(selector)

    def attribute_values(self, selector: str, attribute: str) -> List[Optional[str]]:
        """Read one attribute from every element matching selector."""
        items = self.locator(selector)
        return [items.nth(i).get_attribute(attribute) for i in range(items.count())]

    # =========================================================================
    # Assertions
    # =========================================================================

    def expect_at(self, url: Union[str, Pattern] = None) -> None:
        """Assert the browser is on url (defaults to this page's URL)."""
        expect(self.page).to_have_url(url or self.url)
