"""
Login Page Object

Encapsulates the form authentication page and the secure area behind it.
"""
from playwright.sync_api import Locator, expect

from .base_page import BasePage


class LoginPage(BasePage):
    """Page object for the login page."""

    PATH = "/login"

    # Selectors
    USERNAME_INPUT = "#username"
    PASSWORD_INPUT = "#password"
    SUBMIT_BUTTON = 'button[type="submit"]'
    FLASH_MESSAGE = "#flash"

    def navigate(self) -> "LoginPage":
        super().navigate()
        return self

    def login(self, username: str, password: str) -> None:
        """Fill both fields and submit the form."""
        self.page.fill(self.USERNAME_INPUT, username)
        self.page.fill(self.PASSWORD_INPUT, password)
        self.page.click(self.SUBMIT_BUTTON)

    @property
    def flash_message(self) -> Locator:
        return self.locator(self.FLASH_MESSAGE)

    def expect_flash_contains(self, text: str) -> None:
        expect(self.flash_message).to_contain_text(text)

    def expect_login_form_visible(self) -> None:
        expect(self.locator(self.USERNAME_INPUT)).to_be_visible()
        expect(self.locator(self.PASSWORD_INPUT)).to_be_visible()
        expect(self.locator(self.SUBMIT_BUTTON)).to_be_visible()


class SecureAreaPage(BasePage):
    """Page object for the area reached after a successful login."""

    PATH = "/secure"

    LOGOUT_BUTTON = 'a[href="/logout"]'

    def logout(self) -> None:
        self.page.click(self.LOGOUT_BUTTON)
