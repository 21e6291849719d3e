"""
Page Object Models for Playwright E2E Tests

This package provides page objects that encapsulate UI interactions
and provide a clean API for test code.
"""

from .base_page import BasePage
from .download_page import DownloadPage
from .dynamic_content_page import DynamicContentPage
from .login_page import LoginPage, SecureAreaPage
from .upload_page import UploadPage

__all__ = [
    "BasePage",
    "LoginPage",
    "SecureAreaPage",
    "DynamicContentPage",
    "UploadPage",
    "DownloadPage",
]
