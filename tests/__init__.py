"""
Browser end-to-end suite tests.

Test categories:
- unit/ - Browser-free tests of e2e_kit helpers
- e2e/  - Playwright scenarios against the demo sites
"""
