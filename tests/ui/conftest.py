"""
Playwright fixtures for the offline UI tests.

The stand-in platform is served by the session-wide ``mock_server``
fixture from ``tests/conftest.py``; this module adds browser contexts,
page objects bound to that server, and screenshot capture on failure.

Key Concepts Demonstrated:
- Browser context isolation per test
- Page object fixtures bound to a live server URL
- Shortened timeouts for negative paths
- Screenshot capture on failure
"""

from __future__ import annotations

from collections.abc import Generator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page

from shared.config import Settings
from tests.e2e.pages.base_page import BasePage
from tests.e2e.pages.form_builder_page import FormBuilderPage
from tests.e2e.pages.login_page import LoginPage
from tests.e2e.pages.message_box_page import MessageBoxPage


# -----------------------------------------------------------------------------
# Browser Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def browser_context_args():
    """
    Configure browser context options.

    Returns:
        dict: Browser context configuration.
    """
    return {
        "viewport": {"width": 1280, "height": 720},
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="function")
def context(browser: Browser, browser_context_args: dict) -> Generator[BrowserContext, None, None]:
    """
    Create a fresh browser context for each test.

    A new context means a new cookie jar, so every test starts logged out.
    """
    context = browser.new_context(**browser_context_args)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    page = context.new_page()
    yield page
    page.close()


# -----------------------------------------------------------------------------
# Page Object Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def login_page(page: Page, mock_settings: Settings) -> LoginPage:
    """
    LoginPage bound to the stand-in, with short redirect waits.

    The stand-in redirects immediately, so a failed login does not need
    the full 30 s race before falling back.
    """
    login = LoginPage(page, mock_settings.ui_base_url)
    login.REDIRECT_TIMEOUT = 3000
    login.LOAD_FALLBACK_TIMEOUT = 3000
    login.INDICATOR_TIMEOUT = 2000
    return login


@pytest.fixture
def logged_in_page(login_page: LoginPage, mock_settings: Settings) -> Page:
    """A browser page that has already signed in to the stand-in."""
    login_page.navigate()
    login_page.login(mock_settings.ui_username, mock_settings.ui_password)
    login_page.expect_logged_in()
    return login_page.page


@pytest.fixture
def form_builder_page(logged_in_page: Page, mock_settings: Settings, mock_db) -> FormBuilderPage:
    return FormBuilderPage(logged_in_page, mock_settings.ui_base_url)


@pytest.fixture
def message_box_page(logged_in_page: Page, mock_settings: Settings, mock_db) -> MessageBoxPage:
    return MessageBoxPage(logged_in_page, mock_settings.ui_base_url)


# -----------------------------------------------------------------------------
# Screenshot on Failure
# -----------------------------------------------------------------------------

@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture a screenshot when an offline UI test fails."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = item.funcargs.get("page")
        if page:
            test_name = item.name.replace("/", "_").replace("::", "_")
            try:
                screenshot_path = BasePage(page, page.url).take_screenshot(test_name)
                print(f"\nScreenshot saved: {screenshot_path}")
            except Exception as exc:
                print(f"\nFailed to capture screenshot: {exc}")
