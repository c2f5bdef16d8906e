"""
Playwright fixtures for the live E2E tests.

These tests drive the real platform named by ``UI_BASE_URL`` with the
``UI_USERNAME``/``UI_PASSWORD`` account.  They skip, rather than fail,
when credentials are missing or the platform cannot be reached.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page

from shared.config import Settings
from shared.live_stack import live_target_url
from tests.e2e.pages.base_page import BasePage


@pytest.fixture(scope="session")
def ui_settings(settings: Settings) -> Settings:
    """Settings for the live UI, skipping the suite without credentials."""
    if not settings.ui_configured:
        pytest.skip("UI_USERNAME and UI_PASSWORD are not set; skipping live E2E tests")
    return settings


@pytest.fixture(scope="session")
def live_ui_url(ui_settings: Settings) -> Generator[str, None, None]:
    """Yield the live UI base URL once it answers."""
    yield from live_target_url(ui_settings.ui_base_url, suite_name="e2e")


@pytest.fixture(scope="session")
def browser_type_launch_args(browser_type_launch_args: dict, settings: Settings) -> dict:
    """Honour HEADLESS from the environment unless --headed was passed."""
    if browser_type_launch_args.get("headless") is False:
        return browser_type_launch_args
    return {**browser_type_launch_args, "headless": settings.headless}


@pytest.fixture(scope="session")
def browser_context_args():
    return {
        "viewport": {"width": 1280, "height": 720},
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="function")
def context(
    browser: Browser, browser_context_args: dict
) -> Generator[BrowserContext, None, None]:
    context = browser.new_context(**browser_context_args)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    page = context.new_page()
    yield page
    page.close()


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture screenshot on live E2E failure."""
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
