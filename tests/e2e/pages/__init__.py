"""
Page Object Model (POM) classes for the automation platform.

This package contains page objects that encapsulate page-specific
locators and interactions. The POM pattern provides:
- Separation of test logic from page details
- Reusable page interactions
- One place to update when the platform's markup changes
"""

from tests.e2e.pages.automation_page import AutomationPage
from tests.e2e.pages.base_page import BasePage
from tests.e2e.pages.form_builder_page import FormBuilderPage
from tests.e2e.pages.login_page import LoginPage
from tests.e2e.pages.message_box_page import MessageBoxPage

__all__ = ["AutomationPage", "BasePage", "FormBuilderPage", "LoginPage", "MessageBoxPage"]
