"""
Live E2E test package for the automation platform.

This package contains Playwright-based browser tests against the real
platform and demonstrates:
- Page Object Model (POM) pattern
- Tolerant locator strategies for markup outside our control
- Response-gated saves
- User flow testing across login and creation flows
"""
