"""
Test suite for the automation platform.

This package contains:
- unit/: Fast tests of settings, client, selectors, assertions and scripts
- integration/: API client over HTTP against the stand-in platform
- contracts/: Payloads validated against contracts/openapi.yaml
- ui/: Playwright page objects against the stand-in platform
- e2e/: Page objects and scenarios against the live platform
- api/: Learning-instance scenarios against the live API
- smoke/: Reachability and token checks against the live platform
"""
