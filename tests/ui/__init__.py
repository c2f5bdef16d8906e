"""
Offline UI test package.

Runs the Playwright page objects against the stand-in platform so the
login, form builder and Message Box flows can be checked without the
real SaaS.
"""
