"""Code shared by the test suites and the helper scripts."""
