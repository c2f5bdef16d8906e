"""
Integration test package.

Runs the real API client, assertions and scenarios over HTTP against
the stand-in platform, covering:
- The create-then-read learning-instance scenario
- Error statuses (400, 401, 404, 409) surfaced as ordinary responses
- Failure types raised for bad status and bad payloads
"""
