"""
Live API test package.

Exercises the learning-instance REST endpoints of the real platform
through :class:`shared.api_client.ApiClient`.
"""
