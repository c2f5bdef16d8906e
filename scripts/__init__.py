"""Command-line helpers for preparing and checking a ``.env`` file."""
