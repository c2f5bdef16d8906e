"""
Interactive ``.env`` configuration helper.

Asks for each setting the suites read, shows a summary with secrets
masked, and writes the answers to a ``.env`` file after confirmation.
Pressing Enter accepts the default shown in brackets.

Exit codes:

- ``0`` -- file written, or the user declined to save
- ``1`` -- the file could not be written

Key Concepts Demonstrated:
- Injectable prompt functions so the flow can be tested without a terminal
- Secrets read with ``getpass`` and masked in every summary
"""

from __future__ import annotations

import argparse
import getpass
import sys
from collections.abc import Callable
from pathlib import Path

from dotenv import set_key

from shared.config import API_TOKEN_PLACEHOLDER, DEFAULT_API_BASE_URL, DEFAULT_UI_BASE_URL, Settings

EXIT_OK = 0
EXIT_WRITE_ERROR = 1

ENV_KEYS = ("UI_BASE_URL", "UI_USERNAME", "UI_PASSWORD", "HEADLESS", "API_BASE_URL", "API_TOKEN")

Prompt = Callable[[str], str]

ENV_TEMPLATE = """\
# ============================================
# UI Test Configuration
# ============================================
# Base URL for the automation platform UI
UI_BASE_URL=

# Login email for the platform
UI_USERNAME=

# Login password for the platform
UI_PASSWORD=

# Run browser in headless mode (true) or visible mode (false)
HEADLESS=

# ============================================
# API Test Configuration
# ============================================
# Base URL for the platform REST API
API_BASE_URL=

# API authentication token (Bearer token)
API_TOKEN=
"""


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the configuration helper."""
    parser = argparse.ArgumentParser(description="Write a .env file for the test suites.")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(".env"),
        help="Path of the .env file to write",
    )
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Save without asking for confirmation",
    )
    return parser.parse_args(argv)


def _ask(ask: Prompt, prompt: str, default: str = "") -> str:
    return ask(prompt).strip() or default


def prompt_settings(ask: Prompt = input, ask_secret: Prompt = getpass.getpass) -> dict[str, str]:
    """
    Collect every setting interactively.

    Args:
        ask: Prompt function for visible answers.
        ask_secret: Prompt function for the password.

    Returns:
        Mapping of environment variable name to value, ready for write_env.
    """
    values: dict[str, str] = {}

    print("\nUI Test Configuration")
    print("-" * 60)
    values["UI_BASE_URL"] = _ask(ask, f"UI Base URL [{DEFAULT_UI_BASE_URL}]: ", DEFAULT_UI_BASE_URL)
    values["UI_USERNAME"] = _ask(ask, "UI Username (email): ")
    if not values["UI_USERNAME"]:
        print("Warning: UI_USERNAME is required for UI tests")
    values["UI_PASSWORD"] = ask_secret("UI Password: ").strip()
    if not values["UI_PASSWORD"]:
        print("Warning: UI_PASSWORD is required for UI tests")
    headless = _ask(ask, "Run browser in headless mode? (y/n) [y]: ", "y")
    values["HEADLESS"] = "true" if headless.lower() == "y" else "false"

    print("\nAPI Test Configuration")
    print("-" * 60)
    values["API_BASE_URL"] = _ask(ask, f"API Base URL [{DEFAULT_API_BASE_URL}]: ", DEFAULT_API_BASE_URL)
    print("\nTo get an API token: log in, open Settings > Security > API Tokens,")
    print("generate a new token and paste it below.\n")
    token = _ask(ask, "API Token: ")
    if not token or token == API_TOKEN_PLACEHOLDER:
        print("Warning: API_TOKEN is required for API tests; you can set it later in .env")
        token = API_TOKEN_PLACEHOLDER
    values["API_TOKEN"] = token
    return values


def print_summary(values: dict[str, str]) -> None:
    """Print the collected values with the password and token masked."""
    settings = Settings(api_token="" if values["API_TOKEN"] == API_TOKEN_PLACEHOLDER else values["API_TOKEN"])
    print("\nConfiguration Summary")
    print("=" * 60)
    print(f"UI_BASE_URL:  {values['UI_BASE_URL']}")
    print(f"UI_USERNAME:  {values['UI_USERNAME']}")
    print("UI_PASSWORD:  ***")
    print(f"HEADLESS:     {values['HEADLESS']}")
    print(f"API_BASE_URL: {values['API_BASE_URL']}")
    print(f"API_TOKEN:    {settings.masked_token}")


def write_env(values: dict[str, str], path: Path) -> Path:
    """
    Write the commented ``.env`` skeleton to ``path`` and fill in each key.

    Values are always quoted by python-dotenv, so passwords containing
    ``#`` or quotes read back unchanged.
    """
    path.write_text(ENV_TEMPLATE, encoding="utf-8")
    for key in ENV_KEYS:
        set_key(path, key, values[key], quote_mode="always")
    return path


def main(
    argv: list[str] | None = None,
    ask: Prompt = input,
    ask_secret: Prompt = getpass.getpass,
) -> int:
    """
    Entry point: prompt, summarise, confirm, write.

    Returns:
        ``EXIT_OK`` (0) when the file was written or saving was declined,
        ``EXIT_WRITE_ERROR`` (1) when writing failed.
    """
    args = parse_args(argv)

    print("Automation platform .env configuration helper")
    print("=" * 60)
    print("Press Enter to use default values (shown in brackets)")

    values = prompt_settings(ask, ask_secret)
    print_summary(values)

    if not args.yes:
        confirm = _ask(ask, f"\nSave this configuration to {args.output}? (y/n) [y]: ", "y")
        if confirm.lower() != "y":
            print("\nConfiguration not saved. Run the script again when ready.")
            return EXIT_OK

    try:
        write_env(values, args.output)
    except OSError as exc:
        print(f"Could not write {args.output}: {exc}", file=sys.stderr)
        return EXIT_WRITE_ERROR

    print(f"\nConfiguration saved to {args.output}")
    print("\nNext steps:")
    print("  1. Review the file and update it if needed")
    print("  2. Check the configuration: python -m scripts.check_config")
    print("  3. Run the tests: pytest")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
