"""Shared CLI prompt utilities.

Common input prompts used across CLI flows.
"""

import getpass
from typing import Optional


def prompt_password(prompt: str, hidden: bool = True) -> Optional[str]:
    """Prompt user for a password.

    Args:
        prompt: Text shown to the user
        hidden: If True, read without echo (default: True)

    Returns:
        Entered password (may be empty), or None if input was closed
    """
    try:
        if hidden:
            return getpass.getpass(prompt)
        return input(prompt)
    except (EOFError, KeyboardInterrupt):
        print()
        return None


def confirm_action(prompt: str) -> bool:
    """Prompt for a y/n confirmation.

    Returns:
        True if confirmed, False otherwise
    """
    try:
        response = input(f"{prompt} (y/n): ").strip().lower()
    except (EOFError, KeyboardInterrupt):
        print()
        return False
    return response == 'y'
