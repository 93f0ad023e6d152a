"""Shared CLI prompt utilities.

Common input prompts used across CLI flows.
"""

import getpass
from typing import Optional


def prompt_secret(prompt: str = "Enter password to check: ") -> Optional[str]:
    """Prompt for a password without echoing it.

    Returns:
        Entered password, or None if nothing was entered
    """
    try:
        value = getpass.getpass(prompt)
    except (EOFError, KeyboardInterrupt):
        print()
        return None
    return value or None


def confirm_action(prompt: str) -> bool:
    """Prompt for a yes/no confirmation.

    Args:
        prompt: Question to ask

    Returns:
        True if confirmed, False otherwise
    """
    try:
        response = input(f"{prompt} (y/n): ").strip().lower()
    except EOFError:
        return False
    return response == 'y'
