"""Password breach check CLI flows.

Prompts for a password (without echo), checks it against the breach
corpus and the local policy, and prints the result.
"""

import argparse
import logging
from typing import Optional

from breachcheck import (
    UNKNOWN_RESULT,
    BreachChecker,
    deinit_environment,
    init_environment,
    strength_from_count,
)
from breachcheck.policy import check_password_strength
from breachcheck.validation import format_breach_warning

from cli.prompts import confirm_action, prompt_secret


def report_result(breach_count: int, policy_strength: str, feedback: list[str]) -> bool:
    """Print a check result.

    Returns:
        True if the password is safe to use
    """
    print(f"\nResult: {format_breach_warning(breach_count)}")
    print(f"Policy strength: {policy_strength}")
    for item in feedback:
        print(f"  - {item}")

    if breach_count == UNKNOWN_RESULT:
        print("Status: UNKNOWN - Breach status could not be determined.")
        return False
    if strength_from_count(breach_count) == 0:
        print("Status: COMPROMISED - Choose a different password!")
        return False

    print("Status: SAFE")
    return True


def check_password_flow(max_retries: Optional[int] = None) -> Optional[bool]:
    """Check a single password entered by the user.

    Returns:
        True if safe, False if not, None if nothing was entered
    """
    print("\n--- Check a Password ---")

    password = prompt_secret()
    if not password:
        print("No password entered.")
        return None

    kwargs = {} if max_retries is None else {"max_retries": max_retries}
    breach_count = BreachChecker(password, **kwargs).check()
    policy_strength, feedback = check_password_strength(password)
    return report_result(breach_count, policy_strength, feedback)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Check if a password has been exposed in data breaches.",
    )
    parser.add_argument("--retries", type=int, default=None, help="Lookup attempts before giving up")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show diagnostic messages")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.ERROR,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    print("=== Password Breach Checker ===")
    print("(Uses k-Anonymity - your password and its full hash are never sent)")

    init_environment()
    try:
        all_safe = True
        while True:
            result = check_password_flow(args.retries)
            if result is False:
                all_safe = False
            if not confirm_action("\nCheck another password?"):
                break
    finally:
        deinit_environment()

    return 0 if all_safe else 1


if __name__ == "__main__":
    raise SystemExit(main())
