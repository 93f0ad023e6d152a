"""Password validation service backed by the breach checker.

BreachPasswordValidation is what a host application plugs into its
password-change path: validate() accepts or rejects, get_strength()
returns 0-100. Secondary validators are consulted in order, and only
when the breach check came back clean.
"""

import logging
from typing import Callable, Optional, Protocol, Sequence, Union

from breachcheck.checker import (
    BreachChecker,
    PasswordSource,
    is_acceptable,
    strength_from_count,
)
from breachcheck.config import UNKNOWN_RESULT
from breachcheck.siem import report


class PasswordValidator(Protocol):
    """Capability pair implemented by every validator."""

    def validate(self, password: Union[str, bytes]) -> bool:
        """Return True if password is acceptable."""
        ...

    def get_strength(self, password: Union[str, bytes]) -> int:
        """Return password strength in the range 0-100."""
        ...


CheckerFactory = Callable[[PasswordSource], BreachChecker]


class BreachPasswordValidation:
    """Validates passwords against the breach corpus, then secondaries."""

    def __init__(
        self,
        secondary_validators: Sequence[PasswordValidator] = (),
        checker_factory: Optional[CheckerFactory] = None,
    ):
        """Initialize validation service.

        Args:
            secondary_validators: Validators consulted after a clean
                breach result, in order
            checker_factory: Builds a BreachChecker for a password
        """
        self.secondary_validators = tuple(secondary_validators)
        self._checker_factory = checker_factory or BreachChecker

    def breach_count(self, password: PasswordSource) -> int:
        return self._checker_factory(password).check()

    def validate(self, password: PasswordSource) -> bool:
        """Check whether password may be used.

        Returns:
            False if the password was breached or its status is unknown,
            or if any secondary validator rejects it
        """
        if not is_acceptable(self.breach_count(password)):
            return False

        for validator in self.secondary_validators:
            if not validator.validate(password):
                return False

        return True

    def get_strength(self, password: PasswordSource) -> int:
        """Get password strength between 0 (weak) and 100 (strong)."""
        strength = strength_from_count(self.breach_count(password))
        if strength == 0:
            return 0

        for validator in self.secondary_validators:
            strength = min(strength, validator.get_strength(password))
            if strength == 0:
                break

        return strength


def format_breach_warning(breach_count: int) -> str:
    """Format a user-facing message for a breach check result."""
    if breach_count == UNKNOWN_RESULT:
        return "Could not verify against breach database. Treat this password as unsafe."
    if breach_count == 0:
        return "Password not found in known data breaches"
    elif breach_count < 10:
        return f"This password appeared in {breach_count} data breach(es). Consider using a different password."
    elif breach_count < 100:
        return f"WARNING: This password was found {breach_count} times in data breaches!"
    elif breach_count < 1000:
        return f"DANGER: This password was exposed {breach_count} times in breaches. Do NOT use it!"
    else:
        return f"CRITICAL: This password was found {breach_count:,} times in breaches. It is extremely compromised!"


def password_breach_check(
    password: PasswordSource,
    checker_factory: Optional[CheckerFactory] = None,
) -> int:
    """Return the number of times password appeared in breaches.

    Missing passwords return UNKNOWN_RESULT without a lookup.
    """
    if password is None:
        report("Provide a non-empty password value to password_breach_check.", logging.ERROR)
        return UNKNOWN_RESULT

    factory = checker_factory or BreachChecker
    return factory(password).check()
