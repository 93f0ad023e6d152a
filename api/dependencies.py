"""FastAPI dependencies shared by the route modules.

Provides the rate limiter and the breach checker factory. Tests replace
the factory through app.dependency_overrides to avoid network access.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from breachcheck import BreachChecker, BreachPasswordValidation, PolicyValidator
from breachcheck.validation import CheckerFactory


# Rate limiter configuration
# Uses client IP for rate limit tracking
limiter = Limiter(key_func=get_remote_address, default_limits=["100/minute"])

# Each check can block for several seconds of retries,
# keep per-IP volume toward the corpus low
BREACH_CHECK_RATE_LIMIT = "30/minute"


def get_checker_factory() -> CheckerFactory:
    """Factory building one BreachChecker per password."""
    return BreachChecker


def build_validation(checker_factory: CheckerFactory, use_policy: bool) -> BreachPasswordValidation:
    """Build the validation service, optionally with the local policy."""
    secondary = (PolicyValidator(),) if use_policy else ()
    return BreachPasswordValidation(
        secondary_validators=secondary,
        checker_factory=checker_factory,
    )
