"""Exception hierarchy for breach checking.

Every error is recovered inside BreachChecker.check(); callers of the
checker only ever see an integer result.
"""

from typing import Optional


class BreachCheckError(Exception):
    """Base exception for breach check operations."""
    pass


class NormalizationError(BreachCheckError):
    """Password could not be converted to canonical UTF-8 bytes."""
    pass


class DigestError(BreachCheckError):
    """The SHA-1 primitive failed to initialize, update or finalize."""
    pass


class BreachLookupError(BreachCheckError):
    """Base exception for breach corpus lookups."""
    pass


class TransportError(BreachLookupError):
    """A single request attempt failed."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class RetriesExhaustedError(BreachLookupError):
    """Every attempt in the retry budget failed."""

    def __init__(self, attempts: int, last_error: Optional[TransportError] = None):
        super().__init__(f"Gave up after {attempts} attempt(s)")
        self.attempts = attempts
        self.last_error = last_error


class ParseError(BreachCheckError):
    """Breach corpus response is malformed."""
    pass
