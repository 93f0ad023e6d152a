"""Breach detection using the k-Anonymity range API.

Only the first 5 characters of the SHA-1 hash are sent to the API; the
matching suffix is searched for locally. A checker is built for one
password, performs one check, and is discarded.

check() always returns an integer:
    0                 password not found in any breach
    n > 0             password appeared n times in breaches
    UNKNOWN_RESULT    check could not be completed
"""

import logging
from enum import Enum
from typing import Callable, Optional, Union

from breachcheck.config import MAX_PASSWORD_LENGTH, UNKNOWN_RESULT
from breachcheck.hashing import digest, split_digest
from breachcheck.errors import BreachLookupError, DigestError, NormalizationError, ParseError
from breachcheck.lookup import BreachLookupClient
from breachcheck.normalize import convert_to_canonical_text
from breachcheck.siem import Reporter, log_siem_event, report as default_report


PasswordSource = Union[str, bytes, bytearray, None]
Normalizer = Callable[[PasswordSource, int], bytes]


class CheckerState(Enum):
    """Lifecycle of a single BreachChecker."""
    UNINITIALIZED = "uninitialized"
    NOT_READY = "not_ready"
    READY = "ready"
    HASHING = "hashing"
    QUERYING = "querying"
    MATCHING = "matching"
    DONE = "done"
    FAILED = "failed"


def parse_breach_count(hash_list: str, suffix: str) -> int:
    """Find suffix in a range query response.

    Response format is "SUFFIX:COUNT\\r\\n" per entry; the last entry
    has no trailing line ending.

    Args:
        hash_list: Raw response body
        suffix: 35-character uppercase digest suffix

    Returns:
        Count for suffix, or 0 if absent

    Raises:
        ParseError: If the matching entry has a malformed count
    """
    for line in hash_list.splitlines():
        hash_suffix, sep, count = line.partition(":")
        if hash_suffix != suffix:
            continue
        count = count.strip()
        if not sep or not (count.isascii() and count.isdigit()):
            raise ParseError(f"Malformed count for matching entry: {count!r}")
        return int(count)

    return 0


def is_acceptable(breach_count: int) -> bool:
    """A password is acceptable only if it was confirmed absent."""
    return breach_count == 0


def strength_from_count(breach_count: int) -> int:
    """Map a breach count to a 0-100 strength.

    Binary on purpose: any hit, or an unknown result, is the minimum.
    """
    return 100 if breach_count == 0 else 0


class BreachChecker:
    """Checks one password against the breach corpus."""

    def __init__(
        self,
        password: PasswordSource,
        *,
        client: Optional[BreachLookupClient] = None,
        max_retries: Optional[int] = None,
        normalizer: Normalizer = convert_to_canonical_text,
        report: Reporter = default_report,
    ):
        """Normalize the password and prepare for a check.

        Args:
            password: Password as text or bytes
            client: Lookup client (default: BreachLookupClient over urllib)
            max_retries: Override the lookup client's retry budget
            normalizer: Converts password to canonical bytes
            report: Diagnostic sink
        """
        self.state = CheckerState.UNINITIALIZED
        self.max_retries = max_retries
        self._report = report
        self._client = client
        self._password = b""

        try:
            self._password = normalizer(password, MAX_PASSWORD_LENGTH)
        except NormalizationError as e:
            self._report(str(e), logging.ERROR)
            self.state = CheckerState.NOT_READY
            return

        self.state = CheckerState.READY

    @property
    def ready(self) -> bool:
        return self.state is CheckerState.READY

    @property
    def client(self) -> BreachLookupClient:
        if self._client is None:
            self._client = BreachLookupClient(report=self._report)
        return self._client

    def _fail(self, message: str, level: int = logging.ERROR) -> int:
        self._report(message, level)
        self.state = CheckerState.FAILED
        return UNKNOWN_RESULT

    def check(self) -> int:
        """Check password against breach data.

        Returns:
            Number of times the password appeared in breaches, or
            UNKNOWN_RESULT if the check could not be completed
        """
        # 1. Sanity checks
        if not self.ready or len(self._password) == 0:
            return UNKNOWN_RESULT

        # 2. Generate SHA-1 hash
        self.state = CheckerState.HASHING
        try:
            sha1_digest = digest(self._password)
        except DigestError as e:
            return self._fail(str(e))

        # 3. Retrieve breached hash list for the prefix
        prefix, suffix = split_digest(sha1_digest)

        self.state = CheckerState.QUERYING
        try:
            hash_list = self.client.query(prefix, self.max_retries)
        except BreachLookupError as e:
            log_siem_event("lookup_failed", "UNKNOWN", {"hash_prefix": prefix, "error": str(e)})
            return self._fail(
                f"Breach lookup for SHA1 prefix '{prefix}' failed: {e}", logging.WARNING
            )

        # 4. Search for the hash suffix
        self.state = CheckerState.MATCHING
        try:
            count = parse_breach_count(hash_list, suffix)
        except ParseError as e:
            return self._fail(f"Invalid response for SHA1 prefix '{prefix}': {e}")

        self.state = CheckerState.DONE

        if count > 0:
            self._report(
                f"The password with SHA1 prefix '{prefix}' has appeared "
                f"{count} times in password breaches.",
                logging.WARNING,
            )
            log_siem_event("breach_detected", "BREACHED", {"hash_prefix": prefix, "count": count})

        return count


def check_password(password: PasswordSource, **kwargs) -> int:
    """Build a fresh checker for password and run it.

    Keyword arguments are passed to BreachChecker.
    """
    return BreachChecker(password, **kwargs).check()
