"""Breach corpus lookup client.

Implements the k-Anonymity range query: only a 5-character SHA-1 prefix
is sent, and the corpus answers with every known suffix sharing it.
Transient failures are retried with a fixed delay between attempts.
"""

import logging
import re
import time
from typing import Callable, Optional

from breachcheck.config import (
    BREACH_API_URL,
    DEFAULT_MAX_RETRIES,
    HASH_PREFIX_LENGTH,
    REQUEST_TIMEOUT,
    RETRY_WAIT_SECONDS,
    USER_AGENT,
)
from breachcheck.errors import RetriesExhaustedError, TransportError
from breachcheck.siem import Reporter, report as default_report
from breachcheck.transport import Transport, UrllibTransport, default_headers


_PREFIX_PATTERN = re.compile(rf"[0-9A-F]{{{HASH_PREFIX_LENGTH}}}")


class BreachLookupClient:
    """Fetches the breach candidate list for a hash prefix.

    Each query is made fresh; responses are never cached.
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        base_url: str = BREACH_API_URL,
        max_retries: int = DEFAULT_MAX_RETRIES,
        retry_wait: float = RETRY_WAIT_SECONDS,
        timeout: float = REQUEST_TIMEOUT,
        user_agent: str = USER_AGENT,
        sleep: Callable[[float], None] = time.sleep,
        report: Reporter = default_report,
    ):
        """Initialize lookup client.

        Args:
            transport: Object performing the GET (default: urllib)
            base_url: Range endpoint, the prefix is appended to it
            max_retries: Maximum attempts per query
            retry_wait: Seconds to wait between attempts
            timeout: Per-request timeout in seconds
            user_agent: User-Agent header for requests
            sleep: Delay function, replaceable in tests
            report: Diagnostic sink
        """
        self.transport = transport if transport is not None else UrllibTransport()
        self.base_url = base_url
        self.max_retries = max_retries
        self.retry_wait = retry_wait
        self.timeout = timeout
        self.headers = default_headers(user_agent)
        self._sleep = sleep
        self._report = report

    def build_url(self, prefix: str) -> str:
        if not self.base_url.endswith("/"):
            return f"{self.base_url}/{prefix}"
        return f"{self.base_url}{prefix}"

    def query(self, prefix: str, max_retries: Optional[int] = None) -> str:
        """Query the breach corpus for a hash prefix.

        Args:
            prefix: First 5 characters of the uppercase SHA-1 digest
            max_retries: Override the client's retry budget

        Returns:
            Raw response body: "SUFFIX:COUNT" lines separated by CRLF

        Raises:
            ValueError: If prefix is not 5 uppercase hex characters
            RetriesExhaustedError: If every attempt failed
        """
        if not _PREFIX_PATTERN.fullmatch(prefix):
            raise ValueError(
                f"Prefix must be {HASH_PREFIX_LENGTH} uppercase hexadecimal characters"
            )

        budget = self.max_retries if max_retries is None else max_retries
        url = self.build_url(prefix)
        remaining = budget
        last_error: Optional[TransportError] = None

        while remaining > 0:
            try:
                return self.transport.get(url, self.headers, self.timeout)
            except TransportError as e:
                last_error = e
                remaining -= 1
                self._report(f"Error making GET request: {e}", logging.ERROR)

            if remaining > 0:
                self._report(
                    f"Retrying {remaining} more time(s) before giving up.",
                    logging.WARNING,
                )
                self._sleep(self.retry_wait)

        self._report(
            f"Tried {budget} time(s). Giving up. Please verify that "
            f"{self.base_url} is accessible (should show 'Invalid API query' "
            f"as response).",
            logging.WARNING,
        )
        raise RetriesExhaustedError(budget, last_error)
