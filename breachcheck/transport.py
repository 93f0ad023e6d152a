"""Network transport for breach corpus queries.

The default transport uses urllib with a shared TLS context. The context
is created by init_environment() once per process and dropped by
deinit_environment(); both are safe to call repeatedly.

Any object with a matching get() method can be injected instead, which
is how tests stub out the network.
"""

import http.client
import socket
import ssl
import urllib.error
import urllib.request
from threading import Lock
from typing import Optional, Protocol

from breachcheck.config import REQUEST_TIMEOUT, USER_AGENT, VERIFY_TLS
from breachcheck.errors import TransportError


class Transport(Protocol):
    """A single-shot HTTP GET returning the response body as text."""

    def get(self, url: str, headers: dict[str, str], timeout: float) -> str:
        """Fetch url, raising TransportError on any failure."""
        ...


# Module-level state
_environment_lock = Lock()
_ssl_context: Optional[ssl.SSLContext] = None


def _build_ssl_context(verify: bool) -> ssl.SSLContext:
    context = ssl.create_default_context()
    if not verify:
        # Legacy behavior: no peer verification toward the corpus
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    return context


def init_environment(verify_tls: Optional[bool] = None) -> None:
    """Set up the process-wide transport state.

    Call once before the first check. Repeated calls are no-ops.

    Args:
        verify_tls: Override VERIFY_TLS from configuration
    """
    global _ssl_context
    with _environment_lock:
        if _ssl_context is not None:
            return
        _ssl_context = _build_ssl_context(VERIFY_TLS if verify_tls is None else verify_tls)


def deinit_environment() -> None:
    """Tear down the process-wide transport state.

    Tearing down twice, or before init, is a no-op.
    """
    global _ssl_context
    with _environment_lock:
        _ssl_context = None


def is_initialized() -> bool:
    """Check whether init_environment() has run (and not been torn down)."""
    with _environment_lock:
        return _ssl_context is not None


def get_ssl_context(verify_tls: Optional[bool] = None) -> ssl.SSLContext:
    """Get the shared TLS context, or a private one if not initialized."""
    with _environment_lock:
        shared = _ssl_context
    if shared is not None and verify_tls is None:
        return shared
    return _build_ssl_context(VERIFY_TLS if verify_tls is None else verify_tls)


class UrllibTransport:
    """Default transport built on urllib.request."""

    def __init__(self, verify_tls: Optional[bool] = None):
        self.verify_tls = verify_tls

    def get(self, url: str, headers: dict[str, str], timeout: float = REQUEST_TIMEOUT) -> str:
        request = urllib.request.Request(url, headers=headers, method="GET")
        context = get_ssl_context(self.verify_tls)

        try:
            with urllib.request.urlopen(request, timeout=timeout, context=context) as response:
                status = response.status
                body = response.read()
        except urllib.error.HTTPError as e:
            raise TransportError(f"Breach check API error: HTTP {e.code}", status=e.code)
        except urllib.error.URLError as e:
            raise TransportError(f"Could not reach breach database: {e.reason}")
        except (socket.timeout, TimeoutError):
            raise TransportError(f"Request timed out after {timeout}s")
        except OSError as e:
            raise TransportError(f"Connection failed: {e}")
        except http.client.HTTPException as e:
            # Malformed status line, truncated body, oversized headers
            raise TransportError(f"Invalid HTTP response: {e!r}")

        if status != 200:
            raise TransportError(f"Breach check API error: HTTP {status}", status=status)

        try:
            return body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise TransportError(f"Response body is not valid UTF-8: {e}", status=status)


def default_headers(user_agent: str = USER_AGENT) -> dict[str, str]:
    """Request headers sent with every range query."""
    return {
        "User-Agent": user_agent,
        "Add-Padding": "true",  # Helps prevent response size analysis
    }
