"""Shared fixtures: stub transports so no test touches the network."""

import os
import sys

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from breachcheck import BreachChecker, BreachLookupClient, TransportError


# SHA-1 of "password" is 5BAA61E4C9B93F3F0682250B6CF8331B7EE68FD8
PASSWORD_PREFIX = "5BAA6"
PASSWORD_SUFFIX = "1E4C9B93F3F0682250B6CF8331B7EE68FD8"

SAMPLE_RANGE = (
    "003D68EB55068C33ACE09247EE4C639306B:3\r\n"
    "1E4C9B93F3F0682250B6CF8331B7EE68FD8:3861493\r\n"
    "1E5F2B1B4A8D3C7E6F9A0B1C2D3E4F5A6B7:0"
)


class StubTransport:
    """Transport returning queued results; exceptions in the queue are raised."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = []

    def get(self, url, headers, timeout):
        self.calls.append(url)
        result = self.results.pop(0) if len(self.results) > 1 else self.results[0]
        if isinstance(result, Exception):
            raise result
        return result


class Recorder:
    """Diagnostic sink capturing (message, level) pairs."""

    def __init__(self):
        self.messages = []

    def __call__(self, message, level):
        self.messages.append((message, level))

    def levels(self):
        return [level for _, level in self.messages]


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def sleeps():
    """List collecting requested sleep durations."""
    return []


@pytest.fixture
def make_client(recorder, sleeps):
    """Build a lookup client over a stub transport with no real delay."""
    def _make(*results, **kwargs):
        transport = StubTransport(*results)
        client = BreachLookupClient(
            transport=transport,
            sleep=sleeps.append,
            report=recorder,
            **kwargs,
        )
        return client, transport
    return _make


@pytest.fixture
def make_checker(make_client, recorder):
    """Build a checker whose lookups go to a stub transport."""
    def _make(password, *results, **kwargs):
        client, transport = make_client(*results)
        checker = BreachChecker(password, client=client, report=recorder, **kwargs)
        return checker, transport
    return _make


@pytest.fixture
def failure():
    return TransportError("Connection refused")
