"""
Pytest configuration file for SUBPROBE tests.
"""
import os
import sys
import threading
import time
import pytest

# Add the parent directory to sys.path to allow importing subprobe
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from subprobe.core.exceptions import NetworkError
from subprobe.core.interfaces import Resolver
from subprobe.core.wildcard import WILDCARD_PREFIX


class FakeResolver(Resolver):
    """In-memory resolver answering from a fixed table.

    Names in ``failures`` raise NetworkError, names in ``records`` resolve to
    their addresses and any other name resolves to ``wildcard`` when set.
    Tracks every call and the peak number of concurrent calls.
    """

    def __init__(self, records=None, wildcard=None, failures=None, delay=0.0):
        self.records = {name.lower(): set(addrs) for name, addrs in (records or {}).items()}
        self.wildcard = set(wildcard) if wildcard else None
        self.failures = set(failures or ())
        self.delay = delay
        self.calls = []
        self.in_flight = 0
        self.max_in_flight = 0
        self._lock = threading.Lock()

    def resolve(self, name, timeout=None):
        with self._lock:
            self.calls.append((name, timeout))
            self.in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                time.sleep(self.delay)
            if name in self.failures:
                raise NetworkError(f"Timeout resolving {name}")
            if name in self.records:
                return set(self.records[name])
            if self.wildcard:
                return set(self.wildcard)
            return set()
        finally:
            with self._lock:
                self.in_flight -= 1

    @property
    def probed_names(self):
        """Names looked up, excluding wildcard probes."""
        return [name for name, _ in self.calls if not name.startswith(WILDCARD_PREFIX)]


# Common fixtures for tests
@pytest.fixture
def sample_domain():
    """Return a sample domain for testing."""
    return "example.com"

@pytest.fixture
def sample_wordlist():
    """Return the candidate labels used by the basic scenarios."""
    return ["www", "mail", "doesnotexist123"]

@pytest.fixture
def sample_records():
    """Return DNS records for the basic scenarios."""
    return {
        "www.example.com": {"93.184.216.34"},
        "mail.example.com": {"93.184.216.35"},
    }

@pytest.fixture
def make_resolver():
    """Return a factory for in-memory resolvers."""
    return FakeResolver
