"""Thread-safe result aggregation for SUBPROBE."""

import logging
import threading
from typing import Callable, Dict, Iterable, List, Optional

from subprobe.core.interfaces import Subdomain


class ResultAggregator:
    """Collects discovered subdomains from concurrent workers.

    Entries are keyed by full domain name, so submitting the same name twice
    stores it once. Iteration order is the order names were first accepted.
    The lock is held only for the membership check and insertion; the
    ``on_new`` callback runs after it is released.
    """

    def __init__(self, domain: str, on_new: Optional[Callable[[Subdomain], None]] = None):
        """Initialize the aggregator.

        Args:
            domain: Root domain the subdomains belong to
            on_new: Optional callback invoked once per newly accepted subdomain
        """
        self.domain = domain
        self.on_new = on_new
        self._entries: Dict[str, Subdomain] = {}
        self._lock = threading.Lock()
        self.logger = logging.getLogger('subprobe.aggregator')

    def submit(self, name: str, addresses: Iterable[str]) -> bool:
        """Record a resolved subdomain.

        Args:
            name: Full domain name
            addresses: Addresses the name resolved to

        Returns:
            True if the name was newly added, False if it was already known
        """
        key = name.lower()
        subdomain = Subdomain(name=key, domain=self.domain, ip_addresses=sorted(addresses))

        with self._lock:
            if key in self._entries:
                return False
            self._entries[key] = subdomain

        self.logger.debug(f"Discovered {key}")
        if self.on_new:
            self.on_new(subdomain)
        return True

    def snapshot(self) -> List[Subdomain]:
        """Return accepted subdomains in first-discovery order."""
        with self._lock:
            return list(self._entries.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name.lower() in self._entries
