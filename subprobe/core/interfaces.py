"""Base interfaces and abstract classes for SUBPROBE components.

This module defines the core interfaces and data models used throughout the SUBPROBE
application. It includes abstract base classes that define the contract for the
resolver capability, result reporters and output formatters, as well as data models
for representing discovered subdomains and the results of an enumeration run.
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Any, Optional, Set
from dataclasses import dataclass


@dataclass
class Subdomain:
    """Data model representing a discovered subdomain.

    Attributes:
        name: The full subdomain name (e.g., www.example.com)
        domain: The root domain name (e.g., example.com)
        ip_addresses: Sorted list of addresses the name resolved to
    """
    name: str
    domain: str
    ip_addresses: List[str] = None

    def __post_init__(self):
        """Initialize default values for optional attributes."""
        if self.ip_addresses is None:
            self.ip_addresses = []


@dataclass
class Result:
    """Data model representing the outcome of one enumeration run.

    Subdomains are kept in first-discovery order, which is the order the
    concurrent lookups happened to finish in.

    Attributes:
        subdomains: Dictionary mapping subdomain names to Subdomain objects
        stats: Dictionary containing statistics about the run
    """
    subdomains: Dict[str, Subdomain] = None
    stats: Dict[str, Any] = None

    def __post_init__(self):
        """Initialize default values for optional attributes."""
        if self.subdomains is None:
            self.subdomains = {}
        if self.stats is None:
            self.stats = {
                'total_candidates': 0,   # Number of candidate labels probed
                'total_subdomains': 0,   # Number of unique subdomains discovered
                'wildcard_filtered': 0,  # Lookups suppressed as wildcard noise
                'duplicates': 0,         # Lookups for names already recorded
                'failed': 0,             # Lookups that timed out, errored or were empty
                'wildcard_addresses': [],  # Wildcard signature, empty if none
                'elapsed': 0.0           # Wall-clock seconds spent enumerating
            }

    @property
    def names(self) -> List[str]:
        """Return discovered names in discovery order."""
        return list(self.subdomains.keys())


class Resolver(ABC):
    """Base interface for the DNS resolver capability.

    Implementations must be safe to call concurrently from many worker threads.
    """

    @abstractmethod
    def resolve(self, name: str, timeout: Optional[float] = None) -> Set[str]:
        """Resolve a fully qualified name to its addresses.

        Args:
            name: Fully qualified domain name to resolve
            timeout: Upper bound in seconds for the whole lookup

        Returns:
            Set of IPv4/IPv6 address strings, empty if the name has no records

        Raises:
            NetworkError: If the lookup timed out or the resolver failed
        """
        pass


class Reporter(ABC):
    """Base interface for consumers of enumeration events."""

    def on_start(self, domain: str, candidates: int, concurrency: int,
                 wordlist: Optional[str] = None) -> None:
        """Called once before the wildcard probe."""

    def on_wildcard(self, addresses: List[str]) -> None:
        """Called when the root domain answers for a nonexistent name."""

    @abstractmethod
    def on_discovery(self, subdomain: Subdomain) -> None:
        """Called once for every newly discovered subdomain."""
        pass

    def on_complete(self, result: Result, output_file: Optional[str] = None) -> None:
        """Called after the enumeration fully drained and output was written."""


class OutputFormatter(ABC):
    """Base interface for output formatters."""

    @abstractmethod
    def format(self, result: Result) -> str:
        """Format the result for output.

        Args:
            result: The enumeration result to format

        Returns:
            Formatted string representation in the specific output format
        """
        pass
