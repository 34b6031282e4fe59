"""DNS utility functions for SUBPROBE.

This module provides the resolver capability used by the enumeration engine, along
with domain validation helpers. Resolution is delegated to dnspython; a single
DNSUtils instance is shared by every worker thread of a run.
"""

import ipaddress
import re
import time
from typing import List, Optional, Set
import logging
from dns.resolver import (
    Resolver as DNSResolver, NXDOMAIN, NoAnswer, Timeout, NoNameservers, NoResolverConfiguration
)
import dns.exception

from subprobe.core.exceptions import ValidationError, NetworkError, ConfigurationError
from subprobe.core.interfaces import Resolver


DOMAIN_PATTERN = re.compile(r'^([a-zA-Z0-9]([a-zA-Z0-9\-]{0,61}[a-zA-Z0-9])?\.)+[a-zA-Z]{2,}$')

# Record types queried for every name, in order
RECORD_TYPES = ('A', 'AAAA')


def normalize_domain(domain: str) -> str:
    """Lower-case a domain and strip surrounding whitespace and dots."""
    return domain.strip().strip('.').lower()


def build_name(label: str, domain: str) -> str:
    """Build the full domain name probed for a candidate label."""
    return f"{label.strip('.')}.{domain}".lower()


class DNSUtils(Resolver):
    """DNS resolver capability and domain validation.

    Attributes:
        timeout: Default lookup timeout in seconds
        logger: Logger instance for this class
        resolver: dnspython resolver instance shared across threads
    """

    def __init__(self, timeout: float = 5, nameservers: Optional[List[str]] = None):
        """Initialize DNS utilities.

        Args:
            timeout: Default lookup timeout in seconds
            nameservers: Optional list of nameserver IPs overriding the system configuration

        Raises:
            ConfigurationError: If a nameserver is not a valid IP address or
                no system resolver configuration exists
        """
        self.timeout = timeout
        self.logger = logging.getLogger('subprobe.dns_utils')
        try:
            self.resolver = DNSResolver(configure=not nameservers)
        except NoResolverConfiguration as e:
            raise ConfigurationError("No system resolver configuration found") from e
        self.resolver.timeout = timeout
        self.resolver.lifetime = timeout
        self.resolver.cache = None

        if nameservers:
            for server in nameservers:
                try:
                    ipaddress.ip_address(server)
                except ValueError:
                    raise ConfigurationError(f"Invalid nameserver address: {server}")
            self.resolver.nameservers = list(nameservers)

    @staticmethod
    def validate_domain(domain: str) -> bool:
        """Validate if a string is a valid domain name.

        Args:
            domain: Domain name to validate

        Returns:
            True if domain is valid

        Raises:
            ValidationError: If domain is invalid
        """
        if not domain or not isinstance(domain, str):
            raise ValidationError("Domain must be a non-empty string")

        if not DOMAIN_PATTERN.match(domain):
            raise ValidationError(f"Invalid domain format: {domain}")

        return True

    def resolve(self, name: str, timeout: Optional[float] = None) -> Set[str]:
        """Resolve a domain name to its IPv4 and IPv6 addresses.

        A and AAAA queries share one deadline so the whole lookup never takes
        longer than ``timeout``. A name that exists but has only one of the two
        record types still resolves.

        Args:
            name: Domain name to resolve (e.g., www.example.com)
            timeout: Lookup timeout in seconds, defaults to the instance timeout

        Returns:
            Set of IP addresses as strings, empty if the name does not exist

        Raises:
            NetworkError: If DNS resolution fails or times out
        """
        timeout = self.timeout if timeout is None else timeout
        deadline = time.monotonic() + timeout
        addresses = set()

        for rdtype in RECORD_TYPES:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                if addresses:
                    break
                raise NetworkError(f"Timeout resolving {name}")
            try:
                answers = self.resolver.resolve(name, rdtype, lifetime=remaining)
                for answer in answers:
                    addresses.add(answer.to_text())
            except NXDOMAIN:
                self.logger.debug(f"Domain {name} does not exist")
                return set()
            except NoAnswer:
                self.logger.debug(f"No {rdtype} records for {name}")
            except Timeout:
                self.logger.debug(f"Timeout resolving {name} ({rdtype})")
                if addresses:
                    break
                raise NetworkError(f"Timeout resolving {name}")
            except NoNameservers:
                self.logger.debug(f"No nameservers available for {name} ({rdtype})")
                if addresses:
                    break
                raise NetworkError(f"No nameservers available for {name}")
            except dns.exception.DNSException as e:
                self.logger.debug(f"Error resolving {name} ({rdtype}): {e}")
                if addresses:
                    break
                raise NetworkError(f"Error resolving {name}") from e

        return addresses
