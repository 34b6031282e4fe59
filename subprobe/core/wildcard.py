"""Wildcard DNS detection for SUBPROBE.

A zone with a catch-all record (``*.example.com``) answers for every name, which
would turn each candidate into a false positive. Before enumeration starts the
detector resolves one name that cannot plausibly exist; whatever it resolves to
becomes the noise signature that later results are compared against.

Only a single probe is made. Zones whose wildcard rotates through a pool of
addresses per query are therefore only partially filtered.
"""

import logging
import time
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional

from subprobe.core.exceptions import NetworkError
from subprobe.core.interfaces import Resolver

# Seconds allowed for the wildcard probe
WILDCARD_TIMEOUT = 3.0

WILDCARD_PREFIX = 'wildcard-check'

logger = logging.getLogger('subprobe.wildcard')


@dataclass(frozen=True)
class NoiseSignature:
    """Addresses a wildcard record answers with."""
    addresses: FrozenSet[str]

    def matches(self, addresses: Iterable[str]) -> bool:
        """Return True if a resolved address set overlaps the wildcard answer."""
        return not self.addresses.isdisjoint(addresses)

    def sorted_addresses(self) -> List[str]:
        return sorted(self.addresses)


def nonce_name(domain: str) -> str:
    """Build a probe name under ``domain`` that is practically guaranteed not to exist."""
    return f"{WILDCARD_PREFIX}-{time.time_ns()}.{domain}"


def detect(resolver: Resolver, domain: str,
           timeout: float = WILDCARD_TIMEOUT) -> Optional[NoiseSignature]:
    """Probe ``domain`` for a wildcard record.

    Args:
        resolver: Resolver capability to query with
        domain: Root domain to probe
        timeout: Seconds allowed for the single probe lookup

    Returns:
        NoiseSignature if the probe name resolved, None otherwise
    """
    probe = nonce_name(domain)
    try:
        addresses = resolver.resolve(probe, timeout=timeout)
    except NetworkError as e:
        logger.debug(f"Wildcard probe {probe} failed: {e}")
        return None
    except Exception as e:
        logger.debug(f"Unexpected error checking {domain} for a wildcard: {e}")
        return None

    if not addresses:
        logger.debug(f"No wildcard record for {domain}")
        return None

    logger.info(f"Wildcard record detected for {domain}: {', '.join(sorted(addresses))}")
    return NoiseSignature(frozenset(addresses))
