"""Bounded-concurrency resolution loop for SUBPROBE."""

import concurrent.futures
import logging
import random
import time
from typing import Dict, Optional, Sequence, Set

from subprobe.core.aggregator import ResultAggregator
from subprobe.core.exceptions import NetworkError, ValidationError
from subprobe.core.interfaces import Resolver
from subprobe.core.wildcard import NoiseSignature
from subprobe.utils.dns_utils import build_name
from subprobe.utils.progress import ProgressIndicator

# Terminal outcomes of a single candidate lookup
FOUND = 'found'
DUPLICATE = 'duplicate'
WILDCARD = 'wildcard'
FAILED = 'failed'

OUTCOMES = (FOUND, DUPLICATE, WILDCARD, FAILED)


class WorkScheduler:
    """Resolves candidate names with at most ``concurrency`` lookups in flight.

    The thread pool size is the admission gate: each candidate becomes one task,
    and the pool never runs more than ``concurrency`` of them at once no matter
    how long the candidate list is.
    """

    def __init__(self, resolver: Resolver, concurrency: int = 100, timeout: float = 5,
                 retries: int = 0, backoff_factor: float = 0.5):
        """Initialize the scheduler.

        Args:
            resolver: Resolver capability shared by all workers
            concurrency: Maximum number of lookups in flight
            timeout: Per-lookup timeout in seconds
            retries: Extra attempts for lookups that raise NetworkError
            backoff_factor: Base delay in seconds between retries, doubled per attempt

        Raises:
            ValidationError: If a limit is out of range
        """
        if concurrency < 1:
            raise ValidationError("Concurrency must be at least 1")
        if timeout <= 0:
            raise ValidationError("Timeout must be greater than 0")
        if retries < 0:
            raise ValidationError("Retries cannot be negative")

        self.resolver = resolver
        self.concurrency = concurrency
        self.timeout = timeout
        self.retries = retries
        self.backoff_factor = backoff_factor
        self.logger = logging.getLogger('subprobe.scheduler')

    def run(self, candidates: Sequence[str], domain: str, aggregator: ResultAggregator,
            signature: Optional[NoiseSignature] = None, include_wildcard: bool = False,
            progress: Optional[ProgressIndicator] = None) -> Dict[str, int]:
        """Resolve every candidate and feed survivors to the aggregator.

        Blocks until every candidate has reached a terminal outcome.

        Args:
            candidates: Candidate labels to probe under ``domain``
            domain: Root domain
            aggregator: Collector for resolved, non-noise subdomains
            signature: Wildcard noise signature, None when the zone has no wildcard
            include_wildcard: Keep results that match the wildcard signature
            progress: Optional progress indicator advanced once per candidate

        Returns:
            Dictionary counting candidates per outcome
        """
        counts = dict.fromkeys(OUTCOMES, 0)
        if not candidates:
            return counts

        with concurrent.futures.ThreadPoolExecutor(max_workers=self.concurrency) as executor:
            future_to_name = {
                executor.submit(self._probe, build_name(candidate, domain),
                                aggregator, signature, include_wildcard): candidate
                for candidate in candidates
            }

            for future in concurrent.futures.as_completed(future_to_name):
                counts[future.result()] += 1
                if progress:
                    progress.update(1)

        self.logger.debug(f"Resolution finished for {domain}: {counts}")
        return counts

    def _probe(self, name: str, aggregator: ResultAggregator,
               signature: Optional[NoiseSignature], include_wildcard: bool) -> str:
        """Resolve one name and classify the outcome."""
        addresses = self._lookup(name)
        if not addresses:
            return FAILED

        if signature and not include_wildcard and signature.matches(addresses):
            self.logger.debug(f"Discarding {name} as wildcard noise")
            return WILDCARD

        if aggregator.submit(name, addresses):
            return FOUND
        return DUPLICATE

    def _lookup(self, name: str) -> Set[str]:
        """Resolve a name, absorbing failures as an empty result.

        Only NetworkError is retried; a name that does not exist returns an
        empty set straight away and is never re-queried.
        """
        attempt = 0
        while True:
            try:
                return self.resolver.resolve(name, timeout=self.timeout)
            except NetworkError as e:
                attempt += 1
                if attempt > self.retries:
                    self.logger.debug(f"Lookup failed for {name}: {e}")
                    return set()

                wait_time = self.backoff_factor * (2 ** (attempt - 1))
                jitter = random.uniform(0, 0.1 * wait_time)
                total_wait = wait_time + jitter

                self.logger.debug(f"Retry {attempt}/{self.retries} for {name} in {total_wait:.2f}s")
                time.sleep(total_wait)
            except Exception as e:
                self.logger.debug(f"Unexpected error resolving {name}: {e}")
                return set()
