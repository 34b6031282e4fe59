"""Enumeration manager for orchestrating one subdomain enumeration run."""

import logging
import time
from typing import Optional, Sequence

from subprobe.core.aggregator import ResultAggregator
from subprobe.core.interfaces import Resolver, Reporter, Result
from subprobe.core.scheduler import WorkScheduler, FOUND, DUPLICATE, WILDCARD, FAILED
from subprobe.core import wildcard
from subprobe.utils.progress import progress_bar


class EnumerationManager:
    """Runs wildcard detection, bounded resolution and aggregation for a domain."""

    def __init__(self, domain: str, resolver: Resolver, concurrency: int = 100,
                 timeout: float = 5, include_wildcard: bool = False, retries: int = 0,
                 reporter: Optional[Reporter] = None, show_progress: bool = False):
        """Initialize the enumeration manager.

        Args:
            domain: Root domain to enumerate
            resolver: Resolver capability shared by all lookups
            concurrency: Maximum number of lookups in flight
            timeout: Per-lookup timeout in seconds
            include_wildcard: Keep results that match the wildcard signature
            retries: Extra attempts for lookups that time out or error
            reporter: Optional receiver of start, wildcard and discovery events
            show_progress: Display a progress bar while resolving
        """
        self.domain = domain
        self.resolver = resolver
        self.concurrency = concurrency
        self.timeout = timeout
        self.include_wildcard = include_wildcard
        self.reporter = reporter
        self.show_progress = show_progress
        self.scheduler = WorkScheduler(resolver, concurrency=concurrency,
                                       timeout=timeout, retries=retries)
        self.logger = logging.getLogger('subprobe.enumeration_manager')

    def detect_wildcard(self) -> Optional[wildcard.NoiseSignature]:
        """Probe the root domain once for a wildcard record."""
        probe_timeout = min(wildcard.WILDCARD_TIMEOUT, self.timeout)
        signature = wildcard.detect(self.resolver, self.domain, timeout=probe_timeout)
        if signature and self.reporter:
            self.reporter.on_wildcard(signature.sorted_addresses())
        return signature

    def enumerate(self, candidates: Sequence[str], wordlist: Optional[str] = None) -> Result:
        """Enumerate subdomains of the root domain.

        Args:
            candidates: Candidate labels to probe
            wordlist: Wordlist path, only used for reporting

        Returns:
            Result holding discovered subdomains in discovery order
        """
        if self.reporter:
            self.reporter.on_start(self.domain, len(candidates), self.concurrency, wordlist)

        start_time = time.monotonic()
        signature = self.detect_wildcard()

        aggregator = ResultAggregator(
            self.domain,
            on_new=self.reporter.on_discovery if self.reporter else None
        )

        self.logger.info(f"Starting enumeration of {self.domain} with {len(candidates)} candidates")

        with progress_bar(total=len(candidates),
                          desc="Resolving",
                          disable=not self.show_progress) as progress:
            counts = self.scheduler.run(
                candidates,
                self.domain,
                aggregator,
                signature=signature,
                include_wildcard=self.include_wildcard,
                progress=progress
            )

        result = Result()
        for subdomain in aggregator.snapshot():
            result.subdomains[subdomain.name] = subdomain

        result.stats['total_candidates'] = len(candidates)
        result.stats['total_subdomains'] = len(result.subdomains)
        result.stats['wildcard_filtered'] = counts[WILDCARD]
        result.stats['duplicates'] = counts[DUPLICATE]
        result.stats['failed'] = counts[FAILED]
        result.stats['wildcard_addresses'] = signature.sorted_addresses() if signature else []
        result.stats['elapsed'] = time.monotonic() - start_time

        self.logger.info(f"Enumeration of {self.domain} discovered {counts[FOUND]} subdomains")
        return result
