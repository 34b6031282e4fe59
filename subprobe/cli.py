"""Command-line interface for SUBPROBE."""

import argparse
import logging
import sys
from typing import List, Optional

from subprobe import __version__
from subprobe.core.exceptions import (
    ValidationError, ConfigurationError, WordlistError, OutputError
)
from subprobe.core.interfaces import Result
from subprobe.utils.error_handler import ErrorHandler
from subprobe.utils.dns_utils import DNSUtils, normalize_domain
from subprobe.utils.formatters import (
    ConsoleReporter, FormatterFactory, ensure_writable, write_output
)
from subprobe.utils.wordlist import load_wordlist


class CLI:
    """Command-line interface for SUBPROBE."""

    def __init__(self, error_handler: Optional[ErrorHandler] = None):
        """Initialize the CLI.

        Args:
            error_handler: Error handler used for fatal startup errors
        """
        self.parser = self._create_parser()
        self.error_handler = error_handler
        self.logger = logging.getLogger('subprobe.cli')

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser with all options.

        Returns:
            Configured argument parser
        """
        parser = argparse.ArgumentParser(
            prog='subprobe',
            description='SUBPROBE - concurrent DNS subdomain prober',
            epilog='Example: subprobe -d example.com -w words.txt -o found.txt'
        )

        # Required arguments
        parser.add_argument(
            '-d', '--domain',
            required=True,
            help='Root domain to probe subdomains of'
        )

        # Input options
        parser.add_argument(
            '-w', '--wordlist',
            metavar='FILE',
            help='Wordlist of candidate labels, one per line (default: built-in list)'
        )

        # Concurrency options
        parser.add_argument(
            '-c', '--concurrency',
            type=int,
            default=100,
            help='Maximum number of lookups in flight (default: 100)'
        )

        parser.add_argument(
            '-t', '--timeout',
            type=float,
            default=5,
            help='Per-lookup timeout in seconds (default: 5)'
        )

        parser.add_argument(
            '--retries',
            type=int,
            default=0,
            help='Retry lookups that time out or error this many times (default: 0)'
        )

        parser.add_argument(
            '--resolvers',
            help='Comma-separated list of nameserver IPs to query (default: system resolvers)',
            default=None
        )

        # Filtering options
        parser.add_argument(
            '--include-wildcard',
            action='store_true',
            help='Keep results that resolve to the wildcard address'
        )

        # Output options
        parser.add_argument(
            '-o', '--output',
            metavar='FILE',
            help='Write discovered subdomains to a file'
        )

        parser.add_argument(
            '-f', '--format',
            choices=FormatterFactory.FORMATS,
            default='text',
            help='Output file format (default: text)'
        )

        # Verbosity options
        parser.add_argument(
            '-s', '--silent',
            action='store_true',
            help='Only print discovered subdomain names'
        )

        parser.add_argument(
            '--progress',
            action='store_true',
            help='Show a progress bar while resolving'
        )

        parser.add_argument(
            '-v', '--verbose',
            action='store_true',
            help='Enable verbose output'
        )

        # Version
        parser.add_argument(
            '--version',
            action='version',
            version=f'%(prog)s {__version__}'
        )

        return parser

    def parse_arguments(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments.

        Args:
            args: Command-line arguments (None for sys.argv)

        Returns:
            Parsed arguments namespace
        """
        parsed_args = self.parser.parse_args(args)

        parsed_args.domain = normalize_domain(parsed_args.domain)

        # Process resolvers
        if parsed_args.resolvers:
            parsed_args.resolvers = [r.strip() for r in parsed_args.resolvers.split(',') if r.strip()]

        return parsed_args

    def validate_input(self, args: argparse.Namespace) -> bool:
        """Validate user input.

        Invalid input is reported through the error handler, which terminates
        the process.

        Args:
            args: Parsed arguments namespace

        Returns:
            True if input is valid
        """
        try:
            DNSUtils.validate_domain(args.domain)
        except ValidationError as e:
            self.error_handler.handle_error('input', str(e), e)
            return False

        if args.concurrency < 1:
            self.error_handler.handle_error(
                'input', "Concurrency must be at least 1")
            return False

        if args.timeout <= 0:
            self.error_handler.handle_error(
                'input', "Timeout must be greater than 0")
            return False

        if args.retries < 0:
            self.error_handler.handle_error(
                'input', "Retries cannot be negative")
            return False

        if args.silent and args.verbose:
            self.error_handler.handle_error(
                'input', "Cannot specify both --silent and --verbose")
            return False

        return True

    def run(self, args: argparse.Namespace) -> Result:
        """Load inputs, enumerate and write results.

        Args:
            args: Validated arguments namespace

        Returns:
            Enumeration result
        """
        from subprobe.core.enumeration_manager import EnumerationManager

        try:
            candidates = load_wordlist(args.wordlist)
            if args.output:
                ensure_writable(args.output)
        except (WordlistError, OutputError) as e:
            self.error_handler.handle_error('io', str(e), e)

        try:
            resolver = DNSUtils(timeout=args.timeout, nameservers=args.resolvers)
        except ConfigurationError as e:
            self.error_handler.handle_error('input', str(e), e)

        reporter = ConsoleReporter(silent=args.silent)
        manager = EnumerationManager(
            domain=args.domain,
            resolver=resolver,
            concurrency=args.concurrency,
            timeout=args.timeout,
            include_wildcard=args.include_wildcard,
            retries=args.retries,
            reporter=reporter,
            show_progress=(args.progress or args.verbose) and not args.silent
        )

        result = manager.enumerate(candidates, wordlist=args.wordlist)

        if args.output:
            try:
                write_output(result, args.output, args.format)
            except OutputError as e:
                self.error_handler.handle_error('io', str(e), e)

        reporter.on_complete(result, args.output)
        return result


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = CLI()
    args = cli.parse_arguments(argv)

    # Configure error handler based on verbosity
    error_handler = ErrorHandler(verbose=args.verbose)
    cli.error_handler = error_handler

    try:
        if cli.validate_input(args):
            cli.run(args)
        return 0
    except Exception as e:
        error_handler.handle_error('unexpected', "An unexpected error occurred", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
