"""Output formatters and console reporting for SUBPROBE."""

import json
import csv
import io
import os
import sys
from typing import List, Optional, TextIO

from subprobe.core.exceptions import OutputError
from subprobe.core.interfaces import Result, Subdomain, OutputFormatter, Reporter
from subprobe.utils.progress import write_line

BANNER = r"""
   _____       __                      __
  / ___/__  __/ /_  ____  _________  / /_  ___
  \__ \/ / / / __ \/ __ \/ ___/ __ \/ __ \/ _ \
 ___/ / /_/ / /_/ / /_/ / /  / /_/ / /_/ /  __/
/____/\__,_/_.___/ .___/_/   \____/_.___/\___/
                /_/     DNS subdomain prober
"""


class TextFormatter(OutputFormatter):
    """Format results as newline-delimited names in discovery order."""

    def format(self, result: Result) -> str:
        """Format the result as plain text.

        Args:
            result: The enumeration result to format

        Returns:
            One full domain name per line, no header
        """
        return "".join(f"{name}\n" for name in result.subdomains)


class JSONFormatter(OutputFormatter):
    """Format results as JSON."""

    def format(self, result: Result) -> str:
        """Format the result as JSON.

        Args:
            result: The enumeration result to format

        Returns:
            Formatted JSON output
        """
        output = {
            'subdomains': [
                {
                    'name': subdomain.name,
                    'domain': subdomain.domain,
                    'ip_addresses': subdomain.ip_addresses
                }
                for subdomain in result.subdomains.values()
            ],
            'stats': result.stats
        }

        return json.dumps(output, indent=2)


class CSVFormatter(OutputFormatter):
    """Format results as CSV."""

    def format(self, result: Result) -> str:
        """Format the result as CSV.

        Args:
            result: The enumeration result to format

        Returns:
            Formatted CSV output with a header row
        """
        output = io.StringIO()
        writer = csv.writer(output)

        writer.writerow(['Subdomain', 'IP Addresses'])

        for subdomain in result.subdomains.values():
            writer.writerow([subdomain.name, ', '.join(subdomain.ip_addresses)])

        return output.getvalue()


class FormatterFactory:
    """Factory for creating output formatters."""

    FORMATS = ('text', 'json', 'csv')

    @staticmethod
    def create_formatter(format_type: str) -> OutputFormatter:
        """Create an output formatter based on the format type.

        Args:
            format_type: Type of formatter (text, json, csv)

        Returns:
            OutputFormatter instance

        Raises:
            ValueError: If format type is invalid
        """
        if format_type == 'text':
            return TextFormatter()
        elif format_type == 'json':
            return JSONFormatter()
        elif format_type == 'csv':
            return CSVFormatter()
        else:
            raise ValueError(f"Invalid format type: {format_type}")


def ensure_writable(output_file: str) -> None:
    """Check that ``output_file`` can be written without truncating it.

    A file created by the check is removed again, so an aborted run leaves
    nothing behind.

    Raises:
        OutputError: If the file cannot be opened for writing
    """
    existed = os.path.exists(output_file)
    try:
        with open(output_file, 'a', encoding='utf-8'):
            pass
        if not existed:
            os.remove(output_file)
    except OSError as e:
        raise OutputError(f"Cannot write to {output_file}: {e.strerror or e}") from e


def write_output(result: Result, output_file: str, format_type: str = 'text') -> None:
    """Write formatted results to a file.

    Args:
        result: Enumeration result
        output_file: Output file path
        format_type: Output format (text, json, csv)

    Raises:
        OutputError: If the file cannot be written
    """
    formatter = FormatterFactory.create_formatter(format_type)
    formatted_output = formatter.format(result)

    try:
        with open(output_file, 'w', encoding='utf-8', newline='') as f:
            f.write(formatted_output)
    except OSError as e:
        raise OutputError(f"Cannot write to {output_file}: {e.strerror or e}") from e


def read_names(output_file: str) -> List[str]:
    """Read back a text-format output file."""
    with open(output_file, 'r', encoding='utf-8') as f:
        return [line.strip() for line in f if line.strip()]


class ConsoleReporter(Reporter):
    """Print enumeration progress and results to the console.

    In silent mode only bare discovered names are printed, one per line.
    """

    def __init__(self, silent: bool = False, stream: Optional[TextIO] = None):
        self.silent = silent
        self.stream = stream

    def _print(self, line: str = "") -> None:
        write_line(line, file=self.stream or sys.stdout)

    def on_start(self, domain: str, candidates: int, concurrency: int,
                 wordlist: Optional[str] = None) -> None:
        if self.silent:
            return
        self._print(BANNER)
        self._print(f"[*] Target: {domain}")
        self._print(f"[*] Threads: {concurrency}")
        self._print(f"[*] Wordlist: {wordlist or 'built-in'}")
        self._print(f"[*] Loaded {candidates} words. Starting enumeration...")

    def on_wildcard(self, addresses: List[str]) -> None:
        if self.silent:
            return
        self._print(f"[!] Wildcard detected! Filtering results pointing to: {', '.join(addresses)}")

    def on_discovery(self, subdomain: Subdomain) -> None:
        if self.silent:
            self._print(subdomain.name)
        else:
            self._print(f"[+] {subdomain.name}  => {', '.join(subdomain.ip_addresses)}")

    def on_complete(self, result: Result, output_file: Optional[str] = None) -> None:
        if self.silent:
            return
        stats = result.stats
        self._print()
        self._print("Summary:")
        self._print(f"Candidates probed: {stats['total_candidates']}")
        self._print(f"Total subdomains discovered: {stats['total_subdomains']}")
        if stats['wildcard_addresses']:
            self._print(f"Filtered as wildcard noise: {stats['wildcard_filtered']}")
        self._print(f"Elapsed: {stats['elapsed']:.2f}s")
        if output_file:
            self._print(f"\n[✓] Saved {stats['total_subdomains']} results to {output_file}")
