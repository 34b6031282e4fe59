"""Error handling utilities for SUBPROBE."""

import logging
import sys
from typing import Optional

# Process exit status for startup-level failures
EXIT_FAILURE = 1


class ErrorHandler:
    """Centralized error handling for SUBPROBE.

    Fatal errors print a short message to stderr and terminate the process with
    a non-zero status. They are only raised before enumeration starts; lookup
    failures during enumeration never reach this class.
    """

    def __init__(self, verbose: bool = False):
        """Initialize the error handler.

        Args:
            verbose: Enable verbose error reporting
        """
        self.verbose = verbose
        self._setup_logging()

    def _setup_logging(self):
        """Set up logging configuration."""
        level = logging.DEBUG if self.verbose else logging.WARNING
        logging.basicConfig(
            level=level,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=[
                logging.StreamHandler(sys.stderr)
            ]
        )
        self.logger = logging.getLogger('subprobe')
        self.logger.setLevel(level)

    def handle_error(self, error_type: str, message: str, exception: Optional[Exception] = None) -> None:
        """Handle errors based on type.

        Args:
            error_type: Type of error (input, io, unexpected)
            message: Error message to display
            exception: Optional exception object
        """
        if error_type == 'input':
            self._handle_input_error(message, exception)
        elif error_type == 'io':
            self._handle_io_error(message, exception)
        else:
            self._handle_unexpected_error(message, exception)

    def _handle_input_error(self, message: str, exception: Optional[Exception] = None):
        """Handle input validation errors."""
        print(f"Input Error: {message}", file=sys.stderr)
        if self.verbose and exception:
            self.logger.debug(f"Exception details: {exception}")
        sys.exit(EXIT_FAILURE)

    def _handle_io_error(self, message: str, exception: Optional[Exception] = None):
        """Handle unreadable wordlists and unwritable output files."""
        print(f"File Error: {message}", file=sys.stderr)
        if self.verbose and exception:
            self.logger.debug(f"Exception details: {exception}")
        sys.exit(EXIT_FAILURE)

    def _handle_unexpected_error(self, message: str, exception: Optional[Exception] = None):
        """Handle unexpected errors."""
        print(f"Unexpected Error: {message}", file=sys.stderr)
        if exception:
            self.logger.error(f"Exception: {exception}", exc_info=True)
        sys.exit(EXIT_FAILURE)

