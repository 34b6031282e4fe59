"""Custom exceptions for SUBPROBE.

This module defines the exception hierarchy used throughout the SUBPROBE application.
All exceptions inherit from the base SubprobeError class so that the command-line
layer can tell fatal startup problems apart from anything else.
"""


class SubprobeError(Exception):
    """Base exception for all SUBPROBE errors."""
    pass


class ValidationError(SubprobeError):
    """Raised when input validation fails.
    
    This exception is raised when user input fails validation, such as an invalid
    root domain, a non-positive concurrency limit or a negative timeout.
    """
    pass


class NetworkError(SubprobeError):
    """Raised when a DNS lookup fails.
    
    Timeouts, missing nameservers and transient resolver failures all surface as
    NetworkError. During enumeration it is absorbed per lookup and only counted.
    """
    pass


class ConfigurationError(SubprobeError):
    """Raised when resolver configuration is invalid.
    
    For example when a custom nameserver is not a valid IP address.
    """
    pass


class WordlistError(SubprobeError):
    """Raised when the candidate wordlist cannot be read."""
    pass


class OutputError(SubprobeError):
    """Raised when the output file cannot be written."""
    pass
