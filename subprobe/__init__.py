"""
SUBPROBE - Subdomain Prober

A command-line subdomain discovery tool that brute-forces candidate labels
against a root domain over DNS, filters wildcard noise and reports the
subdomains that actually resolve.
"""

__version__ = "1.0.0"
__author__ = "SUBPROBE Development Team"
