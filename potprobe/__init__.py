"""Estimate how likely an SSH service is to be a honeypot by probing it."""

__version__ = "0.1.0"